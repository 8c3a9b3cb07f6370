# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Base32 encoding and decoding (RFC 4648 alphabet, '=' padded)"""

from simple_encode import llog

from simple_encode.codec import BitPackingCodec

charset = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

codec = BitPackingCodec("base32", charset, 5, 8)

def encode(val):
    return codec.encode(val)

def decode(val):
    return codec.decode(val)
