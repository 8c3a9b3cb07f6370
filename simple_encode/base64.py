# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Base64 encoding and decoding (standard '+/' alphabet, '=' padded)"""

from simple_encode import llog

from simple_encode.codec import BitPackingCodec

charset = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

codec = BitPackingCodec("base64", charset, 6, 4)

def encode(val):
    return codec.encode(val)

def decode(val):
    return codec.decode(val)
