# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Base62 encoding and decoding"""

from simple_encode import llog

from simple_encode.codec import PositionalCodec

charset = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

codec = PositionalCodec("base62", charset, preserve_zeros=True)

def encode(val):
    return codec.encode(val)

def decode(val):
    return codec.decode(val)
