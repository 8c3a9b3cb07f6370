# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Base58 encoding and decoding"""

from simple_encode import llog

from simple_encode.codec import PositionalCodec

B58_DIGITS = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'
charset = B58_DIGITS

codec = PositionalCodec("base58", charset, preserve_zeros=True)

def encode(b):
    """Encode bytes to a base58-encoded string"""
    return codec.encode(b)

def decode(s):
    """Decode a base58-encoding string, returning bytes"""
    return codec.decode(s)
