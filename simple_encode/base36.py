# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Base36 encoding and decoding"""

from simple_encode import llog

from simple_encode.codec import PositionalCodec

charset = "0123456789abcdefghijklmnopqrstuvwxyz"

# NOTE: Leading zero bytes are not kept; decode(encode(b"\0\1")) == b"\1".
codec = PositionalCodec("base36", charset, preserve_zeros=False)

def encode(val):
    return codec.encode(val)

def decode(val):
    return codec.decode(val)
