# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Reversible binary-to-text encodings: base16, base32, base36, base58,
base62, base64 and base91.

Each scheme is a module with encode(bytes) -> str and decode(str) -> bytes
functions, plus a `codec` object implementing the common Codec interface.

    >>> from simple_encode import base58
    >>> base58.encode(b"Hello")
    '9Ajdvzr'
"""

from simple_encode import llog

from simple_encode import base16
from simple_encode import base32
from simple_encode import base36
from simple_encode import base58
from simple_encode import base62
from simple_encode import base64
from simple_encode import base91
from simple_encode.codec import Codec, BitPackingCodec, PositionalCodec
from simple_encode.errors import DecodeError

__version__ = "0.1.0"

# Ordered by radix.
codecs = {
    "base16": base16.codec,
    "base32": base32.codec,
    "base36": base36.codec,
    "base58": base58.codec,
    "base62": base62.codec,
    "base64": base64.codec,
    "base91": base91.codec,
}

def names():
    return list(codecs)

def get_codec(name):
    "Returns the Codec registered as name; raises KeyError if there is none."
    return codecs[name]
