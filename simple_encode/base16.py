# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Base16 (hex) encoding and decoding"""

from simple_encode import llog

import logging

from simple_encode.codec import Codec
from simple_encode.errors import DecodeError

log = logging.getLogger(__name__)

charset = "0123456789abcdef"

class Base16Codec(Codec):
    def __init__(self):
        super().__init__("base16", charset)

        # Accept upper case digits too.
        for i, c in enumerate(charset.upper()):
            self._index.setdefault(c, i)

    def encode(self, val):
        assert type(val) in (bytes, bytearray, memoryview), type(val)

        buf = []

        for b in val:
            buf.append(self.char(b >> 4))
            buf.append(self.char(b & 0x0F))

        return "".join(buf)

    def decode(self, val):
        assert type(val) is str, type(val)

        if len(val) % 2:
            raise DecodeError("hex string has an odd length")

        result = bytearray()

        for i in range(0, len(val), 2):
            result.append(self.index(val[i]) << 4 | self.index(val[i + 1]))

        return bytes(result)

codec = Base16Codec()

def encode(val):
    "Encode bytes to a lower case hex string."
    return codec.encode(val)

def decode(val):
    "Decode a hex string, returning bytes."
    return codec.decode(val)
