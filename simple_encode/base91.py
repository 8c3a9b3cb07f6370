# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""basE91 encoding and decoding.

Each pair of output characters carries 13 or 14 bits of input; 13 when the
low 13 bits of the buffer are greater than 88 (so the pair value can never
reach 91 * 91), 14 otherwise. Bits are buffered low-bits-first, unlike the
MSB-first packing of base32/base64.
"""

from simple_encode import llog

import logging

from simple_encode.codec import Codec

log = logging.getLogger(__name__)

charset = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"\
    "0123456789!#$%&()*+,./:;<=>?@[]^_`{|}~\""

class Base91Codec(Codec):
    def __init__(self):
        super().__init__("base91", charset)

        assert len(charset) == 91, len(charset)

    def encode(self, val):
        assert type(val) in (bytes, bytearray, memoryview), type(val)

        result = []

        b = 0
        n = 0

        for char in val:
            b |= char << n
            n += 8

            if n > 13:
                v = b & 8191
                if v > 88:
                    b >>= 13
                    n -= 13
                else:
                    v = b & 16383
                    b >>= 14
                    n -= 14

                result.append(self.char(v % 91))
                result.append(self.char(v // 91))

        if n:
            result.append(self.char(b % 91))
            if n > 7 or b > 90:
                result.append(self.char(b // 91))

        return "".join(result)

    def decode(self, val):
        assert type(val) is str, type(val)

        result = bytearray()

        b = 0
        n = 0
        v = -1

        for char in val:
            d = self.index(char)

            if v < 0:
                v = d
                continue

            v += d * 91
            b |= v << n
            n += 13 if (v & 8191) > 88 else 14

            while n > 7:
                result.append(b & 0xFF)
                b >>= 8
                n -= 8

            v = -1

        if v >= 0:
            # Unpaired final character.
            result.append((b | v << n) & 0xFF)

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Decoded {} characters into {} bytes."\
                .format(len(val), len(result)))

        return bytes(result)

codec = Base91Codec()

def encode(val):
    return codec.encode(val)

def decode(val):
    return codec.decode(val)
