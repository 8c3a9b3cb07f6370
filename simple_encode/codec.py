# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from simple_encode import llog

import logging

from simple_encode.errors import DecodeError

log = logging.getLogger(__name__)

PAD_CHAR = '='

class Codec(object):
    "Common interface of every scheme: a fixed charset, encode and decode."

    def __init__(self, name, charset):
        super().__init__()

        assert len(set(charset)) == len(charset), charset

        self.name = name
        self.charset = charset
        self._index = {c: i for i, c in enumerate(charset)}

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, self.name)

    def index(self, char):
        "Returns the value of char; raises DecodeError if not in the charset."
        idx = self._index.get(char)
        if idx is None:
            raise DecodeError("invalid {} character".format(self.name))
        return idx

    def char(self, idx):
        assert 0 <= idx < len(self.charset),\
            "index {}, max length {}".format(idx, len(self.charset))
        return self.charset[idx]

    def encode(self, val):
        raise NotImplementedError()

    def decode(self, val):
        raise NotImplementedError()

class BitPackingCodec(Codec):
    """Packs input bits MSB first into groups of `bits` bits, one character
    per group, padding the output with '=' to a multiple of `block`
    characters.
    """

    def __init__(self, name, charset, bits, block):
        super().__init__(name, charset)

        assert len(charset) == 1 << bits, len(charset)

        self.bits = bits
        self.block = block

    def encode(self, val):
        assert type(val) in (bytes, bytearray, memoryview), type(val)

        bits = self.bits
        result = []

        r = 0
        rbits = 0

        for char in val:
            r = (r << 8) | char
            rbits += 8

            while rbits >= bits:
                rbits -= bits
                idx = r >> rbits
                r &= (1 << rbits) - 1

                result.append(self.char(idx))

        if rbits:
            result.append(self.char(r << (bits - rbits)))

        pad = -len(result) % self.block
        result.append(PAD_CHAR * pad)

        return "".join(result)

    def decode(self, val):
        assert type(val) is str, type(val)

        bits = self.bits
        result = bytearray()

        a = 0
        abits = 0

        for char in val:
            if char == PAD_CHAR:
                break

            a = (a << bits) | self.index(char)
            abits += bits

            if abits >= 8:
                abits -= 8
                result.append(a >> abits)
                a &= (1 << abits) - 1

        # Any leftover (< 8) bits are dropped, not validated.
        if abits and log.isEnabledFor(logging.DEBUG):
            log.debug("Discarding {} trailing {} bits.".format(\
                abits, self.name))

        return bytes(result)

class PositionalCodec(Codec):
    """Treats the whole input as one big-endian unsigned integer written in
    radix len(charset).

    With preserve_zeros each leading zero byte is carried as a leading
    charset[0] character (and back again when decoding). Without it an all
    zero (or empty) input encodes as a single charset[0] and leading zero
    bytes are not recovered by decode.
    """

    def __init__(self, name, charset, preserve_zeros):
        super().__init__(name, charset)

        self.radix = len(charset)
        self.preserve_zeros = preserve_zeros

    def encode(self, val):
        assert type(val) in (bytes, bytearray, memoryview), type(val)

        n = int.from_bytes(val, "big")

        res = []
        while n > 0:
            n, r = divmod(n, self.radix)
            res.append(self.char(r))

        if not self.preserve_zeros:
            if not res:
                res.append(self.char(0))
            return "".join(reversed(res))

        pad = 0
        for c in val:
            if c:
                break
            pad += 1

        return self.charset[0] * pad + "".join(reversed(res))

    def decode(self, val):
        assert type(val) is str, type(val)

        n = 0
        for c in val:
            n = n * self.radix + self.index(c)

        res = n.to_bytes((n.bit_length() + 7) >> 3, "big")

        if not self.preserve_zeros:
            return res

        zero = self.charset[0]
        pad = len(val) - len(val.lstrip(zero))

        if log.isEnabledFor(logging.DEBUG):
            log.debug("{} decode restored {} leading zero bytes.".format(\
                self.name, pad))

        return b'\x00' * pad + res
