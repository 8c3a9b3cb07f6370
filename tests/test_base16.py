import binascii

import pytest

from simple_encode import base16, DecodeError


def test_hello():
    assert base16.encode(b"Hello") == "48656c6c6f"
    assert base16.decode("48656c6c6f") == b"Hello"


def test_zero_padded_lower_case():
    assert base16.encode(b"\x00\x0a\xff") == "000aff"


def test_decode_single_byte():
    assert base16.decode("ab") == bytes([0xAB])


def test_decode_upper_case():
    assert base16.decode("DEADBEEF") == b"\xde\xad\xbe\xef"


def test_odd_length():
    with pytest.raises(DecodeError) as exc_info:
        base16.decode("abc")
    assert str(exc_info.value) == "hex string has an odd length"


@pytest.mark.parametrize("bad", ["0g", "+a", " a", "a_", "0x"])
def test_non_hex_chunk(bad):
    with pytest.raises(DecodeError):
        base16.decode(bad)


def test_matches_binascii(random_data):
    for data in random_data:
        enc = base16.encode(data)
        assert enc == binascii.hexlify(data).decode()
        assert len(base16.decode(enc)) == len(enc) // 2


def test_bytearray_input():
    assert base16.encode(bytearray(b"\x01\x02")) == "0102"
