import pytest

from simple_encode import base91, DecodeError

from conftest import SAMPLES


def test_vectors():
    assert base91.encode(b"test") == "fPNKd"
    assert base91.decode("fPNKd") == b"test"
    assert base91.encode(b"Hello") == ">OwJh>A"


def test_single_zero_byte():
    assert base91.encode(b"\x00") == "AA"
    assert base91.decode("AA") == b"\x00"


def test_empty():
    assert base91.encode(b"") == ""
    assert base91.decode("") == b""


def test_round_trip(random_data):
    for data in random_data + SAMPLES:
        assert base91.decode(base91.encode(data)) == data


def test_denser_than_base64(random_data):
    data = b"".join(random_data)
    assert len(base91.encode(data)) < len(data) * 4 / 3


def test_alphabet_closure(random_data):
    assert len(base91.charset) == 91
    for data in random_data:
        assert set(base91.encode(data)) <= set(base91.charset)


@pytest.mark.parametrize("bad", [" ", "'", "-", "\\"])
def test_rejects_excluded_characters(bad):
    with pytest.raises(DecodeError) as exc_info:
        base91.decode("fP" + bad)
    assert str(exc_info.value) == "invalid base91 character"
