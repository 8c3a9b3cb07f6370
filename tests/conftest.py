import os

import pytest

import simple_encode

SAMPLES = [
    b"",
    b"\x00",
    b"\x00\x00\x00",
    b"\xff",
    b"Hello",
    b"\x00\x00\x01\x02",
    bytes(range(256)),
]

@pytest.fixture(params=simple_encode.names())
def codec(request):
    return simple_encode.get_codec(request.param)

@pytest.fixture
def random_data():
    return [os.urandom(n) for n in range(1, 70)]
