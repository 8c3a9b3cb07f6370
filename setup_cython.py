# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

# Compiles the codec modules in place:
#   python setup_cython.py build_ext --inplace

from setuptools import setup
from Cython.Build import cythonize

modules = [\
    "base16",
    "base32",
    "base36",
    "base58",
    "base62",
    "base64",
    "base91",
    "codec",
    "errors"\
]

setup(
    name = 'simple-encode',
    ext_modules = cythonize(\
        ["simple_encode/" + x + ".py" for x in modules],
        language_level = 3)
)
