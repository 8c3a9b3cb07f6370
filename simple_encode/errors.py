# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

class DecodeError(Exception):
    """Raised when an encoded string cannot be decoded, such as on odd length
    hex or a character outside of the scheme's alphabet.
    """

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return self.msg
