# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Miscellaneous utility routines relating to hex and byte strings"""

from binascii import a2b_hex, b2a_hex
from typing import Union


def hex2bytes(hexstring: Union[str, bytes]) -> bytes:
    """Return bytestring for a string of hex bytes separated by whitespace

    This is useful for creating specific byte sequences for testing, using
    python's implied concatenation for strings with comments allowed.

    Examples
    --------

    ::

        hex_string = (
            "10 00 10 00"    # (0010,0010) Patient's Name
            " 50 4e 04 00"   # 'PN', length 4
            " 44 4f 45 20"   # 'DOE '
        )
        byte_string = hex2bytes(hex_string)

    Note in the example that all lines except the first must start with a
    space, alternatively the space could end the previous line.
    """
    if isinstance(hexstring, bytes):
        return a2b_hex(hexstring.replace(b" ", b""))

    return a2b_hex(bytes(hexstring.replace(" ", ""), 'ascii'))


def bytes2hex(byte_string: bytes) -> str:
    """Return `byte_string` as space separated hex pairs, e.g.
    ``'10 00 10 00'``.
    """
    s = b2a_hex(byte_string).decode()
    return " ".join(s[i:i + 2] for i in range(0, len(s), 2))
