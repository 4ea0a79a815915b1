"""American Soundex encoding used to find similar sounding URL segments."""

from __future__ import annotations

import string

_SOUNDEX_CODES = {
    **dict.fromkeys("BFPV", "1"),
    **dict.fromkeys("CGJKQSXZ", "2"),
    **dict.fromkeys("DT", "3"),
    "L": "4",
    **dict.fromkeys("MN", "5"),
    "R": "6",
}

# Letters that never separate two identical codes
_TRANSPARENT = frozenset("HW")

_CODE_LENGTH = 4


def soundex(word: str) -> str:
    """Return the four character Soundex code for ``word``.

    Only ASCII letters take part in the encoding; every other character is
    skipped, including non-ASCII letters that uppercase to ASCII (``"ß"``). The empty string encodes to ``""`` so that it can never compare
    equal to a real code. Input with characters but no letters yields
    ``"0000"``.

    >>> soundex("Robert"), soundex("Rupert"), soundex("Ashcraft")
    ('R163', 'R163', 'A261')
    """

    if not word:
        return ""

    result = ""
    last = ""
    for char in word:
        if char not in string.ascii_letters:
            continue
        char = char.upper()
        code = _SOUNDEX_CODES.get(char, "")
        if not result:
            result = char
            last = code
            continue
        if char in _TRANSPARENT:
            continue
        if code and code != last:
            result += code
            if len(result) == _CODE_LENGTH:
                break
        last = code

    return result.ljust(_CODE_LENGTH, "0")
