"""
Translation of PHP date() formats into strptime() formats.

Import configurations carry the source date format in the notation of the
exporting shop ('n/d/y, g:i A'); strftime notation is accepted as well.
"""

from __future__ import annotations

import re
from functools import lru_cache

STRFTIME_DIRECTIVE = re.compile(r"%[A-Za-z]")

PHP_FORMAT_CHARACTERS = {
    "d": "%d", "j": "%d",
    "D": "%a", "l": "%A",
    "m": "%m", "n": "%m",
    "M": "%b", "F": "%B",
    "Y": "%Y", "y": "%y",
    "H": "%H", "G": "%H",
    "h": "%I", "g": "%I",
    "i": "%M", "s": "%S",
    "A": "%p", "a": "%p",
    "u": "%f",
    "e": "%Z", "T": "%Z",
    "O": "%z", "P": "%z",
    # reset markers, strptime() zeroes unspecified fields anyway
    "!": "", "|": "",
}


@lru_cache(maxsize=32)
def to_strptime_format(date_format: str) -> str:
    """'Y-m-d H:i:s' => '%Y-%m-%d %H:%M:%S', strftime formats are returned as they are"""
    if STRFTIME_DIRECTIVE.search(date_format):
        return date_format

    translated = []
    escaped = False
    for character in date_format:
        if escaped:
            translated.append("%%" if character == "%" else character)
            escaped = False
        elif character == "\\":
            escaped = True
        else:
            translated.append(PHP_FORMAT_CHARACTERS.get(character, "%%" if character == "%" else character))
    return "".join(translated)
