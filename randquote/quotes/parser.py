from __future__ import annotations

from typing import List


def split_quotes(text: str, delim: str) -> List[str]:
    """
    Split quote file content into quote units.

    Records are read the way a line reader with a custom record
    separator reads them: each one runs up to and including the next
    `delim`, the last one may lack it. Every record then loses its
    trailing delimiter and one trailing line ending ("\\n" or "\\r\\n").
    Empty units are dropped wherever they occur, so an empty file (or
    one holding only delimiters) yields [].

    A delimiter without "\\r" also matches CRLF files: their "\\r\\n" is
    read as "\\n". A delimiter containing "\\r" is matched against the
    raw text.

    >>> split_quotes("apple\\n%\\nbanana\\n%\\n", "%\\n")
    ['apple', 'banana']
    """
    if not delim:
        raise ValueError("Quote delimiter must be a non-empty string")

    if "\r" not in delim:
        text = text.replace("\r\n", "\n")

    units: List[str] = []
    pos = 0
    size = len(text)
    while pos < size:
        end = text.find(delim, pos)
        if end < 0:
            record = text[pos:]
            pos = size
        else:
            record = text[pos:end]
            pos = end + len(delim)
        if record.endswith("\n"):
            record = record[:-1]
            if record.endswith("\r"):
                record = record[:-1]
        if record:
            units.append(record)
    return units


__all__ = ["split_quotes"]
