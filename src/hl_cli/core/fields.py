"""Delimiter-based field splitting that keeps the delimiters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def iter_fields(text: str, delimiter: str) -> Iterator[str]:
    """Yield the fields of ``text`` one at a time.

    Every field but the last ends with one occurrence of the delimiter. No
    empty field is produced after a trailing delimiter.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")

    start = 0
    length = len(text)
    while start < length:
        pos = text.find(delimiter, start)
        end = length if pos == -1 else pos + len(delimiter)
        yield text[start:end]
        start = end


def split_fields(text: str, delimiter: str = " ") -> list[str]:
    """Split a string into fields, keeping each trailing delimiter.

    Args:
        text: The string to split
        delimiter: Field delimiter (non-empty)

    Returns:
        List of fields

    Examples:
        >>> split_fields("linux 131672735\\n")
        ['linux ', '131672735\\n']

        >>> split_fields("a,,b,", ",")
        ['a,', ',', 'b,']
    """
    return list(iter_fields(text, delimiter))


def join_fields(fields: Iterable[str]) -> str:
    """Concatenate fields back into the original string."""
    return "".join(fields)
