"""Word splitting used to turn a command string into an argument list."""

from __future__ import annotations

from collections.abc import Iterator

QUOTE = "'"


def _words(text: str, sep: str) -> Iterator[str]:
    return (word for word in text.split(sep) if word)


def count_words(text: str, sep: str) -> int:
    """Return how many non-empty runs of characters other than ``sep`` ``text`` holds."""
    return sum(1 for _ in _words(text, sep))


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return list(_words(text, sep))


def _quoted_words(text: str, sep: str) -> Iterator[str]:
    start: int | None = None
    in_quote = False
    for index, char in enumerate(text):
        if char != sep and start is None:
            start = index
        elif char == sep and not in_quote and start is not None:
            yield text[start:index].replace(QUOTE, "")
            start = None
        if char == QUOTE:
            in_quote = not in_quote
    if start is not None:
        yield text[start:].replace(QUOTE, "")


def split_quoted(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` outside single quotes, removing the quotes.

    A separator inside a pair of single quotes does not end a word, and every
    single quote is dropped from the words produced.
    """
    return list(_quoted_words(text, sep))