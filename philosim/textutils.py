"""String helpers: splitting, trimming, searching and slicing."""

from __future__ import annotations

from itertools import groupby

__all__ = [
    "split",
    "split_any",
    "trim",
    "prefix_before",
    "prefix_before_any",
    "find_any",
    "rfind_any",
    "find_substring",
    "substring",
]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words.

    An empty ``sep`` never matches, so a non-empty ``text`` comes back whole.
    """
    if len(sep) > 1:
        raise ValueError("separator must be a single character")
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def split_any(text: str, seps: str) -> list[str]:
    """Split ``text`` on any character of ``seps``, dropping empty words."""
    separators = set(seps)
    return [
        "".join(chars)
        for is_sep, chars in groupby(text, key=lambda ch: ch in separators)
        if not is_sep
    ]


def trim(text: str, chars: str) -> str:
    """Remove every leading and trailing character that appears in ``chars``."""
    return text.strip(chars)


def prefix_before(text: str, ch: str) -> str | None:
    """Return the part of ``text`` before the first ``ch``.

    Returns None when ``ch`` does not occur or the prefix would be empty.
    """
    index = text.find(ch) if ch else -1
    if index <= 0:
        return None
    return text[:index]


def prefix_before_any(text: str, chars: str) -> str | None:
    """Return ``text`` up to the first character of ``chars`` after position 0.

    A character of ``chars`` at position 0 is not treated as a break. When no
    break is found the whole of ``text`` is returned; an empty ``text`` gives
    None.
    """
    if not text:
        return None
    stops = set(chars)
    end = next(
        (index for index, ch in enumerate(text) if index > 0 and ch in stops),
        len(text),
    )
    return text[:end]


def find_any(text: str, chars: str) -> int | None:
    """Return the index of the first character of ``text`` found in ``chars``."""
    targets = set(chars)
    return next((index for index, ch in enumerate(text) if ch in targets), None)


def rfind_any(text: str, chars: str) -> int | None:
    """Return the index of the last character of ``text`` found in ``chars``."""
    targets = set(chars)
    return next(
        (index for index in reversed(range(len(text))) if text[index] in targets),
        None,
    )


def find_substring(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    An empty ``needle`` matches at index 0. Returns None when there is no match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A ``start`` past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]