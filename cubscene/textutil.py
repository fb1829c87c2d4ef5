"""Text scanning helpers used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def find(text: str, needle: str, limit: int) -> int:
    """Return the position of ``needle`` in ``text``, or -1.

    A needle longer than ``limit`` is never found.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted strings."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def strip_comments(text: str) -> str:
    """Blank out C-style comments outside quoted strings, keeping the length.

    Block comments are blanked through their closing ``*/``; line comments
    through their terminating newline.
    """
    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        while (begin := find_unquoted(text, opener, len(text))) != -1:
            rest = begin + len(opener)
            end = find(text[rest:], closer, len(text) - rest)
            stop = min(begin + end + extra, len(text))
            text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text