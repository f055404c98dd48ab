"""Glob helpers for object keys.

A key is a wildcard when it contains ``*``, ``?`` or ``[``. Matching is
done on key strings only; listing objects is left to callers.
"""

from __future__ import annotations

import re

from core.constants import RECURSIVE_WILDCARD, WILDCARD_CHARACTERS


def is_wildcard(key: str) -> bool:
    """Return whether a key contains glob characters."""
    return any(character in key for character in WILDCARD_CHARACTERS)


def non_wildcard_prefix(key: str) -> str:
    """Return the literal part of a key before its first glob character.

    Args:
        key: Object key, possibly containing glob characters.

    Returns:
        The leading literal prefix, or the whole key when it has no globs.
    """
    for index, character in enumerate(key):
        if character in WILDCARD_CHARACTERS:
            return key[:index]
    return key


def wildcard_to_regex(glob: str) -> str:
    """Translate a key glob into an unanchored regular expression.

    ``**`` crosses separators, ``*`` and ``?`` stay within one segment,
    and ``[...]`` character classes are passed through.

    Args:
        glob: Key glob.

    Returns:
        Regular expression source suitable for ``re.fullmatch``.
    """
    parts: list[str] = []
    index = 0
    length = len(glob)
    while index < length:
        if glob.startswith(RECURSIVE_WILDCARD, index):
            parts.append(".*")
            index += len(RECURSIVE_WILDCARD)
            continue
        character = glob[index]
        if character == "*":
            parts.append("[^/]*")
        elif character == "?":
            parts.append("[^/]")
        elif character == "[":
            closing = glob.find("]", _class_body_start(glob, index + 1))
            if closing == -1:
                parts.append(re.escape(character))
            else:
                parts.append(_character_class(glob[index + 1 : closing]))
                index = closing
        else:
            parts.append(re.escape(character))
        index += 1
    return "".join(parts)


def matches_glob(glob: str, key: str) -> bool:
    """Return whether a key fully matches a glob."""
    return re.fullmatch(wildcard_to_regex(glob), key) is not None


def _class_body_start(glob: str, start: int) -> int:
    """Return where to look for the closing bracket of a class.

    A ']' right after '[' or '[!' is a class member, not the terminator.
    """
    if start < len(glob) and glob[start] == "!":
        start += 1
    if start < len(glob) and glob[start] == "]":
        start += 1
    return start


def _character_class(body: str) -> str:
    # "!" negation follows shell globbing.
    negated = body.startswith("!")
    if negated:
        body = body[1:]
    escaped = re.sub(r"([\\\[\]&~|])", r"\\\1", body)
    if negated:
        return "[^" + escaped + "]"
    if escaped.startswith("^"):
        escaped = "\\" + escaped
    return "[" + escaped + "]"
