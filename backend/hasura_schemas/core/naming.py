from __future__ import annotations

import re
from typing import Callable, List, Tuple

_UPPER_RUN = re.compile(r"[A-Z]+")
_WORD_BOUNDARY = re.compile(r"(?=[A-Z])|[.\-\s_]")
_LETTER_DIGIT = re.compile(r"[A-Za-z][0-9]")


def _capitalize(match: re.Match) -> str:
    run = match.group(0).lower()
    return run[:1].upper() + run[1:]


def _split(value: str) -> List[str]:
    # A zero-width boundary right where a part starts is ignored, but empty
    # parts between separators are kept: "_id" -> ["", "id"].
    parts: List[str] = []
    start = 0
    for match in _WORD_BOUNDARY.finditer(value):
        if match.end() == start:
            continue
        parts.append(value[start:match.start()])
        start = match.end()
    parts.append(value[start:])
    return parts


def split_words(value: str) -> List[str]:
    """Split ``value`` on case changes and ``.``, ``-``, whitespace or ``_``.

    A run of capitals counts as one word, so ``HTTPRequest`` stays whole.
    """
    if not value:
        return []
    normalized = _UPPER_RUN.sub(_capitalize, value)
    return [part.lower() for part in _split(normalized)]


def snake(value: str) -> str:
    parts = split_words(value)
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]
    result = "_".join(parts)
    # only the first letter/digit boundary gets an underscore
    return _LETTER_DIGIT.sub(lambda m: f"{m.group(0)[0]}_{m.group(0)[1]}", result, count=1)


def camel(value: str) -> str:
    parts = split_words(value)
    if not parts:
        return ""
    head, *rest = parts
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


NamingConvention = Callable[[str], str]


def as_snake(name: str) -> str:
    # names are composed from an already snaked model name; snaking again
    # would split "user2_insert_input" into "user_2_insert_input"
    return name


# Lookup order for generated type and field names.
NAMING_CONVENTIONS: Tuple[NamingConvention, ...] = (as_snake, camel)


def candidate_names(name: str) -> List[str]:
    """Return the snake_case ``name`` under each naming convention, in lookup order, without repeats."""
    seen: List[str] = []
    for convention in NAMING_CONVENTIONS:
        converted = convention(name)
        if converted and converted not in seen:
            seen.append(converted)
    return seen
