"""Identifier and path normalisation for generated pages."""

from __future__ import annotations

import re

WORD_BOUNDARY = re.compile(r"[-_\s]+")
PASCAL_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
SEGMENT_TRIM = "-_ \t\r\n"


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_camel_case(value: str) -> str:
    """Convert ``value`` to camelCase, e.g. ``test-path`` -> ``testPath``."""
    words = WORD_BOUNDARY.split(value)
    return "".join(
        word.lower() if index == 0 else _capitalize(word)
        for index, word in enumerate(words)
    )


def to_pascal_case(value: str) -> str:
    """Convert ``value`` to PascalCase.

    Input that already looks like PascalCase is returned untouched so that
    names such as ``TestPage`` keep their inner capitals.
    """
    if PASCAL_PATTERN.match(value):
        return value
    return "".join(_capitalize(word) for word in WORD_BOUNDARY.split(value))


def _normalize_segment(segment: str) -> str:
    segment = segment.strip(SEGMENT_TRIM)
    if WORD_BOUNDARY.search(segment):
        return to_camel_case(segment)
    return segment


def normalize_page_path(page_path: str) -> str:
    """camelCase path segments that contain word separators.

    Segments without a separator, such as ``userList``, are kept as typed.
    """
    segments = (_normalize_segment(segment) for segment in page_path.split("/"))
    return "/".join(segment for segment in segments if segment)
