"""Parser for the bracketed category data format.

A category opens with ``[name]`` and closes with ``[/name]``; inside it,
``key: value`` lines are collected and nested categories become children.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from dungeonrl.config import DELIMITER

_WHITESPACE = " \t\n\r\v\f"


@dataclass
class ParserNode:
    """One category with its key/value data and nested categories."""

    category: str
    data: dict[str, str] = field(default_factory=dict)
    children: list[ParserNode] = field(default_factory=list)


def parse_data(text: str) -> list[ParserNode]:
    """Parse text into its top-level categories, in order of appearance."""
    lines = iter(text.split("\n"))
    result: list[ParserNode] = []
    for raw in lines:
        line = raw.lstrip(_WHITESPACE)
        if not _is_start_of_category(line):
            continue
        category = _get_category(line)
        if category is not None:
            result.append(_parse_category(category, lines))
    return result


def _is_start_of_category(line: str) -> bool:
    return line.startswith("[") and not line.startswith("[/")


def _is_end_of_category(line: str) -> bool:
    return line.startswith("[/")


def _get_category(line: str) -> str | None:
    if not line.startswith("["):
        return None
    start = next((i for i, c in enumerate(line) if c not in "[ /"), None)
    if start is None:
        return None
    end = line.find("]")
    if end == -1 or start >= end:
        return None
    return line[start:end]


def _split_at_delimiter(line: str) -> tuple[str, str]:
    key, found, value = line.partition(DELIMITER)
    return (key, value) if found else (line, "")


def _remove_spaces(text: str) -> str:
    return "".join(c for c in text if c not in _WHITESPACE)


def _parse_category(category: str, lines: Iterator[str]) -> ParserNode:
    node = ParserNode(category)
    for raw in lines:
        line = raw.lstrip(_WHITESPACE)
        if not line:
            continue
        if _is_start_of_category(line):
            child = _get_category(line)
            if child is not None:
                node.children.append(_parse_category(child, lines))
                continue
        elif _is_end_of_category(line):
            if _get_category(line) == category:
                return node
        key, value = _split_at_delimiter(line)
        if key and value:
            node.data.setdefault(_remove_spaces(key), _remove_spaces(value))
    return node