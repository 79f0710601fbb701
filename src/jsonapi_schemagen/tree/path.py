"""Dotted path addressing for nested dict/list trees.

A path such as ``properties.data.items.[0].id`` is split on ``.`` into
segments.  A segment written ``[N]`` or as a bare digit string can index a
list; every other segment is a dict key.  The path ``.`` is the tree root.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

ROOT = "."

_INDEX_PATTERN = re.compile(r"^(?:\[(\d+)\]|(\d+))$")


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class PathSegment:
    """One step of a parsed path.

    ``key`` is always the raw token, so a digit token still addresses a dict
    key of the same name.  ``index`` is set when the token can address a list.
    """

    key: str
    index: int | None = None

    @property
    def is_index(self) -> bool:
        return self.index is not None


def parse_path(path: str) -> list[PathSegment]:
    """Split *path* into segments.  ``"."`` parses to an empty list.

    Raises ValueError on an empty segment (``"a..b"``, ``".a"``).
    """
    if path == ROOT:
        return []
    segments: list[PathSegment] = []
    for token in path.split("."):
        if not token:
            raise ValueError(f"Empty segment in path {path!r}")
        match = _INDEX_PATTERN.match(token)
        if match:
            digits = match.group(1) or match.group(2)
            segments.append(PathSegment(key=token, index=int(digits)))
        else:
            segments.append(PathSegment(key=token))
    return segments


def step(node: Any, segment: PathSegment) -> Any:
    """Resolve one segment against *node*; returns MISSING on any mismatch."""
    if isinstance(node, list):
        if segment.index is None or segment.index >= len(node):
            return MISSING
        return node[segment.index]
    if isinstance(node, dict):
        if segment.key in node:
            return node[segment.key]
        return MISSING
    return MISSING


def walk(tree: Any, segments: list[PathSegment]) -> Any:
    node = tree
    for segment in segments:
        node = step(node, segment)
        if node is MISSING:
            return MISSING
    return node


def path_exists(tree: Any, path: str) -> bool:
    """True when every segment of *path* resolves.  Never raises."""
    try:
        segments = parse_path(path)
    except ValueError:
        return False
    return walk(tree, segments) is not MISSING


def get_at(tree: Any, path: str, default: Any = None) -> Any:
    """Return the value at *path*, or *default* when it does not resolve."""
    try:
        segments = parse_path(path)
    except ValueError:
        return default
    value = walk(tree, segments)
    return default if value is MISSING else value
