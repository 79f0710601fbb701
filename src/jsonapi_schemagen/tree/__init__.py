"""Schema tree engine -- path addressing and deep-merge mutation."""

from jsonapi_schemagen.tree.merge import add_at, deep_merge, delete_at
from jsonapi_schemagen.tree.path import ROOT, PathSegment, get_at, parse_path, path_exists

__all__ = [
    "ROOT",
    "PathSegment",
    "add_at",
    "deep_merge",
    "delete_at",
    "get_at",
    "parse_path",
    "path_exists",
]
