"""Deep merge and path-addressed add/delete over schema trees.

``deep_merge`` is asymmetric: always pass the existing tree as *dest* and
the incoming fragment as *src*.  Lists absorb what is merged into them
(concatenate a list, append a dict); dicts merge key by key; anything else
is replaced by *src*.

``add_at`` and ``delete_at`` mutate the tree in place and return it.  A path
that does not resolve is logged and leaves the tree untouched, so callers
must not assume a fragment was applied.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from jsonapi_schemagen.tree.path import ROOT, parse_path, path_exists, walk

logger = logging.getLogger(__name__)


def deep_merge(dest: Any, src: Any) -> Any:
    """Merge *src* into *dest* and return the merged value.

    Subtrees of *src* are adopted by *dest* without copying.
    """
    if isinstance(dest, list) and isinstance(src, list):
        dest.extend(src)
        return dest
    if isinstance(dest, list) and isinstance(src, dict):
        dest.append(src)
        return dest
    if isinstance(dest, dict) and isinstance(src, dict):
        for key, value in src.items():
            if key in dest:
                dest[key] = deep_merge(dest[key], value)
            else:
                dest[key] = value
        return dest
    return src


def add_at(tree: Any, fragment: Any, path: str) -> Any:
    """Merge a copy of *fragment* into the value addressed by *path*."""
    fragment = copy.deepcopy(fragment)
    if path == ROOT:
        return deep_merge(tree, fragment)

    if not path_exists(tree, path):
        logger.warning("Path %r does not exist in the schema; fragment not added", path)
        return tree

    *parents, last = parse_path(path)
    parent = walk(tree, parents)
    if isinstance(parent, list):
        parent[last.index] = deep_merge(parent[last.index], fragment)
    else:
        parent[last.key] = deep_merge(parent[last.key], fragment)
    return tree


def delete_at(tree: Any, path: str) -> Any:
    """Remove the key or list element addressed by *path*."""
    if path == ROOT:
        return tree

    if not path_exists(tree, path):
        logger.warning("Path %r does not exist in the schema; nothing deleted", path)
        return tree

    *parents, last = parse_path(path)
    parent = walk(tree, parents)
    if isinstance(parent, list):
        del parent[last.index]
    else:
        del parent[last.key]
    return tree
