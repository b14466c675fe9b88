#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Category tree model.

A category tree is a plain nested mapping from label to sub-tree; an empty
mapping is a leaf. It is rebuilt from the category paths of existing flags
every session and never written back.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeAlias

from flagforge.config.defaults import CATEGORY_SEPARATOR
from flagforge.models import PathItem

CategoryTree: TypeAlias = dict[str, "CategoryTree"]


def build_category_tree(categories: Iterable[str]) -> CategoryTree:
    """Fold dot-separated category paths into a tree."""
    tree: CategoryTree = {}
    for category in categories:
        node = tree
        for label in split_category(category):
            node = node.setdefault(label, {})
    return tree


def split_category(category: str) -> list[str]:
    """Split a category string into its non-empty labels."""
    return [label.strip() for label in category.split(CATEGORY_SEPARATOR) if label.strip()]


def join_path(path: Sequence[PathItem]) -> str:
    """Join a navigation path into a category string."""
    return CATEGORY_SEPARATOR.join(item.name for item in path)


def children_at(tree: CategoryTree, path: Sequence[PathItem]) -> list[str]:
    """List the child labels of the node addressed by ``path``.

    Custom items are not part of the tree, so anything below one has no children.
    """
    node = tree
    for item in path:
        if item.is_custom or item.name not in node:
            return []
        node = node[item.name]
    return list(node)


def collect_items(tree: CategoryTree) -> set[str]:
    """Every label used anywhere in the tree."""
    items: set[str] = set()
    stack = [tree]
    while stack:
        node = stack.pop()
        for label, subtree in node.items():
            items.add(label)
            stack.append(subtree)
    return items


def render_tree(tree: CategoryTree, indent: str = "  ") -> list[str]:
    """Render the tree as indented lines, children sorted by label."""
    lines: list[str] = []

    def _walk(node: CategoryTree, depth: int) -> None:
        for label in sorted(node):
            lines.append(f"{indent * depth}{label}")
            _walk(node[label], depth + 1)

    _walk(tree, 0)
    return lines


# 🚩🧩🔚
