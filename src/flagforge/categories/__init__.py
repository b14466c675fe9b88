#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Category taxonomy: the discovered tree and the interactive navigator."""

from flagforge.categories.navigator import (
    CategoryAnswer,
    CategoryNavigator,
    NavigationState,
    add_item,
    available_choices,
    descend,
    go_back,
)
from flagforge.categories.tree import (
    CategoryTree,
    build_category_tree,
    children_at,
    collect_items,
    render_tree,
)

__all__ = [
    "CategoryAnswer",
    "CategoryNavigator",
    "CategoryTree",
    "NavigationState",
    "add_item",
    "available_choices",
    "build_category_tree",
    "children_at",
    "collect_items",
    "descend",
    "go_back",
    "render_tree",
]

# 🚩🧩🔚
