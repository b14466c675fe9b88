#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the flagforge CLI."""

from __future__ import annotations

from flagforge.commands.categories import categories_command
from flagforge.commands.create import create_command

__all__ = [
    "categories_command",
    "create_command",
]

# 🚩🧩🔚
