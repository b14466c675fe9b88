#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flagforge configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from flagforge.config.runtime import FlagForgeRuntimeConfig

__all__ = [
    "FlagForgeRuntimeConfig",
]

# 🚩🧩🔚
