#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""API name derivation and validation.

Salesforce API names must begin with a letter, use only alphanumeric
characters and underscores, must not end with an underscore and must not
contain two consecutive underscores.
"""

from __future__ import annotations

import re

API_NAME_RULES = (
    "The API name must begin with a letter and use only alphanumeric characters and underscores. "
    "It can't include spaces, end with an underscore, or have two consecutive underscores."
)

_INVALID_API_NAME = re.compile(r"(^[^a-z].*$|^.*_$|^.*__.*$|[^a-z0-9_])", re.IGNORECASE)
_ILLEGAL_CHARACTERS = re.compile(r"[^A-Za-z0-9_]+")
_UNDERSCORE_RUNS = re.compile(r"_{2,}")


def derive_api_name(label: str) -> str:
    """Turn a free-text label into a default API name.

    Never fails: the result always passes ``validate_api_name``.

    Examples:
        >>> derive_api_name("My Flag")
        'My_Flag'
        >>> derive_api_name("42 answers")
        'X42_answers'
    """
    name = _ILLEGAL_CHARACTERS.sub("_", label)
    name = _UNDERSCORE_RUNS.sub("_", name).strip("_")
    if not name[:1].isalpha():
        name = f"X{name}"
    return name


def validate_api_name(name: str) -> bool:
    """Return True when ``name`` is a syntactically valid API name."""
    if not name:
        return False
    return _INVALID_API_NAME.search(name) is None


def api_name_error(name: str) -> str | None:
    """Prompt validator: the rejection message, or None when ``name`` is valid."""
    if validate_api_name(name):
        return None
    return API_NAME_RULES


# 🚩🧩🔚
