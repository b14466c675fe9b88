#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Core records shared by the provisioning engine."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from attrs import define, field

from flagforge.config.defaults import CUSTOM_SUFFIX


class FlagType(str, Enum):
    """How a feature flag is backed in the org.

    The value is the literal written into the flag record's ``Type__c`` field.
    """

    CUSTOM_SETTING = "Custom Setting"
    CUSTOM_PERMISSION = "Custom Permission"


@define(frozen=True)
class FlagSpec:
    """A fully gathered feature flag, ready for generation."""

    label: str
    name: str
    category: str
    type: FlagType


@define(frozen=True)
class PathItem:
    """One segment of the category path being navigated."""

    name: str
    is_custom: bool = False  # Entered during this session, not yet in the tree


@define
class SettingsObject:
    """A custom settings object holding flag checkbox fields."""

    name: str  # Without the __c suffix, e.g. "Feature2"
    field_count: int = 0
    created: bool = False  # Created remotely during this run

    @property
    def api_name(self) -> str:
        return f"{self.name}{CUSTOM_SUFFIX}"


@define
class PermissionSetRecord:
    """An existing permission set found in a package."""

    label: str
    package_name: str
    content: str
    path: Path


@define(frozen=True)
class MetadataFile:
    """A generated metadata document and where it belongs on disk."""

    content: str
    dir_path: Path
    file_path: Path


@define(frozen=True)
class FeatureFlagArtifact:
    """An existing feature flag record parsed from the project tree."""

    name: str
    label: str
    category: str
    path: Path
    setting: str | None = None
    type: str | None = None


@define(frozen=True)
class PackageDirectory:
    """A package directory entry from the project file."""

    name: str
    path: str
    full_path: Path
    dependencies: tuple[str, ...] = field(factory=tuple)
    is_default: bool = False


# 🚩🧩🔚
