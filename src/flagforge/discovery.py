#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Discovery of existing feature flags and permission sets in a project tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import os
from pathlib import Path
import xml.etree.ElementTree as ET

from provide.foundation import logger

from flagforge.categories.tree import CategoryTree, build_category_tree
from flagforge.config.defaults import (
    CUSTOM_METADATA_DIR,
    CUSTOM_METADATA_SUFFIX,
    DISCOVERY_SKIP_DIRS,
    FEATURE_FLAG_TYPE,
    PERMISSION_SET_SUFFIX,
    PERMISSION_SETS_DIR,
)
from flagforge.exceptions import DiscoveryError
from flagforge.models import FeatureFlagArtifact, PackageDirectory, PermissionSetRecord

_FLAG_PREFIX = f"{FEATURE_FLAG_TYPE}."


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _parse(path: Path) -> ET.Element:
    try:
        return ET.parse(path).getroot()
    except (OSError, ET.ParseError) as e:
        raise DiscoveryError(f"Cannot read metadata file {path}: {e}") from e


def _iter_flag_files(root: Path) -> Iterator[Path]:
    for directory, subdirs, files in os.walk(root):
        subdirs[:] = sorted(d for d in subdirs if not d.startswith(".") and d not in DISCOVERY_SKIP_DIRS)
        if Path(directory).name != CUSTOM_METADATA_DIR:
            continue
        for file_name in sorted(files):
            if file_name.startswith(_FLAG_PREFIX) and file_name.endswith(CUSTOM_METADATA_SUFFIX):
                yield Path(directory) / file_name


def parse_feature_flag(path: Path) -> FeatureFlagArtifact:
    """Read one ``Feature_Flag.<name>.md-meta.xml`` record."""
    root = _parse(path)
    label = ""
    values: dict[str, str] = {}
    for element in root:
        tag = _local(element.tag)
        if tag == "label":
            label = (element.text or "").strip()
        elif tag == "values":
            field_name = value = None
            for child in element:
                if _local(child.tag) == "field":
                    field_name = (child.text or "").strip()
                elif _local(child.tag) == "value":
                    value = (child.text or "").strip()
            if field_name:
                values[field_name] = value or ""

    name = path.name[len(_FLAG_PREFIX) : -len(CUSTOM_METADATA_SUFFIX)]
    return FeatureFlagArtifact(
        name=name,
        label=label,
        category=values.get("Category__c", ""),
        path=path,
        setting=values.get("Setting__c"),
        type=values.get("Type__c"),
    )


def list_feature_flag_artifacts(root: Path) -> list[FeatureFlagArtifact]:
    """Find every feature flag record below ``root``."""
    artifacts = [parse_feature_flag(path) for path in _iter_flag_files(root)]
    logger.debug("🔍 Feature flags discovered", root=str(root), count=len(artifacts))
    return artifacts


def read_categories_from_artifacts(artifacts: Iterable[FeatureFlagArtifact]) -> CategoryTree:
    return build_category_tree(artifact.category for artifact in artifacts if artifact.category)


def read_labels_from_artifacts(artifacts: Iterable[FeatureFlagArtifact]) -> set[str]:
    return {artifact.label for artifact in artifacts if artifact.label}


def list_permission_sets_with_paths(
    package: PackageDirectory, source_subdir: str
) -> list[PermissionSetRecord]:
    """Permission sets defined in ``package``, with their labels and file contents."""
    directory = package.full_path / source_subdir / PERMISSION_SETS_DIR
    if not directory.is_dir():
        return []

    records = []
    for path in sorted(directory.glob(f"*{PERMISSION_SET_SUFFIX}")):
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DiscoveryError(f"Cannot read permission set {path}: {e}") from e
        root = _parse(path)
        label = next(
            ((element.text or "").strip() for element in root if _local(element.tag) == "label"),
            "",
        )
        records.append(
            PermissionSetRecord(
                label=label or path.name[: -len(PERMISSION_SET_SUFFIX)],
                package_name=package.name,
                content=content,
                path=path,
            )
        )
    return records


# 🚩🧩🔚
