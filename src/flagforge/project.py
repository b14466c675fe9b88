#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Project file access: package directories and flagforge settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from provide.foundation import logger
from provide.foundation.file.formats import read_json

from flagforge.config.defaults import DEFAULT_SOURCE_SUBDIR, PLUGIN_SETTINGS_KEY, PROJECT_FILE
from flagforge.exceptions import ConfigurationError
from flagforge.models import PackageDirectory


class SfdxProject:
    """A Salesforce DX project rooted at the directory holding ``sfdx-project.json``."""

    def __init__(
        self,
        root: Path,
        packages: list[PackageDirectory],
        source_subdir: str = DEFAULT_SOURCE_SUBDIR,
        default_package: str | None = None,
    ) -> None:
        self.root = root
        self.source_subdir = source_subdir
        self._packages = {package.name: package for package in packages}
        self.default_package = default_package or self._pick_default_package(packages)

    @classmethod
    def load(cls, start: Path) -> SfdxProject:
        """Load the project containing ``start``, searching parent directories."""
        project_file = find_project_file(start)
        try:
            data = read_json(project_file)
        except Exception as e:
            raise ConfigurationError(f"Cannot read {project_file}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{project_file} does not contain a JSON object")

        root = project_file.parent
        packages = [_parse_package_directory(root, entry) for entry in data.get("packageDirectories", [])]
        if not packages:
            raise ConfigurationError(f"No packageDirectories defined in {project_file}")

        settings = (data.get("plugins") or {}).get(PLUGIN_SETTINGS_KEY) or {}
        project = cls(
            root=root,
            packages=packages,
            source_subdir=settings.get("sourceSubdir", DEFAULT_SOURCE_SUBDIR),
            default_package=settings.get("featureFlagDefaultPackage"),
        )
        if project.default_package not in project._packages:
            raise ConfigurationError(
                f"Default feature flag package '{project.default_package}' is not a package directory"
            )
        logger.debug(
            "📂 Project loaded",
            root=str(root),
            packages=project.package_names(),
            default_package=project.default_package,
        )
        return project

    @staticmethod
    def _pick_default_package(packages: list[PackageDirectory]) -> str:
        for package in packages:
            if package.is_default:
                return package.name
        return packages[0].name

    def list_packages(self) -> list[PackageDirectory]:
        return list(self._packages.values())

    def package_names(self) -> list[str]:
        return sorted(self._packages)

    def get_package(self, name: str) -> PackageDirectory:
        try:
            return self._packages[name]
        except KeyError:
            raise ConfigurationError(f"Unknown package: {name}") from None

    def list_ancestor_packages(self, name: str) -> list[PackageDirectory]:
        """The package followed by its in-project dependencies, depth first, without repeats."""
        ordered: list[PackageDirectory] = []
        seen: set[str] = set()

        def _visit(package_name: str) -> None:
            if package_name in seen or package_name not in self._packages:
                return
            seen.add(package_name)
            package = self._packages[package_name]
            ordered.append(package)
            for dependency in package.dependencies:
                _visit(dependency)

        self.get_package(name)
        _visit(name)
        return ordered

    def package_source_dir(self, name: str) -> Path:
        """Directory below which the package's metadata folders live."""
        return self.get_package(name).full_path / self.source_subdir


def find_project_file(start: Path) -> Path:
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / PROJECT_FILE
        if candidate.is_file():
            return candidate
    raise ConfigurationError(f"No {PROJECT_FILE} found in {start} or any parent directory")


def _parse_package_directory(root: Path, entry: dict[str, Any]) -> PackageDirectory:
    path = entry.get("path")
    if not path:
        raise ConfigurationError(f"Package directory entry without a path: {entry}")
    dependencies = tuple(
        str(dependency.get("package", "")).split("@", 1)[0]
        for dependency in entry.get("dependencies", [])
        if dependency.get("package")
    )
    return PackageDirectory(
        name=entry.get("package") or path,
        path=path,
        full_path=root / path,
        dependencies=dependencies,
        is_default=bool(entry.get("default", False)),
    )


# 🚩🧩🔚
