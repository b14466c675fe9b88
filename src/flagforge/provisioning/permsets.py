#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Choosing the permission set that grants a new custom permission."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from provide.foundation import logger

from flagforge.exceptions import FlagForgeException
from flagforge.metadata.generator import generate_permission_set
from flagforge.metadata.permissionsets import add_custom_permission
from flagforge.models import MetadataFile, PackageDirectory, PermissionSetRecord
from flagforge.naming import api_name_error, derive_api_name
from flagforge.project import SfdxProject
from flagforge.prompts import Prompter, ask_text

PermissionSetSource = Callable[[PackageDirectory, str], list[PermissionSetRecord]]


class PermissionSetOption(str, Enum):
    ADD = "Add to existing"
    NEW = "Create a new one"
    SKIP = "skip"


def sort_permission_sets(records: list[PermissionSetRecord]) -> list[PermissionSetRecord]:
    """Order by label, ignoring case, independent of the process locale."""
    return sorted(records, key=lambda record: (record.label.casefold(), record.label, record.package_name))


def format_permission_set_choices(
    records: list[PermissionSetRecord],
) -> tuple[str, dict[str, PermissionSetRecord]]:
    """Aligned ``label  package`` lines plus the header line above them.

    Returns the header and a mapping from each display line back to its record.
    """
    width = max((len(record.label) for record in records), default=0)
    header = "PermSet" + " " * (width - 5) + "package"
    choices: dict[str, PermissionSetRecord] = {}
    for record in records:
        line = f"{record.label}{' ' * (width - len(record.label) + 2)}{record.package_name}"
        if line in choices:
            line = f"{line}  ({record.path.name})"
        choices[line] = record
    return header, choices


class PermissionSetResolver:
    """Adds a custom permission to an existing permission set or creates a new one."""

    def __init__(
        self,
        project: SfdxProject,
        prompter: Prompter,
        permission_set_source: PermissionSetSource,
    ) -> None:
        self.project = project
        self.prompter = prompter
        self.permission_set_source = permission_set_source

    def resolve(self, custom_permission: str, package_name: str) -> MetadataFile | None:
        """Ask how to grant ``custom_permission``; None when the operator skips."""
        options = [option.value for option in PermissionSetOption]
        while True:
            answer = self.prompter.select(
                "Do you want to add Custom Permission to existing Permission Set or create a new one?",
                options,
            )
            if answer == PermissionSetOption.SKIP.value:
                logger.debug("Permission set skipped", custom_permission=custom_permission)
                return None
            if answer == PermissionSetOption.NEW.value:
                return self.create_permission_set(custom_permission, package_name)

            candidates = self.collect_candidates(package_name)
            if candidates:
                return self.add_to_permission_set(custom_permission, candidates)
            self.prompter.warn("No permission sets found in related packages.")
            options.remove(PermissionSetOption.ADD.value)

    def collect_candidates(self, package_name: str) -> list[PermissionSetRecord]:
        """Permission sets from the package and its ancestors, sorted by label."""
        records: list[PermissionSetRecord] = []
        for package in self.project.list_ancestor_packages(package_name):
            try:
                records.extend(self.permission_set_source(package, self.project.source_subdir))
            except FlagForgeException as e:
                logger.warning("Skipping permission sets of package", package=package.name, error=str(e))
        return sort_permission_sets(records)

    def add_to_permission_set(
        self, custom_permission: str, candidates: list[PermissionSetRecord]
    ) -> MetadataFile:
        header, choices = format_permission_set_choices(candidates)
        message = (
            "Select Permission Set. Displayed are Permission Sets from related packages; "
            "to use one from another package, add it as a dependency first.\n" + header
        )
        line = self.prompter.select(message, list(choices))
        record = choices[line]

        record.content = add_custom_permission(record.content, custom_permission)
        logger.info(
            "🔐 Custom permission added to permission set",
            permission_set=record.label,
            package=record.package_name,
            custom_permission=custom_permission,
        )
        return MetadataFile(content=record.content, dir_path=record.path.parent, file_path=record.path)

    def create_permission_set(self, custom_permission: str, package_name: str) -> MetadataFile:
        ps_label = ask_text(
            self.prompter,
            "Enter Permission Set Label",
            validate=lambda value: None if value else "Permission Set Label must not be empty.",
        )
        ps_name = ask_text(
            self.prompter,
            "Enter Permission Set Name (enter to confirm default)",
            validate=api_name_error,
            default=derive_api_name(ps_label),
        )
        return generate_permission_set(
            ps_name=ps_name,
            ps_label=ps_label,
            custom_permission=custom_permission,
            package_dir=self.project.package_source_dir(package_name),
        )


# 🚩🧩🔚
