#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""End-to-end feature flag provisioning run."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from attrs import define, field
from provide.foundation import logger

from flagforge.categories.navigator import CategoryNavigator, NavigationState
from flagforge.categories.tree import CategoryTree, collect_items
from flagforge.config.defaults import DEFAULT_SETTINGS_CAPACITY
from flagforge.deploy.orchestrator import DeploymentOrchestrator
from flagforge.discovery import (
    list_feature_flag_artifacts,
    list_permission_sets_with_paths,
    read_categories_from_artifacts,
    read_labels_from_artifacts,
)
from flagforge.metadata.generator import (
    generate_custom_metadata_record,
    generate_custom_permission,
    generate_custom_setting_field,
    generate_custom_settings_object,
    setting_reference,
)
from flagforge.metadata.writer import metadata_file_exists, save_metadata_file
from flagforge.models import FlagSpec, FlagType, MetadataFile, SettingsObject
from flagforge.naming import api_name_error, derive_api_name
from flagforge.project import SfdxProject
from flagforge.prompts import Prompter, ask_text
from flagforge.provisioning.allocator import CapacityAllocator
from flagforge.provisioning.permsets import PermissionSetResolver, PermissionSetSource
from flagforge.remote.base import DeployResult, RemoteOrg, StatusCallback


@define
class DiscoveredState:
    """What the project already contains, read once at the start of a run."""

    tree: CategoryTree = field(factory=dict)
    labels: set[str] = field(factory=set)
    category_items: set[str] = field(factory=set)


@define
class ProvisioningResult:
    flag: FlagSpec
    files: list[Path] = field(factory=list)
    settings_object: SettingsObject | None = None
    deploy_result: DeployResult | None = None

    @property
    def deployed(self) -> bool:
        return self.deploy_result is not None and self.deploy_result.success


def deploy_command(files: list[Path]) -> str:
    """Equivalent manual ``sf`` command for a batch that was not deployed."""
    return "sf project deploy start " + " ".join(f'--source-dir "{path}"' for path in files)


class ProvisioningOrchestrator:
    """Runs the interactive create flow against a project and a remote org.

    Steps run strictly in order: discovery, label and name, category, package,
    type, backing target, generation and persistence, deployment. Files written
    before an abort stay on disk.
    """

    def __init__(
        self,
        project: SfdxProject,
        prompter: Prompter,
        remote: RemoteOrg,
        capacity: int = DEFAULT_SETTINGS_CAPACITY,
        permission_set_source: PermissionSetSource = list_permission_sets_with_paths,
        status_callback: StatusCallback | None = None,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self.project = project
        self.prompter = prompter
        self.remote = remote
        self.allocator = CapacityAllocator(remote, capacity=capacity)
        self.permission_sets = PermissionSetResolver(project, prompter, permission_set_source)
        self.status_callback = status_callback
        self.echo = echo or (lambda message: None)

    def discover(self) -> DiscoveredState:
        artifacts = list_feature_flag_artifacts(self.project.root)
        tree = read_categories_from_artifacts(artifacts)
        return DiscoveredState(
            tree=tree,
            labels=read_labels_from_artifacts(artifacts),
            category_items=collect_items(tree),
        )

    def gather_flag(self, discovered: DiscoveredState) -> tuple[FlagSpec, str]:
        """Ask for label, API name, category, package and type."""
        label = ask_text(
            self.prompter,
            "Enter Feature Flag Label",
            validate=lambda value: _label_error(value, discovered.labels),
        )
        name = ask_text(
            self.prompter,
            "Enter Feature Flag Name (enter to confirm default)",
            validate=api_name_error,
            default=derive_api_name(label),
        )

        navigator = CategoryNavigator(discovered.tree, self.prompter)
        category, _ = navigator.run(NavigationState(reserved=discovered.category_items))

        package_names = self.project.package_names()
        package_name = self.prompter.select(
            "Select your package",
            package_names,
            default=self.project.default_package,
        )
        flag_type = FlagType(
            self.prompter.select("Select Feature Flag type", [flag_type.value for flag_type in FlagType])
        )

        flag = FlagSpec(label=label, name=name, category=category, type=flag_type)
        logger.info("🚩 Feature flag specified", name=name, category=category, type=flag_type.value)
        return flag, package_name

    def run(self, deploy: bool | None = None) -> ProvisioningResult:
        """Execute the whole flow. ``deploy=None`` asks the operator."""
        discovered = self.discover()
        flag, package_name = self.gather_flag(discovered)
        package_dir = self.project.package_source_dir(package_name)
        result = ProvisioningResult(flag=flag)

        if flag.type is FlagType.CUSTOM_PERMISSION:
            permission_set = self.permission_sets.resolve(flag.name, package_name)
            if permission_set is not None:
                self._persist(permission_set, result)
            self._persist(generate_custom_permission(flag.label, flag.name, package_dir), result)
        else:
            settings_object = self.allocator.allocate()
            result.settings_object = settings_object
            self._persist(
                generate_custom_setting_field(settings_object.name, flag.name, flag.label, package_dir),
                result,
            )
            object_file = generate_custom_settings_object(
                settings_object.name,
                self.project.package_source_dir(self.project.default_package),
            )
            if metadata_file_exists(object_file):
                logger.debug("Settings object metadata already present", path=str(object_file.file_path))
            else:
                self._persist(object_file, result)

        record = generate_custom_metadata_record(
            label=flag.label,
            category=flag.category,
            flag_type=flag.type,
            setting=setting_reference(flag.name, result.settings_object),
            name=flag.name,
            package_dir=package_dir,
        )
        self._persist(record, result)

        if deploy is None:
            deploy = self.prompter.confirm("Deploy Metadata after creating?", default=True)

        if deploy:
            deployment = DeploymentOrchestrator(self.remote, status_callback=self.status_callback)
            result.deploy_result = deployment.deploy(flag, result.files, result.settings_object)
        else:
            self.echo("To deploy freshly created Feature Flag use following command:")
            self.echo(deploy_command(result.files))
        return result

    def _persist(self, metadata_file: MetadataFile, result: ProvisioningResult) -> None:
        save_metadata_file(metadata_file)
        result.files.append(metadata_file.file_path)


def _label_error(label: str, existing: set[str]) -> str | None:
    if not label:
        return "Feature Flag Label must not be empty."
    if label in existing:
        return "Feature Flag Label must be unique."
    return None


# 🚩🧩🔚
