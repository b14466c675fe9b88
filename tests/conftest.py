#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for flagforge tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from typing import Any

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
from provide.foundation.serialization import json_dumps
import pytest

from flagforge.exceptions import ObjectNotFoundError, RemoteOperationError
from flagforge.remote.base import CustomObjectDefinition, DeployResult, ObjectDescription, StatusCallback

SOURCE_SUBDIR = "main/default"


class FakeDeployHandle:
    """Deploy handle that replays a fixed list of statuses."""

    def __init__(self, result: DeployResult, statuses: Sequence[str]) -> None:
        self.result = result
        self.statuses = list(statuses)
        self.callbacks: list[StatusCallback] = []

    def on_status_update(self, callback: StatusCallback) -> None:
        self.callbacks.append(callback)

    def poll_until_terminal(self) -> DeployResult:
        for status in self.statuses:
            for callback in self.callbacks:
                callback(status)
        return self.result


class FakeRemote:
    """In-memory remote org recording every call."""

    def __init__(self) -> None:
        self.objects: dict[str, list[str]] = {}
        self.records: dict[str, list[dict[str, Any]]] = {}
        self.described: list[str] = []
        self.created_objects: list[CustomObjectDefinition] = []
        self.created_records: list[tuple[str, dict[str, Any]]] = []
        self.queries: list[str] = []
        self.deployed: list[list[Path]] = []
        self.fail_create_object = False
        self.fail_query = False
        self.deploy_result = DeployResult(success=True, status="Succeeded", details={"status": "Succeeded"})

    def add_settings_object(self, name: str, custom_fields: int) -> None:
        fields = ["Id", "Name", "SetupOwnerId"] + [f"Flag{i}__c" for i in range(custom_fields)]
        self.objects[name] = fields

    def describe_object(self, name: str) -> ObjectDescription:
        self.described.append(name)
        if name not in self.objects:
            raise ObjectNotFoundError(f"{name} does not exist", stage="describe")
        return ObjectDescription(name=name, fields=self.objects[name])

    def create_object(self, definition: CustomObjectDefinition) -> None:
        self.created_objects.append(definition)
        if self.fail_create_object:
            raise RemoteOperationError("insufficient access", stage="create object")
        self.objects[definition.full_name] = ["Id", "Name", "SetupOwnerId"]

    def create_record(self, object_name: str, data: dict[str, Any]) -> str:
        self.created_records.append((object_name, data))
        return "a00000000000001"

    def query_records(self, soql: str) -> list[dict[str, Any]]:
        self.queries.append(soql)
        if self.fail_query:
            raise RemoteOperationError("INVALID_TYPE", stage="query")
        return self.records.get(soql.rsplit(" ", 1)[-1], [])

    def deploy(self, file_paths: Sequence[Path]) -> FakeDeployHandle:
        self.deployed.append(list(file_paths))
        return FakeDeployHandle(self.deploy_result, ["InProgress", self.deploy_result.status])


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def fake_remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def sfdx_project_dir(tmp_path: Path) -> Path:
    """A project with packages 'core' (default) and 'ext' depending on 'core'."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    project_json = {
        "packageDirectories": [
            {"path": "src/core", "package": "core", "default": True, "versionNumber": "1.0.0.NEXT"},
            {
                "path": "src/ext",
                "package": "ext",
                "versionNumber": "1.0.0.NEXT",
                "dependencies": [{"package": "core", "versionNumber": "1.0.0.LATEST"}],
            },
        ],
        "plugins": {"flagforge": {"featureFlagDefaultPackage": "core", "sourceSubdir": SOURCE_SUBDIR}},
        "sourceApiVersion": "60.0",
    }
    (project_dir / "sfdx-project.json").write_text(json_dumps(project_json))
    return project_dir


@pytest.fixture
def write_flag(sfdx_project_dir: Path) -> Callable[..., Path]:
    """Write an existing Feature_Flag record into a package."""

    def _write(name: str, label: str, category: str, package: str = "core") -> Path:
        directory = sfdx_project_dir / "src" / package / SOURCE_SUBDIR / "customMetadata"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"Feature_Flag.{name}.md-meta.xml"
        path.write_text(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<CustomMetadata xmlns="http://soap.sforce.com/2006/04/metadata" '
            'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
            'xmlns:xsd="http://www.w3.org/2001/XMLSchema">\n'
            f"    <label>{label}</label>\n"
            "    <protected>false</protected>\n"
            "    <values>\n"
            "        <field>Category__c</field>\n"
            f'        <value xsi:type="xsd:string">{category}</value>\n'
            "    </values>\n"
            "    <values>\n"
            "        <field>Type__c</field>\n"
            '        <value xsi:type="xsd:string">Custom Permission</value>\n'
            "    </values>\n"
            "</CustomMetadata>\n"
        )
        return path

    return _write


@pytest.fixture
def write_permission_set(sfdx_project_dir: Path) -> Callable[..., Path]:
    """Write an existing permission set into a package."""

    def _write(name: str, label: str, package: str = "core", custom_permissions: Sequence[str] = ()) -> Path:
        directory = sfdx_project_dir / "src" / package / SOURCE_SUBDIR / "permissionsets"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{name}.permissionset-meta.xml"
        blocks = "".join(
            "    <customPermissions>\n"
            "        <enabled>true</enabled>\n"
            f"        <name>{permission}</name>\n"
            "    </customPermissions>\n"
            for permission in custom_permissions
        )
        path.write_text(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<PermissionSet xmlns="http://soap.sforce.com/2006/04/metadata">\n'
            f"{blocks}"
            "    <hasActivationRequired>false</hasActivationRequired>\n"
            f"    <label>{label}</label>\n"
            "</PermissionSet>\n"
        )
        return path

    return _write


# 🚩🧩🔚
