#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Contract between the provisioning engine and a remote org."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Protocol

from attrs import define, field

from flagforge.config.defaults import SETTINGS_TYPE_HIERARCHY

StatusCallback = Callable[[str], None]


@define(frozen=True)
class ObjectDescription:
    name: str
    fields: tuple[str, ...] = field(factory=tuple, converter=tuple)


@define(frozen=True)
class CustomObjectDefinition:
    full_name: str
    label: str
    custom_settings_type: str = SETTINGS_TYPE_HIERARCHY


@define(frozen=True)
class DeployResult:
    success: bool
    status: str
    details: dict[str, Any] = field(factory=dict)


class DeployHandle(Protocol):
    """A submitted deploy batch."""

    def on_status_update(self, callback: StatusCallback) -> None: ...

    def poll_until_terminal(self) -> DeployResult: ...


class RemoteOrg(Protocol):
    """Remote operations the engine needs.

    ``describe_object`` raises ``ObjectNotFoundError`` for unknown objects;
    every method raises ``RemoteOperationError`` when the call itself fails.
    """

    def describe_object(self, name: str) -> ObjectDescription: ...

    def create_object(self, definition: CustomObjectDefinition) -> None: ...

    def create_record(self, object_name: str, data: dict[str, Any]) -> str: ...

    def query_records(self, soql: str) -> list[dict[str, Any]]: ...

    def deploy(self, file_paths: Sequence[Path]) -> DeployHandle: ...


# 🚩🧩🔚
