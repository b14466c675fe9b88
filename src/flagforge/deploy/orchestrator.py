#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Publishing a generated batch and repairing remote state afterwards."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from provide.foundation import logger
from provide.foundation.serialization import json_dumps

from flagforge.config.defaults import ORG_ID_PREFIX
from flagforge.exceptions import DeploymentError, RemoteOperationError
from flagforge.models import FlagSpec, FlagType, SettingsObject
from flagforge.remote.base import DeployResult, RemoteOrg, StatusCallback


class DeployState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    POLLING = "polling"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class DeploymentOrchestrator:
    """Deploys one batch of metadata files and reconciles the settings record.

    A failed batch is reported with its raw payload and never retried; the
    operator fixes the files and runs the deploy again as a whole.
    """

    def __init__(self, remote: RemoteOrg, status_callback: StatusCallback | None = None) -> None:
        self.remote = remote
        self.status_callback = status_callback
        self.state = DeployState.IDLE
        self.result: DeployResult | None = None

    def deploy(
        self,
        flag: FlagSpec,
        file_paths: Sequence[Path],
        settings_object: SettingsObject | None = None,
    ) -> DeployResult:
        if self.state is not DeployState.IDLE:
            raise DeploymentError(f"Deployment already {self.state.value}")

        self.state = DeployState.SUBMITTING
        logger.debug("Submitting deploy batch", files=[str(path) for path in file_paths])
        try:
            handle = self.remote.deploy(list(file_paths))
        except RemoteOperationError:
            self.state = DeployState.FAILED
            raise
        handle.on_status_update(self._relay_status)

        self.state = DeployState.POLLING
        try:
            result = handle.poll_until_terminal()
        except RemoteOperationError:
            self.state = DeployState.FAILED
            raise
        self.result = result

        if not result.success:
            self.state = DeployState.FAILED
            raw = json_dumps(result.details)
            logger.error("Deployment failed", status=result.status, details=raw)
            raise DeploymentError(f"Deployment failed: {raw}", details=result.details)

        self.state = DeployState.SUCCEEDED
        logger.info("✅ Deployment done", status=result.status)

        if flag.type is FlagType.CUSTOM_SETTING and settings_object is not None:
            self.reconcile_settings_record(flag, settings_object)
        return result

    def _relay_status(self, status: str) -> None:
        logger.debug("Deploy status", status=status)
        if self.status_callback:
            self.status_callback(status)

    def settings_record_exists(self, settings_object: SettingsObject) -> bool:
        """Whether the org-level (default) record of the settings object exists."""
        soql = f"SELECT Id, SetupOwnerId FROM {settings_object.api_name}"
        try:
            records = self.remote.query_records(soql)
        except RemoteOperationError as e:
            raise RemoteOperationError(str(e), stage="reconcile") from e
        return any(str(record.get("SetupOwnerId") or "").startswith(ORG_ID_PREFIX) for record in records)

    def reconcile_settings_record(self, flag: FlagSpec, settings_object: SettingsObject) -> bool:
        """Create the org-level settings record when missing; True when one was created.

        Check and create are separate calls, so concurrent runs may both create it.
        """
        if self.settings_record_exists(settings_object):
            logger.debug("Settings record present", object=settings_object.api_name)
            return False

        logger.info("Settings record missing, initializing", object=settings_object.api_name)
        try:
            record_id = self.remote.create_record(settings_object.api_name, {f"{flag.name}__c": False})
        except RemoteOperationError as e:
            raise RemoteOperationError(str(e), stage="reconcile") from e
        logger.info("Settings record created", object=settings_object.api_name, record_id=record_id)
        return True


# 🚩🧩🔚
