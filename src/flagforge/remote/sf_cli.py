#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Remote org access through the Salesforce ``sf`` CLI.

Every call runs ``sf <topic> <command> --json`` in the project root and reads
the JSON envelope the CLI prints: ``{"status": 0, "result": {...}}`` on
success, ``{"status": 1, "name": ..., "message": ...}`` on failure.
Authentication is whatever the CLI has stored for the target org.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
import tempfile
import time
from typing import Any

from provide.foundation import logger
from provide.foundation.errors import FoundationError
from provide.foundation.file import atomic_write_text
from provide.foundation.file.directory import ensure_parent_dir
from provide.foundation.process import run
from provide.foundation.serialization import json_loads

from flagforge.config.defaults import (
    DEFAULT_API_VERSION,
    DEFAULT_OBJECT_DEPLOY_WAIT,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_SF_BIN,
)
from flagforge.exceptions import ObjectNotFoundError, RemoteOperationError
from flagforge.metadata.generator import build_object_deploy_bundle
from flagforge.remote.base import (
    CustomObjectDefinition,
    DeployResult,
    ObjectDescription,
    StatusCallback,
)

_NOT_FOUND_MARKERS = ("NOT_FOUND", "does not exist", "not found")


def format_record_values(data: dict[str, Any]) -> str:
    """Render record fields as the ``--values`` argument of ``sf data create record``."""
    parts = []
    for key, value in data.items():
        if isinstance(value, bool):
            rendered = "true" if value else "false"
        else:
            rendered = str(value)
            if any(ch.isspace() for ch in rendered) or not rendered:
                rendered = "'" + rendered.replace("'", "\\'") + "'"
        parts.append(f"{key}={rendered}")
    return " ".join(parts)


class SfCliRemote:
    """``RemoteOrg`` implementation shelling out to the ``sf`` CLI."""

    def __init__(
        self,
        project_root: Path,
        sf_bin: str = DEFAULT_SF_BIN,
        target_org: str | None = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        api_version: str = DEFAULT_API_VERSION,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.project_root = project_root
        self.sf_bin = sf_bin
        self.target_org = target_org
        self.poll_interval = poll_interval
        self.api_version = api_version
        self._sleep = sleep

    def _run_sf(self, stage: str, args: list[str], allow_failed_result: bool = False) -> Any:
        """Run one CLI command and return the ``result`` member of its JSON output."""
        cmd = [self.sf_bin, *args, "--json"]
        if self.target_org:
            cmd += ["--target-org", self.target_org]
        logger.debug("💻🚀📋 Running sf command", stage=stage, command=" ".join(cmd))

        try:
            completed = run(cmd, cwd=self.project_root, capture_output=True, check=False)
        except (OSError, FoundationError) as e:
            raise RemoteOperationError(f"could not run {self.sf_bin}: {e}", stage=stage) from e

        try:
            payload = json_loads(completed.stdout or "{}")
        except (ValueError, FoundationError) as e:
            raise RemoteOperationError(
                f"unreadable CLI output (exit code {completed.returncode}): "
                f"{completed.stderr or completed.stdout}",
                stage=stage,
            ) from e

        if payload.get("status", completed.returncode) == 0:
            return payload.get("result")
        if allow_failed_result and isinstance(payload.get("result"), dict):
            return payload["result"]

        message = payload.get("message") or completed.stderr or "unknown error"
        name = payload.get("name", "")
        if stage == "describe" and any(marker in f"{name} {message}" for marker in _NOT_FOUND_MARKERS):
            raise ObjectNotFoundError(message, stage=stage)
        raise RemoteOperationError(f"{name}: {message}" if name else message, stage=stage)

    def describe_object(self, name: str) -> ObjectDescription:
        result = self._run_sf("describe", ["sobject", "describe", "--sobject", name]) or {}
        fields = [entry.get("name", "") for entry in result.get("fields", [])]
        return ObjectDescription(name=result.get("name", name), fields=fields)

    def create_object(self, definition: CustomObjectDefinition) -> None:
        bundle = build_object_deploy_bundle(definition.full_name, definition.label, self.api_version)
        with tempfile.TemporaryDirectory(prefix="flagforge-object-") as tmp:
            for relative, content in bundle.items():
                target = Path(tmp) / relative
                ensure_parent_dir(target)
                atomic_write_text(target, content)
            result = self._run_sf(
                "create object",
                [
                    "project",
                    "deploy",
                    "start",
                    "--metadata-dir",
                    tmp,
                    "--wait",
                    str(DEFAULT_OBJECT_DEPLOY_WAIT),
                ],
                allow_failed_result=True,
            )
        if not result or not result.get("success"):
            status = (result or {}).get("status", "unknown")
            raise RemoteOperationError(
                f"deploy of {definition.full_name} ended with status {status}",
                stage="create object",
            )

    def create_record(self, object_name: str, data: dict[str, Any]) -> str:
        result = self._run_sf(
            "create record",
            ["data", "create", "record", "--sobject", object_name, "--values", format_record_values(data)],
        )
        return str((result or {}).get("id", ""))

    def query_records(self, soql: str) -> list[dict[str, Any]]:
        result = self._run_sf("query", ["data", "query", "--query", soql]) or {}
        records: list[dict[str, Any]] = result.get("records", [])
        return records

    def deploy(self, file_paths: Sequence[Path]) -> SfCliDeployHandle:
        args = ["project", "deploy", "start", "--async"]
        for path in file_paths:
            args += ["--source-dir", str(path)]
        result = self._run_sf("deploy", args) or {}
        job_id = result.get("id")
        if not job_id:
            raise RemoteOperationError("no deploy job id returned", stage="deploy")
        logger.info("🚀 Deploy submitted", job_id=job_id, files=len(file_paths))
        return SfCliDeployHandle(self, job_id)


class SfCliDeployHandle:
    """Deploy job started with ``--async``, polled with ``sf project deploy report``."""

    def __init__(self, remote: SfCliRemote, job_id: str) -> None:
        self.remote = remote
        self.job_id = job_id
        self._callbacks: list[StatusCallback] = []

    def on_status_update(self, callback: StatusCallback) -> None:
        self._callbacks.append(callback)

    def poll_until_terminal(self) -> DeployResult:
        last_status = None
        while True:
            result = (
                self.remote._run_sf(
                    "deploy report",
                    ["project", "deploy", "report", "--job-id", self.job_id],
                    allow_failed_result=True,
                )
                or {}
            )
            status = str(result.get("status", "Unknown"))
            if status != last_status:
                for callback in self._callbacks:
                    callback(status)
                last_status = status
            if result.get("done"):
                return DeployResult(success=bool(result.get("success")), status=status, details=result)
            self.remote._sleep(self.remote.poll_interval)


# 🚩🧩🔚
