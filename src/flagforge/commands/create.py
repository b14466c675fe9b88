#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Create command for the flagforge CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from flagforge.config import FlagForgeRuntimeConfig
from flagforge.console import get_command_logger
from flagforge.exceptions import DeploymentError, FlagForgeException
from flagforge.project import SfdxProject
from flagforge.prompts import ClickPrompter
from flagforge.provisioning.orchestrator import ProvisioningOrchestrator, ProvisioningResult
from flagforge.remote.sf_cli import SfCliRemote

# Get structured logger for this command
log = get_command_logger("create")


@click.command("create")
@click.option(
    "--project-dir",
    default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Directory inside the Salesforce DX project (default: current directory).",
)
@click.option(
    "--target-org",
    "-o",
    default=None,
    help="Org alias or username to deploy to (default: FLAGFORGE_TARGET_ORG or the sf default org).",
)
@click.option(
    "--deploy/--no-deploy",
    default=None,
    help="Deploy the generated metadata right away (asks when omitted).",
)
@click.pass_context
def create_command(ctx: click.Context, project_dir: str, target_org: str | None, deploy: bool | None) -> None:
    """Interactively create a feature flag and its metadata."""
    config: FlagForgeRuntimeConfig = (ctx.obj or {}).get("config") or FlagForgeRuntimeConfig.from_env()
    log.debug("Create command started", project_dir=project_dir, target_org=target_org, deploy=deploy)

    try:
        project = SfdxProject.load(Path(project_dir))
        remote = SfCliRemote(
            project.root,
            sf_bin=config.sf_bin,
            target_org=target_org or config.target_org,
            poll_interval=config.poll_interval,
            api_version=config.api_version,
        )
        orchestrator = ProvisioningOrchestrator(
            project,
            ClickPrompter(),
            remote,
            capacity=config.settings_capacity,
            status_callback=lambda status: pout(f"⏳ Deploying... {status}"),
            echo=pout,
        )
        result = orchestrator.run(deploy=deploy)
    except DeploymentError as e:
        log.error("Deployment failed", error=str(e))
        perr("❌ Deployment failed.")
        perr(json_dumps(e.details))
        raise click.Abort() from e
    except FlagForgeException as e:
        log.error("Feature flag creation failed", error=str(e))
        perr(f"❌ Feature flag creation failed: {e}")
        raise click.Abort() from e

    _display_result(result)


def _display_result(result: ProvisioningResult) -> None:
    """Summarize the created flag and its files."""
    flag = result.flag
    pout(f"\n🚩 Feature flag '{flag.label}' ({flag.name})")
    pout(f"   Category: {flag.category}")
    pout(f"   Type: {flag.type.value}")
    if result.settings_object is not None:
        pout(f"   Settings object: {result.settings_object.api_name}")
    pout("\nFiles:")
    for path in result.files:
        pout(f"  • {path}")
    if result.deployed:
        pout("\n✅ Deployment done.")


# 🚩🧩🔚
