#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flagforge command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from flagforge.commands.categories import categories_command
from flagforge.commands.create import create_command
from flagforge.config import FlagForgeRuntimeConfig

__version__ = get_version("flagforge", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="flagforge",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Feature flag provisioning for Salesforce DX projects.

    Configure via environment variables:
    - FLAGFORGE_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - FLAGFORGE_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - FLAGFORGE_SF_BIN / FLAGFORGE_TARGET_ORG: sf CLI executable and target org
    - FLAGFORGE_POLL_INTERVAL: Seconds between deploy status checks
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    flagforge_config = FlagForgeRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="flagforge",
        logging=evolve(
            base_telemetry.logging,
            default_level=flagforge_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger
    ctx.obj["config"] = flagforge_config


cli.add_command(create_command, name="create")
cli.add_command(categories_command, name="categories")

main = cli

if __name__ == "__main__":
    cli()

# 🚩🧩🔚
