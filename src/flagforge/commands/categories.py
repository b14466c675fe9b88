#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Categories command for the flagforge CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from flagforge.categories.tree import render_tree
from flagforge.console import get_command_logger
from flagforge.discovery import list_feature_flag_artifacts, read_categories_from_artifacts
from flagforge.exceptions import FlagForgeException
from flagforge.project import SfdxProject

# Get structured logger for this command
log = get_command_logger("categories")


@click.command("categories")
@click.option(
    "--project-dir",
    default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Directory inside the Salesforce DX project (default: current directory).",
)
def categories_command(project_dir: str) -> None:
    """Show the category tree of existing feature flags."""
    try:
        project = SfdxProject.load(Path(project_dir))
        artifacts = list_feature_flag_artifacts(project.root)
    except FlagForgeException as e:
        log.error("Category discovery failed", error=str(e))
        perr(f"❌ Category discovery failed: {e}")
        raise click.Abort() from e

    tree = read_categories_from_artifacts(artifacts)
    if not tree:
        pout("No feature flag categories found.")
        return

    pout(f"🗂️  Feature flag categories ({len(artifacts)} flags):")
    for line in render_tree(tree):
        pout(f"  {line}")


# 🚩🧩🔚
