#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the flagforge command line."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock, patch

from click.testing import CliRunner
import pytest

from flagforge.cli import main as cli_main
from flagforge.remote.base import DeployResult

# label, default name, UI, Menus, finish, default package, Custom Permission, skip
PERMISSION_SESSION = "My Flag\n\n1\n1\n1\n\n2\n3\n"
# label, default name, UI, Menus, finish, default package, Custom Setting
SETTING_SESSION = "My Flag\n\n1\n1\n1\n\n1\n"


class TestCliBasics:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli_main, ["--help"])
        assert result.exit_code == 0
        assert "create" in result.output
        assert "categories" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli_main, ["--version"])
        assert result.exit_code == 0
        assert "flagforge version" in result.output


@pytest.mark.integration
class TestCategoriesCommand:
    def test_lists_tree(self, sfdx_project_dir: Path, write_flag: Callable[..., Path]) -> None:
        write_flag("Menu_Flag", "Menu Flag", "UI.Menus")
        write_flag("Pay_Flag", "Pay Flag", "Billing", package="ext")

        result = CliRunner().invoke(cli_main, ["categories", "--project-dir", str(sfdx_project_dir)])

        assert result.exit_code == 0
        assert "Feature flag categories (2 flags):" in result.output
        lines = result.output.splitlines()
        assert lines[-3:] == ["  Billing", "  UI", "    Menus"]

    def test_empty_project(self, sfdx_project_dir: Path) -> None:
        result = CliRunner().invoke(cli_main, ["categories", "--project-dir", str(sfdx_project_dir)])
        assert result.exit_code == 0
        assert "No feature flag categories found." in result.output

    def test_outside_project(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli_main, ["categories", "--project-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "Category discovery failed" in result.output


@pytest.mark.integration
class TestCreateCommand:
    @pytest.fixture(autouse=True)
    def existing_flag(self, write_flag: Callable[..., Path]) -> None:
        write_flag("Menu_Flag", "Menu Flag", "UI.Menus")

    def test_permission_flag_without_deploy(self, sfdx_project_dir: Path, fake_remote: Any) -> None:
        with patch("flagforge.commands.create.SfCliRemote", return_value=fake_remote):
            result = CliRunner().invoke(
                cli_main,
                ["create", "--project-dir", str(sfdx_project_dir), "--no-deploy"],
                input=PERMISSION_SESSION,
            )

        assert result.exit_code == 0, result.output
        assert "🚩 Feature flag 'My Flag' (My_Flag)" in result.output
        assert "Category: UI.Menus" in result.output
        assert "To deploy freshly created Feature Flag use following command:" in result.output
        metadata_dir = sfdx_project_dir / "src" / "core" / "main" / "default" / "customMetadata"
        assert (metadata_dir / "Feature_Flag.My_Flag.md-meta.xml").is_file()
        assert fake_remote.deployed == []

    def test_setting_flag_with_deploy(self, sfdx_project_dir: Path, fake_remote: Any) -> None:
        fake_remote.add_settings_object("Feature1__c", 5)
        with patch("flagforge.commands.create.SfCliRemote", return_value=fake_remote) as mock_remote:
            result = CliRunner().invoke(
                cli_main,
                ["create", "--project-dir", str(sfdx_project_dir), "--deploy", "-o", "dev"],
                input=SETTING_SESSION,
            )

        assert result.exit_code == 0, result.output
        assert mock_remote.call_args.kwargs["target_org"] == "dev"
        assert "Settings object: Feature2__c" in result.output
        assert "⏳ Deploying... Succeeded" in result.output
        assert "✅ Deployment done." in result.output
        assert fake_remote.created_records == [("Feature2__c", {"My_Flag__c": False})]

    def test_deploy_failure(self, sfdx_project_dir: Path, fake_remote: Any) -> None:
        fake_remote.add_settings_object("Feature1__c", 0)
        fake_remote.deploy_result = DeployResult(
            success=False, status="Failed", details={"errorMessage": "boom"}
        )
        with patch("flagforge.commands.create.SfCliRemote", return_value=fake_remote):
            result = CliRunner().invoke(
                cli_main,
                ["create", "--project-dir", str(sfdx_project_dir), "--deploy"],
                input=SETTING_SESSION,
            )

        assert result.exit_code == 1
        assert "❌ Deployment failed." in result.output
        assert "boom" in result.output

    def test_project_error_aborts(self, tmp_path: Path) -> None:
        with patch("flagforge.commands.create.SfCliRemote", return_value=Mock()):
            result = CliRunner().invoke(cli_main, ["create", "--project-dir", str(tmp_path)], input="")
        assert result.exit_code == 1
        assert "Feature flag creation failed" in result.output


# 🚩🧩🔚
