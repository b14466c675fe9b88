#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for persisting generated metadata files."""

from __future__ import annotations

from pathlib import Path

import pytest

from flagforge.metadata.generator import generate_custom_permission
from flagforge.metadata.writer import metadata_file_exists, save_metadata_file


@pytest.mark.unit
class TestSaveMetadataFile:
    def test_creates_directories_and_writes(self, tmp_path: Path) -> None:
        mf = generate_custom_permission("My Flag", "MyFlag", tmp_path / "src" / "core" / "main" / "default")
        assert not metadata_file_exists(mf)

        save_metadata_file(mf)

        assert metadata_file_exists(mf)
        assert mf.file_path.read_text() == mf.content

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        first = generate_custom_permission("Old", "MyFlag", tmp_path)
        second = generate_custom_permission("New", "MyFlag", tmp_path)
        save_metadata_file(first)
        save_metadata_file(second)
        assert "<label>New</label>" in second.file_path.read_text()


# 🚩🧩🔚
