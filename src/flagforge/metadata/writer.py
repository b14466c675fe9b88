#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Persisting generated metadata files."""

from __future__ import annotations

from provide.foundation import logger
from provide.foundation.file import atomic_write_text
from provide.foundation.file.directory import ensure_dir

from flagforge.models import MetadataFile


def save_metadata_file(metadata_file: MetadataFile) -> None:
    """Create the target directory and write the document, overwriting any existing file."""
    ensure_dir(metadata_file.dir_path)
    atomic_write_text(metadata_file.file_path, metadata_file.content)
    logger.debug("💾 Metadata file written", path=str(metadata_file.file_path))


def metadata_file_exists(metadata_file: MetadataFile) -> bool:
    return metadata_file.file_path.exists()


# 🚩🧩🔚
