#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Generation and persistence of feature flag metadata documents."""

from flagforge.metadata.generator import (
    build_object_deploy_bundle,
    generate_custom_metadata_record,
    generate_custom_permission,
    generate_custom_setting_field,
    generate_custom_settings_object,
    generate_permission_set,
    setting_reference,
)
from flagforge.metadata.permissionsets import add_custom_permission, referenced_custom_permissions
from flagforge.metadata.writer import metadata_file_exists, save_metadata_file

__all__ = [
    "add_custom_permission",
    "build_object_deploy_bundle",
    "generate_custom_metadata_record",
    "generate_custom_permission",
    "generate_custom_setting_field",
    "generate_custom_settings_object",
    "generate_permission_set",
    "metadata_file_exists",
    "referenced_custom_permissions",
    "save_metadata_file",
    "setting_reference",
]

# 🚩🧩🔚
