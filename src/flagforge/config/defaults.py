#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for flagforge configuration."""

from __future__ import annotations

# =================================
# Project file
# =================================
PROJECT_FILE = "sfdx-project.json"
PLUGIN_SETTINGS_KEY = "flagforge"
DEFAULT_SOURCE_SUBDIR = "main/default"

# =================================
# Settings object pool
# =================================
DEFAULT_SETTINGS_CAPACITY = 5  # Custom fields per settings object
SETTINGS_OBJECT_PREFIX = "Feature"  # Probed as Feature1__c, Feature2__c, ...
CUSTOM_SUFFIX = "__c"
SETTINGS_TYPE_HIERARCHY = "Hierarchy"
ORG_ID_PREFIX = "00D"  # SetupOwnerId of the org-level settings record

# =================================
# Metadata layout
# =================================
FEATURE_FLAG_TYPE = "Feature_Flag"
CATEGORY_SEPARATOR = "."
OBJECTS_DIR = "objects"
FIELDS_DIR = "fields"
CUSTOM_METADATA_DIR = "customMetadata"
CUSTOM_PERMISSIONS_DIR = "customPermissions"
PERMISSION_SETS_DIR = "permissionsets"

FIELD_SUFFIX = ".field-meta.xml"
OBJECT_SUFFIX = ".object-meta.xml"
CUSTOM_METADATA_SUFFIX = ".md-meta.xml"
CUSTOM_PERMISSION_SUFFIX = ".customPermission-meta.xml"
PERMISSION_SET_SUFFIX = ".permissionset-meta.xml"

METADATA_NAMESPACE = "http://soap.sforce.com/2006/04/metadata"

# Directories never scanned for existing flags
DISCOVERY_SKIP_DIRS = frozenset({"node_modules"})

# =================================
# Remote defaults
# =================================
DEFAULT_SF_BIN = "sf"
DEFAULT_API_VERSION = "60.0"
DEFAULT_POLL_INTERVAL = 2.0  # Seconds between deploy status checks
DEFAULT_OBJECT_DEPLOY_WAIT = 10  # Minutes to wait for a settings object deploy


# 🚩🧩🔚
