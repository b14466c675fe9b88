#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flagforge: interactive provisioning of feature flag metadata."""

from __future__ import annotations

from provide.foundation.utils import get_version

from flagforge.exceptions import DeploymentError, FlagForgeException, ProvisioningError
from flagforge.models import FlagSpec, FlagType, MetadataFile
from flagforge.naming import derive_api_name, validate_api_name

__version__ = get_version("flagforge", caller_file=__file__)

__all__ = [
    "DeploymentError",
    "FlagForgeException",
    "FlagSpec",
    "FlagType",
    "MetadataFile",
    "ProvisioningError",
    "__version__",
    "derive_api_name",
    "validate_api_name",
]

# 🚩🧩🔚
