#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Remote org contract and the sf CLI implementation."""

from flagforge.remote.base import (
    CustomObjectDefinition,
    DeployHandle,
    DeployResult,
    ObjectDescription,
    RemoteOrg,
    StatusCallback,
)
from flagforge.remote.sf_cli import SfCliDeployHandle, SfCliRemote

__all__ = [
    "CustomObjectDefinition",
    "DeployHandle",
    "DeployResult",
    "ObjectDescription",
    "RemoteOrg",
    "SfCliDeployHandle",
    "SfCliRemote",
    "StatusCallback",
]

# 🚩🧩🔚
