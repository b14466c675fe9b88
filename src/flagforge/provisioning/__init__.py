#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""This package contains the provisioning engine: backing target resolution
and the end-to-end create flow."""

from flagforge.provisioning.allocator import CapacityAllocator
from flagforge.provisioning.orchestrator import ProvisioningOrchestrator, ProvisioningResult
from flagforge.provisioning.permsets import PermissionSetOption, PermissionSetResolver

__all__ = [
    "CapacityAllocator",
    "PermissionSetOption",
    "PermissionSetResolver",
    "ProvisioningOrchestrator",
    "ProvisioningResult",
]

# 🚩🧩🔚
