#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Deployment of generated feature flag metadata."""

from flagforge.deploy.orchestrator import DeploymentOrchestrator, DeployState

__all__ = ["DeployState", "DeploymentOrchestrator"]

# 🚩🧩🔚
