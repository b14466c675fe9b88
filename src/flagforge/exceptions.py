#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for flagforge."""

from __future__ import annotations

from typing import Any

from provide.foundation.errors import FoundationError


class FlagForgeException(FoundationError):
    """Base exception for all flagforge errors."""

    pass


class ConfigurationError(FlagForgeException):
    """Raised when the project file or settings are missing or invalid."""

    pass


class DiscoveryError(FlagForgeException):
    """Raised when existing metadata cannot be read from the project tree."""

    pass


class InvalidCategoryChoiceError(FlagForgeException):
    """Raised for a navigator transition that is not allowed in the current state."""

    pass


class ProvisioningError(FlagForgeException):
    """Raised for fatal errors while gathering or generating a feature flag."""

    pass


class RemoteOperationError(FlagForgeException):
    """Raised when a call against the remote org fails.

    ``stage`` names the step of the run that issued the call, so the operator
    can tell a failed query from a failed record creation.
    """

    def __init__(self, message: str, stage: str | None = None) -> None:
        self.stage = stage
        if stage:
            message = f"{stage}: {message}"
        super().__init__(message)


class ObjectNotFoundError(RemoteOperationError):
    """Raised when a describe call finds no object with the requested name."""

    pass


class DeploymentError(FlagForgeException):
    """Raised when a deploy batch finishes unsuccessfully."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


# 🚩🧩🔚
