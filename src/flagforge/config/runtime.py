#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flagforge runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from flagforge.config.defaults import (
    DEFAULT_API_VERSION,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_SETTINGS_CAPACITY,
    DEFAULT_SF_BIN,
)

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_positive_float(value: str | float) -> float:
    """Parse a strictly positive number of seconds."""
    number = float(value)
    if number <= 0:
        raise ValueError(f"Expected a positive number, got: {value}")
    return number


def parse_capacity(value: str | int) -> int:
    """Parse the per-object custom field capacity."""
    number = int(value)
    if number < 1:
        raise ValueError(f"Capacity must be at least 1, got: {value}")
    return number


@define
class FlagForgeRuntimeConfig(RuntimeConfig):
    """flagforge runtime configuration for CLI startup."""

    log_level: str = field(
        default="WARNING",
        env_var="FLAGFORGE_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for flagforge operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default="WARNING",
        env_var="FLAGFORGE_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    sf_bin: str = field(
        default=DEFAULT_SF_BIN,
        env_var="FLAGFORGE_SF_BIN",
        metadata={"help": "Salesforce CLI executable used for remote operations"},
    )

    target_org: str | None = field(
        default=None,
        env_var="FLAGFORGE_TARGET_ORG",
        metadata={"help": "Org alias or username; the sf CLI default org is used when unset"},
    )

    poll_interval: float = field(
        default=DEFAULT_POLL_INTERVAL,
        env_var="FLAGFORGE_POLL_INTERVAL",
        converter=parse_positive_float,
        metadata={"help": "Seconds between deploy status checks"},
    )

    api_version: str = field(
        default=DEFAULT_API_VERSION,
        env_var="FLAGFORGE_API_VERSION",
        metadata={"help": "Metadata API version used when creating settings objects"},
    )

    settings_capacity: int = field(
        default=DEFAULT_SETTINGS_CAPACITY,
        env_var="FLAGFORGE_SETTINGS_CAPACITY",
        converter=parse_capacity,
        metadata={"help": "Maximum number of flag fields per settings object"},
    )


# 🚩🧩🔚
