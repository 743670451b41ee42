#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""appmeta runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from appmeta.config.defaults import MAX_DECOMPRESSED_SIZE

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_size(value: int | str) -> int:
    """Parse a positive byte count."""
    size = int(value)
    if size <= 0:
        raise ValueError(f"Size must be positive: {value}")
    return size


@define
class AppMetaRuntimeConfig(RuntimeConfig):
    """appmeta runtime configuration for CLI startup."""

    log_level: str = field(
        default="WARNING",
        env_var="APPMETA_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for appmeta operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    max_decompressed_size: int = field(
        default=MAX_DECOMPRESSED_SIZE,
        env_var="APPMETA_MAX_DECOMPRESSED_SIZE",
        converter=parse_size,
        metadata={"help": "Upper bound in bytes for a decompressed metadata record"},
    )
