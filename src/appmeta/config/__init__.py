#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""appmeta configuration: format constants and environment-driven runtime settings."""

from __future__ import annotations

from appmeta.config.runtime import AppMetaRuntimeConfig

__all__ = [
    "AppMetaRuntimeConfig",
]

# 📦🏷️🔚
