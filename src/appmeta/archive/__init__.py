#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Container access for APK and AAB archives."""

from __future__ import annotations

from appmeta.archive.zip_container import CompressionHint, ZipContainer

__all__ = [
    "CompressionHint",
    "ZipContainer",
]

# 📦🏷️🔚
