#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the appmeta CLI."""

from __future__ import annotations

from appmeta.commands.decode import decode_command
from appmeta.commands.encode import encode_command
from appmeta.commands.keygen import keygen_command
from appmeta.commands.notices import notices_command

__all__ = [
    "decode_command",
    "encode_command",
    "keygen_command",
    "notices_command",
]

# 📦🏷️🔚
