#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Hybrid encryption for package metadata and key tooling."""

from __future__ import annotations

from appmeta.crypto.hybrid import (
    Decrypter,
    Encrypter,
    HybridDecrypter,
    HybridEncrypter,
    derive_encrypter,
    ensure_initialized,
)
from appmeta.crypto.keys import generate_key_pair, load_private_key, load_public_key_raw

__all__ = [
    "Decrypter",
    "Encrypter",
    "HybridDecrypter",
    "HybridEncrypter",
    "derive_encrypter",
    "ensure_initialized",
    "generate_key_pair",
    "load_private_key",
    "load_public_key_raw",
]

# 📦🏷️🔚
