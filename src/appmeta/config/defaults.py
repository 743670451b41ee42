#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for appmeta configuration."""

from __future__ import annotations

# =================================
# Encoder version
# =================================
# Stamped into every record at write time; the caller's value is discarded.
CURRENT_VERSION = "1.0.0"

# =================================
# Container layout
# =================================
# These paths are a persisted on-disk contract. Changing any of them breaks
# decoding of containers written by earlier releases.
METADATA_NAMESPACE = "com.android.metadata"
BUNDLE_METADATA_ROOT = "BUNDLE-METADATA"
PACKAGE_METADATA_ROOT = "META-INF"
BUNDLE_METADATA_FILE = "metadata.pb"
PACKAGE_METADATA_FILE = "metadata.bin"

PACKAGE_SUFFIX = ".apk"
BUNDLE_SUFFIX = ".aab"
SUPPORTED_SUFFIXES = (PACKAGE_SUFFIX, BUNDLE_SUFFIX)

# =================================
# Path segment validation
# =================================
MAX_SEGMENT_LENGTH = 255
FORBIDDEN_SEGMENT_CHARS = ("/", "\\", "\x00")
FORBIDDEN_SEGMENTS = (".", "..")

# =================================
# Compression defaults
# =================================
DEFAULT_COMPRESSION_LEVEL = 9  # zlib best compression
CONTAINER_COMPRESSION_LEVEL = 9
MAX_DECOMPRESSED_SIZE = 16 * 1024 * 1024  # 16 MiB
DECOMPRESS_CHUNK_SIZE = 64 * 1024

# =================================
# Hybrid cipher defaults
# =================================
HYBRID_SCHEME_VERSION = 1
HYBRID_HKDF_INFO = b"appmeta-hybrid-v1"
X25519_KEY_SIZE = 32
AES_KEY_SIZE = 32
AES_GCM_NONCE_SIZE = 12
AES_GCM_TAG_SIZE = 16

# =================================
# Key file defaults
# =================================
PRIVATE_KEY_FILENAME = "appmeta-private.key"
PUBLIC_KEY_FILENAME = "appmeta-public.key"
DEFAULT_FILE_PERMS = 0o600  # Read/write for owner only
DEFAULT_PUBLIC_FILE_PERMS = 0o644

# =================================
# CLI defaults
# =================================
DEFAULT_OUTPUT_INFIX = "-out"
NOTICES_RESOURCE_NAME = "THIRD_PARTY_NOTICES"

# 📦🏷️🔚
