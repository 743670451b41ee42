#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for appmeta."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class AppMetaError(FoundationError):
    """Base exception for all appmeta errors."""

    pass


class ValidationError(AppMetaError):
    """Raised when an encode request fails validation, before any I/O."""

    pass


class AlreadyExistsError(AppMetaError):
    """Raised when the target metadata entry is already present in the container."""

    def __init__(self, type: str, owner_id: str | None = None) -> None:
        if owner_id is None:
            message = f"Metadata of type '{type}' already exists."
        else:
            message = f"Metadata of type '{type}' and owner '{owner_id}' already exists."
        super().__init__(message)
        self.type = type
        self.owner_id = owner_id


class CryptoError(AppMetaError):
    """Raised for cryptographic errors."""

    pass


class KeyMaterialInvalidError(CryptoError):
    """Raised when raw key bytes cannot be parsed as a public key."""

    pass


class EncryptionError(CryptoError):
    """Raised when the hybrid cipher fails to encrypt."""

    pass


class DecryptionError(CryptoError):
    """Raised on authentication failure: wrong private key or wrong context."""

    pass


class CodecError(AppMetaError):
    """Raised when stored metadata bytes cannot be decoded."""

    pass


class MalformedRecordError(CodecError):
    """Raised when bytes do not parse as a metadata record."""

    pass


class DecompressionError(CodecError):
    """Raised on corrupt, truncated or oversized compressed data."""

    pass


class ArchiveError(AppMetaError):
    """Raised for container I/O failures."""

    pass


class EntryNotFoundError(ArchiveError):
    """Raised when reading an entry path that is not in the container."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Entry not found in container: {path}")
        self.path = path


# 📦🏷️🔚
