#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Entry path scheme for metadata stored inside APK and AAB containers.

Paths produced here are part of the on-disk format. Bundles hold one entry
per type; packages hold one encrypted entry per (type, owner) pair:

    BUNDLE-METADATA/<namespace>/<type>/metadata.pb
    META-INF/<namespace>/<type>/<owner_id>/metadata.bin
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from appmeta.config.defaults import (
    BUNDLE_METADATA_FILE,
    BUNDLE_METADATA_ROOT,
    BUNDLE_SUFFIX,
    METADATA_NAMESPACE,
    PACKAGE_METADATA_FILE,
    PACKAGE_METADATA_ROOT,
    PACKAGE_SUFFIX,
)
from appmeta.exceptions import ValidationError
from appmeta.metadata.validation import validate_path_segment


class ContainerKind(Enum):
    """The two container formats metadata can be embedded into."""

    BUNDLE = "aab"  # store-distribution bundle, unencrypted
    PACKAGE = "apk"  # device-installable package, encrypted per recipient

    @property
    def suffix(self) -> str:
        return BUNDLE_SUFFIX if self is ContainerKind.BUNDLE else PACKAGE_SUFFIX

    @classmethod
    def from_path(cls, path: Path) -> ContainerKind:
        """Select the container kind from the file suffix."""
        suffix = path.suffix.lower()
        if suffix == BUNDLE_SUFFIX:
            return cls.BUNDLE
        if suffix == PACKAGE_SUFFIX:
            return cls.PACKAGE
        raise ValidationError(f"Input file '{path.name}' must be either an APK or AAB.")


def bundle_metadata_path(type: str, namespace: str = METADATA_NAMESPACE) -> str:
    """Path of the metadata entry of `type` inside a bundle."""
    validate_path_segment(type, "type")
    return f"{BUNDLE_METADATA_ROOT}/{namespace}/{type}/{BUNDLE_METADATA_FILE}"


def package_metadata_path(type: str, owner_id: str, namespace: str = METADATA_NAMESPACE) -> str:
    """Path of the metadata entry of `type` encrypted for `owner_id` inside a package."""
    validate_path_segment(type, "type")
    validate_path_segment(owner_id, "encryptionKeyOwner")
    return f"{PACKAGE_METADATA_ROOT}/{namespace}/{type}/{owner_id}/{PACKAGE_METADATA_FILE}"


def metadata_path(kind: ContainerKind, type: str, owner_id: str | None = None) -> str:
    """Dispatch to the path form of `kind`. Packages require an owner id."""
    if kind is ContainerKind.BUNDLE:
        if owner_id is not None:
            raise ValidationError("Bundle metadata is not scoped to an encryption key owner.")
        return bundle_metadata_path(type)
    if owner_id is None:
        raise ValidationError("'encryptionKeyOwner' must be provided a value.")
    return package_metadata_path(type, owner_id)


# 📦🏷️🔚
