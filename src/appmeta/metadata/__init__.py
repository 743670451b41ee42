#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Metadata record model, wire codec, compression and container path scheme."""

from __future__ import annotations

from appmeta.metadata.compression import compress, decompress
from appmeta.metadata.paths import (
    ContainerKind,
    bundle_metadata_path,
    metadata_path,
    package_metadata_path,
)
from appmeta.metadata.record import (
    MetadataEntry,
    MetadataRecord,
    deserialize_record,
    serialize_record,
)

__all__ = [
    "ContainerKind",
    "MetadataEntry",
    "MetadataRecord",
    "bundle_metadata_path",
    "compress",
    "decompress",
    "deserialize_record",
    "metadata_path",
    "package_metadata_path",
    "serialize_record",
]

# 📦🏷️🔚
