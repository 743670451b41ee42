#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""appmeta core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from appmeta.api import decode_metadata, encode_metadata
from appmeta.codec import (
    AppMetadataEncoder,
    BundleMetadataDecoder,
    EncodeRequest,
    PackageMetadataDecoder,
    RecipientEncryption,
)
from appmeta.exceptions import (
    AlreadyExistsError,
    AppMetaError,
    DecryptionError,
    ValidationError,
)
from appmeta.metadata import MetadataEntry, MetadataRecord

__version__ = get_version("appmeta", caller_file=__file__)

__all__ = [
    "AlreadyExistsError",
    "AppMetaError",
    "AppMetadataEncoder",
    "BundleMetadataDecoder",
    "DecryptionError",
    "EncodeRequest",
    "MetadataEntry",
    "MetadataRecord",
    "PackageMetadataDecoder",
    "RecipientEncryption",
    "ValidationError",
    "__version__",
    "decode_metadata",
    "encode_metadata",
]

# 📦🏷️🔚
