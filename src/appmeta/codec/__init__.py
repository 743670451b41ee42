#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Metadata encoders and decoders for APK and AAB containers."""

from __future__ import annotations

from appmeta.codec.base import MetadataCodec
from appmeta.codec.bundle import BundleMetadataCodec, BundleMetadataDecoder
from appmeta.codec.encoder import AppMetadataEncoder
from appmeta.codec.package import PackageMetadataCodec, PackageMetadataDecoder
from appmeta.codec.request import (
    EncodeRequest,
    KeyMaterial,
    MetadataLocator,
    ProvidedEncrypter,
    RawPublicKey,
    RecipientEncryption,
)

__all__ = [
    "AppMetadataEncoder",
    "BundleMetadataCodec",
    "BundleMetadataDecoder",
    "EncodeRequest",
    "KeyMaterial",
    "MetadataCodec",
    "MetadataLocator",
    "PackageMetadataCodec",
    "PackageMetadataDecoder",
    "ProvidedEncrypter",
    "RawPublicKey",
    "RecipientEncryption",
]

# 📦🏷️🔚
