#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Encodes metadata into an APK or AAB file."""

from __future__ import annotations

from attrs import evolve
from provide.foundation import logger

from appmeta.codec.base import MetadataCodec
from appmeta.codec.bundle import BundleMetadataCodec
from appmeta.codec.package import PackageMetadataCodec
from appmeta.codec.request import EncodeRequest
from appmeta.config.defaults import CURRENT_VERSION
from appmeta.exceptions import ValidationError
from appmeta.metadata.paths import ContainerKind


class AppMetadataEncoder:
    """Validates requests and dispatches them to the codec for the container kind."""

    def __init__(self, encoder_version: str = CURRENT_VERSION) -> None:
        self.encoder_version = encoder_version
        self._codecs: dict[ContainerKind, MetadataCodec] = {
            ContainerKind.BUNDLE: BundleMetadataCodec(),
            ContainerKind.PACKAGE: PackageMetadataCodec(),
        }

    def get_codec(self, kind: ContainerKind) -> MetadataCodec:
        return self._codecs[kind]

    def encode_in_place(self, request: EncodeRequest) -> None:
        """Validate the request, then append its record to the input file."""
        self.validate_request(request)
        self.encode_in_place_without_validations(request)

    def encode_in_place_without_validations(self, request: EncodeRequest) -> None:
        """Skip the input file checks. The codec still enforces the structural invariants."""
        request = self.stamp_version(request)
        kind = ContainerKind.from_path(request.input_file)
        self.get_codec(kind).encode(request)
        logger.info("Metadata successfully encoded", path=str(request.input_file.absolute()), type=request.type)

    def stamp_version(self, request: EncodeRequest) -> EncodeRequest:
        """Replace the caller's encoder version with this encoder's."""
        return evolve(request, record=request.record.with_version(self.encoder_version))

    def validate_request(self, request: EncodeRequest) -> None:
        """Check structural invariants before any container I/O.

        Raises:
            ValidationError: On the first violated invariant
        """
        logger.debug("Validating request", input=str(request.input_file), type=request.type)
        input_file = request.input_file
        if not input_file.exists():
            raise ValidationError(f"Input file does not exist at: {input_file.absolute()}.")
        kind = ContainerKind.from_path(input_file)
        self.get_codec(kind).check_request(request)


# 📦🏷️🔚
