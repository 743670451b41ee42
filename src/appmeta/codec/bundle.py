#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Metadata codec for AAB bundles: one unencrypted protobuf entry per type."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger

from appmeta.archive import CompressionHint, ZipContainer
from appmeta.codec.base import MetadataCodec
from appmeta.codec.request import EncodeRequest, MetadataLocator
from appmeta.exceptions import AlreadyExistsError, ValidationError
from appmeta.metadata.paths import ContainerKind, bundle_metadata_path
from appmeta.metadata.record import MetadataRecord, deserialize_record, serialize_record


class BundleMetadataCodec(MetadataCodec):
    """Encodes metadata into an AAB file."""

    kind = ContainerKind.BUNDLE

    def check_request(self, request: EncodeRequest) -> None:
        super().check_request(request)
        if request.encryptions:
            raise ValidationError("Encryptions are only supported for APKs.")

    def write_entries(self, container: ZipContainer, request: EncodeRequest) -> None:
        logger.info("Encoding metadata into AAB", type=request.type)
        path = bundle_metadata_path(request.type)
        if container.has_entry(path):
            raise AlreadyExistsError(request.type)

        # The container deflates the entry; no application-level compression.
        container.append_entry(path, serialize_record(request.record), CompressionHint.BEST)

    def decode(self, container: ZipContainer, locator: MetadataLocator) -> MetadataRecord | None:
        path = bundle_metadata_path(locator.type)
        if not container.has_entry(path):
            logger.debug("No bundle metadata of type", type=locator.type)
            return None
        return deserialize_record(container.read_entry(path))


class BundleMetadataDecoder:
    """Extracts metadata added with the tool from an AAB."""

    def __init__(self) -> None:
        self._codec = BundleMetadataCodec()

    def decode(self, source: Path | ZipContainer, type: str) -> MetadataRecord | None:
        """Read the record of `type` from an AAB file or an open container.

        Returns:
            The record, or None if the bundle holds no metadata of this type

        Raises:
            ArchiveError: If the file cannot be opened as a container
            MalformedRecordError: If the stored bytes do not parse
        """
        locator = MetadataLocator(type)
        if isinstance(source, ZipContainer):
            return self._codec.decode(source, locator)
        with ZipContainer.open(Path(source)) as container:
            return self._codec.decode(container, locator)


# 📦🏷️🔚
