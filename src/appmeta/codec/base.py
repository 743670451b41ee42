#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared interface of the per-container-kind metadata codecs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from appmeta.archive import ZipContainer
from appmeta.codec.request import EncodeRequest, MetadataLocator
from appmeta.metadata.paths import ContainerKind
from appmeta.metadata.record import MetadataRecord
from appmeta.metadata.validation import check_unique_keys, validate_path_segment


class MetadataCodec(ABC):
    """Encodes records into, and decodes records from, one kind of container."""

    kind: ClassVar[ContainerKind]

    def check_request(self, request: EncodeRequest) -> None:
        """Check the structural invariants of `request` for this container kind.

        Runs before the container is touched, whichever entry point is used.

        Raises:
            ValidationError: On the first violated invariant
        """
        validate_path_segment(request.type, "type")
        check_unique_keys(request.record.keys)

    def encode(self, request: EncodeRequest) -> None:
        """Open the request's container for appending and encode into it."""
        self.check_request(request)
        with ZipContainer.open(request.input_file, writable=True) as container:
            self.write_entries(container, request)

    def encode_into(self, container: ZipContainer, request: EncodeRequest) -> None:
        """Append the request's record to an already open container."""
        self.check_request(request)
        self.write_entries(container, request)

    @abstractmethod
    def write_entries(self, container: ZipContainer, request: EncodeRequest) -> None:
        """Append the entries for an already checked request."""

    @abstractmethod
    def decode(self, container: ZipContainer, locator: MetadataLocator) -> MetadataRecord | None:
        """Return the located record, or None when the container holds none."""


# 📦🏷️🔚
