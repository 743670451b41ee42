#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Metadata record model and its protobuf wire codec.

The schema is registered in a private descriptor pool at import time:

    message Metadata {
      string app_metadata_encoder_version = 1;
      repeated MetadataEntry metadata_entries = 2;
    }
    message MetadataEntry {
      string key = 1;
      string value = 2;
    }

Unknown fields are ignored on parse so newer writers stay readable.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from attrs import evolve, field, frozen
from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import DecodeError

from appmeta.exceptions import MalformedRecordError

_PROTO_PACKAGE = "appmeta.v1"
_FieldProto = descriptor_pb2.FieldDescriptorProto


def _build_schema() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="appmeta/v1/metadata.proto",
        package=_PROTO_PACKAGE,
        syntax="proto3",
    )

    entry = file_proto.message_type.add(name="MetadataEntry")
    entry.field.add(name="key", number=1, type=_FieldProto.TYPE_STRING, label=_FieldProto.LABEL_OPTIONAL)
    entry.field.add(name="value", number=2, type=_FieldProto.TYPE_STRING, label=_FieldProto.LABEL_OPTIONAL)

    metadata = file_proto.message_type.add(name="Metadata")
    metadata.field.add(
        name="app_metadata_encoder_version",
        number=1,
        type=_FieldProto.TYPE_STRING,
        label=_FieldProto.LABEL_OPTIONAL,
    )
    metadata.field.add(
        name="metadata_entries",
        number=2,
        type=_FieldProto.TYPE_MESSAGE,
        label=_FieldProto.LABEL_REPEATED,
        type_name=f".{_PROTO_PACKAGE}.MetadataEntry",
    )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_schema().SerializeToString())

MetadataMessage: Any = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{_PROTO_PACKAGE}.Metadata"))


@frozen
class MetadataEntry:
    """One key/value pair of a metadata record."""

    key: str
    value: str


def _to_entries(entries: Iterable[MetadataEntry]) -> tuple[MetadataEntry, ...]:
    return tuple(entries)


@frozen
class MetadataRecord:
    """A versioned, ordered list of metadata entries.

    `encoder_version` is informational on input: encoders overwrite it with
    the running encoder's version before writing.
    """

    entries: tuple[MetadataEntry, ...] = field(factory=tuple, converter=_to_entries)
    encoder_version: str = ""

    @classmethod
    def from_mapping(cls, values: Mapping[str, str], encoder_version: str = "") -> MetadataRecord:
        """Build a record from a mapping, preserving its iteration order."""
        return cls(
            entries=tuple(MetadataEntry(key, value) for key, value in values.items()),
            encoder_version=encoder_version,
        )

    @property
    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]

    def as_dict(self) -> dict[str, str]:
        return {entry.key: entry.value for entry in self.entries}

    def with_version(self, encoder_version: str) -> MetadataRecord:
        return evolve(self, encoder_version=encoder_version)


def serialize_record(record: MetadataRecord) -> bytes:
    """Encode a record to protobuf bytes, preserving entry order."""
    message = MetadataMessage(app_metadata_encoder_version=record.encoder_version)
    for entry in record.entries:
        message.metadata_entries.add(key=entry.key, value=entry.value)
    data: bytes = message.SerializeToString(deterministic=True)
    return data


def deserialize_record(data: bytes) -> MetadataRecord:
    """Decode protobuf bytes into a record.

    Raises:
        MalformedRecordError: If the bytes do not parse as the metadata schema
    """
    message = MetadataMessage()
    try:
        message.ParseFromString(data)
    except DecodeError as e:
        raise MalformedRecordError(f"Failed to parse metadata proto: {e}") from e

    return MetadataRecord(
        entries=tuple(MetadataEntry(entry.key, entry.value) for entry in message.metadata_entries),
        encoder_version=message.app_metadata_encoder_version,
    )


# 📦🏷️🔚
