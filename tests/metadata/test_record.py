#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the metadata record model and its protobuf codec."""

from __future__ import annotations

import pytest

from appmeta.exceptions import MalformedRecordError
from appmeta.metadata.record import (
    MetadataEntry,
    MetadataMessage,
    MetadataRecord,
    deserialize_record,
    serialize_record,
)


class TestMetadataRecord:
    """Record construction helpers."""

    def test_from_mapping_preserves_order(self) -> None:
        record = MetadataRecord.from_mapping({"b": "2", "a": "1", "c": "3"})
        assert record.keys == ["b", "a", "c"]
        assert record.entries[0] == MetadataEntry("b", "2")

    def test_entries_are_converted_to_tuple(self) -> None:
        record = MetadataRecord([MetadataEntry("k", "v")])
        assert isinstance(record.entries, tuple)

    def test_with_version_returns_new_record(self) -> None:
        record = MetadataRecord.from_mapping({"k": "v"}, encoder_version="0.0.1")
        stamped = record.with_version("1.0.0")
        assert stamped.encoder_version == "1.0.0"
        assert record.encoder_version == "0.0.1"
        assert stamped.entries == record.entries

    def test_as_dict(self) -> None:
        assert MetadataRecord.from_mapping({"k": "v"}).as_dict() == {"k": "v"}


class TestRecordSerialization:
    """Protobuf wire encoding of records."""

    def test_serialized_bytes_match_schema(self) -> None:
        record = MetadataRecord.from_mapping({"app.version": "0.1.3"}, encoder_version="1.0.0")
        message = MetadataMessage()
        message.ParseFromString(serialize_record(record))

        assert message.app_metadata_encoder_version == "1.0.0"
        assert len(message.metadata_entries) == 1
        assert message.metadata_entries[0].key == "app.version"
        assert message.metadata_entries[0].value == "0.1.3"

    def test_deserialize_preserves_entries_and_version(self) -> None:
        record = MetadataRecord.from_mapping({"z": "", "a": "ünïcode"}, encoder_version="1.0.0")
        assert deserialize_record(serialize_record(record)) == record

    def test_serialization_is_deterministic(self) -> None:
        record = MetadataRecord.from_mapping({"a": "1", "b": "2"}, encoder_version="1.0.0")
        assert serialize_record(record) == serialize_record(record)

    def test_empty_record(self) -> None:
        assert serialize_record(MetadataRecord()) == b""
        assert deserialize_record(b"") == MetadataRecord()

    def test_unknown_fields_are_ignored(self) -> None:
        record = MetadataRecord.from_mapping({"k": "v"}, encoder_version="1.0.0")
        # Field 15, wire type 0 (varint), value 1.
        data = serialize_record(record) + bytes([(15 << 3) | 0, 1])
        assert deserialize_record(data) == record

    def test_malformed_bytes(self) -> None:
        with pytest.raises(MalformedRecordError, match="Failed to parse metadata proto"):
            deserialize_record(b"\x12\xff\xff\xff")


# 📦🏷️🔚
