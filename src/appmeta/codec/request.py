#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Encode requests, recipient descriptors and decode locators."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from attrs import field, frozen

from appmeta.crypto.hybrid import Decrypter, Encrypter
from appmeta.metadata.record import MetadataRecord


@frozen
class RawPublicKey:
    """Public key bytes (raw X25519, DER or PEM) to derive an encrypter from."""

    key_bytes: bytes = field(repr=False)


@frozen
class ProvidedEncrypter:
    """A ready-made encrypter supplied by the caller."""

    encrypter: Encrypter


KeyMaterial = RawPublicKey | ProvidedEncrypter


@frozen
class RecipientEncryption:
    """One party a package record is encrypted for.

    `owner_id` is expected in reverse-domain form (e.g. `com.sample.store`).
    """

    owner_id: str
    key_material: KeyMaterial

    @classmethod
    def from_key_bytes(cls, owner_id: str, key_bytes: bytes) -> RecipientEncryption:
        return cls(owner_id, RawPublicKey(bytes(key_bytes)))

    @classmethod
    def from_encrypter(cls, owner_id: str, encrypter: Encrypter) -> RecipientEncryption:
        return cls(owner_id, ProvidedEncrypter(encrypter))


def _to_recipients(values: Iterable[RecipientEncryption]) -> tuple[RecipientEncryption, ...]:
    return tuple(values)


@frozen
class EncodeRequest:
    """Everything needed to embed one record into one container."""

    input_file: Path = field(converter=Path)
    record: MetadataRecord
    type: str
    encryptions: tuple[RecipientEncryption, ...] = field(factory=tuple, converter=_to_recipients)


@frozen
class MetadataLocator:
    """Addresses one stored record: by type for bundles, by type and owner for packages."""

    type: str
    owner_id: str | None = None
    decrypter: Decrypter | None = field(default=None, repr=False)


# 📦🏷️🔚
