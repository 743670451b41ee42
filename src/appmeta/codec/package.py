#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Metadata codec for APK packages: one compressed, encrypted entry per recipient.

Each entry is `encrypt(compress(serialize(record)), recipient, context=type)`
stored without container compression. Using the type as the authenticated
context means a ciphertext written for one type never opens as another.
"""

from __future__ import annotations

from pathlib import Path

from cryptography.hazmat.primitives.asymmetric import x25519
from provide.foundation import logger

from appmeta.archive import CompressionHint, ZipContainer
from appmeta.codec.base import MetadataCodec
from appmeta.codec.request import (
    EncodeRequest,
    MetadataLocator,
    ProvidedEncrypter,
    RawPublicKey,
    RecipientEncryption,
)
from appmeta.crypto.hybrid import Decrypter, Encrypter, as_decrypter, decrypt, encrypt
from appmeta.exceptions import AlreadyExistsError, ValidationError
from appmeta.metadata.compression import compress, decompress
from appmeta.metadata.paths import ContainerKind, package_metadata_path
from appmeta.metadata.record import MetadataRecord, deserialize_record, serialize_record
from appmeta.metadata.validation import check_unique_owners, validate_path_segment


def _check_key_material(encryption: RecipientEncryption) -> None:
    material = encryption.key_material
    if isinstance(material, RawPublicKey):
        if not material.key_bytes:
            raise ValidationError(
                f"Encryption key with encryption key owner of '{encryption.owner_id}' does not exist."
            )
    elif isinstance(material, ProvidedEncrypter):
        if not isinstance(material.encrypter, Encrypter):
            raise ValidationError(
                f"Encrypter for encryption key owner '{encryption.owner_id}' has no encrypt(plaintext, context)."
            )
    else:
        raise ValidationError(
            f"Encryption for owner '{encryption.owner_id}' must carry public key bytes or an encrypter, "
            f"got {type(material).__name__}."
        )


class PackageMetadataCodec(MetadataCodec):
    """Encodes metadata into an APK file."""

    kind = ContainerKind.PACKAGE

    def __init__(self, max_decompressed_size: int | None = None) -> None:
        self.max_decompressed_size = max_decompressed_size

    def check_request(self, request: EncodeRequest) -> None:
        super().check_request(request)
        if not request.encryptions:
            raise ValidationError("At least one Encryption object must be provided.")
        for encryption in request.encryptions:
            validate_path_segment(encryption.owner_id, "encryptionKeyOwner")
            _check_key_material(encryption)
        check_unique_owners(encryption.owner_id for encryption in request.encryptions)

    def write_entries(self, container: ZipContainer, request: EncodeRequest) -> None:
        logger.info("Encoding metadata into APK", type=request.type, recipients=len(request.encryptions))

        # Check every target first so a conflict aborts before anything is appended.
        paths = [package_metadata_path(request.type, enc.owner_id) for enc in request.encryptions]
        for encryption, path in zip(request.encryptions, paths, strict=True):
            if container.has_entry(path):
                raise AlreadyExistsError(request.type, encryption.owner_id)

        prepared = self.prepare_metadata(request)
        for encryption, path in zip(request.encryptions, paths, strict=True):
            container.append_entry(path, prepared[encryption.owner_id], CompressionHint.NONE)
            logger.debug("Appended encrypted metadata", type=request.type, owner=encryption.owner_id, path=path)

    def prepare_metadata(self, request: EncodeRequest) -> dict[str, bytes]:
        """Compress and encrypt the record once per recipient, keyed by owner id."""
        compressed = compress(serialize_record(request.record))
        return {
            encryption.owner_id: encrypt(compressed, encryption, context=request.type)
            for encryption in request.encryptions
        }

    def decode(self, container: ZipContainer, locator: MetadataLocator) -> MetadataRecord | None:
        if locator.owner_id is None or locator.decrypter is None:
            raise ValidationError("Decoding APK metadata requires an encryption key owner and a decrypter.")

        path = package_metadata_path(locator.type, locator.owner_id)
        if not container.has_entry(path):
            logger.debug("No package metadata for type and owner", type=locator.type, owner=locator.owner_id)
            return None
        return self.decode_bytes(container.read_entry(path), locator.type, locator.decrypter)

    def decode_bytes(self, encoded: bytes, type: str, decrypter: Decrypter) -> MetadataRecord:
        """Reverse the package transform on the bytes of one entry.

        Raises:
            DecryptionError: If the key or the type does not match the entry
            DecompressionError: If the decrypted bytes are not a valid deflate stream
            MalformedRecordError: If the decompressed bytes do not parse
        """
        plaintext = decrypt(encoded, decrypter, context=type)
        if self.max_decompressed_size is None:
            serialized = decompress(plaintext)
        else:
            serialized = decompress(plaintext, max_size=self.max_decompressed_size)
        return deserialize_record(serialized)


class PackageMetadataDecoder:
    """Extracts metadata added with the tool from an APK."""

    def __init__(self, max_decompressed_size: int | None = None) -> None:
        self._codec = PackageMetadataCodec(max_decompressed_size)

    def decode(
        self,
        source: Path | ZipContainer,
        type: str,
        owner_id: str,
        decrypter: Decrypter | x25519.X25519PrivateKey,
    ) -> MetadataRecord | None:
        """Read the record of `type` encrypted for `owner_id`.

        Args:
            source: APK file path or an open container
            type: Metadata type, also the decryption context
            owner_id: Encryption key owner the entry was written for
            decrypter: The owner's decrypter or X25519 private key

        Returns:
            The record, or None if the package holds no entry for this type and owner
        """
        locator = MetadataLocator(type, owner_id, as_decrypter(decrypter))
        if isinstance(source, ZipContainer):
            return self._codec.decode(source, locator)
        with ZipContainer.open(Path(source)) as container:
            return self._codec.decode(container, locator)

    def decode_bytes(
        self, encoded: bytes, type: str, decrypter: Decrypter | x25519.X25519PrivateKey
    ) -> MetadataRecord:
        """Decode the raw bytes of one package metadata entry."""
        return self._codec.decode_bytes(encoded, type, as_decrypter(decrypter))


# 📦🏷️🔚
