#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for embedding and reading app metadata."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

from cryptography.hazmat.primitives.asymmetric import x25519
from provide.foundation import logger
from provide.foundation.file import safe_copy

from appmeta.codec import (
    AppMetadataEncoder,
    BundleMetadataDecoder,
    EncodeRequest,
    PackageMetadataDecoder,
    RecipientEncryption,
)
from appmeta.config.defaults import DEFAULT_OUTPUT_INFIX
from appmeta.crypto.hybrid import Decrypter
from appmeta.exceptions import ValidationError
from appmeta.metadata.paths import ContainerKind
from appmeta.metadata.record import MetadataRecord


def encode_metadata(
    input_file: Path,
    metadata: MetadataRecord | Mapping[str, str],
    type: str,
    encryptions: Sequence[RecipientEncryption] = (),
    output_file: Path | None = None,
) -> Path:
    """Embed a metadata record into an APK or AAB.

    Without `output_file` the input container is modified in place. With it,
    the input is copied to `output_file` first and only the copy is modified;
    the copy is removed again if encoding fails.

    Args:
        input_file: APK or AAB to embed into
        metadata: Record, or a mapping of keys to values
        type: Metadata type; selects the slot and is the encryption context
        encryptions: Recipients (APK only, at least one)
        output_file: Optional destination for a modified copy

    Returns:
        Path of the container that now holds the metadata

    Raises:
        ValidationError: If the request or the output path is invalid
        AlreadyExistsError: If metadata of this type (and owner) is already present
        CryptoError: If encryption fails

    Example:
        ```python
        from pathlib import Path
        from appmeta import RecipientEncryption, encode_metadata

        encode_metadata(
            Path("app.apk"),
            {"app.version": "0.1.3"},
            type="drm",
            encryptions=[RecipientEncryption.from_key_bytes("com.sample.store", key_bytes)],
            output_file=Path("app-out.apk"),
        )
        ```
    """
    record = metadata if isinstance(metadata, MetadataRecord) else MetadataRecord.from_mapping(metadata)
    request = EncodeRequest(input_file=input_file, record=record, type=type, encryptions=encryptions)
    encoder = AppMetadataEncoder()
    encoder.validate_request(request)

    if output_file is None:
        encoder.encode_in_place_without_validations(request)
        return request.input_file

    output_file = Path(output_file)
    validate_output_file(output_file, request.input_file)
    safe_copy(request.input_file, output_file, preserve_mode=True, overwrite=False)
    finished = False
    try:
        encoder.encode_in_place_without_validations(EncodeRequest(output_file, record, type, request.encryptions))
        finished = True
    finally:
        if not finished and output_file.exists():
            logger.debug("Removing partially encoded output", output=str(output_file))
            output_file.unlink()
    return output_file


def decode_metadata(
    input_file: Path,
    type: str,
    owner_id: str | None = None,
    private_key: Decrypter | x25519.X25519PrivateKey | None = None,
    max_decompressed_size: int | None = None,
) -> MetadataRecord | None:
    """Read a metadata record from an APK or AAB.

    APKs require the encryption key owner and its private key (or decrypter).
    `max_decompressed_size` overrides the decompression bound for APK records.

    Returns:
        The record, or None if the container holds no metadata for the locator
    """
    input_file = Path(input_file)
    kind = ContainerKind.from_path(input_file)
    if kind is ContainerKind.BUNDLE:
        return BundleMetadataDecoder().decode(input_file, type)

    if owner_id is None or private_key is None:
        raise ValidationError("Decoding APK metadata requires an encryption key owner and a private key.")
    return PackageMetadataDecoder(max_decompressed_size).decode(input_file, type, owner_id, private_key)


def default_output_path(input_file: Path) -> Path:
    """Augment the input name with '-out' before the suffix: app.apk -> app-out.apk."""
    return input_file.with_name(f"{input_file.stem}{DEFAULT_OUTPUT_INFIX}{input_file.suffix}")


def validate_output_file(output_file: Path, input_file: Path) -> None:
    """Reject output paths that would overwrite anything or change the container kind."""
    if output_file.absolute() == input_file.absolute():
        raise ValidationError("Input path cannot be the same as output path.")
    try:
        ContainerKind.from_path(output_file)
    except ValidationError as e:
        raise ValidationError(f"Output file '{output_file.name}' must be either an APK or AAB.") from e
    if output_file.suffix.lower() != input_file.suffix.lower():
        raise ValidationError("Input and output files must have the same file extension (.apk or .aab).")
    if output_file.exists():
        raise ValidationError(f"Output file at '{output_file.absolute()}' already exists.")


# 📦🏷️🔚
