#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Encode command for the appmeta CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from appmeta.api import default_output_path, encode_metadata
from appmeta.codec import RecipientEncryption
from appmeta.config.defaults import SUPPORTED_SUFFIXES
from appmeta.console import get_command_logger
from appmeta.crypto.keys import read_key_material
from appmeta.exceptions import AppMetaError

# Get structured logger for this command
log = get_command_logger("encode")


def _split_pair(value: str, param_hint: str) -> tuple[str, str]:
    key, sep, rest = value.partition("=")
    if not sep:
        raise click.BadParameter(f"Expected <key>=<value>, got '{value}'.", param_hint=param_hint)
    return key, rest


def _collect_metadata(pairs: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated key=value flags. Repeating a key with the same value is allowed."""
    metadata: dict[str, str] = {}
    for pair in pairs:
        key, value = _split_pair(pair, "'--metadata'")
        existing = metadata.get(key)
        if existing is not None and existing != value:
            raise click.BadParameter(f"Duplicate key '{key}' in metadata is found.", param_hint="'--metadata'")
        metadata[key] = value
    return metadata


def _collect_encryptions(pairs: tuple[str, ...]) -> list[RecipientEncryption]:
    """Parse repeated owner=key_path flags and read each key file."""
    key_paths: dict[str, Path] = {}
    for pair in pairs:
        owner, raw_path = _split_pair(pair, "'--encryption'")
        key_path = Path(raw_path)
        existing = key_paths.get(owner)
        if existing is not None and existing != key_path:
            raise click.BadParameter(
                f"Duplicate encryption key owner '{owner}' in encryptions is found.",
                param_hint="'--encryption'",
            )
        key_paths[owner] = key_path

    encryptions = []
    for owner, key_path in key_paths.items():
        try:
            key_bytes = read_key_material(key_path)
        except OSError as e:
            raise click.BadParameter(
                f"Failed to read the encryption key from file: {key_path}.", param_hint="'--encryption'"
            ) from e
        encryptions.append(RecipientEncryption.from_key_bytes(owner, key_bytes))
    return encryptions


@click.command("encode")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True, path_type=Path),
    required=True,
)
@click.option(
    "--metadata",
    "metadata_pairs",
    multiple=True,
    required=True,
    help="Metadata entry as <key>=<value>. Repeat for several entries, e.g. --metadata=app.version=0.1.3",
)
@click.option(
    "--type",
    "metadata_type",
    required=True,
    help="The type of the metadata (e.g. drm).",
)
@click.option(
    "--encryption",
    "encryption_pairs",
    multiple=True,
    help="[APK only] <encryption_key_owner>=<encryption_key_path>, e.g. --encryption=com.sample.store=/path/to/key.pem",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file. Defaults to the input name with '-out' before the extension.",
)
def encode_command(
    input_file: Path,
    metadata_pairs: tuple[str, ...],
    metadata_type: str,
    encryption_pairs: tuple[str, ...],
    output: Path | None,
) -> None:
    """Encodes metadata into a copy of an APK or AAB."""
    if input_file.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise click.BadParameter("Input file must be either an APK or AAB.", param_hint="'INPUT_FILE'")

    metadata = _collect_metadata(metadata_pairs)
    encryptions = _collect_encryptions(encryption_pairs)
    output_file = output or default_output_path(input_file)
    log.debug(
        "Encoding metadata",
        input=str(input_file),
        output=str(output_file),
        type=metadata_type,
        entries=len(metadata),
        recipients=len(encryptions),
    )

    try:
        result = encode_metadata(input_file, metadata, metadata_type, encryptions, output_file=output_file)
    except AppMetaError as e:
        log.error("Encoding failed", error=str(e), input=str(input_file), type=metadata_type)
        perr(f"❌ Encoding failed: {e}")
        raise click.Abort() from e

    log.info("Metadata encoded", output=str(result), type=metadata_type)
    pout(f"✅ Metadata of type '{metadata_type}' encoded into '{result}'.")


# 📦🏷️🔚
