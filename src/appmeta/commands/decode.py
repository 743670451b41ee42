#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Decode command for the appmeta CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from appmeta.api import decode_metadata
from appmeta.config import AppMetaRuntimeConfig
from appmeta.console import get_command_logger
from appmeta.crypto.keys import load_private_key
from appmeta.exceptions import AppMetaError
from appmeta.metadata.record import MetadataRecord

# Get structured logger for this command
log = get_command_logger("decode")


@click.command("decode")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True, path_type=Path),
    required=True,
)
@click.option("--type", "metadata_type", required=True, help="The type of the metadata to read.")
@click.option("--owner", default=None, help="[APK only] Encryption key owner the metadata was encrypted for.")
@click.option(
    "--private-key",
    "private_key_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="[APK only] X25519 private key (PEM) of the owner.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the record as JSON.")
@click.pass_context
def decode_command(
    ctx: click.Context,
    input_file: Path,
    metadata_type: str,
    owner: str | None,
    private_key_path: Path | None,
    as_json: bool,
) -> None:
    """Reads metadata from an APK or AAB."""
    config = (ctx.obj or {}).get("config") or AppMetaRuntimeConfig.from_env()
    log.debug("Decoding metadata", input=str(input_file), type=metadata_type, owner=owner)

    try:
        private_key = load_private_key(private_key_path) if private_key_path else None
        record = decode_metadata(
            input_file,
            metadata_type,
            owner_id=owner,
            private_key=private_key,
            max_decompressed_size=config.max_decompressed_size,
        )
    except (AppMetaError, ValueError) as e:
        log.error("Decoding failed", error=str(e), input=str(input_file), type=metadata_type)
        perr(f"❌ Decoding failed: {e}")
        raise click.Abort() from e

    if record is None:
        log.info("No metadata found", type=metadata_type, owner=owner)
        pout(f"No metadata of type '{metadata_type}' found in '{input_file.name}'.")
        return

    _display_record(record, as_json)


def _display_record(record: MetadataRecord, as_json: bool) -> None:
    if as_json:
        pout(json_dumps({"encoder_version": record.encoder_version, "entries": record.as_dict()}, indent=2))
        return
    pout(f"Encoder version: {record.encoder_version}")
    for entry in record.entries:
        pout(f"  {entry.key}={entry.value}")


# 📦🏷️🔚
