#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Key generation command: X25519 key pairs for APK metadata recipients."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from appmeta.config.defaults import PRIVATE_KEY_FILENAME, PUBLIC_KEY_FILENAME
from appmeta.console import get_command_logger
from appmeta.crypto.keys import generate_key_pair
from appmeta.exceptions import CryptoError

log = get_command_logger("keygen")


@click.command("keygen")
@click.option(
    "--out-dir",
    default="keys",
    type=click.Path(file_okay=False, writable=True, resolve_path=True, path_type=Path),
    help="Directory for appmeta-private.key and appmeta-public.key.",
)
@click.option("--force", is_flag=True, help="Replace a key pair already present in the directory.")
def keygen_command(out_dir: Path, force: bool) -> None:
    """Creates a recipient key pair for encrypted APK metadata.

    Hand the public key to whoever encodes (`encode --encryption owner=<public key>`)
    and keep the private key for `decode --private-key`.
    """
    existing = [name for name in (PRIVATE_KEY_FILENAME, PUBLIC_KEY_FILENAME) if (out_dir / name).exists()]
    if existing and not force:
        log.warning("Refusing to replace key files", out_dir=str(out_dir), existing=existing)
        perr(f"❌ Key files already exist in '{out_dir}': {', '.join(existing)}. Use --force to replace.")
        raise click.Abort()

    try:
        private_path, public_path = generate_key_pair(out_dir)
    except CryptoError as e:
        log.error("Key pair generation failed", error=str(e), out_dir=str(out_dir))
        perr(f"❌ Could not create key pair: {e}")
        raise click.Abort() from e

    pout(f"🔑 Private key (keep secret): {private_path}")
    pout(f"📤 Public key (share with encoders): {public_path}")


# 📦🏷️🔚
