#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""X25519 key pair generation and key-file loading for metadata encryption."""

from __future__ import annotations

from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed25519, rsa, x25519
from provide.foundation import logger
from provide.foundation.file import atomic_write
from provide.foundation.file.directory import ensure_dir

from appmeta.config.defaults import (
    DEFAULT_FILE_PERMS,
    DEFAULT_PUBLIC_FILE_PERMS,
    PRIVATE_KEY_FILENAME,
    PUBLIC_KEY_FILENAME,
)
from appmeta.exceptions import CryptoError

_RECOVERY_HINT = "X25519 is required for metadata encryption. Generate a new key pair with 'appmeta keygen'."


def _key_type_name(key: object) -> str:
    if isinstance(key, (rsa.RSAPrivateKey, rsa.RSAPublicKey)):
        return "RSA"
    if isinstance(key, (ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey)):
        return "EC"
    if isinstance(key, (dsa.DSAPrivateKey, dsa.DSAPublicKey)):
        return "DSA"
    if isinstance(key, (ed25519.Ed25519PrivateKey, ed25519.Ed25519PublicKey)):
        return "Ed25519"
    return type(key).__name__


def generate_key_pair(output_dir: Path) -> tuple[Path, Path]:
    """Generate an X25519 key pair and write it as PEM files.

    Args:
        output_dir: Directory for the key files (created if missing)

    Returns:
        Tuple of (private_key_path, public_key_path)

    Raises:
        CryptoError: If the key files cannot be written
    """
    ensure_dir(output_dir)
    private_path = output_dir / PRIVATE_KEY_FILENAME
    public_path = output_dir / PUBLIC_KEY_FILENAME

    private_key = x25519.X25519PrivateKey.generate()
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )

    try:
        atomic_write(private_path, private_pem)
        private_path.chmod(DEFAULT_FILE_PERMS)
        atomic_write(public_path, public_pem)
        public_path.chmod(DEFAULT_PUBLIC_FILE_PERMS)
    except OSError as e:
        raise CryptoError(f"Failed to write key pair to {output_dir}: {e}") from e

    logger.info("Generated X25519 key pair", private_key=str(private_path), public_key=str(public_path))
    return private_path, public_path


def load_private_key(key_path: Path) -> x25519.X25519PrivateKey:
    """Load an X25519 private key from a PEM file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a PEM private key or holds another key type
    """
    data = key_path.read_bytes()
    try:
        private_key = serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError) as e:
        raise ValueError(f"Failed to load private key from {key_path}: {e}") from e

    if not isinstance(private_key, x25519.X25519PrivateKey):
        raise ValueError(f"Incompatible key type {_key_type_name(private_key)} in {key_path}. {_RECOVERY_HINT}")
    return private_key


def load_public_key_raw(key_path: Path) -> bytes:
    """Load an X25519 public key from a PEM file and return its 32 raw bytes.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a PEM public key or holds another key type
    """
    data = key_path.read_bytes()
    try:
        public_key = serialization.load_pem_public_key(data)
    except ValueError as e:
        raise ValueError(f"Failed to load public key from {key_path}: {e}") from e

    if not isinstance(public_key, x25519.X25519PublicKey):
        raise ValueError(f"Incompatible key type {_key_type_name(public_key)} in {key_path}. {_RECOVERY_HINT}")
    return public_key.public_bytes(encoding=serialization.Encoding.Raw, format=serialization.PublicFormat.Raw)


def read_key_material(key_path: Path) -> bytes:
    """Read encryption key bytes from disk as-is; parsing happens at encrypt time."""
    return key_path.read_bytes()


# 📦🏷️🔚
