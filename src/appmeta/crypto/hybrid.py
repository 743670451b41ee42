#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Per-recipient hybrid public-key encryption with an authenticated context.

Scheme: X25519 key agreement with a fresh ephemeral key, HKDF-SHA256 key
derivation and AES-256-GCM. The context string is mixed into the HKDF info
and is also the AEAD associated data, so a ciphertext only opens under the
context it was sealed with. Wire layout:

    version (1) | ephemeral public key (32) | nonce (12) | ciphertext + tag
"""

from __future__ import annotations

import os
import threading
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import x25519
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from provide.foundation import logger

from appmeta.config.defaults import (
    AES_GCM_NONCE_SIZE,
    AES_GCM_TAG_SIZE,
    AES_KEY_SIZE,
    HYBRID_HKDF_INFO,
    HYBRID_SCHEME_VERSION,
    X25519_KEY_SIZE,
)
from appmeta.exceptions import CryptoError, DecryptionError, EncryptionError, KeyMaterialInvalidError

if TYPE_CHECKING:
    from appmeta.codec.request import RecipientEncryption

_HEADER_SIZE = 1 + X25519_KEY_SIZE + AES_GCM_NONCE_SIZE
_MIN_CIPHERTEXT_SIZE = _HEADER_SIZE + AES_GCM_TAG_SIZE

_init_lock = threading.Lock()
_initialized = False


@runtime_checkable
class Encrypter(Protocol):
    """Anything that can seal bytes for one recipient under a context."""

    def encrypt(self, plaintext: bytes, context: bytes) -> bytes: ...


@runtime_checkable
class Decrypter(Protocol):
    """Anything that can open bytes sealed by the matching Encrypter."""

    def decrypt(self, ciphertext: bytes, context: bytes) -> bytes: ...


def ensure_initialized() -> None:
    """Run the one-time cipher self-test. Safe to call from any thread, any number of times.

    Raises:
        EncryptionError: If the cipher primitives are unavailable in this environment
    """
    global _initialized
    if _initialized:
        return
    with _init_lock:
        if _initialized:
            return
        try:
            probe = x25519.X25519PrivateKey.generate()
            sealed = HybridEncrypter(probe.public_key()).encrypt(b"appmeta", b"init")
            opened = HybridDecrypter(probe).decrypt(sealed, b"init")
        except (UnsupportedAlgorithm, CryptoError) as e:
            raise EncryptionError(f"Failed to initialize hybrid encryption: {e}") from e
        if opened != b"appmeta":
            raise EncryptionError("Hybrid cipher self-test returned wrong plaintext.")
        _initialized = True
        logger.debug("Hybrid cipher initialized", scheme="X25519-HKDF-SHA256-AES256GCM")


def _derive_key(shared_secret: bytes, ephemeral_public: bytes, recipient_public: bytes, context: bytes) -> bytes:
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=AES_KEY_SIZE,
        salt=ephemeral_public + recipient_public,
        info=HYBRID_HKDF_INFO + context,
    )
    return hkdf.derive(shared_secret)


def _raw_public_bytes(public_key: x25519.X25519PublicKey) -> bytes:
    return public_key.public_bytes(encoding=serialization.Encoding.Raw, format=serialization.PublicFormat.Raw)


class HybridEncrypter:
    """Seals data for the holder of one X25519 private key."""

    def __init__(self, public_key: x25519.X25519PublicKey) -> None:
        self.public_key = public_key
        self._public_bytes = _raw_public_bytes(public_key)

    def encrypt(self, plaintext: bytes, context: bytes) -> bytes:
        ephemeral = x25519.X25519PrivateKey.generate()
        ephemeral_public = _raw_public_bytes(ephemeral.public_key())
        try:
            shared_secret = ephemeral.exchange(self.public_key)
        except ValueError as e:
            # Low-order public keys produce an all-zero shared secret.
            raise EncryptionError(f"Key agreement failed: {e}") from e

        key = _derive_key(shared_secret, ephemeral_public, self._public_bytes, context)
        nonce = os.urandom(AES_GCM_NONCE_SIZE)
        sealed = AESGCM(key).encrypt(nonce, plaintext, context)
        return bytes([HYBRID_SCHEME_VERSION]) + ephemeral_public + nonce + sealed


class HybridDecrypter:
    """Opens data sealed by a HybridEncrypter for the matching public key."""

    def __init__(self, private_key: x25519.X25519PrivateKey) -> None:
        self.private_key = private_key
        self._public_bytes = _raw_public_bytes(private_key.public_key())

    def decrypt(self, ciphertext: bytes, context: bytes) -> bytes:
        if len(ciphertext) < _MIN_CIPHERTEXT_SIZE:
            raise DecryptionError("Failed to decrypt metadata: ciphertext too short.")
        if ciphertext[0] != HYBRID_SCHEME_VERSION:
            raise DecryptionError(f"Failed to decrypt metadata: unsupported scheme version {ciphertext[0]}.")

        ephemeral_public = ciphertext[1 : 1 + X25519_KEY_SIZE]
        nonce = ciphertext[1 + X25519_KEY_SIZE : _HEADER_SIZE]
        sealed = ciphertext[_HEADER_SIZE:]
        try:
            shared_secret = self.private_key.exchange(x25519.X25519PublicKey.from_public_bytes(ephemeral_public))
            key = _derive_key(shared_secret, ephemeral_public, self._public_bytes, context)
            return AESGCM(key).decrypt(nonce, sealed, context)
        except (InvalidTag, ValueError) as e:
            # Wrong key and wrong context both surface as an authentication failure.
            raise DecryptionError("Failed to decrypt metadata.") from e


def derive_encrypter(key_material: bytes) -> HybridEncrypter:
    """Build an encrypter from public key bytes.

    Accepts a raw 32-byte X25519 public key, a DER SubjectPublicKeyInfo, or a
    PEM-encoded public key.

    Raises:
        KeyMaterialInvalidError: If the bytes are not an X25519 public key
    """
    if not key_material:
        raise KeyMaterialInvalidError("Failed to parse encryption key: no key bytes.")

    try:
        if len(key_material) == X25519_KEY_SIZE:
            public_key = x25519.X25519PublicKey.from_public_bytes(key_material)
        elif key_material.lstrip().startswith(b"-----BEGIN"):
            public_key = serialization.load_pem_public_key(key_material)  # type: ignore[assignment]
        else:
            public_key = serialization.load_der_public_key(key_material)  # type: ignore[assignment]
    except (ValueError, UnsupportedAlgorithm) as e:
        raise KeyMaterialInvalidError(f"Failed to parse encryption key: {e}") from e

    if not isinstance(public_key, x25519.X25519PublicKey):
        raise KeyMaterialInvalidError(
            f"Failed to parse encryption key: expected an X25519 public key, got {type(public_key).__name__}."
        )
    return HybridEncrypter(public_key)


def resolve_encrypter(recipient: RecipientEncryption) -> Encrypter:
    """Return the recipient's ready-made encrypter, deriving one from raw key bytes if needed."""
    from appmeta.codec.request import ProvidedEncrypter, RawPublicKey

    material = recipient.key_material
    if isinstance(material, ProvidedEncrypter):
        return material.encrypter
    if isinstance(material, RawPublicKey):
        return derive_encrypter(material.key_bytes)
    raise KeyMaterialInvalidError(
        f"Unsupported key material for owner '{recipient.owner_id}': {type(material).__name__}."
    )


def as_decrypter(key: Decrypter | x25519.X25519PrivateKey) -> Decrypter:
    """Accept either a decrypter or a bare X25519 private key."""
    if isinstance(key, x25519.X25519PrivateKey):
        return HybridDecrypter(key)
    return key


def encrypt(plaintext: bytes, recipient: RecipientEncryption, context: str) -> bytes:
    """Seal `plaintext` for `recipient` with `context` bound as authenticated data.

    Raises:
        KeyMaterialInvalidError: If the recipient's raw key bytes do not parse
        EncryptionError: If the underlying cipher fails
    """
    ensure_initialized()
    encrypter = resolve_encrypter(recipient)
    try:
        return encrypter.encrypt(plaintext, context.encode("utf-8"))
    except EncryptionError:
        raise
    except Exception as e:
        # Provided encrypters may raise anything.
        raise EncryptionError(f"Failed to encrypt metadata: {e}") from e


def decrypt(ciphertext: bytes, decrypter: Decrypter, context: str) -> bytes:
    """Open `ciphertext` sealed under `context`.

    Raises:
        DecryptionError: If the key or the context does not match
    """
    ensure_initialized()
    try:
        return decrypter.decrypt(ciphertext, context.encode("utf-8"))
    except DecryptionError:
        raise
    except Exception as e:
        raise DecryptionError(f"Failed to decrypt metadata: {e}") from e


# 📦🏷️🔚
