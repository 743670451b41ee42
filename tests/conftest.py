#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for appmeta tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import zipfile

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import x25519
import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from appmeta.metadata.record import MetadataRecord

# Every test container carries one unrelated entry that encoding must leave intact.
EXISTING_ENTRY_PATH = "res/raw/existing.txt"
EXISTING_ENTRY_DATA = b"pre-existing container content\n"


def make_container(path: Path) -> Path:
    """Write a minimal zip container with a single pre-existing entry."""
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(EXISTING_ENTRY_PATH, EXISTING_ENTRY_DATA)
    return path


def raw_public_bytes(private_key: x25519.X25519PrivateKey) -> bytes:
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw, format=serialization.PublicFormat.Raw
    )


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def apk_file(tmp_path: Path) -> Path:
    """A throwaway APK container."""
    return make_container(tmp_path / "app.apk")


@pytest.fixture
def aab_file(tmp_path: Path) -> Path:
    """A throwaway AAB container."""
    return make_container(tmp_path / "app.aab")


@pytest.fixture
def recipient_key() -> x25519.X25519PrivateKey:
    """Private key of the primary recipient."""
    return x25519.X25519PrivateKey.generate()


@pytest.fixture
def other_recipient_key() -> x25519.X25519PrivateKey:
    """Private key of a second, unrelated recipient."""
    return x25519.X25519PrivateKey.generate()


@pytest.fixture
def recipient_public_bytes(recipient_key: x25519.X25519PrivateKey) -> bytes:
    """Raw 32-byte public key of the primary recipient."""
    return raw_public_bytes(recipient_key)


@pytest.fixture
def other_recipient_public_bytes(other_recipient_key: x25519.X25519PrivateKey) -> bytes:
    return raw_public_bytes(other_recipient_key)


@pytest.fixture
def sample_record() -> MetadataRecord:
    """The record used throughout the codec tests."""
    return MetadataRecord.from_mapping({"app.version": "0.1.3", "build.channel": "beta"})


# 📦🏷️🔚
