#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the appmeta command-line interface."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch
import zipfile

from click.testing import CliRunner
import pytest

from appmeta import decode_metadata, encode_metadata
from appmeta.cli import main as cli_main
from appmeta.crypto.keys import generate_key_pair, load_private_key
from appmeta.exceptions import CryptoError

STORE = "com.sample.store"


@pytest.fixture
def key_files(tmp_path: Path) -> tuple[Path, Path]:
    """A PEM key pair written the way `appmeta keygen` writes it."""
    return generate_key_pair(tmp_path / "keys")


def test_cli_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_main, ["--help"])
    assert result.exit_code == 0
    for command in ("encode", "decode", "keygen", "notices"):
        assert command in result.output


def test_cli_keygen(tmp_path: Path) -> None:
    """Tests the 'keygen' command."""
    runner = CliRunner()
    keys_dir = tmp_path / "test_keys"

    result = runner.invoke(cli_main, ["keygen", "--out-dir", str(keys_dir)])

    assert result.exit_code == 0, f"Keygen command failed: {result.output}"
    assert (keys_dir / "appmeta-private.key").exists()
    assert (keys_dir / "appmeta-public.key").exists()


def test_cli_notices() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_main, ["notices"])
    assert result.exit_code == 0, f"Notices command failed: {result.output}"


@pytest.mark.integration
def test_cli_encode_and_decode_apk(apk_file: Path, key_files: tuple[Path, Path]) -> None:
    """Encode into an APK copy with the CLI, then read it back."""
    private_path, public_path = key_files
    runner = CliRunner()

    encode_result = runner.invoke(
        cli_main,
        [
            "encode",
            str(apk_file),
            "--type",
            "drm",
            "--metadata",
            "app.version=0.1.3",
            "--metadata",
            "build.url=https://example.com/?a=b",
            "--encryption",
            f"{STORE}={public_path}",
        ],
    )
    assert encode_result.exit_code == 0, f"Encode command failed: {encode_result.output}"

    output = apk_file.with_name("app-out.apk")
    decoded = decode_metadata(output, "drm", owner_id=STORE, private_key=load_private_key(private_path))
    assert decoded is not None
    assert decoded.as_dict() == {"app.version": "0.1.3", "build.url": "https://example.com/?a=b"}

    decode_result = runner.invoke(
        cli_main,
        ["decode", str(output), "--type", "drm", "--owner", STORE, "--private-key", str(private_path), "--json"],
    )
    assert decode_result.exit_code == 0, f"Decode command failed: {decode_result.output}"


@pytest.mark.integration
def test_cli_encode_aab_with_explicit_output(aab_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "signed.aab"
    runner = CliRunner()

    result = runner.invoke(
        cli_main,
        ["encode", str(aab_file), "--type", "drm", "--metadata", "k=v", "--output", str(output)],
    )

    assert result.exit_code == 0, f"Encode command failed: {result.output}"
    with zipfile.ZipFile(output) as zf:
        assert "BUNDLE-METADATA/com.android.metadata/drm/metadata.pb" in zf.namelist()
    with zipfile.ZipFile(aab_file) as zf:
        assert zf.namelist() == ["res/raw/existing.txt"]


def test_cli_encode_repeated_key_with_same_value(aab_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli_main,
        ["encode", str(aab_file), "--type", "drm", "--metadata", "k=v", "--metadata", "k=v"],
    )
    assert result.exit_code == 0, f"Encode command failed: {result.output}"


def test_cli_encode_duplicate_key(aab_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli_main,
        ["encode", str(aab_file), "--type", "drm", "--metadata", "k=1", "--metadata", "k=2"],
    )
    assert result.exit_code == 2
    assert "Duplicate key 'k'" in result.output
    assert not aab_file.with_name("app-out.aab").exists()


def test_cli_encode_metadata_without_separator(aab_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli_main, ["encode", str(aab_file), "--type", "drm", "--metadata", "novalue"])
    assert result.exit_code == 2


def test_cli_encode_missing_key_file(apk_file: Path, tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli_main,
        [
            "encode",
            str(apk_file),
            "--type",
            "drm",
            "--metadata",
            "k=v",
            "--encryption",
            f"{STORE}={tmp_path / 'missing.pem'}",
        ],
    )
    assert result.exit_code == 2
    assert "Failed to read the encryption key from file" in result.output


def test_cli_encode_unsupported_input(tmp_path: Path) -> None:
    other = tmp_path / "app.zip"
    other.write_bytes(b"")
    runner = CliRunner()
    result = runner.invoke(cli_main, ["encode", str(other), "--type", "drm", "--metadata", "k=v"])
    assert result.exit_code == 2
    assert "must be either an APK or AAB" in result.output


def test_cli_encode_failure_removes_output(aab_file: Path) -> None:
    """An encode that fails after copying leaves no output file behind."""
    encode_metadata(aab_file, {"k": "v"}, "drm")
    runner = CliRunner()

    result = runner.invoke(cli_main, ["encode", str(aab_file), "--type", "drm", "--metadata", "k=v"])

    assert result.exit_code == 1
    assert not aab_file.with_name("app-out.aab").exists()


def test_cli_decode_absent_type(aab_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli_main, ["decode", str(aab_file), "--type", "drm"])
    assert result.exit_code == 0, f"Decode command failed: {result.output}"


def test_cli_decode_wrong_key(apk_file: Path, key_files: tuple[Path, Path], tmp_path: Path) -> None:
    _, public_path = key_files
    other_private, _ = generate_key_pair(tmp_path / "other-keys")
    runner = CliRunner()
    encode_result = runner.invoke(
        cli_main,
        ["encode", str(apk_file), "--type", "drm", "--metadata", "k=v", "--encryption", f"{STORE}={public_path}"],
    )
    assert encode_result.exit_code == 0, f"Encode command failed: {encode_result.output}"

    result = runner.invoke(
        cli_main,
        [
            "decode",
            str(apk_file.with_name("app-out.apk")),
            "--type",
            "drm",
            "--owner",
            STORE,
            "--private-key",
            str(other_private),
        ],
    )
    assert result.exit_code == 1


def test_cli_keygen_failure(tmp_path: Path) -> None:
    runner = CliRunner()
    with patch("appmeta.commands.keygen.generate_key_pair", side_effect=CryptoError("disk full")):
        result = runner.invoke(cli_main, ["keygen", "--out-dir", str(tmp_path / "keys")])
    assert result.exit_code == 1


def test_cli_keygen_keeps_existing_pair_without_force(tmp_path: Path) -> None:
    keys_dir = tmp_path / "keys"
    private_path, _ = generate_key_pair(keys_dir)
    original = private_path.read_bytes()
    runner = CliRunner()

    refused = runner.invoke(cli_main, ["keygen", "--out-dir", str(keys_dir)])
    assert refused.exit_code == 1
    assert private_path.read_bytes() == original

    replaced = runner.invoke(cli_main, ["keygen", "--out-dir", str(keys_dir), "--force"])
    assert replaced.exit_code == 0, f"Keygen command failed: {replaced.output}"
    assert private_path.read_bytes() != original


# 📦🏷️🔚
