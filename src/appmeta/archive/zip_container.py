#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Scoped append-only access to zip-based application containers.

APKs and AABs are both zip archives. The metadata codec only needs to list
entry paths, read one entry and append a new entry, so that is all this
wrapper exposes. Existing entries are never rewritten.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
import io
from pathlib import Path
import zipfile
import zlib

from provide.foundation import logger

from appmeta.config.defaults import CONTAINER_COMPRESSION_LEVEL
from appmeta.exceptions import ArchiveError, DecompressionError, EntryNotFoundError

# Fixed entry timestamp and permissions keep appended entries reproducible.
ENTRY_DATE_TIME = (1980, 1, 1, 0, 0, 0)
ENTRY_PERMS = 0o644


class CompressionHint(Enum):
    """Container-level compression applied to an appended entry."""

    BEST = "best"  # deflate at maximum level
    NONE = "none"  # stored as-is, for incompressible data such as ciphertext


class ZipContainer:
    """An open zip container. Use `open` or `in_memory` to obtain one."""

    def __init__(self, zip_file: zipfile.ZipFile, buffer: io.BytesIO | None = None) -> None:
        self._zip = zip_file
        self._buffer = buffer
        self._entries: set[str] = set(zip_file.namelist())

    @classmethod
    @contextmanager
    def open(cls, path: Path, writable: bool = False) -> Iterator[ZipContainer]:
        """Open a container file, closing it on every exit path.

        Args:
            path: Path to an existing APK or AAB file
            writable: Open for appending entries

        Raises:
            ArchiveError: If the file is missing or is not a zip archive
        """
        if not path.is_file():
            raise ArchiveError(f"Container not found: {path}")

        mode = "a" if writable else "r"
        try:
            zip_file = zipfile.ZipFile(path, mode)
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveError(f"Failed to open container {path}: {e}") from e

        logger.debug("Opened container", path=str(path), writable=writable)
        container = cls(zip_file)
        with container._closing():
            yield container

    @classmethod
    @contextmanager
    def in_memory(cls, data: bytes = b"", writable: bool = True) -> Iterator[ZipContainer]:
        """Open a container held in memory. `getvalue()` is valid after exit."""
        buffer = io.BytesIO(data)
        mode = "a" if writable else "r"
        try:
            zip_file = zipfile.ZipFile(buffer, mode)
        except zipfile.BadZipFile as e:
            raise ArchiveError(f"Failed to open in-memory container: {e}") from e

        container = cls(zip_file, buffer)
        with container._closing():
            yield container

    @contextmanager
    def _closing(self) -> Iterator[None]:
        """Close on exit. A close failure never replaces an error already propagating."""
        try:
            yield
        except BaseException:
            try:
                self.close()
            except ArchiveError as close_error:
                logger.warning("Failed to close container after error", error=str(close_error))
            raise
        self.close()

    def close(self) -> None:
        """Write the central directory (if appending) and release the handle."""
        try:
            self._zip.close()
        except OSError as e:
            raise ArchiveError(f"Failed to close container: {e}") from e

    def list_entry_paths(self) -> frozenset[str]:
        """Return the set of entry paths in the container."""
        return frozenset(self._entries)

    def has_entry(self, path: str) -> bool:
        return path in self._entries

    def read_entry(self, path: str) -> bytes:
        """Read an entry, transparently inflating container-level compression.

        Raises:
            EntryNotFoundError: If the path is not present
            DecompressionError: If the entry's deflate stream is corrupt
            ArchiveError: If the entry cannot be read
        """
        if path not in self._entries:
            raise EntryNotFoundError(path)
        try:
            return self._zip.read(path)
        except zlib.error as e:
            raise DecompressionError(f"Failed to inflate entry {path}: {e}") from e
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveError(f"Failed to read entry {path}: {e}") from e

    def append_entry(self, path: str, data: bytes, compression: CompressionHint = CompressionHint.BEST) -> None:
        """Append a new entry at `path`.

        Raises:
            ArchiveError: If the path already exists or the write fails
        """
        if path in self._entries:
            raise ArchiveError(f"Entry already exists in container: {path}")

        info = zipfile.ZipInfo(filename=path, date_time=ENTRY_DATE_TIME)
        info.external_attr = (ENTRY_PERMS & 0xFFFF) << 16
        if compression is CompressionHint.BEST:
            info.compress_type = zipfile.ZIP_DEFLATED
            compresslevel: int | None = CONTAINER_COMPRESSION_LEVEL
        else:
            info.compress_type = zipfile.ZIP_STORED
            compresslevel = None

        try:
            self._zip.writestr(info, data, compresslevel=compresslevel)
        except (ValueError, OSError) as e:
            raise ArchiveError(f"Failed to append entry {path}: {e}") from e

        self._entries.add(path)
        logger.debug(
            "Appended container entry",
            path=path,
            size=len(data),
            compression=compression.value,
        )

    def getvalue(self) -> bytes:
        """Return the bytes of an in-memory container."""
        if self._buffer is None:
            raise ArchiveError("Container is not held in memory")
        return self._buffer.getvalue()


# 📦🏷️🔚
