#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Application-level deflate for encrypted package metadata.

Ciphertext is incompressible, so package records are compressed here before
encryption and stored without container compression. The stream is
zlib-wrapped deflate.
"""

from __future__ import annotations

import zlib

from appmeta.config.defaults import (
    DECOMPRESS_CHUNK_SIZE,
    DEFAULT_COMPRESSION_LEVEL,
    MAX_DECOMPRESSED_SIZE,
)
from appmeta.exceptions import DecompressionError


def compress(data: bytes, level: int = DEFAULT_COMPRESSION_LEVEL) -> bytes:
    """Deflate `data` into a zlib stream."""
    return zlib.compress(data, level)


def decompress(data: bytes, max_size: int = MAX_DECOMPRESSED_SIZE) -> bytes:
    """Inflate a zlib stream produced by `compress`.

    Args:
        data: Compressed bytes
        max_size: Largest acceptable output size in bytes

    Returns:
        The decompressed bytes

    Raises:
        DecompressionError: If the stream is corrupt, truncated, or inflates past max_size
    """
    decompressor = zlib.decompressobj()
    output = bytearray()
    pending = data
    try:
        while True:
            budget = max_size - len(output) + 1
            output += decompressor.decompress(pending, min(budget, DECOMPRESS_CHUNK_SIZE))
            if len(output) > max_size:
                raise DecompressionError(f"Decompressed metadata exceeds {max_size} bytes.")
            pending = decompressor.unconsumed_tail
            if not pending:
                break
        output += decompressor.flush()
    except zlib.error as e:
        raise DecompressionError(f"Failed to uncompress metadata: {e}") from e

    if len(output) > max_size:
        raise DecompressionError(f"Decompressed metadata exceeds {max_size} bytes.")
    if not decompressor.eof:
        raise DecompressionError("Failed to uncompress metadata: truncated stream.")
    return bytes(output)


# 📦🏷️🔚
