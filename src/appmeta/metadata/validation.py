#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Structural validation shared by the encoders and the path scheme."""

from __future__ import annotations

from collections.abc import Iterable

from appmeta.config.defaults import (
    FORBIDDEN_SEGMENT_CHARS,
    FORBIDDEN_SEGMENTS,
    MAX_SEGMENT_LENGTH,
)
from appmeta.exceptions import ValidationError


def validate_path_segment(value: str, name: str) -> str:
    """Check that `value` can be embedded verbatim as one container path segment.

    Args:
        value: The type or owner id to check
        name: Field name used in the error message

    Returns:
        The value, unchanged

    Raises:
        ValidationError: If the value is empty, too long, or could alter the path structure
    """
    if not value:
        raise ValidationError(f"'{name}' must be provided a value.")
    if len(value) > MAX_SEGMENT_LENGTH:
        raise ValidationError(f"'{name}' must be at most {MAX_SEGMENT_LENGTH} characters, got {len(value)}.")
    if value in FORBIDDEN_SEGMENTS:
        raise ValidationError(f"'{name}' cannot be '{value}'.")
    for char in FORBIDDEN_SEGMENT_CHARS:
        if char in value:
            raise ValidationError(f"'{name}' must not contain {char!r}: '{value}'.")
    return value


def check_unique_keys(keys: Iterable[str]) -> None:
    """Raise ValidationError on the first key seen twice."""
    seen: set[str] = set()
    for key in keys:
        if key in seen:
            raise ValidationError(f"Duplicate key '{key}' in metadata is found.")
        seen.add(key)


def check_unique_owners(owner_ids: Iterable[str]) -> None:
    """Raise ValidationError on the first encryption key owner seen twice."""
    seen: set[str] = set()
    for owner_id in owner_ids:
        if owner_id in seen:
            raise ValidationError(f"Duplicate encryption key owner '{owner_id}' in encryptions is found.")
        seen.add(owner_id)


# 📦🏷️🔚
