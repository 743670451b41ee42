#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for structural validation helpers."""

from __future__ import annotations

import pytest

from appmeta.exceptions import ValidationError
from appmeta.metadata.validation import check_unique_keys, check_unique_owners, validate_path_segment


class TestPathSegments:
    @pytest.mark.parametrize("value", ["drm", "com.sample.store", "a-b_c", "x" * 255])
    def test_valid_segments(self, value: str) -> None:
        assert validate_path_segment(value, "type") == value

    def test_empty_segment(self) -> None:
        with pytest.raises(ValidationError, match="'type' must be provided a value."):
            validate_path_segment("", "type")

    def test_too_long(self) -> None:
        with pytest.raises(ValidationError, match="at most 255"):
            validate_path_segment("x" * 256, "type")

    @pytest.mark.parametrize("value", [".", ".."])
    def test_dot_segments(self, value: str) -> None:
        with pytest.raises(ValidationError, match="cannot be"):
            validate_path_segment(value, "type")

    @pytest.mark.parametrize("value", ["a/b", "a\\b", "a\x00b"])
    def test_separators(self, value: str) -> None:
        with pytest.raises(ValidationError, match="must not contain"):
            validate_path_segment(value, "encryptionKeyOwner")


class TestUniqueness:
    def test_unique_keys(self) -> None:
        check_unique_keys(["a", "b"])

    def test_duplicate_keys(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate key 'a' in metadata is found."):
            check_unique_keys(["a", "b", "a"])

    def test_duplicate_owners(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate encryption key owner 'o' in encryptions is found."):
            check_unique_owners(iter(["o", "o"]))


# 📦🏷️🔚
