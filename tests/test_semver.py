"""Tests for npm semver range evaluation and token parsing."""

import pytest

from versioning.parser import tokenize_rightmost_at
from versioning.semver import is_valid_range, satisfies


class TestIsValidRange:
    """Range syntax validation."""

    @pytest.mark.parametrize("spec", [
        "^1.2.0",
        "~4.17.0",
        "1.x",
        "*",
        ">=1.0.0 <2.0.0",
        "1.2.3 - 2.0.0",
        "^1.0.0 || ^2.0.0",
        "4.17.21",
        ">= 1.2.3",
        "~ 1.2.0",
        ">= 1.0.0 < 2.0.0",
    ])
    def test_valid(self, spec):
        assert is_valid_range(spec) is True

    @pytest.mark.parametrize("spec", ["not-a-version", "latest", "", "   "])
    def test_invalid(self, spec):
        assert is_valid_range(spec) is False

    def test_non_string_is_invalid(self):
        assert is_valid_range(None) is False


class TestSatisfies:
    """Installed version against a required range."""

    def test_caret_patch_upgrade_satisfies(self):
        assert satisfies("1.2.5", "^1.2.0") is True

    def test_caret_older_minor_does_not_satisfy(self):
        assert satisfies("1.1.0", "^1.2.0") is False

    def test_caret_next_major_does_not_satisfy(self):
        assert satisfies("2.0.0", "^1.2.0") is False

    def test_tilde(self):
        assert satisfies("4.17.21", "~4.17.0") is True
        assert satisfies("4.18.0", "~4.17.0") is False

    def test_union(self):
        assert satisfies("2.3.0", "^1.0.0 || ^2.0.0") is True

    def test_space_after_operator(self):
        assert satisfies("1.5.0", ">= 1.2.3 < 2.0.0") is True
        assert satisfies("2.1.0", ">= 1.2.3 < 2.0.0") is False

    def test_v_prefix_is_accepted(self):
        assert satisfies("v1.2.5", "^1.2.0") is True

    def test_partial_version_is_coerced(self):
        assert satisfies("1.3", "^1.2.0") is True

    def test_unparseable_version_never_satisfies(self):
        assert satisfies("garbage", "^1.0.0") is False

    def test_invalid_range_never_satisfies(self):
        assert satisfies("1.0.0", "not-a-version") is False


class TestTokenizeRightmostAt:
    """name@range token splitting."""

    def test_plain_name(self):
        assert tokenize_rightmost_at("lodash") == ("lodash", None)

    def test_name_with_range(self):
        assert tokenize_rightmost_at("lodash@^4.0.0") == ("lodash", "^4.0.0")

    def test_scoped_name(self):
        assert tokenize_rightmost_at("@types/node") == ("@types/node", None)

    def test_scoped_name_with_range(self):
        assert tokenize_rightmost_at("@types/node@^18") == ("@types/node", "^18")

    def test_latest_tag_means_no_range(self):
        assert tokenize_rightmost_at("chalk@latest") == ("chalk", None)

    def test_empty_range_means_no_range(self):
        assert tokenize_rightmost_at("chalk@") == ("chalk", None)
