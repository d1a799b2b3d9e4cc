"""Tests for infrastructure.i18n.cultures module."""

import pytest

from infrastructure.i18n import (
    culture_hierarchy,
    is_valid_culture_name,
    normalize_culture_name,
    parent_culture,
)


@pytest.mark.unit
class TestIsValidCultureName:
    """Tests for culture name syntax checks."""

    @pytest.mark.parametrize(
        "name", ["en", "en-US", "zh-Hans-CN", "es-419", "en_US", "sr-Latn-RS"]
    )
    def test_valid_names(self, name):
        assert is_valid_culture_name(name) is True

    @pytest.mark.parametrize(
        "name", ["", None, "unsupported", "en--US", "-en", "en-", "e n", "*", 42]
    )
    def test_invalid_names(self, name):
        assert is_valid_culture_name(name) is False


@pytest.mark.unit
class TestNormalizeCultureName:
    """Tests for canonical casing."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("EN-us", "en-US"),
            ("zh-hans-cn", "zh-Hans-CN"),
            ("ZH-HANT", "zh-Hant"),
            ("es-419", "es-419"),
            ("en_gb", "en-GB"),
            (" fr-ca ", "fr-CA"),
        ],
    )
    def test_canonical_casing(self, name, expected):
        assert normalize_culture_name(name) == expected

    def test_invalid_name_raises(self):
        with pytest.raises(ValueError):
            normalize_culture_name("not a culture")


@pytest.mark.unit
class TestParentCulture:
    """Tests for parent derivation."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("en-US", "en"),
            ("zh-Hans-CN", "zh-Hans"),
            ("zh-Hans", "zh"),
            ("zh-CN", "zh-Hans"),
            ("zh-SG", "zh-Hans"),
            ("zh-TW", "zh-Hant"),
            ("zh-HK", "zh-Hant"),
            ("zh-MO", "zh-Hant"),
        ],
    )
    def test_parent(self, name, expected):
        assert parent_culture(name) == expected

    def test_root_culture_has_no_parent(self):
        assert parent_culture("en") is None


@pytest.mark.unit
class TestCultureHierarchy:
    """Tests for culture_hierarchy()."""

    def test_full_chain_most_specific_first(self):
        assert list(culture_hierarchy("zh-hant-tw")) == ["zh-Hant-TW", "zh-Hant", "zh"]

    def test_script_parent_chain(self):
        assert list(culture_hierarchy("zh-TW")) == ["zh-TW", "zh-Hant", "zh"]

    def test_root_yields_itself(self):
        assert list(culture_hierarchy("fr")) == ["fr"]
