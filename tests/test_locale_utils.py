"""Tests for locale_utils.py."""

from __future__ import annotations

import logging

import pytest

from msgtable.locale_utils import (
    is_known_locale,
    locale_display_name,
    normalize_locale,
    validate_locale_code,
    warn_unknown_locales,
)


class TestValidateLocaleCode:
    """Path safety of locale identifiers."""

    @pytest.mark.parametrize("locale", ["zh", "jp", "en_US", "pt-BR", "zh_Hant_TW"])
    def test_accepts(self, locale: str) -> None:
        validate_locale_code(locale)

    @pytest.mark.parametrize(
        ("locale", "fragment"),
        [
            ("", "empty"),
            (" zh", "whitespace"),
            ("zh\n", "whitespace"),
            ("..", "traversal"),
            ("zh/../en", "traversal"),
            ("zh/en", "separators"),
            ("zh\\en", "separators"),
        ],
    )
    def test_rejects(self, locale: str, fragment: str) -> None:
        with pytest.raises(ValueError, match=fragment):
            validate_locale_code(locale)


class TestRecognition:
    """Babel-backed locale recognition."""

    def test_normalize(self) -> None:
        assert normalize_locale("pt-BR") == "pt_BR"
        assert normalize_locale("zh") == "zh"

    @pytest.mark.parametrize("locale", ["zh", "en", "en-US", "lv"])
    def test_known(self, locale: str) -> None:
        assert is_known_locale(locale)

    @pytest.mark.parametrize("locale", ["jp", "xx", "not a locale"])
    def test_unknown(self, locale: str) -> None:
        assert not is_known_locale(locale)

    def test_display_name(self) -> None:
        assert locale_display_name("zh") == "中文"
        assert locale_display_name("jp") is None


class TestWarnUnknownLocales:
    """Unknown locales are reported, never rejected."""

    def test_warns_for_unknown_only(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="msgtable.locale_utils"):
            warn_unknown_locales(("zh", "jp"))

        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["Locale 'jp' is not a recognized CLDR locale identifier"]

    def test_silent_for_known(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="msgtable.locale_utils"):
            warn_unknown_locales(["en", "de"])

        assert caplog.records == []
