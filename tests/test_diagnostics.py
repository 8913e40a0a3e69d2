"""Tests for diagnostic codes, templates, formatting and the error hierarchy."""

import json

import pytest

from i18ntree.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    I18nError,
    InvalidLocale,
    MissingTranslationData,
    OutputFormat,
)


class TestErrorTemplate:
    def test_missing_translation(self) -> None:
        diagnostic = ErrorTemplate.missing_translation("en", ("en", "a", "b"))
        assert diagnostic.code is DiagnosticCode.MISSING_TRANSLATION
        assert diagnostic.message == "translation missing: en.a.b"
        assert diagnostic.key_path == "a.b"
        assert diagnostic.locale_code == "en"

    def test_locale_not_available(self) -> None:
        diagnostic = ErrorTemplate.locale_not_available("xx", ["en", "de"])
        assert diagnostic.message == "'xx' is not a valid locale"
        assert diagnostic.hint == "Available locales: de, en"

    def test_codes_are_grouped(self) -> None:
        assert DiagnosticCode.MISSING_TRANSLATION.value == 1001
        assert DiagnosticCode.RESERVED_INTERPOLATION_KEY.value == 2001
        assert DiagnosticCode.PLURAL_CATEGORY_MISSING.value == 3001
        assert DiagnosticCode.LOCALE_UNSET.value == 4001


class TestDiagnosticFormatter:
    DIAGNOSTIC = ErrorTemplate.missing_translation("en", ("en", "a", "b"))

    def test_rust(self) -> None:
        text = DiagnosticFormatter().format(self.DIAGNOSTIC)
        lines = text.splitlines()
        assert lines[0] == "error[MISSING_TRANSLATION]: translation missing: en.a.b"
        assert lines[1] == "  --> en: a.b"
        assert lines[2].startswith("  = help: ")

    def test_simple(self) -> None:
        formatter = DiagnosticFormatter(OutputFormat.SIMPLE)
        assert formatter.format(self.DIAGNOSTIC) == (
            "MISSING_TRANSLATION: translation missing: en.a.b"
        )

    def test_json(self) -> None:
        data = json.loads(DiagnosticFormatter(OutputFormat.JSON).format(self.DIAGNOSTIC))
        assert data["code"] == "MISSING_TRANSLATION"
        assert data["key_path"] == "a.b"
        assert data["locale"] == "en"

    def test_control_characters_escaped(self) -> None:
        diagnostic = ErrorTemplate.missing_translation("en", ("en", "a\nforged"))
        text = DiagnosticFormatter(OutputFormat.SIMPLE).format(diagnostic)
        assert "\n" not in text
        assert "a\\nforged" in text

    def test_format_all(self) -> None:
        text = DiagnosticFormatter(OutputFormat.SIMPLE).format_all(
            [self.DIAGNOSTIC, ErrorTemplate.locale_unset()]
        )
        assert text.count("\n\n") == 1

    def test_diagnostic_format_error(self) -> None:
        assert self.DIAGNOSTIC.format_error().startswith("error[MISSING_TRANSLATION]")


class TestErrors:
    def test_string_message(self) -> None:
        error = I18nError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.LOCALE_UNSET, message="locale is not set")
        error = InvalidLocale(diagnostic, None)
        assert str(error) == "locale is not set"
        assert error.diagnostic is diagnostic
        assert error.locale is None

    def test_hierarchy(self) -> None:
        error = MissingTranslationData("en", "a", ("en", "a"))
        assert isinstance(error, I18nError)
        with pytest.raises(I18nError):
            raise error
