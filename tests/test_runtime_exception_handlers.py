"""Tests for exception handlers."""

import logging

import pytest

from i18ntree.diagnostics import (
    InvalidPluralizationData,
    MissingInterpolationArgument,
    MissingTranslationData,
)
from i18ntree.runtime.exception_handlers import (
    LoggingHandler,
    LookupRequest,
    MissingMarkerHandler,
    RaisingHandler,
)

MISSING = MissingTranslationData("en", "a.b", ("en", "a", "b"))
REQUEST = LookupRequest("en", "a.b")


class TestRaisingHandler:
    def test_reraises(self) -> None:
        with pytest.raises(MissingTranslationData) as exc_info:
            RaisingHandler()(MISSING, REQUEST)
        assert exc_info.value is MISSING


class TestMissingMarkerHandler:
    """Marker for misses, propagation for everything else."""

    def test_marker(self) -> None:
        assert MissingMarkerHandler()(MISSING, REQUEST) == "translation missing: en.a.b"

    def test_custom_template(self) -> None:
        handler = MissingMarkerHandler("[missing {path}]")
        assert handler(MISSING, REQUEST) == "[missing en.a.b]"

    def test_other_errors_propagate(self) -> None:
        error = MissingInterpolationArgument("name", "Hi {{name}}", {})
        with pytest.raises(MissingInterpolationArgument):
            MissingMarkerHandler()(error, REQUEST)

    def test_repr(self) -> None:
        assert "translation missing" in repr(MissingMarkerHandler())


class TestLoggingHandler:
    """Logs, then delegates."""

    def test_logs_and_marks(self, caplog: pytest.LogCaptureFixture) -> None:
        handler = LoggingHandler()
        with caplog.at_level(logging.WARNING, logger="i18ntree.runtime.exception_handlers"):
            result = handler(MISSING, REQUEST)
        assert result == "translation missing: en.a.b"
        assert "Translation lookup failed" in caplog.text
        assert "'a.b'" in caplog.text

    def test_level(self, caplog: pytest.LogCaptureFixture) -> None:
        handler = LoggingHandler(level=logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger="i18ntree.runtime.exception_handlers"):
            handler(MISSING, REQUEST)
        assert caplog.records[-1].levelno == logging.DEBUG

    def test_delegate_raising(self, caplog: pytest.LogCaptureFixture) -> None:
        handler = LoggingHandler(RaisingHandler())
        error = InvalidPluralizationData("bad", {"one": "x"}, None)
        with (
            caplog.at_level(logging.WARNING, logger="i18ntree.runtime.exception_handlers"),
            pytest.raises(InvalidPluralizationData),
        ):
            handler(error, REQUEST)
        assert "bad" in caplog.text

    def test_custom_callable_delegate(self) -> None:
        handler = LoggingHandler(lambda error, request: f"?{request.key}?")
        assert handler(MISSING, REQUEST) == "?a.b?"


class TestLookupRequest:
    def test_defaults(self) -> None:
        request = LookupRequest("en", "k")
        assert dict(request.options) == {}

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            REQUEST.locale = "de"  # type: ignore[misc]
