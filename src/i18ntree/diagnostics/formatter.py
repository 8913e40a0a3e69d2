"""Diagnostic formatting service.

Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Control characters are escaped so translation keys taken from request data
# cannot forge extra log lines.
_CONTROL_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x1b": "\\x1b"})


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render Diagnostic objects as text.

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.missing_translation("en", ("en", "a"))))
        MISSING_TRANSLATION: translation missing: en.a
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._escape(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)
            case _:
                return self._format_rust(diagnostic)

    def format_all(self, diagnostics: list[Diagnostic]) -> str:
        """Format several diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        lines = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: "
            f"{self._escape(diagnostic.message)}"
        ]
        if diagnostic.key_path is not None:
            location = self._escape(diagnostic.key_path)
            if diagnostic.locale_code:
                location = f"{self._escape(diagnostic.locale_code)}: {location}"
            lines.append(f"  --> {location}")
        if diagnostic.hint:
            lines.append(f"  = help: {self._escape(diagnostic.hint)}")
        return "\n".join(lines)

    @staticmethod
    def _format_json(diagnostic: Diagnostic) -> str:
        data = {
            "code": diagnostic.code.name,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
            "hint": diagnostic.hint,
            "key_path": diagnostic.key_path,
            "locale": diagnostic.locale_code,
        }
        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def _escape(text: str) -> str:
        return text.translate(_CONTROL_ESCAPES)
