"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate echoed input to prevent log flooding
        max_content_length: Maximum echoed input length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.culture_not_found("xx")
        >>> print(formatter.format(diagnostic))
        error[CULTURE_NOT_FOUND]: Unable to find culture 'xx'
          = input: xx
          = help: Use one of 'en', 'fr', 'it', 'en_IN', or build NumberCultureSettings explicitly

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        CULTURE_NOT_FOUND: Unable to find culture 'xx'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[NUMBER_OUT_OF_RANGE]: '1000' does not fit in i8 (range -128 to 127)
              = input: 1000
              = expected: i8
              = help: Use a wider numeric type
        """
        parts = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: "
            f"{self._escape(diagnostic.message)}"
        ]

        if diagnostic.input_value is not None:
            parts.append(f"  = input: {self._maybe_sanitize(diagnostic.input_value)}")

        if diagnostic.expected_type:
            parts.append(f"  = expected: {diagnostic.expected_type}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as a single line."""
        return f"{diagnostic.code.name}: {self._escape(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as a JSON object."""
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
            "hint": diagnostic.hint,
            "input": diagnostic.input_value,
            "expected": diagnostic.expected_type,
        }
        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, content: str) -> str:
        """Escape control characters and truncate when sanitizing."""
        escaped = self._escape(content)
        if self.sanitize and len(escaped) > self.max_content_length:
            return escaped[: self.max_content_length] + "..."
        return escaped

    @staticmethod
    def _escape(content: str) -> str:
        """Escape control characters so user input cannot forge log lines."""
        return content.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
