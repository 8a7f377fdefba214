"""Fatal input errors.

Anything raised from here aborts the run before a single rule executes.
Rule findings are never exceptions; they go to the DiagnosticCollector.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class LocaleAuditError(RuntimeError):
    """Base class for every fatal input error."""


class LocaleFileError(LocaleAuditError):
    """The locale data file is unreadable or has an invalid shape."""


class LocaleVersionMissingError(LocaleFileError):
    """The reserved ``_version`` key is absent."""

    def __init__(self) -> None:
        super().__init__("locale file version key `_version` not found")


class LocaleVersionMismatchError(LocaleFileError):
    """``_version`` is present but is not the supported schema version."""

    def __init__(self, found: Any, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(
            f"locale file version should be {expected}, found {found!r}"
        )


class ConfigError(LocaleAuditError):
    """The configuration file or environment holds invalid values."""


class SourceDiscoveryError(LocaleAuditError):
    """An input path given on the command line cannot be inspected."""


class SourceParseError(LocaleAuditError):
    """A Rust source file cannot be read or does not parse."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"failed to parse file {path}: {detail}")


class MacroMisuseError(LocaleAuditError):
    """A ``t!()`` invocation whose first argument is not a string literal."""

    def __init__(self, path: Path, line: int, column: int, detail: str) -> None:
        self.path = path
        self.line = line
        self.column = column
        super().__init__(f"{path}:{line}:{column}: {detail}")
