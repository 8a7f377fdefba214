"""KeyUsage — one ``t!()`` invocation found in the source tree."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class KeyUsage:
    """A locale key passed to the translation macro.

    ``line`` starts from 1, ``column`` starts from 0 and counts characters.
    """

    key: str
    file: Path
    line: int
    column: int

    def describe(self) -> str:
        return (
            f"file '{self.file}' / line '{self.line}' / "
            f"column '{self.column}' / key '{self.key}'"
        )
