"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — no diagnostics
  1   Violation — at least one rule reported a diagnostic
  2   Error — usage error, unreadable/malformed input, t!() misuse
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
