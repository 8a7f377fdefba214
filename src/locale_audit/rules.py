"""Canonical rule name registry.

Single source of truth for the rule names that key the DiagnosticCollector
and appear in every report. Names are assigned by hand and never derived
from class names, so renaming a class does not change the output.

Structure:
  PUBLIC_RULE_NAMES - shipped, stable
  ALL_RULE_NAMES    - every name a report may carry
"""

from __future__ import annotations

# ── Locale file ─────────────────────────────────────────────────────
MISSING_TRANSLATIONS = "MissingTranslations"
KEY_ENGLISH_MATCHES = "KeyEnglishMatches"

# ── Source usage ────────────────────────────────────────────────────
USE_OF_KEYS_DO_NOT_EXIST = "UseOfKeysDoNotExist"

# ── Buckets ─────────────────────────────────────────────────────────

PUBLIC_RULE_NAMES: list[str] = sorted([
    MISSING_TRANSLATIONS,
    KEY_ENGLISH_MATCHES,
    USE_OF_KEYS_DO_NOT_EXIST,
])

ALL_RULE_NAMES: list[str] = sorted(set(PUBLIC_RULE_NAMES))


def _assert_rule_registry_invariants() -> None:
    """Fail fast on invariant violations.

    Called at import time so CI and local runs catch issues immediately.
    """
    import re

    name_re = re.compile(r"^[A-Z][A-Za-z]+$")

    def _check_bucket(name: str, names: list[str]) -> None:
        if names != sorted(names):
            raise AssertionError(f"{name} must be sorted")
        if len(names) != len(set(names)):
            raise AssertionError(f"{name} must contain unique names")
        bad = [x for x in names if not name_re.match(x)]
        if bad:
            raise AssertionError(f"{name} contains invalid rule names: {bad}")

    _check_bucket("PUBLIC_RULE_NAMES", PUBLIC_RULE_NAMES)
    _check_bucket("ALL_RULE_NAMES", ALL_RULE_NAMES)


_assert_rule_registry_invariants()
