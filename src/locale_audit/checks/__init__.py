"""Rules check the locale table and the collected key usages.

Every rule exposes ``name`` (a constant from ``locale_audit.rules``) and
``check(table, usages, collector)``. A rule only reports under its own name
and never reads what other rules reported, so the registration order does
not change the set of diagnostics.

Shipped rules, in registration order:
    - MissingTranslations
    - KeyEnglishMatches
    - UseOfKeysDoNotExist
"""

from __future__ import annotations

from typing import Protocol, Sequence

from locale_audit.model.diagnostic import DiagnosticCollector
from locale_audit.model.key_usage import KeyUsage
from locale_audit.model.locale_table import LocaleTable


class Rule(Protocol):
    """Every rule must expose ``name`` and ``check()``."""

    name: str

    def check(
        self,
        table: LocaleTable,
        usages: Sequence[KeyUsage],
        collector: DiagnosticCollector,
    ) -> None:
        """Append diagnostics for *table* / *usages* into *collector*."""
        ...


from locale_audit.checks.key_english_matches import KeyEnglishMatches  # noqa: E402
from locale_audit.checks.missing_translations import MissingTranslations  # noqa: E402
from locale_audit.checks.use_of_keys_do_not_exist import UseOfKeysDoNotExist  # noqa: E402

# Default rule set, the one the CLI registers.
DEFAULT_RULES = (
    MissingTranslations,
    KeyEnglishMatches,
    UseOfKeysDoNotExist,
)


def default_rules() -> list[Rule]:
    return [cls() for cls in DEFAULT_RULES]
