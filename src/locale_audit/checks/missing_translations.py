"""MissingTranslations — keys that lack a translation in a supported language."""

from __future__ import annotations

from typing import Sequence

from locale_audit import rules
from locale_audit.model import Language
from locale_audit.model.diagnostic import DiagnosticCollector
from locale_audit.model.key_usage import KeyUsage
from locale_audit.model.locale_table import LocaleTable


def missing_message(languages: Sequence[Language]) -> str:
    """One message per key, naming every missing language."""
    labels = ", ".join(lang.label for lang in languages)
    suffix = "translation" if len(languages) == 1 else "translations"
    return f"Missing {labels} {suffix}"


class MissingTranslations:
    """Reports each locale key once, listing all of its absent translations."""

    name: str = rules.MISSING_TRANSLATIONS

    def check(
        self,
        table: LocaleTable,
        usages: Sequence[KeyUsage],
        collector: DiagnosticCollector,
    ) -> None:
        for key, record in table.items():
            missing = record.missing_languages()
            if missing:
                collector.report(self.name, key, missing_message(missing))
