"""UseOfKeysDoNotExist — ``t!()`` calls whose key is not in the locale file."""

from __future__ import annotations

from typing import Sequence

from locale_audit import rules
from locale_audit.model.diagnostic import DiagnosticCollector
from locale_audit.model.key_usage import KeyUsage
from locale_audit.model.locale_table import LocaleTable


class UseOfKeysDoNotExist:
    """Reports every usage of an unknown key, one diagnostic per call site."""

    name: str = rules.USE_OF_KEYS_DO_NOT_EXIST

    def check(
        self,
        table: LocaleTable,
        usages: Sequence[KeyUsage],
        collector: DiagnosticCollector,
    ) -> None:
        for usage in usages:
            if usage.key not in table:
                collector.report(self.name, usage.describe())
