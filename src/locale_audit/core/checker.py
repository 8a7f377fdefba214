"""Checker — the rule engine.

Holds the registered rules and runs them, in registration order, against
one locale table and one set of key usages. Every ``check()`` call gets a
fresh ``DiagnosticCollector``; nothing survives between runs.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from locale_audit.checks import Rule
from locale_audit.model.diagnostic import DiagnosticCollector
from locale_audit.model.key_usage import KeyUsage
from locale_audit.model.locale_table import LocaleTable

_logger = logging.getLogger(__name__)


class Checker:
    """Ordered registry of rules."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: list[Rule] = []
        for rule in rules:
            self.register_rule(rule)

    @property
    def rules(self) -> list[Rule]:
        return list(self._rules)

    def register_rule(self, rule: Rule) -> None:
        """Append *rule*; its name must not be taken by another rule."""
        if any(r.name == rule.name for r in self._rules):
            raise ValueError(f"a rule named {rule.name!r} is already registered")
        self._rules.append(rule)

    def check(
        self,
        table: LocaleTable,
        usages: Sequence[KeyUsage],
    ) -> DiagnosticCollector:
        collector = DiagnosticCollector()
        for rule in self._rules:
            rule.check(table, usages, collector)
            _logger.info(
                "Rule %s: %d diagnostic(s)", rule.name, len(collector.for_rule(rule.name))
            )
        return collector
