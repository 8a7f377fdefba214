"""Diagnostic and DiagnosticCollector — the rule engine's output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single finding attributed to the rule that produced it.

    ``message is None`` means "convention mismatch, nothing more to say";
    a string means the rule is describing a specific failure.
    """

    rule: str
    subject: str
    message: str | None = None

    def to_dict(self) -> dict:
        return {"subject": self.subject, "message": self.message}


@dataclass
class DiagnosticCollector:
    """Rule name -> ordered list of diagnostics, owned by a single run.

    Rule names appear in the order they first reported something.
    """

    _by_rule: dict[str, list[Diagnostic]] = field(default_factory=dict)

    def report(self, rule: str, subject: str, message: str | None = None) -> None:
        self._by_rule.setdefault(rule, []).append(
            Diagnostic(rule=rule, subject=subject, message=message)
        )

    def has_error(self) -> bool:
        return self.total != 0

    @property
    def total(self) -> int:
        return sum(len(diags) for diags in self._by_rule.values())

    @property
    def rule_names(self) -> list[str]:
        return list(self._by_rule)

    def for_rule(self, rule: str) -> list[Diagnostic]:
        return list(self._by_rule.get(rule, []))

    def items(self) -> Iterator[tuple[str, list[Diagnostic]]]:
        for rule, diags in self._by_rule.items():
            yield rule, list(diags)

    def __iter__(self) -> Iterator[Diagnostic]:
        for diags in self._by_rule.values():
            yield from diags

    def __len__(self) -> int:
        return self.total
