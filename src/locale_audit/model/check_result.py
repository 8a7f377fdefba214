"""CheckResult — everything one run produced, plus its JSON report form."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from locale_audit import __version__
from locale_audit.model.diagnostic import DiagnosticCollector
from locale_audit.model.key_usage import KeyUsage
from locale_audit.model.locale_table import LocaleTable

REPORT_SCHEMA_VERSION = "locale_audit_report_v1"


@dataclass(slots=True)
class CheckResult:
    """Assembled run output matching ``locale_audit_report.schema.json``.

    Constructed by ``core.runner`` after every rule has run.
    """

    locale_file: Path
    table: LocaleTable
    files: list[Path]
    usages: list[KeyUsage]
    diagnostics: DiagnosticCollector
    rule_names: list[str] = field(default_factory=list)
    tool_version: str = __version__

    def has_error(self) -> bool:
        return self.diagnostics.has_error()

    def to_dict(self) -> dict[str, Any]:
        """Produce the report JSON.

        Every registered rule is listed, in registration order, even when it
        reported nothing.
        """
        names = list(self.rule_names)
        for name in self.diagnostics.rule_names:
            if name not in names:
                names.append(name)

        return {
            "schema_version": REPORT_SCHEMA_VERSION,
            "tool_version": self.tool_version,
            "inputs": {
                "locale_file": self.locale_file.as_posix(),
                "locale_keys": len(self.table),
                "source_files": len(self.files),
                "key_usages": len(self.usages),
            },
            "summary": {
                "has_errors": self.has_error(),
                "diagnostics_total": self.diagnostics.total,
                "by_rule": {
                    name: len(self.diagnostics.for_rule(name)) for name in names
                },
            },
            "rules": [
                {
                    "rule": name,
                    "diagnostics": [
                        d.to_dict() for d in self.diagnostics.for_rule(name)
                    ],
                }
                for name in names
            ],
        }
