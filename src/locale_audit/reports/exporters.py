"""Multi-format exporters for check results.

Supports:

*  **Text** — the console report, grouped by rule.
*  **JSON** — machine-readable, suitable for CI artifact storage.
*  **Markdown** — human-readable, suitable for PR comments.

All exporters produce a string; callers decide where it goes.
"""

from __future__ import annotations

from locale_audit.model.check_result import CheckResult
from locale_audit.model.diagnostic import DiagnosticCollector
from locale_audit.utils.json_norm import stable_json_dumps


# ════════════════════════════════════════════════════════════════════
# Text exporter
# ════════════════════════════════════════════════════════════════════


def export_text(diagnostics: DiagnosticCollector) -> str:
    """Render diagnostics the way the console report shows them::

        Errors Found:
          KeyEnglishMatches
            Restarting {app}
            Updating: Missing English translation
    """
    if not diagnostics.has_error():
        return "No error found!\n"

    lines = ["Errors Found:"]
    for rule, diags in diagnostics.items():
        lines.append(f"  {rule}")
        for d in diags:
            if d.message is None:
                lines.append(f"    {d.subject}")
            else:
                lines.append(f"    {d.subject}: {d.message}")
    return "\n".join(lines) + "\n"


# ════════════════════════════════════════════════════════════════════
# JSON exporter
# ════════════════════════════════════════════════════════════════════


def export_json(result: CheckResult, *, indent: int = 2) -> str:
    """Export a ``CheckResult`` as indented JSON."""
    return stable_json_dumps(result.to_dict(), indent=indent)


# ════════════════════════════════════════════════════════════════════
# Markdown exporter
# ════════════════════════════════════════════════════════════════════


def export_markdown(result: CheckResult) -> str:
    """Export a ``CheckResult`` as a Markdown summary."""
    report = result.to_dict()
    inputs = report["inputs"]
    summary = report["summary"]

    lines: list[str] = []
    lines.append("# Locale Audit")
    lines.append("")
    lines.append(f"**Locale file:** `{inputs['locale_file']}`  ")
    lines.append(
        f"**Checked:** {inputs['locale_keys']} keys, "
        f"{inputs['key_usages']} usages in {inputs['source_files']} files  "
    )
    lines.append(f"**Diagnostics:** {summary['diagnostics_total']}")
    lines.append("")

    if summary["by_rule"]:
        lines.append("| Rule | Diagnostics |")
        lines.append("|------|------------:|")
        for rule, count in summary["by_rule"].items():
            lines.append(f"| {rule} | {count} |")
        lines.append("")

    for entry in report["rules"]:
        if not entry["diagnostics"]:
            continue
        lines.append(f"## {entry['rule']}")
        lines.append("")
        for d in entry["diagnostics"]:
            if d["message"] is None:
                lines.append(f"- `{d['subject']}`")
            else:
                lines.append(f"- `{d['subject']}`: {d['message']}")
        lines.append("")

    lines.append("---")
    lines.append(f"*Exported by locale-audit {report['tool_version']}*")
    lines.append("")
    return "\n".join(lines)
