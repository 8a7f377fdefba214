"""Runner — loads inputs, extracts key usages, runs the rules, builds CheckResult."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from locale_audit.analyzers.key_usage import KeyUsageExtractor
from locale_audit.checks import Rule, default_rules
from locale_audit.contracts.load import validate_instance
from locale_audit.core.checker import Checker
from locale_audit.core.config import CheckConfig
from locale_audit.core.discover import discover_rust_files
from locale_audit.model.check_result import CheckResult
from locale_audit.model.locale_table import load_locale_file

_logger = logging.getLogger(__name__)


def run_check(
    locale_file: Path,
    sources: Sequence[Path],
    *,
    rules: Sequence[Rule] | None = None,
    config: CheckConfig | None = None,
) -> CheckResult:
    """Execute the whole pipeline and assemble a ``CheckResult``.

    Any fatal input error (``LocaleAuditError``) propagates before a single
    rule has run, so there are never partial diagnostics.
    """
    cfg = config or CheckConfig()

    # ── 1. locale table ─────────────────────────────────────────────
    table = load_locale_file(locale_file)
    _logger.info("Loaded %d locale key(s) from %s", len(table), locale_file)

    # ── 2. source discovery + key extraction ───────────────────────
    files = discover_rust_files(sources, cfg.discover_config())
    _logger.info("Discovered %d Rust file(s)", len(files))

    usages = KeyUsageExtractor(jobs=cfg.jobs).run(files)
    _logger.info("Collected %d key usage(s)", len(usages))

    # ── 3. rules ────────────────────────────────────────────────────
    checker = Checker(rules if rules is not None else default_rules())
    diagnostics = checker.check(table, usages)

    result = CheckResult(
        locale_file=locale_file,
        table=table,
        files=files,
        usages=usages,
        diagnostics=diagnostics,
        rule_names=[rule.name for rule in checker.rules],
    )

    # ── 4. validate output against schema ───────────────────────────
    validate_instance(result.to_dict(), "locale_audit_report.schema.json")
    return result
