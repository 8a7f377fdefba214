"""
locale_audit.api
================

Programmatic entrypoints for using locale_audit from other tools.

Goals:
  - No argparse / CLI dependencies
  - Stable, JSON-friendly outputs that match the bundled report schema

Non-goals:
  - Owning presentation — callers render results (see ``reports``)

Usage::

    from locale_audit.api import check_project

    diagnostics, report = check_project("locales/app.yml", ["src"])
    if diagnostics.has_error():
        ...

All functions raise a ``LocaleAuditError`` subclass on fatal input errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from locale_audit.analyzers.key_usage import KeyUsageExtractor
from locale_audit.contracts.load import validate_instance  # noqa: F401
from locale_audit.core.config import CheckConfig
from locale_audit.core.discover import discover_rust_files
from locale_audit.core.runner import run_check
from locale_audit.model.diagnostic import DiagnosticCollector
from locale_audit.model.key_usage import KeyUsage
from locale_audit.model.locale_table import LocaleTable, load_locale_file


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


def load_locale_table(path: str | Path) -> LocaleTable:
    """Load and version-check a locale file."""
    return load_locale_file(_to_path(path))


def collect_key_usages(
    paths: Iterable[str | Path],
    *,
    jobs: int = 1,
) -> list[KeyUsage]:
    """Discover Rust files under *paths* and collect every ``t!()`` key."""
    files = discover_rust_files([_to_path(p) for p in paths])
    return KeyUsageExtractor(jobs=jobs).run(files)


def check_project(
    locale_file: str | Path,
    sources: Sequence[str | Path],
    *,
    rules: Optional[list[Any]] = None,
    config: Optional[CheckConfig] = None,
) -> tuple[DiagnosticCollector, dict[str, Any]]:
    """Run the standard check pipeline programmatically.

    Parameters
    ----------
    locale_file:
        Path to the YAML locale file.
    sources:
        Rust files and/or directories to scan for ``t!()`` invocations.
    rules:
        Override the default rule set. Each must conform to the ``Rule``
        protocol (``name``, ``check()``).
    config:
        Discovery and worker settings.

    Returns
    -------
    ``(DiagnosticCollector, report_dict)``
        The diagnostics and the schema-aligned JSON report.
    """
    result = run_check(
        _to_path(locale_file),
        [_to_path(s) for s in sources],
        rules=rules,
        config=config,
    )
    return result.diagnostics, result.to_dict()
