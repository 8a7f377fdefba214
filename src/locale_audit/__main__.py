"""CLI entry-point for locale_audit.

Usage:
    python -m locale_audit --locale-file locales/app.yml --rust-src-to-check src
    python -m locale_audit --locale-file locales/app.yml --rust-src-to-check src build.rs --format json
    python -m locale_audit --config locale-audit.yaml [--output report.md --format markdown]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from locale_audit import __version__
from locale_audit.core.config import OUTPUT_FORMATS, CheckConfig
from locale_audit.core.runner import run_check
from locale_audit.errors import ConfigError, LocaleAuditError
from locale_audit.model.check_result import CheckResult
from locale_audit.reports.exporters import export_json, export_markdown, export_text
from locale_audit.utils.exit_codes import ExitCode

_logger = logging.getLogger("locale_audit")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="locale-audit",
        description="Check a rust-i18n locale file against the t!() calls in Rust sources.",
    )
    p.add_argument(
        "--locale-file",
        dest="locale_file",
        type=Path,
        default=None,
        help="The path to the locale file.",
    )
    p.add_argument(
        "--rust-src-to-check",
        dest="rust_src_to_check",
        type=Path,
        nargs="+",
        action="extend",
        default=None,
        help=(
            "Rust files to check. If any path points to a directory, all the "
            "Rust files in that directory are checked. May be repeated."
        ),
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file providing defaults for the options above.",
    )
    p.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="DIR",
        help="Directory name to skip while walking source directories. May be repeated.",
    )
    p.add_argument(
        "--jobs",
        type=int,
        default=None,
        help="Number of threads reading and parsing source files (default: LOCALE_AUDIT_JOBS or 1).",
    )
    p.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Report format (default: text).",
    )
    p.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v info, -vv debug).",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _resolve_config(args: argparse.Namespace) -> CheckConfig:
    """CLI flags win over the config file, which wins over defaults."""
    base = CheckConfig.from_yaml(args.config) if args.config else CheckConfig()
    ignore_dirs = base.ignore_dirs | set(args.exclude) if args.exclude else None
    if args.jobs is not None and args.jobs < 1:
        raise ConfigError(f"--jobs should be at least 1, got {args.jobs}")
    return base.merged(
        locale_file=args.locale_file,
        sources=tuple(args.rust_src_to_check) if args.rust_src_to_check else None,
        ignore_dirs=ignore_dirs,
        jobs=args.jobs,
        output_format=args.output_format,
    )


def _render(result: CheckResult, output_format: str) -> str:
    if output_format == "json":
        return export_json(result)
    if output_format == "markdown":
        return export_markdown(result)
    return export_text(result.diagnostics)


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = clean, 1 = diagnostics, 2 = error)."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        cfg = _resolve_config(args)
    except LocaleAuditError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if cfg.locale_file is None:
        print("error: --locale-file is required.", file=sys.stderr)
        return ExitCode.ERROR
    if not cfg.sources:
        print("error: --rust-src-to-check is required.", file=sys.stderr)
        return ExitCode.ERROR

    try:
        result = run_check(cfg.locale_file, cfg.sources, config=cfg)
    except LocaleAuditError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    rendered = _render(result, cfg.output_format)
    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered, encoding="utf-8")
        _logger.info("Report written to %s", args.output)
    else:
        sys.stdout.write(rendered)

    return ExitCode.VIOLATION if result.has_error() else ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
