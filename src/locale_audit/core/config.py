"""Check configuration — CLI flags layered over an optional YAML file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from locale_audit.core.discover import DiscoverConfig
from locale_audit.errors import ConfigError

OUTPUT_FORMATS = ("text", "json", "markdown")

# Worker count for reading/parsing sources.  Override with
# LOCALE_AUDIT_JOBS env var.
_DEFAULT_JOBS = 1


def default_jobs() -> int:
    raw = os.environ.get("LOCALE_AUDIT_JOBS", "")
    if not raw:
        return _DEFAULT_JOBS
    try:
        return max(1, int(raw))
    except ValueError as e:
        raise ConfigError(f"LOCALE_AUDIT_JOBS should be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class CheckConfig:
    """Immutable configuration for one check run."""

    locale_file: Path | None = None
    sources: tuple[Path, ...] = ()
    ignore_dirs: frozenset[str] = DiscoverConfig().ignore_dirs
    follow_symlinks: bool = False
    jobs: int = field(default_factory=default_jobs)
    output_format: str = "text"

    def discover_config(self) -> DiscoverConfig:
        return DiscoverConfig(
            ignore_dirs=self.ignore_dirs,
            follow_symlinks=self.follow_symlinks,
        )

    def merged(self, **overrides: Any) -> "CheckConfig":
        """Return a copy where every non-None override replaces the field."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_yaml(cls, path: Path) -> "CheckConfig":
        """Load a config file.

        Recognized keys: ``locale_file``, ``rust_src_to_check``, ``exclude``,
        ``jobs``, ``format``. Relative paths resolve against the file's
        directory.
        """
        import yaml

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot load config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"config file {path} should contain a mapping")

        base = path.parent
        kwargs: dict[str, Any] = {}

        if "locale_file" in data:
            kwargs["locale_file"] = base / str(data["locale_file"])

        sources = data.get("rust_src_to_check", [])
        if isinstance(sources, str):
            sources = [sources]
        if not isinstance(sources, list):
            raise ConfigError("rust_src_to_check should be a path or a list of paths")
        if sources:
            kwargs["sources"] = tuple(base / str(s) for s in sources)

        exclude = data.get("exclude", [])
        if not isinstance(exclude, list):
            raise ConfigError("exclude should be a list of directory names")
        if exclude:
            kwargs["ignore_dirs"] = DiscoverConfig().ignore_dirs | {str(e) for e in exclude}

        if "jobs" in data:
            jobs = data["jobs"]
            if isinstance(jobs, bool) or not isinstance(jobs, int) or jobs < 1:
                raise ConfigError(f"jobs should be a positive integer, got {jobs!r}")
            kwargs["jobs"] = jobs

        if "format" in data:
            fmt = data["format"]
            if fmt not in OUTPUT_FORMATS:
                raise ConfigError(
                    f"format should be one of {', '.join(OUTPUT_FORMATS)}, got {fmt!r}"
                )
            kwargs["output_format"] = fmt

        return cls(**kwargs)
