"""File discovery — expand input paths into the Rust files to check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from locale_audit.errors import SourceDiscoveryError

_logger = logging.getLogger(__name__)

RUST_FILE_EXTENSION = ".rs"

# Directory basenames never descended into.
_DEFAULT_EXCLUDES = frozenset({".git"})


@dataclass(frozen=True)
class DiscoverConfig:
    """Configuration for source discovery.

    All parameters are optional and have sensible defaults.
    """

    include_exts: tuple[str, ...] = (RUST_FILE_EXTENSION,)
    ignore_dirs: frozenset[str] = _DEFAULT_EXCLUDES
    follow_symlinks: bool = False


def is_rust_file(path: Path, cfg: DiscoverConfig | None = None) -> bool:
    exts = (cfg or DiscoverConfig()).include_exts
    return path.suffix in exts


def _walk_dir(root: Path, cfg: DiscoverConfig, seen: set[Path]) -> Iterator[Path]:
    """Yield matching files under *root*, sorted per directory.

    *seen* holds the resolved directories already walked; a followed
    symlink back into one of them is not descended into again.
    """
    real = root.resolve()
    if real in seen:
        return
    seen.add(real)

    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SourceDiscoveryError(f"cannot read directory {root}: {e}") from e

    for p in entries:
        if p.is_symlink() and not cfg.follow_symlinks:
            continue
        if p.is_dir():
            if p.name in cfg.ignore_dirs:
                continue
            yield from _walk_dir(p, cfg, seen)
        elif p.is_file() and is_rust_file(p, cfg):
            yield p


def discover_rust_files(
    paths: Iterable[Path],
    cfg: DiscoverConfig | None = None,
) -> list[Path]:
    """Flatten *paths* into a list of Rust source files.

    * Files are kept when they carry the ``.rs`` extension.
    * Directories are walked recursively, skipping any subdirectory named in
      ``cfg.ignore_dirs`` (only ``.git`` by default; pass an empty set to
      walk everything).
    * A symbolic link given directly is replaced by the file it points to.

    Non-Rust files are silently dropped. Order follows *paths*, and inside a
    directory the walk is sorted so repeated runs see the same order.

    Raises
    ------
    SourceDiscoveryError
        If an input path does not exist.
    """
    cfg = cfg or DiscoverConfig()
    results: list[Path] = []

    for entry in paths:
        if entry.is_symlink():
            target = entry.resolve()
            if target.is_file() and is_rust_file(target, cfg):
                results.append(target)
            continue
        if not entry.exists():
            raise SourceDiscoveryError(f"path does not exist: {entry}")
        if entry.is_file():
            if is_rust_file(entry, cfg):
                results.append(entry)
        elif entry.is_dir():
            results.extend(_walk_dir(entry, cfg, set()))

    _logger.debug("Discovered %d Rust file(s)", len(results))
    return results
