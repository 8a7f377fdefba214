"""Canonical JSON serialization — the single dump path for reports.

Guarantees:
  - Stable key ordering (``sort_keys=True``); list order is preserved
  - Trailing newline at EOF
  - ``Path`` objects → POSIX strings
  - Non-ASCII text kept as-is (locale keys are often not English)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping


def _to_builtin(obj: Any) -> Any:
    """Convert common non-JSON types into JSON-safe builtins."""
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, Path):
        return obj.as_posix()
    if isinstance(obj, Mapping):
        return {str(k): _to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_builtin(v) for v in obj]
    raise TypeError(f"cannot serialize {type(obj).__name__} to JSON")


def stable_json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    s = json.dumps(
        _to_builtin(obj),
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )
    return s + "\n"
