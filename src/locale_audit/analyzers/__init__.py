"""Analyzers read source files and produce raw facts for the rule layer.

Available analyzers:
    - KeyUsageExtractor: finds ``t!()`` / ``rust_i18n::t!()`` invocations in
      Rust sources and records their locale key and position.
"""

from __future__ import annotations

from locale_audit.analyzers.key_usage import KeyUsageExtractor  # noqa: F401
