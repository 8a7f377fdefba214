"""Tests for the MissingTranslations and UseOfKeysDoNotExist rules and the rule registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from locale_audit import rules
from locale_audit.checks import DEFAULT_RULES, default_rules
from locale_audit.checks.missing_translations import MissingTranslations, missing_message
from locale_audit.checks.use_of_keys_do_not_exist import UseOfKeysDoNotExist
from locale_audit.model import Language
from locale_audit.model.diagnostic import Diagnostic, DiagnosticCollector
from locale_audit.model.key_usage import KeyUsage
from locale_audit.model.locale_table import LocaleTable, TranslationRecord


def _table(**entries: str | None) -> LocaleTable:
    return LocaleTable({k: TranslationRecord(en=v) for k, v in entries.items()})


def _usage(key: str, line: int = 1, column: int = 0) -> KeyUsage:
    return KeyUsage(key=key, file=Path("src/main.rs"), line=line, column=column)


# ── MissingTranslations ─────────────────────────────────────────────


class TestMissingTranslations:
    def test_reports_each_missing_key_in_order(self) -> None:
        collector = DiagnosticCollector()
        MissingTranslations().check(_table(b=None, a="a", c=None), [], collector)
        assert list(collector) == [
            Diagnostic("MissingTranslations", "b", "Missing English(en) translation"),
            Diagnostic("MissingTranslations", "c", "Missing English(en) translation"),
        ]

    def test_complete_table_is_clean(self) -> None:
        collector = DiagnosticCollector()
        MissingTranslations().check(_table(a="a", b=""), [], collector)
        assert not collector.has_error()

    def test_usages_are_ignored(self) -> None:
        collector = DiagnosticCollector()
        MissingTranslations().check(_table(a="a"), [_usage("zzz")], collector)
        assert len(collector) == 0

    def test_single_language_message(self) -> None:
        assert missing_message([Language.EN]) == "Missing English(en) translation"

    def test_several_languages_message(self) -> None:
        assert missing_message([Language.EN, Language.EN]) == (
            "Missing English(en), English(en) translations"
        )


# ── UseOfKeysDoNotExist ─────────────────────────────────────────────


class TestUseOfKeysDoNotExist:
    def test_unknown_key_reported_with_location(self) -> None:
        collector = DiagnosticCollector()
        UseOfKeysDoNotExist().check(
            _table(Updating="Updating"),
            [_usage("Updating"), _usage("Not in the file", line=3, column=12)],
            collector,
        )
        (diag,) = collector
        assert diag.rule == "UseOfKeysDoNotExist"
        assert diag.subject == (
            "file 'src/main.rs' / line '3' / column '12' / key 'Not in the file'"
        )
        assert diag.message is None

    def test_key_with_missing_translation_still_exists(self) -> None:
        collector = DiagnosticCollector()
        UseOfKeysDoNotExist().check(_table(Updating=None), [_usage("Updating")], collector)
        assert not collector.has_error()

    def test_every_call_site_reported(self) -> None:
        collector = DiagnosticCollector()
        UseOfKeysDoNotExist().check(
            _table(), [_usage("x", line=1), _usage("x", line=7)], collector
        )
        assert [d.subject for d in collector] == [
            "file 'src/main.rs' / line '1' / column '0' / key 'x'",
            "file 'src/main.rs' / line '7' / column '0' / key 'x'",
        ]

    def test_version_key_is_not_a_key(self) -> None:
        table = LocaleTable.from_tree({"_version": 2})
        collector = DiagnosticCollector()
        UseOfKeysDoNotExist().check(table, [_usage("_version")], collector)
        assert len(collector) == 1


# ── registry ────────────────────────────────────────────────────────


class TestRuleRegistry:
    def test_names_are_fixed_strings(self) -> None:
        assert rules.MISSING_TRANSLATIONS == "MissingTranslations"
        assert rules.KEY_ENGLISH_MATCHES == "KeyEnglishMatches"
        assert rules.USE_OF_KEYS_DO_NOT_EXIST == "UseOfKeysDoNotExist"

    def test_default_rules_registration_order(self) -> None:
        assert [r.name for r in default_rules()] == [
            "MissingTranslations",
            "KeyEnglishMatches",
            "UseOfKeysDoNotExist",
        ]

    def test_default_rules_are_public(self) -> None:
        assert sorted(cls.name for cls in DEFAULT_RULES) == rules.PUBLIC_RULE_NAMES

    def test_all_names_are_the_public_names(self) -> None:
        assert rules.ALL_RULE_NAMES == rules.PUBLIC_RULE_NAMES
        assert not hasattr(rules, "EXPERIMENTAL_RULE_NAMES")

    def test_invariant_check_rejects_bad_names(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(rules, "PUBLIC_RULE_NAMES", ["missing_translations"])
        with pytest.raises(AssertionError, match="invalid rule names"):
            rules._assert_rule_registry_invariants()

    def test_invariant_check_rejects_unsorted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(rules, "PUBLIC_RULE_NAMES", ["B", "A"])
        with pytest.raises(AssertionError, match="must be sorted"):
            rules._assert_rule_registry_invariants()
