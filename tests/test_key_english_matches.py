"""Tests for the KeyEnglishMatches rule and its brace tokenizer."""

from __future__ import annotations

import pytest

from locale_audit.checks.key_english_matches import (
    MISSING_ENGLISH_MESSAGE,
    KeyEnglishMatches,
    WithinBrace,
    WithoutBrace,
    expected_english,
    tokenize_key,
)
from locale_audit.model.diagnostic import Diagnostic, DiagnosticCollector
from locale_audit.model.locale_table import LocaleTable, TranslationRecord


def _table(**entries: str | None) -> LocaleTable:
    return LocaleTable({k: TranslationRecord(en=v) for k, v in entries.items()})


def _check(table: LocaleTable) -> list[Diagnostic]:
    collector = DiagnosticCollector()
    KeyEnglishMatches().check(table, [], collector)
    return list(collector)


# ── tokenizer ────────────────────────────────────────────────────────


class TestTokenizeKey:
    def test_no_brace(self) -> None:
        assert tokenize_key("without_any_brace") == [WithoutBrace("without_any_brace")]

    def test_starts_with_brace(self) -> None:
        assert tokenize_key("{brace}topgrade") == [
            WithinBrace("brace"),
            WithoutBrace("topgrade"),
        ]

    def test_ends_with_brace(self) -> None:
        assert tokenize_key("topgrade{brace}") == [
            WithoutBrace("topgrade"),
            WithinBrace("brace"),
        ]

    def test_brace_in_the_middle(self) -> None:
        assert tokenize_key("topgrade{brace}topgrade") == [
            WithoutBrace("topgrade"),
            WithinBrace("brace"),
            WithoutBrace("topgrade"),
        ]

    def test_continuous_braces(self) -> None:
        assert tokenize_key("{brace}{brace}") == [
            WithinBrace("brace"),
            WithinBrace("brace"),
        ]

    def test_continuous_braces_in_the_middle(self) -> None:
        assert tokenize_key("topgrade{brace}{brace}topgrade") == [
            WithoutBrace("topgrade"),
            WithinBrace("brace"),
            WithinBrace("brace"),
            WithoutBrace("topgrade"),
        ]

    def test_single_left_brace(self) -> None:
        assert tokenize_key("{") == [WithoutBrace("{")]

    def test_multiple_left_braces(self) -> None:
        assert tokenize_key("x{x{x{") == [WithoutBrace("x{x{x{")]

    def test_a_pair_in_chaos(self) -> None:
        assert tokenize_key("}{x{x}{{x{") == [
            WithoutBrace("}"),
            WithinBrace("x{x"),
            WithoutBrace("{{x{"),
        ]

    def test_empty_pair_is_kept(self) -> None:
        assert tokenize_key("a{}b") == [
            WithoutBrace("a"),
            WithinBrace(""),
            WithoutBrace("b"),
        ]

    def test_unmatched_brace_swallows_prefix(self) -> None:
        assert tokenize_key("a{b}c{d") == [
            WithoutBrace("a"),
            WithinBrace("b"),
            WithoutBrace("c{d"),
        ]

    def test_empty_key(self) -> None:
        assert tokenize_key("") == []


class TestExpectedEnglish:
    def test_prepend_percent(self) -> None:
        assert expected_english(tokenize_key("hello, {topgrade}")) == "hello, %{topgrade}"

    def test_without_brace(self) -> None:
        assert expected_english(tokenize_key("hello, topgrade")) == "hello, topgrade"

    def test_unmatched_brace_unchanged(self) -> None:
        assert expected_english(tokenize_key("50% {done")) == "50% {done"


# ── rule ─────────────────────────────────────────────────────────────


class TestKeyEnglishMatchesRule:
    def test_matching_translation(self) -> None:
        assert _check(_table(**{"Restarting {app}": "Restarting %{app}"})) == []

    def test_unescaped_placeholder(self) -> None:
        diags = _check(_table(**{"Restarting {app}": "Restarting {app}"}))
        assert diags == [Diagnostic(rule="KeyEnglishMatches", subject="Restarting {app}")]
        assert diags[0].message is None

    def test_different_wording(self) -> None:
        diags = _check(_table(Updating="Upgrading", Cleaning="Cleaning"))
        assert [d.subject for d in diags] == ["Updating"]

    def test_missing_translation_message(self) -> None:
        diags = _check(_table(Updating=None))
        assert diags == [
            Diagnostic(
                rule="KeyEnglishMatches",
                subject="Updating",
                message=MISSING_ENGLISH_MESSAGE,
            )
        ]

    def test_short_circuit_on_first_missing(self) -> None:
        # B is mismatched but never examined: the check stops at A.
        diags = _check(_table(A=None, B="not B"))
        assert [(d.subject, d.message) for d in diags] == [("A", "Missing English translation")]

    def test_keys_before_missing_still_checked(self) -> None:
        diags = _check(_table(A="not A", B=None, C="not C", D=None))
        assert [(d.subject, d.message) for d in diags] == [
            ("A", None),
            ("B", "Missing English translation"),
        ]

    def test_empty_translation_is_present(self) -> None:
        diags = _check(_table(Updating="", Cleaning=None))
        assert [(d.subject, d.message) for d in diags] == [
            ("Updating", None),
            ("Cleaning", "Missing English translation"),
        ]

    @pytest.mark.parametrize(
        "key,en",
        [
            ("{", "{"),
            ("{a}{b}", "%{a}%{b}"),
            ("Press {key} to {action}", "Press %{key} to %{action}"),
        ],
    )
    def test_convention_examples(self, key: str, en: str) -> None:
        assert _check(_table(**{key: en})) == []
