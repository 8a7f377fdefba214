"""KeyEnglishMatches — a key must read exactly like its English translation.

This is a project convention, not something rust-i18n requires. Text
between braces in the key is a placeholder and must appear in the English
translation in rust-i18n's interpolation syntax::

    "Restarting {app}"  ->  "Restarting %{app}"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from locale_audit import rules
from locale_audit.model import Language
from locale_audit.model.diagnostic import DiagnosticCollector
from locale_audit.model.key_usage import KeyUsage
from locale_audit.model.locale_table import LocaleTable

LEFT_BRACE = "{"
RIGHT_BRACE = "}"

MISSING_ENGLISH_MESSAGE = "Missing English translation"


# ── key tokenizer ────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class WithoutBrace:
    """Text outside any pair of braces."""

    text: str


@dataclass(frozen=True, slots=True)
class WithinBrace:
    """Text enclosed by a matching ``{`` ``}`` pair, braces excluded."""

    text: str


LocaleToken = Union[WithoutBrace, WithinBrace]


def tokenize_key(key: str) -> list[LocaleToken]:
    """Split *key* into brace-enclosed and plain segments.

    Braces do not nest: the first ``}`` after a ``{`` closes it. A ``{``
    with no ``}`` after it turns the whole remaining tail into plain text.
    """
    tokens: list[LocaleToken] = []
    start = 0

    while start < len(key):
        left = key.find(LEFT_BRACE, start)
        if left == -1:
            tokens.append(WithoutBrace(key[start:]))
            break

        right = key.find(RIGHT_BRACE, left)
        if right == -1:
            tokens.append(WithoutBrace(key[start:]))
            break

        if left != start:
            tokens.append(WithoutBrace(key[start:left]))
        tokens.append(WithinBrace(key[left + 1:right]))
        start = right + 1

    return tokens


def expected_english(tokens: Sequence[LocaleToken]) -> str:
    """Rebuild the English text a key implies: ``{x}`` becomes ``%{x}``."""
    parts: list[str] = []
    for token in tokens:
        if isinstance(token, WithinBrace):
            parts.append(f"%{{{token.text}}}")
        else:
            parts.append(token.text)
    return "".join(parts)


# ── rule ─────────────────────────────────────────────────────────────


class KeyEnglishMatches:
    """Checks that every key matches its English translation.

    The first key without an English translation is reported with a
    message and ends the check: keys after it are not examined at all.
    A mismatching translation is reported with no message.
    """

    name: str = rules.KEY_ENGLISH_MATCHES

    def check(
        self,
        table: LocaleTable,
        usages: Sequence[KeyUsage],
        collector: DiagnosticCollector,
    ) -> None:
        for key, record in table.items():
            en = record.get(Language.EN)
            if en is None:
                collector.report(self.name, key, MISSING_ENGLISH_MESSAGE)
                return

            if en != expected_english(tokenize_key(key)):
                collector.report(self.name, key)
