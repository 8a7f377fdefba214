"""Enums shared across the model and rule layers."""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Translation languages the locale table knows about.

    Only the pilot language is enforced by the shipped rules.
    """

    EN = "en"

    @property
    def label(self) -> str:
        return f"{_LANGUAGE_NAMES[self]}({self.value})"


_LANGUAGE_NAMES = {
    Language.EN: "English",
}

SUPPORTED_LANGUAGES: tuple[Language, ...] = tuple(Language)
