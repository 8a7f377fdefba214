"""LocaleTable — the parsed, version-checked locale data file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

import yaml

from locale_audit.errors import (
    LocaleFileError,
    LocaleVersionMismatchError,
    LocaleVersionMissingError,
)
from locale_audit.model import Language, SUPPORTED_LANGUAGES

_logger = logging.getLogger(__name__)

# rust-i18n locale file layout version 2: one file, key -> {lang: text}.
LOCALE_FILE_VERSION = 2
VERSION_KEY = "_version"


# ── YAML loading ─────────────────────────────────────────────────────

_BOOL_TAG = "tag:yaml.org,2002:bool"
_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
_VALUE_TAG = "tag:yaml.org,2002:value"


class LocaleYamlLoader(yaml.SafeLoader):
    """SafeLoader resolving plain scalars by the YAML 1.2 core schema.

    rust-i18n reads locale files as YAML 1.2, where `Yes`, `Off`, `y`,
    `2024-01-01` and `1:30` are plain strings. PyYAML's default YAML 1.1
    rules would turn them into bools, dates and sexagesimal ints.
    """


LocaleYamlLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in (_BOOL_TAG, _INT_TAG, _FLOAT_TAG, _TIMESTAMP_TAG, _VALUE_TAG)
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

LocaleYamlLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
# int before float: the float pattern also matches plain digits
LocaleYamlLoader.add_implicit_resolver(
    _INT_TAG,
    re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
    list("-+0123456789"),
)
LocaleYamlLoader.add_implicit_resolver(
    _FLOAT_TAG,
    re.compile(
        r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
        r"|[-+]?\.(?:inf|Inf|INF)|\.(?:nan|NaN|NAN))$"
    ),
    list("-+.0123456789"),
)


def _construct_core_int(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> int:
    value = loader.construct_scalar(node)
    if value.startswith("0o"):
        return int(value[2:], 8)
    if value.startswith("0x"):
        return int(value[2:], 16)
    return int(value)


LocaleYamlLoader.add_constructor(_INT_TAG, _construct_core_int)


@dataclass(frozen=True, slots=True)
class TranslationRecord:
    """Translations of one locale key.

    ``None`` means the translation is absent; ``""`` is an (empty)
    translation that exists.
    """

    en: str | None = None

    def get(self, language: Language) -> str | None:
        return getattr(self, language.value)

    def missing_languages(self) -> list[Language]:
        """Supported languages with no translation, in declaration order."""
        return [lang for lang in SUPPORTED_LANGUAGES if self.get(lang) is None]

    @classmethod
    def from_node(cls, key: str, node: Any) -> "TranslationRecord":
        if node is None:
            return cls()
        if not isinstance(node, Mapping):
            raise LocaleFileError(
                f"invalid format for translation of key {key!r}: "
                f"expected a mapping or null, got {type(node).__name__}"
            )

        en = node.get(Language.EN.value)
        if Language.EN.value in node and not isinstance(en, str):
            raise LocaleFileError(
                f"translation of key {key!r} for {Language.EN.value!r} "
                f"should be a string, got {type(en).__name__}"
            )
        return cls(en=en)


@dataclass(frozen=True)
class LocaleTable:
    """Read-only, insertion-ordered mapping of locale key -> TranslationRecord."""

    texts: Mapping[str, TranslationRecord] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not isinstance(self.texts, MappingProxyType):
            object.__setattr__(self, "texts", MappingProxyType(dict(self.texts)))

    def __contains__(self, key: object) -> bool:
        return key in self.texts

    def __iter__(self) -> Iterator[str]:
        return iter(self.texts)

    def __len__(self) -> int:
        return len(self.texts)

    def __getitem__(self, key: str) -> TranslationRecord:
        return self.texts[key]

    def items(self):
        return self.texts.items()

    @classmethod
    def from_tree(cls, tree: Any) -> "LocaleTable":
        """Build a table from a generic deserialized data tree.

        Raises
        ------
        LocaleFileError
            Outer node is not a mapping, a key is not a string, or a
            translation has an invalid shape.
        LocaleVersionMissingError
            ``_version`` is absent.
        LocaleVersionMismatchError
            ``_version`` is not the integer ``LOCALE_FILE_VERSION``.
        """
        if not isinstance(tree, Mapping):
            raise LocaleFileError(
                "the outer level container should be a mapping, "
                f"got {type(tree).__name__}"
            )

        remaining = dict(tree)
        if VERSION_KEY not in remaining:
            raise LocaleVersionMissingError()
        version = remaining.pop(VERSION_KEY)
        # bool is an int subclass; `_version: true` is still a mismatch
        if isinstance(version, bool) or not isinstance(version, int):
            raise LocaleVersionMismatchError(version, LOCALE_FILE_VERSION)
        if version != LOCALE_FILE_VERSION:
            raise LocaleVersionMismatchError(version, LOCALE_FILE_VERSION)

        texts: dict[str, TranslationRecord] = {}
        for key, node in remaining.items():
            if not isinstance(key, str):
                raise LocaleFileError(
                    f"locale translation key should be a string, got {key!r}"
                )
            texts[key] = TranslationRecord.from_node(key, node)

        return cls(texts=texts)


def load_locale_file(path: Path) -> LocaleTable:
    """Read a YAML locale file and build its ``LocaleTable``."""
    try:
        with open(path, encoding="utf-8") as f:
            tree = yaml.load(f, Loader=LocaleYamlLoader)
    except OSError as e:
        raise LocaleFileError(f"cannot open the locale file {path}: {e}") from e
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        raise LocaleFileError(f"cannot parse the locale file {path}: {e}") from e

    table = LocaleTable.from_tree(tree)
    _logger.debug("Loaded %d locale keys from %s", len(table), path)
    return table
