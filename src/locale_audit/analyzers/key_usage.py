"""Key-usage analyzer — collects the locale keys passed to rust-i18n's ``t!()``.

Matched invocations
-------------------
``t!("key", ...)``
    Path with exactly one segment, ``t``.
``rust_i18n::t!("key", ...)``
    Path with exactly two segments, the crate name followed by ``t``.

Any other path (``::t!``, ``foo::t!``, ``foo::bar::t!``) is someone else's
macro and is ignored. Tokens inside another macro's arguments are opaque,
so ``println!("{}", t!("key"))`` is not seen.

A matched invocation whose first argument is not a string literal breaks the
build of the checked project, so it aborts the run instead of being reported.
"""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator

import tree_sitter_rust
from tree_sitter import Language, Node, Parser, Tree

from locale_audit.errors import MacroMisuseError, SourceParseError
from locale_audit.model.key_usage import KeyUsage

_logger = logging.getLogger(__name__)

RUST_LANGUAGE = Language(tree_sitter_rust.language())

TRANSLATION_MACRO = "t"
TRANSLATION_CRATE = "rust_i18n"

_PATH_SEGMENT_TYPES = frozenset({"identifier", "self", "super", "crate", "metavariable"})
_COMMENT_TYPES = frozenset({"line_comment", "block_comment"})
_RAW_STRING_RE = re.compile(r'^r(#*)"(.*)"\1$', re.DOTALL)


# ── parsing ──────────────────────────────────────────────────────────


def parse_rust(source: bytes, path: Path) -> Tree:
    """Parse *source* and reject trees that contain syntax errors."""
    tree = Parser(RUST_LANGUAGE).parse(source)
    if tree.root_node.has_error:
        bad = _first_error(tree.root_node)
        row, col = bad.start_point
        raise SourceParseError(path, f"syntax error at line {row + 1}, column {col}")
    return tree


def _first_error(root: Node) -> Node:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        stack.extend(
            child
            for child in reversed(node.children)
            if child.has_error or child.is_missing
        )
    return root


def _iter_macro_invocations(root: Node) -> Iterator[Node]:
    """Yield every ``macro_invocation`` node in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "macro_invocation":
            yield node
        stack.extend(reversed(node.children))


# ── path matching ────────────────────────────────────────────────────


def macro_path_segments(node: Node) -> list[str] | None:
    """Flatten a macro path into its segments.

    Returns None for shapes that can never name the translation macro:
    leading-root paths (``::a::t``), qualified types, generics.
    """
    if node.type in _PATH_SEGMENT_TYPES:
        return [node.text.decode("utf-8")]
    if node.type != "scoped_identifier":
        return None

    prefix = node.child_by_field_name("path")
    name = node.child_by_field_name("name")
    if prefix is None or name is None:
        return None
    head = macro_path_segments(prefix)
    if head is None:
        return None
    return head + [name.text.decode("utf-8")]


def is_translation_path(segments: list[str] | None) -> bool:
    return segments == [TRANSLATION_MACRO] or segments == [
        TRANSLATION_CRATE,
        TRANSLATION_MACRO,
    ]


def _is_translation_macro(node: Node) -> bool:
    path_node = node.child_by_field_name("macro")
    if path_node is None:
        return False
    return is_translation_path(macro_path_segments(path_node))


# ── key extraction ───────────────────────────────────────────────────


def _string_literal_value(node: Node) -> str | None:
    """Text of a string literal token without its quotes, else None."""
    text = node.text.decode("utf-8")
    if node.type == "string_literal" and text.startswith('"'):
        return text[1:-1]
    if node.type == "raw_string_literal":
        m = _RAW_STRING_RE.match(text)
        if m:
            return m.group(2)
    return None


def _char_column(source: bytes, node: Node) -> int:
    """0-based column of *node* counted in characters, not bytes."""
    line_start = node.start_byte - node.start_point[1]
    return len(source[line_start:node.start_byte].decode("utf-8"))


def _to_key_usage(node: Node, source: bytes, path: Path) -> KeyUsage:
    line = node.start_point[0] + 1
    column = _char_column(source, node)

    token_tree = next((c for c in node.children if c.type == "token_tree"), None)
    arguments = []
    if token_tree is not None:
        # drop the opening and closing delimiters
        arguments = [
            c for c in token_tree.children[1:-1] if c.type not in _COMMENT_TYPES
        ]
    if not arguments:
        raise MacroMisuseError(path, line, column, "t!() needs at least 1 argument")

    key = _string_literal_value(arguments[0])
    if key is None:
        raise MacroMisuseError(
            path,
            line,
            column,
            "the first argument to t!() should be a string literal, "
            f"got {arguments[0].text.decode('utf-8')!r}",
        )
    return KeyUsage(key=key, file=path, line=line, column=column)


# ── analyzer class ───────────────────────────────────────────────────


class KeyUsageExtractor:
    """Collects ``KeyUsage`` records from Rust source files.

    With ``jobs > 1`` files are read and parsed on a thread pool; the result
    order is still the order in which *files* were given.
    """

    id: str = "key_usage"
    version: str = "1.0.0"

    def __init__(self, jobs: int = 1) -> None:
        self.jobs = max(1, jobs)

    def run(self, files: list[Path]) -> list[KeyUsage]:
        if self.jobs > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.jobs) as pool:
                per_file = list(pool.map(self.extract_file, files))
        else:
            per_file = [self.extract_file(path) for path in files]

        usages: list[KeyUsage] = []
        for found in per_file:
            usages.extend(found)
        return usages

    def extract_file(self, path: Path) -> list[KeyUsage]:
        try:
            source = path.read_bytes()
        except OSError as e:
            raise SourceParseError(path, f"failed to read file: {e}") from e
        return self.extract_source(source, path)

    def extract_source(self, source: bytes | str, path: Path) -> list[KeyUsage]:
        """Extract key usages from in-memory *source* attributed to *path*."""
        if isinstance(source, str):
            source = source.encode("utf-8")
        try:
            source.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SourceParseError(path, f"stream did not contain valid UTF-8: {e}") from e

        tree = parse_rust(source, path)
        usages = [
            _to_key_usage(node, source, path)
            for node in _iter_macro_invocations(tree.root_node)
            if _is_translation_macro(node)
        ]
        _logger.debug("Found %d translation key(s) in %s", len(usages), path)
        return usages
