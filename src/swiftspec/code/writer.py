# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Indentation-aware text sink for emitting generated Swift source."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from swiftspec.code.code_block import CodeBlock
from swiftspec.model.modifiers import Modifier, sort_modifiers
from swiftspec.model.types import TYPE_NAME_CLASSES, TypeName, TypeVariableName, type_name_to_string

if TYPE_CHECKING:
    from swiftspec.spec.attributes import AttributeSpec

# ###############
# Public Interface
# ###############

DEFAULT_INDENT = "  "


class CodeWriter:
    """Accumulates emitted text, tracking indentation and doc comment mode.

    Indentation is written lazily at the start of each non-blank line, so
    callers emit text with embedded newlines and never write leading spaces.
    ``indent()`` and ``unindent()`` must be used in matched pairs.
    """

    def __init__(self, indent: str = DEFAULT_INDENT) -> None:
        self._indent = indent
        self._indent_level = 0
        self._chunks: list[str] = []
        self._trailing_newline = True
        self._doc = False

    @property
    def indent_level(self) -> int:
        return self._indent_level

    def output(self) -> str:
        """Return everything emitted so far."""
        return "".join(self._chunks)

    def indent(self, levels: int = 1) -> CodeWriter:
        self._indent_level += levels
        return self

    def unindent(self, levels: int = 1) -> CodeWriter:
        """Decrease the indentation level.

        Raises:
            ValueError: If the level would drop below zero.
        """
        if self._indent_level - levels < 0:
            raise ValueError(f"Cannot unindent {levels} from {self._indent_level}")
        self._indent_level -= levels
        return self

    def emit(self, text: str) -> CodeWriter:
        """Emit raw *text*, indenting each line that starts fresh."""
        first = True
        for line in text.split("\n"):
            # Each line after the first was preceded by a newline.
            if not first:
                if self._doc and self._trailing_newline:
                    self._emit_indentation()
                    self._chunks.append("///")
                self._chunks.append("\n")
                self._trailing_newline = True
            first = False

            if not line:
                continue

            if self._trailing_newline:
                self._emit_indentation()
                if self._doc:
                    self._chunks.append("/// ")
            self._chunks.append(line)
            self._trailing_newline = False
        return self

    def emit_code(self, block: CodeBlock) -> CodeWriter:
        """Emit *block*, expanding its placeholders."""
        args = iter(block.args)
        for part in block.format_parts:
            if part == "%L":
                self._emit_literal(next(args))
            elif part == "%S":
                self.emit(_string_literal(next(args)))
            elif part == "%T":
                self.emit(type_name_to_string(next(args)))  # type: ignore[arg-type]
            elif part == "%N":
                self.emit(str(next(args)))
            elif part == "%%":
                self.emit("%")
            elif part == "%>":
                self.indent()
            elif part == "%<":
                self.unindent()
            elif part == "%W":
                self.emit(" ")
            else:
                self.emit(part)
        return self

    def emit_doc(self, doc: CodeBlock) -> CodeWriter:
        """Emit *doc* as a ``///`` comment block; no-op when empty."""
        if doc.is_empty():
            return self
        self._doc = True
        try:
            self.emit_code(doc)
            if not self._trailing_newline:
                self.emit("\n")
        finally:
            self._doc = False
        return self

    def emit_attributes(self, attributes: Sequence[AttributeSpec], inline: bool = False) -> CodeWriter:
        """Emit each attribute on its own line, or space-separated when *inline*."""
        for attribute in attributes:
            attribute.emit(self)
            self.emit(" " if inline else "\n")
        return self

    def emit_modifiers(
        self,
        modifiers: Iterable[Modifier],
        implicit_modifiers: Iterable[Modifier] = (),
    ) -> CodeWriter:
        """Emit *modifiers* in declaration order, skipping those implied by context."""
        implicit = frozenset(implicit_modifiers)
        for modifier in sort_modifiers(set(modifiers)):
            if modifier in implicit:
                continue
            self.emit(modifier.keyword)
            self.emit(" ")
        return self

    def emit_type_variables(self, type_variables: Sequence[TypeVariableName]) -> CodeWriter:
        """Emit ``<T: Bound, U>``; no-op when empty."""
        if not type_variables:
            return self
        rendered = []
        for type_variable in type_variables:
            if type_variable.bounds:
                bounds = " & ".join(type_name_to_string(bound) for bound in type_variable.bounds)
                rendered.append(f"{type_variable.name}: {bounds}")
            else:
                rendered.append(type_variable.name)
        self.emit(f"<{', '.join(rendered)}>")
        return self

    def emit_type(self, type_name: TypeName) -> CodeWriter:
        self.emit(type_name_to_string(type_name))
        return self

    # ################
    # Implementation
    # ################

    def _emit_indentation(self) -> None:
        self._chunks.append(self._indent * self._indent_level)

    def _emit_literal(self, value: object) -> None:
        if isinstance(value, CodeBlock):
            self.emit_code(value)
            return
        if isinstance(value, TYPE_NAME_CLASSES):
            self.emit_type(value)
            return
        emit = getattr(value, "emit", None)
        if callable(emit):
            emit(self)
            return
        self.emit(str(value))


def _string_literal(value: object) -> str:
    """Quote *value* as a Swift string literal."""
    if value is None:
        return "nil"
    escaped = (
        str(value)
        .replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'
