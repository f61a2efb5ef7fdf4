# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Immutable code templates used for declaration bodies and doc comments.

A :class:`CodeBlock` is a sequence of format parts and the arguments they
consume. Format strings use ``%`` placeholders:

* ``%L`` emits a literal: strings verbatim, code blocks and specs by emitting them.
* ``%S`` emits a quoted string literal; ``None`` becomes ``nil``.
* ``%T`` emits a type name.
* ``%N`` emits a name: a string or any spec carrying a name.
* ``%%`` emits a percent sign.
* ``%>`` increases and ``%<`` decreases the indentation level.
* ``%W`` emits a space.

Arguments are consumed in order (``%L``), by 1-based position (``%2L``), or by
name through :meth:`CodeBlock.Builder.add_named` (``%count:L``).
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from swiftspec.model.types import TYPE_NAME_CLASSES

# ###############
# Public Interface
# ###############


@dataclass(frozen=True, eq=False)
class CodeBlock:
    """A fragment of generated code with its placeholder arguments.

    Two blocks are equal when they render to the same text.
    """

    format_parts: tuple[str, ...] = ()
    args: tuple[object, ...] = ()

    def is_empty(self) -> bool:
        return not self.format_parts

    def to_builder(self) -> CodeBlock.Builder:
        builder = CodeBlock.Builder()
        builder.format_parts.extend(self.format_parts)
        builder.args.extend(self.args)
        return builder

    def __add__(self, other: CodeBlock) -> CodeBlock:
        return self.to_builder().add_code(other).build()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, CodeBlock):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __str__(self) -> str:
        from swiftspec.code.writer import CodeWriter

        writer = CodeWriter()
        writer.emit_code(self)
        return writer.output()

    @staticmethod
    def of(format: str, *args: object) -> CodeBlock:
        return CodeBlock.Builder().add(format, *args).build()

    @staticmethod
    def builder() -> CodeBlock.Builder:
        return CodeBlock.Builder()

    @staticmethod
    def join(blocks: Iterable[CodeBlock], separator: str = ", ") -> CodeBlock:
        """Concatenate *blocks*, placing *separator* between each pair."""
        builder = CodeBlock.Builder()
        for index, block in enumerate(blocks):
            if index > 0:
                builder.add(separator.replace("%", "%%"))
            builder.add_code(block)
        return builder.build()

    class Builder:
        """Mutable accumulator for a :class:`CodeBlock`."""

        def __init__(self) -> None:
            self.format_parts: list[str] = []
            self.args: list[object] = []

        def is_empty(self) -> bool:
            return not self.format_parts

        def add(self, format: str, *args: object) -> CodeBlock.Builder:
            """Append *format*, consuming *args* in order or by 1-based index.

            Raises:
                ValueError: On unknown placeholders, missing or unused
                    arguments, or a mix of relative and indexed placeholders.
            """
            has_relative = False
            has_indexed = False
            relative_index = 0
            indexed_used = [False] * len(args)
            parts: list[str] = []
            converted: list[object] = []

            p = 0
            while p < len(format):
                if format[p] != "%":
                    next_placeholder = format.find("%", p + 1)
                    if next_placeholder == -1:
                        next_placeholder = len(format)
                    parts.append(format[p:next_placeholder])
                    p = next_placeholder
                    continue

                p += 1
                index_start = p
                while p < len(format) and format[p].isdigit():
                    p += 1
                index_end = p
                if p >= len(format):
                    raise ValueError(f"Dangling format character in {format!r}")
                char = format[p]
                p += 1

                if char in _NO_ARG_PLACEHOLDERS:
                    if index_start != index_end:
                        raise ValueError(f"%{char} may not have an index in {format!r}")
                    parts.append(f"%{char}")
                    continue
                if char not in _ARG_PLACEHOLDERS:
                    raise ValueError(f"Invalid format placeholder %{char} in {format!r}")

                if index_start != index_end:
                    index = int(format[index_start:index_end]) - 1
                    has_indexed = True
                    if 0 <= index < len(args):
                        indexed_used[index] = True
                else:
                    index = relative_index
                    relative_index += 1
                    has_relative = True

                if not 0 <= index < len(args):
                    raise ValueError(
                        f"Index {index + 1} for {format[index_start - 1 : p]!r} not in range "
                        f"(received {len(args)} arguments)"
                    )
                if has_relative and has_indexed:
                    raise ValueError(f"Cannot mix indexed and positional placeholders in {format!r}")

                converted.append(_convert_argument(char, args[index]))
                parts.append(f"%{char}")

            if has_relative and relative_index < len(args):
                raise ValueError(
                    f"Unused arguments in {format!r}: expected {relative_index}, received {len(args)}"
                )
            if has_indexed:
                unused = [str(i + 1) for i, used in enumerate(indexed_used) if not used]
                if unused:
                    raise ValueError(f"Unused argument positions {', '.join(unused)} in {format!r}")
            self.format_parts.extend(parts)
            self.args.extend(converted)
            return self

        def add_named(self, format: str, arguments: Mapping[str, object]) -> CodeBlock.Builder:
            """Append *format*, resolving ``%name:X`` placeholders from *arguments*.

            Raises:
                ValueError: On invalid argument names, missing arguments, or
                    unknown placeholders.
            """
            for key in arguments:
                if not _ARGUMENT_NAME.fullmatch(key):
                    raise ValueError(f"Argument {key!r} must start with a lowercase character")

            parts: list[str] = []
            converted: list[object] = []
            p = 0
            while p < len(format):
                next_placeholder = format.find("%", p)
                if next_placeholder == -1:
                    parts.append(format[p:])
                    break
                if p != next_placeholder:
                    parts.append(format[p:next_placeholder])
                    p = next_placeholder

                match = _NAMED_PLACEHOLDER.match(format, p)
                if match is not None:
                    name, char = match.group("name"), match.group("char")
                    if name not in arguments:
                        raise ValueError(f"Missing named argument for %{name}")
                    converted.append(_convert_argument(char, arguments[name]))
                    parts.append(f"%{char}")
                    p = match.end()
                    continue

                if p + 1 >= len(format):
                    raise ValueError(f"Dangling format character in {format!r}")
                char = format[p + 1]
                if char not in _NO_ARG_PLACEHOLDERS:
                    raise ValueError(f"Unknown format %{char} at {p + 1} in {format!r}")
                parts.append(f"%{char}")
                p += 2
            self.format_parts.extend(parts)
            self.args.extend(converted)
            return self

        def add_code(self, block: CodeBlock) -> CodeBlock.Builder:
            self.format_parts.extend(block.format_parts)
            self.args.extend(block.args)
            return self

        def add_statement(self, format: str, *args: object) -> CodeBlock.Builder:
            """Append *format* as a single statement terminated by a newline."""
            self.add(format, *args)
            self.format_parts.append("\n")
            return self

        def begin_control_flow(
            self, control_flow_name: str, control_flow_code: str, *args: object
        ) -> CodeBlock.Builder:
            """Open a braced construct such as ``if x == 5 {`` and indent.

            Args:
                control_flow_name: The construct, e.g. ``"if"`` or ``"switch"``.
                control_flow_code: Its condition, e.g. ``"x == %L"``. Must not
                    contain braces or newlines.
            """
            self._add_control_flow_header(control_flow_name, control_flow_code, args)
            self.indent()
            return self

        def next_control_flow(self, control_flow_name: str, control_flow_code: str, *args: object) -> CodeBlock.Builder:
            """Close the current construct and continue with e.g. ``} else if x {``."""
            self.unindent()
            self.format_parts.append("} ")
            self._add_control_flow_header(control_flow_name, control_flow_code, args)
            self.indent()
            return self

        def end_control_flow(self, control_flow_name: str = "") -> CodeBlock.Builder:
            """Close the construct opened by :meth:`begin_control_flow`.

            *control_flow_name* only documents which construct is closed.
            """
            self.unindent()
            self.format_parts.append("}\n")
            return self

        def indent(self) -> CodeBlock.Builder:
            self.format_parts.append("%>")
            return self

        def unindent(self) -> CodeBlock.Builder:
            self.format_parts.append("%<")
            return self

        def build(self) -> CodeBlock:
            return CodeBlock(format_parts=tuple(self.format_parts), args=tuple(self.args))

        def _add_control_flow_header(self, name: str, code: str, args: tuple[object, ...]) -> None:
            if code:
                self.add(f"{name.replace('%', '%%')} {code} {{\n", *args)
            else:
                self.add(f"{name.replace('%', '%%')} {{\n", *args)


@dataclass(frozen=True)
class AbstractBody:
    """Body marker for declarations that have no implementation block.

    Distinct from every :class:`CodeBlock`, including an empty one.
    """

    def is_empty(self) -> bool:
        return True


ABSTRACT = AbstractBody()

# A declaration body: concrete code, or the abstract marker.
Body = CodeBlock | AbstractBody


# ################
# Implementation
# ################

_ARG_PLACEHOLDERS = frozenset("LSTN")
_NO_ARG_PLACEHOLDERS = frozenset("%><W")
_ARGUMENT_NAME = re.compile(r"[a-z][A-Za-z0-9_]*")
_NAMED_PLACEHOLDER = re.compile(r"%(?P<name>[a-z][A-Za-z0-9_]*):(?P<char>[A-Z])")


def _convert_argument(char: str, value: object) -> object:
    """Validate and normalize an argument for the placeholder ``%char``."""
    if char == "L":
        return value
    if char == "S":
        return None if value is None else str(value)
    if char == "T":
        if not isinstance(value, TYPE_NAME_CLASSES):
            raise ValueError(f"Expected a type name for %T, got {value!r}")
        return value
    if char == "N":
        return _argument_to_name(value)
    raise ValueError(f"Invalid format placeholder %{char}")


def _argument_to_name(value: object) -> str:
    if isinstance(value, str):
        return value
    for attribute in ("parameter_name", "name"):
        name = getattr(value, attribute, None)
        if isinstance(name, str):
            return name
    raise ValueError(f"Expected a name for %N, got {value!r}")
