# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for Swift type name text.

Accepts the subset of Swift type syntax that :func:`type_name_to_string`
produces, so declarations can be described in plain text (for example in YAML
declaration documents):

* ``Name`` and dotted nested names such as ``Outer.Inner``
* generic application ``Box<Int, String>``
* optionals ``Int?``
* arrays ``[Int]`` and dictionaries ``[String: Int]``
"""

from __future__ import annotations

from swiftspec.model.types import (
    ArrayTypeName,
    DeclaredTypeName,
    DictionaryTypeName,
    OptionalTypeName,
    ParameterizedTypeName,
    TypeName,
)

# ###############
# Public Interface
# ###############


class TypeNameParseError(ValueError):
    """Raised when type name text is syntactically invalid.

    Attributes:
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, column: int) -> None:
        super().__init__(f"Column {column}: {message}")
        self.column = column


def parse_type_name(text: str) -> TypeName:
    """Parse Swift type name text into a :data:`TypeName`.

    Args:
        text: Type name such as ``"[String: Int]?"``.

    Returns:
        The parsed type name.

    Raises:
        TypeNameParseError: If *text* is not a valid type name.
    """
    return _Parser(text).parse()


# ################
# Implementation
# ################


class _Parser:
    """Character-level recursive-descent parser for type names."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def parse(self) -> TypeName:
        self._skip_whitespace()
        if self._at_end():
            raise TypeNameParseError("Expected a type name", self._column())
        result = self._parse_type()
        self._skip_whitespace()
        if not self._at_end():
            raise TypeNameParseError(f"Unexpected character {self._current()!r}", self._column())
        return result

    # ------------------------------------------------------------------
    # Character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _current(self) -> str:
        return self._text[self._pos]

    def _column(self) -> int:
        return self._pos + 1

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._current().isspace():
            self._pos += 1

    def _check(self, char: str) -> bool:
        self._skip_whitespace()
        return not self._at_end() and self._current() == char

    def _expect(self, char: str) -> None:
        if not self._check(char):
            found = "end of input" if self._at_end() else repr(self._current())
            raise TypeNameParseError(f"Expected {char!r}, found {found}", self._column())
        self._pos += 1

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _parse_type(self) -> TypeName:
        """type := primary '?'*"""
        result = self._parse_primary()
        while self._check("?"):
            self._pos += 1
            result = OptionalTypeName(wrapped=result)
        return result

    def _parse_primary(self) -> TypeName:
        """primary := collection | declared generic-arguments?"""
        if self._check("["):
            return self._parse_collection()
        raw_type = self._parse_declared()
        if not self._check("<"):
            return raw_type
        self._pos += 1
        arguments = [self._parse_type()]
        while self._check(","):
            self._pos += 1
            arguments.append(self._parse_type())
        self._expect(">")
        return ParameterizedTypeName(raw_type=raw_type, type_arguments=tuple(arguments))

    def _parse_collection(self) -> TypeName:
        """collection := '[' type ']' | '[' type ':' type ']'"""
        self._expect("[")
        first = self._parse_type()
        if self._check(":"):
            self._pos += 1
            value = self._parse_type()
            self._expect("]")
            return DictionaryTypeName(key_type=first, value_type=value)
        self._expect("]")
        return ArrayTypeName(element_type=first)

    def _parse_declared(self) -> DeclaredTypeName:
        """declared := IDENT ('.' IDENT)*"""
        names = [self._parse_identifier()]
        while self._check("."):
            self._pos += 1
            names.append(self._parse_identifier())
        return DeclaredTypeName(names=tuple(names))

    def _parse_identifier(self) -> str:
        self._skip_whitespace()
        start = self._pos
        while not self._at_end() and (self._current().isalnum() or self._current() == "_"):
            self._pos += 1
        if start == self._pos:
            found = "end of input" if self._at_end() else repr(self._current())
            raise TypeNameParseError(f"Expected an identifier, found {found}", self._column())
        identifier = self._text[start : self._pos]
        if identifier[0].isdigit():
            raise TypeNameParseError(f"Identifier cannot start with a digit: {identifier!r}", start + 1)
        return identifier
