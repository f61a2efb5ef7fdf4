# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML declaration documents describing a single function-like declaration.

A document is validated with pydantic and then replayed through
:class:`~swiftspec.spec.function.FunctionSpec.Builder`, so the grammar rules
of the builder apply to documents as well. Example::

    kind: function
    name: fetch
    modifiers: [public]
    parameters:
      - name: id
        label: with
        type: Int
    returns: "[String]?"
    async: true
    throws: true
    statements:
      - return try await store.load(id)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from swiftspec.code.code_block import CodeBlock
from swiftspec.model.modifiers import Modifier, modifier_from_keyword
from swiftspec.model.type_parser import TypeNameParseError, parse_type_name
from swiftspec.model.types import TypeVariableName
from swiftspec.spec.attributes import AttributeSpec
from swiftspec.spec.function import FunctionSpec
from swiftspec.spec.grammar import InvalidStateError
from swiftspec.spec.parameter import ParameterSpec

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DeclarationKind = Literal[
    "function",
    "constructor",
    "deinitializer",
    "getter",
    "setter",
    "will-set",
    "did-set",
    "operator",
]


class DocumentError(Exception):
    """Raised when a declaration document cannot be read, is invalid, or breaks the grammar."""


class ParameterEntry(BaseModel):
    """A parameter of a declaration document."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    type: str
    label: str | None = None
    default: str | None = None
    variadic: bool = False
    modifiers: list[str] = Field(default_factory=list)


class TypeVariableEntry(BaseModel):
    """A generic type parameter of a declaration document."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    bounds: list[str] = Field(default_factory=list)


class DeclarationDocument(BaseModel):
    """Top-level model of a declaration document."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    kind: DeclarationKind = "function"
    name: str | None = None
    doc: str | None = None
    attributes: list[str] = Field(default_factory=list)
    modifiers: list[str] = Field(default_factory=list)
    type_variables: list[TypeVariableEntry] = Field(alias="type-variables", default_factory=list)
    parameters: list[ParameterEntry] = Field(default_factory=list)
    returns: str | None = None
    throws: bool = False
    is_async: bool = Field(alias="async", default=False)
    failable: bool = False
    abstract: bool = False
    statements: list[str] = Field(default_factory=list)


def load_document(path: Path) -> DeclarationDocument:
    """Load and validate a declaration document from disk.

    Raises:
        DocumentError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"Cannot read declaration document '{path}': {exc}") from exc
    return parse_document(raw, source_label=str(path))


def parse_document(text: str, source_label: str = "<string>") -> DeclarationDocument:
    """Validate declaration document YAML text.

    Raises:
        DocumentError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentError(f"Invalid YAML in '{source_label}': {exc}") from exc

    if not isinstance(data, dict):
        raise DocumentError(f"'{source_label}': declaration document must be a YAML mapping")

    try:
        return DeclarationDocument.model_validate(data)
    except ValidationError as exc:
        raise DocumentError(f"Invalid declaration document '{source_label}': {exc}") from exc


def build_declaration(document: DeclarationDocument, source_label: str = "<string>") -> FunctionSpec:
    """Replay *document* through a builder and return the built declaration.

    Raises:
        DocumentError: If a type or modifier cannot be parsed, or the
            document breaks the declaration grammar.
    """
    logger.debug("Building %s declaration from %s", document.kind, source_label)
    try:
        return _build(document)
    except (InvalidStateError, ValueError) as exc:
        raise DocumentError(f"'{source_label}': {exc}") from exc


# ################
# Implementation
# ################

_FACTORIES: dict[str, Callable[[], FunctionSpec.Builder]] = {
    "constructor": FunctionSpec.constructor_builder,
    "deinitializer": FunctionSpec.deinitializer_builder,
    "getter": FunctionSpec.getter_builder,
    "setter": FunctionSpec.setter_builder,
    "will-set": FunctionSpec.will_set_builder,
    "did-set": FunctionSpec.did_set_builder,
}


def _new_builder(document: DeclarationDocument) -> FunctionSpec.Builder:
    if document.kind in ("function", "operator"):
        if not document.name:
            raise ValueError(f"'name' is required for kind '{document.kind}'")
        if document.kind == "operator":
            return FunctionSpec.operator_builder(document.name)
        return FunctionSpec.builder(document.name)
    if document.name is not None:
        raise ValueError(f"'name' is not allowed for kind '{document.kind}'")
    return _FACTORIES[document.kind]()


def _build(document: DeclarationDocument) -> FunctionSpec:
    builder = _new_builder(document)

    if document.doc:
        builder.add_doc("%L\n", document.doc.rstrip("\n"))
    for attribute in document.attributes:
        builder.add_attribute(_parse_attribute(attribute))
    if document.modifiers:
        builder.add_modifiers(*_parse_modifiers(document.modifiers))
    if document.type_variables:
        builder.add_type_variables(
            TypeVariableName(name=entry.name, bounds=tuple(parse_type_name(b) for b in entry.bounds))
            for entry in document.type_variables
        )
    if document.parameters:
        builder.add_parameters(_parse_parameter(entry) for entry in document.parameters)
    if document.returns is not None:
        builder.returns(parse_type_name(document.returns))
    if document.throws:
        builder.throws()
    if document.is_async:
        builder.async_()
    if document.failable:
        builder.failable()
    if document.abstract:
        builder.abstract()
    for statement in document.statements:
        builder.add_statement("%L", statement)

    return builder.build()


def _parse_attribute(text: str) -> AttributeSpec:
    """Split ``name(arguments)`` into an attribute spec."""
    name, _, rest = text.removeprefix("@").partition("(")
    if not rest:
        return AttributeSpec.of(name.strip())
    return AttributeSpec.of(name.strip(), rest.removesuffix(")"))


def _parse_modifiers(keywords: list[str]) -> list[Modifier]:
    return [modifier_from_keyword(keyword) for keyword in keywords]


def _parse_parameter(entry: ParameterEntry) -> ParameterSpec:
    try:
        type_name = parse_type_name(entry.type)
    except TypeNameParseError as exc:
        raise ValueError(f"parameter '{entry.name}': invalid type {entry.type!r}: {exc}") from exc
    return ParameterSpec(
        parameter_name=entry.name,
        type_name=type_name,
        argument_label=entry.label,
        modifiers=frozenset(_parse_modifiers(entry.modifiers)),
        default_value=CodeBlock.of("%L", entry.default) if entry.default is not None else None,
        variadic=entry.variadic,
    )
