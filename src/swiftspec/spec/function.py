# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Function-like declarations: functions, initializers, accessors, observers, operators.

A :class:`FunctionSpec` is assembled through :class:`FunctionSpec.Builder`,
which checks every call against the grammar of the declaration's kind and
raises :class:`~swiftspec.spec.grammar.InvalidStateError` at the offending
call. Built specs are immutable and compare equal when they render to the
same source text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from swiftspec.code.code_block import ABSTRACT, AbstractBody, Body, CodeBlock
from swiftspec.code.names import escape_if_necessary
from swiftspec.code.writer import CodeWriter
from swiftspec.model.modifiers import Modifier
from swiftspec.model.types import TypeName, TypeVariableName
from swiftspec.spec.attributes import AttributedSpec, AttributedSpecBuilder
from swiftspec.spec.grammar import (
    CONSTRUCTOR,
    DEINITIALIZER,
    DID_SET,
    GETTER,
    OPERATOR_PREFIX,
    SETTER,
    WILL_SET,
    FunctionKind,
    InvalidStateError,
    Operation,
    check_allowed,
    check_parameter_count,
    classify,
    display_name,
)
from swiftspec.spec.parameter import ParameterSpec
from swiftspec.spec.signature import FunctionSignatureSpec
from swiftspec.spec.type_spec import DEFAULT_IMPLICIT_MODIFIERS, TypeSpec

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True, eq=False, kw_only=True)
class FunctionSpec(AttributedSpec):
    """An immutable function-like declaration.

    Attributes:
        name: Declaration name; reserved names select the kind (``init``,
            ``get``, ...) and operators carry the ``op:`` prefix.
        kind: The kind derived from ``name``.
        doc: Doc comment content.
        modifiers: Explicit declaration modifiers.
        signature: Type variables, parameters, return type, and effects.
        local_type_specs: Types declared inside the body, before the statements.
        body: The statements, or :data:`~swiftspec.code.ABSTRACT` for a
            declaration without a body.
    """

    name: str
    kind: FunctionKind
    doc: CodeBlock = CodeBlock()
    modifiers: frozenset[Modifier] = frozenset()
    signature: FunctionSignatureSpec = FunctionSignatureSpec()
    local_type_specs: tuple[TypeSpec, ...] = ()
    body: Body = CodeBlock()

    def __post_init__(self) -> None:
        expected = classify(self.name)
        if self.kind is not expected:
            raise InvalidStateError(self.name, f"kind must be {expected.value}, not {self.kind.value}")
        if self.kind is FunctionKind.SETTER and len(self.signature.parameters) > 1:
            raise InvalidStateError(self.name, "must have zero or one parameter")

    @property
    def type_variables(self) -> tuple[TypeVariableName, ...]:
        return self.signature.type_variables

    @property
    def parameters(self) -> tuple[ParameterSpec, ...]:
        return self.signature.parameters

    @property
    def return_type(self) -> TypeName | None:
        return self.signature.return_type

    @property
    def throws(self) -> bool:
        return self.signature.throws

    @property
    def async_(self) -> bool:
        return self.signature.async_

    @property
    def failable(self) -> bool:
        return self.signature.failable

    @property
    def is_constructor(self) -> bool:
        return self.kind is FunctionKind.CONSTRUCTOR

    @property
    def is_deinitializer(self) -> bool:
        return self.kind is FunctionKind.DEINITIALIZER

    @property
    def is_accessor(self) -> bool:
        return self.kind.is_accessor

    @property
    def is_observer(self) -> bool:
        return self.kind.is_observer

    @property
    def is_operator(self) -> bool:
        return self.kind is FunctionKind.OPERATOR

    @property
    def is_abstract(self) -> bool:
        return isinstance(self.body, AbstractBody)

    def emit(
        self,
        writer: CodeWriter,
        implicit_modifiers: Iterable[Modifier] = frozenset(),
        concise_getter: bool = False,
    ) -> None:
        """Emit the declaration into *writer*.

        Args:
            writer: Destination writer.
            implicit_modifiers: Modifiers implied by the enclosing context,
                which are not repeated in the output.
            concise_getter: Emit a plain getter as its bare statements, for
                computed properties written without a ``get { }`` block.
        """
        if (
            self.kind is FunctionKind.GETTER
            and concise_getter
            and self.doc.is_empty()
            and not self.attributes
            and not self.modifiers
        ):
            self._emit_local_types(writer)
            if isinstance(self.body, CodeBlock):
                writer.emit_code(self.body)
            return

        writer.emit_doc(self.doc)
        writer.emit_attributes(self.attributes)
        writer.emit_modifiers(self.modifiers, implicit_modifiers)

        if self.kind not in _KEYWORDLESS_KINDS:
            writer.emit("func ")

        self.signature.emit(
            writer,
            self._printed_name(),
            include_empty_parameters=self.kind not in _PARENTHESESLESS_KINDS,
            include_parameter_types=not (self.is_accessor or self.is_observer),
        )

        if isinstance(self.body, AbstractBody):
            return

        writer.emit(" {\n")
        writer.indent()
        self._emit_local_types(writer)
        writer.emit_code(self.body)
        writer.unindent()
        writer.emit("}\n")

    def to_builder(self) -> FunctionSpec.Builder:
        """Return a builder seeded with this declaration.

        Local type declarations are not carried over.
        """
        builder = FunctionSpec.Builder(self.name)
        builder.doc.add_code(self.doc)
        builder.attributes.extend(self.attributes)
        builder.tags.update(self.tags)
        builder.modifiers.update(self.modifiers)
        builder.signature = self.signature.to_builder()
        if isinstance(self.body, AbstractBody):
            builder.is_abstract = True
        else:
            builder.body.add_code(self.body)
        return builder

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, FunctionSpec):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __str__(self) -> str:
        writer = CodeWriter()
        self.emit(writer, DEFAULT_IMPLICIT_MODIFIERS)
        return writer.output()

    def _printed_name(self) -> str:
        if self.kind in _RAW_NAME_KINDS:
            return self.name
        if self.kind is FunctionKind.OPERATOR:
            return display_name(self.name)
        return escape_if_necessary(self.name)

    def _emit_local_types(self, writer: CodeWriter) -> None:
        if not self.local_type_specs:
            return
        for type_spec in self.local_type_specs:
            writer.emit("\n")
            type_spec.emit(writer)
        writer.emit("\n")

    @staticmethod
    def builder(name: str) -> FunctionSpec.Builder:
        return FunctionSpec.Builder(name)

    @staticmethod
    def abstract_builder(name: str) -> FunctionSpec.Builder:
        return FunctionSpec.Builder(name).abstract(True)

    @staticmethod
    def constructor_builder() -> FunctionSpec.Builder:
        return FunctionSpec.Builder(CONSTRUCTOR)

    @staticmethod
    def deinitializer_builder() -> FunctionSpec.Builder:
        return FunctionSpec.Builder(DEINITIALIZER)

    @staticmethod
    def getter_builder() -> FunctionSpec.Builder:
        return FunctionSpec.Builder(GETTER)

    @staticmethod
    def setter_builder() -> FunctionSpec.Builder:
        return FunctionSpec.Builder(SETTER)

    @staticmethod
    def will_set_builder() -> FunctionSpec.Builder:
        return FunctionSpec.Builder(WILL_SET)

    @staticmethod
    def did_set_builder() -> FunctionSpec.Builder:
        return FunctionSpec.Builder(DID_SET)

    @staticmethod
    def operator_builder(name: str) -> FunctionSpec.Builder:
        return FunctionSpec.Builder(OPERATOR_PREFIX + name)

    class Builder(AttributedSpecBuilder["FunctionSpec.Builder"]):
        """Mutable staging area for a :class:`FunctionSpec`.

        Every mutator validates against the declaration kind before changing
        anything, so a rejected call leaves the builder as it was. Builders
        are not synchronized; use one from a single thread at a time.
        """

        def __init__(self, name: str) -> None:
            super().__init__()
            self._name = name
            self._kind = classify(name)
            self.doc = CodeBlock.builder()
            self.modifiers: set[Modifier] = set()
            self.signature = FunctionSignatureSpec.builder()
            self.local_type_specs: list[TypeSpec] = []
            self.body = CodeBlock.builder()
            self.is_abstract = False

        @property
        def name(self) -> str:
            return self._name

        @property
        def kind(self) -> FunctionKind:
            return self._kind

        def add_doc(self, format: str | CodeBlock, *args: object) -> FunctionSpec.Builder:
            """Append doc content, given as a format with arguments or as a code block.

            Raises:
                ValueError: If arguments accompany a code block.
            """
            if isinstance(format, CodeBlock):
                if args:
                    raise ValueError(f"Unused arguments with a code block doc: received {len(args)}")
                self.doc.add_code(format)
            else:
                self.doc.add(format, *args)
            return self

        def add_modifiers(self, *modifiers: Modifier) -> FunctionSpec.Builder:
            check_allowed(self._kind, Operation.ADD_MODIFIERS, self._name)
            self.modifiers.update(modifiers)
            return self

        def add_type_variable(self, type_variable: TypeVariableName) -> FunctionSpec.Builder:
            return self.add_type_variables([type_variable])

        def add_type_variables(self, type_variables: Iterable[TypeVariableName]) -> FunctionSpec.Builder:
            check_allowed(self._kind, Operation.ADD_TYPE_VARIABLES, self._name)
            self.signature.add_type_variables(type_variables)
            return self

        def returns(self, return_type: TypeName) -> FunctionSpec.Builder:
            check_allowed(self._kind, Operation.RETURNS, self._name)
            self.signature.return_type = return_type
            return self

        def add_parameter(
            self,
            parameter: ParameterSpec | str,
            type_name: TypeName | None = None,
            *modifiers: Modifier,
            label: str | None = None,
        ) -> FunctionSpec.Builder:
            """Append a parameter, given as a spec or as a name and type.

            Raises:
                InvalidStateError: If the declaration kind takes no further parameters.
                ValueError: If a name is given without a type.
            """
            if isinstance(parameter, str):
                if type_name is None:
                    raise ValueError(f"Parameter {parameter!r} requires a type")
                parameter = ParameterSpec.of(parameter, type_name, *modifiers, label=label)
            return self.add_parameters([parameter])

        def add_parameters(self, parameters: Iterable[ParameterSpec]) -> FunctionSpec.Builder:
            parameters = list(parameters)
            check_parameter_count(self._kind, self._name, len(self.signature.parameters), len(parameters))
            self.signature.add_parameters(parameters)
            return self

        def abstract(self, value: bool = True) -> FunctionSpec.Builder:
            if value and not self.body.is_empty():
                raise InvalidStateError(self._name, "function with code cannot be abstract")
            self.is_abstract = value
            return self

        def failable(self, value: bool = True) -> FunctionSpec.Builder:
            check_allowed(self._kind, Operation.FAILABLE, self._name)
            self.signature.failable = value
            return self

        def throws(self, value: bool = True) -> FunctionSpec.Builder:
            self.signature.throws = value
            return self

        def async_(self, value: bool = True) -> FunctionSpec.Builder:
            self.signature.async_ = value
            return self

        def add_local_type(self, type_spec: TypeSpec) -> FunctionSpec.Builder:
            return self.add_local_types([type_spec])

        def add_local_types(self, type_specs: Iterable[TypeSpec]) -> FunctionSpec.Builder:
            if self.is_abstract:
                raise InvalidStateError(self._name, "abstract functions cannot have local types")
            self.local_type_specs.extend(type_specs)
            return self

        def add_code(self, format: str | CodeBlock, *args: object) -> FunctionSpec.Builder:
            self._check_not_abstract()
            if isinstance(format, CodeBlock):
                self.body.add_code(format)
            else:
                self.body.add(format, *args)
            return self

        def add_named_code(self, format: str, arguments: Mapping[str, object]) -> FunctionSpec.Builder:
            self._check_not_abstract()
            self.body.add_named(format, arguments)
            return self

        def add_comment(self, format: str, *args: object) -> FunctionSpec.Builder:
            self._check_not_abstract()
            self.body.add(f"// {format}\n", *args)
            return self

        def begin_control_flow(
            self, control_flow_name: str, control_flow_code: str, *args: object
        ) -> FunctionSpec.Builder:
            """Open a braced construct in the body.

            Args:
                control_flow_name: The construct, e.g. ``"if"`` or ``"switch"``.
                control_flow_code: Its condition, e.g. ``"foo == 5"``. Must not
                    contain braces or newlines.
            """
            self._check_not_abstract()
            self.body.begin_control_flow(control_flow_name, control_flow_code, *args)
            return self

        def next_control_flow(
            self, control_flow_name: str, control_flow_code: str, *args: object
        ) -> FunctionSpec.Builder:
            """Continue the open construct, e.g. with ``"else if"`` and ``"foo == 10"``."""
            self._check_not_abstract()
            self.body.next_control_flow(control_flow_name, control_flow_code, *args)
            return self

        def end_control_flow(self, control_flow_name: str = "") -> FunctionSpec.Builder:
            self._check_not_abstract()
            self.body.end_control_flow(control_flow_name)
            return self

        def add_statement(self, format: str, *args: object) -> FunctionSpec.Builder:
            self._check_not_abstract()
            self.body.add_statement(format, *args)
            return self

        def build(self) -> FunctionSpec:
            """Snapshot the builder into an immutable :class:`FunctionSpec`.

            The builder stays usable; each call produces a new snapshot.

            Raises:
                InvalidStateError: If a setter has more than one parameter.
            """
            spec = FunctionSpec(
                name=self._name,
                kind=self._kind,
                doc=self.doc.build(),
                modifiers=frozenset(self.modifiers),
                signature=self.signature.build(),
                local_type_specs=tuple(self.local_type_specs),
                body=ABSTRACT if self.is_abstract else self.body.build(),
                attributes=tuple(self.attributes),
                tags=self._frozen_tags(),
            )
            logger.debug("Built %s declaration %r", self._kind.value, self._name)
            return spec

        def _check_not_abstract(self) -> None:
            if self.is_abstract:
                raise InvalidStateError(self._name, "abstract functions cannot have code")


# ################
# Implementation
# ################

# Kinds spelled without the ``func`` keyword.
_KEYWORDLESS_KINDS = frozenset(
    {
        FunctionKind.CONSTRUCTOR,
        FunctionKind.DEINITIALIZER,
        FunctionKind.GETTER,
        FunctionKind.SETTER,
        FunctionKind.WILL_SET,
        FunctionKind.DID_SET,
    }
)

# Kinds that never print an empty parameter list.
_PARENTHESESLESS_KINDS = frozenset(
    {
        FunctionKind.DEINITIALIZER,
        FunctionKind.GETTER,
        FunctionKind.SETTER,
        FunctionKind.WILL_SET,
        FunctionKind.DID_SET,
    }
)

# Kinds printed under their reserved name.
_RAW_NAME_KINDS = frozenset(
    {
        FunctionKind.CONSTRUCTOR,
        FunctionKind.DEINITIALIZER,
        FunctionKind.GETTER,
        FunctionKind.SETTER,
    }
)
