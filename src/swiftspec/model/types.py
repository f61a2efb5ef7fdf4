# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type name representations used in generated Swift declarations."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class DeclaredTypeName(BaseModel):
    """Reference to a named type, optionally qualified by its module.

    ``names`` holds the simple name followed by any nested type names, e.g.
    ``["Outer", "Inner"]`` for ``Outer.Inner``.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["declared"] = "declared"
    module: str = ""
    names: tuple[str, ...]

    @property
    def simple_name(self) -> str:
        return self.names[-1]


class ParameterizedTypeName(BaseModel):
    """Reference to a generic type applied to type arguments, e.g. ``Box<Int>``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["parameterized"] = "parameterized"
    raw_type: DeclaredTypeName
    type_arguments: tuple[TypeName, ...]


class OptionalTypeName(BaseModel):
    """Reference to an optional type, rendered as ``Wrapped?``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["optional"] = "optional"
    wrapped: TypeName


class ArrayTypeName(BaseModel):
    """Reference to an array type, rendered as ``[Element]``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    element_type: TypeName


class DictionaryTypeName(BaseModel):
    """Reference to a dictionary type, rendered as ``[Key: Value]``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["dictionary"] = "dictionary"
    key_type: TypeName
    value_type: TypeName


class TypeVariableName(BaseModel):
    """A generic type parameter with optional conformance bounds."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["variable"] = "variable"
    name: str
    bounds: tuple[TypeName, ...] = ()


# A type reference: declared, generic, container, or type variable.
# The `kind` discriminator keeps validation from YAML or JSON unambiguous.
TypeName = Annotated[
    DeclaredTypeName
    | ParameterizedTypeName
    | OptionalTypeName
    | ArrayTypeName
    | DictionaryTypeName
    | TypeVariableName,
    _Field(discriminator="kind"),
]

# The concrete TypeName models, for isinstance checks on untyped arguments.
TYPE_NAME_CLASSES = (
    DeclaredTypeName,
    ParameterizedTypeName,
    OptionalTypeName,
    ArrayTypeName,
    DictionaryTypeName,
    TypeVariableName,
)


def declared(name: str, *nested: str, module: str = "") -> DeclaredTypeName:
    """Create a :class:`DeclaredTypeName` for *name* and any nested names."""
    return DeclaredTypeName(module=module, names=(name, *nested))


def type_variable(name: str, *bounds: TypeName) -> TypeVariableName:
    """Create a :class:`TypeVariableName` with the given conformance bounds."""
    return TypeVariableName(name=name, bounds=bounds)


def optional(wrapped: TypeName) -> OptionalTypeName:
    return OptionalTypeName(wrapped=wrapped)


def array_of(element_type: TypeName) -> ArrayTypeName:
    return ArrayTypeName(element_type=element_type)


def dictionary_of(key_type: TypeName, value_type: TypeName) -> DictionaryTypeName:
    return DictionaryTypeName(key_type=key_type, value_type=value_type)


def parameterized(raw_type: DeclaredTypeName, *type_arguments: TypeName) -> ParameterizedTypeName:
    return ParameterizedTypeName(raw_type=raw_type, type_arguments=type_arguments)


def type_name_to_string(type_name: TypeName) -> str:
    """Render a type name using Swift type syntax.

    Module qualification is not printed; import resolution belongs to the
    file-level assembly.
    """
    if isinstance(type_name, DeclaredTypeName):
        return ".".join(type_name.names)
    if isinstance(type_name, ParameterizedTypeName):
        arguments = ", ".join(type_name_to_string(a) for a in type_name.type_arguments)
        return f"{type_name_to_string(type_name.raw_type)}<{arguments}>"
    if isinstance(type_name, OptionalTypeName):
        return f"{type_name_to_string(type_name.wrapped)}?"
    if isinstance(type_name, ArrayTypeName):
        return f"[{type_name_to_string(type_name.element_type)}]"
    if isinstance(type_name, DictionaryTypeName):
        return f"[{type_name_to_string(type_name.key_type)}: {type_name_to_string(type_name.value_type)}]"
    # TypeVariableName is the only remaining variant.
    assert isinstance(type_name, TypeVariableName)
    return type_name.name


VOID = declared("Void", module="Swift")
BOOL = declared("Bool", module="Swift")
INT = declared("Int", module="Swift")
DOUBLE = declared("Double", module="Swift")
STRING = declared("String", module="Swift")


# Resolve forward references for models that use TypeName.
ParameterizedTypeName.model_rebuild()
OptionalTypeName.model_rebuild()
ArrayTypeName.model_rebuild()
DictionaryTypeName.model_rebuild()
TypeVariableName.model_rebuild()
