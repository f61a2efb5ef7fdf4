# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value types referenced by generated declarations (type names, modifiers)."""

from swiftspec.model.modifiers import Modifier, modifier_from_keyword, sort_modifiers
from swiftspec.model.type_parser import TypeNameParseError, parse_type_name
from swiftspec.model.types import (
    TYPE_NAME_CLASSES,
    BOOL,
    DOUBLE,
    INT,
    STRING,
    VOID,
    ArrayTypeName,
    DeclaredTypeName,
    DictionaryTypeName,
    OptionalTypeName,
    ParameterizedTypeName,
    TypeName,
    TypeVariableName,
    array_of,
    declared,
    dictionary_of,
    optional,
    parameterized,
    type_name_to_string,
    type_variable,
)

__all__ = [
    # Type names
    "ArrayTypeName",
    "DeclaredTypeName",
    "DictionaryTypeName",
    "OptionalTypeName",
    "ParameterizedTypeName",
    "TypeName",
    "TYPE_NAME_CLASSES",
    "TypeVariableName",
    "array_of",
    "declared",
    "dictionary_of",
    "optional",
    "parameterized",
    "type_name_to_string",
    "type_variable",
    "BOOL",
    "DOUBLE",
    "INT",
    "STRING",
    "VOID",
    # Parsing
    "TypeNameParseError",
    "parse_type_name",
    # Modifiers
    "Modifier",
    "modifier_from_keyword",
    "sort_modifiers",
]
