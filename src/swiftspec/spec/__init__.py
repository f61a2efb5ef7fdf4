# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration specs: function-like declarations and the pieces they are built from."""

from swiftspec.spec.attributes import (
    DISCARDABLE_RESULT,
    INLINABLE,
    OBJC,
    AttributedSpec,
    AttributedSpecBuilder,
    AttributeSpec,
)
from swiftspec.spec.function import FunctionSpec
from swiftspec.spec.grammar import (
    OPERATOR_PREFIX,
    FunctionKind,
    InvalidStateError,
    classify,
    display_name,
    is_accessor,
    is_observer,
)
from swiftspec.spec.parameter import ParameterSpec
from swiftspec.spec.signature import FunctionSignatureSpec
from swiftspec.spec.type_spec import DEFAULT_IMPLICIT_MODIFIERS, TypeKind, TypeSpec

__all__ = [
    # Attributes
    "AttributeSpec",
    "AttributedSpec",
    "AttributedSpecBuilder",
    "DISCARDABLE_RESULT",
    "INLINABLE",
    "OBJC",
    # Classification
    "FunctionKind",
    "InvalidStateError",
    "OPERATOR_PREFIX",
    "classify",
    "display_name",
    "is_accessor",
    "is_observer",
    # Declarations
    "DEFAULT_IMPLICIT_MODIFIERS",
    "FunctionSignatureSpec",
    "FunctionSpec",
    "ParameterSpec",
    "TypeKind",
    "TypeSpec",
]
