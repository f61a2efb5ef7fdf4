# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""SwiftSpec: a declarative model for generating Swift function declarations."""

from swiftspec.code import ABSTRACT, CodeBlock, CodeWriter
from swiftspec.model import Modifier
from swiftspec.spec import (
    AttributeSpec,
    FunctionKind,
    FunctionSignatureSpec,
    FunctionSpec,
    InvalidStateError,
    ParameterSpec,
    TypeKind,
    TypeSpec,
    classify,
)

__all__ = [
    "ABSTRACT",
    "AttributeSpec",
    "CodeBlock",
    "CodeWriter",
    "FunctionKind",
    "FunctionSignatureSpec",
    "FunctionSpec",
    "InvalidStateError",
    "Modifier",
    "ParameterSpec",
    "TypeKind",
    "TypeSpec",
    "classify",
]
