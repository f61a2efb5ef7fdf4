# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Code templates and the indentation-aware writer that renders them."""

from swiftspec.code.code_block import ABSTRACT, AbstractBody, Body, CodeBlock
from swiftspec.code.names import KEYWORDS, escape_if_necessary
from swiftspec.code.writer import DEFAULT_INDENT, CodeWriter

__all__ = [
    "ABSTRACT",
    "AbstractBody",
    "Body",
    "CodeBlock",
    "CodeWriter",
    "DEFAULT_INDENT",
    "KEYWORDS",
    "escape_if_necessary",
]
