# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reserved word handling for generated Swift identifiers."""

# ###############
# Public Interface
# ###############

KEYWORDS: frozenset[str] = frozenset(
    {
        # Keywords used in declarations
        "associatedtype",
        "class",
        "deinit",
        "enum",
        "extension",
        "fileprivate",
        "func",
        "import",
        "init",
        "inout",
        "internal",
        "let",
        "open",
        "operator",
        "private",
        "precedencegroup",
        "protocol",
        "public",
        "rethrows",
        "static",
        "struct",
        "subscript",
        "typealias",
        "var",
        # Keywords used in statements
        "break",
        "case",
        "catch",
        "continue",
        "default",
        "defer",
        "do",
        "else",
        "fallthrough",
        "for",
        "guard",
        "if",
        "in",
        "repeat",
        "return",
        "throw",
        "switch",
        "where",
        "while",
        # Keywords used in expressions and types
        "Any",
        "as",
        "await",
        "false",
        "is",
        "nil",
        "self",
        "Self",
        "super",
        "throws",
        "true",
        "try",
    }
)


def escape_if_necessary(name: str) -> str:
    """Wrap *name* in backticks when it collides with a reserved keyword."""
    return f"`{name}`" if name in KEYWORDS else name
