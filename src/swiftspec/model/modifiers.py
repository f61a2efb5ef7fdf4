# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration modifiers of the Swift language."""

from collections.abc import Iterable
from enum import Enum

# ###############
# Public Interface
# ###############


class Modifier(Enum):
    """Swift declaration modifiers.

    Member order is the order in which modifiers are emitted.
    """

    OPEN = "open"
    PUBLIC = "public"
    PACKAGE = "package"
    INTERNAL = "internal"
    FILEPRIVATE = "fileprivate"
    PRIVATE = "private"

    CLASS = "class"
    STATIC = "static"
    FINAL = "final"
    REQUIRED = "required"
    CONVENIENCE = "convenience"
    OVERRIDE = "override"
    DYNAMIC = "dynamic"
    OPTIONAL = "optional"
    NONISOLATED = "nonisolated"
    LAZY = "lazy"
    WEAK = "weak"
    UNOWNED = "unowned"

    MUTATING = "mutating"
    NONMUTATING = "nonmutating"

    PREFIX = "prefix"
    POSTFIX = "postfix"
    INFIX = "infix"

    INOUT = "inout"

    @property
    def keyword(self) -> str:
        return self.value


def sort_modifiers(modifiers: Iterable[Modifier]) -> list[Modifier]:
    """Return *modifiers* in emission order."""
    return sorted(modifiers, key=_ORDER.__getitem__)


def modifier_from_keyword(keyword: str) -> Modifier:
    """Look up a modifier by its source keyword.

    Raises:
        ValueError: If *keyword* is not a Swift declaration modifier.
    """
    try:
        return Modifier(keyword)
    except ValueError:
        raise ValueError(f"Unknown modifier: {keyword!r}") from None


# ################
# Implementation
# ################

_ORDER: dict[Modifier, int] = {modifier: index for index, modifier in enumerate(Modifier)}
