# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the SwiftSpec writer configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from swiftspec.code.writer import DEFAULT_INDENT
from swiftspec.model.modifiers import Modifier, modifier_from_keyword
from swiftspec.spec.type_spec import DEFAULT_IMPLICIT_MODIFIERS

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".swiftspec.yaml"


class WriterConfigError(Exception):
    """Raised when a writer configuration file is invalid or cannot be loaded."""


@dataclass
class WriterConfig:
    """Settings controlling how declarations are rendered.

    Attributes:
        indent: Text written once per indentation level.
        implicit_modifiers: Modifiers implied by the enclosing context and
            therefore omitted from the output.
        concise_getters: Render plain getters as their bare statements.
    """

    indent: str = DEFAULT_INDENT
    implicit_modifiers: frozenset[Modifier] = field(default_factory=lambda: DEFAULT_IMPLICIT_MODIFIERS)
    concise_getters: bool = False


def load_writer_config(path: Path) -> WriterConfig:
    """Load and parse a SwiftSpec writer configuration file.

    Args:
        path: Path to the `.swiftspec.yaml` file.

    Returns:
        A WriterConfig instance populated from the file.

    Raises:
        WriterConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WriterConfigError(f"Writer config file not found: {path}") from None
    except OSError as exc:
        raise WriterConfigError(f"Cannot read writer config file: {exc}") from exc

    return parse_writer_config(text, source_label=str(path))


def parse_writer_config(text: str, source_label: str = "<string>") -> WriterConfig:
    """Parse writer config YAML text into a WriterConfig.

    An empty document yields the default configuration.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        WriterConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WriterConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return WriterConfig()
    if not isinstance(data, dict):
        raise WriterConfigError(f"{source_label}: writer config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise WriterConfigError(f"{source_label}: unknown field(s) {', '.join(repr(k) for k in unknown)}")

    config = WriterConfig()
    if "indent" in data:
        config.indent = _parse_indent(data["indent"], source_label)
    if "implicit-modifiers" in data:
        config.implicit_modifiers = _parse_modifiers(data["implicit-modifiers"], source_label)
    if "concise-getters" in data:
        value = data["concise-getters"]
        if not isinstance(value, bool):
            raise WriterConfigError(f"{source_label}: 'concise-getters' must be a boolean")
        config.concise_getters = value
    return config


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"indent", "implicit-modifiers", "concise-getters"})


def _parse_indent(value: object, source_label: str) -> str:
    """Accept either a number of spaces or a literal indent string."""
    if isinstance(value, bool):
        raise WriterConfigError(f"{source_label}: 'indent' must be a string or a number of spaces")
    if isinstance(value, int):
        if value < 0:
            raise WriterConfigError(f"{source_label}: 'indent' must not be negative")
        return " " * value
    if isinstance(value, str):
        if value.strip(" \t"):
            raise WriterConfigError(f"{source_label}: 'indent' may only contain spaces and tabs")
        return value
    raise WriterConfigError(f"{source_label}: 'indent' must be a string or a number of spaces")


def _parse_modifiers(value: object, source_label: str) -> frozenset[Modifier]:
    if not isinstance(value, list):
        raise WriterConfigError(f"{source_label}: 'implicit-modifiers' must be a list")
    modifiers: set[Modifier] = set()
    for index, keyword in enumerate(value):
        if not isinstance(keyword, str):
            raise WriterConfigError(f"{source_label}: implicit-modifiers[{index}] must be a string")
        try:
            modifiers.add(modifier_from_keyword(keyword))
        except ValueError as exc:
            raise WriterConfigError(f"{source_label}: implicit-modifiers[{index}]: {exc}") from exc
    return frozenset(modifiers)
