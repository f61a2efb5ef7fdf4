# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the SwiftSpec command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from swiftspec.cli.config import CONFIG_FILE_NAME, WriterConfig, WriterConfigError, load_writer_config
from swiftspec.cli.document import DocumentError, build_declaration, load_document
from swiftspec.code.writer import CodeWriter
from swiftspec.spec.grammar import classify

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the SwiftSpec CLI."""
    parser = argparse.ArgumentParser(
        prog="swiftspec",
        description="SwiftSpec - generate Swift function declarations",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Render a declaration document as Swift source",
        description="Build the declaration described by a YAML document and print its Swift source.",
    )
    render_parser.add_argument(
        "document",
        help="Path to the YAML declaration document",
    )
    render_parser.add_argument(
        "--config",
        default=None,
        help=f"Path to the writer configuration (default: {CONFIG_FILE_NAME} next to the document, if present)",
    )
    render_parser.add_argument(
        "--concise",
        action="store_true",
        help="Render plain getters as their bare statements",
    )

    # classify subcommand
    classify_parser = subparsers.add_parser(
        "classify",
        help="Print the declaration kind implied by a name",
        description="Print the kind (function, constructor, getter, ...) a declaration name selects.",
    )
    classify_parser.add_argument(
        "name",
        help="Declaration name, e.g. 'init', 'didSet' or 'op:+'",
    )

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "render":
        return _cmd_render(args)
    if args.command == "classify":
        return _cmd_classify(args)
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    """Handle the render subcommand."""
    document_path = Path(args.document).resolve()

    try:
        config = _load_config(args.config, document_path)
        document = load_document(document_path)
        declaration = build_declaration(document, source_label=str(document_path))
    except (WriterConfigError, DocumentError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    writer = CodeWriter(indent=config.indent)
    declaration.emit(
        writer,
        config.implicit_modifiers,
        concise_getter=args.concise or config.concise_getters,
    )
    output = writer.output()
    if not output.endswith("\n"):
        output += "\n"
    sys.stdout.write(output)
    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    """Handle the classify subcommand."""
    print(classify(args.name).value)
    return 0


def _load_config(explicit_path: str | None, document_path: Path) -> WriterConfig:
    """Load the writer config from *explicit_path* or from beside the document."""
    if explicit_path is not None:
        config_path = Path(explicit_path).resolve()
        logger.debug("Loading writer config from %s", config_path)
        return load_writer_config(config_path)

    candidate = document_path.parent / CONFIG_FILE_NAME
    if candidate.exists():
        logger.debug("Loading writer config from %s", candidate)
        return load_writer_config(candidate)
    return WriterConfig()
