# src/hl7_definitions/cli.py
"""
Command-line interface for hl7_definitions.

Subcommands
-----------
compile
    Run the schema compiler: read tables.json / defs.json and write the
    generated store module for the enabled tables and versions.

versions
    List the HL7 versions compiled into the installed store.

table
    Print a table description and its values, or a single value.

describe
    Print a message structure, with the fields of each known segment.

Only the query commands load the generated store; compile never imports it,
so a missing or broken store module can always be rebuilt.

Exit codes
----------
0  success
1  handled, expected error (HL7DefinitionsError, not found, KeyboardInterrupt)
2  CLI usage error (argparse)
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import yaml

from . import __version__
from .compiler import write_schema
from .config import BuildConfig, load_config
from .exceptions import HL7DefinitionsError
from .logging_utils import configure_logging
from .models import MessageSegment, Segment

# ------------------------------------------------------------------------------
# globals
# ------------------------------------------------------------------------------

LOG = logging.getLogger("hl7_definitions")

EXIT_OK = 0
EXIT_ERR = 1
EXIT_CLI = 2

# ------------------------------------------------------------------------------
# Parser construction
# ------------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argparse parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with subcommands: compile, versions, table,
        describe.
    """
    parser = argparse.ArgumentParser(
        prog="hl7-definitions",
        description="Compile and query HL7 v2.x schema reference data.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML build config (used by compile).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"hl7-definitions {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    # compile
    s1 = sub.add_parser("compile", help="Compile source documents into the store.")
    s1.add_argument(
        "--source-dir",
        type=Path,
        default=None,
        help="Directory holding tables.json and defs.json (overrides config).",
    )
    s1.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Generated module path (overrides config).",
    )
    s1.add_argument(
        "--tables",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include coded value tables (overrides config).",
    )
    s1.add_argument(
        "--enable",
        dest="versions",
        action="append",
        default=None,
        metavar="VERSION",
        help="Include an HL7 version, e.g. 2.5.1. Repeatable; replaces the "
        "configured version list.",
    )

    # versions
    sub.add_parser("versions", help="List compiled-in HL7 versions.")

    # table
    s3 = sub.add_parser("table", help="Show a coded value table.")
    s3.add_argument("table_id", type=int, help="Numeric table id, e.g. 3.")
    s3.add_argument("code", nargs="?", default=None, help="Single code to look up.")

    # describe
    s4 = sub.add_parser("describe", help="Describe a message structure.")
    s4.add_argument("hl7_version", help="HL7 version, e.g. 2.5.1.")
    s4.add_argument("message", help="Message structure, e.g. ADT_A01.")

    return parser


# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------


def _load_build_config(path: Optional[Path]) -> BuildConfig:
    """
    Load the build config, turning read and format problems into
    HL7DefinitionsError so main() reports them as handled errors.
    """
    if path is not None and not path.is_file():
        raise HL7DefinitionsError(f"Config file not found: {path}")
    try:
        return load_config(path)
    except (TypeError, yaml.YAMLError) as e:
        raise HL7DefinitionsError(f"Invalid config {path}: {e}") from e
    except OSError as e:
        raise HL7DefinitionsError(f"Failed to read {path}: {e}") from e


def _segment_field_lines(name: str, segment: Segment, indent: str) -> List[str]:
    lines = []
    for i, field in enumerate(segment.fields, start=1):
        line = (
            f"{indent}{name}.{i} - {field.description} [{field.datatype}] "
            f"{field.optionality}, {field.repeatability}"
        )
        if field.table is not None:
            line += f" (table {field.table})"
        lines.append(line)
    return lines


def _message_segment_lines(
    version: str, node: MessageSegment, depth: int = 1
) -> List[str]:
    """
    Render one message node: a header line with required/repeatable markers,
    then the segment's fields when the segment is defined, otherwise the
    node's children and compounds.
    """
    from .query import get_segment

    indent = "  " * depth
    header = f"{indent}{node.name}"
    if node.required:
        header += " (required)"
    if node.repeatable:
        header += " (repeatable)"
    lines = [header + ":"]

    segment = get_segment(version, node.name)
    if segment is not None:
        lines.extend(_segment_field_lines(node.name, segment, indent + "  "))
        return lines

    for child in node.children or ():
        lines.extend(_message_segment_lines(version, child, depth + 1))
    if node.compounds:
        choices = ", ".join(c.name or "<any>" for c in node.compounds)
        lines.append(f"{indent}  one of: {choices}")
    return lines


def describe_message(version: str, name: str) -> List[str]:
    """
    Render a message structure as printable lines.

    Raises
    ------
    HL7DefinitionsError
        If the message is not compiled in for that version.
    """
    from .query import get_message

    message = get_message(version, name)
    if message is None:
        raise HL7DefinitionsError(f"Message {name} not found for version {version}")
    lines = [f"{message.name} ({message.description}) segments:"]
    for node in message.segments:
        lines.extend(_message_segment_lines(version, node))
    return lines


# ------------------------------------------------------------------------------
# Command handlers
# ------------------------------------------------------------------------------


def _cmd_compile(
    config_path: Optional[Path],
    source_dir: Optional[Path],
    output: Optional[Path],
    tables: Optional[bool],
    enabled: Optional[List[str]],
) -> int:
    """
    Compile: write the generated store module.

    Command-line flags override the config file; anything not enabled in
    either place is left out of the store.
    """
    cfg = _load_build_config(config_path).override(
        tables=tables, versions=enabled, source_dir=source_dir, output=output
    )
    LOG.info(
        "Compiling %s (tables %s, versions %s)",
        cfg.source_dir,
        "on" if cfg.tables else "off",
        ", ".join(sorted(cfg.versions)) or "none",
    )
    out = write_schema(cfg)
    print(out)
    return EXIT_OK


def _cmd_versions() -> int:
    from .query import versions

    compiled = versions()
    if not compiled:
        LOG.warning("No HL7 versions are compiled into this store")
    for v in compiled:
        print(v)
    return EXIT_OK


def _cmd_table(table_id: int, code: Optional[str]) -> int:
    from .query import table_description, table_value, table_values

    if code is not None:
        meaning = table_value(table_id, code)
        if meaning is None:
            raise HL7DefinitionsError(f"Code {code!r} not found in table {table_id}")
        print(meaning)
        return EXIT_OK

    desc = table_description(table_id)
    values = table_values(table_id)
    if desc is None or values is None:
        raise HL7DefinitionsError(f"Table {table_id} not found")
    print(f"Table {table_id}: {desc}")
    for k, v in values:
        print(f"    {k}\t{v}")
    return EXIT_OK


def _cmd_describe(version: str, message: str) -> int:
    for line in describe_message(version, message):
        print(line)
    return EXIT_OK


# ------------------------------------------------------------------------------
# Entrypoint
# ------------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    """
    CLI entrypoint.

    Parameters
    ----------
    argv : list[str] or None, default None
        Argument list for testing; None uses sys.argv[1:].

    Returns
    -------
    int
        Process exit code (EXIT_OK, EXIT_ERR, or EXIT_CLI).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        if args.cmd == "compile":
            return _cmd_compile(
                config_path=args.config,
                source_dir=args.source_dir,
                output=args.output,
                tables=args.tables,
                enabled=args.versions,
            )
        if args.cmd == "versions":
            return _cmd_versions()
        if args.cmd == "table":
            return _cmd_table(args.table_id, args.code)
        if args.cmd == "describe":
            return _cmd_describe(args.hl7_version, args.message)
        parser.error("Unknown command")
        return EXIT_CLI

    except HL7DefinitionsError as e:
        LOG.error("%s", e)
        return EXIT_ERR
    except KeyboardInterrupt:
        LOG.error("Interrupted")
        return EXIT_ERR


if __name__ == "__main__":
    raise SystemExit(main())
