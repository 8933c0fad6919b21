"""Entry point: python -m sql2entity [entity name] <file>

Reads a CREATE TABLE statement, generates <entity name>.cs.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .codegen import generate
from .loader import load_prefix, load_statement, load_suffix
from .schema_parser import ParseError, build_table

logger = logging.getLogger("sql2entity")

USAGE = "sql2entity [options] [entity name] <file>"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sql2entity",
        usage=USAGE,
        description="Generate an annotated C# entity class from a CREATE TABLE statement.",
    )
    parser.add_argument("args", nargs="*", metavar="[entity name] <file>")
    parser.add_argument("--prefix", type=Path, help="boilerplate written before the class (default: ./prefix)")
    parser.add_argument("--suffix", type=Path, help="boilerplate written after the class (default: ./suffix)")
    parser.add_argument("--output-dir", type=Path, help="directory for the .cs file (default: cwd)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    options = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if len(options.args) == 1:
        entity_name, input_file = "", options.args[0]
    elif len(options.args) == 2:
        entity_name, input_file = options.args
    else:
        parser.print_usage(sys.stderr)
        return 2

    prefix = load_prefix(options.prefix)
    suffix = load_suffix(options.suffix)

    try:
        raw = load_statement(input_file)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read input file %s: %s", input_file, e)
        return 1
    print("Read file succeed")

    try:
        table = build_table(raw)
    except ParseError as e:
        logger.error("Cannot build model from %s: %s", input_file, e)
        return 1
    print("Model build succeed")

    entity_name = entity_name or table.table_name
    print("Entity class name:", entity_name)

    try:
        generate(table, entity_name, prefix, suffix, options.output_dir)
    except ValueError as e:
        logger.error("Cannot generate code: %s", e)
        return 1
    except OSError as e:
        logger.error("Cannot write output file: %s", e)
        return 1
    print("Write file succeed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
