"""Main CLI entry point for idlproto."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .. import __version__
from ..config import EmitterConfig
from ..exceptions import IdlProtoError
from ..models import Document
from ..proto import to_proto

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the idlproto CLI."""
    parser = argparse.ArgumentParser(
        prog="idlproto",
        description="idlproto: Interface schema to Protocol Buffers IDL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  idlproto schema.json                        Print the .proto to stdout
  idlproto schema.json -o service.proto       Write the .proto to a file
  idlproto schema.json --include-role Api     Only emit the Api service
  idlproto --version                          Show version
        """,
    )

    parser.add_argument(
        "schema",
        metavar="SCHEMA",
        type=str,
        help="Parsed schema document (JSON AST)",
    )

    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        type=str,
        help="Write the generated .proto to FILE instead of stdout",
    )

    parser.add_argument(
        "--include-role",
        metavar="NAME",
        action="append",
        default=[],
        help="Only emit this role (repeatable)",
    )

    parser.add_argument(
        "--exclude-role",
        metavar="NAME",
        action="append",
        default=[],
        help="Skip this role (repeatable)",
    )

    parser.add_argument(
        "--comment-width",
        metavar="N",
        type=int,
        default=80,
        help="Wrap description comments at N columns (default: 80)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each emitted definition to stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"idlproto {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the idlproto CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    schema_path = Path(args.schema)
    if not schema_path.exists():
        print(f"Error: File not found: {schema_path}", file=sys.stderr)
        return 1

    try:
        config = EmitterConfig(
            include_roles=tuple(args.include_role),
            exclude_roles=tuple(args.exclude_role),
            comment_width=args.comment_width,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        text = schema_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read schema document {schema_path}: {e}", file=sys.stderr)
        return 1

    try:
        document = Document.model_validate_json(text)
    except ValidationError as e:
        print(f"Error: Invalid schema document {schema_path}:\n{e}", file=sys.stderr)
        return 1

    try:
        proto = to_proto(document, config=config)
    except IdlProtoError as e:
        print(f"Error: Cannot generate proto: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(proto, encoding="utf-8")
        except OSError as e:
            print(f"Error: Cannot write {output_path}: {e}", file=sys.stderr)
            return 1
        logger.info("Wrote %s", output_path)
    else:
        sys.stdout.write(proto)

    return 0


if __name__ == "__main__":
    sys.exit(main())
