"""oasmore CLI: merge, tabulate and summarize OpenAPI documents."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from oasmore.errors import OasMoreError


def _configure_logging(args) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main():
    """Main CLI entry point for oasmore commands."""
    try:
        oasmore_version = get_version("oasmore")
    except PackageNotFoundError:
        oasmore_version = "dev"

    parser = argparse.ArgumentParser(
        prog="oasmore",
        description="oasmore: inspect, tabulate and merge OpenAPI / Swagger documents"
    )
    parser.add_argument("--version", action="version", version=f"oasmore {oasmore_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )
    parent_parser.add_argument(
        "--no-validate",
        dest="validate",
        action="store_false",
        help="Skip structural validation of loaded documents."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # merge command
    merge_parser = subparsers.add_parser(
        "merge",
        help="Merge every *.json document in a directory into one",
        parents=[parent_parser]
    )
    merge_parser.add_argument(
        "input_dir",
        type=Path,
        help="Directory holding the documents (merged in file-name order)"
    )
    merge_parser.add_argument(
        "--out",
        type=Path,
        required=True,
        help="Path of the merged JSON document"
    )
    merge_parser.add_argument(
        "--compact",
        action="store_true",
        help="Write compact canonical JSON instead of pretty-printed JSON"
    )

    # table command
    table_parser = subparsers.add_parser(
        "table",
        help="Project a document's operations into a table",
        parents=[parent_parser]
    )
    table_parser.add_argument(
        "spec_path",
        type=Path,
        help="Path to spec JSON"
    )
    table_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output file (.xlsx or .csv); prints CSV to stdout when omitted"
    )
    table_parser.add_argument(
        "--column",
        dest="columns",
        action="append",
        default=None,
        metavar="SLUG[=Display]",
        help="Column to include (repeatable). Built-ins: method, path, operationId, "
             "summary, tags, x-tag-groups; any other slug reads an operation extension"
    )

    # stats command
    stats_parser = subparsers.add_parser(
        "stats",
        help="Print operation and schema counts",
        parents=[parent_parser]
    )
    stats_parser.add_argument(
        "spec_path",
        type=Path,
        help="Path to spec JSON"
    )

    # tags command
    tags_parser = subparsers.add_parser(
        "tags",
        help="List tag names used by a document",
        parents=[parent_parser]
    )
    tags_parser.add_argument(
        "spec_path",
        type=Path,
        help="Path to spec JSON"
    )
    tags_parser.add_argument(
        "--no-top",
        dest="incl_top",
        action="store_false",
        help="Ignore the document's top-level tag list"
    )
    tags_parser.add_argument(
        "--no-ops",
        dest="incl_ops",
        action="store_false",
        help="Ignore tags attached to operations"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    _configure_logging(args)

    try:
        if args.command == "merge":
            from .api import write_file_dir_merge

            out_path = write_file_dir_merge(
                Path(args.out).resolve(),
                Path(args.input_dir).resolve(),
                pretty=not args.compact,
                validate=args.validate,
            )
            if not args.quiet:
                print("[OK] Merge complete")
                print(f"  Output: {out_path}")
        elif args.command == "table":
            from .api import operations_table
            from ._internal.io.export import table_to_csv, write_table

            table = operations_table(
                Path(args.spec_path).resolve(),
                columns=args.columns,
                validate=args.validate,
            )
            if args.out is None:
                sys.stdout.write(table_to_csv(table))
            else:
                out_path = write_table(Path(args.out).resolve(), table)
                if not args.quiet:
                    print("[OK] Table written")
                    print(f"  Output: {out_path}")
                    print(f"  Rows: {len(table.rows)}")
        elif args.command == "stats":
            from .api import stats
            from ._internal.canonical_json import canonical_dumps

            result = stats(Path(args.spec_path).resolve(), validate=args.validate)
            print(canonical_dumps(result.model_dump()))
        elif args.command == "tags":
            from .api import tags

            for tag_name in tags(
                Path(args.spec_path).resolve(),
                incl_top=args.incl_top,
                incl_ops=args.incl_ops,
                validate=args.validate,
            ):
                print(tag_name)
        else:
            parser.print_help()
            sys.exit(1)
    except (FileNotFoundError, ValueError, OasMoreError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
