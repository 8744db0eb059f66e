# -*- coding: utf-8 -*-
"""Convert command: export a BCR file as JSON.

The JSON document holds the header fields, offsets, metadata, collected
messages and (unless ``--no-data`` is given) the height values indexed
``[profile][point]``.
"""

import argparse
from pathlib import Path

from bcr_lib.commands.common import add_reader_arguments
from bcr_lib.commands.common import options_from_args
from bcr_lib.interface import BcrInterface


def convert(args: list[str]) -> int:
    """Entry point for the convert command."""
    parser = argparse.ArgumentParser(
        prog="bcr convert",
        description="Convert a BCR file to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bcr convert -i surface.bcr                      # Convert to JSON (stdout)
  bcr convert -i surface.bcr -o surface.json      # Convert to JSON file
  bcr convert -i surface.bcr --no-data            # Header and metadata only

Notes:
  - Files that fail to parse are not written; the exit code is 1
  - Incomplete data is exported, unfilled cells hold 0.0
""",
    )
    add_reader_arguments(parser)
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--no-data",
        action="store_true",
        help="Leave the height values out of the JSON",
    )

    parsed_args = parser.parse_args(args)
    options = options_from_args(parsed_args)

    document = BcrInterface.load(parsed_args.input_file, options)
    if not document.status.has_data:
        return 1

    include_data = not parsed_args.no_data
    if parsed_args.output_file is None:
        print(BcrInterface.to_json(document, include_data=include_data))  # noqa: T201
    else:
        BcrInterface.save_json(
            document, parsed_args.output_file, include_data=include_data
        )

    return 0
