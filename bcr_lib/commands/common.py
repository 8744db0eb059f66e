# -*- coding: utf-8 -*-
"""Arguments and setup shared by the bcr commands."""

import argparse
import logging
from pathlib import Path

from bcr_lib.enums import DuplicateKeyPolicy
from bcr_lib.enums import GrammarVariant
from bcr_lib.options import ParserOptions


def add_reader_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the input file and parser option arguments."""
    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="Input BCR file path",
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in GrammarVariant],
        default=GrammarVariant.MINIMAL.value,
        help="Section count grammar (default: %(default)s)",
    )
    parser.add_argument(
        "--duplicate-keys",
        choices=[p.value for p in DuplicateKeyPolicy],
        default=DuplicateKeyPolicy.OVERWRITE.value,
        help="Policy for repeated metadata keys (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parser progress to stderr",
    )


def options_from_args(parsed_args: argparse.Namespace) -> ParserOptions:
    """Build parser options and configure logging from parsed arguments."""
    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return ParserOptions(
        variant=GrammarVariant(parsed_args.variant),
        duplicate_keys=DuplicateKeyPolicy(parsed_args.duplicate_keys),
    )
