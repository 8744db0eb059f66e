# -*- coding: utf-8 -*-
"""Info command: print the header and parse status of a BCR file."""

import argparse

import numpy as np

from bcr_lib.commands.common import add_reader_arguments
from bcr_lib.commands.common import options_from_args
from bcr_lib.document import BcrDocument
from bcr_lib.interface import BcrInterface


def format_info(document: BcrDocument) -> str:
    """Render a human-readable summary of a document."""
    lines = [
        f"File:         {document.path}",
        f"Status:       {document.status.value}",
    ]
    if document.header is not None:
        unit = document.unit
        lines += [
            f"Version:      {document.version_field}",
            f"Manufacturer: {document.manufacturer_id or '-'}",
            f"Created:      {document.create_date:%Y-%m-%d %H:%M}",
            f"Modified:     {document.mod_date:%Y-%m-%d %H:%M}",
            f"Grid:         {document.num_points} points x "
            f"{document.num_profiles} profiles",
            f"Scales:       {document.x_scale:g} {document.y_scale:g} "
            f"{document.z_scale:g} {unit}",
            f"Offsets:      {document.x_offset:g} {document.y_offset:g} "
            f"{document.z_offset:g} {unit}",
            f"Temperature:  {document.sample_temperature:g} °C",
        ]
    if document.has_data:
        heights = document.heights()
        if not np.isnan(heights).all():
            lines.append(
                f"Heights:      {np.nanmin(heights):g} .. "
                f"{np.nanmax(heights):g} {document.unit}"
            )
    if document.metadata:
        lines.append("Metadata:")
        lines += [f"  {key} = {value}" for key, value in document.metadata.items()]
    if document.errors:
        lines.append("Messages:")
        lines += [f"  {error}" for error in document.errors]
    return "\n".join(lines)


def info(args: list[str]) -> int:
    """Entry point for the info command."""
    parser = argparse.ArgumentParser(
        prog="bcr info",
        description="Show the header fields and parse status of a BCR file",
    )
    add_reader_arguments(parser)
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the summary as JSON (without height values)",
    )

    parsed_args = parser.parse_args(args)
    options = options_from_args(parsed_args)

    document = BcrInterface.load(parsed_args.input_file, options)
    if parsed_args.json:
        print(BcrInterface.to_json(document, include_data=False))  # noqa: T201
    else:
        print(format_info(document))  # noqa: T201

    return 0 if document.status.has_data else 1
