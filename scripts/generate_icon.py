#!/usr/bin/env python3
"""Generate a favicon PNG set - one crisp render per size, never rescaled."""

import argparse
import os
import sys

from favicon_studio import DEFAULT_SIZES, IconStudioError, export_png_set, export_recommended
from favicon_studio.cli import (
    add_output_arguments,
    add_render_arguments,
    params_from_args,
    size_list,
    write_files,
)


def parse_args(argv=None):
    script_dir = os.path.dirname(os.path.abspath(__file__))
    parser = argparse.ArgumentParser(description="Generate favicon PNGs at several sizes.")
    add_render_arguments(parser)
    add_output_arguments(parser, os.path.join(script_dir, "..", "build", "icons"))
    parser.add_argument(
        "--sizes",
        type=size_list,
        default=list(DEFAULT_SIZES),
        help="comma separated pixel sizes",
    )
    parser.add_argument(
        "--recommended",
        action="store_true",
        help="write the recommended PNG set plus the .ico instead of --sizes",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        params = params_from_args(args)
        if args.recommended:
            print("Generating recommended favicon pack...")
            files = export_recommended(params, base=args.name)
        else:
            print(f"Generating favicon PNGs: {sorted(set(args.sizes))}")
            files = export_png_set(params, args.sizes, base=args.name)
        paths = write_files(args.output_dir, files)
    except (IconStudioError, OSError) as exc:
        print(f"Error: {exc}")
        return 1

    for path in paths:
        print(f"Generated: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
