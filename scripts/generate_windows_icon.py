#!/usr/bin/env python3
"""
Generate a Windows .ico with a PNG rendered natively at every size
Requires: pip install Pillow
"""

import argparse
import os
import sys

from favicon_studio import ICO_SIZES, IconStudioError, export_ico
from favicon_studio.cli import (
    add_output_arguments,
    add_render_arguments,
    params_from_args,
    size_list,
    write_files,
)


def parse_args(argv=None):
    script_dir = os.path.dirname(os.path.abspath(__file__))
    project_root = os.path.dirname(script_dir)
    parser = argparse.ArgumentParser(description="Generate a multi-size .ico file.")
    add_render_arguments(parser)
    add_output_arguments(parser, os.path.join(project_root, "build", "windows"))
    parser.add_argument(
        "--sizes",
        type=size_list,
        default=list(ICO_SIZES),
        help="comma separated pixel sizes (Windows standard by default)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        params = params_from_args(args)
        name, data = export_ico(params, args.sizes, base=args.name)
        (output,) = write_files(args.output_dir, {name: data})
    except (IconStudioError, OSError) as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Generated: {output}")
    print(f"Sizes: {sorted(set(args.sizes))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
