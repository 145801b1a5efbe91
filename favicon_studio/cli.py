"""Command-line plumbing shared by the scripts in scripts/."""

import argparse
import json
import os

from .errors import InvalidParameterError
from .export import DEFAULT_BASENAME
from .params import DEFAULTS, BackgroundKind, GradientKind, RenderParameters, ShapeKind


def size_list(text):
    try:
        return [int(s) for s in text.replace(",", " ").split()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size list: {text!r}") from None


def _on_off(text):
    value = text.lower()
    if value in ("on", "true", "yes", "1"):
        return True
    if value in ("off", "false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected on/off, got {text!r}")


def add_render_arguments(parser):
    """Add --params plus one flag per render parameter."""
    parser.add_argument("--params", metavar="FILE", help="JSON file with render options")
    group = parser.add_argument_group("render options (override --params)")
    group.add_argument("--gradient", dest="gradient_kind", choices=[k.value for k in GradientKind])
    group.add_argument("--color-a", dest="color_a", metavar="HEX")
    group.add_argument("--color-b", dest="color_b", metavar="HEX")
    group.add_argument("--angle", dest="angle_deg", type=int)
    group.add_argument("--shape", choices=[k.value for k in ShapeKind])
    group.add_argument("--padding", type=int, help="percent of half the canvas, 0-20")
    group.add_argument("--stroke-width", dest="stroke_width", type=int, help="0-20 on a 1024 canvas")
    group.add_argument("--stroke-color", dest="stroke_color", metavar="HEX")
    group.add_argument("--glow", type=_on_off, metavar="on|off")
    group.add_argument("--bg", dest="bg_kind", choices=[k.value for k in BackgroundKind])
    group.add_argument("--bg-color", dest="bg_color", metavar="HEX")
    return parser


def add_output_arguments(parser, default_dir):
    parser.add_argument("--output-dir", default=default_dir, help="where files are written")
    parser.add_argument("--name", default=DEFAULT_BASENAME, help="base file name")
    return parser


_RENDER_DESTS = (
    "gradient_kind",
    "color_a",
    "color_b",
    "angle_deg",
    "shape",
    "padding",
    "stroke_width",
    "stroke_color",
    "glow",
    "bg_kind",
    "bg_color",
)


def load_params_file(path):
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidParameterError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidParameterError(f"{path}: expected a JSON object")
    return RenderParameters.from_dict(data)


def params_from_args(args):
    """Build RenderParameters from --params and the individual flags."""
    params = load_params_file(args.params) if args.params else DEFAULTS
    overrides = {k: getattr(args, k) for k in _RENDER_DESTS if getattr(args, k) is not None}
    return params.replace(**overrides) if overrides else params


def write_files(output_dir, files):
    """Write {filename: bytes} into output_dir and return the written paths."""
    os.makedirs(output_dir, exist_ok=True)
    paths = []
    for name, data in sorted(files.items()):
        path = os.path.join(output_dir, name)
        with open(path, "wb") as f:
            f.write(data)
        paths.append(path)
    return paths
