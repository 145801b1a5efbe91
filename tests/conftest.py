import importlib.util
import os

import pytest

from favicon_studio import RenderParameters

SCRIPTS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scripts")


@pytest.fixture
def load_script():
    """Import one of the scripts/ files as a module."""

    def load(name):
        path = os.path.join(SCRIPTS_DIR, f"{name}.py")
        spec = importlib.util.spec_from_file_location(name, path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return load


@pytest.fixture
def red_blue():
    """Opaque red -> blue design with no stroke, glow or padding."""
    return RenderParameters(
        gradient_kind="linear",
        color_a="#ff0000",
        color_b="#0000ff",
        angle_deg=0,
        shape="circle",
        padding=0,
        stroke_width=0,
        glow=False,
        bg_kind="transparent",
    )
