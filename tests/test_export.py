import io

import pytest
from PIL import Image

from favicon_studio import (
    EmptyExportError,
    RasterEncodingError,
    encode_png,
    export_png_set,
    export_recommended,
    render_pngs,
)
from favicon_studio import export
from favicon_studio.ico import read_ico_directory


def decode(data):
    with Image.open(io.BytesIO(data)) as im:
        im.load()
        return im.copy()


def test_png_set_names_and_sizes(red_blue):
    files = export_png_set(red_blue, [32, 16], base="logo")
    assert sorted(files) == ["logo-16.png", "logo-32.png"]
    for name, data in files.items():
        size = int(name[len("logo-"):-len(".png")])
        image = decode(data)
        assert data.startswith(b"\x89PNG\r\n\x1a\n")
        assert image.size == (size, size)
        assert image.mode == "RGBA"


def test_batch_matches_single_render(red_blue):
    pngs = render_pngs(red_blue, [16, 64])
    assert decode(pngs[64]).size == (64, 64)
    assert export.render_png(16, red_blue) == pngs[16]


def test_duplicate_sizes_collapse(red_blue):
    assert sorted(render_pngs(red_blue, [16, 16, 8])) == [8, 16]


def test_empty_request_rejected_before_rendering(red_blue, monkeypatch):
    def fail(*args):
        raise AssertionError("rendered")

    monkeypatch.setattr(export, "render_icon", fail)
    with pytest.raises(EmptyExportError):
        render_pngs(red_blue, [])
    with pytest.raises(EmptyExportError):
        export.export_ico(red_blue, [])


def test_encoding_failure_blocks_container(red_blue, monkeypatch):
    real = export.render_png

    def flaky(size, params):
        if size == 32:
            raise RasterEncodingError(size)
        return real(size, params)

    monkeypatch.setattr(export, "render_png", flaky)
    with pytest.raises(RasterEncodingError) as info:
        export.export_ico(red_blue, [16, 32, 48])
    assert info.value.size == 32


def test_encode_png_reports_empty_output():
    class Silent:
        size = (24, 24)

        def save(self, fp, format=None, **kwargs):
            pass

    with pytest.raises(RasterEncodingError) as info:
        encode_png(Silent())
    assert info.value.size == 24


def test_encode_png_wraps_encoder_errors():
    class Broken:
        size = (48, 48)

        def save(self, fp, format=None, **kwargs):
            raise OSError("encoder error -2")

    with pytest.raises(RasterEncodingError) as info:
        encode_png(Broken(), 48)
    assert info.value.size == 48
    assert isinstance(info.value.__cause__, OSError)


def test_encode_png_output():
    data = encode_png(Image.new("RGBA", (4, 4), (1, 2, 3, 4)))
    assert data.startswith(b"\x89PNG\r\n\x1a\n")
    assert decode(data).getpixel((0, 0)) == (1, 2, 3, 4)


def test_recommended_pack(red_blue, monkeypatch):
    monkeypatch.setattr(export, "RECOMMENDED_PNG_SIZES", (16, 32, 180))
    monkeypatch.setattr(export, "ICO_SIZES", (16, 32))
    files = export_recommended(red_blue, base="site")
    assert sorted(files) == ["site-16.png", "site-180.png", "site-32.png", "site.ico"]
    entries = read_ico_directory(files["site.ico"])
    assert [e["width"] for e in entries] == [16, 32]
    # the .ico embeds the same bytes as the standalone PNGs
    first = entries[0]
    embedded = files["site.ico"][first["offset"]:first["offset"] + first["length"]]
    assert embedded == files["site-16.png"]
