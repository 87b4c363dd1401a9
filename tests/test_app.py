import numpy as np
import pytest

from fractol.app import _to_rgb, main
from fractol.palette import pack_rgba
from fractol.parsing import help_text


@pytest.mark.parametrize(
    "argv",
    [[], ["nope"], ["julia", "0.4"], ["julia", "0.4", "0.6"], ["mandelbrot", "extra"]],
)
def test_main_rejects_bad_arguments(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == help_text()


def test_help_text_lists_fractals(capsys):
    main(["unknown"])
    out = capsys.readouterr().out
    assert "mandelbrot, julia, or burning" in out
    assert out.startswith("Error: Invalid arguments provided.")


def test_to_rgb_unpacks_channels():
    image = np.full((2, 3), pack_rgba(10, 20, 30, 255), dtype=np.uint32)
    rgb = _to_rgb(image)
    assert rgb.shape == (3, 2, 3)
    assert rgb.dtype == np.uint8
    assert rgb[0, 0].tolist() == [10, 20, 30]
    assert (rgb == rgb[0, 0]).all()


def test_to_rgb_transposes_axes():
    image = np.zeros((2, 3), dtype=np.uint32)
    image[1, 2] = pack_rgba(200, 100, 50, 255)
    rgb = _to_rgb(image)
    assert rgb[2, 1].tolist() == [200, 100, 50]
    assert rgb[0, 0].tolist() == [0, 0, 0]