"""Escape-time computation for the Mandelbrot, Julia and Burning Ship sets."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fractol.palette import MAX_ITER, ColorScheme, colorize, iteration_color
from fractol.parsing import DEFAULT_JULIA, FractalType

WIDTH = 1080
HEIGHT = 1080
ESCAPE_RADIUS_SQUARED = 4


@dataclass(frozen=True)
class Viewport:
    """The region of the complex plane shown in the window."""

    r_min: float
    r_max: float
    i_min: float
    i_max: float

    @property
    def real_span(self) -> float:
        return self.r_max - self.r_min

    @property
    def imaginary_span(self) -> float:
        return self.i_max - self.i_min


_DEFAULT_VIEWPORTS = {
    FractalType.MANDELBROT: Viewport(-2.0, 1.0, -1.5, 1.5),
    FractalType.JULIA: Viewport(-1.7, 1.7, -1.7, 1.7),
    FractalType.BURNING: Viewport(-2.0, 2.0, -2.0, 2.0),
}


def default_viewport(kind: FractalType) -> Viewport:
    """The region first shown for fractal ``kind``."""
    return _DEFAULT_VIEWPORTS[FractalType(kind)]


def _plane_point(kind, viewport: Viewport, x, y, width, height):
    """Map pixel coordinates (scalars or arrays) onto the complex plane."""
    pixel_size = viewport.real_span / width
    real = viewport.r_min + x * pixel_size
    if kind == FractalType.JULIA:
        pixel_height = viewport.imaginary_span / height
        imag = viewport.i_max - (y * pixel_height)
    elif kind == FractalType.BURNING:
        # The Burning Ship is drawn with the imaginary axis pointing down.
        imag = viewport.i_min + (y * pixel_size)
    else:
        imag = viewport.i_max - (y * pixel_size)
    return real, imag


def escape_count(
    kind: FractalType,
    viewport: Viewport,
    x: float,
    y: float,
    julia: tuple[float, float] = DEFAULT_JULIA,
) -> int:
    """Number of iterations before the orbit of pixel (x, y) leaves radius 2.

    Returns ``MAX_ITER`` for points that never escape.
    """
    kind = FractalType(kind)
    real, imag = _plane_point(kind, viewport, x, y, WIDTH, HEIGHT)
    if kind == FractalType.JULIA:
        zx, zy = real, imag
        cx, cy = julia
    else:
        zx, zy = 0.0, 0.0
        cx, cy = real, imag
    burning = kind == FractalType.BURNING
    count = 0
    while zx * zx + zy * zy < ESCAPE_RADIUS_SQUARED and count < MAX_ITER:
        temp = zx
        zx = zx * zx - zy * zy + cx
        zy = 2 * abs(temp * zy) + cy if burning else 2 * temp * zy + cy
        count += 1
    return count


def pixel_color(
    kind: FractalType,
    viewport: Viewport,
    x: float,
    y: float,
    julia: tuple[float, float] = DEFAULT_JULIA,
    scheme: ColorScheme = ColorScheme.CLASSIC,
) -> int:
    """Packed RGBA colour of pixel (x, y)."""
    return iteration_color(escape_count(kind, viewport, x, y, julia), scheme)


def escape_counts(
    kind: FractalType,
    viewport: Viewport,
    julia: tuple[float, float] = DEFAULT_JULIA,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> np.ndarray:
    """Escape counts for every pixel, as an ``(height, width)`` integer array."""
    kind = FractalType(kind)
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive: {width}x{height}")
    xs = np.arange(width, dtype=np.float64)[np.newaxis, :]
    ys = np.arange(height, dtype=np.float64)[:, np.newaxis]
    real, imag = _plane_point(kind, viewport, xs, ys, width, height)
    real, imag = np.broadcast_arrays(real, imag)
    if kind == FractalType.JULIA:
        zx, zy = real.copy(), imag.copy()
        cx, cy = float(julia[0]), float(julia[1])
    else:
        zx = np.zeros((height, width))
        zy = np.zeros((height, width))
        cx, cy = real, imag
    burning = kind == FractalType.BURNING

    counts = np.zeros((height, width), dtype=np.int64)
    active = zx * zx + zy * zy < ESCAPE_RADIUS_SQUARED
    for _ in range(MAX_ITER):
        if not active.any():
            break
        new_x = zx * zx - zy * zy + cx
        new_y = 2 * np.abs(zx * zy) + cy if burning else 2 * zx * zy + cy
        zx = np.where(active, new_x, zx)
        zy = np.where(active, new_y, zy)
        counts += active
        active &= zx * zx + zy * zy < ESCAPE_RADIUS_SQUARED
    return counts


def render(
    kind: FractalType,
    viewport: Viewport,
    julia: tuple[float, float] = DEFAULT_JULIA,
    scheme: ColorScheme = ColorScheme.CLASSIC,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> np.ndarray:
    """Packed RGBA image of the fractal, as an ``(height, width)`` ``uint32`` array."""
    return colorize(escape_counts(kind, viewport, julia, width, height), scheme)