"""Mapping of escape-time iteration counts to packed RGBA colours."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

MAX_ITER = 100
OPAQUE = 255
BLACK = OPAQUE  # RGBA 0, 0, 0, 255 packed


class ColorScheme(IntEnum):
    """Selectable colour palettes (keys 1, 2 and 3)."""

    CLASSIC = 1
    ORCHID = 2
    OCEAN = 3


def _channels(t, scheme: ColorScheme):
    """Return the red, green and blue intensities for normalised count ``t``."""
    if scheme == ColorScheme.CLASSIC:
        red = 255 * 9 * (1 - t) * t * t * t
        green = 15 * 255 * (1 - t) * (1 - t) * t * t
        blue = 8.5 * 255 * (1 - t) * (1 - t) * (1 - t) * t
    elif scheme == ColorScheme.ORCHID:
        red = 255 * 9 * (1 - t) * t * t * t
        green = 8.5 * 255 * (1 - t) * (1 - t) * (1 - t) * t
        blue = 9 * 255 * (1 - t) * (1 - t) * t * t
    elif scheme == ColorScheme.OCEAN:
        red = 8.5 * 255 * (1 - t) * (1 - t) * (1 - t) * t
        green = 9 * 255 * (1 - t) * (1 - t) * t * t
        blue = 255 * 8.5 * (1 - t) * t * t * t
    else:
        raise ValueError(f"unknown colour scheme: {scheme!r}")
    return red, green, blue


def pack_rgba(red, green, blue, alpha) -> int:
    """Pack four channels, truncated to integers, into one 32-bit RGBA value."""
    parts = [int(value) for value in (red, green, blue, alpha)]
    for value in parts:
        if not 0 <= value <= 255:
            raise ValueError(f"channel value out of range: {value}")
    r, g, b, a = parts
    return r << 24 | g << 16 | b << 8 | a


def _check_count(iterations: int) -> None:
    if not 0 <= iterations <= MAX_ITER:
        raise ValueError(f"iteration count must be in 0..{MAX_ITER}: {iterations}")


def iteration_color(iterations: int, scheme: ColorScheme = ColorScheme.CLASSIC) -> int:
    """Colour of a point that escaped after ``iterations`` steps.

    Points that never escaped (``MAX_ITER`` steps) are opaque black.
    """
    _check_count(iterations)
    scheme = ColorScheme(scheme)
    if iterations == MAX_ITER:
        return BLACK
    t = 1.0 * iterations / MAX_ITER
    red, green, blue = _channels(t, scheme)
    return pack_rgba(red, green, blue, OPAQUE)


def colorize(iterations, scheme: ColorScheme = ColorScheme.CLASSIC) -> np.ndarray:
    """Colour a whole array of iteration counts; returns ``uint32`` of the same shape."""
    counts = np.asarray(iterations)
    scheme = ColorScheme(scheme)
    if counts.size and (counts.min() < 0 or counts.max() > MAX_ITER):
        raise ValueError(f"iteration counts must be in 0..{MAX_ITER}")
    t = counts.astype(np.float64) / MAX_ITER
    red, green, blue = (
        np.asarray(channel).astype(np.uint32) for channel in _channels(t, scheme)
    )
    packed = (red << 24) | (green << 16) | (blue << 8) | np.uint32(OPAQUE)
    return np.where(counts >= MAX_ITER, np.uint32(BLACK), packed).astype(np.uint32)