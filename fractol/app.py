"""The interactive fractal window."""

from __future__ import annotations

import os
import sys
from typing import Sequence

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from fractol.fractals import HEIGHT, WIDTH, render  # noqa: E402
from fractol.palette import ColorScheme  # noqa: E402
from fractol.parsing import UsageError, help_text, parse_args  # noqa: E402
from fractol.view import ViewState, initial_state  # noqa: E402

_FRAME_RATE = 60

_SCHEME_KEYS = (
    (pygame.K_1, ColorScheme.CLASSIC),
    (pygame.K_2, ColorScheme.ORCHID),
    (pygame.K_3, ColorScheme.OCEAN),
)


def _to_rgb(image: np.ndarray) -> np.ndarray:
    """Turn a ``(height, width)`` packed RGBA image into a ``(width, height, 3)`` RGB array."""
    image = np.asarray(image, dtype=np.uint32)
    channels = [(image >> shift) & 0xFF for shift in (24, 16, 8)]
    rgb = np.stack(channels, axis=-1).astype(np.uint8)
    return np.ascontiguousarray(rgb.transpose(1, 0, 2))


def _draw(screen: pygame.Surface, state: ViewState) -> None:
    image = render(state.kind, state.viewport, state.julia, state.scheme, WIDTH, HEIGHT)
    pygame.surfarray.blit_array(screen, _to_rgb(image))


def _apply_held_keys(state: ViewState) -> None:
    keys = pygame.key.get_pressed()
    state.pan(keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_UP], keys[pygame.K_DOWN])
    for key, scheme in _SCHEME_KEYS:
        if keys[key]:
            state.set_scheme(scheme)
    state.adjust_julia(
        keys[pygame.K_LCTRL],
        keys[pygame.K_LSHIFT],
        keys[pygame.K_RCTRL],
        keys[pygame.K_RSHIFT],
    )


def run(state: ViewState) -> int:
    """Show the fractal until the window is closed; return the exit status.

    Escape or closing the window ends with 0; Tab prints the usage text and
    ends with 1.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(state.name)
        clock = pygame.time.Clock()
        drawn = None
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return 0
                    if event.key == pygame.K_TAB:
                        sys.stdout.write(help_text())
                        return 1
                elif event.type == pygame.MOUSEWHEEL:
                    mouse_x, mouse_y = pygame.mouse.get_pos()
                    state.scroll(mouse_x, mouse_y, event.y)
            _apply_held_keys(state)
            if drawn != state:
                _draw(screen, state)
                drawn = state.snapshot()
            pygame.display.flip()
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and open the viewer; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except UsageError as error:
        sys.stdout.write(str(error))
        return 1
    return run(initial_state(config))


if __name__ == "__main__":
    sys.exit(main())