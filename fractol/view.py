"""Interactive view state: zooming, panning, palette and Julia constant changes."""

from __future__ import annotations

from dataclasses import dataclass, replace

from fractol.fractals import HEIGHT, WIDTH, Viewport, default_viewport
from fractol.palette import ColorScheme
from fractol.parsing import DEFAULT_JULIA, Config, FractalType

ZOOM_FACTOR = 1.05
PAN_STEP = 0.025
JULIA_GROW = 1.1
JULIA_SHRINK = 0.9


@dataclass
class ViewState:
    """Everything that decides what the window currently shows."""

    kind: FractalType
    name: str
    viewport: Viewport
    julia: tuple[float, float] = DEFAULT_JULIA
    scheme: ColorScheme = ColorScheme.CLASSIC
    zoom: float = ZOOM_FACTOR

    def scroll(self, mouse_x: float, mouse_y: float, ydelta: float) -> None:
        """Zoom around the mouse position: in for ``ydelta > 0``, out for ``ydelta < 0``.

        The point of the plane under the mouse stays where it is.
        """
        if ydelta == 0:
            return
        x_ratio = mouse_x / WIDTH
        y_ratio = mouse_y / HEIGHT
        span = self.viewport.real_span
        if ydelta < 0:
            change = self.zoom * span - span
        else:
            change = (1 / self.zoom) * span - span
        vp = self.viewport
        self.viewport = Viewport(
            r_min=vp.r_min - change * x_ratio,
            r_max=vp.r_max + change * (1 - x_ratio),
            i_min=vp.i_min - change * (1 - y_ratio),
            i_max=vp.i_max + change * y_ratio,
        )

    def pan(self, left: bool, right: bool, up: bool, down: bool) -> None:
        """Shift the view for each held arrow key by a fraction of the real span."""
        step = PAN_STEP * self.viewport.real_span
        dx = (step if right else 0.0) - (step if left else 0.0)
        dy = (step if up else 0.0) - (step if down else 0.0)
        if dx == 0 and dy == 0 and not (left or right or up or down):
            return
        vp = self.viewport
        r_min, r_max, i_min, i_max = vp.r_min, vp.r_max, vp.i_min, vp.i_max
        if left:
            r_min -= step
            r_max -= step
        if right:
            r_min += step
            r_max += step
        if up:
            i_min += step
            i_max += step
        if down:
            i_min -= step
            i_max -= step
        self.viewport = Viewport(r_min, r_max, i_min, i_max)

    def set_scheme(self, scheme: ColorScheme | int) -> None:
        """Switch to another colour palette."""
        self.scheme = ColorScheme(scheme)

    def adjust_julia(
        self,
        left_ctrl: bool,
        left_shift: bool,
        right_ctrl: bool,
        right_shift: bool,
    ) -> None:
        """Scale the Julia constant: left Ctrl acts on the real part, right Ctrl
        on the imaginary part; holding the matching Shift shrinks instead of grows."""
        cx, cy = self.julia
        if left_ctrl:
            cx *= JULIA_SHRINK if left_shift else JULIA_GROW
        if right_ctrl:
            cy *= JULIA_SHRINK if right_shift else JULIA_GROW
        self.julia = (cx, cy)

    def snapshot(self) -> ViewState:
        """An independent copy, for detecting later changes."""
        return replace(self)


def initial_state(config: Config) -> ViewState:
    """The view first shown for a parsed command line."""
    return ViewState(
        kind=config.kind,
        name=config.name,
        viewport=default_viewport(config.kind),
        julia=config.julia,
    )