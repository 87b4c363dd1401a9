import pytest

from fractol.fractals import HEIGHT, WIDTH, default_viewport
from fractol.palette import ColorScheme
from fractol.parsing import DEFAULT_JULIA, Config, FractalType
from fractol.view import initial_state


@pytest.fixture
def state():
    return initial_state(Config(kind=FractalType.MANDELBROT, name="mandelbrot"))


def test_initial_state_defaults(state):
    assert state.viewport == default_viewport(FractalType.MANDELBROT)
    assert state.scheme == ColorScheme.CLASSIC
    assert state.zoom == 1.05
    assert state.julia == DEFAULT_JULIA
    assert state.name == "mandelbrot"


def test_initial_state_julia_viewport():
    s = initial_state(Config(kind=FractalType.JULIA, name="julia"))
    assert s.viewport == default_viewport(FractalType.JULIA)
    assert s.kind == FractalType.JULIA


def test_scroll_in_shrinks_span(state):
    before = state.viewport.real_span
    state.scroll(WIDTH / 2, HEIGHT / 2, 1)
    assert state.viewport.real_span == pytest.approx(before / state.zoom)


def test_scroll_out_grows_span(state):
    before = state.viewport.real_span
    state.scroll(WIDTH / 2, HEIGHT / 2, -1)
    assert state.viewport.real_span == pytest.approx(before * state.zoom)


def test_scroll_out_then_in_restores(state):
    original = state.viewport
    state.scroll(300, 700, -1)
    state.scroll(300, 700, 1)
    vp = state.viewport
    assert vp.r_min == pytest.approx(original.r_min)
    assert vp.r_max == pytest.approx(original.r_max)
    assert vp.i_min == pytest.approx(original.i_min)
    assert vp.i_max == pytest.approx(original.i_max)


def test_scroll_keeps_point_under_mouse(state):
    mx = 270
    x_ratio = mx / WIDTH
    before = state.viewport.r_min + x_ratio * state.viewport.real_span
    state.scroll(mx, 500, 1)
    after = state.viewport.r_min + x_ratio * state.viewport.real_span
    assert after == pytest.approx(before)


def test_scroll_at_origin_keeps_corner(state):
    original = state.viewport
    state.scroll(0, 0, 1)
    assert state.viewport.r_min == pytest.approx(original.r_min)
    assert state.viewport.i_max == pytest.approx(original.i_max)


def test_scroll_zero_delta_is_noop(state):
    original = state.viewport
    state.scroll(100, 100, 0)
    assert state.viewport == original


def test_pan_left_then_right_restores_real_axis(state):
    original = state.viewport
    state.pan(True, False, False, False)
    assert state.viewport.r_min < original.r_min
    assert state.viewport.real_span == pytest.approx(original.real_span)
    assert state.viewport.i_min == original.i_min
    state.pan(False, True, False, False)
    assert state.viewport.r_min == pytest.approx(original.r_min)
    assert state.viewport.r_max == pytest.approx(original.r_max)


def test_pan_up_moves_imaginary_axis(state):
    original = state.viewport
    state.pan(False, False, True, False)
    assert state.viewport.i_min > original.i_min
    assert state.viewport.imaginary_span == pytest.approx(original.imaginary_span)
    assert state.viewport.r_min == original.r_min


def test_pan_opposite_keys_cancel(state):
    original = state.viewport
    state.pan(True, True, True, True)
    assert state.viewport.r_min == pytest.approx(original.r_min)
    assert state.viewport.i_max == pytest.approx(original.i_max)


def test_pan_no_keys_is_noop(state):
    original = state.viewport
    state.pan(False, False, False, False)
    assert state.viewport == original


def test_set_scheme(state):
    state.set_scheme(2)
    assert state.scheme == ColorScheme.ORCHID
    state.set_scheme(ColorScheme.OCEAN)
    assert state.scheme == ColorScheme.OCEAN


def test_set_scheme_invalid(state):
    with pytest.raises(ValueError):
        state.set_scheme(7)


def test_adjust_julia_left_ctrl_grows_real(state):
    cx, cy = state.julia
    state.adjust_julia(True, False, False, False)
    assert state.julia[0] == pytest.approx(cx * 1.1)
    assert state.julia[1] == cy


def test_adjust_julia_right_ctrl_shift_shrinks_imaginary(state):
    cx, cy = state.julia
    state.adjust_julia(False, False, True, True)
    assert state.julia[0] == cx
    assert state.julia[1] == pytest.approx(cy * 0.9)


def test_adjust_julia_shift_without_ctrl_does_nothing(state):
    original = state.julia
    state.adjust_julia(False, True, False, True)
    assert state.julia == original


def test_snapshot_detects_change(state):
    snap = state.snapshot()
    assert snap == state
    state.pan(True, False, False, False)
    assert snap != state