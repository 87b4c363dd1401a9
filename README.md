# fractol

An interactive viewer for three escape-time fractals: the Mandelbrot set,
a Julia set and the Burning Ship. It opens a 1080×1080 window with pygame
and redraws the fractal as you zoom, pan and change its parameters.

## Installing

```
pip install .
```

## Running

```
fractol mandelbrot
fractol julia
fractol burning
```

The command takes exactly one argument, the name of the fractal. Anything
else (no argument, an unknown name, or more than one argument) prints a
short usage text and exits with status 1. The window title is the name you
gave.

The Julia set starts with the constant `-0.745429 + 0.05i`.

## Controls

| Input                       | Effect                                                  |
|-----------------------------|---------------------------------------------------------|
| Mouse wheel                 | Zoom in (wheel up) or out (wheel down) around the pointer |
| Arrow keys                  | Pan the view by 2.5 % of its width per frame            |
| `1`, `2`, `3`               | Switch colour scheme (classic, orchid, ocean)           |
| Left Ctrl                   | Grow the real part of the Julia constant by 10 %        |
| Left Ctrl + Left Shift      | Shrink the real part of the Julia constant by 10 %      |
| Right Ctrl                  | Grow the imaginary part of the Julia constant by 10 %   |
| Right Ctrl + Right Shift    | Shrink the imaginary part of the Julia constant by 10 % |
| Tab                         | Print the usage text and quit with status 1             |
| Esc, or closing the window  | Quit with status 0                                      |

Each zoom step scales the view by a factor of 1.05. Points that do not
escape within 100 iterations are drawn black; the rest are shaded by how
quickly they escape.

## What it does not do

The Julia constant cannot be set from the command line; `fractol julia`
accepts no further arguments. Change the constant in the window with the
Ctrl keys instead. The viewer cannot save images; use the library
functions below for that.

## Using it as a library

The rendering works without opening a window:

```python
from fractol.fractals import default_viewport, render
from fractol.palette import ColorScheme
from fractol.parsing import FractalType

kind = FractalType.JULIA
pixels = render(kind, default_viewport(kind), (-0.4, 0.6), ColorScheme.OCEAN, 200, 200)
```

`render` returns a `(height, width)` `numpy.uint32` array of packed RGBA
values (red in the top byte). Related functions:

- `fractol.fractals.escape_counts` – the iteration counts themselves.
- `fractol.fractals.escape_count` and `pixel_color` – a single pixel of the
  1080×1080 window.
- `fractol.palette.iteration_color`, `colorize` and `pack_rgba` – turn
  counts into colours.
- `fractol.view.ViewState` with `initial_state` – the zoom, pan, palette and
  Julia-constant state the window uses (`scroll`, `pan`, `set_scheme`,
  `adjust_julia`).
- `fractol.parsing.parse_args`, `parse_decimal`, `is_signed_decimal` and
  `help_text` – command-line helpers; `parse_args` raises `UsageError`.

## Tests

```
pip install .[test]
pytest
```