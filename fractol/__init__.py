"""Interactive viewer and renderer for the Mandelbrot, Julia and Burning Ship fractals."""

__version__ = "1.0.0"