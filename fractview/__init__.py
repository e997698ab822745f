"""Interactive Mandelbrot, Julia and multibrot fractal viewer."""

__version__ = "0.1.0"