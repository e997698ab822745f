# fractview

An interactive fractal viewer. It draws the Mandelbrot set, a Julia set of
your choice or a degree-4 multibrot set in a 512×288 window, colouring each
point by a smoothed escape count mapped onto a hue, with an optional colour
shift that changes on every frame. Points that never escape are black.

## Installation

```
pip install .
```

The window is drawn with pygame.

## Usage

```
fractview mandelbrot [animate]
fractview julia <real> <imaginary> [animate]
fractview multibrot [animate]
```

Examples:

```
fractview mandelbrot
fractview julia 0.001643721971153 0.822467633298876
fractview multibrot animate
```

The Julia parameters must be plain decimal numbers: an optional sign, digits
and at most one dot, not starting with the dot (for example `-0.8`, `0.156`).
Only the exact word `animate` as the last argument turns on the animated
colours; any other word in that place leaves the colours fixed.

If the fractal name is unknown, the Julia parameters are not numbers, or there
are too many arguments, an error and a short summary of the choices are
printed to standard output and the command exits with status 1.

## Controls

| Input              | Action                                          |
|--------------------|-------------------------------------------------|
| Arrow keys (hold)  | Pan the view by 0.5 % of its width per frame    |
| Scroll wheel up    | Zoom in (×0.9) around the mouse pointer         |
| Scroll wheel down  | Zoom out (×1.1) around the mouse pointer        |
| Escape             | Quit                                            |
| Closing the window | Quit                                            |

Only one arrow direction moves the view at a time; when several are held,
up wins over down, down over right, and right over left.

## Library use

The drawing pieces work without a window:

- `fractview.model` holds the state: `FractalState`, `Viewport`
  (with `width` and `height` properties), `KeyState`, `FractalType`,
  `ColorMode`, `Key` and `default_viewport(width, height)`.
- `fractview.sets` computes escape results: `mandelbrot(c, max_iter)`,
  `multibrot(c, max_iter)`, `julia(z, c, max_iter)`, each returning an
  `Escape(iterations, z)`, plus `point_for_pixel` and `escape_for_pixel`.
- `fractview.colors` turns values into packed `0xRRGGBB` colours:
  `hsv_to_rgb(h, s, v)` (only the hue matters) and `hsv_animate`.
- `fractview.render` provides `Frame` (`put`, `get`, `rows`),
  `pixel_color(state, escape)` and `render(state, frame)`, which fills the
  frame and advances the state's frame counter.
- `fractview.controls` applies input to a state: `key_pressed`,
  `key_released`, `pan` and `zoom_at`.
- `fractview.cli` parses arguments: `parse_args(argv)` returns a
  `FractalState` or raises `UsageError`; `is_number` and `usage_message` are
  also available.
- `fractview.app` has the `Viewer` class and the `main` entry point.

```python
from fractview.cli import parse_args
from fractview.render import Frame, render

state = parse_args(["julia", "-0.8", "0.156"])
frame = render(state, Frame(state.width, state.height))
top_row = next(frame.rows())
```

The `fractview.libft` sub-package holds small standalone helpers:
byte-buffer functions (`memory`), ASCII classification (`chars`), C-string
search and comparison (`search`), bounded copying, slicing and trimming
(`strings`), 32-bit integer text conversion (`conversions`), stream output
(`output`), and a minimal `printf` / `format_string` supporting
`%c %s %p %d %i %u %x %X %%` (`printf`).

## What it does not do

The viewer only shows fractals on screen. It cannot save a frame to an image
file, change the window size or iteration limit from the command line, or
run full-screen.

## Running the tests

```
pip install .[test]
pytest
```