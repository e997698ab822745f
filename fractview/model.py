"""Core data types shared by the renderer, the controls and the viewer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

WIDTH = 512
HEIGHT = 288
MAX_ITERATIONS = 10000
HALF_SPAN = 1.5


class FractalType(Enum):
    """The fractal families the viewer can draw."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    MULTIBROT = "multibrot"


class ColorMode(Enum):
    """Whether the palette stays fixed or shifts from frame to frame."""

    STATIC = "static"
    ANIMATED = "animated"


class Key(IntEnum):
    """X11 key symbols understood by the controls."""

    ESC = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54


@dataclass
class Viewport:
    """The rectangle of the complex plane shown in the window."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def width(self) -> float:
        """Extent along the real axis."""
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        """Extent along the imaginary axis."""
        return self.y_max - self.y_min


def default_viewport(width: int, height: int) -> Viewport:
    """Return the starting view: [-1.5, 1.5] vertically, widened to the aspect ratio."""
    ratio = width / height
    return Viewport(
        x_min=-HALF_SPAN * ratio,
        x_max=HALF_SPAN * ratio,
        y_min=-HALF_SPAN,
        y_max=HALF_SPAN,
    )


@dataclass
class KeyState:
    """Which arrow keys are currently held down."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


@dataclass
class FractalState:
    """Everything needed to draw one frame of a fractal."""

    kind: FractalType = FractalType.MANDELBROT
    color_mode: ColorMode = ColorMode.STATIC
    julia_c: complex = 0j
    max_iter: int = MAX_ITERATIONS
    width: int = WIDTH
    height: int = HEIGHT
    viewport: Viewport | None = None
    keys: KeyState = field(default_factory=KeyState)
    frame: int = 0
    max_ite: int = 0

    def __post_init__(self) -> None:
        if self.viewport is None:
            self.viewport = default_viewport(self.width, self.height)