"""The interactive window: event handling and the main loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from .cli import UsageError, parse_args, usage_message
from .controls import key_pressed, key_released, pan, zoom_at
from .model import FractalState, Key
from .render import Frame, render

TITLE = "fract_ol"

_KEYMAP = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}


def _frame_bytes(frame: Frame) -> bytes:
    return b"".join((pixel & 0xFFFFFF).to_bytes(3, "big") for pixel in frame.pixels)


class Viewer:
    """Holds the fractal state and drives it from window events."""

    def __init__(self, state: FractalState) -> None:
        self.state = state
        self.frame = Frame(state.width, state.height)
        self.running = True
        self._screen: pygame.Surface | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""
        if event.type == pygame.QUIT:
            self.close()
        elif event.type == pygame.KEYDOWN:
            key = _KEYMAP.get(event.key)
            if key is not None and key_pressed(self.state, key):
                self.close()
        elif event.type == pygame.KEYUP:
            key = _KEYMAP.get(event.key)
            if key is not None:
                key_released(self.state, key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            zoom_at(self.state, event.button, x, y)

    def _draw(self) -> None:
        render(self.state, self.frame)
        if self._screen is not None:
            image = pygame.image.frombuffer(
                _frame_bytes(self.frame), (self.frame.width, self.frame.height), "RGB"
            )
            self._screen.blit(image, (0, 0))
            pygame.display.flip()

    def step(self) -> None:
        """Apply held arrow keys, then redraw."""
        pan(self.state)
        self._draw()

    def run(self) -> None:
        """Open the window and loop until it is closed."""
        pygame.init()
        self._screen = pygame.display.set_mode((self.state.width, self.state.height))
        pygame.display.set_caption(TITLE)
        try:
            self._draw()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if self.running:
                    self.step()
        finally:
            self.close()

    def close(self) -> None:
        """Stop the loop and release the window."""
        self.running = False
        if self._screen is not None:
            self._screen = None
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and show the requested fractal."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        state = parse_args(args)
    except UsageError:
        sys.stdout.write(usage_message())
        return 1
    Viewer(state).run()
    return 0