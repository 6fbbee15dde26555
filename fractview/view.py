"""The state of an interactive fractal view and its response to input.

A :class:`Viewer` holds the visible region of the complex plane, the
Julia constant, the iteration limit and the colour weights, and changes
them in response to key presses and mouse events. The renderer reads
its state through :meth:`Viewer.kernel_parameters`.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, Sequence, Tuple

from fractview.search import strequ

WIDTH = 1920
HEIGHT = 1080
TEXT_COLOR = 0xFFFFFF
USAGE = "USAGE: fractview mandelbrot, julia, Burningship, Mandelbar, tanhjulia"

_COLOR_LIMIT = 16
_DEFAULT_ZOOM = 25.0
_DEFAULT_ITERATIONS = 50


class FractalKind(IntEnum):
    """The fractals that can be shown."""

    MANDELBROT = 1
    JULIA = 2
    BURNING_SHIP = 3
    MANDELBAR = 4
    TANH_JULIA = 5

    @property
    def command_name(self) -> str:
        """The name that selects this fractal on the command line."""
        return _COMMAND_NAMES[self]

    @property
    def follows_mouse(self) -> bool:
        """True for the fractals whose constant can track the mouse."""
        return self in (FractalKind.JULIA, FractalKind.TANH_JULIA)


_COMMAND_NAMES = {
    FractalKind.MANDELBROT: "mandelbrot",
    FractalKind.JULIA: "julia",
    FractalKind.BURNING_SHIP: "Burningship",
    FractalKind.MANDELBAR: "Mandelbar",
    FractalKind.TANH_JULIA: "tanhjulia",
}


class _Key(IntEnum):
    RESET = 15
    PLUS = 24
    MINUS = 27
    SPACE = 49
    ESCAPE = 53
    NUM_DOT = 67
    NUM_DIVIDE = 75
    NUM_1 = 83
    NUM_2 = 84
    NUM_3 = 85
    NUM_4 = 86
    NUM_5 = 87
    NUM_6 = 88
    PAGE_UP = 116
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class _Button(IntEnum):
    WHEEL_UP = 4
    WHEEL_DOWN = 5


class UsageError(ValueError):
    """Raised when the command line does not name exactly one known fractal."""


class QuitRequested(Exception):
    """Raised when the user asks to leave the viewer."""


def parse_fractal(argv: Sequence[str]) -> FractalKind:
    """The fractal named by the single command-line argument in ``argv``."""
    args = list(argv)
    if len(args) == 1:
        for kind in FractalKind:
            if strequ(args[0], kind.command_name):
                return kind
    raise UsageError(USAGE)


class Viewer:
    """The view of one fractal: region, constant, iterations and colours."""

    def __init__(self, kind: FractalKind) -> None:
        self.kind = FractalKind(kind)
        self.x = 0.0
        self.y = 0.0
        self.follow_mouse = False
        self.reset()

    def reset(self) -> None:
        """Restore the initial region, constant, iteration limit and colours."""
        self.minimum = complex(-4.0, -2.0)
        max_re = 4.0
        max_im = self.minimum.imag + (max_re - self.minimum.real) * HEIGHT / WIDTH
        self.maximum = complex(max_re, max_im)
        self.zoom_factor = _DEFAULT_ZOOM
        self.k = complex(-0.9, 0.3)
        self.max_iter = _DEFAULT_ITERATIONS
        self.red = _COLOR_LIMIT
        self.green = 8
        self.blue = 0

    def _cursor_point(self) -> complex:
        x_scale = WIDTH / (self.maximum.real - self.minimum.real)
        y_scale = HEIGHT / (self.maximum.imag - self.minimum.imag)
        return complex(
            self.x / x_scale + self.minimum.real,
            -((self.y / y_scale) - self.maximum.imag),
        )

    def _rescale(self, direction: int) -> None:
        centre = self._cursor_point()
        z = self.zoom_factor
        low, high = self.minimum, self.maximum
        self.minimum = complex(
            low.real + direction * ((centre.real - low.real) / z),
            low.imag + direction * ((centre.imag - low.imag) / z),
        )
        self.maximum = complex(
            high.real - direction * ((high.real - centre.real) / z),
            high.imag - direction * ((high.imag - centre.imag) / z),
        )

    def zoom_in(self) -> None:
        """Shrink the region towards the point under the mouse."""
        self._rescale(1)

    def zoom_out(self) -> None:
        """Grow the region away from the point under the mouse."""
        self._rescale(-1)

    def _adjust_colors(self, key: int) -> None:
        if key == _Key.NUM_1 and self.red != _COLOR_LIMIT:
            self.red += 1
        if key == _Key.NUM_2 and self.green != _COLOR_LIMIT:
            self.green += 1
        if key == _Key.NUM_3 and self.blue != _COLOR_LIMIT:
            self.blue += 1
        if key == _Key.NUM_4 and self.red != 0:
            self.red -= 1
        if key == _Key.NUM_5 and self.green != 0:
            self.green -= 1
        if key == _Key.NUM_6 and self.blue != 0:
            self.blue -= 1
        if key == _Key.RESET:
            self.reset()

    def _control(self, key: int) -> None:
        if key == _Key.PAGE_UP:
            self.kind = FractalKind(self.kind % len(FractalKind) + 1)
            self.reset()
        elif key == _Key.NUM_DOT:
            self.max_iter += 1
        elif key == _Key.NUM_DIVIDE:
            self.max_iter -= 1
        elif key == _Key.MINUS:
            self.zoom_out()
        elif key == _Key.PLUS:
            self.zoom_in()
        elif key == _Key.ESCAPE:
            raise QuitRequested()
        elif key == _Key.SPACE and self.kind.follows_mouse:
            self.follow_mouse = not self.follow_mouse

    def _move(self, key: int) -> None:
        if key not in (_Key.LEFT, _Key.RIGHT, _Key.UP, _Key.DOWN):
            return
        offset = ((self.maximum.real - self.minimum.real) / self.zoom_factor) / 2
        shift = {
            _Key.RIGHT: complex(-offset, 0.0),
            _Key.LEFT: complex(offset, 0.0),
            _Key.DOWN: complex(0.0, offset),
            _Key.UP: complex(0.0, -offset),
        }[_Key(key)]
        self.minimum = complex(self.minimum.real + shift.real, self.minimum.imag + shift.imag)
        self.maximum = complex(self.maximum.real + shift.real, self.maximum.imag + shift.imag)

    def handle_key(self, key: int) -> bool:
        """Apply a key press; returns True as the view is always redrawn.

        Raises :class:`QuitRequested` for the escape key.
        """
        self._adjust_colors(key)
        self._control(key)
        self._move(key)
        return True

    def handle_mouse_button(self, button: int, x: int, y: int) -> bool:
        """Apply a mouse button; returns whether the view must be redrawn.

        Events outside the window are ignored. The wheel zooms about the
        last known mouse position.
        """
        if x < 0 or y < 0:
            return False
        if button == _Button.WHEEL_DOWN:
            self.zoom_out()
        if button == _Button.WHEEL_UP:
            self.zoom_in()
        return True

    def handle_mouse_move(self, x: int, y: int) -> bool:
        """Record the mouse position; returns whether the view must be redrawn.

        The stored position is clamped to the window. While the constant
        follows the mouse, it is set from the unclamped position.
        """
        self.x = float(min(max(x, 0), WIDTH))
        self.y = float(min(max(y, 0), HEIGHT))
        if not self.follow_mouse:
            return False
        self.k = complex(4 * (x / WIDTH - 0.5), 4 * ((HEIGHT - y) / HEIGHT - 0.5))
        return True

    def kernel_parameters(self) -> Tuple[Tuple[float, ...], Tuple[int, ...]]:
        """The values the renderer needs, as a tuple of floats and a tuple of ints.

        Floats: minimum imaginary, minimum real, maximum imaginary,
        maximum real, constant real, constant imaginary. Ints: blue,
        green, red, iteration limit, fractal number, width, height.
        """
        doubles = (
            self.minimum.imag,
            self.minimum.real,
            self.maximum.imag,
            self.maximum.real,
            self.k.real,
            self.k.imag,
        )
        ints = (self.blue, self.green, self.red, self.max_iter, int(self.kind), WIDTH, HEIGHT)
        return doubles, ints

    def help_lines(self) -> List[Tuple[int, int, str]]:
        """The on-screen help as ``(x, y, text)`` entries, drawn in :data:`TEXT_COLOR`."""
        lines = [
            (30, 30, "press +, mouse wheel to zoom"),
            (30, 50, "press -, mouse wheel to dezoom"),
            (30, 70, "press R to reboot fractal"),
            (30, 90, "press arrows to move fractal"),
            (30, 110, "press PAGE UP to change fractal"),
            (30, 130, "press NUM 1,2,3,4,5,6 to change color"),
        ]
        if self.kind.follows_mouse:
            lines.append((30, 1000, "press SPACE to magic"))
        return lines