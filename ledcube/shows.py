"""Built-in light shows."""

from __future__ import annotations

from typing import Callable, List, Sequence

from .layout import Color, LedLayout

Frame = Callable[[LedLayout], None]
LightShow = List[Frame]


def _layer_frame(colors: Sequence[Color], replace: bool) -> Frame:
    def frame(layout: LedLayout) -> None:
        paint = layout.change_layer if replace else layout.set_layer
        for z, color in enumerate(colors):
            paint(z, color)

    return frame


def demo() -> LightShow:
    """Two frames of colour bands from red at the bottom to white on top."""
    first = (Color.RED, Color.RED, Color.YELLOW, Color.GREEN,
             Color.CYAN, Color.BLUE, Color.VIOLET, Color.WHITE)
    second = (Color.RED, Color.YELLOW, Color.YELLOW, Color.GREEN,
              Color.CYAN, Color.BLUE, Color.VIOLET, Color.WHITE)
    return [_layer_frame(first, replace=False), _layer_frame(second, replace=False)]


def demo2() -> LightShow:
    """Whole cube alternating between violet and red."""
    return [
        _layer_frame([Color.VIOLET] * 8, replace=True),
        _layer_frame([Color.RED] * 8, replace=True),
    ]


def demo_program() -> LightShow:
    """A single frame of mixed colour layers built row by row."""

    def frame(layout: LedLayout) -> None:
        for y in range(8):
            layout.set_row_individual(y, 0, Color.RED, 0b11111111)
            layout.set_row_individual(y, 1, Color.RED, 0b11111111)
            layout.set_row_individual(y, 2, Color.RED, 0b11111111)
            layout.set_row_individual(y, 2, Color.GREEN, 0b11111111)
            layout.set_row_individual(y, 3, Color.GREEN, 0b11111111)
            layout.set_row_individual(y, 4, Color.GREEN, 0b11111111)
            layout.set_row_individual(y, 4, Color.BLUE, 0b11111111)
            layout.set_row_individual(y, 5, Color.BLUE, 0b11111111)
            layout.set_row_individual(y, 6, Color.BLUE, 0b11111111)
            layout.set_row_individual(y, 6, Color.RED, 0b11111111)
            layout.set_row_individual(y, 7, Color.GREEN, 0b11111000)
            layout.set_row_individual(y, 7, Color.BLUE, 0b11100111)
            layout.set_row_individual(y, 7, Color.RED, 0b00011111)

    return [frame]


def singled_leds() -> LightShow:
    """Red cube with a blue top layer and one green row."""

    def frame(layout: LedLayout) -> None:
        layout.set_block(Color.RED)
        layout.set_layer(7, Color.BLUE)
        layout.set_row(0, 3, Color.GREEN)

    return [frame]


def led_show_list() -> list[LightShow]:
    """All built-in light shows in playback order."""
    return [demo(), demo2(), demo_program(), singled_leds()]