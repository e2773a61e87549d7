"""In-memory colour state of an 8x8x8 RGB LED cube."""

from __future__ import annotations

from enum import IntFlag
from typing import Iterator

from .errors import CUBE_SIZE, check_bounds

_CHANNELS = 3
_LAYER_BYTES = CUBE_SIZE * _CHANNELS
_FULL = 0xFF


class Color(IntFlag):
    """LED colour as a combination of the green, blue and red channels."""

    NO_COLOR = 0
    GREEN = 0b001
    BLUE = 0b010
    RED = 0b100
    CYAN = GREEN | BLUE
    YELLOW = GREEN | RED
    VIOLET = BLUE | RED
    WHITE = GREEN | BLUE | RED


def _channel_offsets(row: int, color: int) -> list[int]:
    """Byte indexes within a layer that hold ``row`` for each channel in ``color``."""
    return [
        channel * CUBE_SIZE + row
        for channel in range(_CHANNELS)
        if int(color) >> channel & 1
    ]


def _check_byte(values: int) -> int:
    if not 0 <= values <= _FULL:
        raise ValueError(f"row values must fit in one byte, got {values}")
    return values


class LedLayout:
    """Colour state of every LED in the cube.

    Each of the 8 layers holds 24 bytes: bytes 0-7 drive green, 8-15 blue and
    16-23 red. Within a colour block the first byte is the back row and the last
    the front; bit ``x`` of a byte drives the LED at column ``x`` counted from
    the right.
    """

    def __init__(self) -> None:
        self._layers = [bytearray(_LAYER_BYTES) for _ in range(CUBE_SIZE)]

    def iterate_slices(self) -> Iterator[tuple[int, bytes]]:
        """Yield ``(z, data)`` for each layer, bottom to top."""
        for z, layer in enumerate(self._layers):
            yield z, bytes(layer)

    # single LEDs

    def change_single(self, x: int, y: int, z: int, color: Color) -> None:
        """Replace the colour of one LED."""
        self._validate(x, y, z)
        self._clear(y, z, 1 << x)
        self._set(y, z, color, 1 << x)

    def set_single(self, x: int, y: int, z: int, color: Color) -> None:
        """Add ``color`` to one LED; ``NO_COLOR`` switches it off."""
        self._validate(x, y, z)
        if color == Color.NO_COLOR:
            self._clear(y, z, 1 << x)
        else:
            self._set(y, z, color, 1 << x)

    def reset_single(self, x: int, y: int, z: int) -> None:
        """Switch one LED off."""
        self._validate(x, y, z)
        self._clear(y, z, 1 << x)

    # rows with a per-LED mask

    def change_row_individual(self, y: int, z: int, color: Color, values: int) -> None:
        """Replace the colour of the LEDs of a row selected by ``values``."""
        self._validate(y, z)
        _check_byte(values)
        self._clear(y, z, values)
        self._set(y, z, color, values)

    def set_row_individual(self, y: int, z: int, color: Color, values: int) -> None:
        """Add ``color`` to the LEDs of a row selected by ``values``."""
        self._validate(y, z)
        _check_byte(values)
        if color == Color.NO_COLOR:
            self._clear(y, z, values)
        else:
            self._set(y, z, color, values)

    def reset_row_individual(self, y: int, z: int, values: int) -> None:
        """Switch off the LEDs of a row selected by ``values``."""
        self._validate(y, z)
        _check_byte(values)
        self._clear(y, z, values)

    # whole rows

    def change_row(self, y: int, z: int, color: Color) -> None:
        """Replace the colour of a whole row."""
        self.change_row_individual(y, z, color, _FULL)

    def set_row(self, y: int, z: int, color: Color) -> None:
        """Add ``color`` to a whole row."""
        self.set_row_individual(y, z, color, _FULL)

    def reset_row(self, y: int, z: int) -> None:
        """Switch a whole row off."""
        self.reset_row_individual(y, z, _FULL)

    # layers

    def change_layer(self, z: int, color: Color) -> None:
        """Replace the colour of a whole layer."""
        self._validate(z)
        self._clear_layer(z)
        self._fill_layer(z, color)

    def set_layer(self, z: int, color: Color) -> None:
        """Add ``color`` to a whole layer; ``NO_COLOR`` switches it off."""
        self._validate(z)
        if color == Color.NO_COLOR:
            self._clear_layer(z)
        else:
            self._fill_layer(z, color)

    def reset_layer(self, z: int) -> None:
        """Switch a whole layer off."""
        self._validate(z)
        self._clear_layer(z)

    # the whole cube

    def change_block(self, color: Color) -> None:
        """Replace the colour of every LED."""
        self.reset_block()
        for z in range(CUBE_SIZE):
            self._fill_layer(z, color)

    def set_block(self, color: Color) -> None:
        """Add ``color`` to every LED; ``NO_COLOR`` switches all off."""
        if color == Color.NO_COLOR:
            self.reset_block()
            return
        for z in range(CUBE_SIZE):
            self._fill_layer(z, color)

    def reset_block(self) -> None:
        """Switch every LED off."""
        for z in range(CUBE_SIZE):
            self._clear_layer(z)

    # helpers

    @staticmethod
    def _validate(*indexes: int) -> None:
        for index in indexes:
            check_bounds(index)

    def _set(self, y: int, z: int, color: Color, mask: int) -> None:
        layer = self._layers[z]
        for index in _channel_offsets(y, color):
            layer[index] |= mask

    def _clear(self, y: int, z: int, mask: int) -> None:
        layer = self._layers[z]
        keep = ~mask & _FULL
        for index in _channel_offsets(y, Color.WHITE):
            layer[index] &= keep

    def _fill_layer(self, z: int, color: Color) -> None:
        layer = self._layers[z]
        for offset in _channel_offsets(0, color):
            layer[offset:offset + CUBE_SIZE] = bytes([_FULL]) * CUBE_SIZE

    def _clear_layer(self, z: int) -> None:
        self._layers[z][:] = bytes(_LAYER_BYTES)