"""Layer demultiplexer and LED shift-register driver of the cube."""

from __future__ import annotations

from .errors import check_bounds
from .hal import Pin, Spi, configure_output, configure_spi

LAYER_BYTES = 24


class Demultiplexer:
    """Line decoder that powers one cube layer at a time (anode control).

    The enable pin is active low: high switches every layer off.
    """

    def __init__(self, a0: Pin, a1: Pin, a2: Pin, a3: Pin, enable: Pin, enable2: Pin) -> None:
        self.a0 = configure_output(a0)
        self.a1 = configure_output(a1)
        self.a2 = configure_output(a2)
        self.enable_pin = configure_output(enable)

        # An 8-layer cube never uses the fourth address line.
        configure_output(a3).low()
        configure_output(enable2).high()

        self.enable_pin.high()

    def enable_layer(self, index: int) -> None:
        """Power layer ``index`` (0-7)."""
        check_bounds(index)
        self.enable_pin.low()
        self.a0.set(index & 1 == 1)
        self.a1.set(index >> 1 & 1 == 1)
        self.a2.set(index >> 2 & 1 == 1)

    def disable(self) -> None:
        """Switch every layer off."""
        self.enable_pin.high()

    def enable(self) -> None:
        """Switch the decoder on without changing the selected layer."""
        self.enable_pin.low()


class LedDriver:
    """Chain of shift registers that sinks the LED colours of a layer (cathode control)."""

    def __init__(self, spi: Spi, sck: Pin, sdo: Pin, latch: Pin, blank: Pin) -> None:
        self.spi = configure_spi(spi, sck, sdo)
        self.latch = configure_output(latch)
        self.blank = configure_output(blank)
        self.latch.high()
        self.blank.low()

    def clear_layer(self) -> None:
        """Shift out an all-dark layer."""
        self.light_layer(bytes(LAYER_BYTES))

    def light_layer(self, data: bytes) -> None:
        """Shift out ``data`` and latch it onto the outputs."""
        self.latch.low()
        try:
            self.spi.tx(data)
        finally:
            self.latch.high()