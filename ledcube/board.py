"""The controller board: layer driving, status LEDs and buttons."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Protocol

from .components import Demultiplexer, LedDriver
from .errors import OutOfBoundsError
from .hal import Edge, MemoryPin, MemorySpi, Pin, Spi, configure_input, configure_output
from .state import StateTracker

UART_BAUD_RATE = 38400


class Slicer(Protocol):
    """Anything that yields the bytes of each cube layer."""

    def iterate_slices(self) -> Iterable[tuple[int, bytes]]: ...


class Board(Protocol):
    """Operations the runner needs from a controller board."""

    def blink_startup(self) -> None: ...

    def blink_debug(self) -> None: ...

    def blink_error(self) -> None: ...

    def light_leds(self, slicer: Slicer) -> None: ...

    def disable_leds(self) -> None: ...

    def enable_leds(self) -> None: ...


@dataclass
class BoardPins:
    """Pins and bus wired on the controller board."""

    demux_a0: Pin
    demux_a1: Pin
    demux_a2: Pin
    demux_a3: Pin
    demux_enable: Pin
    demux_enable2: Pin
    spi: Spi
    spi_sck: Pin
    spi_sdo: Pin
    latch: Pin
    blank: Pin
    led_green: Pin
    led_red: Pin
    button_previous: Pin
    button_next: Pin
    button_speed_more: Pin
    button_speed_less: Pin
    button_run_pause: Pin
    button_cycle: Pin
    button_on_off: Pin

    @classmethod
    def create(cls) -> "BoardPins":
        """In-memory pins named after the board's wiring."""
        return cls(
            demux_a0=MemoryPin("PB0"),
            demux_a1=MemoryPin("PB1"),
            demux_a2=MemoryPin("PB10"),
            demux_a3=MemoryPin("PB11"),
            demux_enable=MemoryPin("PA8"),
            demux_enable2=MemoryPin("PC7"),
            spi=MemorySpi(),
            spi_sck=MemoryPin("PA5"),
            spi_sdo=MemoryPin("PA7"),
            latch=MemoryPin("PC4"),
            blank=MemoryPin("PC5"),
            led_green=MemoryPin("PB9"),
            led_red=MemoryPin("PB8"),
            button_previous=MemoryPin("PC0"),
            button_next=MemoryPin("PC1"),
            button_speed_more=MemoryPin("PC2"),
            button_speed_less=MemoryPin("PB3"),
            button_run_pause=MemoryPin("PA14"),
            button_cycle=MemoryPin("PA13"),
            button_on_off=MemoryPin("PA11"),
        )


class YellowBoard:
    """Controller board with a layer demultiplexer, LED driver, two status LEDs and seven buttons.

    The status LEDs are driven through their cathodes, so low lights them.
    """

    def __init__(
        self,
        tracker: StateTracker,
        pins: Optional[BoardPins] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        pins = pins or BoardPins.create()
        self.pins = pins
        self._sleep = sleep or time.sleep
        self.uart_baud_rate = UART_BAUD_RATE

        self.demultiplexer = Demultiplexer(
            pins.demux_a0, pins.demux_a1, pins.demux_a2,
            pins.demux_a3, pins.demux_enable, pins.demux_enable2,
        )
        self.led_driver = LedDriver(pins.spi, pins.spi_sck, pins.spi_sdo, pins.latch, pins.blank)
        self.led_green = configure_output(pins.led_green)
        self.led_red = configure_output(pins.led_red)

        bindings = [
            (pins.button_previous, tracker.prev_light_show),
            (pins.button_next, tracker.next_light_show),
            (pins.button_speed_more, tracker.increase_speed),
            (pins.button_speed_less, tracker.decrease_speed),
            (pins.button_run_pause, tracker.switch_run_pause),
            (pins.button_cycle, tracker.cycle_mode),
            (pins.button_on_off, tracker.switch_run_pause),
        ]
        for pin, action in bindings:
            configure_input(pin).set_interrupt(Edge.RISING, lambda _pin, action=action: action())

    def light_leds(self, slicer: Slicer) -> None:
        """Shift out and power each layer of one frame in turn."""
        for index, data in slicer.iterate_slices():
            try:
                self.led_driver.light_layer(data)
            except OSError:
                self.blink_error()
            try:
                self.demultiplexer.enable_layer(index)
            except OutOfBoundsError:
                self.blink_error()

    def blink_startup(self) -> None:
        """Flash both status LEDs three times."""
        for _ in range(3):
            self.led_red.low()
            self.led_green.low()
            self._sleep(0.2)
            self.led_red.high()
            self.led_green.high()
            self._sleep(0.1)

    def blink_debug(self) -> None:
        """Flash the green LED once."""
        self.led_green.low()
        self._sleep(0.2)
        self.led_green.high()
        self._sleep(0.1)

    def blink_error(self) -> None:
        """Flash the red LED five times."""
        for _ in range(5):
            self.led_red.low()
            self._sleep(0.2)
            self.led_red.high()
            self._sleep(0.2)

    def disable_leds(self) -> None:
        """Switch every layer off."""
        self.demultiplexer.disable()

    def enable_leds(self) -> None:
        """Switch the layer decoder on."""
        self.demultiplexer.enable()