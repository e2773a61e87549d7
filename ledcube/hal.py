"""Pins and SPI bus for the cube controller board, kept in memory."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

SPI_FREQUENCY_HZ = 100_000
SPI_MODE = 1


class PinMode(Enum):
    """Electrical mode of a GPIO pin."""

    INPUT_PULLUP = "input_pullup"
    OUTPUT = "output"


class Edge(Enum):
    """Signal edge that fires a pin interrupt."""

    RISING = "rising"
    FALLING = "falling"


@dataclass(frozen=True)
class SpiConfig:
    """Settings of an SPI bus."""

    frequency: int
    sck: "Pin"
    sdo: "Pin"
    lsb_first: bool
    mode: int


class Pin(Protocol):
    """What the cube needs from a GPIO pin."""

    def configure(self, mode: PinMode) -> None: ...

    def set(self, value: bool) -> None: ...

    def high(self) -> None: ...

    def low(self) -> None: ...

    def set_interrupt(self, edge: Edge, callback: Callable[["Pin"], None]) -> None: ...


class Spi(Protocol):
    """What the cube needs from an SPI bus."""

    def configure(self, config: SpiConfig) -> None: ...

    def tx(self, data: bytes) -> None: ...


class MemoryPin:
    """A GPIO pin that records its mode, level and every level written to it."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.mode: Optional[PinMode] = None
        self.value = False
        self.history: list[bool] = []
        self.edge: Optional[Edge] = None
        self.callback: Optional[Callable[[MemoryPin], None]] = None

    def __repr__(self) -> str:
        return f"MemoryPin({self.name!r}, value={self.value})"

    def configure(self, mode: PinMode) -> None:
        """Set the pin mode; a pulled-up input idles high."""
        self.mode = mode
        if mode is PinMode.INPUT_PULLUP:
            self.value = True

    def set(self, value: bool) -> None:
        """Drive the pin to ``value``."""
        self.value = bool(value)
        self.history.append(self.value)

    def high(self) -> None:
        """Drive the pin high."""
        self.set(True)

    def low(self) -> None:
        """Drive the pin low."""
        self.set(False)

    def set_interrupt(self, edge: Edge, callback: Callable[["MemoryPin"], None]) -> None:
        """Register ``callback`` to run when ``edge`` is seen on this pin."""
        self.edge = edge
        self.callback = callback

    def trigger(self) -> None:
        """Simulate the registered edge, running the interrupt callback if any."""
        if self.callback is not None:
            self.callback(self)


class MemorySpi:
    """An SPI bus that records its configuration and every transfer."""

    def __init__(self) -> None:
        self.config: Optional[SpiConfig] = None
        self.sent: list[bytes] = []

    def configure(self, config: SpiConfig) -> None:
        """Apply bus settings."""
        self.config = config

    def tx(self, data: bytes) -> None:
        """Send ``data`` out of the bus."""
        self.sent.append(bytes(data))


def configure_input(pin: Pin) -> Pin:
    """Set ``pin`` up as an input with pull-up and return it."""
    pin.configure(PinMode.INPUT_PULLUP)
    return pin


def configure_output(pin: Pin) -> Pin:
    """Set ``pin`` up as an output and return it."""
    pin.configure(PinMode.OUTPUT)
    return pin


def configure_spi(spi: Spi, sck: Pin, sdo: Pin) -> Spi:
    """Configure ``spi`` for the LED driver: 100 kHz, mode 1, LSB first."""
    spi.configure(
        SpiConfig(
            frequency=SPI_FREQUENCY_HZ,
            sck=sck,
            sdo=sdo,
            lsb_first=True,
            mode=SPI_MODE,
        )
    )
    return spi