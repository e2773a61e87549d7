"""Main loop of the cube and its configuration."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

from .board import Board, YellowBoard
from .layout import LedLayout
from .shows import LightShow, led_show_list
from .state import Mode, StateTracker


class Size(IntEnum):
    """Edge length of a cube."""

    SIZE_8 = 0
    SIZE_16 = 1
    SIZE_32 = 2


class LedType(IntEnum):
    """Kind of LEDs fitted to a cube."""

    MONOCHROME = 0
    RGB = 1


@dataclass
class RunnerConfig:
    """Shape of the cube and the light shows it plays."""

    base_size: Size = Size.SIZE_8
    height: Size = Size.SIZE_8
    led_type: LedType = LedType.RGB
    light_shows: list[LightShow] = field(default_factory=list)


def default_config() -> RunnerConfig:
    """An 8x8x8 RGB cube with the built-in light shows."""
    return RunnerConfig(Size.SIZE_8, Size.SIZE_8, LedType.RGB, led_show_list())


class CubeRunner:
    """Drives the board according to the tracked mode."""

    def __init__(self, board: Board, layout: LedLayout, tracker: StateTracker) -> None:
        self.board = board
        self.layout = layout
        self.tracker = tracker

    def run_once(self) -> None:
        """Run one pass of the loop for the current mode."""
        mode = self.tracker.current_mode
        if mode is Mode.ONBOARD:
            self._run_onboard()
        elif mode is Mode.DEBUG:
            self.board.blink_debug()
            self.board.enable_leds()
        elif mode is Mode.SERIAL:
            self.board.disable_leds()

    def start(self, cycles: Optional[int] = None) -> None:
        """Blink the startup signal, then loop ``cycles`` times, or forever if None."""
        self.board.blink_startup()
        if cycles is None:
            while True:
                self.run_once()
        for _ in range(cycles):
            self.run_once()

    def _run_onboard(self) -> None:
        for frame in self.tracker.current_light_show():
            self.layout.reset_block()
            frame(self.layout)
            self.tracker.execute_frame(lambda: self.board.light_leds(self.layout))


def create_runner(config: RunnerConfig) -> CubeRunner:
    """Build a runner for ``config``; only 8x8x8 RGB cubes are supported."""
    if (
        config.base_size != Size.SIZE_8
        or config.height != Size.SIZE_8
        or config.led_type != LedType.RGB
    ):
        raise ValueError("only 8x8x8 RGB cubes are supported")
    tracker = StateTracker(config.light_shows)
    return CubeRunner(YellowBoard(tracker), LedLayout(), tracker)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the cube with the default configuration."""
    parser = argparse.ArgumentParser(prog="ledcube", description="Run the 8x8x8 RGB LED cube.")
    parser.add_argument("--cycles", type=int, default=None,
                        help="number of loop passes to run (default: run forever)")
    args = parser.parse_args(argv)
    try:
        runner = create_runner(default_config())
    except ValueError as exc:
        print(f"ledcube: {exc}", file=sys.stderr)
        return 1
    runner.start(args.cycles)
    return 0


if __name__ == "__main__":
    sys.exit(main())