"""Run-time state of the cube: mode, selected light show, speed and pause."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Sequence

_U32_MAX = 2**32 - 1


class Mode(IntEnum):
    """Operating mode of the cube."""

    ONBOARD = 1
    SERIAL = 2
    DEBUG = 3
    STANDBY = 4


class StateTracker:
    """Tracks which light show plays, how fast, and whether playback is paused."""

    def __init__(self, light_shows: Sequence[list]) -> None:
        self.current_mode = Mode.ONBOARD
        self.previous_mode = Mode.STANDBY
        self.color_depth = 1
        self.frame_repetition_count = 1
        self.light_show_index = 0
        self.light_shows = list(light_shows)
        self.paused = False

    def current_light_show(self) -> list:
        """Frames of the selected light show, or an empty list if there are none."""
        if not self.light_shows:
            return []
        return self.light_shows[self.light_show_index]

    def execute_frame(self, frame_callback: Callable[[], None]) -> None:
        """Show a frame: repeatedly while paused, then once per repetition."""
        while self.paused:
            frame_callback()
        for _ in range(self.frame_repetition_count):
            frame_callback()

    def cycle_mode(self) -> None:
        """Advance onboard -> serial -> debug -> onboard; standby is left alone."""
        following = {
            Mode.ONBOARD: Mode.SERIAL,
            Mode.SERIAL: Mode.DEBUG,
            Mode.DEBUG: Mode.ONBOARD,
        }
        if self.current_mode in following:
            self.previous_mode = self.current_mode
            self.current_mode = following[self.current_mode]

    def next_light_show(self) -> None:
        """Select the next light show, wrapping to the first."""
        index = (self.light_show_index + 1) & _U32_MAX
        if index >= len(self.light_shows) or index == _U32_MAX:
            index = 0
        self.light_show_index = index

    def prev_light_show(self) -> None:
        """Select the previous light show, wrapping to the last."""
        index = self.light_show_index
        if index == 0:
            index = len(self.light_shows)
        self.light_show_index = (index - 1) & _U32_MAX

    def increase_speed(self) -> None:
        """Show each frame fewer times, down to once."""
        if self.frame_repetition_count > 2:
            self.frame_repetition_count -= 2
        else:
            self.frame_repetition_count = 1

    def decrease_speed(self) -> None:
        """Show each frame more times, up to the 32-bit limit."""
        if self.frame_repetition_count < _U32_MAX - 2:
            self.frame_repetition_count += 2
        else:
            self.frame_repetition_count = _U32_MAX

    def switch_run_pause(self) -> None:
        """Toggle pause."""
        self.paused = not self.paused