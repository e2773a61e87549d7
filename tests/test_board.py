import dataclasses

import pytest

from ledcube.board import UART_BAUD_RATE, BoardPins, YellowBoard
from ledcube.hal import Edge, MemorySpi
from ledcube.layout import Color, LedLayout
from ledcube.state import Mode, StateTracker


class FailingSpi(MemorySpi):
    def tx(self, data):
        raise OSError("bus fault")


class BadSlicer:
    def iterate_slices(self):
        yield 9, b"\x00"


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def tracker():
    return StateTracker([["a"], ["b"], ["c"]])


@pytest.fixture
def board(tracker, sleeps):
    return YellowBoard(tracker, BoardPins.create(), sleeps.append)


def test_light_leds_sends_every_layer(board):
    layout = LedLayout()
    layout.set_layer(2, Color.RED)
    board.light_leds(layout)
    assert board.pins.spi.sent == [data for _, data in layout.iterate_slices()]
    assert board.pins.demux_enable.value is False


def test_light_leds_blinks_error_on_spi_failure(tracker, sleeps):
    pins = dataclasses.replace(BoardPins.create(), spi=FailingSpi())
    board = YellowBoard(tracker, pins, sleeps.append)
    layout = LedLayout()
    board.light_leds(layout)
    assert sleeps == [0.2] * 10 * 8


def test_light_leds_blinks_error_on_bad_layer(board, sleeps):
    board.light_leds(BadSlicer())
    assert sleeps == [0.2] * 10
    assert board.pins.led_red.value is True


def test_blink_startup(board, sleeps):
    board.blink_startup()
    assert sleeps == [0.2, 0.1] * 3
    assert board.pins.led_red.history == [False, True] * 3
    assert board.pins.led_green.history == [False, True] * 3


def test_blink_debug(board, sleeps):
    board.blink_debug()
    assert sleeps == [0.2, 0.1]
    assert board.pins.led_green.history == [False, True]
    assert board.pins.led_red.history == []


def test_blink_error(board, sleeps):
    board.blink_error()
    assert board.pins.led_red.history == [False, True] * 5


def test_disable_and_enable_leds(board):
    board.enable_leds()
    assert board.pins.demux_enable.value is False
    board.disable_leds()
    assert board.pins.demux_enable.value is True


def test_buttons_fire_on_rising_edge(board):
    assert board.pins.button_next.edge is Edge.RISING
    assert board.uart_baud_rate == UART_BAUD_RATE == 38400


def test_next_and_previous_buttons(board, tracker):
    board.pins.button_next.trigger()
    assert tracker.light_show_index == 1
    board.pins.button_previous.trigger()
    board.pins.button_previous.trigger()
    assert tracker.light_show_index == 2


def test_speed_buttons(board, tracker):
    board.pins.button_speed_less.trigger()
    board.pins.button_speed_less.trigger()
    board.pins.button_speed_more.trigger()
    assert tracker.frame_repetition_count == 3


def test_pause_buttons(board, tracker):
    board.pins.button_run_pause.trigger()
    assert tracker.paused is True
    board.pins.button_on_off.trigger()
    assert tracker.paused is False


def test_cycle_button(board, tracker):
    board.pins.button_cycle.trigger()
    assert tracker.current_mode is Mode.SERIAL