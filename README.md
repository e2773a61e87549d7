# ledcube

Controller logic for an 8x8x8 RGB LED cube that is driven by a layer
demultiplexer and a chain of shift-register LED drivers. The cube's state,
its light shows, the playback state and the board wiring are all modelled
in plain Python.

## Contents

- `ledcube.layout`
  - `Color`: the eight colours an RGB LED can show (`NO_COLOR`, `GREEN`,
    `BLUE`, `RED`, `CYAN`, `YELLOW`, `VIOLET`, `WHITE`). It is a flag enum,
    so colours combine with `|`.
  - `LedLayout`: the state of every LED. There are eight layers of 24 bytes.
    Bytes 0-7 hold green, 8-15 hold blue and 16-23 hold red. Bit `x` of a
    byte drives column `x`, counted from the right. The operations work on a
    single LED, a row, a row with a bit mask, a layer or the whole block. Each
    comes in three forms:
    - `change_*` replaces the colour.
    - `set_*` adds colour channels, and `NO_COLOR` switches the LEDs off.
    - `reset_*` switches the LEDs off.

    `iterate_slices()` yields `(z, data)` for each layer, from bottom to top.
- `ledcube.errors`: `OutOfBoundsError`, a subclass of `IndexError`, and
  `check_bounds(index)`.
- `ledcube.state`
  - `Mode`: `ONBOARD`, `SERIAL`, `DEBUG` and `STANDBY`.
  - `StateTracker`: tracks the current mode, the selected light show, the
    frame repetition count (the speed) and pause. It has these methods:
    `cycle_mode`, `next_light_show`, `prev_light_show`, `increase_speed`,
    `decrease_speed`, `switch_run_pause`, `current_light_show` and
    `execute_frame`.
- `ledcube.shows`: the built-in light shows `demo()`, `demo2()`,
  `demo_program()` and `singled_leds()`. `led_show_list()` returns all of them
  in playback order. A light show is a list of frames. A frame is a callable
  that draws on an `LedLayout`.
- `ledcube.hal`
  - `MemoryPin` and `MemorySpi`: a pin and an SPI bus kept in memory. They
    record their mode, their levels and every transfer.
    `MemoryPin.trigger()` runs a pin's interrupt callback.
  - `configure_input`, `configure_output` and `configure_spi`.
- `ledcube.components`
  - `Demultiplexer`: selects the powered layer. It has `enable_layer`,
    `disable` and `enable`.
  - `LedDriver`: shifts a layer's bytes out over SPI and latches them. It has
    `light_layer` and `clear_layer`.
- `ledcube.board`
  - `YellowBoard`: connects the demultiplexer, the LED driver, the green and
    red status LEDs and seven buttons. Each button's rising-edge interrupt
    calls a `StateTracker` method.
  - `BoardPins`: holds the board's pins. `BoardPins.create()` builds in-memory
    pins that are named after the board's wiring.
- `ledcube.runner`
  - `RunnerConfig` and `default_config()`.
  - `create_runner(config)`: only 8x8x8 RGB cubes are supported. Any other
    configuration raises `ValueError`.
  - `CubeRunner`: has `run_once()` and `start(cycles)`.
  - `main()`: the command-line entry point.

## Installation

```
pip install .
```

## Usage

Draw a frame:

```python
from ledcube.layout import Color, LedLayout

layout = LedLayout()
layout.set_block(Color.RED)
layout.set_layer(7, Color.BLUE)
layout.set_row(0, 3, Color.GREEN)

for z, data in layout.iterate_slices():
    print(z, data.hex())
```

Coordinates outside `0..7` raise `ledcube.errors.OutOfBoundsError`. Row masks
outside `0..255` raise `ValueError`.

Run a few passes of the main loop on the in-memory board:

```python
from ledcube.runner import create_runner, default_config

runner = create_runner(default_config())
runner.start(cycles=2)
```

`start` first flashes the startup pattern on the status LEDs, which takes
about a second. It then runs one loop pass per cycle. With `cycles=None` it
loops forever. In onboard mode a pass plays every frame of the selected light
show. While the tracker is paused, `execute_frame` repeats the current frame
until pause is switched off, for example from a button callback.

Simulate a button press:

```python
from ledcube.board import BoardPins, YellowBoard
from ledcube.state import StateTracker
from ledcube.shows import led_show_list

tracker = StateTracker(led_show_list())
pins = BoardPins.create()
board = YellowBoard(tracker, pins, sleep=lambda seconds: None)
pins.button_next.trigger()
print(tracker.light_show_index)  # 1
```

From the command line:

```
ledcube              # run forever
ledcube --cycles 3   # run three loop passes, then exit
```

## What it does not do

- The package does not talk to real hardware. Pins and the SPI bus exist only
  as the in-memory `MemoryPin` and `MemorySpi`.
- Serial mode receives nothing. In that mode the loop only switches the layers
  off.
- Debug mode only flashes the green LED and switches the decoder on.
- Only 8x8x8 RGB cubes are supported.

## Tests

```
pip install .[test]
pytest
```