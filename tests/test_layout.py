import pytest

from ledcube.errors import OutOfBoundsError
from ledcube.layout import Color, LedLayout

EMPTY = bytes(24)


def slices(layout):
    return dict(layout.iterate_slices())


def test_new_layout_is_dark():
    data = slices(LedLayout())
    assert sorted(data) == list(range(8))
    assert all(layer == EMPTY for layer in data.values())


def test_iterate_slices_order_and_early_stop():
    layout = LedLayout()
    seen = []
    for z, layer in layout.iterate_slices():
        seen.append(z)
        assert len(layer) == 24
        if z == 3:
            break
    assert seen == [0, 1, 2, 3]


@pytest.mark.parametrize(
    "composite, parts",
    [
        (Color.CYAN, (Color.GREEN, Color.BLUE)),
        (Color.YELLOW, (Color.GREEN, Color.RED)),
        (Color.VIOLET, (Color.BLUE, Color.RED)),
        (Color.WHITE, (Color.GREEN, Color.BLUE, Color.RED)),
    ],
)
def test_color_composites(composite, parts):
    combined = LedLayout()
    combined.set_single(3, 4, 5, composite)
    layered = LedLayout()
    for part in parts:
        layered.set_single(3, 4, 5, part)
    assert slices(combined) == slices(layered)
    assert slices(combined)[5] != EMPTY


def test_set_single_rightmost_green():
    layout = LedLayout()
    layout.set_single(0, 0, 0, Color.GREEN)
    layer = slices(layout)[0]
    assert layer[0] == 0b00000001
    assert layer[1:] == EMPTY[1:]


def test_set_single_red_lands_in_red_block():
    layout = LedLayout()
    layout.set_single(7, 0, 2, Color.RED)
    layer = slices(layout)[2]
    assert layer[16] == 0b10000000
    assert layer[:16] == EMPTY[:16]


def test_set_single_accumulates_colors():
    layout = LedLayout()
    layout.set_single(4, 5, 6, Color.RED)
    layout.set_single(4, 5, 6, Color.GREEN)
    other = LedLayout()
    other.set_single(4, 5, 6, Color.YELLOW)
    assert slices(layout) == slices(other)


def test_change_single_replaces_color():
    layout = LedLayout()
    layout.set_single(4, 5, 6, Color.RED)
    layout.change_single(4, 5, 6, Color.GREEN)
    other = LedLayout()
    other.set_single(4, 5, 6, Color.GREEN)
    assert slices(layout) == slices(other)


def test_set_single_no_color_switches_off():
    layout = LedLayout()
    layout.set_single(1, 2, 3, Color.WHITE)
    layout.set_single(1, 2, 3, Color.NO_COLOR)
    assert slices(layout)[3] == EMPTY


def test_reset_single_leaves_neighbours():
    layout = LedLayout()
    layout.set_single(1, 2, 3, Color.WHITE)
    layout.set_single(2, 2, 3, Color.WHITE)
    layout.reset_single(1, 2, 3)
    other = LedLayout()
    other.set_single(2, 2, 3, Color.WHITE)
    assert slices(layout) == slices(other)


@pytest.mark.parametrize("x, y, z", [(8, 0, 0), (0, 8, 0), (0, 0, 8), (-1, 0, 0)])
def test_single_out_of_bounds(x, y, z):
    layout = LedLayout()
    with pytest.raises(OutOfBoundsError):
        layout.set_single(x, y, z, Color.RED)
    with pytest.raises(OutOfBoundsError):
        layout.change_single(x, y, z, Color.RED)
    with pytest.raises(OutOfBoundsError):
        layout.reset_single(x, y, z)
    assert all(layer == EMPTY for layer in slices(layout).values())


def test_set_row_individual_writes_mask():
    layout = LedLayout()
    layout.set_row_individual(3, 1, Color.BLUE, 0b10100101)
    layer = slices(layout)[1]
    assert layer[8 + 3] == 0b10100101
    assert layer[:8] == EMPTY[:8]
    assert layer[16:] == EMPTY[16:]


def test_change_row_individual_clears_masked_only():
    layout = LedLayout()
    layout.set_row(2, 4, Color.RED)
    layout.change_row_individual(2, 4, Color.GREEN, 0b00001111)
    layer = slices(layout)[4]
    assert layer[2] == 0b00001111
    assert layer[16 + 2] == 0b11110000


def test_reset_row_individual():
    layout = LedLayout()
    layout.set_row(0, 0, Color.WHITE)
    layout.reset_row_individual(0, 0, 0b11111111)
    assert slices(layout)[0] == EMPTY


def test_row_individual_rejects_wide_mask():
    layout = LedLayout()
    with pytest.raises(ValueError):
        layout.set_row_individual(0, 0, Color.RED, 256)


def test_set_row_equals_full_mask():
    a, b = LedLayout(), LedLayout()
    a.set_row(5, 2, Color.CYAN)
    b.set_row_individual(5, 2, Color.CYAN, 0b11111111)
    assert slices(a) == slices(b)


def test_change_row_and_reset_row():
    layout = LedLayout()
    layout.set_row(1, 1, Color.RED)
    layout.change_row(1, 1, Color.BLUE)
    expected = LedLayout()
    expected.set_row(1, 1, Color.BLUE)
    assert slices(layout) == slices(expected)
    layout.reset_row(1, 1)
    assert slices(layout)[1] == EMPTY


@pytest.mark.parametrize("y, z", [(8, 0), (0, 8)])
def test_row_out_of_bounds(y, z):
    layout = LedLayout()
    with pytest.raises(OutOfBoundsError):
        layout.set_row(y, z, Color.RED)
    with pytest.raises(OutOfBoundsError):
        layout.reset_row_individual(y, z, 1)


def test_set_layer_white_fills_only_that_layer():
    layout = LedLayout()
    layout.set_layer(7, Color.WHITE)
    data = slices(layout)
    assert data[7] == bytes([0xFF]) * 24
    assert all(data[z] == EMPTY for z in range(7))


def test_set_layer_adds_change_layer_replaces():
    added = LedLayout()
    added.set_layer(0, Color.RED)
    added.set_layer(0, Color.GREEN)
    replaced = LedLayout()
    replaced.set_layer(0, Color.RED)
    replaced.change_layer(0, Color.GREEN)
    yellow = LedLayout()
    yellow.set_layer(0, Color.YELLOW)
    green = LedLayout()
    green.set_layer(0, Color.GREEN)
    assert slices(added) == slices(yellow)
    assert slices(replaced) == slices(green)


def test_layer_reset_and_no_color():
    layout = LedLayout()
    layout.set_layer(2, Color.WHITE)
    layout.set_layer(3, Color.WHITE)
    layout.set_layer(2, Color.NO_COLOR)
    layout.reset_layer(3)
    assert all(layer == EMPTY for layer in slices(layout).values())


def test_layer_out_of_bounds():
    layout = LedLayout()
    with pytest.raises(OutOfBoundsError):
        layout.change_layer(8, Color.RED)


def test_set_block_red():
    layout = LedLayout()
    layout.set_block(Color.RED)
    for layer in slices(layout).values():
        assert layer[16:] == bytes([0xFF]) * 8
        assert layer[:16] == EMPTY[:16]


def test_change_block_replaces_and_reset_block():
    layout = LedLayout()
    layout.set_block(Color.RED)
    layout.change_block(Color.BLUE)
    expected = LedLayout()
    expected.set_block(Color.BLUE)
    assert slices(layout) == slices(expected)
    layout.reset_block()
    assert all(layer == EMPTY for layer in slices(layout).values())


def test_set_block_no_color_resets():
    layout = LedLayout()
    layout.set_block(Color.WHITE)
    layout.set_block(Color.NO_COLOR)
    assert all(layer == EMPTY for layer in slices(layout).values())