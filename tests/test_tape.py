import pytest

from bfast.errors import CursorOutOfBounds
from bfast.tape import Tape


def test_new_tape_is_zeroed():
    tape = Tape(16)
    assert len(tape) == 16
    assert tape.cursor == 0
    assert bytes(tape.cells) == bytes(16)


def test_cell_arithmetic_wraps():
    tape = Tape(1)
    tape.decrement()
    assert tape.value == 255
    tape.increment()
    assert tape.value == 0


def test_value_setter_masks_to_byte():
    tape = Tape(1)
    tape.value = 300
    assert tape.value == 44


def test_failed_move_keeps_cursor():
    tape = Tape(2)
    tape.move(1)
    with pytest.raises(CursorOutOfBounds):
        tape.move(1)
    assert tape.cursor == 1
    assert tape.high_water == 1


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        Tape(0)
