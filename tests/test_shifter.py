from unittest import mock

from seqrotate import BlockShift, ArrayCollection

import pytest

@pytest.fixture()
def letters():
    return list("ABCDEFGHIJ")

# (block start, block end, dest, expected result, affected range)
shifts = [
    (6, 7, 2, "ABGHCDEFIJ", range(2, 8)),
    (2, 3, 5, "ABEFGCDHIJ", range(2, 7)),
    (0, 0, 9, "BCDEFGHIJA", range(0, 10)),
    (9, 9, 0, "JABCDEFGHI", range(0, 10)),
    (3, 5, 3, "ABCDEFGHIJ", range(3, 6)),
    # destination clamped so the block stays inside
    (1, 3, 9, "AEFGHIJBCD", range(1, 10)),
]

idfn = lambda v: str(v)

@pytest.mark.parametrize("start, end, dest, expected, affected", shifts,
                         ids=idfn)
def test_shift_and_undo(letters, start, end, dest, expected, affected):
    shift = BlockShift(letters, start, end, dest)

    assert shift.affected_range == affected

    shift()
    assert "".join(letters) == expected

    shift(reverse=True)
    assert "".join(letters) == "ABCDEFGHIJ"


def test_block_indices(letters):
    shift = BlockShift(letters, 6, 7, 2)

    assert shift.block_start() == 6
    assert shift.block_end() == 7
    assert shift.block_dest() == 2

    assert shift.block_start(reverse=True) == 2
    assert shift.block_end(reverse=True) == 3
    assert shift.block_dest(reverse=True) == 6

    shift()
    # after the move, the block sits where the reverse indices say
    rs, re = shift.block_start(reverse=True), shift.block_end(reverse=True)
    assert letters[rs:re + 1] == ["G", "H"]


def test_shift_return_value(letters):
    shift = BlockShift(letters, 6, 7, 2)

    # "C" (previously first in the affected range) lands at 4
    assert shift() == 4
    assert letters[4] == "C"
    # undoing puts "G" (first in the range after the move) back at 6
    assert shift(reverse=True) == 6
    assert letters[6] == "G"


def test_repeated_shifts(letters):
    down = BlockShift(letters, 0, 1, 4)

    down()
    assert "".join(letters) == "CDEFABGHIJ"
    down(reverse=True)
    down()
    assert "".join(letters) == "CDEFABGHIJ"


def test_shift_on_collection():
    c = ArrayCollection([1, 2, 3, 4, 5])
    BlockShift(c, 3, 4, 0)()
    assert c.data == [4, 5, 1, 2, 3]


def test_shift_bad_block(letters):
    with pytest.raises(IndexError):
        BlockShift(letters, 8, 10, 0)

    with pytest.raises(IndexError):
        BlockShift(letters, -1, 2, 5)

    with pytest.raises(ValueError):
        BlockShift(letters, 4, 3, 0)


def test_shift_logs_lazily(letters):
    shift = BlockShift(letters, 6, 7, 2)

    with mock.patch.object(shift.LOGGER, "debug") as debug:
        shift()

    # arguments are handed to the logger, not pre-formatted
    debug.assert_called_once_with("shift %s around %s (reverse=%s)",
                                  range(2, 8), 6, False)
