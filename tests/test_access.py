import random

import pytest

from densebits import BitIndexError, BitVector


def test_set_then_get():
    """
    Tests that a written bit reads back and that no other bit changes.
    """

    rng = random.Random(1234)
    length = 193
    expected = [rng.random() < 0.5 for _ in range(length)]
    vector = BitVector.from_iterable(expected)

    for _ in range(500):
        idx = rng.randrange(length)
        value = rng.random() < 0.5
        vector.set(idx, value)
        expected[idx] = value

        assert vector.get(idx) is value
        assert [vector[i] for i in range(length)] == expected


def test_item_aliases():
    vector = BitVector().resize(3)
    vector[1] = True

    assert vector[1] is True
    assert vector.get(1) is True
    assert str(vector) == "[0, 1, 0]"


def test_set_word_boundaries():
    """
    Tests setting and clearing the first and last bit of each word.
    """

    vector = BitVector().resize(192)
    for idx in (0, 63, 64, 127, 128, 191):
        vector[idx] = True

    assert vector.count_true() == 6
    assert vector._words[0] == (1 << 63) | 1

    vector[63] = False
    assert vector._words[0] == 1
    assert vector.count_true() == 5


@pytest.mark.parametrize("index", [3, 4, 64, -1])
def test_get_out_of_range(index: int):
    """
    Tests that reads past the length fail, even when storage exists for the bit.
    """

    vector = BitVector.of(True, False, True)

    with pytest.raises(BitIndexError) as e:
        vector.get(index)

    assert e.value.index == index
    assert e.value.length == 3
    assert "out of range" in str(e.value)


def test_set_out_of_range():
    vector = BitVector()

    with pytest.raises(BitIndexError):
        vector.set(0, True)

    with pytest.raises(IndexError):
        vector[0] = True
