import pytest

from densebits import BitVector, BitVectorIterator


def test_into_iter_yields_then_stops():
    """
    Tests that the iterator yields every bit in order and then terminates.
    """

    it = BitVector.of(True, False, True).into_iter()

    assert isinstance(it, BitVectorIterator)
    assert next(it) is True
    assert next(it) is False
    assert next(it) is True

    with pytest.raises(StopIteration):
        next(it)

    with pytest.raises(StopIteration):
        next(it)


def test_into_iter_consumes_vector():
    """
    Tests that moving a vector into an iterator leaves the vector empty.
    """

    vector = BitVector.from_iterable([True] * 70)
    it = vector.into_iter()

    assert len(vector) == 0
    assert vector._words == []

    vector.append(False)
    assert list(it) == [True] * 70


def test_iter_does_not_consume():
    vector = BitVector.of(False, True)

    assert list(vector) == [False, True]
    assert list(vector) == [False, True]
    assert len(vector) == 2


def test_iterator_remaining():
    it = BitVector.of(True, True, False).into_iter()
    assert it.remaining == 3

    next(it)
    assert it.remaining == 2
    assert list(it) == [True, False]
    assert it.remaining == 0


def test_empty_iteration():
    assert list(BitVector().into_iter()) == []


def test_constructor_takes_ownership():
    """
    Tests that building the iterator directly moves the storage out of the passed vector.
    """

    vector = BitVector.of(True, False, True)
    it = BitVectorIterator(vector)

    assert len(vector) == 0
    assert vector._words == []

    # later changes to the old handle must not leak into the iterator
    vector.append(False).append(False)
    vector.set(0, True)
    vector.resize(1)

    assert next(it) is True
    assert it.remaining == 2
    assert list(it) == [False, True]
    assert it.remaining == 0
    assert list(it) == []
