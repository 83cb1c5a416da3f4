from __future__ import annotations

from collections.abc import Iterator

import attr
from typing_extensions import override

from densebits.utils import LoggerWithTrace
from densebits.vector import BitVector

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)


def _take_ownership(vector: BitVector) -> BitVector:
    moved = vector.take()
    logger.trace(f"Moved {len(moved)} bits into an iterator")
    return moved


@attr.s(slots=True, eq=False)
class BitVectorIterator(Iterator[bool]):
    """
    A forward-only cursor over a :class:`.BitVector`. Constructing one moves the vector's storage
    into the iterator and leaves the passed vector empty, so the two never share bits.

    Once exhausted, it stays exhausted; make a new one to walk the bits again.
    """

    _vector: BitVector = attr.ib(converter=_take_ownership)
    _index: int = attr.ib(default=0, init=False)

    @property
    def remaining(self) -> int:
        """
        The number of bits that have not yet been yielded.
        """

        return max(len(self._vector) - self._index, 0)

    @override
    def __iter__(self) -> BitVectorIterator:
        return self

    @override
    def __next__(self) -> bool:
        if self._index >= len(self._vector):
            raise StopIteration

        self._index += 1
        return self._vector.get(self._index - 1)

    def __length_hint__(self) -> int:
        return self.remaining
