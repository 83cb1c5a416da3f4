from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Self

from typing_extensions import override

from densebits.exc import BitIndexError, InvalidLengthError, LengthMismatchError
from densebits.utils import LoggerWithTrace

if TYPE_CHECKING:
    from densebits.iterator import BitVectorIterator

__all__ = (
    "BitVector",
    "WORD_BITS",
    "WORD_MASK",
    "count_word",
)

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)

#: The number of bits packed into a single storage word.
WORD_BITS = 64

#: All 64 bits of a word set. Used to keep values inside an unsigned word after inversion.
WORD_MASK = (1 << WORD_BITS) - 1

#: The lowest bit of every byte lane in a word.
BYTE_LANES = 0x0101_0101_0101_0101

#: A single byte lane.
BYTE_MASK = 0xFF


def _word_count(length: int) -> int:
    return (length + WORD_BITS - 1) // WORD_BITS


def count_word(word: int) -> int:
    """
    Counts the set bits in a single 64-bit word.

    The first pass sums each of the eight single-bit shifts of the word masked to the low bit of
    every byte, which leaves the popcount of each byte sitting in its own lane. A lane never
    exceeds 8 so nothing carries into its neighbour. The second pass adds the eight lanes together.
    """

    lanes = 0
    for shift in range(8):
        lanes += (word >> shift) & BYTE_LANES

    total = 0
    for lane in range(8):
        total += (lanes >> (lane * 8)) & BYTE_MASK

    return total


def _shl_truncating(word: int, shift: int) -> int:
    # drop the bits that would fall off the top of the word before shifting
    return (word & (WORD_MASK >> shift)) << shift


class BitVector:
    """
    A growable, compact array of booleans that is stored using 64-bit words.

    Bit ``i`` lives in word ``i // 64`` at bit ``i % 64``, least significant bit first. The bits
    in the final word past :attr:`length` are don't-care; anything that looks at whole words across
    that boundary has to mask them off first.
    """

    __slots__ = ("_length", "_words")

    def __init__(self) -> None:
        self._length: int = 0
        self._words: list[int] = []

    @classmethod
    def from_iterable(cls, bits: Iterable[bool]) -> Self:
        """
        Creates a new vector by appending every item of ``bits`` in order.
        """

        vector = cls()
        vector.extend(bits)
        return vector

    @classmethod
    def of(cls, *bits: bool) -> Self:
        """
        Creates a new vector out of the positional arguments.
        """

        return cls.from_iterable(bits)

    @property
    def length(self) -> int:
        """
        The number of valid bits in this vector.
        """

        return self._length

    def _check_index(self, index: int) -> tuple[int, int]:
        if not 0 <= index < self._length:
            raise BitIndexError(index, self._length)

        return divmod(index, WORD_BITS)

    def _check_other(self, other: BitVector) -> None:
        if other._length != self._length:
            raise LengthMismatchError(self._length, other._length)

    def _tail_mask(self) -> int:
        used = self._length % WORD_BITS
        return WORD_MASK if used == 0 else (1 << used) - 1

    def append(self, value: bool) -> Self:
        """
        Appends a single bit to the end of this vector.

        :param value: The bit to add.
        :return: This vector, for chaining.
        """

        if self._length % WORD_BITS == 0:
            self._words.append(0)
            logger.trace(f"Allocated word #{len(self._words) - 1} (length: {self._length})")

        self._length += 1
        self.set(self._length - 1, value)
        return self

    def extend(self, bits: Iterable[bool]) -> Self:
        """
        Appends every item of ``bits`` to the end of this vector.
        """

        for bit in bits:
            self.append(bit)

        return self

    def remove_last(self) -> bool | None:
        """
        Removes the final bit of this vector.

        :return: The removed bit, or None if this vector was already empty.
        """

        if self._length == 0:
            return None

        value = self.get(self._length - 1)
        self._length -= 1

        if self._length % WORD_BITS == 0:
            self._words.pop()
            logger.trace(f"Released word #{len(self._words)} (length: {self._length})")

        return value

    def resize(self, length: int) -> Self:
        """
        Resizes this vector to exactly ``length`` bits. Shrinking truncates; any bits gained by
        growing are guaranteed to be zero.

        :param length: The new length. Must not be negative.
        :return: This vector, for chaining.
        """

        if length < 0:
            raise InvalidLengthError(length)

        if self._words:
            self._words[-1] &= self._tail_mask()

        count = _word_count(length)
        current = len(self._words)
        if count < current:
            del self._words[count:]
        else:
            self._words.extend([0] * (count - current))

        logger.trace(f"Resized from {self._length} to {length} bits ({current} -> {count} words)")
        self._length = length
        return self

    def get(self, index: int) -> bool:
        """
        Gets the bit at ``index``.
        """

        word, bit = self._check_index(index)
        return (self._words[word] & (1 << bit)) != 0

    def set(self, index: int, value: bool) -> None:
        """
        Sets the bit at ``index`` to ``value``, leaving every other bit alone.
        """

        word, bit = self._check_index(index)
        if value:
            self._words[word] |= 1 << bit
        else:
            self._words[word] &= ~(1 << bit) & WORD_MASK

    def count_true(self) -> int:
        """
        Counts the number of set bits in this vector.
        """

        if not self._words:
            return 0

        count = 0
        for word in self._words[:-1]:
            count += count_word(word)

        # shift the don't-care bits out of the top of the tail word
        padding = len(self._words) * WORD_BITS - self._length
        count += count_word(_shl_truncating(self._words[-1], padding))
        return count

    def copy(self) -> Self:
        """
        Creates an independent copy of this vector.
        """

        new = type(self)()
        new._length = self._length
        new._words = self._words.copy()
        return new

    def take(self) -> Self:
        """
        Moves the storage of this vector into a new vector, leaving this one empty.
        """

        moved = type(self)()
        moved._length, moved._words = self._length, self._words
        self._length, self._words = 0, []
        return moved

    def into_iter(self) -> BitVectorIterator:
        """
        Consumes this vector, moving its storage into a new iterator. This vector is left empty.
        """

        from densebits.iterator import BitVectorIterator

        return BitVectorIterator(self)

    def _apply(self, other: BitVector, op: Callable[[int, int], int]) -> None:
        self._check_other(other)
        theirs = other._words
        self._words = [op(word, theirs[idx]) for idx, word in enumerate(self._words)]

    def __iand__(self, other: Any) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        self._apply(other, operator.and_)
        return self

    def __ior__(self, other: Any) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        self._apply(other, operator.or_)
        return self

    def __ixor__(self, other: Any) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        self._apply(other, operator.xor)
        return self

    def __and__(self, other: Any) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        new = self.copy()
        new._apply(other, operator.and_)
        return new

    def __or__(self, other: Any) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        new = self.copy()
        new._apply(other, operator.or_)
        return new

    def __xor__(self, other: Any) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        new = self.copy()
        new._apply(other, operator.xor)
        return new

    def __invert__(self) -> Self:
        new = self.copy()
        new._words = [~word & WORD_MASK for word in self._words]
        return new

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __setitem__(self, index: int, value: bool) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[bool]:
        return self.copy().into_iter()

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented

        if self._length != other._length:
            return False

        if not self._words:
            return True

        if self._words[:-1] != other._words[:-1]:
            return False

        mask = self._tail_mask()
        return (self._words[-1] & mask) == (other._words[-1] & mask)

    __hash__ = None  # type: ignore

    @override
    def __str__(self) -> str:
        return "[" + ", ".join("1" if self.get(idx) else "0" for idx in range(self._length)) + "]"

    @override
    def __repr__(self) -> str:
        words = ", ".join(f"0x{word:016x}" for word in self._words)
        return f"<{type(self).__name__} length={self._length} words=[{words}]>"
