from __future__ import annotations

from collections.abc import Callable
from typing import Self

from typing_extensions import override

__all__ = (
    "BitVectorError",
    "BitIndexError",
    "LengthMismatchError",
    "InvalidLengthError",
)


class BitVectorError(Exception):
    """
    Base class exception for all bit vector contract violations. These are programming errors;
    check lengths and indices beforehand instead of catching them.
    """

    __slots__ = ()


class BitIndexError(BitVectorError, IndexError):
    """
    Thrown when a bit is read or written outside of ``[0, length)``.
    """

    __slots__ = ("index", "length")

    def __init__(self, index: int, length: int):
        #: The index that was requested.
        self.index: int = index
        #: The length of the vector at the time of the access.
        self.length: int = length

        super().__init__(index, length)

    @override
    def __str__(self) -> str:
        return f"bit index {self.index} out of range (length: {self.length})"

    __repr__: Callable[[Self], str] = __str__


class LengthMismatchError(BitVectorError, ValueError):
    """
    Thrown when a binary boolean operator is applied to two vectors of different lengths.
    """

    __slots__ = ("left", "right")

    def __init__(self, left: int, right: int):
        #: The length of the left-hand operand.
        self.left: int = left
        #: The length of the right-hand operand.
        self.right: int = right

        super().__init__(f"operand lengths differ: {left} != {right}")


class InvalidLengthError(BitVectorError, ValueError):
    """
    Thrown when a vector is resized to a negative length.
    """

    __slots__ = ("length",)

    def __init__(self, length: int):
        self.length: int = length

        super().__init__(f"cannot resize to negative length {length}")
