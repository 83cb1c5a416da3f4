import logging

# our public exports, relatively minimal
from densebits.exc import (
    BitIndexError as BitIndexError,
    BitVectorError as BitVectorError,
    InvalidLengthError as InvalidLengthError,
    LengthMismatchError as LengthMismatchError,
)
from densebits.iterator import BitVectorIterator as BitVectorIterator
from densebits.vector import BitVector as BitVector

logging.addLevelName(5, "TRACE")
