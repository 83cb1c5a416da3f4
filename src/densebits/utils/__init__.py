from __future__ import annotations

from logging import Logger, getLogger
from typing import Any

import attr


@attr.s(slots=True, frozen=True, kw_only=True)
class LoggerWithTrace:
    """
    Logger wrapper with a TRACE level (5), used for storage bookkeeping: word allocation and
    release, resizes, and moves of a vector into an iterator.
    """

    logger: Logger = attr.ib()

    @classmethod
    def get(cls, name: str) -> LoggerWithTrace:
        return LoggerWithTrace(logger=getLogger(name))

    def trace(self, message: str, *args: Any, **kws: Any) -> None:
        self.logger.log(5, message, *args, **kws)
