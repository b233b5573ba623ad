"""Errors raised by storage backends."""

from __future__ import annotations

from typing import Optional


class NotFoundError(LookupError):
    """A requested record does not exist."""

    def __init__(self, details: str, orig: Optional[BaseException] = None) -> None:
        super().__init__(details)
        self.details = details
        self.orig = orig
        self.__cause__ = orig

    def __str__(self) -> str:
        return self.details