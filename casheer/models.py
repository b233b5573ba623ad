"""Domain models for debts, planning entries and expenses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from casheer.validation import InvalidModelErrorBuilder


@dataclass
class Value:
    """A monetary value expressed as amount * 10**exponent in a currency."""

    currency: str = ""
    amount: int = 0
    exponent: int = 0


@dataclass
class BaseModel:
    """Fields shared by every stored model."""

    id: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


@dataclass
class Debt(BaseModel):
    """A debt owed to or held by someone."""

    value: Value = field(default_factory=Value)
    person: str = ""
    details: str = ""

    def validate(self) -> None:
        """Raise InvalidModelError if the debt is not valid."""
        builder = InvalidModelErrorBuilder("debt")
        if not self.person:
            builder.add_error("person cannot be empty")
        builder.raise_if_invalid()


@dataclass
class Expense(BaseModel):
    """An expense associated with an entry."""

    value: Value = field(default_factory=Value)
    entry_id: int = 0
    name: str = ""
    description: str = ""
    payment_method: str = ""

    def validate(self) -> None:
        """Raise InvalidModelError if the expense is not valid."""
        builder = InvalidModelErrorBuilder("expense")
        if not self.name:
            builder.add_error("name cannot be empty")
        builder.raise_if_invalid()


@dataclass
class Entry(BaseModel):
    """An entry of a monthly planning."""

    value: Value = field(default_factory=Value)
    month: int = 0
    year: int = 0
    category: str = ""
    subcategory: str = ""
    recurring: bool = False
    expenses: list[Expense] = field(default_factory=list)

    def validate(self) -> None:
        """Raise InvalidModelError if the entry is not valid."""
        builder = InvalidModelErrorBuilder("entry")
        if not 1 <= self.month <= 12:
            builder.add_error("month must be between 1 and 12")
        if self.year < 2020:
            builder.add_error("year must be at least 2020")
        if not self.category:
            builder.add_error("category cannot be empty")
        if not self.subcategory:
            builder.add_error("subcategory cannot be empty")
        builder.raise_if_invalid()


class ExpenseInvalidEntryKeyError(ValueError):
    """An expense refers to an entry that does not exist."""

    def __init__(self, entry_key: int) -> None:
        super().__init__(entry_key)
        self.entry_key = entry_key

    def __str__(self) -> str:
        return f"entry with id {self.entry_key} was not found"