"""Request and response payloads for expenses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from casheer.api_common import (
    HomeLink,
    JsonModel,
    MonetaryMutableValueAttributes,
    MonetaryValueAttributes,
    MonetaryValueCreationAttributes,
    ResourceID,
    Timestamps,
)

EXPENSE_TYPE = "expense"


@dataclass
class ExpenseAttributes(Timestamps):
    value: MonetaryValueAttributes = field(default_factory=MonetaryValueAttributes)
    name: str = ""
    description: str = ""
    payment_method: str = ""


@dataclass
class ExpenseLinks(JsonModel):
    self_link: str = ""

    _json_keys = {"self_link": "self"}


@dataclass
class ExpenseListItemLinks(JsonModel):
    self_link: str = ""

    _json_keys = {"self_link": "self"}


@dataclass
class ExpenseEntryRelationshipLinks(JsonModel):
    """Points at the entry the expense belongs to."""

    related: str = ""


@dataclass
class ExpenseEntryRelationship(JsonModel):
    links: ExpenseEntryRelationshipLinks = field(
        default_factory=ExpenseEntryRelationshipLinks
    )


@dataclass
class ExpenseRelationships(JsonModel):
    entries: ExpenseEntryRelationship = field(default_factory=ExpenseEntryRelationship)


@dataclass
class ExpenseData(ResourceID):
    attributes: ExpenseAttributes = field(default_factory=ExpenseAttributes)
    links: ExpenseLinks = field(default_factory=ExpenseLinks)
    relationships: ExpenseRelationships = field(default_factory=ExpenseRelationships)


@dataclass
class ExpenseListItemData(ResourceID):
    attributes: ExpenseAttributes = field(default_factory=ExpenseAttributes)
    links: ExpenseListItemLinks = field(default_factory=ExpenseListItemLinks)


@dataclass
class CreateExpenseAttributes(JsonModel):
    value: MonetaryValueCreationAttributes = field(
        default_factory=MonetaryValueCreationAttributes
    )
    name: str = ""
    description: Optional[str] = None
    payment_method: Optional[str] = None


@dataclass
class CreateExpenseData(JsonModel):
    type: str = ""
    attributes: CreateExpenseAttributes = field(default_factory=CreateExpenseAttributes)


@dataclass
class CreateExpenseRequest(JsonModel):
    data: CreateExpenseData = field(default_factory=CreateExpenseData)


@dataclass
class CreateExpenseResponse(JsonModel):
    data: ExpenseData = field(default_factory=ExpenseData)


@dataclass
class UpdateExpenseAttributes(JsonModel):
    value: MonetaryMutableValueAttributes = field(
        default_factory=MonetaryMutableValueAttributes
    )
    name: Optional[str] = None
    description: Optional[str] = None
    payment_method: Optional[str] = None


@dataclass
class UpdateExpenseData(JsonModel):
    type: str = ""
    attributes: UpdateExpenseAttributes = field(default_factory=UpdateExpenseAttributes)


@dataclass
class UpdateExpenseRequest(JsonModel):
    data: UpdateExpenseData = field(default_factory=UpdateExpenseData)


@dataclass
class UpdateExpenseResponse(JsonModel):
    data: ExpenseData = field(default_factory=ExpenseData)


@dataclass
class DeleteExpenseResponse(JsonModel):
    data: ExpenseData = field(default_factory=ExpenseData)


@dataclass
class ListExpenseParams(JsonModel):
    amount_gt: Optional[int] = None
    amount_lt: Optional[int] = None
    currency: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    payment_method: Optional[str] = None

    _json_keys = {"amount_gt": "amount[gt]", "amount_lt": "amount[lt]"}


@dataclass
class ListExpenseItemLinks(JsonModel):
    self_link: str = ""

    _json_keys = {"self_link": "self"}


@dataclass
class ListExpenseLinks(JsonModel):
    self_link: str = ""
    home: HomeLink = field(default_factory=HomeLink)

    _json_keys = {"self_link": "self"}


@dataclass
class ListExpenseResponse(JsonModel):
    data: list[ExpenseListItemData] = field(default_factory=list)
    links: ListExpenseLinks = field(default_factory=ListExpenseLinks)


@dataclass
class GetExpenseResponse(JsonModel):
    data: ExpenseData = field(default_factory=ExpenseData)