"""Request and response payloads for planning entries."""

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
from casheer.api_expenses import ExpenseAttributes, ExpenseLinks

ENTRY_TYPE = "entry"


@dataclass
class EntryMeta(JsonModel):
    running_total: int = 0


@dataclass
class EntryAttributes(Timestamps):
    month: int = 0
    year: int = 0
    category: str = ""
    subcategory: str = ""
    expected_total: MonetaryValueAttributes = field(default_factory=MonetaryValueAttributes)
    recurring: bool = False


@dataclass
class EntryLinks(JsonModel):
    self_link: str = ""

    _json_keys = {"self_link": "self"}


@dataclass
class EntryListItemLinks(JsonModel):
    self_link: str = ""

    _json_keys = {"self_link": "self"}


@dataclass
class EntryExpenseRelationshipLinks(JsonModel):
    """Points at the expenses that belong to the entry."""

    related: str = ""


@dataclass
class EntryExpenseRelationship(JsonModel):
    links: EntryExpenseRelationshipLinks = field(
        default_factory=EntryExpenseRelationshipLinks
    )


@dataclass
class EntryRelationships(JsonModel):
    expenses: EntryExpenseRelationship = field(default_factory=EntryExpenseRelationship)


@dataclass
class EntryData(ResourceID):
    attributes: EntryAttributes = field(default_factory=EntryAttributes)
    meta: EntryMeta = field(default_factory=EntryMeta)
    links: EntryLinks = field(default_factory=EntryLinks)
    relationships: EntryRelationships = field(default_factory=EntryRelationships)


@dataclass
class EntryListItemData(ResourceID):
    attributes: EntryAttributes = field(default_factory=EntryAttributes)
    meta: EntryMeta = field(default_factory=EntryMeta)
    links: EntryListItemLinks = field(default_factory=EntryListItemLinks)
    relationships: EntryRelationships = field(default_factory=EntryRelationships)


@dataclass
class CreateEntryAttributes(JsonModel):
    month: Optional[int] = None
    year: Optional[int] = None
    category: str = ""
    subcategory: str = ""
    expected_total: MonetaryValueCreationAttributes = field(
        default_factory=MonetaryValueCreationAttributes
    )
    recurring: bool = False


@dataclass
class CreateEntryData(JsonModel):
    type: str = ""
    attributes: CreateEntryAttributes = field(default_factory=CreateEntryAttributes)


@dataclass
class CreateEntryRequest(JsonModel):
    data: CreateEntryData = field(default_factory=CreateEntryData)


@dataclass
class CreateEntryResponse(JsonModel):
    data: EntryData = field(default_factory=EntryData)


@dataclass
class UpdateEntryAttributes(JsonModel):
    month: Optional[int] = None
    year: Optional[int] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    recurring: Optional[bool] = None
    expected_total: MonetaryMutableValueAttributes = field(
        default_factory=MonetaryMutableValueAttributes
    )


@dataclass
class UpdateEntryData(JsonModel):
    type: str = ""
    attributes: UpdateEntryAttributes = field(default_factory=UpdateEntryAttributes)


@dataclass
class UpdateEntryRequest(JsonModel):
    data: UpdateEntryData = field(default_factory=UpdateEntryData)


@dataclass
class UpdateEntryResponse(JsonModel):
    data: EntryData = field(default_factory=EntryData)


@dataclass
class DeleteEntryResponse(JsonModel):
    data: EntryData = field(default_factory=EntryData)


@dataclass
class ListEntryParams(JsonModel):
    month: Optional[int] = None
    year: Optional[int] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None


@dataclass
class ListEntryLinks(JsonModel):
    self_link: str = ""
    home: HomeLink = field(default_factory=HomeLink)

    _json_keys = {"self_link": "self"}


@dataclass
class ListEntryResponse(JsonModel):
    data: list[EntryListItemData] = field(default_factory=list)
    links: ListEntryLinks = field(default_factory=ListEntryLinks)


@dataclass
class GetEntryParams(JsonModel):
    include: Optional[str] = None


@dataclass
class IncludedExpenseData(ResourceID):
    attributes: ExpenseAttributes = field(default_factory=ExpenseAttributes)
    links: ExpenseLinks = field(default_factory=ExpenseLinks)


@dataclass
class GetEntryResponse(JsonModel):
    data: EntryData = field(default_factory=EntryData)
    included: Optional[list[IncludedExpenseData]] = None