"""Request and response payloads for debts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from casheer.api_common import (
    DefaultLinks,
    HomeLink,
    JsonModel,
    MonetaryMutableValueAttributes,
    MonetaryValueAttributes,
    MonetaryValueCreationAttributes,
    ResourceID,
    Timestamps,
)

DEBT_TYPE = "debt"


@dataclass
class DebtAttributes(Timestamps):
    person: str = ""
    value: MonetaryValueAttributes = field(default_factory=MonetaryValueAttributes)
    details: str = ""


@dataclass
class DebtLinks(JsonModel):
    self_link: str = ""

    _json_keys = {"self_link": "self"}
    _omit_if_empty = frozenset({"self_link"})


@dataclass
class DebtListItemLinks(JsonModel):
    self_link: str = ""

    _json_keys = {"self_link": "self"}


@dataclass
class DebtData(ResourceID):
    attributes: DebtAttributes = field(default_factory=DebtAttributes)
    links: DebtLinks = field(default_factory=DebtLinks)


@dataclass
class DebtListItemData(ResourceID):
    attributes: DebtAttributes = field(default_factory=DebtAttributes)
    links: DebtListItemLinks = field(default_factory=DebtListItemLinks)


@dataclass
class CreateDebtAttributes(JsonModel):
    value: MonetaryValueCreationAttributes = field(
        default_factory=MonetaryValueCreationAttributes
    )
    person: str = ""
    details: str = ""


@dataclass
class CreateDebtData(JsonModel):
    type: str = ""
    attributes: CreateDebtAttributes = field(default_factory=CreateDebtAttributes)


@dataclass
class CreateDebtRequest(JsonModel):
    data: CreateDebtData = field(default_factory=CreateDebtData)


@dataclass
class CreateDebtResponse(JsonModel):
    data: DebtData = field(default_factory=DebtData)
    links: DefaultLinks = field(default_factory=DefaultLinks)


@dataclass
class UpdateDebtAttributes(MonetaryMutableValueAttributes):
    person: Optional[str] = None
    details: Optional[str] = None


@dataclass
class UpdateDebtData(JsonModel):
    type: str = ""
    attributes: UpdateDebtAttributes = field(default_factory=UpdateDebtAttributes)


@dataclass
class UpdateDebtRequest(JsonModel):
    data: UpdateDebtData = field(default_factory=UpdateDebtData)


@dataclass
class UpdateDebtResponse(JsonModel):
    data: DebtData = field(default_factory=DebtData)


@dataclass
class DeleteDebtResponse(JsonModel):
    data: DebtData = field(default_factory=DebtData)


@dataclass
class ListDebtParams(JsonModel):
    person: Optional[str] = None


@dataclass
class ListDebtLinks(JsonModel):
    self_link: str = ""
    home: HomeLink = field(default_factory=HomeLink)

    _json_keys = {"self_link": "self"}


@dataclass
class ListDebtResponse(JsonModel):
    data: list[DebtListItemData] = field(default_factory=list)
    links: ListDebtLinks = field(default_factory=ListDebtLinks)


@dataclass
class GetDebtResponse(JsonModel):
    data: DebtData = field(default_factory=DebtData)