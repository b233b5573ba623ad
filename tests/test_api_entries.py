import json
from datetime import datetime, timezone

import pytest

from casheer.api_common import (
    MonetaryMutableValueAttributes,
    MonetaryValueAttributes,
    MonetaryValueCreationAttributes,
)
from casheer.api_entries import (
    ENTRY_TYPE,
    CreateEntryAttributes,
    CreateEntryData,
    CreateEntryRequest,
    CreateEntryResponse,
    EntryAttributes,
    EntryData,
    EntryLinks,
    EntryListItemData,
    EntryMeta,
    GetEntryParams,
    GetEntryResponse,
    IncludedExpenseData,
    ListEntryParams,
    ListEntryResponse,
    UpdateEntryAttributes,
)
from casheer.api_expenses import ExpenseAttributes


def _entry_data(entry_id="1"):
    return EntryData(
        id=entry_id,
        type=ENTRY_TYPE,
        attributes=EntryAttributes(
            created_at=datetime(2023, 10, 1, 12, 0, tzinfo=timezone.utc),
            updated_at=datetime(2023, 10, 2, 12, 0, tzinfo=timezone.utc),
            month=10,
            year=2023,
            category="category",
            subcategory="subcategory",
            expected_total=MonetaryValueAttributes(amount=1000, currency="EUR", exponent=-2),
            recurring=False,
        ),
        meta=EntryMeta(running_total=500),
        links=EntryLinks(self_link="http://localhost/api/entries/1"),
    )


def test_entry_type_is_serialized():
    assert EntryData(id="3", type=ENTRY_TYPE).to_dict()["type"] == "entry"


def test_create_response_round_trip():
    resp = CreateEntryResponse(data=_entry_data())
    assert CreateEntryResponse.from_json(resp.to_json()) == resp


def test_entry_data_keys_are_flattened():
    out = _entry_data().to_dict()
    assert out["id"] == "1"
    assert out["type"] == "entry"
    assert out["meta"] == {"running_total": 500}
    assert out["links"] == {"self": "http://localhost/api/entries/1"}
    assert out["attributes"]["expected_total"] == {
        "amount": 1000,
        "currency": "EUR",
        "exponent": -2,
    }
    assert out["attributes"]["created_at"] == "2023-10-01T12:00:00Z"
    assert out["relationships"] == {"expenses": {"links": {"related": ""}}}


def test_create_request_omits_missing_month_and_year():
    req = CreateEntryRequest(
        data=CreateEntryData(
            type=ENTRY_TYPE,
            attributes=CreateEntryAttributes(
                category="food",
                subcategory="groceries",
                expected_total=MonetaryValueCreationAttributes(amount=100, currency="RON"),
            ),
        )
    )
    attrs = req.to_dict()["data"]["attributes"]
    assert "month" not in attrs
    assert "year" not in attrs
    assert "exponent" not in attrs["expected_total"]
    assert attrs["recurring"] is False


def test_create_request_parses_optional_fields():
    text = json.dumps(
        {
            "data": {
                "type": "entry",
                "attributes": {
                    "month": 11,
                    "year": 2023,
                    "category": "food",
                    "subcategory": "groceries",
                    "expected_total": {"amount": 100, "currency": "RON", "exponent": -2},
                    "recurring": True,
                },
            }
        }
    )
    req = CreateEntryRequest.from_json(text)
    assert req.data.attributes.month == 11
    assert req.data.attributes.year == 2023
    assert req.data.attributes.expected_total.exponent == -2
    assert req.data.attributes.recurring is True


def test_update_attributes_always_emit_expected_total():
    attrs = UpdateEntryAttributes(category="rent")
    assert attrs.to_dict() == {"category": "rent", "expected_total": {}}


def test_update_attributes_round_trip():
    attrs = UpdateEntryAttributes(
        month=3,
        recurring=False,
        expected_total=MonetaryMutableValueAttributes(amount=42),
    )
    back = UpdateEntryAttributes.from_dict(attrs.to_dict())
    assert back == attrs
    assert back.recurring is False


def test_get_entry_response_without_included_omits_key():
    resp = GetEntryResponse(data=_entry_data())
    assert "included" not in resp.to_dict()
    assert GetEntryResponse.from_dict(resp.to_dict()).included is None


def test_get_entry_response_empty_included_is_kept():
    resp = GetEntryResponse(data=_entry_data(), included=[])
    assert resp.to_dict()["included"] == []


def test_get_entry_response_with_expenses_round_trip():
    expenses = [
        IncludedExpenseData(
            id=str(n),
            type="expense",
            attributes=ExpenseAttributes(
                value=MonetaryValueAttributes(amount=100, currency="EUR", exponent=-2),
                name=f"expense{n}",
                description="test",
                payment_method="card",
            ),
        )
        for n in (1, 2)
    ]
    resp = GetEntryResponse(data=_entry_data(), included=expenses)
    back = GetEntryResponse.from_json(resp.to_json())
    assert back.included is not None
    assert len(back.included) == 2
    assert [e.attributes.name for e in back.included] == ["expense1", "expense2"]
    assert back == resp


def test_list_response_round_trip():
    item = EntryListItemData(id="7", type=ENTRY_TYPE)
    resp = ListEntryResponse(data=[item, EntryListItemData(id="8", type=ENTRY_TYPE)])
    back = ListEntryResponse.from_json(resp.to_json())
    assert [d.id for d in back.data] == ["7", "8"]


def test_list_params_only_set_fields():
    params = ListEntryParams(month=10, year=2022)
    assert params.to_dict() == {"month": 10, "year": 2022}
    assert ListEntryParams.from_dict({}) == ListEntryParams()


def test_get_entry_params():
    assert GetEntryParams(include="expenses").to_dict() == {"include": "expenses"}
    assert GetEntryParams().to_dict() == {}


def test_bad_types_raise():
    with pytest.raises(ValueError):
        EntryAttributes.from_dict({"month": "ten"})
    with pytest.raises(ValueError):
        GetEntryResponse.from_dict({"included": {"id": "1"}})
    with pytest.raises(ValueError):
        EntryAttributes.from_dict({"created_at": "yesterday"})