import pytest

from casheer.api_common import HomeLink, MonetaryValueAttributes, MonetaryValueCreationAttributes
from casheer.api_expenses import (
    EXPENSE_TYPE,
    CreateExpenseAttributes,
    CreateExpenseData,
    CreateExpenseRequest,
    CreateExpenseResponse,
    DeleteExpenseResponse,
    ExpenseAttributes,
    ExpenseData,
    ExpenseEntryRelationship,
    ExpenseEntryRelationshipLinks,
    ExpenseLinks,
    ExpenseListItemData,
    ExpenseRelationships,
    GetExpenseResponse,
    ListExpenseLinks,
    ListExpenseParams,
    ListExpenseResponse,
    UpdateExpenseAttributes,
    UpdateExpenseRequest,
)


def _expense(entry_id=69, expense_id="5"):
    return ExpenseData(
        id=expense_id,
        type=EXPENSE_TYPE,
        attributes=ExpenseAttributes(
            value=MonetaryValueAttributes(amount=1500, currency="RON", exponent=-2),
            name="name",
            description="description",
            payment_method="card",
        ),
        links=ExpenseLinks(self_link=f"/entries/{entry_id}/expenses/{expense_id}"),
        relationships=ExpenseRelationships(
            entries=ExpenseEntryRelationship(
                links=ExpenseEntryRelationshipLinks(related=f"/entries/{entry_id}")
            )
        ),
    )


def test_expense_data_shape():
    data = _expense().to_dict()
    assert data["type"] == "expense"
    assert data["links"] == {"self": "/entries/69/expenses/5"}
    assert data["relationships"]["entries"]["links"]["related"] == "/entries/69"
    assert data["attributes"]["payment_method"] == "card"


def test_create_response_round_trip_matches_expense_info():
    resp = CreateExpenseResponse.from_json(CreateExpenseResponse(data=_expense()).to_json())
    attrs = resp.data.attributes
    assert resp.data.type == "expense"
    assert (attrs.name, attrs.description, attrs.payment_method) == (
        "name",
        "description",
        "card",
    )
    assert attrs.value == MonetaryValueAttributes(amount=1500, currency="RON", exponent=-2)
    assert "69/expenses/5" in resp.data.links.self_link
    assert "69" in resp.data.relationships.entries.links.related


def test_create_request_optional_fields_omitted():
    attrs = CreateExpenseAttributes(
        value=MonetaryValueCreationAttributes(amount=1000, currency="RON"), name="car trip"
    )
    assert attrs.to_dict() == {
        "value": {"amount": 1000, "currency": "RON"},
        "name": "car trip",
    }
    req = CreateExpenseRequest(data=CreateExpenseData(type=EXPENSE_TYPE, attributes=attrs))
    parsed = CreateExpenseRequest.from_json(req.to_json())
    assert parsed == req
    assert parsed.data.attributes.description is None


def test_update_attributes_always_carry_value():
    assert UpdateExpenseAttributes().to_dict() == {"value": {}}
    req = UpdateExpenseRequest.from_dict(
        {"data": {"type": "expense", "attributes": {"value": {"amount": 0}, "name": "pizza"}}}
    )
    assert req.data.attributes.value.amount == 0
    assert req.data.attributes.name == "pizza"
    assert UpdateExpenseRequest.from_dict(req.to_dict()) == req


def test_list_params_use_bracketed_keys():
    params = ListExpenseParams(amount_gt=10, amount_lt=100, currency="RON")
    data = params.to_dict()
    assert data == {"amount[gt]": 10, "amount[lt]": 100, "currency": "RON"}
    assert ListExpenseParams.from_dict(data) == params


def test_list_response_round_trip():
    items = [
        ExpenseListItemData(id=str(n), type=EXPENSE_TYPE, attributes=ExpenseAttributes(name=f"e{n}"))
        for n in (1, 2)
    ]
    resp = ListExpenseResponse(
        data=items, links=ListExpenseLinks(self_link="/expenses", home=HomeLink(href="/"))
    )
    parsed = ListExpenseResponse.from_json(resp.to_json())
    assert parsed == resp
    assert [item.attributes.name for item in parsed.data] == ["e1", "e2"]
    assert parsed.to_dict()["links"]["self"] == "/expenses"


def test_delete_and_get_responses_share_data():
    expense = _expense()
    deleted = DeleteExpenseResponse.from_dict({"data": expense.to_dict()})
    got = GetExpenseResponse.from_dict({"data": expense.to_dict()})
    assert deleted.data == got.data == expense


def test_wrong_name_type_is_rejected():
    with pytest.raises(ValueError):
        ExpenseAttributes.from_dict({"name": 12})