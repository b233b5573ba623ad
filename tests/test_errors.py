import pytest

from casheer.errors import NotFoundError


def test_message_is_details():
    err = NotFoundError("debt missing", None)
    assert str(err) == "debt missing"
    assert err.details == "debt missing"


def test_original_error_is_chained():
    orig = KeyError("row")
    with pytest.raises(NotFoundError) as info:
        raise NotFoundError("entry missing", orig)
    assert info.value.orig is orig
    assert info.value.__cause__ is orig


def test_without_original_error():
    err = NotFoundError("gone")
    assert err.orig is None
    assert err.__cause__ is None


def test_caught_as_lookup_error():
    err = NotFoundError("absent", ValueError("x"))
    assert str(err) == "absent"
    assert err.details == "absent"
    assert err.orig.args == ("x",)
    with pytest.raises(LookupError) as info:
        raise err
    assert info.value.details == "absent"