"""Tests for exceptions module."""

from __future__ import annotations

from openasset_rest.exceptions import (
    PropertyNotFoundError,
    ReservedParameterError,
    RestClientError,
    ValidationError,
)

# -- PropertyNotFoundError ---------------------------------------------------


def test_property_not_found_message_carries_field_and_resource():
    err = PropertyNotFoundError("nme", "File", ["name", "id"])
    assert "[nme]" in str(err)
    assert "'File'" in str(err)


def test_property_not_found_fuzzy_suggestion():
    err = PropertyNotFoundError("captoin", "File", ["caption", "id", "rank"])
    assert err.suggestions == ["caption"]
    assert "Did you mean: caption?" in str(err)


def test_property_not_found_no_matches():
    err = PropertyNotFoundError("zzzzz", "File", ["id", "caption"])
    assert err.suggestions == []
    assert "Did you mean" not in str(err)


def test_property_not_found_to_dict():
    err = PropertyNotFoundError("emial", "User", ["name", "email"])
    d = err.to_dict()
    assert d["error"] == "PROPERTY_NOT_FOUND"
    assert d["field"] == "emial"
    assert d["resource"] == "User"
    assert d["available_fields"] == ["email", "name"]
    assert "email" in d["suggestions"]


def test_property_not_found_is_validation_error():
    err = PropertyNotFoundError("x", "File")
    assert isinstance(err, ValidationError)
    assert isinstance(err, RestClientError)
    assert err.path == "x"
    assert err.available_fields == []


# -- ReservedParameterError --------------------------------------------------


def test_reserved_parameter_to_dict():
    err = ReservedParameterError("limit", frozenset({"offset", "limit"}))
    d = err.to_dict()
    assert d["error"] == "RESERVED_PARAMETER"
    assert d["parameter"] == "limit"
    assert d["reserved"] == ["limit", "offset"]


# -- Base --------------------------------------------------------------------


def test_base_to_dict():
    d = RestClientError("boom").to_dict()
    assert d == {"error": "RestClientError", "message": "boom"}


def test_validation_error_to_dict():
    d = ValidationError("bad", path="limit").to_dict()
    assert d == {"error": "VALIDATION_ERROR", "message": "bad", "path": "limit"}
