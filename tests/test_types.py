from __future__ import annotations

from kcadmin.types import ResourceRepresentation, UserRepresentation, as_payload


def test_resource_id_round_trips_under_underscore_key() -> None:
    model = ResourceRepresentation.model_validate({"_id": "abc", "name": "test:1", "extra": 1})

    assert model.id == "abc"
    assert as_payload(model) == {"_id": "abc", "name": "test:1", "extra": 1}


def test_model_payload_omits_none_fields() -> None:
    user = UserRepresentation(id="u1", username="test1", email=None)

    assert as_payload(user) == {"id": "u1", "username": "test1"}


def test_dict_payload_keeps_explicit_null() -> None:
    payload = as_payload({"id": "u1", "username": "test1", "email": None})

    assert payload == {"id": "u1", "username": "test1", "email": None}
