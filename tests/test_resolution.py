# tests/test_resolution.py
import dataclasses
import json
import typing
from typing import Any, Union

import pytest

from congressgov_client import (SHAPES, GenericResponse, MalformedBody,
                                ResponseShape, ShapeMismatch, materialize,
                                render_structural, serialize_response,
                                to_structural, try_materialize)
from congressgov_client.response_models import (BillDetailsResponse,
                                                BillsResponse, BillSummary,
                                                CommitteeMeetingDetailsResponse,
                                                LatestAction, MembersResponse,
                                                Pagination)

BILL_DETAILS = {
    "bill": {
        "congress": 118,
        "number": "1",
        "type": "HR",
        "title": "Lower Energy Costs Act",
        "latestAction": {"actionDate": "2023-03-30", "text": "Received in the Senate."},
    },
    "request": {"contentType": "application/json", "format": "json"},
}


# ------------- structural form -------------
def test_from_json_keeps_everything_and_is_read_only():
    g = GenericResponse.from_json(json.dumps({"a": {"b": [1, {"c": None}]}, "z": True}))
    assert g["a"]["b"][1]["c"] is None
    assert isinstance(g["a"], GenericResponse)
    assert isinstance(g["a"]["b"], tuple)
    assert g.to_dict() == {"a": {"b": [1, {"c": None}]}, "z": True}
    with pytest.raises(TypeError):
        g["new"] = 1
    with pytest.raises(AttributeError):
        g.anything = 1


def test_get_path():
    g = GenericResponse(BILL_DETAILS)
    assert g.get_path("bill.latestAction.text") == "Received in the Senate."
    assert g.get_path("bill.summaries.count") is None
    assert g.get_path("bill.summaries.count", 0) == 0


@pytest.mark.parametrize("body", ["", "not json", "[1, 2]", "42", "<root/>",
                                  '{"a": NaN}', '{"a": [Infinity]}', '{"a": -Infinity}'])
def test_malformed_body(body):
    with pytest.raises(MalformedBody):
        GenericResponse.from_json(body)


def test_render_compact_and_pretty():
    g = GenericResponse({"bill": {"number": "1"}, "extraKey": [1, 2]})
    assert g.render() == '{"bill":{"number":"1"},"extraKey":[1,2]}'
    pretty = g.render(pretty=True)
    assert pretty.startswith("{\n  \"bill\"")
    assert json.loads(pretty) == g.to_dict()


def test_render_refuses_non_json_numbers():
    g = GenericResponse({"a": float("nan")})
    with pytest.raises(ValueError):
        g.render()
    with pytest.raises(ValueError):
        render_structural({"a": float("inf")}, pretty=True)


# ------------- materialize -------------
def test_bill_details_without_summaries():
    bill = materialize(GenericResponse(BILL_DETAILS), BillDetailsResponse).bill
    assert bill.number == "1"
    assert bill.latest_action.text == "Received in the Senate."
    assert bill.summaries is None


def test_shape_by_name():
    resp = materialize(BILL_DETAILS, "BillDetailsResponse")
    assert isinstance(resp, BillDetailsResponse)
    with pytest.raises(KeyError):
        materialize(BILL_DETAILS, "NoSuchResponse")


def test_extra_keys_never_break_materialize():
    data = {**BILL_DETAILS, "brandNewTopLevel": {"x": 1}}
    data["bill"] = {**BILL_DETAILS["bill"], "futureField": [1, 2]}
    resp = materialize(data, BillDetailsResponse)
    assert resp.extra["brandNewTopLevel"] == {"x": 1}
    assert resp.bill.extra["futureField"] == [1, 2]


def test_missing_required_field_is_a_mismatch_with_structural_attached():
    g = GenericResponse({"pagination": {"count": 0}})
    with pytest.raises(ShapeMismatch) as exc:
        materialize(g, BillsResponse)
    err = exc.value
    assert err.path == "$.bills"
    assert err.actual == "missing"
    assert err.structural is g
    assert '"pagination"' in err.structural.render(pretty=True)


def test_mismatch_on_mapping_with_non_str_keys():
    data = {1: "x"}
    with pytest.raises(ShapeMismatch) as exc:
        materialize(data, "BillsResponse")
    assert exc.value.path == "$.bills"
    assert exc.value.structural is data


def test_wrong_kind_in_required_field_is_a_mismatch():
    with pytest.raises(ShapeMismatch) as exc:
        materialize({"bills": {"item": []}}, BillsResponse)
    assert exc.value.expected == "array"
    assert exc.value.actual == "object"

    with pytest.raises(ShapeMismatch) as exc:
        materialize({"bills": [1]}, BillsResponse)
    assert exc.value.path == "$.bills[0]"

    with pytest.raises(ShapeMismatch):
        materialize({"bill": None}, BillDetailsResponse)


def test_required_field_inside_required_object():
    with pytest.raises(ShapeMismatch) as exc:
        materialize({"committeeMeeting": {"title": "Markup"}}, CommitteeMeetingDetailsResponse)
    assert exc.value.path == "$.committeeMeeting.eventId"


def test_optional_field_with_wrong_kind_degrades_into_extra():
    data = {"bills": [{"congress": "one hundred eighteen", "number": 7, "title": "T"}]}
    bill = materialize(data, BillsResponse).bills[0]
    assert bill.congress is None
    assert bill.extra["congress"] == "one hundred eighteen"
    assert bill.number == 7
    # nothing lost on the way back
    assert to_structural(materialize(data, BillsResponse)).to_dict() == data


def test_bool_is_not_a_number():
    bill = materialize({"bills": [{"congress": True}]}, BillsResponse).bills[0]
    assert bill.congress is None
    assert bill.extra == {"congress": True}


def test_try_materialize():
    assert try_materialize({}, MembersResponse) is None
    assert try_materialize({"members": []}, MembersResponse) == MembersResponse(members=[])


# ------------- back to structural -------------
def test_round_trip_from_shape():
    original = BillsResponse(
        bills=[BillSummary(congress=118, number="3076", title="Postal Service Reform Act",
                           latest_action=LatestAction(action_date="2022-04-06", text="Became Public Law"),
                           extra={"someNewKey": {"nested": [1]}})],
        pagination=Pagination(count=1),
        extra={"note": "x"},
    )
    again = materialize(to_structural(original), BillsResponse)
    assert again == original


def test_round_trip_from_structural_keeps_unknown_keys():
    data = {"members": [{"bioguideId": "L000174", "name": "Leahy, Patrick J.",
                         "terms": {"item": [{"chamber": "Senate", "startYear": 1975}]},
                         "unmodelled": {"deep": True}}],
            "pagination": {"count": 1, "next": None}}
    resp = materialize(data, MembersResponse)
    assert resp.members[0].terms.item[0].start_year == 1975
    back = to_structural(resp).to_dict()
    assert back["members"][0]["unmodelled"] == {"deep": True}
    assert back["pagination"] == {"count": 1, "next": None}


def test_explicit_nulls_survive_round_trip():
    data = {"bills": [{"number": "1", "title": None}], "pagination": {"count": 1, "next": None}}
    resp = materialize(data, "BillsResponse")
    assert resp.pagination.next is None
    assert resp.bills[0].title is None
    assert to_structural(resp).to_dict() == data


def _sample(tp, depth=0):
    """A non-empty value of type ``tp`` for building shapes."""
    if tp is Any:
        return "any"
    origin = typing.get_origin(tp)
    if origin is Union:
        return _sample([a for a in typing.get_args(tp) if a is not type(None)][0], depth)
    if origin in (list, typing.List):
        (item_tp,) = typing.get_args(tp)
        return [_sample(item_tp, depth + 1)]
    if origin in (dict, typing.Dict) or tp is dict:
        return {"key": [1, "two"]}
    if isinstance(tp, type) and issubclass(tp, ResponseShape):
        return _sample_shape(tp, depth + 1)
    return {bool: True, int: 7, float: 1.5, str: "text"}[tp]


def _sample_shape(shape, depth=0):
    hints = typing.get_type_hints(shape)
    kwargs = {}
    for f in dataclasses.fields(shape):
        if f.name == "extra":
            continue
        required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        if required or depth < 4:
            kwargs[f.name] = _sample(hints[f.name], depth)
    return shape(**kwargs, extra={"unmodelledKey": {"n": [1]}})


@pytest.mark.parametrize("name", sorted(SHAPES))
def test_every_shape_round_trips(name):
    instance = _sample_shape(SHAPES[name])
    assert materialize(to_structural(instance), name) == instance


def test_serialize_response_handles_both_forms():
    resp = materialize(BILL_DETAILS, BillDetailsResponse)
    assert json.loads(serialize_response(resp)) == BILL_DETAILS
    assert json.loads(serialize_response(GenericResponse(BILL_DETAILS), pretty=True)) == BILL_DETAILS
