# tests/test_params.py
from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta, timezone

import pytest

from congressgov_client import FormatType, SortType, UrlConstructionError
from congressgov_client.params import (BillListParams, CommitteeReportListParams,
                                       CongressionalRecordParams, GenericParams,
                                       MemberListParams, format_query_value)


def test_defaults_only_carry_format():
    p = MemberListParams()
    assert p.format is FormatType.JSON
    assert p.options() == {"format": FormatType.JSON}
    assert p.to_query_pairs() == [("format", "json")]


def test_with_returns_new_bundle_and_leaves_original_alone():
    base = MemberListParams()
    p = base.with_limit(10)
    assert p is not base
    assert base.limit is None
    assert p.limit == 10
    # frozen
    with pytest.raises(FrozenInstanceError):
        p.limit = 5


def test_chain_is_order_independent():
    a = MemberListParams().with_limit(10).with_current_member(True)
    b = MemberListParams().with_current_member(True).with_limit(10)
    assert a == b
    assert a.to_query_pairs() == b.to_query_pairs()


def test_set_then_clear_equals_default():
    p = MemberListParams().with_offset(20).with_offset(None)
    assert p == MemberListParams()
    assert "offset" not in p.options()


def test_reset_named_and_all():
    p = MemberListParams().with_limit(5).with_current_member(False).with_format(FormatType.XML)
    assert p.reset("limit").limit is None
    assert p.reset("limit").current_member is False
    assert p.reset() == MemberListParams()
    with pytest.raises(AttributeError):
        p.reset("not_an_option")


def test_query_order_is_declared_order():
    p = (MemberListParams()
         .with_current_member(True)
         .with_to_date_time("2024-01-02T00:00:00Z")
         .with_limit(10)
         .with_offset(0))
    keys = [k for k, _ in p.to_query_pairs()]
    assert keys == ["format", "offset", "limit", "toDateTime", "currentMember"]


def test_family_specific_options_come_after_shared_ones():
    keys = [k for k, _ in CommitteeReportListParams().with_conference(True).with_limit(1).to_query_pairs()]
    assert keys == ["format", "limit", "conference"]
    keys = [k for k, _ in CongressionalRecordParams().with_day(3).with_year(2022).with_month(6).to_query_pairs()]
    assert keys == ["format", "year", "month", "day"]


def test_values_are_not_validated():
    # the server decides what a negative limit means
    assert ("limit", "-5") in BillListParams().with_limit(-5).to_query_pairs()


def test_value_formatting():
    assert format_query_value(True) == "true"
    assert format_query_value(False) == "false"
    assert format_query_value(SortType.UPDATE_DATE_DESC) == "updateDate desc"
    assert format_query_value(datetime(2022, 4, 1, 12, 30, 0)) == "2022-04-01T12:30:00Z"
    eastern = timezone(timedelta(hours=-5))
    assert format_query_value(datetime(2022, 4, 1, 7, 0, 0, tzinfo=eastern)) == "2022-04-01T12:00:00Z"
    assert format_query_value(date(2022, 4, 1)) == "2022-04-01T00:00:00Z"
    with pytest.raises(UrlConstructionError):
        format_query_value({"not": "encodable"})


def test_generic_params_know_every_option():
    p = (GenericParams().with_conference(True).with_current_member(False)
         .with_year(2020).with_sort(SortType.UPDATE_DATE_ASC))
    assert p.options() == {
        "format": FormatType.JSON,
        "sort": SortType.UPDATE_DATE_ASC,
        "conference": True,
        "currentMember": False,
        "year": 2020,
    }
