# tests/test_url_builders.py
import pytest

from congressgov_client import (AmendmentType, BillType, ChamberType,
                                CommunicationType, Endpoint, EndpointKind,
                                SortType, UrlConstructionError, generate_url)
from congressgov_client.endpoints import ROUTES
from congressgov_client.params import (BillActionsParams, BillListParams,
                                       GenericParams, MemberListParams)
from congressgov_client.response_models import (BillDetailsResponse,
                                                MembersResponse)
from congressgov_client.url_builders import build_path

API_BASE = "https://api.congress.gov/v3"
KEY = "test_key"


def test_member_list_example():
    ep = Endpoint.member_list(MemberListParams().with_limit(10).with_current_member(True))
    assert generate_url(ep, KEY) == f"{API_BASE}/member?format=json&limit=10&currentMember=true&api_key={KEY}"


def test_build_is_deterministic():
    ep = Endpoint.bill_by_type(118, BillType.HR, None)
    assert generate_url(ep, KEY) == generate_url(ep, KEY)
    assert generate_url(ep, KEY) == generate_url(Endpoint.bill_by_type(118, BillType.HR), KEY)


def test_api_key_is_last_and_absent_options_omitted():
    ep = Endpoint.bill_list(BillListParams().with_sort(SortType.UPDATE_DATE_DESC).with_offset(250))
    url = generate_url(ep, KEY)
    assert url == f"{API_BASE}/bill?format=json&offset=250&sort=updateDate+desc&api_key={KEY}"
    assert "limit" not in url
    assert "fromDateTime" not in url


def test_dates_keep_colons():
    ep = Endpoint.bill_list(BillListParams().with_from_date_time("2022-08-04T04:02:00Z"))
    assert "fromDateTime=2022-08-04T04:02:00Z" in generate_url(ep, KEY)


@pytest.mark.parametrize("endpoint, path", [
    (Endpoint.bill_details(118, BillType.HR, 1), "bill/118/hr/1"),
    (Endpoint.bill_actions(117, BillType.HR, 3076), "bill/117/hr/3076/actions"),
    (Endpoint.bill_related(117, BillType.S, 5), "bill/117/s/5/relatedbills"),
    (Endpoint.bill_summaries(117, BillType.S, 5), "bill/117/s/5/summaries"),
    (Endpoint.law_details(118, "pub", 108), "law/118/pub/108"),
    (Endpoint.amendment_actions(117, AmendmentType.SAMDT, 2137), "amendment/117/samdt/2137/actions"),
    (Endpoint.congress_current(), "congress/current"),
    (Endpoint.member_by_congress_state_district(118, "MI", 10), "member/congress/118/MI/10"),
    (Endpoint.member_sponsored("L000174"), "member/L000174/sponsored-legislation"),
    (Endpoint.committee_details(ChamberType.HOUSE, "hsag00"), "committee/house/hsag00"),
    (Endpoint.committee_senate_communications(ChamberType.SENATE, "ssas00"),
     "committee/senate/ssas00/senate-communication"),
    (Endpoint.committee_print_text(117, ChamberType.HOUSE, 48144), "committee-print/117/house/48144/text"),
    (Endpoint.committee_meeting_details(118, ChamberType.HOUSE, 115538), "committee-meeting/118/house/115538"),
    (Endpoint.daily_record_articles(168, 153), "daily-congressional-record/168/153/articles"),
    (Endpoint.bound_record_by_day(1990, 5, 18), "bound-congressional-record/1990/5/18"),
    (Endpoint.house_communication_details(117, CommunicationType.EC, 3324), "house-communication/117/ec/3324"),
    (Endpoint.house_requirement_matching(8070), "house-requirement/8070/matching-communications"),
    (Endpoint.nominees(117, 2467, 1), "nomination/117/2467/1"),
    (Endpoint.treaty_partitioned_actions(114, 13, "A"), "treaty/114/13/A/actions"),
])
def test_paths(endpoint, path):
    assert build_path(endpoint) == path
    assert generate_url(endpoint, KEY).startswith(f"{API_BASE}/{path}?format=json")


def test_absent_identifier_omits_its_segment():
    assert build_path(Endpoint.bill_details(118, BillType.HR, None)) == "bill/118/hr"
    assert build_path(Endpoint.member_details("")) == "member"
    assert "//" not in build_path(Endpoint.bill_actions(118, None, 7))


def test_identifiers_are_percent_encoded():
    ep = Endpoint.member_by_state("M I/../x?y")
    assert build_path(ep) == "member/M%20I%2F..%2Fx%3Fy"


@pytest.mark.parametrize("bad", [True, 1.5, -1, {"a": 1}, "..", "a\nb", "\ud800"])
def test_malformed_identifiers_raise(bad):
    ep = Endpoint.member_details(bad)   # construction never fails
    with pytest.raises(UrlConstructionError):
        generate_url(ep, KEY)


def test_wrong_param_family_raises():
    ep = Endpoint.member_list(BillListParams())
    with pytest.raises(UrlConstructionError):
        generate_url(ep, KEY)
    # sibling families are not interchangeable either
    with pytest.raises(UrlConstructionError):
        generate_url(Endpoint.bill_by_congress(118, BillListParams()), KEY)


def test_unencodable_option_value_raises():
    ep = Endpoint.bill_actions(117, BillType.HR, 1, BillActionsParams().with_limit(object()))
    with pytest.raises(UrlConstructionError):
        generate_url(ep, KEY)


def test_custom_endpoint_encodes_each_segment():
    ep = Endpoint.custom("/bill/118/hr/1/actions/", GenericParams().with_limit(5))
    assert generate_url(ep, KEY) == f"{API_BASE}/bill/118/hr/1/actions?format=json&limit=5&api_key={KEY}"
    weird = Endpoint.custom("daily-congressional-record?format=xml")
    assert build_path(weird) == "daily-congressional-record%3Fformat%3Dxml"


def test_custom_endpoint_needs_generic_params_and_a_path():
    with pytest.raises(UrlConstructionError):
        generate_url(Endpoint.custom("bill", MemberListParams()), KEY)
    with pytest.raises(UrlConstructionError):
        generate_url(Endpoint.custom("///"), KEY)


def test_api_key_is_required():
    with pytest.raises(UrlConstructionError):
        generate_url(Endpoint.bill_list(), "")


def test_every_kind_has_a_route_and_default_params():
    assert set(ROUTES) == set(EndpointKind)
    for kind, route in ROUTES.items():
        assert route.params().options()["format"].value == "json"


def test_default_shapes():
    assert Endpoint.member_list().default_shape is MembersResponse
    assert Endpoint.law_details(118, "pub", 1).default_shape is BillDetailsResponse
    assert Endpoint.custom("bill").default_shape is None


def test_descriptors_are_values():
    a = Endpoint.bill_details(118, BillType.HR, 1)
    b = Endpoint.bill_details(118, BillType.HR, 1)
    assert a == b
    assert hash(a) == hash(b)
