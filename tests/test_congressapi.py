# tests/test_congressapi.py
import pytest
import requests
import requests_mock

from congressgov_client import (CongressAPIClient, Endpoint, GenericResponse,
                                MalformedBody, MissingCredential, ShapeMismatch,
                                TransportError, TransportResponse,
                                UrlConstructionError)
from congressgov_client.params import BillDetailsParams, MemberListParams
from congressgov_client.resolution import logger as resolution_logger
from congressgov_client.response_models import (BillDetailsResponse,
                                                CommitteeDetailsResponse,
                                                MembersResponse)
from congressgov_client.transport import RequestsTransport

API_BASE = "https://api.congress.gov/v3"

BILL_BODY = {
    "bill": {"congress": 118, "number": "1", "type": "HR", "title": "Lower Energy Costs Act"},
    "request": {"contentType": "application/json", "format": "json"},
}


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("CDG_API_KEY", "test_key")
    return CongressAPIClient()


@pytest.fixture
def no_sleep(monkeypatch):
    monkeypatch.setattr("congressgov_client.transport.time.sleep", lambda s: None)


# ------------- credentials -------------
def test_missing_key_raises(monkeypatch):
    for name in ("CDG_API_KEY", "CONGRESS_API_KEY", "CONGRESS_DOT_GOV_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    with pytest.raises(MissingCredential):
        CongressAPIClient()


def test_explicit_key_wins(monkeypatch):
    monkeypatch.setenv("CDG_API_KEY", "from_env")
    assert CongressAPIClient(api_key="explicit").api_key == "explicit"


def test_fallback_env_var(monkeypatch):
    monkeypatch.delenv("CDG_API_KEY", raising=False)
    monkeypatch.setenv("CONGRESS_API_KEY", "older_name")
    assert CongressAPIClient().api_key == "older_name"


# ------------- urls -------------
def test_url_with_key(client):
    u = client._url_with_key(f"{API_BASE}/hearing/118/house/12345?format=json")
    assert u == f"{API_BASE}/hearing/118/house/12345?format=json&api_key=test_key"
    # already keyed links are left alone
    assert client._url_with_key(u) == u
    # Non-API assets pass through
    w = client._url_with_key("https://www.congress.gov/118/chrg/foo.pdf")
    assert "api_key" not in w
    assert client._url_with_key(None) is None


def test_build_url(client):
    url = client.build_url(Endpoint.member_list(MemberListParams().with_limit(10).with_current_member(True)))
    assert url == f"{API_BASE}/member?format=json&limit=10&currentMember=true&api_key=test_key"


def test_bad_endpoint_fails_before_any_request(client):
    with requests_mock.Mocker() as m:
        with pytest.raises(UrlConstructionError):
            client.fetch(Endpoint.member_list(BillDetailsParams()))
        with pytest.raises(UrlConstructionError):
            client.fetch(Endpoint.bill_details(118, "hr", -1))
        assert m.call_count == 0


# ------------- fetch -------------
def test_fetch_structural(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/bill/118/hr/1", json={**BILL_BODY, "somethingNew": [1]})
        resp = client.fetch(Endpoint.bill_details(118, "hr", 1))
        assert isinstance(resp, GenericResponse)
        assert resp.get_path("bill.title") == "Lower Energy Costs Act"
        assert resp["somethingNew"] == (1,)
        assert "api_key=test_key" in m.last_request.url


def test_fetch_with_shape(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/bill/118/hr/1", json=BILL_BODY)
        resp = client.fetch(Endpoint.bill_details(118, "hr", 1), BillDetailsResponse)
        assert resp.bill.number == "1"
        assert resp.bill.summaries is None
        assert resp.request.content_type == "application/json"

        by_name = client.fetch(Endpoint.bill_details(118, "hr", 1), "BillDetailsResponse")
        assert by_name == resp


def test_fetch_default(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/committee/house/hsag00", json={
            "committee": {
                "systemCode": "hsag00",
                "name": "House Agriculture",
                "subcommittees": [
                    {"systemCode": "hsag03", "name": "Subcommittee on Commodity Markets"},
                    {"systemCode": "hsag05", "name": "Subcommittee on Conservation"},
                ],
            }
        })
        committee = client.fetch_default(Endpoint.committee_details("house", "hsag00"))
        assert isinstance(committee, CommitteeDetailsResponse)
        assert committee.committee.system_code == "hsag00"
        assert len(committee.committee.subcommittees) == 2


def test_shape_mismatch_and_fallback(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/bill/118/hr/1", json={"error": "gone sideways"})
        ep = Endpoint.bill_details(118, "hr", 1)
        with pytest.raises(ShapeMismatch) as exc:
            client.fetch(ep, BillDetailsResponse)
        assert exc.value.path == "$.bill"
        assert "gone sideways" in exc.value.structural.render(pretty=True)

        resp = client.fetch(ep, BillDetailsResponse, fallback=True)
        assert isinstance(resp, GenericResponse)
        assert resp["error"] == "gone sideways"


def test_http_error_is_not_retried_by_default(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/bill/118/hr/99999", status_code=404, text='{"error": "Unknown resource"}')
        with pytest.raises(TransportError) as exc:
            client.fetch(Endpoint.bill_details(118, "hr", 99999))
        assert exc.value.status_code == 404
        assert "test_key" not in str(exc.value.url)
        assert m.call_count == 1


def test_non_json_body(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/bill/118/hr/1", text="<html>maintenance</html>")
        with pytest.raises(MalformedBody):
            client.fetch(Endpoint.bill_details(118, "hr", 1))


def test_retry_when_opted_in(monkeypatch, no_sleep):
    monkeypatch.setenv("CDG_API_KEY", "test_key")
    client = CongressAPIClient(max_tries=2)
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/bill/118/hr/1", [
            {"status_code": 429, "text": "slow down", "headers": {"Retry-After": "1"}},
            {"json": BILL_BODY},
        ])
        resp = client.fetch(Endpoint.bill_details(118, "hr", 1), BillDetailsResponse)
        assert resp.bill.type == "HR"
        assert m.call_count == 2


def test_network_error_raises_transport_error(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/bill/118/hr/1", exc=requests.exceptions.ConnectTimeout)
        with pytest.raises(TransportError) as exc:
            client.fetch(Endpoint.bill_details(118, "hr", 1))
        assert exc.value.status_code is None


def test_custom_transport(monkeypatch):
    monkeypatch.setenv("CDG_API_KEY", "test_key")

    class Canned:
        def __init__(self):
            self.urls = []

        def get(self, url):
            self.urls.append(url)
            return TransportResponse(200, '{"members": []}', url)

    transport = Canned()
    client = CongressAPIClient(transport=transport)
    resp = client.fetch(Endpoint.member_list(), MembersResponse)
    assert resp.members == []
    assert transport.urls == [f"{API_BASE}/member?format=json&api_key=test_key"]


def test_loggers_share_package_namespace(client):
    names = [client.logger.name, client.transport.logger.name, resolution_logger.name]
    assert names == ["congressgov_client.client", "congressgov_client.transport",
                     "congressgov_client.resolution"]


def test_transport_rejects_zero_tries():
    with pytest.raises(ValueError):
        RequestsTransport(max_tries=0)


def test_parse_retry_after():
    assert RequestsTransport._parse_retry_after("3") == 3.0
    assert RequestsTransport._parse_retry_after("") == 0.0
    assert RequestsTransport._parse_retry_after("not a date") == 0.0
    assert RequestsTransport._parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") == 0.0


# ------------- pagination -------------
def test_iter_pages_follows_next(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/member", json={
            "members": [{"bioguideId": "A000001", "name": "Smith, Alice"}],
            "pagination": {"count": 2, "next": f"{API_BASE}/member?offset=1&limit=1&format=json"},
        })
        m.get(f"{API_BASE}/member?offset=1&api_key=test_key", json={
            "members": [{"bioguideId": "B000002", "name": "Jones, Bob"}],
            "pagination": {"count": 2},
        })
        pages = list(client.iter_pages(Endpoint.member_list(MemberListParams().with_limit(1)), MembersResponse))
        assert [p.members[0].bioguide_id for p in pages] == ["A000001", "B000002"]
        assert m.call_count == 2


def test_iter_pages_stops_on_repeated_link(client):
    page2 = f"{API_BASE}/member?offset=1&format=json"
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/member", json={"members": [], "pagination": {"next": page2}})
        m.get(f"{API_BASE}/member?offset=1", json={"members": [], "pagination": {"next": page2}})
        pages = list(client.iter_pages(Endpoint.member_list()))
        assert len(pages) == 2
        assert m.call_count == 2


def test_iter_pages_max_pages(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/member", json={
            "members": [],
            "pagination": {"next": f"{API_BASE}/member?offset=250&format=json"},
        })
        pages = list(client.iter_pages(Endpoint.member_list(), max_pages=1))
        assert len(pages) == 1
        assert m.call_count == 1
