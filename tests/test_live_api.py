"""
Live checks against api.congress.gov.

Skipped unless an API key is available. Run with ``pytest -m live``.
"""
import os

import pytest
from dotenv import load_dotenv

from congressgov_client import CongressAPIClient, Endpoint, ShapeMismatch
from congressgov_client.params import BillActionsParams, MemberListParams
from congressgov_client.response_models import (BillActionsResponse,
                                                BillDetailsResponse,
                                                MembersResponse)

load_dotenv()

API_KEY = os.getenv("CDG_API_KEY") or os.getenv("CONGRESS_API_KEY")

pytestmark = [
    pytest.mark.live,
    pytest.mark.skipif(not API_KEY, reason="no Congress.gov API key in the environment"),
]


@pytest.fixture(scope="module")
def client():
    """Create a single client instance for all tests."""
    return CongressAPIClient(
        api_key=API_KEY,
        min_interval=0.1,
        timeout=30,
        max_tries=3,
        log_level=20  # INFO level for debugging
    )


@pytest.mark.timeout(10)
def test_member_list(client):
    members = client.fetch(Endpoint.member_list(MemberListParams().with_limit(5)), MembersResponse)
    assert 0 < len(members.members) <= 5
    assert members.members[0].bioguide_id is not None


@pytest.mark.timeout(10)
def test_bill_details(client):
    resp = client.fetch_default(Endpoint.bill_details(117, "hr", 3076))
    assert isinstance(resp, BillDetailsResponse)
    assert resp.bill.congress == 117


@pytest.mark.timeout(10)
def test_bill_actions(client):
    """Test fetching bill actions."""
    ep = Endpoint.bill_actions(117, "hr", 3076, BillActionsParams().with_limit(5))
    try:
        actions = client.fetch(ep, BillActionsResponse)
    except ShapeMismatch as e:
        pytest.fail(f"Actions body no longer matches:\n{e.structural.render(pretty=True)}")
    assert len(actions.actions) > 0
    assert actions.actions[0].action_date is not None


@pytest.mark.timeout(20)
def test_iter_pages(client):
    pages = list(client.iter_pages(Endpoint.member_list(MemberListParams().with_limit(2)), max_pages=2))
    assert len(pages) == 2
    assert pages[0].get_path("members.0.bioguideId") != pages[1].get_path("members.0.bioguideId")
