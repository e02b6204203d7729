#%%
from dotenv import load_dotenv
from tqdm import tqdm

from congressgov_client import (ChamberType, CongressAPIClient, Endpoint,
                                ShapeMismatch)
from congressgov_client.params import HearingByChamberParams, MemberListParams
from congressgov_client.response_models import (HearingDetailsResponse,
                                                HearingsResponse,
                                                MembersResponse)

load_dotenv()

#%%

client = CongressAPIClient(
    timeout=60,
    min_interval=0.1,   # cap at ~10 rps
    max_tries=4,        # retry attempts for 429/5xx/timeouts
)

#%%

members = client.fetch(
    Endpoint.member_list(MemberListParams().with_limit(10).with_current_member(True)),
    MembersResponse,
)
for m in members.members:
    print(m.name, m.party_name, m.state)

#%%
TARGETS = {"hsas00", "ssas00", "ssfr00", "hsfa00"}

first_page = client.fetch(
    Endpoint.hearing_by_chamber(118, ChamberType.HOUSE, HearingByChamberParams().with_limit(50)),
    HearingsResponse,
)

# %%

hearings_to_keep = []
for h in tqdm(first_page.hearings):
    try:
        full = client.fetch(
            Endpoint.hearing_details(118, ChamberType.HOUSE, h.jacket_number),
            HearingDetailsResponse,
        ).hearing
    except ShapeMismatch as e:
        print(e.structural.render(pretty=True))
        continue
    if any(c.system_code in TARGETS for c in full.committees or []):
        for f in full.formats or []:
            if f.type in ("PDF", "Formatted Text"):
                hearings_to_keep.append({"title": full.title, "url": f.url})
                print(full.title, f.url)
    if len(hearings_to_keep) >= 10:
        break
# %%
