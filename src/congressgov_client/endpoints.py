"""
The closed catalog of Congress.gov v3 endpoints.

An ``Endpoint`` is a plain value: a kind tag, the path identifiers in
route order, and a parameter bundle. Building one never fails; whether
it can be turned into a URL is decided by ``url_builders.generate_url``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Tuple, Type, Union

from . import params as p
from .api_types import (AmendmentType, BillType, ChamberType,
                        CommitteeReportType, CommunicationType, LawType)
from .response_models import SHAPES

Congress = Union[int, str]
Number = Union[int, str]


class Route(NamedTuple):
    segments: Tuple[str, ...]        # literals, or "{name}" for an identifier
    params: Type[p.ApiParams]
    shape: Optional[str] = None      # name in response_models.SHAPES

    @property
    def placeholders(self) -> Tuple[str, ...]:
        return tuple(s[1:-1] for s in self.segments if s.startswith("{"))


class EndpointKind(Enum):
    # bills
    BILL_LIST = "bill_list"
    BILL_BY_CONGRESS = "bill_by_congress"
    BILL_BY_TYPE = "bill_by_type"
    BILL_DETAILS = "bill_details"
    BILL_ACTIONS = "bill_actions"
    BILL_AMENDMENTS = "bill_amendments"
    BILL_COMMITTEES = "bill_committees"
    BILL_COSPONSORS = "bill_cosponsors"
    BILL_RELATED = "bill_related"
    BILL_SUBJECTS = "bill_subjects"
    BILL_SUMMARIES = "bill_summaries"
    BILL_TEXT = "bill_text"
    BILL_TITLES = "bill_titles"
    # laws
    LAW_BY_CONGRESS = "law_by_congress"
    LAW_BY_TYPE = "law_by_type"
    LAW_DETAILS = "law_details"
    # amendments
    AMENDMENT_LIST = "amendment_list"
    AMENDMENT_BY_CONGRESS = "amendment_by_congress"
    AMENDMENT_BY_TYPE = "amendment_by_type"
    AMENDMENT_DETAILS = "amendment_details"
    AMENDMENT_ACTIONS = "amendment_actions"
    AMENDMENT_COSPONSORS = "amendment_cosponsors"
    AMENDMENT_AMENDMENTS = "amendment_amendments"
    AMENDMENT_TEXT = "amendment_text"
    # summaries
    SUMMARIES_LIST = "summaries_list"
    SUMMARIES_BY_CONGRESS = "summaries_by_congress"
    SUMMARIES_BY_TYPE = "summaries_by_type"
    # congress
    CONGRESS_LIST = "congress_list"
    CONGRESS_DETAILS = "congress_details"
    CONGRESS_CURRENT = "congress_current"
    # members
    MEMBER_LIST = "member_list"
    MEMBER_BY_CONGRESS = "member_by_congress"
    MEMBER_BY_STATE = "member_by_state"
    MEMBER_BY_STATE_DISTRICT = "member_by_state_district"
    MEMBER_BY_CONGRESS_STATE_DISTRICT = "member_by_congress_state_district"
    MEMBER_DETAILS = "member_details"
    MEMBER_SPONSORED = "member_sponsored"
    MEMBER_COSPONSORED = "member_cosponsored"
    # committees
    COMMITTEE_LIST = "committee_list"
    COMMITTEE_BY_CHAMBER = "committee_by_chamber"
    COMMITTEE_BY_CONGRESS = "committee_by_congress"
    COMMITTEE_BY_CONGRESS_CHAMBER = "committee_by_congress_chamber"
    COMMITTEE_DETAILS = "committee_details"
    COMMITTEE_BILLS = "committee_bills"
    COMMITTEE_REPORTS = "committee_reports"
    COMMITTEE_NOMINATIONS = "committee_nominations"
    COMMITTEE_HOUSE_COMMUNICATIONS = "committee_house_communications"
    COMMITTEE_SENATE_COMMUNICATIONS = "committee_senate_communications"
    # committee reports
    COMMITTEE_REPORT_LIST = "committee_report_list"
    COMMITTEE_REPORT_BY_CONGRESS = "committee_report_by_congress"
    COMMITTEE_REPORT_BY_TYPE = "committee_report_by_type"
    COMMITTEE_REPORT_DETAILS = "committee_report_details"
    COMMITTEE_REPORT_TEXT = "committee_report_text"
    # committee prints
    COMMITTEE_PRINT_LIST = "committee_print_list"
    COMMITTEE_PRINT_BY_CONGRESS = "committee_print_by_congress"
    COMMITTEE_PRINT_BY_CHAMBER = "committee_print_by_chamber"
    COMMITTEE_PRINT_DETAILS = "committee_print_details"
    COMMITTEE_PRINT_TEXT = "committee_print_text"
    # committee meetings
    COMMITTEE_MEETING_LIST = "committee_meeting_list"
    COMMITTEE_MEETING_BY_CONGRESS = "committee_meeting_by_congress"
    COMMITTEE_MEETING_BY_CHAMBER = "committee_meeting_by_chamber"
    COMMITTEE_MEETING_DETAILS = "committee_meeting_details"
    # hearings
    HEARING_LIST = "hearing_list"
    HEARING_BY_CONGRESS = "hearing_by_congress"
    HEARING_BY_CHAMBER = "hearing_by_chamber"
    HEARING_DETAILS = "hearing_details"
    # congressional record
    CONGRESSIONAL_RECORD = "congressional_record"
    DAILY_RECORD_LIST = "daily_record_list"
    DAILY_RECORD_BY_VOLUME = "daily_record_by_volume"
    DAILY_RECORD_ISSUE = "daily_record_issue"
    DAILY_RECORD_ARTICLES = "daily_record_articles"
    BOUND_RECORD_LIST = "bound_record_list"
    BOUND_RECORD_BY_YEAR = "bound_record_by_year"
    BOUND_RECORD_BY_MONTH = "bound_record_by_month"
    BOUND_RECORD_BY_DAY = "bound_record_by_day"
    # house communications
    HOUSE_COMMUNICATION_LIST = "house_communication_list"
    HOUSE_COMMUNICATION_BY_CONGRESS = "house_communication_by_congress"
    HOUSE_COMMUNICATION_BY_TYPE = "house_communication_by_type"
    HOUSE_COMMUNICATION_DETAILS = "house_communication_details"
    # senate communications
    SENATE_COMMUNICATION_LIST = "senate_communication_list"
    SENATE_COMMUNICATION_BY_CONGRESS = "senate_communication_by_congress"
    SENATE_COMMUNICATION_BY_TYPE = "senate_communication_by_type"
    SENATE_COMMUNICATION_DETAILS = "senate_communication_details"
    # house requirements
    HOUSE_REQUIREMENT_LIST = "house_requirement_list"
    HOUSE_REQUIREMENT_DETAILS = "house_requirement_details"
    HOUSE_REQUIREMENT_MATCHING = "house_requirement_matching"
    # nominations
    NOMINATION_LIST = "nomination_list"
    NOMINATION_BY_CONGRESS = "nomination_by_congress"
    NOMINATION_DETAILS = "nomination_details"
    NOMINEES = "nominees"
    NOMINATION_ACTIONS = "nomination_actions"
    NOMINATION_COMMITTEES = "nomination_committees"
    NOMINATION_HEARINGS = "nomination_hearings"
    # treaties
    TREATY_LIST = "treaty_list"
    TREATY_BY_CONGRESS = "treaty_by_congress"
    TREATY_DETAILS = "treaty_details"
    TREATY_PARTITIONED = "treaty_partitioned"
    TREATY_COMMITTEES = "treaty_committees"
    TREATY_ACTIONS = "treaty_actions"
    TREATY_PARTITIONED_ACTIONS = "treaty_partitioned_actions"
    # escape hatch
    CUSTOM = "custom"


_K = EndpointKind
_BILL = ("bill", "{congress}", "{bill_type}", "{bill_number}")
_AMDT = ("amendment", "{congress}", "{amendment_type}", "{amendment_number}")
_CMTE = ("committee", "{chamber}", "{committee_code}")
_NOM = ("nomination", "{congress}", "{nomination_number}")
_TREATY = ("treaty", "{congress}", "{treaty_number}")

ROUTES: Dict[EndpointKind, Route] = {
    _K.BILL_LIST: Route(("bill",), p.BillListParams, "BillsResponse"),
    _K.BILL_BY_CONGRESS: Route(_BILL[:2], p.BillByCongressParams, "BillsResponse"),
    _K.BILL_BY_TYPE: Route(_BILL[:3], p.BillByTypeParams, "BillsResponse"),
    _K.BILL_DETAILS: Route(_BILL, p.BillDetailsParams, "BillDetailsResponse"),
    _K.BILL_ACTIONS: Route(_BILL + ("actions",), p.BillActionsParams, "BillActionsResponse"),
    _K.BILL_AMENDMENTS: Route(_BILL + ("amendments",), p.BillAmendmentsParams, "BillAmendmentsResponse"),
    _K.BILL_COMMITTEES: Route(_BILL + ("committees",), p.BillCommitteesParams, "BillCommitteesResponse"),
    _K.BILL_COSPONSORS: Route(_BILL + ("cosponsors",), p.BillCosponsorsParams, "BillCosponsorsResponse"),
    _K.BILL_RELATED: Route(_BILL + ("relatedbills",), p.BillRelatedParams, "RelatedBillsResponse"),
    _K.BILL_SUBJECTS: Route(_BILL + ("subjects",), p.BillSubjectsParams, "BillSubjectsResponse"),
    _K.BILL_SUMMARIES: Route(_BILL + ("summaries",), p.BillSummariesParams, "BillSummariesResponse"),
    _K.BILL_TEXT: Route(_BILL + ("text",), p.BillTextParams, "BillTextResponse"),
    _K.BILL_TITLES: Route(_BILL + ("titles",), p.BillTitlesParams, "BillTitlesResponse"),

    _K.LAW_BY_CONGRESS: Route(("law", "{congress}"), p.LawParams, "BillsResponse"),
    _K.LAW_BY_TYPE: Route(("law", "{congress}", "{law_type}"), p.LawParams, "BillsResponse"),
    _K.LAW_DETAILS: Route(("law", "{congress}", "{law_type}", "{law_number}"), p.LawDetailsParams, "BillDetailsResponse"),

    _K.AMENDMENT_LIST: Route(("amendment",), p.AmendmentListParams, "AmendmentsResponse"),
    _K.AMENDMENT_BY_CONGRESS: Route(_AMDT[:2], p.AmendmentByCongressParams, "AmendmentsResponse"),
    _K.AMENDMENT_BY_TYPE: Route(_AMDT[:3], p.AmendmentByTypeParams, "AmendmentsResponse"),
    _K.AMENDMENT_DETAILS: Route(_AMDT, p.AmendmentDetailsParams, "AmendmentDetailsResponse"),
    _K.AMENDMENT_ACTIONS: Route(_AMDT + ("actions",), p.AmendmentActionsParams, "AmendmentActionsResponse"),
    _K.AMENDMENT_COSPONSORS: Route(_AMDT + ("cosponsors",), p.AmendmentCosponsorsParams, "AmendmentCosponsorsResponse"),
    _K.AMENDMENT_AMENDMENTS: Route(_AMDT + ("amendments",), p.AmendmentAmendmentsParams, "AmendmentAmendmentsResponse"),
    _K.AMENDMENT_TEXT: Route(_AMDT + ("text",), p.AmendmentTextParams, "AmendmentTextResponse"),

    _K.SUMMARIES_LIST: Route(("summaries",), p.SummariesListParams, "SummariesResponse"),
    _K.SUMMARIES_BY_CONGRESS: Route(("summaries", "{congress}"), p.SummariesByCongressParams, "SummariesResponse"),
    _K.SUMMARIES_BY_TYPE: Route(("summaries", "{congress}", "{bill_type}"), p.SummariesByTypeParams, "SummariesResponse"),

    _K.CONGRESS_LIST: Route(("congress",), p.CongressListParams, "CongressesResponse"),
    _K.CONGRESS_DETAILS: Route(("congress", "{congress}"), p.CongressDetailsParams, "CongressDetailsResponse"),
    _K.CONGRESS_CURRENT: Route(("congress", "current"), p.CongressCurrentParams, "CongressDetailsResponse"),

    _K.MEMBER_LIST: Route(("member",), p.MemberListParams, "MembersResponse"),
    _K.MEMBER_BY_CONGRESS: Route(("member", "congress", "{congress}"), p.MemberByCongressParams, "MembersResponse"),
    _K.MEMBER_BY_STATE: Route(("member", "{state_code}"), p.MemberByStateParams, "MembersResponse"),
    _K.MEMBER_BY_STATE_DISTRICT: Route(("member", "{state_code}", "{district}"), p.MemberByStateDistrictParams, "MembersResponse"),
    _K.MEMBER_BY_CONGRESS_STATE_DISTRICT: Route(
        ("member", "congress", "{congress}", "{state_code}", "{district}"),
        p.MemberByCongressStateDistrictParams, "MembersResponse"),
    _K.MEMBER_DETAILS: Route(("member", "{bioguide_id}"), p.MemberDetailsParams, "MemberDetailsResponse"),
    _K.MEMBER_SPONSORED: Route(("member", "{bioguide_id}", "sponsored-legislation"), p.SponsorshipListParams, "SponsoredLegislationResponse"),
    _K.MEMBER_COSPONSORED: Route(("member", "{bioguide_id}", "cosponsored-legislation"), p.SponsorshipListParams, "CosponsoredLegislationResponse"),

    _K.COMMITTEE_LIST: Route(("committee",), p.CommitteeListParams, "CommitteesResponse"),
    _K.COMMITTEE_BY_CHAMBER: Route(("committee", "{chamber}"), p.CommitteeByChamberParams, "CommitteesResponse"),
    _K.COMMITTEE_BY_CONGRESS: Route(("committee", "{congress}"), p.CommitteeByCongressParams, "CommitteesResponse"),
    _K.COMMITTEE_BY_CONGRESS_CHAMBER: Route(("committee", "{congress}", "{chamber}"), p.CommitteeByCongressChamberParams, "CommitteesResponse"),
    _K.COMMITTEE_DETAILS: Route(_CMTE, p.CommitteeDetailsParams, "CommitteeDetailsResponse"),
    _K.COMMITTEE_BILLS: Route(_CMTE + ("bills",), p.CommitteeBillsParams, "CommitteeBillsResponse"),
    _K.COMMITTEE_REPORTS: Route(_CMTE + ("reports",), p.CommitteeReportsByCommitteeParams, "CommitteeReportsResponse"),
    _K.COMMITTEE_NOMINATIONS: Route(_CMTE + ("nominations",), p.CommitteeNominationsParams, "NominationsResponse"),
    _K.COMMITTEE_HOUSE_COMMUNICATIONS: Route(_CMTE + ("house-communication",), p.CommitteeCommunicationsParams, "HouseCommunicationsResponse"),
    _K.COMMITTEE_SENATE_COMMUNICATIONS: Route(_CMTE + ("senate-communication",), p.CommitteeCommunicationsParams, "SenateCommunicationsResponse"),

    _K.COMMITTEE_REPORT_LIST: Route(("committee-report",), p.CommitteeReportListParams, "CommitteeReportsResponse"),
    _K.COMMITTEE_REPORT_BY_CONGRESS: Route(("committee-report", "{congress}"), p.CommitteeReportByCongressParams, "CommitteeReportsResponse"),
    _K.COMMITTEE_REPORT_BY_TYPE: Route(("committee-report", "{congress}", "{report_type}"), p.CommitteeReportByTypeParams, "CommitteeReportsResponse"),
    _K.COMMITTEE_REPORT_DETAILS: Route(
        ("committee-report", "{congress}", "{report_type}", "{report_number}"),
        p.CommitteeReportDetailsParams, "CommitteeReportDetailsResponse"),
    _K.COMMITTEE_REPORT_TEXT: Route(
        ("committee-report", "{congress}", "{report_type}", "{report_number}", "text"),
        p.CommitteeReportTextParams, "TextVersionsResponse"),

    _K.COMMITTEE_PRINT_LIST: Route(("committee-print",), p.CommitteePrintListParams, "CommitteePrintsResponse"),
    _K.COMMITTEE_PRINT_BY_CONGRESS: Route(("committee-print", "{congress}"), p.CommitteePrintByCongressParams, "CommitteePrintsResponse"),
    _K.COMMITTEE_PRINT_BY_CHAMBER: Route(("committee-print", "{congress}", "{chamber}"), p.CommitteePrintByChamberParams, "CommitteePrintsResponse"),
    _K.COMMITTEE_PRINT_DETAILS: Route(
        ("committee-print", "{congress}", "{chamber}", "{jacket_number}"),
        p.CommitteePrintDetailsParams, "CommitteePrintDetailsResponse"),
    _K.COMMITTEE_PRINT_TEXT: Route(
        ("committee-print", "{congress}", "{chamber}", "{jacket_number}", "text"),
        p.CommitteePrintTextParams, "TextVersionsResponse"),

    _K.COMMITTEE_MEETING_LIST: Route(("committee-meeting",), p.CommitteeMeetingListParams, "CommitteeMeetingsResponse"),
    _K.COMMITTEE_MEETING_BY_CONGRESS: Route(("committee-meeting", "{congress}"), p.CommitteeMeetingByCongressParams, "CommitteeMeetingsResponse"),
    _K.COMMITTEE_MEETING_BY_CHAMBER: Route(("committee-meeting", "{congress}", "{chamber}"), p.CommitteeMeetingByChamberParams, "CommitteeMeetingsResponse"),
    _K.COMMITTEE_MEETING_DETAILS: Route(
        ("committee-meeting", "{congress}", "{chamber}", "{event_id}"),
        p.CommitteeMeetingDetailsParams, "CommitteeMeetingDetailsResponse"),

    _K.HEARING_LIST: Route(("hearing",), p.HearingListParams, "HearingsResponse"),
    _K.HEARING_BY_CONGRESS: Route(("hearing", "{congress}"), p.HearingByCongressParams, "HearingsResponse"),
    _K.HEARING_BY_CHAMBER: Route(("hearing", "{congress}", "{chamber}"), p.HearingByChamberParams, "HearingsResponse"),
    _K.HEARING_DETAILS: Route(("hearing", "{congress}", "{chamber}", "{jacket_number}"), p.HearingDetailsParams, "HearingDetailsResponse"),

    _K.CONGRESSIONAL_RECORD: Route(("congressional-record",), p.CongressionalRecordParams, "CongressionalRecordResponse"),
    _K.DAILY_RECORD_LIST: Route(("daily-congressional-record",), p.DailyRecordListParams, "DailyRecordResponse"),
    _K.DAILY_RECORD_BY_VOLUME: Route(("daily-congressional-record", "{volume_number}"), p.DailyRecordListParams, "DailyRecordResponse"),
    _K.DAILY_RECORD_ISSUE: Route(("daily-congressional-record", "{volume_number}", "{issue_number}"), p.DailyRecordListParams, "DailyRecordIssueResponse"),
    _K.DAILY_RECORD_ARTICLES: Route(
        ("daily-congressional-record", "{volume_number}", "{issue_number}", "articles"),
        p.DailyRecordArticlesParams, "DailyRecordArticlesResponse"),
    _K.BOUND_RECORD_LIST: Route(("bound-congressional-record",), p.BoundRecordParams, "BoundRecordResponse"),
    _K.BOUND_RECORD_BY_YEAR: Route(("bound-congressional-record", "{year}"), p.BoundRecordParams, "BoundRecordResponse"),
    _K.BOUND_RECORD_BY_MONTH: Route(("bound-congressional-record", "{year}", "{month}"), p.BoundRecordParams, "BoundRecordResponse"),
    _K.BOUND_RECORD_BY_DAY: Route(("bound-congressional-record", "{year}", "{month}", "{day}"), p.BoundRecordParams, "BoundRecordResponse"),

    _K.HOUSE_COMMUNICATION_LIST: Route(("house-communication",), p.CommunicationListParams, "HouseCommunicationsResponse"),
    _K.HOUSE_COMMUNICATION_BY_CONGRESS: Route(("house-communication", "{congress}"), p.CommunicationListParams, "HouseCommunicationsResponse"),
    _K.HOUSE_COMMUNICATION_BY_TYPE: Route(("house-communication", "{congress}", "{communication_type}"), p.CommunicationListParams, "HouseCommunicationsResponse"),
    _K.HOUSE_COMMUNICATION_DETAILS: Route(
        ("house-communication", "{congress}", "{communication_type}", "{communication_number}"),
        p.CommunicationDetailsParams, "HouseCommunicationDetailsResponse"),

    _K.SENATE_COMMUNICATION_LIST: Route(("senate-communication",), p.CommunicationListParams, "SenateCommunicationsResponse"),
    _K.SENATE_COMMUNICATION_BY_CONGRESS: Route(("senate-communication", "{congress}"), p.CommunicationListParams, "SenateCommunicationsResponse"),
    _K.SENATE_COMMUNICATION_BY_TYPE: Route(("senate-communication", "{congress}", "{communication_type}"), p.CommunicationListParams, "SenateCommunicationsResponse"),
    _K.SENATE_COMMUNICATION_DETAILS: Route(
        ("senate-communication", "{congress}", "{communication_type}", "{communication_number}"),
        p.CommunicationDetailsParams, "SenateCommunicationDetailsResponse"),

    _K.HOUSE_REQUIREMENT_LIST: Route(("house-requirement",), p.HouseRequirementListParams, "HouseRequirementsResponse"),
    _K.HOUSE_REQUIREMENT_DETAILS: Route(("house-requirement", "{requirement_number}"), p.HouseRequirementDetailsParams, "HouseRequirementDetailsResponse"),
    _K.HOUSE_REQUIREMENT_MATCHING: Route(
        ("house-requirement", "{requirement_number}", "matching-communications"),
        p.HouseRequirementMatchingParams, "MatchingCommunicationsResponse"),

    _K.NOMINATION_LIST: Route(("nomination",), p.NominationListParams, "NominationsResponse"),
    _K.NOMINATION_BY_CONGRESS: Route(("nomination", "{congress}"), p.NominationByCongressParams, "NominationsResponse"),
    _K.NOMINATION_DETAILS: Route(_NOM, p.NominationDetailsParams, "NominationDetailsResponse"),
    _K.NOMINEES: Route(_NOM + ("{ordinal}",), p.NominationSubresourceParams, "NomineesResponse"),
    _K.NOMINATION_ACTIONS: Route(_NOM + ("actions",), p.NominationSubresourceParams, "ActionsResponse"),
    _K.NOMINATION_COMMITTEES: Route(_NOM + ("committees",), p.NominationSubresourceParams, "CommitteeActivityResponse"),
    _K.NOMINATION_HEARINGS: Route(_NOM + ("hearings",), p.NominationSubresourceParams, "NominationHearingsResponse"),

    _K.TREATY_LIST: Route(("treaty",), p.TreatyListParams, "TreatiesResponse"),
    _K.TREATY_BY_CONGRESS: Route(("treaty", "{congress}"), p.TreatyByCongressParams, "TreatiesResponse"),
    _K.TREATY_DETAILS: Route(_TREATY, p.TreatyDetailsParams, "TreatyDetailsResponse"),
    _K.TREATY_PARTITIONED: Route(_TREATY + ("{treaty_suffix}",), p.TreatyDetailsParams, "TreatyDetailsResponse"),
    _K.TREATY_COMMITTEES: Route(_TREATY + ("committees",), p.TreatySubresourceParams, "CommitteeActivityResponse"),
    _K.TREATY_ACTIONS: Route(_TREATY + ("actions",), p.TreatySubresourceParams, "ActionsResponse"),
    _K.TREATY_PARTITIONED_ACTIONS: Route(_TREATY + ("{treaty_suffix}", "actions"), p.TreatySubresourceParams, "ActionsResponse"),

    _K.CUSTOM: Route(("{path}",), p.GenericParams, None),
}


@dataclass(frozen=True)
class Endpoint:
    """One API call target: what to fetch and with which options."""
    kind: EndpointKind
    identifiers: Tuple[Any, ...] = ()
    params: Optional[p.ApiParams] = None

    @property
    def route(self) -> Route:
        return ROUTES[self.kind]

    @property
    def default_shape(self):
        """Response shape class documented for this endpoint, or ``None``."""
        name = self.route.shape
        return SHAPES.get(name) if name else None

    @classmethod
    def _make(cls, kind: EndpointKind, params: Optional[p.ApiParams], *identifiers: Any) -> "Endpoint":
        if params is None:
            params = ROUTES[kind].params()
        return cls(kind, tuple(identifiers), params)

    # ------------- custom -------------
    @classmethod
    def custom(cls, path: str, params: Optional[p.GenericParams] = None) -> "Endpoint":
        """Any path under the API root, e.g. ``"bill/118/hr/1/actions"``."""
        return cls._make(_K.CUSTOM, params, path)

    # ------------- bills -------------
    @classmethod
    def bill_list(cls, params: Optional[p.BillListParams] = None):
        return cls._make(_K.BILL_LIST, params)

    @classmethod
    def bill_by_congress(cls, congress: Congress, params: Optional[p.BillByCongressParams] = None):
        return cls._make(_K.BILL_BY_CONGRESS, params, congress)

    @classmethod
    def bill_by_type(cls, congress: Congress, bill_type: BillType, params: Optional[p.BillByTypeParams] = None):
        return cls._make(_K.BILL_BY_TYPE, params, congress, bill_type)

    @classmethod
    def bill_details(cls, congress: Congress, bill_type: BillType, bill_number: Number,
                     params: Optional[p.BillDetailsParams] = None):
        return cls._make(_K.BILL_DETAILS, params, congress, bill_type, bill_number)

    @classmethod
    def bill_actions(cls, congress: Congress, bill_type: BillType, bill_number: Number,
                     params: Optional[p.BillActionsParams] = None):
        return cls._make(_K.BILL_ACTIONS, params, congress, bill_type, bill_number)

    @classmethod
    def bill_amendments(cls, congress: Congress, bill_type: BillType, bill_number: Number,
                        params: Optional[p.BillAmendmentsParams] = None):
        return cls._make(_K.BILL_AMENDMENTS, params, congress, bill_type, bill_number)

    @classmethod
    def bill_committees(cls, congress: Congress, bill_type: BillType, bill_number: Number,
                        params: Optional[p.BillCommitteesParams] = None):
        return cls._make(_K.BILL_COMMITTEES, params, congress, bill_type, bill_number)

    @classmethod
    def bill_cosponsors(cls, congress: Congress, bill_type: BillType, bill_number: Number,
                        params: Optional[p.BillCosponsorsParams] = None):
        return cls._make(_K.BILL_COSPONSORS, params, congress, bill_type, bill_number)

    @classmethod
    def bill_related(cls, congress: Congress, bill_type: BillType, bill_number: Number,
                     params: Optional[p.BillRelatedParams] = None):
        return cls._make(_K.BILL_RELATED, params, congress, bill_type, bill_number)

    @classmethod
    def bill_subjects(cls, congress: Congress, bill_type: BillType, bill_number: Number,
                      params: Optional[p.BillSubjectsParams] = None):
        return cls._make(_K.BILL_SUBJECTS, params, congress, bill_type, bill_number)

    @classmethod
    def bill_summaries(cls, congress: Congress, bill_type: BillType, bill_number: Number,
                       params: Optional[p.BillSummariesParams] = None):
        return cls._make(_K.BILL_SUMMARIES, params, congress, bill_type, bill_number)

    @classmethod
    def bill_text(cls, congress: Congress, bill_type: BillType, bill_number: Number,
                  params: Optional[p.BillTextParams] = None):
        return cls._make(_K.BILL_TEXT, params, congress, bill_type, bill_number)

    @classmethod
    def bill_titles(cls, congress: Congress, bill_type: BillType, bill_number: Number,
                    params: Optional[p.BillTitlesParams] = None):
        return cls._make(_K.BILL_TITLES, params, congress, bill_type, bill_number)

    # ------------- laws -------------
    @classmethod
    def law_by_congress(cls, congress: Congress, params: Optional[p.LawParams] = None):
        return cls._make(_K.LAW_BY_CONGRESS, params, congress)

    @classmethod
    def law_by_type(cls, congress: Congress, law_type: LawType, params: Optional[p.LawParams] = None):
        return cls._make(_K.LAW_BY_TYPE, params, congress, law_type)

    @classmethod
    def law_details(cls, congress: Congress, law_type: LawType, law_number: Number,
                    params: Optional[p.LawDetailsParams] = None):
        return cls._make(_K.LAW_DETAILS, params, congress, law_type, law_number)

    # ------------- amendments -------------
    @classmethod
    def amendment_list(cls, params: Optional[p.AmendmentListParams] = None):
        return cls._make(_K.AMENDMENT_LIST, params)

    @classmethod
    def amendment_by_congress(cls, congress: Congress, params: Optional[p.AmendmentByCongressParams] = None):
        return cls._make(_K.AMENDMENT_BY_CONGRESS, params, congress)

    @classmethod
    def amendment_by_type(cls, congress: Congress, amendment_type: AmendmentType,
                          params: Optional[p.AmendmentByTypeParams] = None):
        return cls._make(_K.AMENDMENT_BY_TYPE, params, congress, amendment_type)

    @classmethod
    def amendment_details(cls, congress: Congress, amendment_type: AmendmentType, amendment_number: Number,
                          params: Optional[p.AmendmentDetailsParams] = None):
        return cls._make(_K.AMENDMENT_DETAILS, params, congress, amendment_type, amendment_number)

    @classmethod
    def amendment_actions(cls, congress: Congress, amendment_type: AmendmentType, amendment_number: Number,
                          params: Optional[p.AmendmentActionsParams] = None):
        return cls._make(_K.AMENDMENT_ACTIONS, params, congress, amendment_type, amendment_number)

    @classmethod
    def amendment_cosponsors(cls, congress: Congress, amendment_type: AmendmentType, amendment_number: Number,
                             params: Optional[p.AmendmentCosponsorsParams] = None):
        return cls._make(_K.AMENDMENT_COSPONSORS, params, congress, amendment_type, amendment_number)

    @classmethod
    def amendment_amendments(cls, congress: Congress, amendment_type: AmendmentType, amendment_number: Number,
                             params: Optional[p.AmendmentAmendmentsParams] = None):
        return cls._make(_K.AMENDMENT_AMENDMENTS, params, congress, amendment_type, amendment_number)

    @classmethod
    def amendment_text(cls, congress: Congress, amendment_type: AmendmentType, amendment_number: Number,
                       params: Optional[p.AmendmentTextParams] = None):
        return cls._make(_K.AMENDMENT_TEXT, params, congress, amendment_type, amendment_number)

    # ------------- summaries -------------
    @classmethod
    def summaries_list(cls, params: Optional[p.SummariesListParams] = None):
        return cls._make(_K.SUMMARIES_LIST, params)

    @classmethod
    def summaries_by_congress(cls, congress: Congress, params: Optional[p.SummariesByCongressParams] = None):
        return cls._make(_K.SUMMARIES_BY_CONGRESS, params, congress)

    @classmethod
    def summaries_by_type(cls, congress: Congress, bill_type: BillType,
                          params: Optional[p.SummariesByTypeParams] = None):
        return cls._make(_K.SUMMARIES_BY_TYPE, params, congress, bill_type)

    # ------------- congress -------------
    @classmethod
    def congress_list(cls, params: Optional[p.CongressListParams] = None):
        return cls._make(_K.CONGRESS_LIST, params)

    @classmethod
    def congress_details(cls, congress: Congress, params: Optional[p.CongressDetailsParams] = None):
        return cls._make(_K.CONGRESS_DETAILS, params, congress)

    @classmethod
    def congress_current(cls, params: Optional[p.CongressCurrentParams] = None):
        return cls._make(_K.CONGRESS_CURRENT, params)

    # ------------- members -------------
    @classmethod
    def member_list(cls, params: Optional[p.MemberListParams] = None):
        return cls._make(_K.MEMBER_LIST, params)

    @classmethod
    def member_by_congress(cls, congress: Congress, params: Optional[p.MemberByCongressParams] = None):
        return cls._make(_K.MEMBER_BY_CONGRESS, params, congress)

    @classmethod
    def member_by_state(cls, state_code: str, params: Optional[p.MemberByStateParams] = None):
        return cls._make(_K.MEMBER_BY_STATE, params, state_code)

    @classmethod
    def member_by_state_district(cls, state_code: str, district: Number,
                                 params: Optional[p.MemberByStateDistrictParams] = None):
        return cls._make(_K.MEMBER_BY_STATE_DISTRICT, params, state_code, district)

    @classmethod
    def member_by_congress_state_district(cls, congress: Congress, state_code: str, district: Number,
                                          params: Optional[p.MemberByCongressStateDistrictParams] = None):
        return cls._make(_K.MEMBER_BY_CONGRESS_STATE_DISTRICT, params, congress, state_code, district)

    @classmethod
    def member_details(cls, bioguide_id: str, params: Optional[p.MemberDetailsParams] = None):
        return cls._make(_K.MEMBER_DETAILS, params, bioguide_id)

    @classmethod
    def member_sponsored(cls, bioguide_id: str, params: Optional[p.SponsorshipListParams] = None):
        return cls._make(_K.MEMBER_SPONSORED, params, bioguide_id)

    @classmethod
    def member_cosponsored(cls, bioguide_id: str, params: Optional[p.SponsorshipListParams] = None):
        return cls._make(_K.MEMBER_COSPONSORED, params, bioguide_id)

    # ------------- committees -------------
    @classmethod
    def committee_list(cls, params: Optional[p.CommitteeListParams] = None):
        return cls._make(_K.COMMITTEE_LIST, params)

    @classmethod
    def committee_by_chamber(cls, chamber: ChamberType, params: Optional[p.CommitteeByChamberParams] = None):
        return cls._make(_K.COMMITTEE_BY_CHAMBER, params, chamber)

    @classmethod
    def committee_by_congress(cls, congress: Congress, params: Optional[p.CommitteeByCongressParams] = None):
        return cls._make(_K.COMMITTEE_BY_CONGRESS, params, congress)

    @classmethod
    def committee_by_congress_chamber(cls, congress: Congress, chamber: ChamberType,
                                      params: Optional[p.CommitteeByCongressChamberParams] = None):
        return cls._make(_K.COMMITTEE_BY_CONGRESS_CHAMBER, params, congress, chamber)

    @classmethod
    def committee_details(cls, chamber: ChamberType, committee_code: str,
                          params: Optional[p.CommitteeDetailsParams] = None):
        return cls._make(_K.COMMITTEE_DETAILS, params, chamber, committee_code)

    @classmethod
    def committee_bills(cls, chamber: ChamberType, committee_code: str,
                        params: Optional[p.CommitteeBillsParams] = None):
        return cls._make(_K.COMMITTEE_BILLS, params, chamber, committee_code)

    @classmethod
    def committee_reports(cls, chamber: ChamberType, committee_code: str,
                          params: Optional[p.CommitteeReportsByCommitteeParams] = None):
        return cls._make(_K.COMMITTEE_REPORTS, params, chamber, committee_code)

    @classmethod
    def committee_nominations(cls, chamber: ChamberType, committee_code: str,
                              params: Optional[p.CommitteeNominationsParams] = None):
        return cls._make(_K.COMMITTEE_NOMINATIONS, params, chamber, committee_code)

    @classmethod
    def committee_house_communications(cls, chamber: ChamberType, committee_code: str,
                                       params: Optional[p.CommitteeCommunicationsParams] = None):
        return cls._make(_K.COMMITTEE_HOUSE_COMMUNICATIONS, params, chamber, committee_code)

    @classmethod
    def committee_senate_communications(cls, chamber: ChamberType, committee_code: str,
                                        params: Optional[p.CommitteeCommunicationsParams] = None):
        return cls._make(_K.COMMITTEE_SENATE_COMMUNICATIONS, params, chamber, committee_code)

    # ------------- committee reports -------------
    @classmethod
    def committee_report_list(cls, params: Optional[p.CommitteeReportListParams] = None):
        return cls._make(_K.COMMITTEE_REPORT_LIST, params)

    @classmethod
    def committee_report_by_congress(cls, congress: Congress,
                                     params: Optional[p.CommitteeReportByCongressParams] = None):
        return cls._make(_K.COMMITTEE_REPORT_BY_CONGRESS, params, congress)

    @classmethod
    def committee_report_by_type(cls, congress: Congress, report_type: CommitteeReportType,
                                 params: Optional[p.CommitteeReportByTypeParams] = None):
        return cls._make(_K.COMMITTEE_REPORT_BY_TYPE, params, congress, report_type)

    @classmethod
    def committee_report_details(cls, congress: Congress, report_type: CommitteeReportType, report_number: Number,
                                 params: Optional[p.CommitteeReportDetailsParams] = None):
        return cls._make(_K.COMMITTEE_REPORT_DETAILS, params, congress, report_type, report_number)

    @classmethod
    def committee_report_text(cls, congress: Congress, report_type: CommitteeReportType, report_number: Number,
                              params: Optional[p.CommitteeReportTextParams] = None):
        return cls._make(_K.COMMITTEE_REPORT_TEXT, params, congress, report_type, report_number)

    # ------------- committee prints -------------
    @classmethod
    def committee_print_list(cls, params: Optional[p.CommitteePrintListParams] = None):
        return cls._make(_K.COMMITTEE_PRINT_LIST, params)

    @classmethod
    def committee_print_by_congress(cls, congress: Congress,
                                    params: Optional[p.CommitteePrintByCongressParams] = None):
        return cls._make(_K.COMMITTEE_PRINT_BY_CONGRESS, params, congress)

    @classmethod
    def committee_print_by_chamber(cls, congress: Congress, chamber: ChamberType,
                                   params: Optional[p.CommitteePrintByChamberParams] = None):
        return cls._make(_K.COMMITTEE_PRINT_BY_CHAMBER, params, congress, chamber)

    @classmethod
    def committee_print_details(cls, congress: Congress, chamber: ChamberType, jacket_number: Number,
                                params: Optional[p.CommitteePrintDetailsParams] = None):
        return cls._make(_K.COMMITTEE_PRINT_DETAILS, params, congress, chamber, jacket_number)

    @classmethod
    def committee_print_text(cls, congress: Congress, chamber: ChamberType, jacket_number: Number,
                             params: Optional[p.CommitteePrintTextParams] = None):
        return cls._make(_K.COMMITTEE_PRINT_TEXT, params, congress, chamber, jacket_number)

    # ------------- committee meetings -------------
    @classmethod
    def committee_meeting_list(cls, params: Optional[p.CommitteeMeetingListParams] = None):
        return cls._make(_K.COMMITTEE_MEETING_LIST, params)

    @classmethod
    def committee_meeting_by_congress(cls, congress: Congress,
                                      params: Optional[p.CommitteeMeetingByCongressParams] = None):
        return cls._make(_K.COMMITTEE_MEETING_BY_CONGRESS, params, congress)

    @classmethod
    def committee_meeting_by_chamber(cls, congress: Congress, chamber: ChamberType,
                                     params: Optional[p.CommitteeMeetingByChamberParams] = None):
        return cls._make(_K.COMMITTEE_MEETING_BY_CHAMBER, params, congress, chamber)

    @classmethod
    def committee_meeting_details(cls, congress: Congress, chamber: ChamberType, event_id: Number,
                                  params: Optional[p.CommitteeMeetingDetailsParams] = None):
        return cls._make(_K.COMMITTEE_MEETING_DETAILS, params, congress, chamber, event_id)

    # ------------- hearings -------------
    @classmethod
    def hearing_list(cls, params: Optional[p.HearingListParams] = None):
        return cls._make(_K.HEARING_LIST, params)

    @classmethod
    def hearing_by_congress(cls, congress: Congress, params: Optional[p.HearingByCongressParams] = None):
        return cls._make(_K.HEARING_BY_CONGRESS, params, congress)

    @classmethod
    def hearing_by_chamber(cls, congress: Congress, chamber: ChamberType,
                           params: Optional[p.HearingByChamberParams] = None):
        return cls._make(_K.HEARING_BY_CHAMBER, params, congress, chamber)

    @classmethod
    def hearing_details(cls, congress: Congress, chamber: ChamberType, jacket_number: Number,
                        params: Optional[p.HearingDetailsParams] = None):
        return cls._make(_K.HEARING_DETAILS, params, congress, chamber, jacket_number)

    # ------------- congressional record -------------
    @classmethod
    def congressional_record(cls, params: Optional[p.CongressionalRecordParams] = None):
        return cls._make(_K.CONGRESSIONAL_RECORD, params)

    @classmethod
    def daily_record_list(cls, params: Optional[p.DailyRecordListParams] = None):
        return cls._make(_K.DAILY_RECORD_LIST, params)

    @classmethod
    def daily_record_by_volume(cls, volume_number: Number, params: Optional[p.DailyRecordListParams] = None):
        return cls._make(_K.DAILY_RECORD_BY_VOLUME, params, volume_number)

    @classmethod
    def daily_record_issue(cls, volume_number: Number, issue_number: Number,
                           params: Optional[p.DailyRecordListParams] = None):
        return cls._make(_K.DAILY_RECORD_ISSUE, params, volume_number, issue_number)

    @classmethod
    def daily_record_articles(cls, volume_number: Number, issue_number: Number,
                              params: Optional[p.DailyRecordArticlesParams] = None):
        return cls._make(_K.DAILY_RECORD_ARTICLES, params, volume_number, issue_number)

    @classmethod
    def bound_record_list(cls, params: Optional[p.BoundRecordParams] = None):
        return cls._make(_K.BOUND_RECORD_LIST, params)

    @classmethod
    def bound_record_by_year(cls, year: int, params: Optional[p.BoundRecordParams] = None):
        return cls._make(_K.BOUND_RECORD_BY_YEAR, params, year)

    @classmethod
    def bound_record_by_month(cls, year: int, month: int, params: Optional[p.BoundRecordParams] = None):
        return cls._make(_K.BOUND_RECORD_BY_MONTH, params, year, month)

    @classmethod
    def bound_record_by_day(cls, year: int, month: int, day: int, params: Optional[p.BoundRecordParams] = None):
        return cls._make(_K.BOUND_RECORD_BY_DAY, params, year, month, day)

    # ------------- communications -------------
    @classmethod
    def house_communication_list(cls, params: Optional[p.CommunicationListParams] = None):
        return cls._make(_K.HOUSE_COMMUNICATION_LIST, params)

    @classmethod
    def house_communication_by_congress(cls, congress: Congress, params: Optional[p.CommunicationListParams] = None):
        return cls._make(_K.HOUSE_COMMUNICATION_BY_CONGRESS, params, congress)

    @classmethod
    def house_communication_by_type(cls, congress: Congress, communication_type: CommunicationType,
                                    params: Optional[p.CommunicationListParams] = None):
        return cls._make(_K.HOUSE_COMMUNICATION_BY_TYPE, params, congress, communication_type)

    @classmethod
    def house_communication_details(cls, congress: Congress, communication_type: CommunicationType,
                                    communication_number: Number,
                                    params: Optional[p.CommunicationDetailsParams] = None):
        return cls._make(_K.HOUSE_COMMUNICATION_DETAILS, params, congress, communication_type, communication_number)

    @classmethod
    def senate_communication_list(cls, params: Optional[p.CommunicationListParams] = None):
        return cls._make(_K.SENATE_COMMUNICATION_LIST, params)

    @classmethod
    def senate_communication_by_congress(cls, congress: Congress, params: Optional[p.CommunicationListParams] = None):
        return cls._make(_K.SENATE_COMMUNICATION_BY_CONGRESS, params, congress)

    @classmethod
    def senate_communication_by_type(cls, congress: Congress, communication_type: CommunicationType,
                                     params: Optional[p.CommunicationListParams] = None):
        return cls._make(_K.SENATE_COMMUNICATION_BY_TYPE, params, congress, communication_type)

    @classmethod
    def senate_communication_details(cls, congress: Congress, communication_type: CommunicationType,
                                     communication_number: Number,
                                     params: Optional[p.CommunicationDetailsParams] = None):
        return cls._make(_K.SENATE_COMMUNICATION_DETAILS, params, congress, communication_type, communication_number)

    # ------------- house requirements -------------
    @classmethod
    def house_requirement_list(cls, params: Optional[p.HouseRequirementListParams] = None):
        return cls._make(_K.HOUSE_REQUIREMENT_LIST, params)

    @classmethod
    def house_requirement_details(cls, requirement_number: Number,
                                  params: Optional[p.HouseRequirementDetailsParams] = None):
        return cls._make(_K.HOUSE_REQUIREMENT_DETAILS, params, requirement_number)

    @classmethod
    def house_requirement_matching(cls, requirement_number: Number,
                                   params: Optional[p.HouseRequirementMatchingParams] = None):
        return cls._make(_K.HOUSE_REQUIREMENT_MATCHING, params, requirement_number)

    # ------------- nominations -------------
    @classmethod
    def nomination_list(cls, params: Optional[p.NominationListParams] = None):
        return cls._make(_K.NOMINATION_LIST, params)

    @classmethod
    def nomination_by_congress(cls, congress: Congress, params: Optional[p.NominationByCongressParams] = None):
        return cls._make(_K.NOMINATION_BY_CONGRESS, params, congress)

    @classmethod
    def nomination_details(cls, congress: Congress, nomination_number: Number,
                           params: Optional[p.NominationDetailsParams] = None):
        return cls._make(_K.NOMINATION_DETAILS, params, congress, nomination_number)

    @classmethod
    def nominees(cls, congress: Congress, nomination_number: Number, ordinal: Number,
                 params: Optional[p.NominationSubresourceParams] = None):
        return cls._make(_K.NOMINEES, params, congress, nomination_number, ordinal)

    @classmethod
    def nomination_actions(cls, congress: Congress, nomination_number: Number,
                           params: Optional[p.NominationSubresourceParams] = None):
        return cls._make(_K.NOMINATION_ACTIONS, params, congress, nomination_number)

    @classmethod
    def nomination_committees(cls, congress: Congress, nomination_number: Number,
                              params: Optional[p.NominationSubresourceParams] = None):
        return cls._make(_K.NOMINATION_COMMITTEES, params, congress, nomination_number)

    @classmethod
    def nomination_hearings(cls, congress: Congress, nomination_number: Number,
                            params: Optional[p.NominationSubresourceParams] = None):
        return cls._make(_K.NOMINATION_HEARINGS, params, congress, nomination_number)

    # ------------- treaties -------------
    @classmethod
    def treaty_list(cls, params: Optional[p.TreatyListParams] = None):
        return cls._make(_K.TREATY_LIST, params)

    @classmethod
    def treaty_by_congress(cls, congress: Congress, params: Optional[p.TreatyByCongressParams] = None):
        return cls._make(_K.TREATY_BY_CONGRESS, params, congress)

    @classmethod
    def treaty_details(cls, congress: Congress, treaty_number: Number,
                       params: Optional[p.TreatyDetailsParams] = None):
        return cls._make(_K.TREATY_DETAILS, params, congress, treaty_number)

    @classmethod
    def treaty_partitioned(cls, congress: Congress, treaty_number: Number, treaty_suffix: str,
                           params: Optional[p.TreatyDetailsParams] = None):
        return cls._make(_K.TREATY_PARTITIONED, params, congress, treaty_number, treaty_suffix)

    @classmethod
    def treaty_committees(cls, congress: Congress, treaty_number: Number,
                          params: Optional[p.TreatySubresourceParams] = None):
        return cls._make(_K.TREATY_COMMITTEES, params, congress, treaty_number)

    @classmethod
    def treaty_actions(cls, congress: Congress, treaty_number: Number,
                       params: Optional[p.TreatySubresourceParams] = None):
        return cls._make(_K.TREATY_ACTIONS, params, congress, treaty_number)

    @classmethod
    def treaty_partitioned_actions(cls, congress: Congress, treaty_number: Number, treaty_suffix: str,
                                   params: Optional[p.TreatySubresourceParams] = None):
        return cls._make(_K.TREATY_PARTITIONED_ACTIONS, params, congress, treaty_number, treaty_suffix)
