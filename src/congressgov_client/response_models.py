"""
Dataclass shapes for the documented Congress.gov response bodies.

Field names are snake_case; the JSON key lives in the field metadata when
it differs. Top-level collections and wrapped records are required,
everything else is optional. Keys a shape does not model are kept in
``extra`` so nothing the server sent is lost.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

SHAPES: Dict[str, type] = {}

IntOrStr = Union[int, str]   # the API is not consistent about numbers


def alias(json_key: str):
    """Optional field stored under a different JSON key."""
    return field(default=None, metadata={"key": json_key})


def required(json_key: str):
    return field(metadata={"key": json_key})


@dataclass
class ResponseShape:
    extra: Dict[str, Any] = field(default_factory=dict, repr=False, kw_only=True)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        SHAPES[cls.__name__] = cls


# ------------- envelope -------------
@dataclass
class Pagination(ResponseShape):
    count: Optional[int] = None
    next: Optional[str] = None
    prev: Optional[str] = None


@dataclass
class RequestInfo(ResponseShape):
    content_type: Optional[str] = alias("contentType")
    format: Optional[str] = None


@dataclass
class ApiResponse(ResponseShape):
    request: Optional[RequestInfo] = field(default=None, kw_only=True)


@dataclass
class PagedResponse(ApiResponse):
    pagination: Optional[Pagination] = field(default=None, kw_only=True)


# ------------- shared pieces -------------
@dataclass
class LatestAction(ResponseShape):
    action_date: Optional[str] = alias("actionDate")
    action_time: Optional[str] = alias("actionTime")
    text: Optional[str] = None


@dataclass
class CountRef(ResponseShape):
    """``{"count": n, "url": ...}`` link to a sub-resource."""
    count: Optional[int] = None
    url: Optional[str] = None


@dataclass
class CosponsorsRef(CountRef):
    count_including_withdrawn: Optional[int] = alias("countIncludingWithdrawnCosponsors")


@dataclass
class MemberRef(ResponseShape):
    bioguide_id: Optional[str] = alias("bioguideId")
    first_name: Optional[str] = alias("firstName")
    middle_name: Optional[str] = alias("middleName")
    last_name: Optional[str] = alias("lastName")
    full_name: Optional[str] = alias("fullName")
    party: Optional[str] = None
    state: Optional[str] = None
    district: Optional[IntOrStr] = None
    is_by_request: Optional[str] = alias("isByRequest")
    url: Optional[str] = None


@dataclass
class Cosponsor(MemberRef):
    is_original_cosponsor: Optional[bool] = alias("isOriginalCosponsor")
    sponsorship_date: Optional[str] = alias("sponsorshipDate")
    sponsorship_withdrawn_date: Optional[str] = alias("sponsorshipWithdrawnDate")


@dataclass
class SourceSystem(ResponseShape):
    code: Optional[IntOrStr] = None
    name: Optional[str] = None


@dataclass
class RecordedVote(ResponseShape):
    chamber: Optional[str] = None
    congress: Optional[int] = None
    date: Optional[str] = None
    roll_number: Optional[int] = alias("rollNumber")
    session_number: Optional[int] = alias("sessionNumber")
    url: Optional[str] = None


@dataclass
class TextFormat(ResponseShape):
    type: Optional[str] = None
    url: Optional[str] = None
    is_errata: Optional[str] = alias("isErrata")


@dataclass
class TextVersion(ResponseShape):
    date: Optional[str] = None
    type: Optional[str] = None
    formats: Optional[List[TextFormat]] = None


@dataclass
class PolicyArea(ResponseShape):
    name: Optional[str] = None
    update_date: Optional[str] = alias("updateDate")


@dataclass
class Activity(ResponseShape):
    date: Optional[str] = None
    name: Optional[str] = None


@dataclass
class CommitteeRef(ResponseShape):
    name: Optional[str] = None
    system_code: Optional[str] = alias("systemCode")
    chamber: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    activities: Optional[List[Activity]] = None
    subcommittees: Optional[List["CommitteeRef"]] = None


@dataclass
class Action(ResponseShape):
    action_code: Optional[str] = alias("actionCode")
    action_date: Optional[str] = alias("actionDate")
    action_time: Optional[str] = alias("actionTime")
    text: Optional[str] = None
    type: Optional[str] = None
    source_system: Optional[SourceSystem] = alias("sourceSystem")
    committees: Optional[List[CommitteeRef]] = None
    recorded_votes: Optional[List[RecordedVote]] = alias("recordedVotes")


# ------------- bills & laws -------------
@dataclass
class LawRef(ResponseShape):
    number: Optional[str] = None
    type: Optional[str] = None


@dataclass
class BillSummary(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    type: Optional[str] = None
    title: Optional[str] = None
    origin_chamber: Optional[str] = alias("originChamber")
    origin_chamber_code: Optional[str] = alias("originChamberCode")
    latest_action: Optional[LatestAction] = alias("latestAction")
    laws: Optional[List[LawRef]] = None
    update_date: Optional[str] = alias("updateDate")
    update_date_including_text: Optional[str] = alias("updateDateIncludingText")
    url: Optional[str] = None


@dataclass
class BillsResponse(PagedResponse):
    """``/bill`` lists; ``/law`` lists use the same body."""
    bills: List[BillSummary] = required("bills")


@dataclass
class CboCostEstimate(ResponseShape):
    description: Optional[str] = None
    pub_date: Optional[str] = alias("pubDate")
    title: Optional[str] = None
    url: Optional[str] = None


@dataclass
class ReportCitation(ResponseShape):
    citation: Optional[str] = None
    url: Optional[str] = None


@dataclass
class BillDetails(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    type: Optional[str] = None
    title: Optional[str] = None
    introduced_date: Optional[str] = alias("introducedDate")
    origin_chamber: Optional[str] = alias("originChamber")
    origin_chamber_code: Optional[str] = alias("originChamberCode")
    constitutional_authority_statement_text: Optional[str] = alias("constitutionalAuthorityStatementText")
    policy_area: Optional[PolicyArea] = alias("policyArea")
    latest_action: Optional[LatestAction] = alias("latestAction")
    sponsors: Optional[List[MemberRef]] = None
    laws: Optional[List[LawRef]] = None
    cbo_cost_estimates: Optional[List[CboCostEstimate]] = alias("cboCostEstimates")
    committee_reports: Optional[List[ReportCitation]] = alias("committeeReports")
    actions: Optional[CountRef] = None
    amendments: Optional[CountRef] = None
    committees: Optional[CountRef] = None
    cosponsors: Optional[CosponsorsRef] = None
    related_bills: Optional[CountRef] = alias("relatedBills")
    subjects: Optional[CountRef] = None
    summaries: Optional[CountRef] = None
    text_versions: Optional[CountRef] = alias("textVersions")
    titles: Optional[CountRef] = None
    update_date: Optional[str] = alias("updateDate")
    update_date_including_text: Optional[str] = alias("updateDateIncludingText")


@dataclass
class BillDetailsResponse(ApiResponse):
    """``/bill/{congress}/{type}/{number}``; law details use the same body."""
    bill: BillDetails = required("bill")


@dataclass
class BillActionsResponse(PagedResponse):
    actions: List[Action] = required("actions")


@dataclass
class AmendmentSummary(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    type: Optional[str] = None
    description: Optional[str] = None
    purpose: Optional[str] = None
    latest_action: Optional[LatestAction] = alias("latestAction")
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class BillAmendmentsResponse(PagedResponse):
    amendments: List[AmendmentSummary] = required("amendments")


@dataclass
class BillCommitteesResponse(PagedResponse):
    committees: List[CommitteeRef] = required("committees")


@dataclass
class BillCosponsorsResponse(PagedResponse):
    cosponsors: List[Cosponsor] = required("cosponsors")


@dataclass
class RelationshipDetail(ResponseShape):
    identified_by: Optional[str] = alias("identifiedBy")
    type: Optional[str] = None


@dataclass
class RelatedBill(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    type: Optional[str] = None
    title: Optional[str] = None
    latest_action: Optional[LatestAction] = alias("latestAction")
    relationship_details: Optional[List[RelationshipDetail]] = alias("relationshipDetails")
    url: Optional[str] = None


@dataclass
class RelatedBillsResponse(PagedResponse):
    related_bills: List[RelatedBill] = required("relatedBills")


@dataclass
class LegislativeSubject(ResponseShape):
    name: Optional[str] = None
    update_date: Optional[str] = alias("updateDate")


@dataclass
class Subjects(ResponseShape):
    legislative_subjects: Optional[List[LegislativeSubject]] = alias("legislativeSubjects")
    policy_area: Optional[PolicyArea] = alias("policyArea")


@dataclass
class BillSubjectsResponse(PagedResponse):
    subjects: Subjects = required("subjects")


@dataclass
class BillSummaryText(ResponseShape):
    action_date: Optional[str] = alias("actionDate")
    action_desc: Optional[str] = alias("actionDesc")
    text: Optional[str] = None
    update_date: Optional[str] = alias("updateDate")
    version_code: Optional[str] = alias("versionCode")


@dataclass
class BillSummariesResponse(PagedResponse):
    summaries: List[BillSummaryText] = required("summaries")


@dataclass
class BillTextResponse(PagedResponse):
    text_versions: List[TextVersion] = required("textVersions")


@dataclass
class BillTitle(ResponseShape):
    title: Optional[str] = None
    title_type: Optional[str] = alias("titleType")
    title_type_code: Optional[int] = alias("titleTypeCode")
    bill_text_version_code: Optional[str] = alias("billTextVersionCode")
    bill_text_version_name: Optional[str] = alias("billTextVersionName")
    chamber_code: Optional[str] = alias("chamberCode")
    chamber_name: Optional[str] = alias("chamberName")
    update_date: Optional[str] = alias("updateDate")


@dataclass
class BillTitlesResponse(PagedResponse):
    titles: List[BillTitle] = required("titles")


# ------------- amendments -------------
@dataclass
class AmendmentsResponse(PagedResponse):
    amendments: List[AmendmentSummary] = required("amendments")


@dataclass
class AmendedBill(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    type: Optional[str] = None
    title: Optional[str] = None
    origin_chamber: Optional[str] = alias("originChamber")
    origin_chamber_code: Optional[str] = alias("originChamberCode")
    url: Optional[str] = None


@dataclass
class AmendmentDetails(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    type: Optional[str] = None
    chamber: Optional[str] = None
    description: Optional[str] = None
    purpose: Optional[str] = None
    proposed_date: Optional[str] = alias("proposedDate")
    submitted_date: Optional[str] = alias("submittedDate")
    amended_bill: Optional[AmendedBill] = alias("amendedBill")
    sponsors: Optional[List[MemberRef]] = None
    latest_action: Optional[LatestAction] = alias("latestAction")
    actions: Optional[CountRef] = None
    amendments_to_amendment: Optional[CountRef] = alias("amendmentsToAmendment")
    cosponsors: Optional[CosponsorsRef] = None
    text_versions: Optional[CountRef] = alias("textVersions")
    update_date: Optional[str] = alias("updateDate")


@dataclass
class AmendmentDetailsResponse(ApiResponse):
    amendment: AmendmentDetails = required("amendment")


@dataclass
class AmendmentActionsResponse(PagedResponse):
    actions: List[Action] = required("actions")


@dataclass
class AmendmentCosponsorsResponse(PagedResponse):
    cosponsors: List[Cosponsor] = required("cosponsors")


@dataclass
class AmendmentAmendmentsResponse(PagedResponse):
    amendments: List[AmendmentSummary] = required("amendments")


@dataclass
class AmendmentTextResponse(PagedResponse):
    text_versions: List[TextVersion] = required("textVersions")


# ------------- summaries -------------
@dataclass
class SummaryBill(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    type: Optional[str] = None
    title: Optional[str] = None
    origin_chamber: Optional[str] = alias("originChamber")
    origin_chamber_code: Optional[str] = alias("originChamberCode")
    update_date_including_text: Optional[str] = alias("updateDateIncludingText")
    url: Optional[str] = None


@dataclass
class SummaryItem(ResponseShape):
    action_date: Optional[str] = alias("actionDate")
    action_desc: Optional[str] = alias("actionDesc")
    bill: Optional[SummaryBill] = None
    current_chamber: Optional[str] = alias("currentChamber")
    current_chamber_code: Optional[str] = alias("currentChamberCode")
    last_summary_update_date: Optional[str] = alias("lastSummaryUpdateDate")
    text: Optional[str] = None
    update_date: Optional[str] = alias("updateDate")
    version_code: Optional[str] = alias("versionCode")


@dataclass
class SummariesResponse(PagedResponse):
    summaries: List[SummaryItem] = required("summaries")


# ------------- congress -------------
@dataclass
class Session(ResponseShape):
    chamber: Optional[str] = None
    number: Optional[int] = None
    type: Optional[str] = None
    start_date: Optional[str] = alias("startDate")
    end_date: Optional[str] = alias("endDate")


@dataclass
class CongressSummary(ResponseShape):
    name: Optional[str] = None
    number: Optional[int] = None
    start_year: Optional[str] = alias("startYear")
    end_year: Optional[str] = alias("endYear")
    sessions: Optional[List[Session]] = None
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class CongressesResponse(PagedResponse):
    congresses: List[CongressSummary] = required("congresses")


@dataclass
class CongressDetailsResponse(ApiResponse):
    congress: CongressSummary = required("congress")


# ------------- members -------------
@dataclass
class Depiction(ResponseShape):
    image_url: Optional[str] = alias("imageUrl")
    attribution: Optional[str] = None


@dataclass
class Term(ResponseShape):
    chamber: Optional[str] = None
    congress: Optional[int] = None
    member_type: Optional[str] = alias("memberType")
    state_code: Optional[str] = alias("stateCode")
    state_name: Optional[str] = alias("stateName")
    party_name: Optional[str] = alias("partyName")
    party_code: Optional[str] = alias("partyCode")
    district: Optional[int] = None
    start_year: Optional[int] = alias("startYear")
    end_year: Optional[int] = alias("endYear")


@dataclass
class TermList(ResponseShape):
    item: Optional[List[Term]] = None


@dataclass
class MemberSummary(ResponseShape):
    bioguide_id: Optional[str] = alias("bioguideId")
    name: Optional[str] = None
    party_name: Optional[str] = alias("partyName")
    state: Optional[str] = None
    district: Optional[int] = None
    depiction: Optional[Depiction] = None
    terms: Optional[TermList] = None
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class MembersResponse(PagedResponse):
    members: List[MemberSummary] = required("members")


@dataclass
class AddressInformation(ResponseShape):
    office_address: Optional[str] = alias("officeAddress")
    city: Optional[str] = None
    district: Optional[str] = None
    zip_code: Optional[IntOrStr] = alias("zipCode")
    phone_number: Optional[str] = alias("phoneNumber")


@dataclass
class Leadership(ResponseShape):
    type: Optional[str] = None
    congress: Optional[int] = None
    current: Optional[bool] = None


@dataclass
class PartyHistory(ResponseShape):
    party_name: Optional[str] = alias("partyName")
    party_abbreviation: Optional[str] = alias("partyAbbreviation")
    start_year: Optional[int] = alias("startYear")
    end_year: Optional[int] = alias("endYear")


@dataclass
class MemberDetails(ResponseShape):
    bioguide_id: Optional[str] = alias("bioguideId")
    current_member: Optional[bool] = alias("currentMember")
    honorific_name: Optional[str] = alias("honorificName")
    first_name: Optional[str] = alias("firstName")
    middle_name: Optional[str] = alias("middleName")
    last_name: Optional[str] = alias("lastName")
    suffix_name: Optional[str] = alias("suffixName")
    nick_name: Optional[str] = alias("nickName")
    direct_order_name: Optional[str] = alias("directOrderName")
    inverted_order_name: Optional[str] = alias("invertedOrderName")
    birth_year: Optional[str] = alias("birthYear")
    death_year: Optional[str] = alias("deathYear")
    state: Optional[str] = None
    district: Optional[int] = None
    depiction: Optional[Depiction] = None
    official_website_url: Optional[str] = alias("officialWebsiteUrl")
    address_information: Optional[AddressInformation] = alias("addressInformation")
    terms: Optional[List[Term]] = None
    leadership: Optional[List[Leadership]] = None
    party_history: Optional[List[PartyHistory]] = alias("partyHistory")
    sponsored_legislation: Optional[CountRef] = alias("sponsoredLegislation")
    cosponsored_legislation: Optional[CountRef] = alias("cosponsoredLegislation")
    update_date: Optional[str] = alias("updateDate")


@dataclass
class MemberDetailsResponse(ApiResponse):
    member: MemberDetails = required("member")


@dataclass
class SponsoredItem(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    type: Optional[str] = None
    title: Optional[str] = None
    amendment_number: Optional[IntOrStr] = alias("amendmentNumber")
    introduced_date: Optional[str] = alias("introducedDate")
    latest_action: Optional[LatestAction] = alias("latestAction")
    policy_area: Optional[PolicyArea] = alias("policyArea")
    url: Optional[str] = None


@dataclass
class SponsoredLegislationResponse(PagedResponse):
    sponsored_legislation: List[SponsoredItem] = required("sponsoredLegislation")


@dataclass
class CosponsoredLegislationResponse(PagedResponse):
    cosponsored_legislation: List[SponsoredItem] = required("cosponsoredLegislation")


# ------------- committees -------------
@dataclass
class CommitteeItem(ResponseShape):
    name: Optional[str] = None
    system_code: Optional[str] = alias("systemCode")
    chamber: Optional[str] = None
    committee_type_code: Optional[str] = alias("committeeTypeCode")
    parent: Optional[CommitteeRef] = None
    subcommittees: Optional[List[CommitteeRef]] = None
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class CommitteesResponse(PagedResponse):
    committees: List[CommitteeItem] = required("committees")


@dataclass
class CommitteeHistory(ResponseShape):
    official_name: Optional[str] = alias("officialName")
    library_of_congress_name: Optional[str] = alias("libraryOfCongressName")
    committee_type_code: Optional[str] = alias("committeeTypeCode")
    start_date: Optional[str] = alias("startDate")
    end_date: Optional[str] = alias("endDate")
    establishing_authority: Optional[str] = alias("establishingAuthority")
    loc_linked_data_id: Optional[str] = alias("locLinkedDataId")
    superintendent_document_number: Optional[str] = alias("superintendentDocumentNumber")
    nara_id: Optional[str] = alias("naraId")
    update_date: Optional[str] = alias("updateDate")


@dataclass
class CommitteeDetails(ResponseShape):
    system_code: Optional[str] = alias("systemCode")
    type: Optional[str] = None
    is_current: Optional[bool] = alias("isCurrent")
    parent: Optional[CommitteeRef] = None
    subcommittees: Optional[List[CommitteeRef]] = None
    history: Optional[List[CommitteeHistory]] = None
    bills: Optional[CountRef] = None
    reports: Optional[CountRef] = None
    nominations: Optional[CountRef] = None
    communications: Optional[CountRef] = None
    update_date: Optional[str] = alias("updateDate")


@dataclass
class CommitteeDetailsResponse(ApiResponse):
    committee: CommitteeDetails = required("committee")


@dataclass
class CommitteeBill(ResponseShape):
    congress: Optional[int] = None
    bill_number: Optional[IntOrStr] = alias("billNumber")
    bill_type: Optional[str] = alias("billType")
    relationship_type: Optional[str] = alias("relationshipType")
    action_date: Optional[str] = alias("actionDate")
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class CommitteeBills(ResponseShape):
    count: Optional[int] = None
    bills: Optional[List[CommitteeBill]] = None


@dataclass
class CommitteeBillsResponse(PagedResponse):
    committee_bills: CommitteeBills = required("committee-bills")


# ------------- committee reports -------------
@dataclass
class CommitteeReportItem(ResponseShape):
    citation: Optional[str] = None
    congress: Optional[int] = None
    chamber: Optional[str] = None
    type: Optional[str] = None
    number: Optional[int] = None
    part: Optional[int] = None
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class CommitteeReportsResponse(PagedResponse):
    reports: List[CommitteeReportItem] = required("reports")


@dataclass
class AssociatedBill(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    type: Optional[str] = None
    url: Optional[str] = None


@dataclass
class AssociatedTreaty(ResponseShape):
    congress: Optional[int] = None
    number: Optional[int] = None
    part: Optional[IntOrStr] = None
    url: Optional[str] = None


@dataclass
class CommitteeReportDetails(ResponseShape):
    citation: Optional[str] = None
    title: Optional[str] = None
    congress: Optional[int] = None
    chamber: Optional[str] = None
    session_number: Optional[int] = alias("sessionNumber")
    number: Optional[int] = None
    part: Optional[int] = None
    type: Optional[str] = None
    report_type: Optional[str] = alias("reportType")
    is_conference_report: Optional[bool] = alias("isConferenceReport")
    issue_date: Optional[str] = alias("issueDate")
    committees: Optional[List[CommitteeRef]] = None
    associated_bill: Optional[List[AssociatedBill]] = alias("associatedBill")
    associated_treaties: Optional[List[AssociatedTreaty]] = alias("associatedTreaties")
    text: Optional[CountRef] = None
    update_date: Optional[str] = alias("updateDate")


@dataclass
class CommitteeReportDetailsResponse(ApiResponse):
    committee_reports: List[CommitteeReportDetails] = required("committeeReports")


@dataclass
class TextVersionsResponse(PagedResponse):
    """Committee report and committee print text: ``{"text": [...]}``."""
    text: List[TextFormat] = required("text")


# ------------- committee prints -------------
@dataclass
class CommitteePrintItem(ResponseShape):
    jacket_number: Optional[IntOrStr] = alias("jacketNumber")
    congress: Optional[int] = None
    chamber: Optional[str] = None
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class CommitteePrintsResponse(PagedResponse):
    committee_prints: List[CommitteePrintItem] = required("committeePrints")


@dataclass
class CommitteePrintDetails(ResponseShape):
    jacket_number: Optional[IntOrStr] = alias("jacketNumber")
    citation: Optional[str] = None
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    title: Optional[str] = None
    chamber: Optional[str] = None
    committees: Optional[List[CommitteeRef]] = None
    associated_bills: Optional[List[AssociatedBill]] = alias("associatedBills")
    text: Optional[CountRef] = None
    update_date: Optional[str] = alias("updateDate")


@dataclass
class CommitteePrintDetailsResponse(ApiResponse):
    committee_print: List[CommitteePrintDetails] = required("committeePrint")


# ------------- committee meetings -------------
@dataclass
class CommitteeMeetingItem(ResponseShape):
    event_id: Optional[IntOrStr] = alias("eventId")
    congress: Optional[int] = None
    chamber: Optional[str] = None
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class CommitteeMeetingsResponse(PagedResponse):
    committee_meetings: List[CommitteeMeetingItem] = required("committeeMeetings")


@dataclass
class MeetingLocation(ResponseShape):
    room: Optional[str] = None
    building: Optional[str] = None
    address: Optional[str] = None


@dataclass
class NamedLink(ResponseShape):
    name: Optional[str] = None
    url: Optional[str] = None


@dataclass
class Witness(ResponseShape):
    name: Optional[str] = None
    position: Optional[str] = None
    organization: Optional[str] = None


@dataclass
class MeetingDocument(ResponseShape):
    name: Optional[str] = None
    description: Optional[str] = None
    document_type: Optional[str] = alias("documentType")
    format: Optional[str] = None
    url: Optional[str] = None


@dataclass
class HearingTranscript(ResponseShape):
    jacket_number: Optional[IntOrStr] = alias("jacketNumber")
    url: Optional[str] = None


@dataclass
class RelatedItemRef(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    type: Optional[str] = None
    part: Optional[IntOrStr] = None
    url: Optional[str] = None


@dataclass
class RelatedItems(ResponseShape):
    bills: Optional[List[RelatedItemRef]] = None
    treaties: Optional[List[RelatedItemRef]] = None
    nominations: Optional[List[RelatedItemRef]] = None


@dataclass
class CommitteeMeetingDetails(ResponseShape):
    event_id: IntOrStr = required("eventId")
    congress: Optional[int] = None
    chamber: Optional[str] = None
    type: Optional[str] = None
    title: Optional[str] = None
    meeting_status: Optional[str] = alias("meetingStatus")
    date: Optional[str] = None
    committees: Optional[List[CommitteeRef]] = None
    location: Optional[MeetingLocation] = None
    videos: Optional[List[NamedLink]] = None
    witnesses: Optional[List[Witness]] = None
    witness_documents: Optional[List[MeetingDocument]] = alias("witnessDocuments")
    meeting_documents: Optional[List[MeetingDocument]] = alias("meetingDocuments")
    hearing_transcript: Optional[List[HearingTranscript]] = alias("hearingTranscript")
    related_items: Optional[RelatedItems] = alias("relatedItems")
    update_date: Optional[str] = alias("updateDate")


@dataclass
class CommitteeMeetingDetailsResponse(ApiResponse):
    committee_meeting: CommitteeMeetingDetails = required("committeeMeeting")


# ------------- hearings -------------
@dataclass
class HearingItem(ResponseShape):
    jacket_number: Optional[IntOrStr] = alias("jacketNumber")
    congress: Optional[int] = None
    chamber: Optional[str] = None
    number: Optional[int] = None
    part: Optional[int] = None
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class HearingsResponse(PagedResponse):
    hearings: List[HearingItem] = required("hearings")


@dataclass
class HearingDate(ResponseShape):
    date: Optional[str] = None


@dataclass
class AssociatedMeeting(ResponseShape):
    event_id: Optional[IntOrStr] = alias("eventId")
    url: Optional[str] = None


@dataclass
class HearingDetails(ResponseShape):
    jacket_number: Optional[IntOrStr] = alias("jacketNumber")
    library_of_congress_identifier: Optional[str] = alias("libraryOfCongressIdentifier")
    congress: Optional[int] = None
    chamber: Optional[str] = None
    number: Optional[int] = None
    part: Optional[int] = None
    title: Optional[str] = None
    citation: Optional[str] = None
    committees: Optional[List[CommitteeRef]] = None
    dates: Optional[List[HearingDate]] = None
    formats: Optional[List[TextFormat]] = None
    associated_meeting: Optional[AssociatedMeeting] = alias("associatedMeeting")
    update_date: Optional[str] = alias("updateDate")


@dataclass
class HearingDetailsResponse(ApiResponse):
    hearing: HearingDetails = required("hearing")


# ------------- congressional record -------------
@dataclass
class PdfPart(ResponseShape):
    part: Optional[IntOrStr] = alias("Part")
    url: Optional[str] = alias("Url")


@dataclass
class RecordSection(ResponseShape):
    label: Optional[str] = alias("Label")
    ordinal: Optional[int] = alias("Ordinal")
    pdf: Optional[List[PdfPart]] = alias("PDF")


@dataclass
class RecordLinks(ResponseShape):
    digest: Optional[RecordSection] = alias("Digest")
    full_record: Optional[RecordSection] = alias("FullRecord")
    house: Optional[RecordSection] = alias("House")
    senate: Optional[RecordSection] = alias("Senate")
    remarks: Optional[RecordSection] = alias("Remarks")


@dataclass
class RecordIssue(ResponseShape):
    id: Optional[int] = alias("Id")
    congress: Optional[IntOrStr] = alias("Congress")
    session: Optional[IntOrStr] = alias("Session")
    volume: Optional[IntOrStr] = alias("Volume")
    issue: Optional[IntOrStr] = alias("Issue")
    publish_date: Optional[str] = alias("PublishDate")
    links: Optional[RecordLinks] = alias("Links")


@dataclass
class RecordResults(ResponseShape):
    issues: Optional[List[RecordIssue]] = alias("Issues")
    index_start: Optional[int] = alias("IndexStart")
    set_size: Optional[int] = alias("SetSize")
    total_count: Optional[int] = alias("TotalCount")


@dataclass
class CongressionalRecordResponse(ApiResponse):
    results: RecordResults = required("Results")


@dataclass
class DailyIssue(ResponseShape):
    congress: Optional[IntOrStr] = None
    session_number: Optional[IntOrStr] = alias("sessionNumber")
    volume_number: Optional[IntOrStr] = alias("volumeNumber")
    issue_number: Optional[IntOrStr] = alias("issueNumber")
    issue_date: Optional[str] = alias("issueDate")
    full_issue: Optional[Any] = alias("fullIssue")
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class DailyRecordResponse(PagedResponse):
    daily_congressional_record: List[DailyIssue] = required("dailyCongressionalRecord")


@dataclass
class DailyRecordIssueResponse(ApiResponse):
    issue: DailyIssue = required("issue")


@dataclass
class Article(ResponseShape):
    title: Optional[str] = None
    start_page: Optional[str] = alias("startPage")
    end_page: Optional[str] = alias("endPage")
    text: Optional[List[TextFormat]] = None


@dataclass
class ArticleSection(ResponseShape):
    name: Optional[str] = None
    section_articles: Optional[List[Article]] = alias("sectionArticles")


@dataclass
class DailyRecordArticlesResponse(PagedResponse):
    articles: List[ArticleSection] = required("articles")


@dataclass
class BoundRecordItem(ResponseShape):
    congress: Optional[int] = None
    session_number: Optional[int] = alias("sessionNumber")
    volume_number: Optional[int] = alias("volumeNumber")
    date: Optional[str] = None
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class BoundRecordResponse(PagedResponse):
    bound_congressional_record: List[BoundRecordItem] = required("boundCongressionalRecord")


# ------------- communications & requirements -------------
@dataclass
class CommunicationTypeInfo(ResponseShape):
    code: Optional[str] = None
    name: Optional[str] = None


@dataclass
class CommunicationItem(ResponseShape):
    chamber: Optional[str] = None
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    communication_type: Optional[CommunicationTypeInfo] = alias("communicationType")
    referral_date: Optional[str] = alias("referralDate")
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class HouseCommunicationsResponse(PagedResponse):
    house_communications: List[CommunicationItem] = required("houseCommunications")


@dataclass
class SenateCommunicationsResponse(PagedResponse):
    senate_communications: List[CommunicationItem] = required("senateCommunications")


@dataclass
class CommunicationCommittee(ResponseShape):
    name: Optional[str] = None
    system_code: Optional[str] = alias("systemCode")
    referral_date: Optional[str] = alias("referralDate")
    url: Optional[str] = None


@dataclass
class MatchingRequirement(ResponseShape):
    number: Optional[IntOrStr] = None
    url: Optional[str] = None


@dataclass
class HouseDocument(ResponseShape):
    citation: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None


@dataclass
class CommunicationDetails(ResponseShape):
    chamber: Optional[str] = None
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    session_number: Optional[int] = alias("sessionNumber")
    communication_type: Optional[CommunicationTypeInfo] = alias("communicationType")
    abstract: Optional[str] = None
    congressional_record_date: Optional[str] = alias("congressionalRecordDate")
    is_rulemaking: Optional[IntOrStr] = alias("isRulemaking")
    committees: Optional[List[CommunicationCommittee]] = None
    matching_requirements: Optional[List[MatchingRequirement]] = alias("matchingRequirements")
    house_document: Optional[List[HouseDocument]] = alias("houseDocument")
    legal_authority: Optional[str] = alias("legalAuthority")
    submitting_agency: Optional[str] = alias("submittingAgency")
    submitting_official: Optional[str] = alias("submittingOfficial")
    report_nature: Optional[str] = alias("reportNature")
    update_date: Optional[str] = alias("updateDate")


@dataclass
class HouseCommunicationDetailsResponse(ApiResponse):
    house_communication: CommunicationDetails = required("house-communication")


@dataclass
class SenateCommunicationDetailsResponse(ApiResponse):
    senate_communication: CommunicationDetails = required("senateCommunication")


@dataclass
class HouseRequirementItem(ResponseShape):
    number: Optional[IntOrStr] = None
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class HouseRequirementsResponse(PagedResponse):
    house_requirements: List[HouseRequirementItem] = required("houseRequirements")


@dataclass
class HouseRequirementDetails(ResponseShape):
    number: Optional[IntOrStr] = None
    parent_agency: Optional[str] = alias("parentAgency")
    frequency: Optional[str] = None
    nature: Optional[str] = None
    legal_authority: Optional[str] = alias("legalAuthority")
    active_record: Optional[bool] = alias("activeRecord")
    submitting_agency: Optional[str] = alias("submittingAgency")
    submitting_official: Optional[str] = alias("submittingOfficial")
    matching_communications: Optional[CountRef] = alias("matchingCommunications")
    update_date: Optional[str] = alias("updateDate")


@dataclass
class HouseRequirementDetailsResponse(ApiResponse):
    house_requirement: HouseRequirementDetails = required("houseRequirement")


@dataclass
class MatchingCommunicationsResponse(PagedResponse):
    matching_communications: List[CommunicationItem] = required("matchingCommunications")


# ------------- nominations -------------
@dataclass
class NominationType(ResponseShape):
    is_civilian: Optional[bool] = alias("isCivilian")
    is_military: Optional[bool] = alias("isMilitary")


@dataclass
class NominationItem(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    part_number: Optional[str] = alias("partNumber")
    citation: Optional[str] = None
    description: Optional[str] = None
    organization: Optional[str] = None
    received_date: Optional[str] = alias("receivedDate")
    nomination_type: Optional[NominationType] = alias("nominationType")
    latest_action: Optional[LatestAction] = alias("latestAction")
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class NominationsResponse(PagedResponse):
    nominations: List[NominationItem] = required("nominations")


@dataclass
class NomineePosition(ResponseShape):
    ordinal: Optional[int] = None
    intro_text: Optional[str] = alias("introText")
    organization: Optional[str] = None
    position_title: Optional[str] = alias("positionTitle")
    division: Optional[str] = None
    nominee_count: Optional[int] = alias("nomineeCount")
    url: Optional[str] = None


@dataclass
class NominationDetails(ResponseShape):
    congress: Optional[int] = None
    number: Optional[IntOrStr] = None
    part_number: Optional[str] = alias("partNumber")
    citation: Optional[str] = None
    description: Optional[str] = None
    is_privileged: Optional[bool] = alias("isPrivileged")
    is_list: Optional[bool] = alias("isList")
    received_date: Optional[str] = alias("receivedDate")
    authority_date: Optional[str] = alias("authorityDate")
    executive_calendar_number: Optional[str] = alias("executiveCalendarNumber")
    nomination_type: Optional[NominationType] = alias("nominationType")
    nominees: Optional[List[NomineePosition]] = None
    latest_action: Optional[LatestAction] = alias("latestAction")
    actions: Optional[CountRef] = None
    committees: Optional[CountRef] = None
    hearings: Optional[CountRef] = None
    update_date: Optional[str] = alias("updateDate")


@dataclass
class NominationDetailsResponse(ApiResponse):
    nomination: NominationDetails = required("nomination")


@dataclass
class Nominee(ResponseShape):
    ordinal: Optional[int] = None
    first_name: Optional[str] = alias("firstName")
    middle_name: Optional[str] = alias("middleName")
    last_name: Optional[str] = alias("lastName")
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    state: Optional[str] = None
    effective_date: Optional[str] = alias("effectiveDate")
    predecessor_name: Optional[str] = alias("predecessorName")
    corps_code: Optional[str] = alias("corpsCode")


@dataclass
class NomineesResponse(PagedResponse):
    nominees: List[Nominee] = required("nominees")


@dataclass
class ActionsResponse(PagedResponse):
    """Actions on a nomination or a treaty."""
    actions: List[Action] = required("actions")


@dataclass
class CommitteeActivityResponse(PagedResponse):
    """Committees a nomination or treaty was referred to."""
    committees: List[CommitteeRef] = required("committees")


@dataclass
class NominationHearing(ResponseShape):
    chamber: Optional[str] = None
    citation: Optional[str] = None
    date: Optional[str] = None
    jacket_number: Optional[IntOrStr] = alias("jacketNumber")
    number: Optional[int] = None
    part: Optional[IntOrStr] = None
    errata_number: Optional[str] = alias("errataNumber")


@dataclass
class NominationHearingsResponse(PagedResponse):
    hearings: List[NominationHearing] = required("hearings")


# ------------- treaties -------------
@dataclass
class TreatyParts(ResponseShape):
    count: Optional[int] = None
    urls: Optional[List[str]] = None


@dataclass
class TreatyItem(ResponseShape):
    congress_received: Optional[int] = alias("congressReceived")
    congress_considered: Optional[int] = alias("congressConsidered")
    number: Optional[IntOrStr] = None
    suffix: Optional[str] = None
    topic: Optional[str] = None
    transmitted_date: Optional[str] = alias("transmittedDate")
    resolution_text: Optional[str] = alias("resolutionText")
    parts: Optional[TreatyParts] = None
    update_date: Optional[str] = alias("updateDate")
    url: Optional[str] = None


@dataclass
class TreatiesResponse(PagedResponse):
    treaties: List[TreatyItem] = required("treaties")


@dataclass
class CountryParty(ResponseShape):
    name: Optional[str] = None


@dataclass
class TreatyTitle(ResponseShape):
    title: Optional[str] = None
    title_type: Optional[str] = alias("titleType")


@dataclass
class TreatyDetails(ResponseShape):
    congress_received: Optional[int] = alias("congressReceived")
    congress_considered: Optional[int] = alias("congressConsidered")
    number: Optional[IntOrStr] = None
    suffix: Optional[str] = None
    topic: Optional[str] = None
    titles: Optional[List[TreatyTitle]] = None
    transmitted_date: Optional[str] = alias("transmittedDate")
    in_force_date: Optional[str] = alias("inForceDate")
    resolution_text: Optional[str] = alias("resolutionText")
    countries_parties: Optional[List[CountryParty]] = alias("countriesParties")
    index_terms: Optional[List[NamedLink]] = alias("indexTerms")
    related_docs: Optional[List[NamedLink]] = alias("relatedDocs")
    parts: Optional[TreatyParts] = None
    actions: Optional[CountRef] = None
    update_date: Optional[str] = alias("updateDate")


@dataclass
class TreatyDetailsResponse(ApiResponse):
    treaty: TreatyDetails = required("treaty")
