"""
Query parameter bundles for every endpoint family.

Each bundle is a frozen dataclass. Field order is query order, and a
field's ``key`` metadata is the query key the API expects. Bundles are
built with chained ``with_<option>`` calls, each returning a new bundle:

    MemberListParams().with_limit(10).with_current_member(True)

Passing ``None`` to a ``with_`` method drops the option from the query.
"""
from __future__ import annotations

import inspect
from dataclasses import MISSING, dataclass, field, fields, replace
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from .api_types import ChamberType, FormatType, SortType
from .errors import UrlConstructionError

DateLike = Union[datetime, date, str]


def option(key: str, default: Any = None):
    """Declare a query option with its wire key."""
    return field(default=default, metadata={"key": key})


def _option_setter(name: str):
    def setter(self, value):
        return replace(self, **{name: value})

    setter.__name__ = f"with_{name}"
    setter.__doc__ = f"Return a copy with ``{name}`` set. ``None`` removes it from the query."
    return setter


def format_query_value(value: Any) -> str:
    """Render one option value the way the API expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%dT00:00:00Z")
    if isinstance(value, (int, float, str)):
        return str(value)
    raise UrlConstructionError(f"Cannot encode query value of type {type(value).__name__}: {value!r}")


@dataclass(frozen=True)
class ApiParams:
    """Base for every parameter family. Subclasses add options in query order."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for name in inspect.get_annotations(cls):
            setter_name = f"with_{name}"
            if setter_name not in cls.__dict__:
                setattr(cls, setter_name, _option_setter(name))

    def reset(self, *names: str) -> "ApiParams":
        """Restore the named options (all options if none given) to their defaults."""
        defaults = {}
        for f in fields(self):
            if names and f.name not in names:
                continue
            defaults[f.name] = f.default if f.default is not MISSING else None
        unknown = set(names) - {f.name for f in fields(self)}
        if unknown:
            raise AttributeError(f"{type(self).__name__} has no option(s) {sorted(unknown)}")
        return replace(self, **defaults)

    def options(self) -> Dict[str, Any]:
        """Present options keyed by wire name, in query order."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                out[f.metadata.get("key", f.name)] = value
        return out

    def to_query_pairs(self) -> List[Tuple[str, str]]:
        return [(k, format_query_value(v)) for k, v in self.options().items()]


# ------------- shared tiers -------------
@dataclass(frozen=True)
class FormatParams(ApiParams):
    format: Optional[FormatType] = option("format", FormatType.JSON)


@dataclass(frozen=True)
class PagedParams(FormatParams):
    offset: Optional[int] = option("offset")
    limit: Optional[int] = option("limit")


@dataclass(frozen=True)
class DateRangeParams(PagedParams):
    from_date_time: Optional[DateLike] = option("fromDateTime")
    to_date_time: Optional[DateLike] = option("toDateTime")


@dataclass(frozen=True)
class SortedParams(DateRangeParams):
    sort: Optional[SortType] = option("sort")


# ------------- bills -------------
@dataclass(frozen=True)
class BillListParams(SortedParams):
    """``/bill``"""


@dataclass(frozen=True)
class BillByCongressParams(SortedParams):
    """``/bill/{congress}``"""


@dataclass(frozen=True)
class BillByTypeParams(SortedParams):
    """``/bill/{congress}/{billType}``"""


@dataclass(frozen=True)
class BillDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class BillActionsParams(PagedParams):
    pass


@dataclass(frozen=True)
class BillAmendmentsParams(PagedParams):
    pass


@dataclass(frozen=True)
class BillCommitteesParams(PagedParams):
    pass


@dataclass(frozen=True)
class BillCosponsorsParams(SortedParams):
    pass


@dataclass(frozen=True)
class BillRelatedParams(PagedParams):
    pass


@dataclass(frozen=True)
class BillSubjectsParams(DateRangeParams):
    pass


@dataclass(frozen=True)
class BillSummariesParams(PagedParams):
    pass


@dataclass(frozen=True)
class BillTextParams(PagedParams):
    pass


@dataclass(frozen=True)
class BillTitlesParams(DateRangeParams):
    pass


# ------------- laws -------------
@dataclass(frozen=True)
class LawParams(DateRangeParams):
    """``/law/{congress}`` and ``/law/{congress}/{lawType}``"""


@dataclass(frozen=True)
class LawDetailsParams(FormatParams):
    pass


# ------------- amendments -------------
@dataclass(frozen=True)
class AmendmentListParams(SortedParams):
    pass


@dataclass(frozen=True)
class AmendmentByCongressParams(SortedParams):
    pass


@dataclass(frozen=True)
class AmendmentByTypeParams(SortedParams):
    pass


@dataclass(frozen=True)
class AmendmentDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class AmendmentActionsParams(PagedParams):
    pass


@dataclass(frozen=True)
class AmendmentCosponsorsParams(PagedParams):
    pass


@dataclass(frozen=True)
class AmendmentAmendmentsParams(PagedParams):
    pass


@dataclass(frozen=True)
class AmendmentTextParams(FormatParams):
    pass


# ------------- summaries -------------
@dataclass(frozen=True)
class SummariesListParams(SortedParams):
    pass


@dataclass(frozen=True)
class SummariesByCongressParams(SortedParams):
    pass


@dataclass(frozen=True)
class SummariesByTypeParams(SortedParams):
    pass


# ------------- congress -------------
@dataclass(frozen=True)
class CongressListParams(PagedParams):
    pass


@dataclass(frozen=True)
class CongressDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class CongressCurrentParams(FormatParams):
    pass


# ------------- members -------------
@dataclass(frozen=True)
class MemberListParams(DateRangeParams):
    current_member: Optional[bool] = option("currentMember")


@dataclass(frozen=True)
class MemberByCongressParams(PagedParams):
    current_member: Optional[bool] = option("currentMember")


@dataclass(frozen=True)
class MemberByStateParams(PagedParams):
    current_member: Optional[bool] = option("currentMember")


@dataclass(frozen=True)
class MemberByStateDistrictParams(PagedParams):
    current_member: Optional[bool] = option("currentMember")


@dataclass(frozen=True)
class MemberByCongressStateDistrictParams(PagedParams):
    current_member: Optional[bool] = option("currentMember")


@dataclass(frozen=True)
class MemberDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class SponsorshipListParams(PagedParams):
    """Sponsored and cosponsored legislation of one member."""


# ------------- committees -------------
@dataclass(frozen=True)
class CommitteeListParams(DateRangeParams):
    pass


@dataclass(frozen=True)
class CommitteeByChamberParams(DateRangeParams):
    pass


@dataclass(frozen=True)
class CommitteeByCongressParams(DateRangeParams):
    pass


@dataclass(frozen=True)
class CommitteeByCongressChamberParams(DateRangeParams):
    pass


@dataclass(frozen=True)
class CommitteeDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class CommitteeBillsParams(DateRangeParams):
    pass


@dataclass(frozen=True)
class CommitteeReportsByCommitteeParams(DateRangeParams):
    pass


@dataclass(frozen=True)
class CommitteeNominationsParams(PagedParams):
    pass


@dataclass(frozen=True)
class CommitteeCommunicationsParams(PagedParams):
    """House and senate communications referred to one committee."""


# ------------- committee reports -------------
@dataclass(frozen=True)
class CommitteeReportListParams(DateRangeParams):
    conference: Optional[bool] = option("conference")


@dataclass(frozen=True)
class CommitteeReportByCongressParams(DateRangeParams):
    conference: Optional[bool] = option("conference")


@dataclass(frozen=True)
class CommitteeReportByTypeParams(DateRangeParams):
    conference: Optional[bool] = option("conference")


@dataclass(frozen=True)
class CommitteeReportDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class CommitteeReportTextParams(FormatParams):
    pass


# ------------- committee prints -------------
@dataclass(frozen=True)
class CommitteePrintListParams(DateRangeParams):
    pass


@dataclass(frozen=True)
class CommitteePrintByCongressParams(DateRangeParams):
    pass


@dataclass(frozen=True)
class CommitteePrintByChamberParams(DateRangeParams):
    pass


@dataclass(frozen=True)
class CommitteePrintDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class CommitteePrintTextParams(PagedParams):
    pass


# ------------- committee meetings -------------
@dataclass(frozen=True)
class CommitteeMeetingListParams(PagedParams):
    pass


@dataclass(frozen=True)
class CommitteeMeetingByCongressParams(PagedParams):
    pass


@dataclass(frozen=True)
class CommitteeMeetingByChamberParams(PagedParams):
    pass


@dataclass(frozen=True)
class CommitteeMeetingDetailsParams(FormatParams):
    pass


# ------------- hearings -------------
@dataclass(frozen=True)
class HearingListParams(PagedParams):
    pass


@dataclass(frozen=True)
class HearingByCongressParams(PagedParams):
    pass


@dataclass(frozen=True)
class HearingByChamberParams(PagedParams):
    pass


@dataclass(frozen=True)
class HearingDetailsParams(FormatParams):
    pass


# ------------- congressional record -------------
@dataclass(frozen=True)
class CongressionalRecordParams(PagedParams):
    year: Optional[int] = option("year")
    month: Optional[int] = option("month")
    day: Optional[int] = option("day")


@dataclass(frozen=True)
class DailyRecordListParams(PagedParams):
    pass


@dataclass(frozen=True)
class DailyRecordArticlesParams(PagedParams):
    pass


@dataclass(frozen=True)
class BoundRecordParams(PagedParams):
    pass


# ------------- communications & requirements -------------
@dataclass(frozen=True)
class CommunicationListParams(PagedParams):
    pass


@dataclass(frozen=True)
class CommunicationDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class HouseRequirementListParams(PagedParams):
    pass


@dataclass(frozen=True)
class HouseRequirementDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class HouseRequirementMatchingParams(PagedParams):
    pass


# ------------- nominations -------------
@dataclass(frozen=True)
class NominationListParams(SortedParams):
    pass


@dataclass(frozen=True)
class NominationByCongressParams(SortedParams):
    pass


@dataclass(frozen=True)
class NominationDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class NominationSubresourceParams(PagedParams):
    """Nominees, actions, committees and hearings of one nomination."""


# ------------- treaties -------------
@dataclass(frozen=True)
class TreatyListParams(SortedParams):
    pass


@dataclass(frozen=True)
class TreatyByCongressParams(SortedParams):
    pass


@dataclass(frozen=True)
class TreatyDetailsParams(FormatParams):
    pass


@dataclass(frozen=True)
class TreatySubresourceParams(PagedParams):
    """Actions and committees of one treaty."""


# ------------- custom -------------
@dataclass(frozen=True)
class GenericParams(SortedParams):
    """Every option the API knows about. Used with ``Endpoint.custom``."""
    conference: Optional[bool] = option("conference")
    current_member: Optional[bool] = option("currentMember")
    year: Optional[int] = option("year")
    month: Optional[int] = option("month")
    day: Optional[int] = option("day")
    chamber: Optional[ChamberType] = option("chamber")
