from enum import Enum


class FormatType(str, Enum):
    JSON = "json"
    XML = "xml"


class SortType(str, Enum):
    # urlencode turns the space into "+", which is what the API expects
    UPDATE_DATE_ASC = "updateDate asc"
    UPDATE_DATE_DESC = "updateDate desc"


class BillType(str, Enum):
    HR = "hr"
    S = "s"
    HJRES = "hjres"
    SJRES = "sjres"
    HCONRES = "hconres"
    SCONRES = "sconres"
    HRES = "hres"
    SRES = "sres"


class AmendmentType(str, Enum):
    HAMDT = "hamdt"
    SAMDT = "samdt"
    SUAMDT = "suamdt"


class ChamberType(str, Enum):
    HOUSE = "house"
    SENATE = "senate"
    JOINT = "joint"
    NOCHAMBER = "nochamber"


class CommunicationType(str, Enum):
    EC = "ec"   # executive communication
    ML = "ml"   # memorial
    PM = "pm"   # presidential message
    PT = "pt"   # petition


class LawType(str, Enum):
    PUBLIC = "pub"
    PRIVATE = "priv"


class CommitteeReportType(str, Enum):
    HRPT = "hrpt"
    SRPT = "srpt"
    HDOC = "hdoc"
    SDOC = "sdoc"
    CRPT = "crpt"


# Identifier and option values that render as their ``.value``
API_ENUMS = (
    FormatType,
    SortType,
    BillType,
    AmendmentType,
    ChamberType,
    CommunicationType,
    LawType,
    CommitteeReportType,
)
