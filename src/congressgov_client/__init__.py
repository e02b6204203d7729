from .api_types import (AmendmentType, BillType, ChamberType,
                        CommitteeReportType, CommunicationType, FormatType,
                        LawType, SortType)
from .congressapi_client import CongressAPIClient  # re-export public class
from .endpoints import ROUTES, Endpoint, EndpointKind
from .errors import (CongressAPIError, MalformedBody, MissingCredential,
                     ShapeMismatch, TransportError, UrlConstructionError)
from .generic import GenericResponse
from .params import ApiParams, GenericParams
from .resolution import (materialize, render_structural, serialize_response,
                         to_structural, try_materialize)
from .response_models import SHAPES, ResponseShape
from .transport import RequestsTransport, TransportResponse
from .url_builders import BASE_URL, generate_url

__all__ = [
    "CongressAPIClient",
    "Endpoint",
    "EndpointKind",
    "ROUTES",
    "ApiParams",
    "GenericParams",
    "GenericResponse",
    "ResponseShape",
    "SHAPES",
    "materialize",
    "try_materialize",
    "to_structural",
    "render_structural",
    "serialize_response",
    "generate_url",
    "BASE_URL",
    "RequestsTransport",
    "TransportResponse",
    "CongressAPIError",
    "MissingCredential",
    "UrlConstructionError",
    "TransportError",
    "MalformedBody",
    "ShapeMismatch",
    "FormatType",
    "SortType",
    "BillType",
    "AmendmentType",
    "ChamberType",
    "CommunicationType",
    "LawType",
    "CommitteeReportType",
]
