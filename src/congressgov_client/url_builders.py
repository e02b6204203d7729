from enum import Enum
from typing import Any, List, Optional, Tuple
from urllib.parse import quote, urlencode

from .api_types import API_ENUMS
from .endpoints import ROUTES, Endpoint, EndpointKind
from .errors import UrlConstructionError
from .params import ApiParams

BASE_URL = "https://api.congress.gov/v3"


def _encode_segment(value: Any, name: str) -> Optional[str]:
    """Percent-encode one path identifier. Returns None for an absent identifier."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise UrlConstructionError(f"Identifier {name!r} cannot be a boolean: {value!r}")
    if isinstance(value, Enum):
        if not isinstance(value, API_ENUMS):
            raise UrlConstructionError(f"Identifier {name!r} has unsupported enum type {type(value).__name__}")
        value = value.value
    if isinstance(value, int):
        if value < 0:
            raise UrlConstructionError(f"Identifier {name!r} cannot be negative: {value}")
        return str(value)
    if not isinstance(value, str):
        raise UrlConstructionError(f"Identifier {name!r} has unsupported type {type(value).__name__}: {value!r}")

    value = value.strip()
    if not value:
        return None
    if value in (".", ".."):
        raise UrlConstructionError(f"Identifier {name!r} cannot be {value!r}")
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        raise UrlConstructionError(f"Identifier {name!r} contains control characters: {value!r}")
    try:
        return quote(value, safe="")
    except UnicodeEncodeError as e:
        raise UrlConstructionError(f"Identifier {name!r} is not encodable: {value!r}") from e


def _custom_segments(path: Any) -> List[str]:
    if not isinstance(path, str):
        raise UrlConstructionError(f"Custom path must be a string, got {type(path).__name__}")
    segments = []
    for part in path.split("/"):
        encoded = _encode_segment(part, "path")
        if encoded is not None:
            segments.append(encoded)
    if not segments:
        raise UrlConstructionError(f"Custom path {path!r} has no segments")
    return segments


def _checked_params(endpoint: Endpoint) -> ApiParams:
    expected = ROUTES[endpoint.kind].params
    params = endpoint.params if endpoint.params is not None else expected()
    if not isinstance(params, expected):
        raise UrlConstructionError(
            f"{endpoint.kind.value} takes {expected.__name__}, got {type(params).__name__}"
        )
    return params


def build_path(endpoint: Endpoint) -> str:
    """Ordered, encoded path segments joined with "/". Absent identifiers are skipped."""
    if not isinstance(endpoint, Endpoint):
        raise UrlConstructionError(f"Expected an Endpoint, got {type(endpoint).__name__}")
    route = ROUTES[endpoint.kind]

    if endpoint.kind is EndpointKind.CUSTOM:
        if len(endpoint.identifiers) != 1:
            raise UrlConstructionError("Custom endpoint takes exactly one path")
        return "/".join(_custom_segments(endpoint.identifiers[0]))

    names = route.placeholders
    if len(endpoint.identifiers) > len(names):
        raise UrlConstructionError(
            f"{endpoint.kind.value} takes {len(names)} identifier(s), got {len(endpoint.identifiers)}"
        )
    values = dict(zip(names, endpoint.identifiers))

    segments = []
    for seg in route.segments:
        if seg.startswith("{"):
            name = seg[1:-1]
            encoded = _encode_segment(values.get(name), name)
            if encoded is not None:
                segments.append(encoded)
        else:
            segments.append(seg)
    return "/".join(segments)


def build_query(params: ApiParams, api_key: str) -> str:
    """Present options in declared order, then ``api_key``."""
    pairs: List[Tuple[str, str]] = params.to_query_pairs()
    pairs.append(("api_key", api_key))
    try:
        return urlencode(pairs, safe=":")
    except UnicodeEncodeError as e:
        raise UrlConstructionError(f"Query value is not encodable: {e}") from e


def generate_url(endpoint: Endpoint, api_key: str, base_url: str = BASE_URL) -> str:
    """
    Build the full request URL for an endpoint. Pure and deterministic.

    Raises:
        UrlConstructionError: wrong parameter family, malformed identifier
            or an option value that cannot be encoded.
    """
    if not isinstance(api_key, str) or not api_key:
        raise UrlConstructionError("api_key must be a non-empty string")
    params = _checked_params(endpoint)
    path = build_path(endpoint)
    query = build_query(params, api_key)
    return f"{base_url.rstrip('/')}/{path}?{query}"
