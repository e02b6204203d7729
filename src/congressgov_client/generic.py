import json
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from .errors import MalformedBody


def _freeze(value: Any) -> Any:
    if isinstance(value, GenericResponse):
        return value
    if isinstance(value, Mapping):
        return GenericResponse(value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _reject_constant(token: str) -> Any:
    # json.loads otherwise accepts NaN/Infinity, which are not JSON
    raise ValueError(f"{token} is not a valid JSON value")


def _thaw(value: Any) -> Any:
    if isinstance(value, GenericResponse):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


class GenericResponse(Mapping):
    """
    Loss-free, read-only view of a JSON object returned by the API.

    Nested objects are GenericResponse instances and arrays are tuples,
    so nothing inside can be mutated after parsing. Every key the server
    sent is kept, including ones no response shape knows about.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping] = None):
        frozen = {}
        for k, v in (data or {}).items():
            if not isinstance(k, str):
                raise TypeError(f"GenericResponse keys must be str, got {type(k).__name__}")
            frozen[k] = _freeze(v)
        object.__setattr__(self, "_data", frozen)

    def __setattr__(self, name, value):
        raise AttributeError("GenericResponse is immutable")

    @classmethod
    def from_json(cls, text: str, url: Optional[str] = None) -> "GenericResponse":
        """Parse a body. Anything other than a JSON object raises MalformedBody."""
        if text is None or not text.strip():
            raise MalformedBody("Empty response body", body="", url=url)
        try:
            parsed = json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            raise MalformedBody(f"Body is not valid JSON: {e}", body=text, url=url) from e
        if not isinstance(parsed, dict):
            raise MalformedBody(f"Top-level JSON value is a {type(parsed).__name__}, not an object",
                                body=text, url=url)
        return cls(parsed)

    # Mapping protocol
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"GenericResponse({self.to_dict()!r})"

    def get_path(self, dotted: str, default: Any = None) -> Any:
        """Look up a nested value, e.g. ``resp.get_path("bill.latestAction.text")``."""
        node: Any = self
        for part in dotted.split("."):
            if isinstance(node, Mapping) and part in node:
                node = node[part]
            elif isinstance(node, tuple) and part.isdigit() and int(part) < len(node):
                node = node[int(part)]
            else:
                return default
        return node

    def to_dict(self) -> Dict[str, Any]:
        """Plain, mutable copy made of dicts and lists."""
        return {k: _thaw(v) for k, v in self._data.items()}

    def render(self, pretty: bool = False) -> str:
        """JSON text with every key, compact or indented by two spaces."""
        if pretty:
            return json.dumps(self.to_dict(), indent=2, ensure_ascii=False, allow_nan=False)
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False, allow_nan=False)

    def __str__(self) -> str:
        return self.render(pretty=True)
