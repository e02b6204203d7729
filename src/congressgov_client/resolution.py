"""
Turning structural responses into dataclass shapes and back.

``materialize`` is best-effort. It only fails when a *required* field is
absent or holds the wrong kind of JSON value. An optional field with an
unexpected value is left as ``None`` and the raw value is kept in the
shape's ``extra`` so nothing is lost. An explicit ``null`` on an optional
field is recorded in ``extra`` too, so ``to_structural`` gives it back.
"""
import dataclasses
import json
import logging
import typing
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union

from .errors import ShapeMismatch
from .generic import GenericResponse
from .response_models import SHAPES, ResponseShape
from .utils import logger_setup

T = TypeVar("T", bound=ResponseShape)
ShapeRef = Union[Type[ResponseShape], str]

logger = logger_setup(logger_name="congressgov_client.resolution", log_level=logging.INFO)

_NoneType = type(None)


def json_kind(value: Any) -> str:
    """JSON kind name of a structural value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def resolve_shape(shape: ShapeRef) -> Type[ResponseShape]:
    if isinstance(shape, str):
        try:
            return SHAPES[shape]
        except KeyError:
            raise KeyError(f"Unknown response shape {shape!r}") from None
    if isinstance(shape, type) and issubclass(shape, ResponseShape):
        return shape
    raise TypeError(f"Expected a ResponseShape subclass or shape name, got {shape!r}")


@lru_cache(maxsize=None)
def _shape_fields(shape: Type[ResponseShape]) -> Tuple[Tuple[str, str, Any, bool], ...]:
    """(attribute, json key, type, required) for every modelled field."""
    hints = typing.get_type_hints(shape)
    out = []
    for f in dataclasses.fields(shape):
        if f.name == "extra":
            continue
        required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        out.append((f.name, f.metadata.get("key", f.name), hints[f.name], required))
    return tuple(out)


def _to_plain(value: Any) -> Any:
    if isinstance(value, GenericResponse):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def _describe(tp: Any) -> str:
    origin = typing.get_origin(tp)
    if origin is Union:
        return " or ".join(_describe(a) for a in typing.get_args(tp) if a is not _NoneType)
    if origin in (list, typing.List):
        return "array"
    if origin in (dict, typing.Dict) or tp is dict:
        return "object"
    if isinstance(tp, type) and issubclass(tp, ResponseShape):
        return f"object ({tp.__name__})"
    return {str: "string", int: "number", float: "number", bool: "boolean"}.get(tp, "any")


def _convert(value: Any, tp: Any, path: str, shape_name: str) -> Any:
    """Convert one structural value to ``tp`` or raise ShapeMismatch."""
    if tp is Any:
        return _to_plain(value)

    origin = typing.get_origin(tp)
    if origin is Union:
        args = [a for a in typing.get_args(tp) if a is not _NoneType]
        if value is None and len(args) < len(typing.get_args(tp)):
            return None
        last: Optional[ShapeMismatch] = None
        for arg in args:
            try:
                return _convert(value, arg, path, shape_name)
            except ShapeMismatch as e:
                last = e
        if len(args) == 1 and last is not None:
            raise last
        raise ShapeMismatch(shape_name, path, _describe(tp), json_kind(value))

    if origin in (list, typing.List):
        if not isinstance(value, (list, tuple)):
            raise ShapeMismatch(shape_name, path, "array", json_kind(value))
        (item_tp,) = typing.get_args(tp) or (Any,)
        return [_convert(v, item_tp, f"{path}[{i}]", shape_name) for i, v in enumerate(value)]

    if origin in (dict, typing.Dict) or tp is dict:
        if not isinstance(value, Mapping):
            raise ShapeMismatch(shape_name, path, "object", json_kind(value))
        return _to_plain(value)

    if isinstance(tp, type) and issubclass(tp, ResponseShape):
        if not isinstance(value, Mapping):
            raise ShapeMismatch(shape_name, path, f"object ({tp.__name__})", json_kind(value))
        return _build(tp, value, path, shape_name)

    if tp is bool:
        ok = isinstance(value, bool)
    elif tp is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif tp is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif tp is str:
        ok = isinstance(value, str)
    else:
        ok = isinstance(value, tp)
    if not ok:
        raise ShapeMismatch(shape_name, path, _describe(tp), json_kind(value))
    return value


def _build(shape: Type[T], data: Mapping, path: str, shape_name: str) -> T:
    kwargs: Dict[str, Any] = {}
    known = set()
    extra: Dict[str, Any] = {}

    for name, key, tp, required in _shape_fields(shape):
        known.add(key)
        field_path = f"{path}.{key}"
        if key not in data or data[key] is None:
            if required:
                actual = "missing" if key not in data else "null"
                raise ShapeMismatch(shape_name, field_path, _describe(tp), actual)
            if key in data:
                extra[key] = None
            continue
        if required:
            kwargs[name] = _convert(data[key], tp, field_path, shape_name)
            continue
        try:
            kwargs[name] = _convert(data[key], tp, field_path, shape_name)
        except ShapeMismatch as e:
            logger.debug(f"Optional field {e.path} kept raw: expected {e.expected}, got {e.actual}")
            extra[key] = _to_plain(data[key])

    for key, value in data.items():
        if key not in known:
            extra[key] = _to_plain(value)
    return shape(**kwargs, extra=extra)


def _as_structural(structural: Mapping) -> Mapping:
    if isinstance(structural, GenericResponse):
        return structural
    try:
        return GenericResponse(structural)
    except TypeError:
        # non-str keys can't be frozen; attach the input unchanged
        return structural


def materialize(structural: Mapping, shape: ShapeRef) -> ResponseShape:
    """
    Build ``shape`` from a structural response.

    Raises:
        ShapeMismatch: a required field is absent, null or of the wrong kind.
            ``exc.structural`` holds the input so it can still be rendered.
    """
    shape_cls = resolve_shape(shape)
    if not isinstance(structural, Mapping):
        raise ShapeMismatch(shape_cls.__name__, "$", "object", json_kind(structural), structural)
    try:
        return _build(shape_cls, structural, "$", shape_cls.__name__)
    except ShapeMismatch as e:
        e.structural = _as_structural(structural)
        raise


def try_materialize(structural: Mapping, shape: ShapeRef) -> Optional[ResponseShape]:
    """Like ``materialize`` but returns None instead of raising ShapeMismatch."""
    try:
        return materialize(structural, shape)
    except ShapeMismatch as e:
        logger.debug(f"Could not materialize {e.shape}: {e}")
        return None


def _unbuild(value: Any) -> Any:
    if isinstance(value, ResponseShape):
        out: Dict[str, Any] = {}
        for name, key, _tp, _required in _shape_fields(type(value)):
            attr = getattr(value, name)
            if attr is not None:
                out[key] = _unbuild(attr)
        for key, raw in value.extra.items():
            out.setdefault(key, raw)
        return out
    if isinstance(value, (list, tuple)):
        return [_unbuild(v) for v in value]
    return value


def to_structural(instance: ResponseShape) -> GenericResponse:
    """Reverse of ``materialize``: fields under their JSON keys plus ``extra``."""
    if not isinstance(instance, ResponseShape):
        raise TypeError(f"Expected a ResponseShape instance, got {type(instance).__name__}")
    return GenericResponse(_unbuild(instance))


def render_structural(structural: Mapping, pretty: bool = False) -> str:
    if isinstance(structural, GenericResponse):
        return structural.render(pretty=pretty)
    if pretty:
        return json.dumps(_to_plain(structural), indent=2, ensure_ascii=False, allow_nan=False)
    return json.dumps(_to_plain(structural), separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def serialize_response(obj: Union[ResponseShape, Mapping], pretty: bool = False) -> str:
    """Render a shape or a structural response as JSON text."""
    if isinstance(obj, ResponseShape):
        return to_structural(obj).render(pretty=pretty)
    return render_structural(obj, pretty=pretty)
