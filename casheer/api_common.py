"""JSON:API payload types shared by every resource, and the error format."""

from __future__ import annotations

import dataclasses
import functools
import json
import re
import types
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Optional, Union, get_args, get_origin

TOTAL_TYPE = "total"

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TIME_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)

# Classes that may appear in field annotations, by name.
_REGISTRY: dict[str, Any] = {}

_SIMPLE_TYPES: dict[str, Any] = {
    "str": str,
    "int": int,
    "bool": bool,
    "float": float,
    "datetime": datetime,
    "Any": Any,
    "object": object,
    "None": type(None),
    "NoneType": type(None),
}

_TOKEN_RE = re.compile(r"\s*([A-Za-z_][A-Za-z_0-9.]*|[\[\],|])")


def _format_time(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    fraction = f"{value.microsecond:06d}".rstrip("0")
    if fraction:
        text += "." + fraction
    offset = value.utcoffset()
    if not offset:
        return text + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{mins:02d}"


def _parse_time(text: Any, path: str) -> datetime:
    if not isinstance(text, str):
        raise ValueError(f"{path}: expected a timestamp string, got {type(text).__name__}")
    match = _TIME_RE.match(text)
    if match is None:
        raise ValueError(f"{path}: invalid timestamp {text!r}")
    base, fraction, zone = match.groups()
    if fraction:
        base += "." + fraction[:6].ljust(6, "0")
    zone = "+00:00" if zone == "Z" else zone
    try:
        return datetime.fromisoformat(base + zone)
    except ValueError as exc:
        raise ValueError(f"{path}: invalid timestamp {text!r}") from exc


class _AnnotationParser:
    """Resolves a field annotation written as text into a type object."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens: list[str] = []
        pos = 0
        stripped = text.rstrip()
        while pos < len(stripped):
            match = _TOKEN_RE.match(stripped, pos)
            if match is None:
                raise TypeError(f"cannot parse annotation {text!r}")
            self.tokens.append(match.group(1))
            pos = match.end()
        self.pos = 0

    def _peek(self) -> Optional[str]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            raise TypeError(f"cannot parse annotation {self.text!r}")
        self.pos += 1
        return token

    def parse(self) -> Any:
        result = self._union()
        if self.pos != len(self.tokens):
            raise TypeError(f"cannot parse annotation {self.text!r}")
        return result

    def _union(self) -> Any:
        parts = [self._atom()]
        while self._peek() == "|":
            self._next()
            parts.append(self._atom())
        if len(parts) == 1:
            return parts[0]
        return Union[tuple(parts)]

    def _atom(self) -> Any:
        name = self._next()
        if name in ("[", "]", ",", "|"):
            raise TypeError(f"cannot parse annotation {self.text!r}")
        args: Optional[list[Any]] = None
        if self._peek() == "[":
            self._next()
            args = [self._union()]
            while self._peek() == ",":
                self._next()
                args.append(self._union())
            if self._next() != "]":
                raise TypeError(f"cannot parse annotation {self.text!r}")
        return self._build(name.rsplit(".", 1)[-1], args)

    def _build(self, name: str, args: Optional[list[Any]]) -> Any:
        if args is None:
            if name in _SIMPLE_TYPES:
                return _SIMPLE_TYPES[name]
            if name in _REGISTRY:
                return _REGISTRY[name]
            raise TypeError(f"cannot resolve annotation {name!r} in {self.text!r}")
        if name == "Optional" and len(args) == 1:
            return Optional[args[0]]
        if name == "Union":
            return Union[tuple(args)]
        if name in ("list", "List") and len(args) == 1:
            return list[args[0]]
        if name in ("dict", "Dict") and len(args) == 2:
            return dict[args[0], args[1]]
        raise TypeError(f"cannot resolve annotation {self.text!r}")


def _unwrap_optional(tp: Any) -> tuple[Any, bool]:
    if get_origin(tp) in (Union, types.UnionType):
        args = get_args(tp)
        rest = [a for a in args if a is not type(None)]
        if len(rest) == 1 and len(args) == 2:
            return rest[0], True
    return tp, False


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, dict)):
        return not value
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def _decodable(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, (JsonModel, ApiError, ErrorResponse))


def _decode(tp: Any, value: Any, path: str) -> Any:
    tp, _ = _unwrap_optional(tp)
    if value is None:
        return None
    if get_origin(tp) is list:
        if not isinstance(value, list):
            raise ValueError(f"{path}: expected a JSON array, got {type(value).__name__}")
        (item_type,) = get_args(tp)
        return [_decode(item_type, item, f"{path}[{i}]") for i, item in enumerate(value)]
    if _decodable(tp):
        return tp.from_dict(value)
    if tp is datetime:
        return _parse_time(value, path)
    if tp is bool:
        if not isinstance(value, bool):
            raise ValueError(f"{path}: expected a boolean, got {type(value).__name__}")
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{path}: expected an integer, got {type(value).__name__}")
        return value
    if tp is str:
        if not isinstance(value, str):
            raise ValueError(f"{path}: expected a string, got {type(value).__name__}")
        return value
    return value


def _encode(value: Any) -> Any:
    if isinstance(value, (JsonModel, ApiError, ErrorResponse)):
        return value.to_dict()
    if isinstance(value, list):
        return [_encode(item) for item in value]
    if isinstance(value, datetime):
        return _format_time(value)
    return value


@functools.lru_cache(maxsize=None)
def _type_hints(cls: type) -> dict[str, Any]:
    hints: dict[str, Any] = {}
    for f in dataclasses.fields(cls):  # type: ignore[arg-type]
        tp = f.type
        if isinstance(tp, str):
            tp = _AnnotationParser(tp).parse()
        hints[f.name] = tp
    return hints


class JsonModel:
    """Base for dataclasses that travel as JSON objects.

    Optional fields are left out when they are None; fields named in
    ``_omit_if_empty`` are left out when they hold their zero value; and
    ``_json_keys`` renames fields whose JSON key differs from their name.
    Fields of parent dataclasses appear flattened in the same object.
    """

    _json_keys: ClassVar[dict[str, str]] = {}
    _omit_if_empty: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _REGISTRY[cls.__name__] = cls

    @classmethod
    def _key_map(cls) -> dict[str, str]:
        merged: dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            merged.update(vars(klass).get("_json_keys", {}))
        return merged

    @classmethod
    def _omitted(cls) -> frozenset[str]:
        names: set[str] = set()
        for klass in cls.__mro__:
            names.update(vars(klass).get("_omit_if_empty", ()))
        return frozenset(names)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for this value."""
        hints = _type_hints(type(self))
        keys = self._key_map()
        omitted = self._omitted()
        out: dict[str, Any] = {}
        for f in dataclasses.fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            _, optional = _unwrap_optional(hints[f.name])
            if optional and value is None:
                continue
            if f.name in omitted and _is_zero(value):
                continue
            out[keys.get(f.name, f.name)] = _encode(value)
        return out

    @classmethod
    def from_dict(cls, data: Any):
        """Build a value from a decoded JSON object; raise ValueError on bad input."""
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object for {cls.__name__}")
        hints = _type_hints(cls)
        keys = cls._key_map()
        kwargs: dict[str, Any] = {}
        for f in dataclasses.fields(cls):  # type: ignore[arg-type]
            key = keys.get(f.name, f.name)
            if key not in data:
                continue
            raw = data[key]
            tp, optional = _unwrap_optional(hints[f.name])
            if raw is None:
                if optional:
                    kwargs[f.name] = None
                continue
            kwargs[f.name] = _decode(tp, raw, key)
        return cls(**kwargs)

    def to_json(self) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str | bytes):
        """Parse a JSON string; raise ValueError on malformed input."""
        return cls.from_dict(json.loads(text))


@dataclass
class Timestamps(JsonModel):
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class DefaultLinks(JsonModel):
    """Links back to the home page of the API."""

    home: str = ""


@dataclass
class HomeLink(JsonModel):
    href: str = ""
    title: str = ""


@dataclass
class MonetaryValueAttributes(JsonModel):
    """A currency-agnostic value: amount * 10**exponent."""

    amount: int = 0
    currency: str = ""
    exponent: int = 0


@dataclass
class MonetaryMutableValueAttributes(JsonModel):
    """The parts of a monetary value that an update may change."""

    amount: Optional[int] = None
    currency: Optional[str] = None
    exponent: Optional[int] = None


@dataclass
class MonetaryValueCreationAttributes(JsonModel):
    """A monetary value as given on creation; the exponent is optional."""

    amount: int = 0
    currency: str = ""
    exponent: Optional[int] = None


@dataclass
class ResourceID(JsonModel):
    id: str = ""
    type: str = ""


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class ApiError(Exception):
    """An error object sent to clients when a request fails."""

    def __init__(self, status: int = 0, title: str = "", detail: str = "") -> None:
        super().__init__(status, title, detail)
        self.status = status
        self.title = title
        self.detail = detail

    def _key(self) -> tuple[int, str, str]:
        return (self.status, self.title, self.detail)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return (
            f'{{"Status":{self.status},"Title":{_quote(self.title)},'
            f'"Detail":{_quote(self.detail)}}}'
        )

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "title": self.title, "detail": self.detail}

    @classmethod
    def from_dict(cls, data: Any) -> "ApiError":
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object for an error")
        status = data.get("status")
        title = data.get("title")
        detail = data.get("detail")
        return cls(
            status=0 if status is None else _decode(int, status, "status"),
            title="" if title is None else _decode(str, title, "title"),
            detail="" if detail is None else _decode(str, detail, "detail"),
        )


class ErrorResponse(Exception):
    """The body of a failed response; wraps an ApiError."""

    def __init__(self, err: Optional[ApiError] = None) -> None:
        self.err = err if err is not None else ApiError()
        super().__init__(self.err)
        self.__cause__ = self.err

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorResponse):
            return NotImplemented
        return self.err == other.err

    def __hash__(self) -> int:
        return hash(self.err)

    def __str__(self) -> str:
        return f"{{error:{self.err}}}"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.err.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> "ErrorResponse":
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object for an error response")
        inner = data.get("error")
        return cls(ApiError() if inner is None else ApiError.from_dict(inner))


_REGISTRY["ApiError"] = ApiError
_REGISTRY["ErrorResponse"] = ErrorResponse


@dataclass
class LinkWithDetails(JsonModel):
    href: str = ""
    details: str = ""


@dataclass
class PingLinks(JsonModel):
    entries: LinkWithDetails = field(default_factory=LinkWithDetails)
    debts: LinkWithDetails = field(default_factory=LinkWithDetails)
    totals: LinkWithDetails = field(default_factory=LinkWithDetails)


@dataclass
class PingResponse(JsonModel):
    info: str = ""
    links: PingLinks = field(default_factory=PingLinks)


@dataclass
class TotalData(ResourceID):
    month: int = 0
    year: int = 0
    expected_income: int = 0
    running_income: int = 0
    expected_total: int = 0
    running_total: int = 0


@dataclass
class GetTotalParams(JsonModel):
    month: Optional[int] = None
    year: Optional[int] = None


@dataclass
class GetTotalResponse(JsonModel):
    data: TotalData = field(default_factory=TotalData)