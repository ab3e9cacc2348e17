"""
Generic validator for content records.

compile_model() interprets a descriptor tree (see descriptors.py) into a
pydantic model; validate_record() runs raw front-matter through it and
reports every failing field at once.
"""

import logging
import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Annotated, Any, Dict, List, Literal, Mapping, Type

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationError,
    create_model,
)
from pydantic_core import PydanticCustomError

from descriptors import FieldKind, FieldSpec

logger = logging.getLogger(__name__)


class FieldIssue(BaseModel):
    path: str
    message: str
    code: str

    @property
    def field(self) -> str:
        """Top-level key the issue belongs to."""
        return self.path.split(".", 1)[0]


class ContentValidationError(ValueError):
    """A raw record did not match its collection schema."""

    def __init__(self, collection: str, issues: List[FieldIssue]):
        self.collection = collection
        self.issues = issues
        summary = "; ".join(f"{issue.path or '<record>'}: {issue.message}" for issue in issues)
        super().__init__(f"invalid {collection} record: {summary}")

    @property
    def fields(self) -> List[str]:
        seen: List[str] = []
        for issue in self.issues:
            if issue.field not in seen:
                seen.append(issue.field)
        return seen


# =================
# Scalar validators
# =================

def _check_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("number_type", "Input should be a valid number")
    if isinstance(value, float) and math.isnan(value):
        raise PydanticCustomError("number_type", "Input should be a finite number")
    return value


# YYYY, YYYY-MM, YYYY-MM-DD or YYYYMMDD, then an optional time and UTC offset.
_ISO_DATE = re.compile(
    r"(?P<year>\d{4})"
    r"(?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?|(?P<basic_month>\d{2})(?P<basic_day>\d{2}))?"
    r"(?:[Tt ](?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?"
    r"(?P<offset>[Zz]|[+-]\d{2}(?::?\d{2})?)?)?"
)


def _parse_offset(text: str) -> timezone:
    if text in ("Z", "z"):
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    minutes = int(digits[:2]) * 60 + int(digits[2:] or 0)
    return timezone(sign * timedelta(minutes=minutes))


def _parse_iso(text: str) -> datetime:
    match = _ISO_DATE.fullmatch(text)
    if match is None:
        raise ValueError(text)
    parts = match.groupdict()
    day = parts["day"] or parts["basic_day"]
    if parts["hour"] is not None and day is None:
        raise ValueError(text)
    fraction = (parts["fraction"] or "")[:6].ljust(6, "0")
    return datetime(
        int(parts["year"]),
        int(parts["month"] or parts["basic_month"] or 1),
        int(day or 1),
        int(parts["hour"] or 0),
        int(parts["minute"] or 0),
        int(parts["second"] or 0),
        int(fraction),
        tzinfo=_parse_offset(parts["offset"]) if parts["offset"] else None,
    )


def _coerce_date(value: Any) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            parsed = _parse_iso(value.strip())
        except ValueError:
            raise PydanticCustomError("date_parsing", "Input should be an ISO-8601 date or timestamp")
        return _coerce_date(parsed)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # epoch milliseconds
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).date()
        except (OverflowError, OSError, ValueError):
            raise PydanticCustomError("date_parsing", "Timestamp is out of range")
    raise PydanticCustomError("date_type", "Input should be a valid date")


_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_url(value: Any) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError("url_type", "URL input should be a string")
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_parsing", "Input should be a valid absolute URL")
    return value


Number = Annotated[Any, PlainValidator(_check_number)]
CalendarDate = Annotated[date, PlainValidator(_coerce_date)]
Url = Annotated[str, PlainValidator(_check_url)]

_SCALARS: Dict[FieldKind, Any] = {
    FieldKind.STRING: StrictStr,
    FieldKind.NUMBER: Number,
    FieldKind.BOOLEAN: StrictBool,
    FieldKind.DATE: CalendarDate,
    FieldKind.URL: Url,
}


# ===========
# Compilation
# ===========

def _annotation(name: str, spec: FieldSpec) -> Any:
    if spec.kind in _SCALARS:
        return _SCALARS[spec.kind]
    if spec.kind is FieldKind.ENUM:
        return Literal[spec.choices]
    if spec.kind is FieldKind.ARRAY:
        return List[_annotation(f"{name}Item", spec.item)]
    if spec.kind is FieldKind.OBJECT:
        return compile_model(name, spec.properties)
    raise TypeError(f"unsupported field kind: {spec.kind!r}")


def compile_model(name: str, fields: Mapping[str, FieldSpec]) -> Type[BaseModel]:
    """Build a pydantic model class from a field descriptor map.

    Required fields have no default. Optional fields default to None without
    allowing an explicit null, and declared defaults are only used when the
    key is missing.
    """
    definitions: Dict[str, Any] = {}
    for field_name, spec in fields.items():
        annotation = _annotation(name + field_name[:1].upper() + field_name[1:], spec)
        if spec.has_default:
            definitions[field_name] = (annotation, Field(default=spec.default))
        elif spec.required:
            definitions[field_name] = (annotation, ...)
        else:
            definitions[field_name] = (annotation, None)
    return create_model(name, __config__=ConfigDict(extra="ignore"), **definitions)


# ==========
# Validation
# ==========

def _issue(error: Mapping[str, Any]) -> FieldIssue:
    return FieldIssue(
        path=".".join(str(part) for part in error["loc"]),
        message=error["msg"],
        code=error["type"],
    )


def validate_record(model: Type[BaseModel], raw: Any, collection: str = "") -> BaseModel:
    collection = collection or model.__name__
    if not isinstance(raw, Mapping):
        logger.info("Rejected %s record: not a mapping", collection)
        raise ContentValidationError(
            collection,
            [FieldIssue(path="", message="Record should be a mapping of fields", code="model_type")],
        )
    try:
        record = model.model_validate(dict(raw))
    except ValidationError as exc:
        issues = [_issue(err) for err in exc.errors()]
        logger.info("Rejected %s record with %d issue(s)", collection, len(issues))
        raise ContentValidationError(collection, issues) from exc
    logger.debug("Validated %s record", collection)
    return record


def to_data(record: BaseModel) -> Dict[str, Any]:
    """Plain dict of a validated record; absent optional fields are left out."""
    return record.model_dump(exclude_none=True)
