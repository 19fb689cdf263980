"""JSON wire format helpers.

The TofuPilot API speaks camelCase JSON and treats a missing field and a
null field the same way, so request payloads omit ``None`` values.

Models are pydantic models with snake_case attributes built on
``ApiModel``, which derives the camelCase wire names. A field whose wire
name is not the camelCase form of its attribute name sets an alias::

    class UploadSession(ApiModel):
        upload_id: str = Field(alias="id")

``dump`` converts models (and dicts, lists, enums) into JSON-ready
values; ``load`` validates decoded JSON against a target type, ignoring
unknown keys so that new server-side fields never break old clients.
"""

from datetime import UTC, datetime
from functools import lru_cache
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer, TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from tofupilot.errors.exceptions import DeserializationError


def to_camel(name: str) -> str:
    """``serial_number`` -> ``serialNumber``."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def format_datetime(value: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with millisecond precision.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# Datetime sent as "2024-05-01T12:30:15.123Z"
Timestamp = Annotated[datetime, PlainSerializer(format_datetime, return_type=str, when_used="json")]


class ApiModel(BaseModel):
    """Base for request and response models.

    Fields are populated by attribute name or wire name; unknown wire
    fields are dropped.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


def dump(value: Any) -> Any:
    """Convert a model or plain value into a JSON-ready structure.

    Model fields are renamed to their wire names and ``None`` fields are
    dropped. Plain dict keys are left untouched.

    Raises:
        PydanticSerializationError: If the value has no JSON form.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    return to_jsonable_python(value, by_alias=True, exclude_none=True)


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def load(data: Any, target: Any) -> Any:
    """Validate decoded JSON against ``target``.

    ``target`` may be None or ``Any`` (data returned unchanged), a model
    (including parametrized generics such as ``PaginatedResponse[Run]``),
    or any type pydantic can validate, e.g. ``list[Run]``.

    Raises:
        DeserializationError: If the data does not fit the target type.
    """
    if target is None or target is Any:
        return data
    try:
        return _adapter(target).validate_python(data)
    except ValidationError as e:
        raise DeserializationError(f"Invalid {_type_name(target)}: {e}") from e


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)
