"""Plain-data interchange form of a ``Result``.

An ``Option`` is an ordinary dict tagged with ``kind``::

    {"kind": "success", "value": payload}
    {"kind": "failure", "value": exception}

It carries no behaviour and can be compared, copied or handed across API
boundaries freely. ``Result.to_option`` produces one and ``Result.from_option``
reads one back.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, TypedDict

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from resulty.errors import OptionError, RemoteError

OptionKind = Literal["success", "failure"]


class SuccessOption[T](TypedDict):
    kind: Literal["success"]
    value: T


class FailureOption(TypedDict):
    kind: Literal["failure"]
    value: BaseException


type Option[T] = SuccessOption[T] | FailureOption


# --- Validation (pydantic wall) ---


class _SuccessRecord(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    kind: Literal["success"]
    value: Any = None


class _FailureRecord(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    kind: Literal["failure"]
    value: BaseException


class _LenientFailureRecord(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    kind: Literal["failure"]
    value: BaseException | str


_STRICT = TypeAdapter(
    Annotated[_SuccessRecord | _FailureRecord, Field(discriminator="kind")]
)
_LENIENT = TypeAdapter(
    Annotated[_SuccessRecord | _LenientFailureRecord, Field(discriminator="kind")]
)


def read_option(option: Any, *, strict: bool = True) -> tuple[OptionKind, Any]:
    """Validate an interchange record and return its ``(kind, value)``.

    Values are returned as-is, so payload and exception identity survive.
    A success record without ``value`` reads as a success holding ``None``;
    a failure record must carry its ``value``.
    With ``strict=False`` a failure whose value is a plain string is promoted
    to ``RemoteError``.

    Raises:
        OptionError: If ``option`` is not a mapping, has no ``kind``, has an
            unrecognised ``kind``, or carries a missing or non-exception
            failure value.
    """
    adapter = _STRICT if strict else _LENIENT
    try:
        record = adapter.validate_python(option)
    except ValidationError as e:
        raise OptionError(
            "The passed value was not an Option type.",
            hint="Expected {'kind': 'success' | 'failure', 'value': ...}; "
            f"got {type(option).__name__}: {e.errors()[0].get('msg')}",
        ) from e

    value = record.value
    if record.kind == "failure" and isinstance(value, str):
        value = RemoteError(value)
    return record.kind, value
