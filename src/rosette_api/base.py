"""Immutable value objects exchanged with the service as JSON."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, ClassVar, Mapping, TypeVar, get_args, get_origin

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import RosetteDecodeError, RosetteError, RosetteValidationError

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound="WireModel")


class WireModel(BaseModel):
    """Base for options, requests and responses.

    A field holding ``None`` is absent: it means "use the service default" and
    is left out of the payload entirely. ``wire_names`` maps every declared
    field to its camelCase JSON key and must cover exactly the declared fields.

    Instances are frozen. Use :meth:`with_changes` to derive a modified copy;
    it goes through the same validation as the constructor.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    wire_names: ClassVar[Mapping[str, str]] = {}

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _translate_validation_error(type(self), exc, decoding=False) from exc

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        declared = set(cls.model_fields)
        mapped = set(cls.wire_names)
        if declared != mapped:
            raise TypeError(
                f"{cls.__name__}.wire_names does not match its fields: "
                f"unmapped={sorted(declared - mapped)} unknown={sorted(mapped - declared)}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WireModel):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return all(getattr(self, name) == getattr(other, name) for name in type(self).model_fields)

    def __hash__(self) -> int:
        result = 0
        for name in type(self).model_fields:
            value = getattr(self, name)
            result = 31 * result + (hash(value) if value is not None else 0)
        return result

    def with_changes(self: _ModelT, **changes: Any) -> _ModelT:
        """Return a copy with ``changes`` applied. Pass ``None`` to reset a field to the default."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self)(**data)

    def to_json(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for name, wire_name in self.wire_names.items():
            value = getattr(self, name)
            if value is None:
                continue
            payload[wire_name] = _encode(value)
        return payload

    def to_json_string(self) -> str:
        return json.dumps(self.to_json(), ensure_ascii=False)

    @classmethod
    def from_json(cls: type[_ModelT], payload: Mapping[str, Any] | str | bytes) -> _ModelT:
        """Build an instance from a decoded JSON object or raw JSON text.

        Keys missing from the payload, or holding ``null``, become absent
        fields. Keys that are not in ``wire_names`` are ignored.
        """
        if isinstance(payload, (str, bytes)):
            try:
                payload = json.loads(payload)
            except ValueError as exc:
                raise RosetteDecodeError(
                    f"{cls.__name__}: payload is not valid JSON",
                    value=payload,
                    cause=exc,
                ) from exc
        if not isinstance(payload, Mapping):
            raise RosetteDecodeError(
                f"{cls.__name__}: expected a JSON object, got {type(payload).__name__}",
                value=payload,
            )

        attributes = {wire_name: name for name, wire_name in cls.wire_names.items()}
        data: dict[str, Any] = {}
        for wire_name, value in payload.items():
            name = attributes.get(wire_name)
            if name is None:
                logger.debug("Ignoring unknown field %r while decoding %s", wire_name, cls.__name__)
                continue
            if value is None:
                continue
            data[name] = _decode_nested(cls.model_fields[name].annotation, value)

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise _translate_validation_error(cls, exc, decoding=True) from exc


def _encode(value: Any) -> Any:
    if isinstance(value, WireModel):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


def _wire_model_in(annotation: Any) -> type[WireModel] | None:
    if get_origin(annotation) is None and isinstance(annotation, type):
        return annotation if issubclass(annotation, WireModel) else None
    for arg in get_args(annotation):
        found = _wire_model_in(arg)
        if found is not None:
            return found
    return None


def _decode_nested(annotation: Any, value: Any) -> Any:
    model = _wire_model_in(annotation)
    if model is None:
        return value
    if isinstance(value, Mapping):
        return model.from_json(value)
    if isinstance(value, list):
        return [model.from_json(item) if isinstance(item, Mapping) else item for item in value]
    return value


def _translate_validation_error(
    model: type[WireModel],
    exc: ValidationError,
    *,
    decoding: bool,
) -> RosetteError:
    error = exc.errors()[0]
    error_type = error["type"]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else None
    if decoding and field in model.wire_names:
        field = model.wire_names[field]
    value = None if error_type == "missing" else error.get("input")
    label = f"{model.__name__}.{field}" if field else model.__name__

    if error_type == "greater_than_equal":
        bound = (error.get("ctx") or {}).get("ge")
        return RosetteValidationError(
            f"{label}: {value!r} is below the minimum of {bound}",
            field=field,
            value=value,
            bound=bound,
            cause=exc,
        )
    if error_type == "missing":
        message = f"{label}: required field is missing"
    elif decoding:
        message = f"{label}: cannot decode {value!r} ({error['msg']})"
    else:
        message = f"{label}: {error['msg']} (got {value!r})"

    if decoding:
        return RosetteDecodeError(message, field=field, value=value, cause=exc)
    return RosetteValidationError(message, field=field, value=value, cause=exc)
