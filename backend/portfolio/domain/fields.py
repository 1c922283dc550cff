"""
Declarative partial-update schemas.

Each entity family declares the fields a client may patch, how every value is
coerced to its stored type, and which pair of fields carries a remote image.
Only declared fields ever reach the model; anything else in a request body is
ignored.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from .exceptions import ValidationError

Coercer = Callable[[str, Any], Any]


# ---------------------------------------------------------------------------
# Coercers
# ---------------------------------------------------------------------------

def as_string(name: str, value: Any) -> str:
    if value is None:
        raise ValidationError(f"{name} cannot be null")
    if isinstance(value, (dict, list)):
        raise ValidationError(f"{name} must be a string")
    return str(value)


def as_optional_string(name: str, value: Any) -> Optional[str]:
    # Empty values are stored as NULL
    if value is None or value == "":
        return None
    return as_string(name, value)


def _as_finite_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"Invalid data type for {name}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid data type for {name}")
    if not math.isfinite(number):
        raise ValidationError(f"{name} must be a finite number")
    return number


def as_number(name: str, value: Any) -> float:
    return _as_finite_number(name, value)


def as_int(name: str, value: Any) -> int:
    number = _as_finite_number(name, value)
    if not number.is_integer():
        raise ValidationError(f"{name} must be an integer")
    return int(number)


def as_optional_int(name: str, value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return as_int(name, value)


def as_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{name} must be a boolean")
    return value


def as_object(name: str, value: Any) -> dict:
    if not isinstance(value, dict):
        raise ValidationError(f"{name} must be an object")
    return value


def as_string_list(name: str, value: Any) -> list:
    if not isinstance(value, list) or any(not isinstance(item, str) for item in value):
        raise ValidationError(f"{name} must be an array of strings")
    # Duplicates collapse, first occurrence wins
    return list(dict.fromkeys(value))


def one_of(choices: Iterable[str]) -> Coercer:
    allowed = tuple(choices)

    def coerce(name: str, value: Any) -> str:
        if value not in allowed:
            raise ValidationError(
                f"Invalid {name} provided. Allowed values are: {', '.join(allowed)}"
            )
        return str(value)

    return coerce


def bounded_number(low: float, high: float) -> Coercer:
    def coerce(name: str, value: Any) -> float:
        try:
            number = _as_finite_number(name, value)
        except ValidationError:
            number = None
        if number is None or not low <= number <= high:
            raise ValidationError(
                f"Invalid {name} value. Must be a number between {low:g} and {high:g}."
            )
        return number

    return coerce


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Field:
    name: str          # wire (camelCase) name
    column: str        # model attribute
    coerce: Coercer = as_string


@dataclass(frozen=True)
class ImagePair:
    src: str = "imageSrc"
    public_id: str = "imagePublicId"
    src_column: str = "image_src"
    public_id_column: str = "image_public_id"


@dataclass(frozen=True)
class PatchSchema:
    label: str
    fields: Tuple[Field, ...]
    image: Optional[ImagePair] = None
    required: Tuple[str, ...] = ()
    defaults: Dict[str, Any] = field(default_factory=dict)

    def field_named(self, name: str) -> Optional[Field]:
        for candidate in self.fields:
            if candidate.name == name:
                return candidate
        return None

    def parse(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Coerce the recognised fields of a sparse patch.

        Absent fields stay untouched; a patch with nothing recognisable is
        rejected so no empty write is ever issued.
        """
        values: Dict[str, Any] = {}
        for spec in self.fields:
            if spec.name in body:
                values[spec.column] = spec.coerce(spec.name, body[spec.name])

        if not values:
            raise ValidationError("No valid fields provided for update.")

        return values

    def parse_create(self, body: Dict[str, Any]) -> Dict[str, Any]:
        missing = [
            name for name in self.required
            if body.get(name) is None or body.get(name) == ""
        ]
        if missing:
            raise ValidationError(f"Missing required fields ({', '.join(missing)})")

        values = dict(self.defaults)
        for spec in self.fields:
            if spec.name in body:
                values[spec.column] = spec.coerce(spec.name, body[spec.name])
        return values


def check_image_pair(image: Optional[ImagePair], values: Dict[str, Any],
                     current_public_id: Optional[str] = None) -> None:
    """
    Keep a stored image URL and its remote public id in lock-step.

    Mutates ``values`` when an image is cleared so the id is cleared with it.
    """
    if image is None:
        return

    has_src = image.src_column in values
    has_public_id = image.public_id_column in values

    if has_src and not has_public_id:
        if values[image.src_column] is None:
            values[image.public_id_column] = None
        elif current_public_id:
            raise ValidationError(
                f"{image.src} must be sent together with {image.public_id}"
            )
        return

    if has_public_id and not has_src:
        raise ValidationError(
            f"{image.public_id} must be sent together with {image.src}"
        )

    if has_src and has_public_id:
        if values[image.public_id_column] and values[image.src_column] is None:
            raise ValidationError(
                f"{image.public_id} cannot be set without {image.src}"
            )
