"""Parsing of raw form input into validated field values."""

from __future__ import annotations

import math

from fittrack.workout.errors import ValidationError

MAX_FIELD_VALUE = 1_000_000_000


def parse_name(raw: object, *, field_name: str = "name") -> str:
    if raw is None:
        raise ValidationError(f"{_label(field_name)} cannot be blank.", field=field_name, value=raw)
    name = str(raw).strip()
    if not name:
        raise ValidationError(f"{_label(field_name)} cannot be blank.", field=field_name, value=raw)
    return name


def parse_int_field(*, raw: object, field_name: str) -> int:
    if isinstance(raw, bool):
        raise _invalid(raw, field_name, "a valid integer")
    if isinstance(raw, int):
        value = raw
    else:
        text = _require_text(raw, field_name)
        try:
            value = int(text)
        except ValueError as exc:
            raise _invalid(text, field_name, "a valid integer") from exc
    _check_range(value, field_name)
    return value


def parse_float_field(*, raw: object, field_name: str) -> float:
    if isinstance(raw, bool):
        raise _invalid(raw, field_name, "a valid number")
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError as exc:
            raise _invalid(raw, field_name, "a finite number") from exc
    else:
        text = _require_text(raw, field_name)
        try:
            value = float(text)
        except ValueError as exc:
            raise _invalid(text, field_name, "a valid number") from exc
    if not math.isfinite(value):
        raise _invalid(raw, field_name, "a finite number")
    _check_range(value, field_name)
    # Normalizes -0.0.
    return value + 0.0


def _require_text(raw: object, field_name: str) -> str:
    text = "" if raw is None else str(raw).strip()
    if not text:
        raise ValidationError(f"{_label(field_name)} cannot be blank.", field=field_name, value=raw)
    return text


def _check_range(value: float, field_name: str) -> None:
    if value < 0:
        raise ValidationError(
            f"{_label(field_name)} cannot be negative: {value}",
            field=field_name,
            value=value,
        )
    if value > MAX_FIELD_VALUE:
        raise ValidationError(
            f"{_label(field_name)} cannot exceed {MAX_FIELD_VALUE}: {value}",
            field=field_name,
            value=value,
        )


def _invalid(raw: object, field_name: str, expected: str) -> ValidationError:
    return ValidationError(
        f"Invalid input for {_label(field_name)}: '{raw}'. Please ensure it's {expected}.",
        field=field_name,
        value=raw,
    )


def _label(field_name: str) -> str:
    return field_name.replace("_", " ").capitalize()
