"""Reusable input rules. Each raises ValueError with a field-specific message."""

from __future__ import annotations

import re
from collections.abc import Sequence

from fitquest.core.constants import MAX_REPS_PER_SET, MAX_SETS_PER_EXERCISE, MAX_WEIGHT_PER_SET

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
SET_VALUE_LIMITS = {"reps": MAX_REPS_PER_SET, "weight": MAX_WEIGHT_PER_SET}


def validate_username(value: str | None) -> str:
    if value is None:
        raise ValueError("Username is required")
    value = value.strip()
    if len(value) < 3:
        raise ValueError("Username must be at least 3 characters")
    if len(value) > 30:
        raise ValueError("Username must be less than 30 characters")
    if not USERNAME_PATTERN.match(value):
        raise ValueError("Username can only contain letters, numbers, and underscores")
    return value


def validate_email(value: str) -> str:
    value = value.strip().lower()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Email address is not valid")
    return value


def required_name(value: str | None, label: str, max_length: int = 100) -> str:
    """Trimmed, non-empty, at most max_length characters."""
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{label} name is required")
    if len(value) > max_length:
        raise ValueError(f"{label} name must be less than {max_length} characters")
    return value


def validate_set_arrays(
    sets: int | None,
    reps: Sequence[int] | None,
    weight: Sequence[float] | None,
) -> None:
    """reps[] and weight[] carry one entry per set."""
    if sets is not None and not 1 <= sets <= MAX_SETS_PER_EXERCISE:
        raise ValueError(f"Sets must be between 1 and {MAX_SETS_PER_EXERCISE}")
    for label, values in (("reps", reps), ("weight", weight)):
        if values is None:
            continue
        if sets is None:
            raise ValueError(f"sets is required when {label} is given")
        if len(values) != sets:
            raise ValueError(f"{label} must have exactly {sets} entries (one per set), got {len(values)}")
        if any(v is None or v < 0 for v in values):
            raise ValueError(f"{label} entries must be zero or positive")
        # NUMERIC(6,2) rounds before it checks precision
        if any(round(v, 2) > SET_VALUE_LIMITS[label] for v in values):
            raise ValueError(f"{label} entries must be at most {SET_VALUE_LIMITS[label]}")


def not_null(value, label: str):
    """Partial updates may omit a field but not clear a required one."""
    if value is None:
        raise ValueError(f"{label} cannot be null")
    return value
