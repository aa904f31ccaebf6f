"""
Input Validation
================
Checks raw course rows (as collected from a form) against a grade scale and
the credit/count bounds. Every invalid row is reported in one pass; nothing
is raised for bad user input.
"""
from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from calculator.grade_scale import DEFAULT_GRADE_SCALE, GradeScale
from calculator.models import CourseEntry, EntryError, ErrorKind, Outcome, course_name
from config.logging_config import logger

MIN_COURSES = 1
MAX_COURSES = 20
MIN_CREDITS = 0.5
MAX_CREDITS = 10.0


# ── Field parsing ──────────────────────────────────────────────────────────────
def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def parse_credits(raw: Any) -> float | None:
    """Return credits as float, or None when absent or not a number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except OverflowError:
        return math.inf if raw > 0 else -math.inf
    except (TypeError, ValueError):
        return None
    if math.isnan(value):
        return None
    return value


def normalize_grade(raw: Any) -> str:
    if raw is None or (isinstance(raw, float) and math.isnan(raw)):
        return ""
    return str(raw).strip().upper()


# ── Rule builders ──────────────────────────────────────────────────────────────
def check_course_count(
    count: int, min_courses: int = MIN_COURSES, max_courses: int = MAX_COURSES
) -> EntryError | None:
    if min_courses <= count <= max_courses:
        return None
    return EntryError(
        kind     = ErrorKind.COUNT_OUT_OF_RANGE,
        position = None,
        value    = count,
        message  = f"Please enter a valid number of courses ({min_courses}-{max_courses})",
    )


def check_entry(
    position: int,
    row: Any,
    scale: GradeScale,
    min_credits: float = MIN_CREDITS,
    max_credits: float = MAX_CREDITS,
) -> CourseEntry | EntryError:
    """Validate one row; the first failing check wins."""
    credits = parse_credits(_field(row, "credits"))
    grade   = normalize_grade(_field(row, "grade"))
    name    = course_name(position)

    if credits is None or not grade:
        return EntryError(
            kind     = ErrorKind.MISSING_FIELD,
            position = position,
            value    = "credits" if credits is None else "grade",
            message  = f"Please fill all fields for {name}",
        )

    if not min_credits <= credits <= max_credits:
        return EntryError(
            kind     = ErrorKind.OUT_OF_RANGE,
            position = position,
            value    = credits,
            message  = f"Invalid credits for {name}. Must be between {min_credits:g} and {max_credits:g}",
        )

    if grade not in scale:
        return EntryError(
            kind     = ErrorKind.UNKNOWN_GRADE,
            position = position,
            value    = grade,
            message  = f"Unknown grade '{grade}' for {name}",
        )

    return CourseEntry(credits=credits, grade=grade)


# ── Public entry points ────────────────────────────────────────────────────────
def validate(
    entries: Sequence[Any],
    scale: GradeScale = DEFAULT_GRADE_SCALE,
    *,
    min_courses: int = MIN_COURSES,
    max_courses: int = MAX_COURSES,
    min_credits: float = MIN_CREDITS,
    max_credits: float = MAX_CREDITS,
) -> Outcome[list[CourseEntry], EntryError]:
    """
    Validate raw course rows.

    Each row is a mapping (or object) with ``credits`` and ``grade``.
    Returns the parsed entries, or every error found in input order. A
    failed outcome never carries partial entries.
    """
    errors: list[EntryError] = []
    valid:  list[CourseEntry] = []

    count_error = check_course_count(len(entries), min_courses, max_courses)
    if count_error is not None:
        errors.append(count_error)

    for position, row in enumerate(entries, start=1):
        checked = check_entry(position, row, scale, min_credits, max_credits)
        if isinstance(checked, EntryError):
            logger.debug(f"{course_name(position)} rejected: {checked.kind.value} ({checked.value!r})")
            errors.append(checked)
        else:
            valid.append(checked)

    if errors:
        logger.info(f"Validation failed: {len(errors)} error(s) across {len(entries)} row(s)")
        return Outcome(errors=tuple(errors))

    logger.debug(f"Validated {len(valid)} course(s)")
    return Outcome(value=valid)


def validate_course_count(
    raw: Any, min_courses: int = MIN_COURSES, max_courses: int = MAX_COURSES
) -> Outcome[int, EntryError]:
    """Check the number of courses a user asked to enter."""
    count: int | None = None
    if isinstance(raw, int) and not isinstance(raw, bool):
        count = raw
    elif isinstance(raw, str) and raw.strip().isdecimal():
        count = int(raw.strip())

    error = check_course_count(count if count is not None else 0, min_courses, max_courses)
    if error is not None:
        return Outcome(errors=(EntryError(error.kind, None, raw, error.message),))
    return Outcome(value=count)
