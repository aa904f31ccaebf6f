"""
GPA Calculation Engine
======================
Computes:
  - Grade value and grade points per course
  - Total credits and total grade points
  - Credit-weighted GPA
  - High achievement flag

Values are kept unrounded; rounding belongs to presentation (see reporting).
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

from calculator.grade_scale import DEFAULT_GRADE_SCALE, GradeScale
from calculator.models import (
    ComputeError, CourseBreakdown, CourseEntry, EntryError, ErrorKind, GpaResult, Outcome,
)
from calculator.validation_rules import (
    MAX_COURSES, MAX_CREDITS, MIN_COURSES, MIN_CREDITS, validate,
)
from config.logging_config import logger

HIGH_ACHIEVEMENT_GPA = 4.0


def compute(
    entries: Sequence[CourseEntry],
    scale: GradeScale = DEFAULT_GRADE_SCALE,
    *,
    high_achievement_gpa: float = HIGH_ACHIEVEMENT_GPA,
) -> Outcome[GpaResult, ComputeError]:
    """
    Reduce validated entries to a GpaResult.

    Expects the output of ``validate``. Returns a ZERO_CREDITS error when the
    credits sum to zero, which only happens if validation was skipped.
    """
    total_credits      = 0.0
    total_grade_points = 0.0
    courses: list[CourseBreakdown] = []

    for position, entry in enumerate(entries, start=1):
        if entry.grade not in scale:
            return Outcome(errors=(ComputeError(
                ErrorKind.UNKNOWN_GRADE,
                f"Grade '{entry.grade}' of Course {position} is not on the grade scale",
            ),))

        grade_value  = scale[entry.grade]
        grade_points = entry.credits * grade_value

        courses.append(CourseBreakdown(
            position     = position,
            credits      = entry.credits,
            grade        = entry.grade,
            grade_value  = grade_value,
            grade_points = grade_points,
        ))
        total_credits      += entry.credits
        total_grade_points += grade_points

    if total_credits == 0:
        logger.warning("GPA requested for entries with zero total credits")
        return Outcome(errors=(ComputeError(
            ErrorKind.ZERO_CREDITS, "Total credits must be greater than zero",
        ),))

    gpa = total_grade_points / total_credits
    logger.info(f"Computed GPA {gpa:.2f} over {len(courses)} course(s), {total_credits:g} credits")

    return Outcome(value=GpaResult(
        total_credits       = total_credits,
        total_grade_points  = total_grade_points,
        gpa                 = gpa,
        courses             = tuple(courses),
        is_high_achievement = gpa >= high_achievement_gpa,
    ))


@dataclass(frozen=True)
class GradeCalculator:
    """A grade scale plus the bounds it is validated against."""
    scale:                GradeScale = DEFAULT_GRADE_SCALE
    min_courses:          int        = MIN_COURSES
    max_courses:          int        = MAX_COURSES
    min_credits:          float      = MIN_CREDITS
    max_credits:          float      = MAX_CREDITS
    high_achievement_gpa: float      = HIGH_ACHIEVEMENT_GPA

    @classmethod
    def from_settings(cls, settings=None) -> GradeCalculator:
        if settings is None:
            from config.settings import settings
        return cls(
            scale                = GradeScale(settings.grade_scale),
            min_courses          = settings.min_courses,
            max_courses          = settings.max_courses,
            min_credits          = settings.min_credits,
            max_credits          = settings.max_credits,
            high_achievement_gpa = settings.high_achievement_gpa,
        )

    def validate(self, entries: Sequence[Any]) -> Outcome[list[CourseEntry], EntryError]:
        return validate(
            entries, self.scale,
            min_courses=self.min_courses, max_courses=self.max_courses,
            min_credits=self.min_credits, max_credits=self.max_credits,
        )

    def compute(self, entries: Sequence[CourseEntry]) -> Outcome[GpaResult, ComputeError]:
        return compute(entries, self.scale, high_achievement_gpa=self.high_achievement_gpa)

    def calculate(self, raw_entries: Sequence[Any]) -> Outcome[GpaResult, EntryError | ComputeError]:
        """Validate then compute. Validation errors are returned as-is."""
        validated = self.validate(raw_entries)
        if not validated.ok:
            return validated
        return self.compute(validated.value)


def calculate(
    raw_entries: Sequence[Any], scale: GradeScale | None = None
) -> Outcome[GpaResult, EntryError | ComputeError]:
    """
    End-to-end: raw rows → validated entries → GpaResult.

    Bounds and threshold come from settings; ``scale`` overrides the
    configured grade scale.
    """
    calculator = GradeCalculator.from_settings()
    if scale is not None:
        calculator = replace(calculator, scale=scale)
    return calculator.calculate(raw_entries)
