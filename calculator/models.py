"""
Calculator value objects: course entries, results and error values.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class ErrorKind(str, Enum):
    MISSING_FIELD      = "MISSING_FIELD"
    OUT_OF_RANGE       = "OUT_OF_RANGE"
    UNKNOWN_GRADE      = "UNKNOWN_GRADE"
    COUNT_OUT_OF_RANGE = "COUNT_OUT_OF_RANGE"
    ZERO_CREDITS       = "ZERO_CREDITS"


def course_name(position: int) -> str:
    return f"Course {position}"


@dataclass(frozen=True)
class CourseEntry:
    credits: float
    grade:   str


@dataclass(frozen=True)
class CourseBreakdown:
    position:     int
    credits:      float
    grade:        str
    grade_value:  float
    grade_points: float

    @property
    def name(self) -> str:
        return course_name(self.position)


@dataclass(frozen=True)
class GpaResult:
    total_credits:       float
    total_grade_points:  float
    gpa:                 float
    courses:             tuple[CourseBreakdown, ...]
    is_high_achievement: bool


@dataclass(frozen=True)
class EntryError:
    """A rejected input row, or a rejected course count when ``position`` is None."""
    kind:     ErrorKind
    position: int | None
    value:    Any = None
    message:  str = ""


@dataclass(frozen=True)
class ComputeError:
    kind:    ErrorKind
    message: str = ""


class OutcomeError(RuntimeError):
    """Raised when reading the value of a failed outcome."""


@dataclass(frozen=True)
class Outcome(Generic[T, E]):
    value:  T | None = None
    errors: tuple[E, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> T:
        if self.errors:
            raise OutcomeError(f"Outcome failed with {len(self.errors)} error(s): {list(self.errors)}")
        return self.value
