"""
Grade Scale
===========
Immutable mapping from a letter grade to the numeric grade value used when
weighting a course by its credits.
"""
from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from types import MappingProxyType

MIN_GRADE_VALUE = 0.0
MAX_GRADE_VALUE = 5.0


class GradeScale(Mapping[str, float]):
    """
    Closed set of grade labels and their values.

    Labels keep their declaration order, which is also the order the options
    are offered to the user. Values must lie in [0, 5].
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, float]):
        if not values:
            raise ValueError("Grade scale needs at least one grade")

        checked: dict[str, float] = {}
        for label, value in values.items():
            if not isinstance(label, str) or not label.strip():
                raise ValueError(f"Invalid grade label: {label!r}")
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Grade value for {label!r} must be numeric, got {value!r}")
            value = float(value)
            if math.isnan(value) or not MIN_GRADE_VALUE <= value <= MAX_GRADE_VALUE:
                raise ValueError(
                    f"Grade value for {label!r} must be within "
                    f"[{MIN_GRADE_VALUE}, {MAX_GRADE_VALUE}], got {value}"
                )
            key = label.strip().upper()
            if key in checked:
                raise ValueError(f"Duplicate grade label: {label!r}")
            checked[key] = value

        self._values = MappingProxyType(checked)

    def __getitem__(self, label: str) -> float:
        return self._values[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"GradeScale({dict(self._values)!r})"

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self._values)

    def describe(self) -> list[str]:
        """Option captions such as ``"A (5.0)"``."""
        return [f"{label} ({value:.1f})" for label, value in self._values.items()]


DEFAULT_GRADE_SCALE = GradeScale({
    "A":  5.0,
    "B+": 4.0,
    "B":  3.0,
    "C":  2.0,
    "D":  1.0,
    "E":  0.5,
})
