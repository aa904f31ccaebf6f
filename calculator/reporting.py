"""
Reporting: presentation helpers for a computed GPA.
Rounding happens here and nowhere else.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import pandas as pd

from calculator.calculate_gpa import GradeCalculator
from calculator.models import ComputeError, EntryError, GpaResult, Outcome
from config.logging_config import logger

BREAKDOWN_COLUMNS = ["course", "credits", "grade", "grade_value", "grade_points"]


def _fixed(value: float, places: int) -> str:
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_result(result: GpaResult) -> dict[str, str]:
    """GPA to 2 decimals, totals to 1 decimal."""
    return {
        "gpa":                _fixed(result.gpa, 2),
        "total_credits":      _fixed(result.total_credits, 1),
        "total_grade_points": _fixed(result.total_grade_points, 1),
    }


def success_message(result: GpaResult) -> str:
    return f"GPA calculated successfully: {_fixed(result.gpa, 2)}"


def error_messages(outcome: Outcome) -> list[str]:
    return [e.message for e in outcome.errors]


def breakdown_frame(result: GpaResult) -> pd.DataFrame:
    """Per-course breakdown, one row per course in input order."""
    return pd.DataFrame(
        [
            {
                "course":       c.name,
                "credits":      c.credits,
                "grade":        c.grade,
                "grade_value":  c.grade_value,
                "grade_points": c.grade_points,
            }
            for c in result.courses
        ],
        columns=BREAKDOWN_COLUMNS,
    )


def calculate_frame(
    df: pd.DataFrame, calculator: GradeCalculator | None = None
) -> Outcome[GpaResult, EntryError | ComputeError]:
    """
    Run the calculator over a DataFrame with ``credits`` and ``grade`` columns.
    Missing cells are reported as missing fields.
    """
    missing = {"credits", "grade"} - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")

    calculator = calculator or GradeCalculator.from_settings()
    rows = (
        df[["credits", "grade"]]
        .astype(object)
        .where(df[["credits", "grade"]].notna(), None)
        .to_dict(orient="records")
    )
    logger.debug(f"Calculating GPA for {len(rows):,} DataFrame row(s)")
    return calculator.calculate(rows)
