"""Assemble the fixed-shape brief handed to the narrative report generator.

Grammar of the two summaries::

    gradesSummary     = "Level: <level>." {" Partial <n> Total: <x.x>/<max>."} [" Final Grade: <x.xx>/<max>."]
    attendanceSummary = "Present: <p>, Absent: <a>, Late: <l>. Attendance Rate: <r>%."

Only partials that were entered get a clause; the final grade clause is
omitted when the final grade is not computable.
"""
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, Optional

from attendance import summarize_attendance
from grading import final_grade
from models import (
    AttendanceRecord,
    AttendanceSummary,
    FinalGradeResult,
    GradingConfiguration,
    PerformanceBrief,
    StudentGradeStructure,
)
from observations import compile_observations


def format_fixed(value: float, places: int) -> str:
    """Fixed-point formatting, rounding half away from zero on the exact float value.

    Non-finite values print as ``Infinity``, ``-Infinity`` and ``NaN``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # enough digits for every integer digit plus the requested decimals
        ctx.prec = max(exact.adjusted(), 0) + places + 2
        return f"{exact.quantize(quantum, rounding=ROUND_HALF_UP):f}"


def format_number(value: float) -> str:
    """Plain number: ``100`` rather than ``100.0``."""
    value = float(value)
    if not math.isfinite(value):
        return format_fixed(value, 0)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def grades_summary(level_name: str, grades: FinalGradeResult) -> str:
    max_score = format_number(grades.max_score)
    clauses = [f"Level: {level_name}."]
    for partial in grades.partials:
        if partial.present:
            clauses.append(f"Partial {partial.number} Total: {format_fixed(partial.total, 1)}/{max_score}.")
    if grades.final_grade is not None:
        clauses.append(f"Final Grade: {format_fixed(grades.final_grade, 2)}/{max_score}.")
    return " ".join(clauses)


def attendance_summary(summary: AttendanceSummary) -> str:
    return (
        f"Present: {summary.present}, Absent: {summary.absent}, Late: {summary.late}. "
        f"Attendance Rate: {format_fixed(summary.attendance_rate, 0)}%."
    )


def assemble_brief(student_name: str, level_name: str, grades: FinalGradeResult,
                   attendance: AttendanceSummary, observations: str) -> PerformanceBrief:
    return PerformanceBrief(
        student_name=student_name,
        level_name=level_name,
        grades_summary=grades_summary(level_name, grades),
        attendance_summary=attendance_summary(attendance),
        teacher_observations=observations,
    )


def build_performance_brief(student_name: str, level_name: str,
                            grades: Optional[StudentGradeStructure],
                            records: Iterable[AttendanceRecord],
                            config: GradingConfiguration) -> PerformanceBrief:
    """Run the grade, attendance and observation steps and assemble the brief.

    *records* must already be restricted to the student (and group, if any).
    """
    records = list(records)
    return assemble_brief(
        student_name,
        level_name,
        final_grade(grades, config),
        summarize_attendance(records),
        compile_observations(records),
    )
