"""Partial grades report: one row per student and level."""
from typing import Iterable, List, Optional

from grading import accumulated_total, exam_score, final_grade
from models import GradingConfiguration, PartialGradesRow, Student


def build_partial_grades_rows(students: Iterable[Student], config: GradingConfiguration,
                              level_name: Optional[str] = None) -> List[PartialGradesRow]:
    """Build report rows, optionally restricted to *level_name*.

    Partial totals are None for partials that were never entered, so the
    report can tell "missing" apart from "zero".
    """
    rows = []
    for student in students:
        for name, grades in student.grades_by_level.items():
            if level_name is not None and name != level_name:
                continue
            result = final_grade(grades, config)
            accumulated = []
            exams = []
            totals = []
            for partial_result in result.partials:
                partial = grades.partial(partial_result.number)
                accumulated.append(accumulated_total(
                    partial.accumulated_activities if partial is not None else None, config
                ))
                exams.append(exam_score(partial))
                totals.append(partial_result.total if partial_result.present else None)
            rows.append(PartialGradesRow(
                student_id=student.id,
                student_name=student.name,
                level_name=name,
                accumulated_totals=accumulated,
                exam_scores=exams,
                partial_totals=totals,
                final_grade=result.final_grade,
            ))
    rows.sort(key=lambda r: (r.student_name, r.level_name))
    return rows


def report_headers(config: GradingConfiguration) -> List[str]:
    headers = ["student_id", "student_name", "level_name"]
    for n in range(1, config.number_of_partials + 1):
        headers += [f"P{n} Acc", f"P{n} Exam", f"P{n} Total"]
    headers.append("Final Grade")
    return headers
