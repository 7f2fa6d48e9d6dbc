from briefs import (
    assemble_brief,
    attendance_summary,
    build_performance_brief,
    format_fixed,
    format_number,
    grades_summary,
)
from grading import final_grade
from models import (
    ActivityScore,
    AttendanceRecord,
    AttendanceSummary,
    ExamScore,
    PartialScores,
    StudentGradeStructure,
)
from narrative import PERFORMANCE_REPORT_INSTRUCTIONS, render_prompt


def _partial(acc, exam):
    return PartialScores(
        accumulated_activities=[ActivityScore(id="a", score=acc)],
        exam=ExamScore(score=exam),
    )


def _summary(present, absent, late, rate):
    return AttendanceSummary(
        present=present, absent=absent, late=late,
        total_records=present + absent + late,
        attendance_rate=rate,
        total_sessions_for_student=present + absent + late,
    )


def test_format_fixed_rounds_half_up():
    assert format_fixed(62.5, 0) == "63"
    assert format_fixed(80, 2) == "80.00"
    assert format_fixed(85.25, 1) == "85.3"
    assert format_fixed(100, 0) == "100"


def test_format_number():
    assert format_number(100.0) == "100"
    assert format_number(100.5) == "100.5"


def test_grades_summary_complete(config):
    grades = StudentGradeStructure(
        partial1=_partial(50, 40), partial2=_partial(40, 40), partial3=_partial(30, 40),
    )
    text = grades_summary("Beginner 1", final_grade(grades, config))
    assert text == (
        "Level: Beginner 1. Partial 1 Total: 90.0/100. Partial 2 Total: 80.0/100. "
        "Partial 3 Total: 70.0/100. Final Grade: 80.00/100."
    )


def test_grades_summary_skips_missing_partials_and_final(config):
    grades = StudentGradeStructure(partial1=_partial(45.5, 40), partial3=_partial(10, 10))
    text = grades_summary("Beginner 1", final_grade(grades, config))
    assert text == "Level: Beginner 1. Partial 1 Total: 85.5/100. Partial 3 Total: 20.0/100."
    assert "Final Grade" not in text
    assert "Partial 2" not in text


def test_attendance_summary_text():
    assert attendance_summary(_summary(6, 3, 1, 70.0)) == (
        "Present: 6, Absent: 3, Late: 1. Attendance Rate: 70%."
    )


def test_attendance_summary_rounds_rate():
    assert attendance_summary(_summary(2, 1, 0, 200 / 3)).endswith("Attendance Rate: 67%.")


def test_assemble_brief_fields(config):
    grades = final_grade(StudentGradeStructure(), config)
    brief = assemble_brief("Ana Ruiz", "Intermediate", grades, _summary(0, 0, 0, 100.0), "none")
    assert brief.student_name == "Ana Ruiz"
    assert brief.level_name == "Intermediate"
    assert brief.grades_summary == "Level: Intermediate."
    assert brief.attendance_summary == "Present: 0, Absent: 0, Late: 0. Attendance Rate: 100%."
    assert brief.teacher_observations == "none"
    assert set(brief.model_dump(by_alias=True)) == {
        "studentName", "levelName", "gradesSummary", "attendanceSummary", "teacherObservations",
    }


def test_build_performance_brief(config):
    grades = StudentGradeStructure(
        partial1=_partial(50, 50), partial2=_partial(50, 50), partial3=_partial(50, 50),
    )
    records = [
        AttendanceRecord(id="1", session_id="s1", user_id="u1", status="present", timestamp="t"),
        AttendanceRecord(id="2", session_id="s2", user_id="u1", status="absent", timestamp="t",
                         observation="medical appointment"),
    ]
    brief = build_performance_brief("Ana Ruiz", "Advanced", grades, iter(records), config)
    assert brief.grades_summary.endswith("Final Grade: 100.00/100.")
    assert brief.attendance_summary == "Present: 1, Absent: 1, Late: 0. Attendance Rate: 50%."
    assert brief.teacher_observations == "- Absence observation: medical appointment"


def test_render_prompt_contains_brief(config):
    brief = assemble_brief("Ana Ruiz", "Advanced", final_grade(None, config), _summary(1, 0, 0, 100.0), "obs")
    prompt = render_prompt(brief)
    assert prompt.startswith(PERFORMANCE_REPORT_INSTRUCTIONS)
    assert "- Name: Ana Ruiz" in prompt
    assert "- Level: Advanced" in prompt
    assert "- Teacher observations: obs" in prompt


def test_format_fixed_large_values():
    assert format_fixed(1e30, 1) == "1000000000000000019884624838656.0"
    assert format_fixed(2.0 ** 100, 2) == "1267650600228229401496703205376.00"


def test_format_fixed_non_finite():
    assert format_fixed(float("inf"), 1) == "Infinity"
    assert format_fixed(float("-inf"), 2) == "-Infinity"
    assert format_fixed(float("nan"), 0) == "NaN"
    assert format_number(float("inf")) == "Infinity"


def test_brief_with_very_large_exam_scores(config):
    huge = PartialScores(exam=ExamScore(score=1e30))
    grades = StudentGradeStructure(partial1=huge, partial2=huge, partial3=huge)
    brief = build_performance_brief("Ana Ruiz", "Advanced", grades, [], config)
    assert "Partial 1 Total: 1000000000000000019884624838656.0/100." in brief.grades_summary
    assert "Final Grade: " in brief.grades_summary


def test_brief_with_infinite_exam_score(config):
    infinite = PartialScores(exam=ExamScore(score=float("inf")))
    grades = StudentGradeStructure(partial1=infinite, partial2=infinite, partial3=infinite)
    brief = build_performance_brief("Ana Ruiz", "Advanced", grades, [], config)
    assert brief.grades_summary.endswith("Partial 3 Total: Infinity/100. Final Grade: Infinity/100.")
