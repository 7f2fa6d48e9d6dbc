from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Base for all records: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Grading ───────────────────────────────────────────────────────────────────

class GradingConfiguration(Record):
    model_config = ConfigDict(frozen=True)

    number_of_partials: Literal[1, 2, 3, 4]
    passing_grade: float
    max_individual_activity_score: float = Field(ge=0)
    max_total_accumulated_score: float = Field(ge=0)
    max_exam_score: float = Field(ge=0)

    @property
    def max_partial_score(self) -> float:
        return self.max_total_accumulated_score + self.max_exam_score


class ActivityScore(Record):
    id: str
    name: Optional[str] = None
    score: Optional[float] = None  # None = not graded yet


class ExamScore(Record):
    name: Optional[str] = None
    score: Optional[float] = None


class PartialScores(Record):
    accumulated_activities: List[ActivityScore] = []
    exam: Optional[ExamScore] = None


class StudentGradeStructure(Record):
    partial1: Optional[PartialScores] = None
    partial2: Optional[PartialScores] = None
    partial3: Optional[PartialScores] = None
    partial4: Optional[PartialScores] = None
    certificate_code: Optional[str] = None

    def partial(self, number: int) -> Optional[PartialScores]:
        """Return partial *number* (1-based), or None if it was never entered."""
        if number not in (1, 2, 3, 4):
            return None
        return getattr(self, f"partial{number}")


class PartialResult(Record):
    number: int
    present: bool
    total: float


class FinalGradeResult(Record):
    partials: List[PartialResult]
    final_grade: Optional[float] = None  # None = not computable
    max_score: float
    passed: Optional[bool] = None

    @property
    def is_computable(self) -> bool:
        return self.final_grade is not None


# ── People & groups ───────────────────────────────────────────────────────────

class Student(Record):
    id: str
    name: str
    grades_by_level: Dict[str, StudentGradeStructure] = {}


class Teacher(Record):
    id: str
    name: str


class Group(Record):
    id: str
    name: str
    type: Optional[str] = None  # "Saturday" | "Sunday"
    student_ids: List[str] = []
    teacher_id: Optional[str] = None


class Sede(Record):
    id: str
    name: str


# ── Attendance ────────────────────────────────────────────────────────────────

class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class Session(Record):
    id: str
    class_id: str  # group id
    date: str      # YYYY-MM-DD
    time: str      # HH:MM


class AttendanceRecord(Record):
    id: str
    session_id: str
    user_id: str
    status: AttendanceStatus
    timestamp: str
    observation: Optional[str] = None


class AttendanceSummary(Record):
    present: int
    absent: int
    late: int
    total_records: int
    attendance_rate: float
    total_sessions_for_student: int


# ── Reports ───────────────────────────────────────────────────────────────────

class PerformanceBrief(Record):
    student_name: str
    level_name: str
    grades_summary: str
    attendance_summary: str
    teacher_observations: str


class NarrativeReport(Record):
    report: str


class PartialGradesRow(Record):
    student_id: str
    student_name: str
    level_name: str
    accumulated_totals: List[float]
    exam_scores: List[Optional[float]]
    partial_totals: List[Optional[float]]
    final_grade: Optional[float] = None


# ── Certificates ──────────────────────────────────────────────────────────────

class CertificateContext(Record):
    institution_name: str
    student_name: str
    level_name: str
    group_type: Optional[str] = None
    teacher_name: Optional[str] = None
    sede_name: Optional[str] = None
    certificate_code: Optional[str] = None


class CertificateRecord(Record):
    student_id: str
    student_name: str
    level_name: str
    final_grade: Optional[float] = None
    passed: Optional[bool] = None
    teacher_name: Optional[str] = None
    certificate_code: str = ""
    group_type: Optional[str] = None


# ── Request bodies ────────────────────────────────────────────────────────────

class FinalGradeRequest(Record):
    grades: StudentGradeStructure
    config: Optional[GradingConfiguration] = None


class GradesReportRequest(Record):
    students: List[Student]
    level_name: Optional[str] = None
    config: Optional[GradingConfiguration] = None


class GroupScopedRequest(Record):
    """Attendance input optionally scoped to one group through its sessions."""
    records: List[AttendanceRecord] = []
    sessions: List[Session] = []
    group_id: Optional[str] = None

    @model_validator(mode="after")
    def check_group_has_sessions(self):
        if self.group_id is not None and not self.sessions:
            raise ValueError("groupId requires the group's sessions")
        return self


class AttendanceRequest(GroupScopedRequest):
    records: List[AttendanceRecord]
    user_id: Optional[str] = None


class AttendanceResponse(Record):
    summary: AttendanceSummary
    observations: str


class PerformanceRequest(GroupScopedRequest):
    student: Student
    level_name: str
    config: Optional[GradingConfiguration] = None


class PerformanceResponse(Record):
    brief: PerformanceBrief
    report: str


class CertificateTemplate(Record):
    template: str


class CertificateRecordsRequest(Record):
    students: List[Student]
    groups: List[Group] = []
    teachers: List[Teacher] = []
    config: Optional[GradingConfiguration] = None


class CertificateRenderRequest(Record):
    context: CertificateContext
    template: Optional[str] = None


class CertificateText(Record):
    text: str
