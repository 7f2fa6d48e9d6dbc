"""Certificate templating and per-level certificate records."""
import re
from typing import Callable, Iterable, List, Optional, Tuple

from grading import final_grade
from models import (
    CertificateContext,
    CertificateRecord,
    GradingConfiguration,
    Group,
    Student,
    Teacher,
)

DEFAULT_CERTIFICATE_TEMPLATE = (
    "La academia [NOMBRE_INSTITUCION] hace constar que [NOMBRE_ESTUDIANTE] "
    "ha completado el nivel [NOMBRE_NIVEL]."
)

UNKNOWN_TEACHER_NAME = "Desconocido"
PROGRAM_GROUP_TYPES = ("Saturday", "Sunday")


def _upper_or(value: Optional[str], fallback: str) -> str:
    if value is None or value == "":
        return fallback
    return value.upper()


# Ordered token table; each resolver maps a context to the replacement text.
CERTIFICATE_TOKENS: List[Tuple[str, Callable[[CertificateContext], str]]] = [
    ("[NOMBRE_INSTITUCION]", lambda c: _upper_or(c.institution_name, "")),
    ("[NOMBRE_ESTUDIANTE]", lambda c: _upper_or(c.student_name, "")),
    ("[NOMBRE_NIVEL]", lambda c: _upper_or(c.level_name, "")),
    ("[TIPO_PROGRAMA]", lambda c: _upper_or(c.group_type, "GENERAL")),
    ("[TURNO_PROGRAMA]", lambda c: _upper_or(c.group_type, "NO ESPECIFICADO")),
    ("[NOMBRE_MAESTRO]", lambda c: _upper_or(c.teacher_name, "NO ASIGNADO")),
    ("[NOMBRE_SEDE]", lambda c: _upper_or(c.sede_name, "SEDE PRINCIPAL")),
    ("[CODIGO_CERTIFICADO]", lambda c: _upper_or(c.certificate_code, "N/A")),
]

_TOKEN_RE = re.compile("|".join(re.escape(token) for token, _ in CERTIFICATE_TOKENS))


def render_certificate(template: str, context: CertificateContext) -> str:
    """Replace every known token in *template* in a single pass.

    Matching is case-sensitive.  Bracketed text that is not a known token is
    left as is.
    """
    values = {token: resolve(context) for token, resolve in CERTIFICATE_TOKENS}
    return _TOKEN_RE.sub(lambda m: values[m.group(0)], template)


def _group_for_student(student_id: str, groups: Iterable[Group]) -> Optional[Group]:
    for group in groups:
        if student_id in group.student_ids:
            return group
    return None


def build_certificate_records(students: Iterable[Student], groups: Iterable[Group],
                              teachers: Iterable[Teacher],
                              config: GradingConfiguration) -> List[CertificateRecord]:
    """One record per (student, level), sorted by student name then level name.

    Teacher and program type come from the first group listing the student.
    """
    groups = list(groups)
    teacher_names = {t.id: t.name for t in teachers}

    records = []
    for student in students:
        group = _group_for_student(student.id, groups)
        teacher_name = None
        group_type = None
        if group is not None:
            if group.type in PROGRAM_GROUP_TYPES:
                group_type = group.type
            if group.teacher_id:
                teacher_name = teacher_names.get(group.teacher_id, UNKNOWN_TEACHER_NAME)

        for level_name, level_grades in student.grades_by_level.items():
            result = final_grade(level_grades, config)
            records.append(CertificateRecord(
                student_id=student.id,
                student_name=student.name,
                level_name=level_name,
                final_grade=result.final_grade,
                passed=result.passed,
                teacher_name=teacher_name,
                certificate_code=level_grades.certificate_code or "",
                group_type=group_type,
            ))

    records.sort(key=lambda r: (r.student_name, r.level_name))
    return records


def certificate_context(record: CertificateRecord, institution_name: str,
                        sede_name: Optional[str] = None) -> CertificateContext:
    return CertificateContext(
        institution_name=institution_name,
        student_name=record.student_name,
        level_name=record.level_name,
        group_type=record.group_type,
        teacher_name=record.teacher_name,
        sede_name=sede_name,
        certificate_code=record.certificate_code,
    )
