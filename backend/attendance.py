"""Attendance counting and attendance-rate computation."""
from collections import Counter
from typing import Dict, Iterable, List, Optional

from models import AttendanceRecord, AttendanceStatus, AttendanceSummary, Session

# A student with no records at all is reported as fully attending.
NO_RECORDS_ATTENDANCE_RATE = 100.0


def summarize_attendance(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    """Count present/absent/late records and derive the attendance rate.

    ``total_records`` counts every record, duplicates included, while
    ``total_sessions_for_student`` counts distinct sessions.  Reports use one
    or the other, so both are kept.
    """
    counts = Counter()
    session_ids = set()
    for record in records:
        counts[record.status] += 1
        session_ids.add(record.session_id)

    present = counts[AttendanceStatus.PRESENT]
    absent = counts[AttendanceStatus.ABSENT]
    late = counts[AttendanceStatus.LATE]
    total = present + absent + late
    if total > 0:
        rate = (present + late) / total * 100
    else:
        rate = NO_RECORDS_ATTENDANCE_RATE

    return AttendanceSummary(
        present=present,
        absent=absent,
        late=late,
        total_records=total,
        attendance_rate=rate,
        total_sessions_for_student=len(session_ids),
    )


def records_for_student(records: Iterable[AttendanceRecord], user_id: str) -> List[AttendanceRecord]:
    return [r for r in records if r.user_id == user_id]


def records_for_group(records: Iterable[AttendanceRecord], sessions: Iterable[Session],
                      group_id: str) -> List[AttendanceRecord]:
    """Keep only records whose session belongs to *group_id*."""
    group_sessions = {s.id for s in sessions if s.class_id == group_id}
    return [r for r in records if r.session_id in group_sessions]


def summarize_by_student(records: Iterable[AttendanceRecord]) -> Dict[str, AttendanceSummary]:
    """Return ``{ user_id: AttendanceSummary }`` in first-seen order."""
    by_student: Dict[str, List[AttendanceRecord]] = {}
    for record in records:
        by_student.setdefault(record.user_id, []).append(record)
    return {uid: summarize_attendance(recs) for uid, recs in by_student.items()}


def session_label(session: Session, group_name: Optional[str] = None) -> str:
    label = f"{session.date} {session.time}"
    if group_name:
        return f"{group_name} - {label}"
    return label
