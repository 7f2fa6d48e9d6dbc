"""Compile teacher observations attached to absences."""
from typing import Iterable

from models import AttendanceRecord, AttendanceStatus

ABSENCE_OBSERVATION_PREFIX = "- Absence observation: "
NO_OBSERVATIONS_TEXT = "No specific observations recorded for absences."


def compile_observations(records: Iterable[AttendanceRecord]) -> str:
    """One bullet line per absence carrying an observation, in input order."""
    lines = [
        f"{ABSENCE_OBSERVATION_PREFIX}{r.observation}"
        for r in records
        if r.status == AttendanceStatus.ABSENT and r.observation
    ]
    if not lines:
        return NO_OBSERVATIONS_TEXT
    return "\n".join(lines)
