from fastapi import APIRouter
from attendance import records_for_group, records_for_student, summarize_attendance
from models import AttendanceRequest, AttendanceResponse
from observations import compile_observations
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/attendance/summary", response_model=AttendanceResponse)
def post_attendance_summary(request: AttendanceRequest):
    records = request.records
    if request.user_id is not None:
        records = records_for_student(records, request.user_id)
    if request.group_id is not None:
        records = records_for_group(records, request.sessions, request.group_id)
    summary = summarize_attendance(records)
    logger.info("POST /attendance/summary - %d of %d records, rate: %.1f%%",
                summary.total_records, len(request.records), summary.attendance_rate)
    return AttendanceResponse(summary=summary, observations=compile_observations(records))
