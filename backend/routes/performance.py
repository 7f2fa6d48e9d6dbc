from fastapi import APIRouter, Depends, HTTPException
from attendance import records_for_group, records_for_student
from briefs import build_performance_brief
from models import PerformanceBrief, PerformanceRequest, PerformanceResponse
from narrative import PERFORMANCE_REPORT_INSTRUCTIONS, NarrativeGenerator, NarrativeGeneratorError
from storage import load_grading_config
from typing import Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_narrative_generator() -> Optional[NarrativeGenerator]:
    """None until the host application overrides it (``app.dependency_overrides``)."""
    return None


def _brief(request: PerformanceRequest) -> PerformanceBrief:
    student = request.student
    level_grades = student.grades_by_level.get(request.level_name)
    if level_grades is None:
        logger.warning("no grades for student %s at level %s", student.id, request.level_name)
        raise HTTPException(status_code=404, detail=f"No grade data for level {request.level_name}")

    records = records_for_student(request.records, student.id)
    if request.group_id is not None:
        records = records_for_group(records, request.sessions, request.group_id)

    config = request.config or load_grading_config()
    return build_performance_brief(student.name, request.level_name, level_grades, records, config)


@router.post("/reports/brief", response_model=PerformanceBrief)
def post_brief(request: PerformanceRequest):
    logger.info("POST /reports/brief - student: %s, level: %s", request.student.id, request.level_name)
    return _brief(request)


@router.post("/reports/performance", response_model=PerformanceResponse)
def post_performance_report(request: PerformanceRequest,
                            generator: Optional[NarrativeGenerator] = Depends(get_narrative_generator)):
    logger.info("POST /reports/performance - student: %s, level: %s", request.student.id, request.level_name)
    brief = _brief(request)
    if generator is None:
        logger.warning("POST /reports/performance - no narrative generator configured")
        raise HTTPException(status_code=503, detail="Narrative generator not configured")
    try:
        result = generator.generate(brief, PERFORMANCE_REPORT_INSTRUCTIONS)
    except NarrativeGeneratorError as e:
        logger.error("POST /reports/performance - narrative generator failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Narrative generator failed: {e}")
    logger.info("POST /reports/performance - report generated (%d chars)", len(result.report))
    return PerformanceResponse(brief=brief, report=result.report)
