from fastapi import APIRouter
from grading import final_grade
from models import FinalGradeRequest, FinalGradeResult, GradesReportRequest, PartialGradesRow
from reports import build_partial_grades_rows
from storage import load_grading_config
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/grades/final", response_model=FinalGradeResult)
def post_final_grade(request: FinalGradeRequest):
    config = request.config or load_grading_config()
    result = final_grade(request.grades, config)
    logger.info("POST /grades/final - final grade: %s / %s", result.final_grade, result.max_score)
    return result


@router.post("/grades/report", response_model=List[PartialGradesRow])
def post_grades_report(request: GradesReportRequest):
    config = request.config or load_grading_config()
    rows = build_partial_grades_rows(request.students, config, request.level_name)
    logger.info("POST /grades/report - %d students, %d rows", len(request.students), len(rows))
    return rows
