from fastapi import APIRouter
from fastapi.responses import StreamingResponse
from models import GradesReportRequest, GradingConfiguration, PartialGradesRow
from reports import build_partial_grades_rows, report_headers
from storage import load_grading_config
from typing import List
import csv
import io
import logging
import openpyxl

logger = logging.getLogger(__name__)

router = APIRouter()


def _cell(value):
    return "" if value is None else value


def _build_rows(report_rows: List[PartialGradesRow], config: GradingConfiguration):
    headers = report_headers(config)
    rows = []
    for r in report_rows:
        row = [r.student_id, r.student_name, r.level_name]
        for acc, exam, total in zip(r.accumulated_totals, r.exam_scores, r.partial_totals):
            row += [_cell(acc), _cell(exam), _cell(total)]
        row.append(_cell(r.final_grade))
        rows.append(row)
    return headers, rows


def _report_table(request: GradesReportRequest):
    config = request.config or load_grading_config()
    report_rows = build_partial_grades_rows(request.students, config, request.level_name)
    return _build_rows(report_rows, config)


@router.post("/export/grades/csv")
def export_grades_csv(request: GradesReportRequest):
    headers, rows = _report_table(request)
    logger.info("POST /export/grades/csv - %d rows", len(rows))

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(headers)
    writer.writerows(rows)
    output.seek(0)

    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=partial_grades.csv"},
    )


@router.post("/export/grades/xlsx")
def export_grades_xlsx(request: GradesReportRequest):
    headers, rows = _report_table(request)
    logger.info("POST /export/grades/xlsx - %d rows", len(rows))

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Partial Grades"

    ws.append(headers)
    for row in rows:
        ws.append(row)

    output = io.BytesIO()
    wb.save(output)
    output.seek(0)

    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": "attachment; filename=partial_grades.xlsx"},
    )
