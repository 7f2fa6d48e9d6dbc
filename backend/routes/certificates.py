from fastapi import APIRouter, HTTPException
from certificates import build_certificate_records, render_certificate
from models import (
    CertificateRecord,
    CertificateRecordsRequest,
    CertificateRenderRequest,
    CertificateTemplate,
    CertificateText,
)
from storage import load_certificate_template, load_grading_config, save_certificate_template
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/certificate-template", response_model=CertificateTemplate)
def get_certificate_template():
    return CertificateTemplate(template=load_certificate_template())


@router.post("/certificate-template", response_model=CertificateTemplate)
def post_certificate_template(body: CertificateTemplate):
    if not body.template.strip():
        raise HTTPException(status_code=400, detail="Certificate template must not be empty")
    save_certificate_template(body.template)
    logger.info("POST /certificate-template - saved template (%d chars)", len(body.template))
    return body


@router.post("/certificates/records", response_model=List[CertificateRecord])
def post_certificate_records(request: CertificateRecordsRequest):
    config = request.config or load_grading_config()
    records = build_certificate_records(request.students, request.groups, request.teachers, config)
    logger.info("POST /certificates/records - %d students, %d records", len(request.students), len(records))
    return records


@router.post("/certificates/render", response_model=CertificateText)
def post_render_certificate(request: CertificateRenderRequest):
    template = request.template if request.template is not None else load_certificate_template()
    logger.info("POST /certificates/render - student: %s, level: %s",
                request.context.student_name, request.context.level_name)
    return CertificateText(text=render_certificate(template, request.context))
