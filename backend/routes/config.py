from fastapi import APIRouter
from models import GradingConfiguration
from storage import load_grading_config, save_grading_config
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/grading-config", response_model=GradingConfiguration)
def get_grading_config():
    config = load_grading_config()
    logger.info("GET /grading-config - partials: %d, passing grade: %s", config.number_of_partials, config.passing_grade)
    return config


@router.post("/grading-config", response_model=GradingConfiguration)
def post_grading_config(config: GradingConfiguration):
    logger.info("POST /grading-config - partials: %d, accumulated max: %s, exam max: %s",
                config.number_of_partials, config.max_total_accumulated_score, config.max_exam_score)
    save_grading_config(config)
    return config
