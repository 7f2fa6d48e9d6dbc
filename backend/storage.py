import json
import logging
import os
from typing import Optional

from certificates import DEFAULT_CERTIFICATE_TEMPLATE
from models import GradingConfiguration

logger = logging.getLogger(__name__)

DATA_DIR = os.environ.get("ACADEMY_DATA_DIR", "./data")

DEFAULT_GRADING_CONFIG = GradingConfiguration(
    number_of_partials=4,
    passing_grade=70,
    max_individual_activity_score=10,
    max_total_accumulated_score=50,
    max_exam_score=50,
)


def _ensure_data_dir():
    os.makedirs(DATA_DIR, exist_ok=True)


def _load_json(filename: str) -> Optional[dict]:
    """Return the stored object, or None if the file is missing, corrupt or not an object."""
    path = os.path.join(DATA_DIR, filename)
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("%s is not valid JSON, using defaults: %s", filename, e)
        return None
    if not isinstance(data, dict):
        logger.warning("%s does not hold a JSON object, using defaults", filename)
        return None
    return data


def _save_json(filename: str, data: dict):
    _ensure_data_dir()
    with open(os.path.join(DATA_DIR, filename), "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validated_grading_config(data: dict) -> GradingConfiguration:
    """Build a configuration from stored *data*, replacing each invalid field with its default."""
    default = DEFAULT_GRADING_CONFIG.model_dump(by_alias=True)
    checks = {
        "numberOfPartials": lambda v: isinstance(v, int) and not isinstance(v, bool) and v in (1, 2, 3, 4),
        "passingGrade": _is_number,
        "maxIndividualActivityScore": lambda v: _is_number(v) and v >= 0,
        "maxTotalAccumulatedScore": lambda v: _is_number(v) and v >= 0,
        "maxExamScore": lambda v: _is_number(v) and v >= 0,
    }
    values = {}
    for key, is_valid in checks.items():
        value = data.get(key)
        if is_valid(value):
            values[key] = value
        else:
            if value is not None:
                logger.warning("grading config: invalid %s=%r, using default %r", key, value, default[key])
            values[key] = default[key]
    return GradingConfiguration(**values)


def save_grading_config(config: GradingConfiguration):
    _save_json("grading_config.json", config.model_dump(by_alias=True))


def load_grading_config() -> GradingConfiguration:
    data = _load_json("grading_config.json")
    if data is None:
        return DEFAULT_GRADING_CONFIG
    return validated_grading_config(data)


def save_certificate_template(template: str):
    _save_json("certificate_template.json", {"template": template})


def load_certificate_template() -> str:
    data = _load_json("certificate_template.json")
    if not data or not isinstance(data.get("template"), str) or not data["template"]:
        return DEFAULT_CERTIFICATE_TEMPLATE
    return data["template"]
