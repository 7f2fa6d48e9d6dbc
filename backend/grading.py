"""Grade aggregation: activity totals, partial totals and the level final grade.

Every function takes the GradingConfiguration explicitly.  Scores are not
validated against the per-activity maximum; only the accumulated sum is capped.
"""
import logging
from typing import Iterable, Optional

from models import (
    ActivityScore,
    FinalGradeResult,
    GradingConfiguration,
    PartialResult,
    PartialScores,
    StudentGradeStructure,
)

logger = logging.getLogger(__name__)


def accumulated_total(activities: Optional[Iterable[ActivityScore]],
                      config: GradingConfiguration) -> float:
    """Sum of activity scores (ungraded counts as 0), capped at the configured maximum."""
    if activities is None:
        return 0.0
    total = 0.0
    for activity in activities:
        if activity.score is not None:
            total += activity.score
    return min(total, config.max_total_accumulated_score)


def exam_score(partial: Optional[PartialScores]) -> Optional[float]:
    if partial is None or partial.exam is None:
        return None
    return partial.exam.score


def partial_total(partial: Optional[PartialScores], config: GradingConfiguration) -> float:
    """Accumulated total plus exam score.  Not clamped; a missing partial is 0."""
    if partial is None:
        return 0.0
    exam = exam_score(partial)
    return accumulated_total(partial.accumulated_activities, config) + (exam if exam is not None else 0.0)


def final_grade(grades: Optional[StudentGradeStructure],
                config: GradingConfiguration) -> FinalGradeResult:
    """Average the partial totals of one level.

    The final grade is only defined when all ``config.number_of_partials``
    partials are present.  Otherwise ``final_grade`` is None and ``passed`` is
    None as well; a missing partial never turns into a zero grade.
    """
    partials = []
    for number in range(1, config.number_of_partials + 1):
        partial = grades.partial(number) if grades is not None else None
        partials.append(PartialResult(
            number=number,
            present=partial is not None,
            total=partial_total(partial, config),
        ))

    result = FinalGradeResult(partials=partials, max_score=config.max_partial_score)
    if all(p.present for p in partials):
        grade = sum(p.total for p in partials) / config.number_of_partials
        result.final_grade = grade
        result.passed = grade >= config.passing_grade
    else:
        missing = [p.number for p in partials if not p.present]
        logger.debug("final grade not computable, missing partials: %s", missing)
    return result
