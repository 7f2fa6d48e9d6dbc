"""Boundary towards the external narrative (AI) report generator.

The generator is a black box: it receives a PerformanceBrief plus the fixed
instructions below and returns markdown prose.  No implementation ships with
this package; the host application supplies one.
"""
from abc import ABC, abstractmethod

from models import NarrativeReport, PerformanceBrief

PERFORMANCE_REPORT_INSTRUCTIONS = """\
You are an academic advisor assisting the teachers of a language academy. Write a \
constructive performance report for the student described below. Use a professional, \
encouraging tone and markdown formatting (headings, bold text, bullet points).

1. General summary: open with a short paragraph on the student's overall performance in the level.
2. Academic performance: comment on the final grade and on consistency across partials; \
name strengths and areas for improvement.
3. Attendance and punctuality: comment on the attendance rate; praise good attendance, and \
explain the impact of absences or lateness, using the teacher observations as context.
4. Recommendations: give 2-3 clear, positive, actionable recommendations.
5. Closing: end with a motivating remark.
"""

_PROMPT_TEMPLATE = """\
{instructions}
Student information:
- Name: {student_name}
- Level: {level_name}

Academic and attendance data:
- Grades summary: {grades_summary}
- Attendance summary: {attendance_summary}
- Teacher observations: {teacher_observations}
"""


def render_prompt(brief: PerformanceBrief, instructions: str = PERFORMANCE_REPORT_INSTRUCTIONS) -> str:
    """Flatten *brief* and *instructions* into a single prompt string."""
    return _PROMPT_TEMPLATE.format(instructions=instructions, **brief.model_dump())


class NarrativeGeneratorError(Exception):
    """Raised by generators when the external service fails."""


class NarrativeGenerator(ABC):

    @abstractmethod
    def generate(self, brief: PerformanceBrief, instructions: str) -> NarrativeReport:
        ...
