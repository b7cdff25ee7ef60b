"""
Completeness score.

The score starts at 100, loses points per finding and gains a small bonus
for signs of a complete resume:

    error_penalty   = min(errors * 10, 70)
    warning_penalty = min(warnings * 3, 24)
    bonus = 3 [projects >= 2] + 2 [experience >= 1] + 2 [summary]
          + 2 [unique skills >= 6] + 1 [any link url]
    score = clamp(round(100 - error_penalty - warning_penalty + bonus), 0, 100)

Rounding is half away from zero. The score is recomputed from scratch on
every validation; nothing is cached.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Sequence

from cvembed.contexts.document.completeness import (
    has_any_link,
    is_blank,
    meaningful_items,
    text_value,
    unique_skills,
)

ERROR_WEIGHT = 10
MAX_ERROR_PENALTY = 70
WARNING_WEIGHT = 3
MAX_WARNING_PENALTY = 24

MIN_SCORE = 0
MAX_SCORE = 100


@dataclass(frozen=True)
class CompletenessSignals:
    """
    Document completeness signals feeding the score bonus.

    Attributes:
        meaningful_projects: Number of project items with content
        meaningful_experience: Number of experience items with content
        has_summary: Whether basics.summary is non-blank
        unique_skills: Number of case-insensitively distinct skills
        has_any_link: Whether any basics link has a URL
    """

    meaningful_projects: int = 0
    meaningful_experience: int = 0
    has_summary: bool = False
    unique_skills: int = 0
    has_any_link: bool = False

    @property
    def bonus(self) -> int:
        return (
            (3 if self.meaningful_projects >= 2 else 0)
            + (2 if self.meaningful_experience >= 1 else 0)
            + (2 if self.has_summary else 0)
            + (2 if self.unique_skills >= 6 else 0)
            + (1 if self.has_any_link else 0)
        )


def collect_completeness_signals(resume: Dict[str, Any]) -> CompletenessSignals:
    """Measure completeness signals of a normalized resume."""
    return CompletenessSignals(
        meaningful_projects=len(meaningful_items(resume, "projects")),
        meaningful_experience=len(meaningful_items(resume, "experience")),
        has_summary=not is_blank(text_value(resume.get("basics"), "summary")),
        unique_skills=len(unique_skills(resume.get("skills"))),
        has_any_link=has_any_link(resume),
    )


def round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def clamp_score(value: float) -> int:
    """Round to the nearest integer, then saturate to [0, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, round_half_away_from_zero(value)))


def compute_score(
    errors: Sequence[str],
    warnings: Sequence[str],
    signals: CompletenessSignals,
) -> int:
    """
    Compute the completeness score from findings and signals.

    Args:
        errors: Error findings (only the count matters)
        warnings: Warning findings (only the count matters)
        signals: Completeness signals for the bonus

    Returns:
        Integer score in [0, 100]
    """
    error_penalty = min(len(errors) * ERROR_WEIGHT, MAX_ERROR_PENALTY)
    warning_penalty = min(len(warnings) * WARNING_WEIGHT, MAX_WARNING_PENALTY)
    return clamp_score(MAX_SCORE - error_penalty - warning_penalty + signals.bonus)
