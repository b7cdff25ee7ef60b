"""
Review Context

Responsibilities:
- Checks resume structure against the document schema
- Applies semantic rules producing errors and warnings
- Computes the completeness score from findings

Owns: Validation rules, score formula
Never: Modifies the resume it reviews
"""

from cvembed.contexts.review.schema_check import check_structure
from cvembed.contexts.review.scoring import (
    CompletenessSignals,
    clamp_score,
    collect_completeness_signals,
    compute_score,
)
from cvembed.contexts.review.validator import ValidationResult, validate_resume

__all__ = [
    "check_structure",
    "validate_resume",
    "ValidationResult",
    "compute_score",
    "clamp_score",
    "collect_completeness_signals",
    "CompletenessSignals",
]
