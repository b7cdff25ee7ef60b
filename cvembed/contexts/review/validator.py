"""
Resume validation with actionable findings.

Validates a resume in two passes:
1. Structural check (schema_check.py): every field has its declared kind
2. Semantic rules: required fields, bullet limits, link hygiene, depth of
   projects/experience/skills, rough page length

Findings are plain messages split into errors (the resume fails minimum
acceptability) and warnings (advisory). Every rule runs; nothing
short-circuits, so callers always see the complete picture in one pass.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from cvembed.contexts.document.completeness import (
    find_duplicate_skills,
    is_blank,
    text_list,
    text_value,
)
from cvembed.contexts.review.logger import _log_debug
from cvembed.contexts.review.schema_check import check_structure
from cvembed.contexts.review.scoring import (
    CompletenessSignals,
    collect_completeness_signals,
    compute_score,
)
from cvembed.utils.text import utf16_length

MAX_BULLETS = {
    "experience": 4,
    "projects": 3,
    "accomplishments": 3,
    "volunteering": 4,
}
MAX_BULLET_CHARS = 180

# Link fields that should carry absolute http(s) URLs, per section
URL_FIELDS = {
    "projects": ("projectLink", "repoLink"),
    "certifications": ("credentialUrl",),
    "activities": ("referenceUrl",),
    "publications": ("url",),
}

# Bullet and link rules run per section in document order
RULE_SECTIONS = (
    "experience",
    "projects",
    "certifications",
    "accomplishments",
    "activities",
    "volunteering",
    "publications",
)

REQUIRED_BASICS = ("name", "email", "phone")
REQUIRED_EDUCATION = ("institution", "degree", "field")

MIN_DISTINCT_SKILLS = 3
RECOMMENDED_DISTINCT_SKILLS = 6
ONE_PAGE_CHAR_BUDGET = 6000


@dataclass
class ValidationResult:
    """
    Result of resume validation.

    Attributes:
        errors: Findings that make the resume unacceptable, in rule order
        warnings: Advisory findings, in rule order
        score: Completeness score in [0, 100]
        signals: Completeness signals behind the score bonus
    """

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    score: int = 0
    signals: CompletenessSignals = field(default_factory=CompletenessSignals)

    @property
    def valid(self) -> bool:
        """True when there are no errors; warnings never affect validity."""
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """Plain {valid, errors, warnings, score} mapping for JSON output."""
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "score": self.score,
        }


def _items(resume: Dict[str, Any], section: str) -> List[Any]:
    items = resume.get(section)
    return items if isinstance(items, list) else []


def _check_required(errors: List[str], record: Any, prefix: str, fields) -> None:
    for name in fields:
        if is_blank(text_value(record, name)):
            errors.append(f"{prefix}.{name} is required")


def _check_bullets(errors: List[str], section: str, index: int, item: Any) -> None:
    bullets = text_list(item, "bullets")
    limit = MAX_BULLETS[section]

    if len(bullets) > limit:
        errors.append(f"{section}[{index}] has more than {limit} bullets")

    for bullet_index, bullet in enumerate(bullets):
        if isinstance(bullet, str) and utf16_length(bullet) > MAX_BULLET_CHARS:
            errors.append(
                f"{section}[{index}].bullets[{bullet_index}] exceeds {MAX_BULLET_CHARS} characters"
            )


def _check_urls(warnings: List[str], section: str, index: int, item: Any) -> None:
    for name in URL_FIELDS[section]:
        value = text_value(item, name)
        if not is_blank(value) and not value.startswith("http"):
            warnings.append(f"{section}[{index}].{name} should start with http or https")


def _serialized_length(resume: Dict[str, Any]) -> int:
    """Length of the compact JSON text; 0 when the value is nested too deeply to serialize."""
    try:
        text = json.dumps(resume, ensure_ascii=False, separators=(",", ":"), default=str)
    except RecursionError:
        _log_debug("Resume is nested too deeply to measure; skipping the page length check")
        return 0
    return utf16_length(text)


def validate_resume(resume: Dict[str, Any]) -> ValidationResult:
    """
    Validate a normalized resume and score it.

    Args:
        resume: Normalized resume (see normalize_resume)

    Returns:
        ValidationResult with errors, warnings and score

    Example:
        >>> result = validate_resume(create_empty_resume())
        >>> result.valid
        False
        >>> "basics.name is required" in result.errors
        True
    """
    errors: List[str] = list(check_structure(resume))
    warnings: List[str] = []

    if not isinstance(resume, dict):
        return ValidationResult(errors=errors, score=compute_score(errors, warnings, CompletenessSignals()))

    basics = resume.get("basics")
    _check_required(errors, basics, "basics", REQUIRED_BASICS)

    education = _items(resume, "education")
    if not education:
        errors.append("education must contain at least one entry")
    for index, item in enumerate(education):
        _check_required(errors, item, f"education[{index}]", REQUIRED_EDUCATION)

    for section in RULE_SECTIONS:
        for index, item in enumerate(_items(resume, section)):
            if section in MAX_BULLETS:
                _check_bullets(errors, section, index, item)
            if section in URL_FIELDS:
                _check_urls(warnings, section, index, item)

    signals = collect_completeness_signals(resume)

    if signals.meaningful_projects == 0:
        errors.append("At least one project is required")
    elif signals.meaningful_projects == 1:
        warnings.append("Adding a second project improves profile depth")

    if signals.meaningful_experience == 0:
        warnings.append("Add at least one experience or internship entry")

    duplicates = find_duplicate_skills(resume.get("skills"))
    if duplicates:
        warnings.append(f"Duplicate skills detected: {', '.join(duplicates)}")

    if signals.unique_skills < MIN_DISTINCT_SKILLS:
        errors.append(f"Add at least {MIN_DISTINCT_SKILLS} distinct skills")
    elif signals.unique_skills < RECOMMENDED_DISTINCT_SKILLS:
        warnings.append("Add a few more skills to improve discoverability")

    if _serialized_length(resume) > ONE_PAGE_CHAR_BUDGET:
        warnings.append("Resume may overflow one page. Reduce summary or bullet lengths.")

    if is_blank(text_value(basics, "summary")):
        warnings.append("Adding a concise summary may improve profile strength.")

    return ValidationResult(
        errors=errors,
        warnings=warnings,
        score=compute_score(errors, warnings, signals),
        signals=signals,
    )
