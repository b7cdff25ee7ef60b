"""
Completeness predicates shared by review and rendering.

A "meaningful" item is a section entry with at least one non-blank text
field or at least one non-blank entry in one of its list fields. The review
context counts meaningful items; renderers use the same predicate to skip
placeholder rows, so a preview never shows a card the score ignored.

All predicates tolerate malformed items (missing fields, wrong kinds) since
they run on normalized documents whose items are not normalized.
"""

from typing import Any, Dict, List

from cvembed.contexts.document.schema import SKILL_CATEGORIES, list_fields, text_fields


def is_blank(value: Any) -> bool:
    """True for empty or whitespace-only strings and for anything that is not a string."""
    return not isinstance(value, str) or not value.strip()


def text_value(record: Any, field: str) -> str:
    """Read a text field from a record, "" when absent or not text."""
    if isinstance(record, dict):
        value = record.get(field)
        if isinstance(value, str):
            return value
    return ""


def text_list(record: Any, field: str) -> List[Any]:
    """Read a list field from a record, [] when absent or not a list."""
    if isinstance(record, dict):
        value = record.get(field)
        if isinstance(value, list):
            return value
    return []


def has_any_text(values: List[Any]) -> bool:
    return any(not is_blank(value) for value in values)


def is_meaningful_item(section: str, item: Any) -> bool:
    """
    Check whether a section item carries any content.

    Args:
        section: Item section key (e.g., "projects")
        item: Item record

    Returns:
        True if any text field is non-blank or any list field has a
        non-blank entry
    """
    if has_any_text([text_value(item, field) for field in text_fields(section)]):
        return True
    return any(has_any_text(text_list(item, field)) for field in list_fields(section))


def meaningful_items(resume: Dict[str, Any], section: str) -> List[Dict[str, Any]]:
    """Items of a section that pass is_meaningful_item, in display order."""
    items = resume.get(section)
    if not isinstance(items, list):
        return []
    return [item for item in items if is_meaningful_item(section, item)]


def flatten_skills(skills: Any) -> List[Any]:
    """All skill entries across categories, category order preserved."""
    flattened: List[Any] = []
    for category in SKILL_CATEGORIES:
        flattened.extend(text_list(skills, category))
    return flattened


def has_any_skill(skills: Any) -> bool:
    """True if any skill category holds at least one entry."""
    return any(text_list(skills, category) for category in SKILL_CATEGORIES)


def _fold(skill: Any) -> str:
    return skill.strip().lower() if isinstance(skill, str) else ""


def unique_skills(skills: Any) -> List[str]:
    """Case-insensitively deduplicated skills (trimmed, lowercased), first occurrence order."""
    folded = [_fold(skill) for skill in flatten_skills(skills)]
    return list(dict.fromkeys(skill for skill in folded if skill))


def find_duplicate_skills(skills: Any) -> List[str]:
    """
    Surface forms of skills that repeat an earlier entry.

    Comparison is on the trimmed, lowercased form; each repeated surface
    form is reported once.

    Example:
        >>> find_duplicate_skills({"languages": ["Go", "go", "Python"]})
        ['go']
    """
    seen = set()
    duplicates: Dict[str, None] = {}

    for skill in flatten_skills(skills):
        folded = _fold(skill)
        if not folded:
            continue
        if folded in seen:
            duplicates[skill.strip()] = None
        else:
            seen.add(folded)

    return list(duplicates)


def has_any_link(resume: Dict[str, Any]) -> bool:
    """True if any basics link has a non-blank URL."""
    links = text_list(resume.get("basics"), "links")
    return any(not is_blank(text_value(link, "url")) for link in links)
