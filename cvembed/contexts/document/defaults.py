"""
Default values for the CVEmbed resume document.

Provides shared defaults used by:
- normalizer.py (the known-good base every input is merged onto)
- editing.py (blank rows appended by add_item)
- the sharing context when a fresh document is needed

Construction is purely structural: the only input from the outside world
is the current UTC time stamped into meta.createdAt/updatedAt.
"""

from typing import Any, Dict

from cvembed.contexts.document.schema import (
    BASICS_FIELDS,
    DOCUMENT_OPTION_CHOICES,
    LINK_FIELDS,
    SCHEMA_VERSION,
    SECTION_ITEM_FIELDS,
    SECTION_KEYS,
    SKILL_CATEGORIES,
    TEXT,
)
from cvembed.utils.timestamp import now_iso

DEFAULT_TEMPLATE = "minimal"
DEFAULT_ACCENT_COLOR = "#111111"
DEFAULT_SECTION_ORDER = list(SECTION_KEYS)


def _blank_record(fields: Dict[str, type]) -> Dict[str, Any]:
    return {name: "" if kind is TEXT else [] for name, kind in fields.items()}


def create_blank_item(section: str) -> Dict[str, Any]:
    """
    Build an empty item record for a sequence-valued section.

    Args:
        section: Section key (e.g., "experience", "projects")

    Returns:
        Dict with every text field set to "" and every list field set to []

    Raises:
        KeyError: If the section has no item records (e.g., "skills")
    """
    return _blank_record(SECTION_ITEM_FIELDS[section])


def create_blank_link() -> Dict[str, str]:
    """Empty {label, url} row."""
    return _blank_record(LINK_FIELDS)


def create_default_document_options() -> Dict[str, Any]:
    """
    Get the complete default DocumentOptions structure.

    Every enumerated option takes the first of its allowed values, every
    section is visible, and the order is the canonical section order.

    Returns:
        Dict with all document option fields
    """
    options: Dict[str, Any] = {"accentColor": DEFAULT_ACCENT_COLOR}
    for option, choices in DOCUMENT_OPTION_CHOICES.items():
        options[option] = choices[0]
    options["showSections"] = {key: True for key in SECTION_KEYS}
    options["sectionOrder"] = list(DEFAULT_SECTION_ORDER)
    return options


def create_empty_resume() -> Dict[str, Any]:
    """
    Create a fully populated empty resume.

    Education and basics.links start with one blank row each, since the
    builder always shows at least one row to edit; every other section
    starts empty.

    Returns:
        Resume dict stamped with the current UTC time
    """
    timestamp = now_iso()

    basics = {name: "" for name, kind in BASICS_FIELDS.items() if kind is TEXT}
    basics["links"] = [create_blank_link()]

    resume: Dict[str, Any] = {
        "meta": {
            "version": SCHEMA_VERSION,
            "template": DEFAULT_TEMPLATE,
            "createdAt": timestamp,
            "updatedAt": timestamp,
            "documentOptions": create_default_document_options(),
        },
        "basics": basics,
    }

    for section in SECTION_ITEM_FIELDS:
        resume[section] = []
    resume["education"] = [create_blank_item("education")]
    resume["skills"] = {category: [] for category in SKILL_CATEGORIES}

    return _in_canonical_key_order(resume)


RESUME_KEY_ORDER = (
    "meta",
    "basics",
    "education",
    "experience",
    "projects",
    "skills",
    "certifications",
    "accomplishments",
    "activities",
    "volunteering",
    "publications",
)


def _in_canonical_key_order(resume: Dict[str, Any]) -> Dict[str, Any]:
    """Reorder top-level keys so serialized documents read like the builder's exports."""
    return {key: resume[key] for key in RESUME_KEY_ORDER}
