"""
Resume document schema tables.

Declarative description of every field in a resume document: which fields
each record has and whether they hold text or a list of text. The same
tables drive default construction, normalization, the structural check
in the review context and the completeness predicates, so adding a field
here is enough for all of them to pick it up.
"""

from typing import Dict, Tuple

SCHEMA_VERSION = "1.0"

# Canonical section keys in default display order
SECTION_KEYS: Tuple[str, ...] = (
    "summary",
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

TEMPLATE_NAMES: Tuple[str, ...] = ("minimal", "compact")

SKILL_CATEGORIES: Tuple[str, ...] = ("languages", "frameworks", "tools", "other")

# Field kinds: str fields default to "", list fields hold strings and default to []
TEXT = str
TEXT_LIST = list

LINK_FIELDS: Dict[str, type] = {
    "label": TEXT,
    "url": TEXT,
}

BASICS_FIELDS: Dict[str, type] = {
    "name": TEXT,
    "headline": TEXT,
    "email": TEXT,
    "phone": TEXT,
    "location": TEXT,
    "summary": TEXT,
    "links": TEXT_LIST,  # list of LINK_FIELDS records, not strings
}

# Item record shapes for the sequence-valued sections, in document order
SECTION_ITEM_FIELDS: Dict[str, Dict[str, type]] = {
    "education": {
        "institution": TEXT,
        "degree": TEXT,
        "field": TEXT,
        "cgpa": TEXT,
        "startDate": TEXT,
        "endDate": TEXT,
        "location": TEXT,
    },
    "experience": {
        "company": TEXT,
        "role": TEXT,
        "location": TEXT,
        "startDate": TEXT,
        "endDate": TEXT,
        "bullets": TEXT_LIST,
    },
    "projects": {
        "title": TEXT,
        "projectLink": TEXT,
        "repoLink": TEXT,
        "techStack": TEXT_LIST,
        "startDate": TEXT,
        "endDate": TEXT,
        "bullets": TEXT_LIST,
    },
    "certifications": {
        "title": TEXT,
        "issuer": TEXT,
        "date": TEXT,
        "credentialId": TEXT,
        "credentialUrl": TEXT,
    },
    "accomplishments": {
        "title": TEXT,
        "organization": TEXT,
        "location": TEXT,
        "startDate": TEXT,
        "endDate": TEXT,
        "bullets": TEXT_LIST,
    },
    "activities": {
        "role": TEXT,
        "organization": TEXT,
        "location": TEXT,
        "startDate": TEXT,
        "endDate": TEXT,
        "referenceUrl": TEXT,
    },
    "volunteering": {
        "role": TEXT,
        "organization": TEXT,
        "location": TEXT,
        "startDate": TEXT,
        "endDate": TEXT,
        "bullets": TEXT_LIST,
    },
    "publications": {
        "title": TEXT,
        "venue": TEXT,
        "date": TEXT,
        "url": TEXT,
    },
}

ITEM_SECTIONS: Tuple[str, ...] = tuple(SECTION_ITEM_FIELDS)

# Enumerated document options and their allowed values (first value is the default)
DOCUMENT_OPTION_CHOICES: Dict[str, Tuple[str, ...]] = {
    "fontFamily": (
        "satoshi",
        "clash",
        "spacegrotesk",
        "instrumentserif",
        "inter",
        "helvetica",
        "times",
    ),
    "fontSize": ("normal", "small", "large"),
    "lineHeight": ("normal", "tight", "relaxed"),
    "sectionHeadingStyle": ("rule", "bold", "minimal"),
    "bulletStyle": ("dot", "dash"),
    "dateStyle": ("range", "compact"),
    "density": ("comfortable", "compact", "relaxed"),
    "linkDisplay": ("label", "url"),
}

# Free-form text options
DOCUMENT_OPTION_TEXT: Tuple[str, ...] = ("accentColor",)

META_TEXT_FIELDS: Tuple[str, ...] = ("createdAt", "updatedAt")


def text_fields(section: str) -> Tuple[str, ...]:
    """Names of the plain text fields of a section's item record."""
    return tuple(name for name, kind in SECTION_ITEM_FIELDS[section].items() if kind is TEXT)


def list_fields(section: str) -> Tuple[str, ...]:
    """Names of the list-of-text fields of a section's item record."""
    return tuple(name for name, kind in SECTION_ITEM_FIELDS[section].items() if kind is TEXT_LIST)
