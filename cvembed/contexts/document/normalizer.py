"""
Resume Normalization

Merges an arbitrary, partial or older-shaped resume onto the current
default structure.

- Input: ANY value claiming to be a resume (file import, decoded share
  token, stored draft)
- Output: Complete resume with every required field present
- Operations:
  1. Start from create_empty_resume()
  2. Overlay each field of the input when it has the right kind
     (text for text fields, list for sequences, mapping for sub-objects)
  3. Merge documentOptions, showSections and skills key by key so options
     added after the input was written still get their defaults
  4. Rebuild sectionOrder as a permutation of the canonical section keys

Items inside the sequence sections are taken as-is; a stale item missing a
field keeps it missing and the review context reports it.

Never raises for data-shape problems.
"""

import copy
from typing import Any, Dict, List

from cvembed.contexts.document.defaults import (
    DEFAULT_SECTION_ORDER,
    create_default_document_options,
    create_empty_resume,
)
from cvembed.contexts.document.logger import _log_debug
from cvembed.contexts.document.schema import (
    BASICS_FIELDS,
    DOCUMENT_OPTION_CHOICES,
    DOCUMENT_OPTION_TEXT,
    ITEM_SECTIONS,
    META_TEXT_FIELDS,
    SECTION_KEYS,
    SKILL_CATEGORIES,
    TEXT,
)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def _list_or(value: Any, default: list) -> list:
    if not isinstance(value, list):
        return default
    try:
        return copy.deepcopy(value)
    except RecursionError:
        _log_debug("Dropped a list nested too deeply to copy; using the default")
        return default


def merge_section_order(incoming: Any) -> List[str]:
    """
    Complete an incoming section order against the canonical key set.

    Unknown keys are dropped, duplicates collapse to their first occurrence,
    and missing canonical keys are appended in default order.

    Args:
        incoming: Section order from the input (any value)

    Returns:
        Permutation of SECTION_KEYS

    Example:
        >>> merge_section_order(["skills", "bogus", "skills", "summary"])[:3]
        ['skills', 'summary', 'education']
    """
    if not isinstance(incoming, list):
        return list(DEFAULT_SECTION_ORDER)

    recognized = [key for key in incoming if isinstance(key, str) and key in SECTION_KEYS]
    if len(recognized) != len(incoming):
        _log_debug(f"Dropped {len(incoming) - len(recognized)} unrecognized section key(s)")

    return list(dict.fromkeys(recognized + DEFAULT_SECTION_ORDER))


def merge_document_options(incoming: Any) -> Dict[str, Any]:
    """
    Merge incoming document options onto the defaults, one key at a time.

    Args:
        incoming: documentOptions from the input (any value)

    Returns:
        Complete documentOptions dict
    """
    options = create_default_document_options()
    incoming = _as_dict(incoming)

    for option in DOCUMENT_OPTION_TEXT + tuple(DOCUMENT_OPTION_CHOICES):
        options[option] = _text_or(incoming.get(option), options[option])

    incoming_visibility = _as_dict(incoming.get("showSections"))
    for key in SECTION_KEYS:
        visible = incoming_visibility.get(key)
        if isinstance(visible, bool):
            options["showSections"][key] = visible

    options["sectionOrder"] = merge_section_order(incoming.get("sectionOrder"))
    return options


def normalize_resume(data: Any) -> Dict[str, Any]:
    """
    Produce a complete resume from any input.

    Applies the default structure first, then overlays every field of
    ``data`` that has the expected kind. The result is a fresh value; the
    input is never modified or aliased.

    Opinionated - no parameters beyond the input. normalize_resume is
    idempotent: normalizing an already normalized resume returns an equal
    value.

    Args:
        data: Resume-like value (usually a dict parsed from JSON)

    Returns:
        Normalized resume dict

    Example:
        >>> resume = normalize_resume({"basics": {"name": "Ada"}})
        >>> resume["basics"]["name"], resume["basics"]["email"]
        ('Ada', '')
    """
    base = create_empty_resume()

    if not isinstance(data, dict):
        _log_debug(f"Input is {type(data).__name__}, not a mapping; using empty resume")
        return base

    incoming_meta = _as_dict(data.get("meta"))
    meta = base["meta"]
    for field in ("version", "template") + META_TEXT_FIELDS:
        meta[field] = _text_or(incoming_meta.get(field), meta[field])
    meta["documentOptions"] = merge_document_options(incoming_meta.get("documentOptions"))

    incoming_basics = _as_dict(data.get("basics"))
    basics = base["basics"]
    for field, kind in BASICS_FIELDS.items():
        if kind is TEXT:
            basics[field] = _text_or(incoming_basics.get(field), basics[field])
        else:
            basics[field] = _list_or(incoming_basics.get(field), basics[field])

    for section in ITEM_SECTIONS:
        base[section] = _list_or(data.get(section), base[section])

    incoming_skills = _as_dict(data.get("skills"))
    for category in SKILL_CATEGORIES:
        base["skills"][category] = _list_or(incoming_skills.get(category), [])

    return base
