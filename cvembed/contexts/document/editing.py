"""
Replace-whole-value edits.

The builder never mutates a resume in place: every edit returns a new
resume value with meta.updatedAt refreshed. These helpers give scripts and
tests the same update path the form components use.
"""

import copy
from typing import Any, Dict, List, Union

from cvembed.contexts.document.defaults import create_blank_item
from cvembed.contexts.document.schema import ITEM_SECTIONS, SECTION_KEYS
from cvembed.utils.timestamp import now_iso


def _touch(resume: Dict[str, Any]) -> Dict[str, Any]:
    resume["meta"]["updatedAt"] = now_iso()
    return resume


def _parse_path(path: str) -> List[Union[str, int]]:
    """Split "experience.0.bullets" into ["experience", 0, "bullets"]."""
    if not path:
        raise ValueError("Edit path must not be empty")
    return [int(part) if part.isdigit() else part for part in path.split(".")]


def update_resume(resume: Dict[str, Any], path: str, value: Any) -> Dict[str, Any]:
    """
    Return a copy of the resume with one field replaced.

    Args:
        resume: Normalized resume
        path: Dotted path, list indices as numbers (e.g., "basics.name",
            "projects.1.techStack", "meta.documentOptions.density")
        value: New value for the field

    Returns:
        New resume with the field replaced and updatedAt refreshed

    Raises:
        ValueError: If the path does not lead to an existing container
    """
    parts = _parse_path(path)
    updated = copy.deepcopy(resume)

    container: Any = updated
    for part in parts[:-1]:
        try:
            container = container[part]
        except (KeyError, IndexError, TypeError):
            raise ValueError(f"Invalid edit path '{path}': no such field '{part}'")

    last = parts[-1]
    if isinstance(container, list):
        if not isinstance(last, int) or last >= len(container):
            raise ValueError(f"Invalid edit path '{path}': index out of range")
    elif not isinstance(container, dict):
        raise ValueError(f"Invalid edit path '{path}': cannot set a field on a value")

    container[last] = copy.deepcopy(value)
    return _touch(updated)


def _require_item_section(section: str) -> None:
    if section not in ITEM_SECTIONS:
        raise ValueError(f"Unknown item section '{section}'. Available: {', '.join(ITEM_SECTIONS)}")


def add_item(resume: Dict[str, Any], section: str) -> Dict[str, Any]:
    """Append a blank item to a sequence section."""
    _require_item_section(section)
    updated = copy.deepcopy(resume)
    updated[section].append(create_blank_item(section))
    return _touch(updated)


def remove_item(resume: Dict[str, Any], section: str, index: int) -> Dict[str, Any]:
    """Remove the item at ``index`` from a sequence section."""
    _require_item_section(section)
    if not 0 <= index < len(resume[section]):
        raise ValueError(f"{section} has no item at index {index}")
    updated = copy.deepcopy(resume)
    del updated[section][index]
    return _touch(updated)


def move_section(resume: Dict[str, Any], key: str, offset: int) -> Dict[str, Any]:
    """
    Move a section up (negative offset) or down in sectionOrder.

    The position is clamped to the ends of the order.
    """
    if key not in SECTION_KEYS:
        raise ValueError(f"Unknown section '{key}'")
    updated = copy.deepcopy(resume)
    order = updated["meta"]["documentOptions"]["sectionOrder"]
    current = order.index(key)
    target = max(0, min(len(order) - 1, current + offset))
    order.insert(target, order.pop(current))
    return _touch(updated)


def set_section_visibility(resume: Dict[str, Any], key: str, visible: bool) -> Dict[str, Any]:
    """Show or hide a section in rendered output."""
    if key not in SECTION_KEYS:
        raise ValueError(f"Unknown section '{key}'")
    updated = copy.deepcopy(resume)
    updated["meta"]["documentOptions"]["showSections"][key] = visible
    return _touch(updated)
