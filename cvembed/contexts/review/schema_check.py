"""
Structural check of a resume document.

Walks the document against the tables in the document schema and reports
every field whose kind is wrong, every enumerated field holding an unknown
value, and a meta.version other than the supported one. Each problem is
one message of the form "<dotted.path>: <message>".

Runs on any value, normalized or not; never raises.
"""

from typing import Any, Dict, List, Tuple

from cvembed.contexts.document.schema import (
    BASICS_FIELDS,
    DOCUMENT_OPTION_CHOICES,
    DOCUMENT_OPTION_TEXT,
    LINK_FIELDS,
    META_TEXT_FIELDS,
    SCHEMA_VERSION,
    SECTION_ITEM_FIELDS,
    SECTION_KEYS,
    SKILL_CATEGORIES,
    TEMPLATE_NAMES,
    TEXT,
)

_MISSING = object()


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class StructureChecker:
    """Collects structural issues while walking one document."""

    def __init__(self):
        self.issues: List[str] = []

    def report(self, path: str, message: str) -> None:
        self.issues.append(f"{path}: {message}")

    def _kind_error(self, path: str, expected: str, value: Any) -> None:
        if value is _MISSING:
            self.report(path, "required")
        else:
            self.report(path, f"expected {expected}, received {_describe(value)}")

    def expect_text(self, value: Any, path: str) -> None:
        if not isinstance(value, str):
            self._kind_error(path, "string", value)

    def expect_bool(self, value: Any, path: str) -> None:
        if not isinstance(value, bool):
            self._kind_error(path, "boolean", value)

    def expect_choice(self, value: Any, path: str, choices: Tuple[str, ...]) -> None:
        if not isinstance(value, str):
            self._kind_error(path, "string", value)
        elif value not in choices:
            allowed = " | ".join(f"'{choice}'" for choice in choices)
            self.report(path, f"expected one of {allowed}, received '{value}'")

    def expect_mapping(self, value: Any, path: str) -> bool:
        if isinstance(value, dict):
            return True
        self._kind_error(path, "object", value)
        return False

    def expect_sequence(self, value: Any, path: str) -> bool:
        if isinstance(value, list):
            return True
        self._kind_error(path, "array", value)
        return False

    def expect_text_list(self, value: Any, path: str) -> None:
        if self.expect_sequence(value, path):
            for index, entry in enumerate(value):
                self.expect_text(entry, f"{path}.{index}")

    def expect_record(self, value: Any, path: str, fields: Dict[str, type]) -> None:
        if not self.expect_mapping(value, path):
            return
        for name, kind in fields.items():
            field_value = value.get(name, _MISSING)
            if kind is TEXT:
                self.expect_text(field_value, f"{path}.{name}")
            else:
                self.expect_text_list(field_value, f"{path}.{name}")

    # Document sections

    def check_meta(self, meta: Any) -> None:
        if not self.expect_mapping(meta, "meta"):
            return

        version = meta.get("version", _MISSING)
        if not isinstance(version, str):
            self._kind_error("meta.version", "string", version)
        elif version != SCHEMA_VERSION:
            self.report("meta.version", f"expected \"{SCHEMA_VERSION}\", received '{version}'")

        self.expect_choice(meta.get("template", _MISSING), "meta.template", TEMPLATE_NAMES)
        for field in META_TEXT_FIELDS:
            self.expect_text(meta.get(field, _MISSING), f"meta.{field}")

        self.check_document_options(meta.get("documentOptions", _MISSING))

    def check_document_options(self, options: Any) -> None:
        path = "meta.documentOptions"
        if not self.expect_mapping(options, path):
            return

        for option in DOCUMENT_OPTION_TEXT:
            self.expect_text(options.get(option, _MISSING), f"{path}.{option}")
        for option, choices in DOCUMENT_OPTION_CHOICES.items():
            self.expect_choice(options.get(option, _MISSING), f"{path}.{option}", choices)

        visibility = options.get("showSections", _MISSING)
        if self.expect_mapping(visibility, f"{path}.showSections"):
            for key in SECTION_KEYS:
                self.expect_bool(visibility.get(key, _MISSING), f"{path}.showSections.{key}")

        order = options.get("sectionOrder", _MISSING)
        if self.expect_sequence(order, f"{path}.sectionOrder"):
            for index, key in enumerate(order):
                self.expect_choice(key, f"{path}.sectionOrder.{index}", SECTION_KEYS)

    def check_basics(self, basics: Any) -> None:
        if not self.expect_mapping(basics, "basics"):
            return
        for name, kind in BASICS_FIELDS.items():
            value = basics.get(name, _MISSING)
            if kind is TEXT:
                self.expect_text(value, f"basics.{name}")
            elif self.expect_sequence(value, f"basics.{name}"):
                for index, link in enumerate(value):
                    self.expect_record(link, f"basics.{name}.{index}", LINK_FIELDS)

    def check_sections(self, resume: Dict[str, Any]) -> None:
        for section, fields in SECTION_ITEM_FIELDS.items():
            items = resume.get(section, _MISSING)
            if self.expect_sequence(items, section):
                for index, item in enumerate(items):
                    self.expect_record(item, f"{section}.{index}", fields)

    def check_skills(self, skills: Any) -> None:
        if not self.expect_mapping(skills, "skills"):
            return
        for category in SKILL_CATEGORIES:
            self.expect_text_list(skills.get(category, _MISSING), f"skills.{category}")


def check_structure(resume: Any) -> List[str]:
    """
    Check a resume's shape field by field.

    Args:
        resume: Resume value (normally a normalized dict)

    Returns:
        List of "<dotted.path>: <message>" issues in document order
        (empty when the shape is valid)

    Example:
        >>> resume = create_empty_resume()
        >>> resume["meta"]["template"] = "fancy"
        >>> check_structure(resume)
        ["meta.template: expected one of 'minimal' | 'compact', received 'fancy'"]
    """
    checker = StructureChecker()

    if not isinstance(resume, dict):
        checker._kind_error("(root)", "object", resume)
        return checker.issues

    checker.check_meta(resume.get("meta", _MISSING))
    checker.check_basics(resume.get("basics", _MISSING))
    checker.check_sections(resume)
    checker.check_skills(resume.get("skills", _MISSING))
    return checker.issues
