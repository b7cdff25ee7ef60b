"""Unit tests for meaningful-item and skill predicates."""

import pytest

from cvembed.contexts.document.completeness import (
    find_duplicate_skills,
    has_any_link,
    has_any_skill,
    is_meaningful_item,
    meaningful_items,
    unique_skills,
)
from cvembed.contexts.document.defaults import create_blank_item
from cvembed.contexts.document.schema import SECTION_ITEM_FIELDS


@pytest.mark.unit
@pytest.mark.parametrize("section", list(SECTION_ITEM_FIELDS))
def test_blank_items_are_not_meaningful(section):
    assert not is_meaningful_item(section, create_blank_item(section))


@pytest.mark.unit
@pytest.mark.parametrize("section", list(SECTION_ITEM_FIELDS))
def test_any_text_field_makes_item_meaningful(section):
    for name, kind in SECTION_ITEM_FIELDS[section].items():
        item = create_blank_item(section)
        item[name] = "x" if kind is str else ["x"]
        assert is_meaningful_item(section, item), f"{section}.{name}"


@pytest.mark.unit
def test_whitespace_and_blank_entries_do_not_count():
    item = create_blank_item("projects")
    item["title"] = "   "
    item["techStack"] = ["", "  "]
    item["bullets"] = [" "]
    assert not is_meaningful_item("projects", item)


@pytest.mark.unit
@pytest.mark.parametrize("item", [None, "text", 5, [], {"title": 3, "bullets": "b"}])
def test_malformed_items_are_tolerated(item):
    assert not is_meaningful_item("projects", item)


@pytest.mark.unit
def test_meaningful_items_filters_placeholder_rows():
    resume = {"experience": [create_blank_item("experience"), {"company": "Acme"}]}
    assert meaningful_items(resume, "experience") == [{"company": "Acme"}]
    assert meaningful_items({"experience": None}, "experience") == []


@pytest.mark.unit
def test_skill_predicates():
    skills = {"languages": ["Go", "go ", "Python"], "frameworks": [], "tools": [" "], "other": ["GO"]}

    assert has_any_skill(skills)
    assert unique_skills(skills) == ["go", "python"]
    assert find_duplicate_skills(skills) == ["go", "GO"]


@pytest.mark.unit
def test_no_skills():
    empty = {"languages": [], "frameworks": [], "tools": [], "other": []}
    assert not has_any_skill(empty)
    assert unique_skills(empty) == []
    assert find_duplicate_skills(empty) == []


@pytest.mark.unit
def test_has_any_link():
    assert not has_any_link({"basics": {"links": [{"label": "GitHub", "url": " "}]}})
    assert has_any_link({"basics": {"links": [{"label": "", "url": "https://x.dev"}]}})
    assert not has_any_link({"basics": {"links": ["https://x.dev"]}})
