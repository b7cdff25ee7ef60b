"""Unit tests for text helpers."""

import re

import pytest

from cvembed.utils.text import create_resume_id, parse_comma_list, to_comma_list, utf16_length


@pytest.mark.unit
def test_parse_comma_list_trims_and_drops_empty():
    assert parse_comma_list(" Python, SQL,, Docker ,") == ["Python", "SQL", "Docker"]


@pytest.mark.unit
def test_parse_comma_list_empty_string():
    assert parse_comma_list("") == []


@pytest.mark.unit
def test_to_comma_list_joins_with_space():
    assert to_comma_list(["Python", "SQL"]) == "Python, SQL"


@pytest.mark.unit
def test_create_resume_id_shape():
    resume_id = create_resume_id()
    assert 1 <= len(resume_id) <= 12
    assert re.fullmatch(r"[0-9a-z]+", resume_id)


@pytest.mark.unit
def test_create_resume_id_is_random():
    assert len({create_resume_id() for _ in range(20)}) > 1


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [("", 0), ("abc", 3), ("café", 4), ("ok \U0001F44D", 5), ("\U0001F680" * 3, 6)],
)
def test_utf16_length(text, expected):
    assert utf16_length(text) == expected
