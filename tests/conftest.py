"""Shared fixtures for CVEmbed tests."""

import importlib.util
from pathlib import Path

import pytest

from cvembed.contexts.document.defaults import create_empty_resume
from cvembed.contexts.document.normalizer import normalize_resume

SCRIPTS_PATH = Path(__file__).resolve().parent.parent / "scripts"


@pytest.fixture
def empty_resume():
    return create_empty_resume()


@pytest.fixture
def minimal_valid_resume():
    """Smallest resume with no errors: contact info, one education, one project, three skills."""
    return normalize_resume(
        {
            "basics": {"name": "Jane Doe", "email": "jane@x.com", "phone": "555-0100"},
            "education": [
                {
                    "institution": "State University",
                    "degree": "BSc",
                    "field": "Computer Science",
                    "cgpa": "3.8",
                    "startDate": "2019-09",
                    "endDate": "2023-06",
                    "location": "Springfield",
                }
            ],
            "projects": [
                {
                    "title": "Resume Builder",
                    "projectLink": "",
                    "repoLink": "",
                    "techStack": ["Python"],
                    "startDate": "2024-01",
                    "endDate": "",
                    "bullets": ["Shipped it"],
                }
            ],
            "skills": {"languages": ["Python", "Go"], "frameworks": [], "tools": ["Docker"], "other": []},
        }
    )


@pytest.fixture
def complete_resume(minimal_valid_resume):
    """Resume that earns every completeness bonus and triggers no findings."""
    resume = minimal_valid_resume
    resume["basics"]["summary"] = "Backend engineer focused on data tooling."
    resume["basics"]["links"] = [{"label": "GitHub", "url": "https://github.com/jane"}]
    resume["experience"] = [
        {
            "company": "Acme",
            "role": "Engineer",
            "location": "Remote",
            "startDate": "2023-07",
            "endDate": "",
            "bullets": ["Built ingestion pipeline", "Cut costs by 30%"],
        }
    ]
    resume["projects"].append(
        {
            "title": "Embed SDK",
            "projectLink": "https://cv.example.com",
            "repoLink": "https://github.com/jane/embed",
            "techStack": ["TypeScript"],
            "startDate": "2024-03",
            "endDate": "2024-05",
            "bullets": ["Iframe embed in one line"],
        }
    )
    resume["skills"] = {
        "languages": ["Python", "Go", "TypeScript"],
        "frameworks": ["FastAPI"],
        "tools": ["Docker", "Postgres"],
        "other": [],
    }
    return resume


@pytest.fixture
def load_script():
    """Import a module from scripts/ by file name (scripts are not a package)."""

    def _load(name: str):
        path = SCRIPTS_PATH / f"{name}.py"
        spec = importlib.util.spec_from_file_location(f"scripts_{name}", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load
