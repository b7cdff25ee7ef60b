"""
Resume import and export.

Imports accept JSON (the builder's export format) and YAML (convenient for
hand-written resumes). Either way the parsed value goes through
normalize_resume(); parse failures raise InvalidResumeInputError.
"""

import json
from pathlib import Path
from typing import Any, Dict

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from cvembed.contexts.document.exceptions import InvalidResumeInputError
from cvembed.contexts.document.normalizer import normalize_resume

YAML_SUFFIXES = {".yaml", ".yml"}


def parse_resume_text(text: str) -> Dict[str, Any]:
    """
    Parse JSON text and normalize it.

    Raises:
        InvalidResumeInputError: If the text is not valid JSON
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidResumeInputError("Resume content is not valid JSON", original_error=e)
    return normalize_resume(data)


def load_resume_file(path: Path) -> Dict[str, Any]:
    """
    Load a resume from a .json or .yaml file.

    Args:
        path: Resume file path

    Returns:
        Normalized resume

    Raises:
        FileNotFoundError: If path does not exist
        InvalidResumeInputError: If the file cannot be parsed
    """
    if type(path) is str:
        path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")

    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        except (OmegaConfBaseException, YAMLError, ValueError) as e:
            raise InvalidResumeInputError("Resume file is not valid YAML", path, e)
        return normalize_resume(data)

    try:
        return parse_resume_text(path.read_text(encoding="utf-8"))
    except InvalidResumeInputError as e:
        raise InvalidResumeInputError(e.message, path, e.original_error)


def export_resume_json(resume: Dict[str, Any]) -> str:
    """Pretty-printed JSON export (2-space indent), the builder's download format."""
    return json.dumps(resume, indent=2, ensure_ascii=False)


def save_resume_file(resume: Dict[str, Any], path: Path) -> Path:
    """Write export_resume_json() output to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(export_resume_json(resume) + "\n", encoding="utf-8")
    return path
