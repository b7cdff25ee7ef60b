"""
Document Option Presets

Applies named presets to a resume's meta.documentOptions. Presets are
composable and can override each other, allowing combinations like a
spacing preset plus a color preset.

Examples:
    # Apply multiple presets (later overrides earlier)
    >>> apply_presets(resume, ["spacing_tight", "colors_ocean"])

    # Mix base preset with override
    >>> apply_presets(resume, ["typography_editorial", "spacing_airy"])
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from cvembed.contexts.document.normalizer import normalize_resume
from cvembed.utils.timestamp import now_iso

load_dotenv()
DOCUMENT_PRESETS_PATH = Path(
    os.getenv("DOCUMENT_PRESETS_PATH", Path(__file__).parent / "document_presets.yaml")
)


def load_nested_presets(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """Load the presets file as {category: {name: options}}."""
    if config_path is None:
        config_path = DOCUMENT_PRESETS_PATH
    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


def load_document_presets(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load the presets file and flatten to a single-level dict.

    Collapses nested structure: spacing.tight -> spacing_tight

    Args:
        config_path: Optional path to presets file (defaults to DOCUMENT_PRESETS_PATH)

    Returns:
        Flattened dict mapping preset names to partial documentOptions
        Example: {"spacing_tight": {...}, "colors_ocean": {...}}
    """
    flattened = {}
    for category, presets in load_nested_presets(config_path).items():
        for name, options in presets.items():
            flattened[f"{category}_{name}"] = options
    return flattened


def apply_presets(
    resume: Dict[str, Any],
    preset_names: List[str],
    config_path: Path = None,
) -> Dict[str, Any]:
    """
    Apply named presets to a resume's document options.

    Presets are applied in order, with later presets overriding earlier ones.
    The merged result is normalized again, so presets can never leave the
    document with missing or unknown option keys in sectionOrder/showSections.

    Args:
        resume: Normalized resume
        preset_names: Preset names to apply (e.g., ["spacing_tight", "colors_ocean"])
        config_path: Optional path to presets file

    Returns:
        New resume with presets applied and updatedAt refreshed

    Raises:
        ValueError: If a preset is not found
    """
    presets = load_document_presets(config_path)

    updated = copy.deepcopy(resume)
    options = updated["meta"]["documentOptions"]

    for preset_name in preset_names:
        if preset_name not in presets:
            available = sorted(presets.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")
        options.update(presets[preset_name])

    updated = normalize_resume(updated)
    updated["meta"]["updatedAt"] = now_iso()
    return updated
