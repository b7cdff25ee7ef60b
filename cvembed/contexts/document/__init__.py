"""
Document Context

Responsibilities:
- Defines the canonical resume document and its defaults
- Normalizes untrusted input (imports, share tokens, drafts) onto that shape
- Encodes/decodes resumes as URL-safe share tokens
- Provides replace-whole-value edits and document option presets

Owns: Resume shape, normalization, share token codec
Never: Judges content quality (see review context)
"""

from cvembed.contexts.document.codec import decode_resume_from_url, encode_resume_for_url
from cvembed.contexts.document.completeness import (
    has_any_skill,
    is_meaningful_item,
    meaningful_items,
)
from cvembed.contexts.document.defaults import (
    create_default_document_options,
    create_empty_resume,
)
from cvembed.contexts.document.exceptions import InvalidResumeInputError
from cvembed.contexts.document.normalizer import normalize_resume
from cvembed.contexts.document.resume_io import export_resume_json, load_resume_file

__all__ = [
    # Defaults
    "create_default_document_options",
    "create_empty_resume",
    # Normalization and sharing codec
    "normalize_resume",
    "encode_resume_for_url",
    "decode_resume_from_url",
    # Completeness predicates shared with renderers
    "is_meaningful_item",
    "meaningful_items",
    "has_any_skill",
    # Import/export
    "load_resume_file",
    "export_resume_json",
    "InvalidResumeInputError",
]
