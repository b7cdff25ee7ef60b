"""
Share token codec.

Encodes a whole resume into a URL-safe token so it can travel in an embed
link's ``data`` query parameter without server storage:

    JSON text -> UTF-8 bytes -> Base64 -> "+"->"-", "/"->"_", strip "="

The same algorithm is used by the embedding script on third-party pages,
so tokens produced there decode here and vice versa. Decoding reverses
each step and finishes with normalize_resume(); any failure along the way
yields None.
"""

import base64
import binascii
import json
from typing import Any, Dict, Optional

from cvembed.contexts.document.logger import _log_debug
from cvembed.contexts.document.normalizer import normalize_resume

# Compact separators match JSON.stringify output byte for byte
JSON_SEPARATORS = (",", ":")


def serialize_resume(resume: Dict[str, Any]) -> str:
    """Canonical compact JSON text of a resume (non-ASCII kept as-is)."""
    return json.dumps(resume, ensure_ascii=False, separators=JSON_SEPARATORS)


def bytes_to_base64url(data: bytes) -> str:
    """Standard Base64 made URL-safe, without padding."""
    encoded = base64.b64encode(data).decode("ascii")
    return encoded.replace("+", "-").replace("/", "_").rstrip("=")


def base64url_to_bytes(value: str) -> bytes:
    """
    Inverse of bytes_to_base64url.

    Raises:
        binascii.Error: If the value is not valid Base64 after the
            alphabet substitution and padding restoration
    """
    standard = value.replace("-", "+").replace("_", "/")
    padding = "=" * ((4 - len(standard) % 4) % 4)
    return base64.b64decode(standard + padding, validate=True)


def encode_resume_for_url(resume: Dict[str, Any]) -> str:
    """
    Encode a resume as a URL-safe share token.

    Args:
        resume: Resume dict (JSON-serializable)

    Returns:
        Token made of [A-Za-z0-9_-] characters
    """
    return bytes_to_base64url(serialize_resume(resume).encode("utf-8"))


def decode_resume_from_url(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode a share token back into a normalized resume.

    Args:
        token: Value of the embed link's ``data`` parameter

    Returns:
        Normalized resume, or None if the token is not valid Base64,
        not UTF-8, or not JSON (including JSON nested too deeply to parse)

    Example:
        >>> decode_resume_from_url("not-valid-base64!!") is None
        True
    """
    try:
        raw = base64url_to_bytes(token)
        text = raw.decode("utf-8")
        data = json.loads(text)
    except (binascii.Error, ValueError, TypeError, AttributeError, RecursionError) as e:
        # UnicodeDecodeError and JSONDecodeError are both ValueError;
        # RecursionError means JSON nested too deeply
        _log_debug(f"Could not decode share token ({type(e).__name__}): {e}")
        return None

    return normalize_resume(data)
