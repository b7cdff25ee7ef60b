"""Small text helpers shared by the builder forms and scripts."""

import secrets
from typing import List

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
RESUME_ID_LENGTH = 12


def parse_comma_list(value: str) -> List[str]:
    """
    Split a comma-separated string into trimmed, non-empty entries.

    Example:
        >>> parse_comma_list("Python, SQL,, Docker ")
        ['Python', 'SQL', 'Docker']
    """
    return [item.strip() for item in value.split(",") if item.strip()]


def to_comma_list(items: List[str]) -> str:
    """Inverse of parse_comma_list for display in a single text field."""
    return ", ".join(items)


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def create_resume_id() -> str:
    """
    Generate a short identifier for a stored embed resume.

    Two random 32-bit words rendered in base 36, truncated to 12 characters.
    """
    seed = [secrets.randbits(32) for _ in range(2)]
    return "".join(_to_base36(word) for word in seed)[:RESUME_ID_LENGTH]


def utf16_length(text: str) -> int:
    """
    Length in UTF-16 code units, the unit browser text lengths use.

    Characters outside the Basic Multilingual Plane (most emoji) count as two.

    Example:
        >>> utf16_length("ok 👍")
        5
    """
    return len(text.encode("utf-16-le")) // 2
