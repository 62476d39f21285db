"""
Shared utility functions.
"""
import re
from typing import Optional

from .exceptions import ValidationError


def slugify(text: str) -> str:
    """Convert text to URL-safe slug made of [a-z0-9-] only."""
    text = text.lower().strip()
    text = re.sub(r'\s+', ' ', text)
    text = re.sub(r'[^a-z0-9 -]', '', text)
    text = re.sub(r'[\s-]+', '-', text)
    return text.strip('-')


def parse_positive_int(value: Optional[str], default: int, name: str = None) -> int:
    """Parse a query parameter that must be a positive integer."""
    if value in (None, ''):
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        parsed = 0
    if parsed <= 0:
        raise ValidationError(
            "Pagination parameters must be positive integers",
            field=name,
        )
    return parsed
