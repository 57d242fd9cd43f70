"""Version range evaluation and request token parsing."""

from .parser import tokenize_rightmost_at
from .semver import is_valid_range, satisfies

__all__ = [
    "is_valid_range",
    "satisfies",
    "tokenize_rightmost_at",
]
