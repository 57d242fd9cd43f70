"""Human-readable message helpers."""

from __future__ import annotations

from typing import Sequence


def listify(items: Sequence[str], conjunction: str = "and") -> str:
    """Join items into a natural-language list.

    ``["a"]`` -> ``"a"``, ``["a", "b"]`` -> ``"a and b"``,
    ``["a", "b", "c"]`` -> ``"a, b and c"``.
    """
    items = [str(i) for i in items]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])} {conjunction} {items[-1]}"
