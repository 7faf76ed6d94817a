"""
Utility helpers for formatting counts and labels.
"""

from __future__ import annotations

from typing import Optional


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_count(value: int, singular: str, plural: Optional[str] = None) -> str:
    noun = singular if value == 1 else (plural or f"{singular}s")
    return f"{format_number(value)} {noun}"
