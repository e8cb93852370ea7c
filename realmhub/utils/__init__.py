"""Utility helpers for reusable functionality."""

from .datetime import ensure_utc, isoformat_or_none, utc_now

__all__ = [
    "ensure_utc",
    "isoformat_or_none",
    "utc_now",
]
