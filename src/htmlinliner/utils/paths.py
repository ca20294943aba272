# src/htmlinliner/utils/paths.py
"""
paths – Small, centralized path helpers for htmlinliner.

Provides:
  • looks_like_url(str)        – absolute http(s) URL check
  • has_suffix(str, suffix)    – literal suffix check on an href/src value
  • is_local_asset(str, suffix) – eligibility of an href/src value for inlining
"""

from __future__ import annotations

from htmlinliner.constants import ABSOLUTE_URL_RE


def looks_like_url(s: str | None) -> bool:
    """Return True for absolute http(s) URLs (scheme-based)."""
    return bool(ABSOLUTE_URL_RE.match((s or "").strip()))


def has_suffix(s: str | None, suffix: str) -> bool:
    """Return True if *s* ends with *suffix* (case-sensitive, like the browser path)."""
    return bool(s) and s.endswith(suffix)


def is_local_asset(s: str | None, suffix: str) -> bool:
    """Return True if *s* is a relative/local reference ending with *suffix*."""
    return has_suffix(s, suffix) and not looks_like_url(s)
