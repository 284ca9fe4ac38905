"""Shared helpers for word normalization."""

from __future__ import annotations

import re

WORD_RE = re.compile(r"[a-z]+")


def normalize_word(text: str) -> str:
    """Return ``text`` stripped and lowercased; no other folding is applied."""

    if not text:
        return ""
    return text.strip().lower()


def is_valid_word(text: str) -> bool:
    """True when ``text`` is a non-empty run of ASCII letters ``a``-``z``."""

    return WORD_RE.fullmatch(text) is not None


__all__ = ["normalize_word", "is_valid_word", "WORD_RE"]
