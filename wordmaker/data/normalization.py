"""Shared helpers for word normalization."""

from __future__ import annotations


def dictionary_key(text: str) -> str:
    """Return the lowercase lookup key used by the dictionary."""

    if not text:
        return ""
    return text.strip().lower()


def submission_text(text: str) -> str:
    """Return a submitted word as the grid spells it."""

    if not text:
        return ""
    return text.strip().upper()


__all__ = ["dictionary_key", "submission_text"]
