"""Word-source loaders feeding the lexicon.

Two layouts are understood:

- ``*.json``: a JSON array of strings, the format the word-list preprocessor
  writes.
- anything else: plain text with one word per line. Blank lines and ``#``
  comments are skipped.

Sources may be local paths or ``http(s)://`` URLs. An unreachable source raises
:class:`WordSourceError`; malformed content degrades to an empty list so the
caller ends up with an unusable lexicon rather than an exception.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List
from urllib.parse import urlparse

import requests

from ..core.exceptions import WordSourceError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def is_url(source: Path | str) -> bool:
    return isinstance(source, str) and urlparse(source).scheme in {"http", "https"}


def load_words(source: Path | str, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> List[str]:
    """Return the ordered raw word list from ``source`` (duplicates kept)."""

    if is_url(source):
        text = fetch_text(str(source), timeout_seconds)
        suffix = Path(urlparse(str(source)).path).suffix
    else:
        path = Path(source)
        if not path.exists():
            raise WordSourceError(f"Missing word source: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise WordSourceError(f"Unable to read word source {path}: {exc}") from exc
        suffix = path.suffix

    if suffix.lower() == ".json":
        words = parse_json_words(text)
    else:
        words = parse_text_words(text)
    LOGGER.info("Loaded %d words from %s", len(words), source)
    return words


def fetch_text(url: str, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> str:
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise WordSourceError(f"Word source request failed: {exc}") from exc
    return response.text


def parse_json_words(text: str) -> List[str]:
    """Parse a JSON array of strings; anything else yields an empty list."""

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        LOGGER.warning("Word source is not valid JSON: %s", exc)
        return []
    if not isinstance(payload, list):
        LOGGER.warning("Word source JSON must be an array, got %s", type(payload).__name__)
        return []
    if not all(isinstance(item, str) for item in payload):
        LOGGER.warning("Word source JSON array contains non-string entries")
        return []
    return list(payload)


def parse_text_words(text: str) -> List[str]:
    entries: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


__all__ = ["load_words", "fetch_text", "parse_json_words", "parse_text_words", "is_url"]
