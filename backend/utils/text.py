"""Text helpers shared by every comparison against user input."""

import logging
import re
import unicodedata

logger = logging.getLogger(__name__)

SEARCH_NOTICE = "Please type in English only."

_DISALLOWED = re.compile(r"[^A-Za-z\s]")


def normalize(value: str) -> str:
    """Strip diacritics and lowercase, so "México" and "mexico" compare equal."""
    # Lowercase first: some uppercase letters lowercase into base + combining mark.
    decomposed = unicodedata.normalize("NFD", value.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def sanitize_search(raw: str) -> tuple[str, bool]:
    """Drop anything but ASCII letters and whitespace, then trim.

    Returns the cleaned value and whether characters were removed, in which
    case the caller should show ``SEARCH_NOTICE``.
    """
    cleaned = _DISALLOWED.sub("", raw)
    changed = cleaned != raw
    if changed:
        logger.debug("Search input sanitized: %r -> %r", raw, cleaned)
    return cleaned.strip(), changed
