"""Extract labeled links from free-text card descriptions."""

import re
from typing import Optional

from ..domain.models import ExtractedLink


def _patterns(label: str) -> tuple[re.Pattern, re.Pattern]:
    prefix = re.escape(label) + r":\s*"
    # [text](url)
    markdown = re.compile(prefix + r"\[(.*?)\]\((https?://[^\s)]+)", re.IGNORECASE)
    # [url]
    bracketed = re.compile(prefix + r"\[(https?://[^\]\s]+)\]", re.IGNORECASE)
    return markdown, bracketed


def extract_link(description: Optional[str], label: Optional[str]) -> Optional[ExtractedLink]:
    """Find the link written after ``label:`` in a description.

    Two shapes are recognized, tried in order:

    - ``Label: [display text](https://...)``
    - ``Label: [https://...]`` (display text is the url itself)

    Matching is case-insensitive and only the first occurrence is used.

    Args:
        description: Free-text card description
        label: Marker text, with or without a trailing colon

    Returns:
        ExtractedLink if found, None otherwise
    """
    if not description or not label:
        return None

    clean_label = label[:-1] if label.endswith(":") else label
    if not clean_label:
        return None

    markdown, bracketed = _patterns(clean_label)

    match = markdown.search(description)
    if match and match.group(2):
        return ExtractedLink(text=match.group(1).strip(), url=match.group(2).strip())

    match = bracketed.search(description)
    if match and match.group(1):
        url = match.group(1).strip()
        return ExtractedLink(text=url, url=url)

    return None
