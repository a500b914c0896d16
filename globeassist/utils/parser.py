"""
Parser for link-ranking model output.

Handles the formats the ranking model actually produces:
- The NOT_FOUND sentinel on its own
- A bare URL
- A URL wrapped in prose ("Apply here: https://... now")
- Anything else (treated as NOT_FOUND)
"""

import re

from globeassist.models import NOT_FOUND

URL_PATTERN = re.compile(r'https?://[^\s<>"]+', re.IGNORECASE)


def parse_ranked_link(text: str | None) -> str:
    """
    Extract the chosen link from raw model text.

    Args:
        text: Raw model response

    Returns:
        The first http(s) URL in the text, verbatim, or NOT_FOUND
    """
    if not text:
        return NOT_FOUND

    stripped = text.strip()
    if stripped == NOT_FOUND:
        return NOT_FOUND

    match = URL_PATTERN.search(stripped)
    if match:
        return match.group(0)

    return NOT_FOUND


def is_http_url(value: str | None) -> bool:
    """True if `value` is exactly one http(s) URL."""
    return bool(value) and URL_PATTERN.fullmatch(value) is not None
