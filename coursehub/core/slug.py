"""
Slug generation for course URLs.

Dependencies: re, unicodedata
System role: URL-safe identifiers derived from titles
"""

import re
import unicodedata


def slugify(title: str) -> str:
    """
    Convert a title into a lowercase, hyphen-separated slug.

    Accented characters are folded to ASCII; anything else that is not a
    word character, space or hyphen is dropped.

    Args:
        title: Human-readable title

    Returns:
        str: Slug, "course" if nothing usable remains
    """
    normalized = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    slug = normalized.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-") or "course"
