"""
Helper utility functions for displaying and exporting summaries.
"""

import re
from typing import Dict, Optional


def sanitize_filename(filename: str) -> str:
    """
    Sanitize a string to be used as a filename.

    Args:
        filename: The filename to sanitize

    Returns:
        Sanitized filename
    """
    # Remove invalid characters
    sanitized = re.sub(r'[\\/*?:"<>|]', "_", filename)
    # Replace spaces with underscores
    sanitized = sanitized.replace(" ", "_")
    # Limit length
    if len(sanitized) > 100:
        sanitized = sanitized[:100]
    return sanitized


def build_download_filename(title: Optional[str], kind: str = "summary") -> str:
    """
    Name for a downloaded summary or transcript.

    Args:
        title: Video title, if metadata was found
        kind: "summary" or "transcript"

    Returns:
        Filename ending in .txt
    """
    base = sanitize_filename(title) if title else "youtube"
    return f"{base}_{kind}.txt"


def text_stats(text: str) -> Dict[str, int]:
    """Word and character counts shown under a result."""
    return {
        "words": len(text.split()),
        "characters": len(text),
    }


def count_matches(text: str, query: str) -> int:
    """Case-insensitive number of occurrences of query in text."""
    if not query or not query.strip():
        return 0
    return len(re.findall(re.escape(query), text, flags=re.IGNORECASE))


def highlight_matches(text: str, query: str, marker: str = "**") -> str:
    """
    Wrap every case-insensitive match of query in a markdown marker.

    Args:
        text: Text to search
        query: Search term, matched literally
        marker: String placed on both sides of each match

    Returns:
        Text with matches highlighted, unchanged if query is blank
    """
    if not query or not query.strip():
        return text
    pattern = re.compile(re.escape(query), flags=re.IGNORECASE)
    return pattern.sub(lambda m: f"{marker}{m.group(0)}{marker}", text)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
