"""Hashtag extraction and highlighting"""
import re
from typing import Set

from rich.markup import escape

TAG_MARKER = "#"
TAG_STYLE = "bold yellow"


def extract_tags(text: str, exact: bool = False) -> Set[str]:
    """
    Collect the hashtag tokens of a text.

    Args:
        text: Free text, split on whitespace
        exact: Keep tokens verbatim (marker and casing) instead of
            stripping the marker and lowercasing them

    Returns:
        Set of tags
    """
    words = [word for word in text.split() if word.startswith(TAG_MARKER)]
    if exact:
        return set(words)
    return {word[len(TAG_MARKER):].lower() for word in words}


def highlight_tags(text: str) -> str:
    """Return rich markup for text with every tag token emphasized"""
    tags = extract_tags(text, exact=True)
    if not tags:
        return escape(text)

    # Longest first so a tag that prefixes another never wins the match
    alternatives = "|".join(re.escape(tag) for tag in sorted(tags, key=len, reverse=True))
    pattern = re.compile(rf"(?<!\S)(?:{alternatives})(?!\S)")

    parts = []
    last = 0
    for match in pattern.finditer(text):
        parts.append(escape(text[last:match.start()]))
        parts.append(f"[{TAG_STYLE}]{escape(match.group(0))}[/{TAG_STYLE}]")
        last = match.end()
    parts.append(escape(text[last:]))
    return "".join(parts)
