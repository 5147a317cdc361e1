"""
Text cleanup for scraped titles and labels.
"""

import re
from typing import Optional

_NUMBER_PATTERN = re.compile(r'\d+(?:\.\d+)?')

# One trailing "(...)" group, e.g. "(Completed)" or "(2019)"
_TRAILING_PARENS = re.compile(r'\s*\(.*?\)\s*$')
# One leading "[...]" group, e.g. "[New]" or "[HOT]"
_LEADING_BRACKETS = re.compile(r'^\s*\[.*?\]\s*')


def extract_number(text: Optional[str]) -> Optional[float]:
    """
    Return the first integer or decimal in text as a float.

    "Chapter 12.5" gives 12.5; text without digits gives None.
    """
    if not text:
        return None
    match = _NUMBER_PATTERN.search(text)
    if not match:
        return None
    try:
        return float(match.group(0))
    except ValueError:
        return None


def clean_title(text: Optional[str]) -> str:
    """
    Strip one trailing (...) group and one leading [...] group from a title.

    Only the outermost single group on each end is removed; anything left
    over is kept as part of the title.
    """
    if not text:
        return ""
    cleaned = _TRAILING_PARENS.sub('', text)
    cleaned = _LEADING_BRACKETS.sub('', cleaned)
    return cleaned.strip()
