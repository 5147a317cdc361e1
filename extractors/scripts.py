"""
Recover data that pages embed in inline <script> blocks instead of markup.
"""

import re
from typing import Optional, Union

from bs4 import Tag


def extract_from_script(document: Optional[Tag],
                        pattern: Union[str, re.Pattern]) -> Optional[str]:
    """
    Search inline scripts for a pattern and return its first capture group.

    Scripts are scanned in document order and scanning stops at the first
    script that yields a value for group 1. Only <script> descendants of
    document are searched; if document is itself a <script> tag, its own
    text is not.

    Args:
        document: Parsed document (or any element to scope the search)
        pattern: Regular expression with at least one capture group

    Returns:
        The captured text, or None if no script matches
    """
    if document is None:
        return None
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    if pattern.groups < 1:
        return None

    for script in document.select('script'):
        match = pattern.search(script.get_text())
        if match is None:
            continue
        value = match.group(1)
        if value is not None:
            return value
    return None
