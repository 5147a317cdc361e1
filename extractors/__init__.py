"""
Scrape helpers.

This package contains pure, unit-testable functions for pulling text,
links, images and inline script data out of parsed HTML.
"""

from .urls import resolve_url
from .text import extract_number, clean_title
from .scripts import extract_from_script
from .listing import extract_cards

# Imported last: loading the .text submodule above would otherwise shadow
# the dom.text function with the module object.
from .dom import (
    parse_document,
    text_or_none,
    text,
    attr_or_none,
    attr,
    href,
    src,
    select_first_or_none,
    map_catching
)

__all__ = [
    'parse_document',
    'text_or_none',
    'text',
    'attr_or_none',
    'attr',
    'href',
    'src',
    'select_first_or_none',
    'map_catching',
    'resolve_url',
    'extract_number',
    'clean_title',
    'extract_from_script',
    'extract_cards'
]
