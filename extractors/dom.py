"""
Null-safe accessors over a parsed BeautifulSoup tree.

Every accessor accepts None in place of a node and reports missing or
blank data as None (or the caller's default) instead of raising, so
selectors that match nothing can be chained without guards.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, Tuple, TypeVar

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

import extractor_config
from .urls import resolve_url

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Lookup order for image URLs; lazy-loading pages park the real URL in data-*
SRC_ATTRIBUTES = ('src', 'data-src', 'data-lazy-src')


def parse_document(html: str, parser: Optional[str] = None) -> BeautifulSoup:
    """
    Parse raw HTML into a document tree.

    Args:
        html: HTML content
        parser: BeautifulSoup tree builder (None = extractor_config.HTML_PARSER)

    Returns:
        BeautifulSoup document
    """
    return BeautifulSoup(html, parser or extractor_config.HTML_PARSER)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def text_or_none(node: Optional[Tag]) -> Optional[str]:
    """Return the node's text with whitespace collapsed, or None if blank."""
    if node is None:
        return None
    value = ' '.join(node.get_text().split())
    return value or None


def text(node: Optional[Tag], default: str = "") -> str:
    value = text_or_none(node)
    return default if value is None else value


def _raw_attr(node: Optional[Tag], key: str) -> Optional[str]:
    if node is None or not node.has_attr(key):
        return None
    value = node.get(key)
    # Multi-valued attributes (class, rel, ...) come back as lists
    if isinstance(value, (list, tuple)):
        return ' '.join(value)
    return value


def attr_or_none(node: Optional[Tag], key: str) -> Optional[str]:
    """Return the attribute value for key, or None if missing or blank."""
    value = _raw_attr(node, key)
    if _is_blank(value):
        return None
    return value


def attr(node: Optional[Tag], key: str, default: str = "") -> str:
    value = attr_or_none(node, key)
    return default if value is None else value


def href(node: Optional[Tag], base_url: str = "") -> Optional[str]:
    """
    Read a link target and make it absolute.

    Args:
        node: Anchor-like element (may be None)
        base_url: URL of the page the node came from

    Returns:
        Resolved URL, or None if the node has no usable href
    """
    value = attr_or_none(node, 'href')
    if value is None:
        return None
    return resolve_url(value.strip(), base_url)


def src(node: Optional[Tag], base_url: str = "") -> Optional[str]:
    """
    Read an image URL and make it absolute.

    Tries src, data-src and data-lazy-src in that order. An attribute that
    is present but blank counts as missing, so a placeholder src="" falls
    through to the lazy-loading attributes.

    Args:
        node: Image-like element (may be None)
        base_url: URL of the page the node came from

    Returns:
        Resolved URL, or None if no attribute holds a value
    """
    for key in SRC_ATTRIBUTES:
        value = attr_or_none(node, key)
        if value is not None:
            return resolve_url(value.strip(), base_url)
    return None


def select_first_or_none(root: Optional[Tag], query: str) -> Optional[Tag]:
    """
    Return the first element matching a CSS selector, or None.

    soupsieve raises SelectorSyntaxError for selectors it can't parse.
    That error is logged and reported as "no match"; anything else
    propagates.
    """
    if root is None:
        return None
    try:
        return root.select_one(query)
    except SelectorSyntaxError as e:
        logger.warning(f"Rejected selector {query!r}: {e}")
        return None


def _capture(transform: Callable[[Any], T], element: Any) -> Tuple[bool, Any]:
    try:
        return True, transform(element)
    except Exception as e:
        return False, e


def map_catching(elements: Iterable[Any],
                 transform: Callable[[Any], Optional[T]]) -> List[T]:
    """
    Apply transform to each element, keeping only the successful results.

    A transform that raises for one element doesn't abort the batch: that
    element is dropped and the rest are still processed. Results of None
    are dropped too. Order is preserved.

    Args:
        elements: Ordered nodes (e.g. the result of soup.select())
        transform: Function producing a value per node

    Returns:
        List of non-None results in input order
    """
    outcomes = [_capture(transform, element) for element in elements]

    results = []
    for index, (ok, value) in enumerate(outcomes):
        if not ok:
            logger.debug(f"Dropped element {index}: {type(value).__name__}: {value}")
            continue
        if value is not None:
            results.append(value)
    return results
