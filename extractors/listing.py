"""
Recipe-driven extraction of listing "cards" (search results, catalog grids).

Each item on a listing page becomes one dict with its link, title, cover
image and an optional number (chapter, episode, ...). Items that are
missing a link or a title are dropped; one broken item never stops the
rest of the page from being extracted.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from bs4 import Tag

from recipe_loader import ListingRecipe
from .dom import (
    attr_or_none,
    href,
    map_catching,
    parse_document,
    select_first_or_none,
    src,
    text_or_none,
)
from .text import clean_title, extract_number

logger = logging.getLogger(__name__)


def _extract_card(item: Tag, base_url: str,
                  recipe: ListingRecipe) -> Optional[Dict[str, Any]]:
    link = select_first_or_none(item, recipe.link_css) if recipe.link_css else item
    url = href(link, base_url)
    if url is None:
        return None

    title = attr_or_none(link, recipe.title_attr) if recipe.title_attr else None
    if title is None:
        title_node = select_first_or_none(item, recipe.title_css) if recipe.title_css else link
        title = text_or_none(title_node)
    if title is None:
        return None
    title = title.strip()

    if recipe.number_css:
        number = extract_number(text_or_none(select_first_or_none(item, recipe.number_css)))
    elif recipe.parse_number:
        number = extract_number(title)
    else:
        number = None

    if recipe.clean_titles:
        title = clean_title(title) or title

    cover_url = None
    if recipe.image_css:
        cover_url = src(select_first_or_none(item, recipe.image_css), base_url)

    return {
        'url': url,
        'title': title,
        'cover_url': cover_url,
        'number': number,
    }


def extract_cards(html: Union[str, Tag], base_url: str,
                  recipe: ListingRecipe) -> List[Dict[str, Any]]:
    """
    Extract listing cards from a page.

    Args:
        html: HTML content, or an already parsed document/element
        base_url: URL of the page, for resolving relative links
        recipe: Listing recipe with the item and field selectors

    Returns:
        List of dicts with keys: url, title, cover_url, number
    """
    root = parse_document(html) if isinstance(html, str) else html

    items = root.select(recipe.item_css)
    cards = map_catching(items, lambda item: _extract_card(item, base_url, recipe))

    logger.debug(f"Extracted {len(cards)} of {len(items)} items matching {recipe.item_css!r}")
    return cards
