"""
Recipe loader for page extraction.

Loads and validates YAML recipe files that describe where the items,
links, titles, covers and embedded script data live on a listing page.
"""

import re
from typing import List, Dict, Any, Optional
from dataclasses import dataclass
from pathlib import Path
import soupsieve
import yaml

import extractor_config


@dataclass
class ListingRecipe:
    """Selectors for the cards on a listing page."""
    item_css: str
    link_css: str = extractor_config.DEFAULT_ITEM_LINK_CSS  # '' = the item itself is the link
    title_css: Optional[str] = None   # None = use the link text
    title_attr: Optional[str] = None  # e.g. 'title'; tried before title_css
    image_css: Optional[str] = extractor_config.DEFAULT_IMAGE_CSS
    number_css: Optional[str] = None
    clean_titles: bool = False
    parse_number: bool = False  # take the number from the title when number_css is unset

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ListingRecipe':
        """
        Create a ListingRecipe from the 'listing' section of a recipe.

        Raises:
            ValueError: If required fields are missing or invalid
        """
        if not isinstance(data, dict):
            raise ValueError("'listing' must be a dictionary")

        item_css = data.get('item_css')
        if not isinstance(item_css, str) or not item_css.strip():
            raise ValueError("'listing.item_css' must be a non-empty string")

        for key in ('link_css', 'title_css', 'title_attr', 'image_css', 'number_css'):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"'listing.{key}' must be a string")

        for key in ('item_css', 'link_css', 'title_css', 'image_css', 'number_css'):
            selector = data.get(key)
            if not selector:
                continue
            try:
                soupsieve.compile(selector)
            except soupsieve.SelectorSyntaxError as e:
                raise ValueError(f"Invalid selector in 'listing.{key}': {e}") from e

        for key in ('clean_titles', 'parse_number'):
            if key in data and not isinstance(data[key], bool):
                raise ValueError(f"'listing.{key}' must be true or false")

        return cls(
            item_css=item_css,
            link_css=data.get('link_css', extractor_config.DEFAULT_ITEM_LINK_CSS),
            title_css=data.get('title_css'),
            title_attr=data.get('title_attr'),
            image_css=data.get('image_css', extractor_config.DEFAULT_IMAGE_CSS),
            number_css=data.get('number_css'),
            clean_titles=data.get('clean_titles', False),
            parse_number=data.get('parse_number', False)
        )


@dataclass
class Recipe:
    """
    Complete recipe for extracting a page.

    Defines the base URL links are resolved against, the listing
    selectors and an optional pattern for inline script data.
    """
    listing: ListingRecipe
    base_url: str = ""
    script_pattern: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Recipe':
        """
        Create a Recipe from a dictionary (loaded from YAML).

        Args:
            data: Dictionary from YAML file

        Returns:
            Recipe instance

        Raises:
            ValueError: If required fields are missing or invalid
        """
        if 'listing' not in data:
            raise ValueError("Recipe must have 'listing' field")

        listing = ListingRecipe.from_dict(data['listing'])

        base_url = data.get('base_url')
        if base_url is None:
            base_url = ""
        elif not isinstance(base_url, str):
            raise ValueError("'base_url' must be a string")

        script_pattern = data.get('script_pattern')
        if script_pattern is not None:
            if not isinstance(script_pattern, str) or not script_pattern:
                raise ValueError("'script_pattern' must be a non-empty string")
            try:
                re.compile(script_pattern)
            except re.error as e:
                raise ValueError(f"Invalid script_pattern: {e}") from e

        return cls(
            listing=listing,
            base_url=base_url,
            script_pattern=script_pattern
        )


def load_recipe(file_path: str) -> Recipe:
    """
    Load a recipe from a YAML file.

    Args:
        file_path: Path to YAML recipe file

    Returns:
        Recipe instance

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If recipe is invalid
        yaml.YAMLError: If YAML parsing fails
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Recipe file not found: {file_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError("Recipe file must contain a YAML dictionary")

    return Recipe.from_dict(data)


def validate_recipe(recipe: Recipe) -> List[str]:
    """
    Validate a recipe and return a list of warnings (not errors).

    Args:
        recipe: Recipe to validate

    Returns:
        List of warning messages (empty if no warnings)
    """
    warnings = []

    if not recipe.base_url:
        warnings.append("No base_url configured - relative links will be left as-is")
    elif not recipe.base_url.startswith('http://') and not recipe.base_url.startswith('https://'):
        warnings.append(f"base_url may be invalid (missing http/https): {recipe.base_url}")

    if recipe.script_pattern and re.compile(recipe.script_pattern).groups < 1:
        warnings.append("script_pattern has no capture group - it will never yield a value")

    if recipe.listing.clean_titles and recipe.listing.parse_number and not recipe.listing.number_css:
        warnings.append("Numbers are parsed from titles before clean_titles strips them")

    return warnings
