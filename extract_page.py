"""
Extract listing cards from a saved HTML page.

Usage:
    python extract_page.py page.html --recipe recipes/example_listing.yaml
    python extract_page.py page.html --recipe recipe.yaml --script-pattern 'var id = "(\\w+)"'

Cards are printed as JSON Lines on stdout; logs go to stderr.
"""

import re
import sys
import json
import logging
import argparse
from pathlib import Path

import yaml

import extractor_config
from recipe_loader import load_recipe, validate_recipe
from extractors import parse_document, extract_cards, extract_from_script

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point with argument parsing."""
    parser = argparse.ArgumentParser(
        description='Extract listing cards and inline script data from a saved HTML page',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Extract cards using a recipe
  python extract_page.py saved/search.html --recipe recipes/example_listing.yaml

  # Override the base URL links are resolved against
  python extract_page.py saved/search.html --recipe recipe.yaml --base-url https://example.com/search
        """
    )

    parser.add_argument('page', help='HTML file to extract from')
    parser.add_argument('--recipe', required=True, help='Recipe YAML file')
    parser.add_argument('--base-url', help='Base URL for relative links (overrides the recipe)')
    parser.add_argument('--script-pattern',
                       help='Regex with a capture group to search inline scripts for (overrides the recipe)')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else extractor_config.LOG_LEVEL,
        format=extractor_config.LOG_FORMAT,
        stream=sys.stderr
    )

    try:
        recipe = load_recipe(args.recipe)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid recipe: {e}")
        return 1
    except yaml.YAMLError as e:
        logger.error(f"Recipe is not valid YAML: {e}")
        return 1

    for warning in validate_recipe(recipe):
        logger.warning(warning)

    page_path = Path(args.page)
    if not page_path.exists():
        logger.error(f"Page file not found: {args.page}")
        return 1

    html = page_path.read_text(encoding='utf-8', errors='replace')
    document = parse_document(html)
    base_url = args.base_url or recipe.base_url

    cards = extract_cards(document, base_url, recipe.listing)
    logger.info(f"Extracted {len(cards)} cards from {page_path.name}")
    for card in cards:
        print(json.dumps(card, ensure_ascii=False))

    script_pattern = args.script_pattern or recipe.script_pattern
    if script_pattern:
        try:
            script_pattern = re.compile(script_pattern)
        except re.error as e:
            logger.error(f"Invalid script pattern: {e}")
            return 1
        payload = extract_from_script(document, script_pattern)
        if payload is None:
            logger.warning("No inline script matched the script pattern")
        print(json.dumps({'script_payload': payload}, ensure_ascii=False))

    return 0


if __name__ == '__main__':
    sys.exit(main())
