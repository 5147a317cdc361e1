"""
Configuration settings for the scrape helpers.
"""

import logging

# Tree builder handed to BeautifulSoup when parsing raw HTML
# "lxml" is fast and forgiving; "html.parser" needs no C extension
HTML_PARSER = "lxml"

# Log line format used by the command line entry point
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Default log level for the command line entry point (--verbose switches to DEBUG)
LOG_LEVEL = logging.INFO

# Link selector used inside each listing item when a recipe doesn't set one
DEFAULT_ITEM_LINK_CSS = "a[href]"

# Cover image selector used inside each listing item when a recipe doesn't set one
DEFAULT_IMAGE_CSS = "img"
