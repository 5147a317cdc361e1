"""
URL resolution for scraped links.

Scraped pages are not under our control and their links are often partial
or inconsistent, so resolution is best effort and never raises.
"""

import re

_ORIGIN_PATTERN = re.compile(r'^(https?://[^/]+)')


def resolve_url(url: str, base_url: str = "") -> str:
    """
    Turn a relative, protocol-relative or root-relative URL into an absolute one.

    Args:
        url: Candidate URL taken from an attribute (may be blank)
        base_url: Absolute URL of the page the link came from ("" = no base)

    Returns:
        Absolute URL when one can be built, otherwise the input unchanged
    """
    if not url or not url.strip():
        return url

    if url.startswith('http://') or url.startswith('https://'):
        return url

    if url.startswith('//'):
        return 'https:' + url

    has_base = bool(base_url and base_url.strip())

    if url.startswith('/'):
        if not has_base:
            return url
        base = base_url[:-1] if base_url.endswith('/') else base_url
        match = _ORIGIN_PATTERN.match(base)
        domain = match.group(1) if match else base
        return domain + url

    # Path-relative: everything up to the base's last '/' is the directory.
    # A base with no path (https://site.com) has no directory of its own and
    # gives https://<url>; pass a base ending in '/' to keep the host.
    if not has_base:
        return url
    directory = base_url.rsplit('/', 1)[0]
    return directory + '/' + url
