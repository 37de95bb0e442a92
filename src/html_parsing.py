import logging
from urllib.parse import unquote

from bs4 import BeautifulSoup

from configs import CONTENT_SELECTOR, WIKI_PATH_PREFIX
from url_utils import canonical_url, wiki_title
from vertex import LinkVertex


def _is_namespaced(url):
    # File:, Help:, Special: ... pages are not articles
    return ":" in unquote(wiki_title(url))


def extract_wiki_links(html, base_url, articles_only=False):
    """
    Candidate neighbours of a page: every in-content anchor whose href starts
    with the wiki prefix, resolved against base_url. Order follows the
    document; repeated targets keep their first anchor text.
    """
    if not html:
        return []
    soup = BeautifulSoup(html, "html.parser")

    links = []
    seen = set()
    for a in soup.select(CONTENT_SELECTOR):
        href = a.get("href", "")
        if not href.startswith(WIKI_PATH_PREFIX):
            continue
        url = canonical_url(base_url, href)
        if not url or url in seen:
            continue
        if articles_only and _is_namespaced(url):
            continue
        seen.add(url)
        links.append(LinkVertex(url, a.get_text().strip()))

    logging.debug("Extracted %d links from %s", len(links), base_url)
    return links
