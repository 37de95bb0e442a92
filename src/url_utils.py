from urllib.parse import quote, unquote, urljoin, urldefrag, urlparse

WIKI_SEGMENT = "/wiki/"
# characters MediaWiki leaves unescaped in article hrefs
TITLE_SAFE = ";@$!*(),/~:"
DEFAULT_PORTS = {"http": 80, "https": 443}


def canonical_title(title: str) -> str:
    """Percent-encoding and spaces normalised the way MediaWiki writes hrefs."""
    return quote(unquote(title).replace(" ", "_"), safe=TITLE_SAFE)


def canonical_url(base: str, link: str):
    """
    Absolute, comparable form of link as seen on the page at base.

    Fragment dropped, scheme and host lowercased, default port dropped and
    the article title under /wiki/ re-encoded. None for anything that is not
    an http(s) page.
    """
    if not link:
        return None
    link = link.strip()
    if link.startswith(("javascript:", "mailto:", "data:")):
        return None
    try:
        clean, _ = urldefrag(urljoin((base or "").strip(), link))
        p = urlparse(clean)
        port = p.port
    except ValueError:
        return None

    scheme = p.scheme.lower()
    if scheme not in DEFAULT_PORTS or not p.hostname:
        return None
    netloc = p.hostname
    if port and port != DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"

    path = p.path or "/"
    if WIKI_SEGMENT in path:
        prefix, title = path.split(WIKI_SEGMENT, 1)
        path = f"{prefix}{WIKI_SEGMENT}{canonical_title(title)}"
    return f"{scheme}://{netloc}{path}{('?' + p.query) if p.query else ''}"


def canonical_id(url: str):
    """Vertex id for a url typed by hand, matching ids produced by link extraction."""
    return canonical_url(url, url)


def wiki_title(url: str) -> str:
    """Last path segment of a /wiki/ url, '' when there is none."""
    path = urlparse(url).path
    if WIKI_SEGMENT not in path:
        return ""
    return path.split(WIKI_SEGMENT, 1)[1]
