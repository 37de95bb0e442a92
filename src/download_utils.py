import logging
from urllib.parse import quote, urlparse

import requests

from configs import REQUEST_TIMEOUT, USER_AGENT


def proxy_url_with_credentials(proxy, user=None, password=None):
    if not proxy:
        return None
    if not user:
        return proxy
    p = urlparse(proxy)
    creds = quote(user, safe="")
    if password:
        creds = f"{creds}:{quote(password, safe='')}"
    return f"{p.scheme}://{creds}@{p.netloc}{p.path}"


def make_session(proxy=None, proxy_user=None, proxy_password=None):
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    proxy_url = proxy_url_with_credentials(proxy, proxy_user, proxy_password)
    if proxy_url:
        session.proxies.update({"http": proxy_url, "https": proxy_url})
        logging.info("Using proxy %s", urlparse(proxy).netloc)
    return session


def fetch_page(session, url, timeout=REQUEST_TIMEOUT):
    """Page text on HTTP 200, None on any other status or a transport error."""
    try:
        resp = session.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    except requests.RequestException:
        logging.debug("Fetch failed: %s", url, exc_info=True)
        return None
    if resp.status_code != 200:
        logging.debug("Fetch %s returned status %s", url, resp.status_code)
        return None
    return resp.text.strip()


class PageFetcher:
    """Callable fetch collaborator bound to one requests session."""

    def __init__(self, session, timeout=REQUEST_TIMEOUT):
        self.session = session
        self.timeout = timeout

    def __call__(self, url):
        return fetch_page(self.session, url, self.timeout)
