USER_AGENT = "linkpath/1.0 (+https://example.com)"
REQUEST_TIMEOUT = 20
DEFAULT_BATCH_SIZE = 25  # vertices dequeued per round
DEFAULT_CONCURRENCY = 10  # simultaneous fetches across the whole run
DEFAULT_EDGE_WEIGHT = 1
CONTENT_SELECTOR = "#content a[href]"
WIKI_PATH_PREFIX = "/wiki"
PROXY_ENV = "LINKPATH_PROXY"
PROXY_USER_ENV = "LINKPATH_PROXY_USER"
PROXY_PASSWORD_ENV = "LINKPATH_PROXY_PASSWORD"
