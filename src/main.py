#!/usr/bin/env python3
"""
Link path finder

Crawls outward from a start page, round by round, until the destination page
shows up among the discovered links, then reports the shortest chain of links
from start to destination.

Features:
- Bounded rounds (--batch-size) and a global cap on simultaneous fetches (--concurrency).
- Optional authenticated HTTP proxy (flags or LINKPATH_PROXY* environment variables).
- JSON report of the search (--report), optionally with the discovered graph.
- Verbose/logfile support with rotating logs.

Usage:
  pip install requests beautifulsoup4
  python main.py --start https://en.wikipedia.org/wiki/Python_(programming_language) \
      --destination https://en.wikipedia.org/wiki/Guido_van_Rossum --report result.json --verbose

"""

import argparse
import os
from urllib.parse import urlparse

from configs import (DEFAULT_BATCH_SIZE, DEFAULT_CONCURRENCY, DEFAULT_EDGE_WEIGHT,
                     PROXY_ENV, PROXY_PASSWORD_ENV, PROXY_USER_ENV)
from crawler import EXHAUSTED, FOUND, find_path, setup_logging
from download_utils import PageFetcher, make_session
from html_parsing import extract_wiki_links
from search_report import build_report, write_report
from url_utils import canonical_id
from vertex import LinkVertex
# ---------- CLI ----------

def build_parser():
    parser = argparse.ArgumentParser(description="Find the shortest chain of links between two pages")
    parser.add_argument("--start", help="Start page URL (prompted when omitted)")
    parser.add_argument("--destination", help="Destination page URL (prompted when omitted)")
    parser.add_argument("--batch-size", type=int, default=DEFAULT_BATCH_SIZE, help="Pages expanded per round")
    parser.add_argument("--concurrency", type=int, default=DEFAULT_CONCURRENCY, help="Maximum simultaneous fetches")
    parser.add_argument("--edge-weight", type=int, default=DEFAULT_EDGE_WEIGHT)
    parser.add_argument("--articles-only", action="store_true", help="Skip namespaced pages (File:, Help:, ...)")
    parser.add_argument("--proxy", default=os.environ.get(PROXY_ENV), help="HTTP(S) proxy URL")
    parser.add_argument("--proxy-user", default=os.environ.get(PROXY_USER_ENV))
    parser.add_argument("--proxy-password", default=os.environ.get(PROXY_PASSWORD_ENV))
    parser.add_argument("--report", type=str, default=None, help="Write a JSON report of the search to this path")
    parser.add_argument("--include-graph", action="store_true", help="Include discovered nodes and edges in the report")
    parser.add_argument("--logfile", type=str, default=None, help="Optional rotating logfile path")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose console logging (DEBUG)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    start_url = (args.start or input("Start: ")).strip()
    destination_url = (args.destination or input("Destination: ")).strip()
    ids = []
    for u in (start_url, destination_url):
        if not urlparse(u).scheme:
            print(f"{u!r} is missing a scheme (http:// or https://)")
            return 2
        # same form as the ids produced by link extraction
        vid = canonical_id(u)
        if vid is None:
            print(f"{u!r} is not an http(s) page URL")
            return 2
        ids.append(vid)
    start_url, destination_url = ids
    if args.batch_size < 1 or args.concurrency < 1 or args.edge_weight < 0:
        print("--batch-size and --concurrency must be >= 1, --edge-weight >= 0")
        return 2

    setup_logging(verbose=args.verbose, logfile=args.logfile)

    start = LinkVertex(start_url, "Start Page")
    destination = LinkVertex(destination_url, "Destination Page")

    session = make_session(args.proxy, args.proxy_user, args.proxy_password)
    fetch = PageFetcher(session)

    def extract(content, base_url):
        return extract_wiki_links(content, base_url, articles_only=args.articles_only)

    try:
        outcome = find_path(start, destination, fetch, extract, batch_size=args.batch_size,
                            concurrency=args.concurrency, edge_weight=args.edge_weight)
    finally:
        session.close()

    if outcome.status == FOUND:
        print(f"Path to {destination}: ")
        print(outcome.path_result.describe())
    elif outcome.status == EXHAUSTED:
        print("Destination not found.")
    else:
        print(f"No path to {destination}.")

    if args.report:
        write_report(args.report, build_report(outcome, include_graph=args.include_graph))
        print("Wrote report:", args.report)

    return 0 if outcome.found else 1


if __name__ == "__main__":
    raise SystemExit(main())
