"""Client that keeps fetching both region paths from a local country server."""

import argparse
import sys
import time
import urllib.error
import urllib.request

from sketchbook.versioninfo import AMERICA_PATH, ASIA_PATH

URL = "http://localhost:8080"
MAX_BODY_LENGTH = 100
REQUEST_INTERVAL = 2.0
TIMEOUT = 10.0


def fetch_body(url, user_agent):
    """GET ``url`` and return ``(status, body)`` with the body cut to 99 bytes.

    Error statuses are returned like any other; connection failures raise
    ``urllib.error.URLError``.
    """
    request = urllib.request.Request(url, headers={"User-Agent": user_agent})
    try:
        with urllib.request.urlopen(request, timeout=TIMEOUT) as response:
            status, raw = response.status, response.read()
    except urllib.error.HTTPError as exc:
        status, raw = exc.code, exc.read()
        exc.close()
    return status, raw[: MAX_BODY_LENGTH - 1].decode("utf-8", errors="replace")


def _report(url, agent):
    try:
        status, body = fetch_body(url, agent)
    except (urllib.error.URLError, OSError):
        status, body = 0, ""
    print(f"Got: {status} {{}} : {body}", flush=True)


def main(argv=None):
    """Request both region paths every two seconds until interrupted."""
    argparse.ArgumentParser(
        prog="curl-client", description="Poll a local country server."
    ).parse_args(argv)

    version = urllib.request.__version__
    print(f"Client using urllib version: {version}", flush=True)
    agent = f"Python-urllib-{version}"
    urls = (URL + ASIA_PATH, URL + AMERICA_PATH)
    try:
        while True:
            for url in urls:
                _report(url, agent)
                time.sleep(REQUEST_INTERVAL)
    except KeyboardInterrupt:
        return 0