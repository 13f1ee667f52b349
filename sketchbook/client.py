"""Client that keeps asking country servers on a range of ports for their countries."""

import http.client
import random
import sys
import time
from typing import NamedTuple, Optional

from sketchbook.versioninfo import AMERICA_PATH, ASIA_PATH, PORT, SERVER, user_agent

REQUEST_INTERVAL = 2.0
TIMEOUT = 10.0


class FetchResult(NamedTuple):
    """Status, Server header (None if absent) and body of one response."""

    status: int
    server: Optional[str]
    body: str


def parse_ports(text):
    """Parse ``start[:end]`` into an inclusive ``(start, end)`` port range."""
    start_text, sep, end_text = text.partition(":")
    start = int(start_text)
    end = int(end_text) if sep else start
    if start > end:
        raise ValueError(f"start port {start} is above end port {end}")
    return start, end


def fetch(host, port, path, user_agent):
    """GET ``path`` from ``host:port`` and return the response."""
    connection = http.client.HTTPConnection(host, port, timeout=TIMEOUT)
    try:
        connection.request("GET", path, headers={"User-Agent": user_agent})
        response = connection.getresponse()
        body = response.read().decode("utf-8", errors="replace")
        return FetchResult(response.status, response.getheader("Server"), body)
    finally:
        connection.close()


def _report(count, port, path, agent):
    """Print one request's outcome; return True when it succeeded."""
    try:
        result = fetch(SERVER, port, path, agent)
    except (OSError, http.client.HTTPException) as exc:
        print(f"Exception: {exc}", file=sys.stderr)
        return False
    line = f"[{count}] To: {port}; Got: {result.status} {{"
    if result.server is not None:
        line += f"{result.server}}} "
    print(line + result.body, flush=True)
    return True


def main(argv=None):
    """Alternate requests for both regions forever; return an exit code."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) > 1:
        print("Usage: client [start-port[:end-port]]")
        print("\tdefault : 8080:8080")
        return 1

    start = end = PORT
    if argv:
        try:
            start, end = parse_ports(argv[0])
        except ValueError as exc:
            print(f"Invalid port range: {exc}", file=sys.stderr)
            return 1
    print(f"Sending requests to port(s): {start}:{end}", flush=True)

    agent = user_agent()
    rng = random.Random()
    count = 0
    try:
        while True:
            for path in (ASIA_PATH, AMERICA_PATH):
                if _report(count, rng.randint(start, end), path, agent):
                    count += 1
                time.sleep(REQUEST_INTERVAL)
    except KeyboardInterrupt:
        return 0