"""HTTP server answering region paths with a country name."""

import http.server
import itertools
import sys

from sketchbook.versioninfo import PORT, country_for, user_agent


class CountryHandler(http.server.BaseHTTPRequestHandler):
    """Answers every request with 200 and the country for its path, if any."""

    def version_string(self):
        return user_agent()

    def log_message(self, format, *args):
        pass

    def do_GET(self):
        number = next(self.server.request_counter)
        agent = self.headers.get("User-Agent", "Unknown")
        print(f"[{number}] Received {self.path} request from: {agent}", flush=True)

        body = (country_for(self.path) or "").encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)

    do_POST = do_GET
    do_PUT = do_GET
    do_DELETE = do_GET
    do_HEAD = do_GET


def make_server(port=PORT):
    """A threaded server bound to ``port`` on all interfaces; 0 picks a free port."""
    server = http.server.ThreadingHTTPServer(("", port), CountryHandler)
    server.daemon_threads = True
    server.request_counter = itertools.count()
    return server


def main(argv=None):
    """Serve until interrupted; return an exit code."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) > 1:
        print("Usage: server [port]")
        print("\tdefault : 8080")
        return 1

    port = PORT
    if argv:
        try:
            port = int(argv[0])
        except ValueError:
            print(f"Invalid port: {argv[0]!r}", file=sys.stderr)
            return 1

    try:
        server = make_server(port)
    except OSError as exc:
        print(f"Cannot listen on port {port}: {exc}", file=sys.stderr)
        return 1

    print(f"Starting Python HTTP server on port {port}", flush=True)
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    print(f"Shutting down Python HTTP server on port {port}.")
    return 0