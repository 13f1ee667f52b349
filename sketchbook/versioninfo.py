"""Paths, countries and identification shared by the country server and its clients."""

import http.server
import platform

ASIA_PATH = "/country/asia"
AMERICA_PATH = "/country/america"
SERVER = "127.0.0.1"
PORT = 8080
ASIA_COUNTRY = "India"
AMERICA_COUNTRY = "United States"

_COUNTRIES = {
    ASIA_PATH: ASIA_COUNTRY,
    AMERICA_PATH: AMERICA_COUNTRY,
}


def user_agent():
    """Text naming the interpreter and HTTP library, for User-Agent and Server headers."""
    return f"Python {platform.python_version()} / http.server {http.server.__version__}"


def country_for(path):
    """Country served for ``path``, or None when the path is not a known region."""
    return _COUNTRIES.get(path)