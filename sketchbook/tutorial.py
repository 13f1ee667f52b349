"""Command that prints the square root of a number."""

import re
import sys

from sketchbook.mathfunctions import sqrt

VERSION_MAJOR = 1
VERSION_MINOR = 0
PROG = "tutorial"

_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_leading_float(text):
    """Parse the number at the start of ``text``, ignoring trailing characters."""
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return float(match.group(1))


def main(argv=None):
    """Print the square root of the first argument; return an exit code."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(f"{PROG} Version {VERSION_MAJOR}.{VERSION_MINOR}")
        print(f"Usage: {PROG} number")
        return 1

    value = _parse_leading_float(argv[0])
    result = sqrt(value)
    print(f"The square root of {value:g} is {result:g}")
    return 0