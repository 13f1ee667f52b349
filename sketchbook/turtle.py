"""Convert turtle graphics commands into an Encapsulated PostScript picture."""

import argparse
import math
import re
import sys

_HEADER = (
    "%!PS-Adobe-3.0 EPSF-3.0",
    "%%BoundingBox: 0 0 572 772",
    "50 50 translate",
    "512 0 translate",
    "90 rotate",
    "0.05 setlinewidth",
)
_FOOTER = "showpage"

_COMMAND = re.compile(r"\s*(\S)")
_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class TurtleError(ValueError):
    """Raised for a command letter the turtle does not know."""


class _Scanner:
    def __init__(self, text):
        self._text = text
        self._pos = 0

    def command(self):
        match = _COMMAND.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group(1)

    def numbers(self, defaults):
        """Read up to ``len(defaults)`` numbers; unread ones keep their default."""
        values = []
        for _ in defaults:
            match = _NUMBER.match(self._text, self._pos)
            if match is None:
                break
            values.append(float(match.group(1)))
            self._pos = match.end()
        return tuple(values) + tuple(defaults[len(values):])


def _postscript_lines(text):
    yield from _HEADER

    r = g = b = 0.0
    x = y = alpha = 0.0
    d = a = 0.0
    scanner = _Scanner(text)

    while (command := scanner.command()) is not None:
        if command == "C":
            r, g, b = scanner.numbers((r, g, b))
            yield f"{r:f} {g:f} {b:f} setrgbcolor"
        elif command == "F":
            x, y = scanner.numbers((x, y))
        elif command == "S":
            (d,) = scanner.numbers((d,))
            yield f"{x - d / 2:f} {y - d / 2:f} {d:f} {d:f} rectfill"
        elif command == "R":
            (a,) = scanner.numbers((a,))
            alpha += a
        elif command == "G":
            yield f"{x:f} {y:f} moveto"
            x, y = scanner.numbers((x, y))
            yield f"{x:f} {y:f} lineto"
            yield "stroke"
        elif command == "D":
            (d,) = scanner.numbers((d,))
            yield f"{x:f} {y:f} moveto"
            x += d * math.cos(math.pi / 180.0 * alpha)
            y += d * math.sin(math.pi / 180.0 * alpha)
            yield f"{x:f} {y:f} lineto"
            yield "stroke"
        else:
            raise TurtleError("Illegal input format.")

    yield _FOOTER


def turtle_to_postscript(text):
    """Return the PostScript program drawing the turtle commands in ``text``."""
    return "".join(line + "\n" for line in _postscript_lines(text))


def main(argv=None):
    """Read turtle commands from stdin and write PostScript to stdout."""
    parser = argparse.ArgumentParser(
        prog="turtle", description="Convert turtle graphics on stdin to PostScript."
    )
    parser.parse_args(argv)
    text = sys.stdin.read()
    try:
        for line in _postscript_lines(text):
            sys.stdout.write(line + "\n")
    except TurtleError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0