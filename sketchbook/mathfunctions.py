"""Square root helpers: a lookup table, an iterative estimate and a dispatcher."""

import math
import sys
from functools import lru_cache

TABLE_SIZE = 10


def _fmt(value):
    """Format a number the way a default-configured output stream does."""
    return f"{value:g}"


@lru_cache(maxsize=None)
def sqrt_table():
    """Return the square roots of 0 through 9 as a tuple."""
    return tuple(math.sqrt(float(i)) for i in range(TABLE_SIZE))


def format_table(table):
    """Render a table of values as a C array declaration closed with a zero."""
    lines = ["double sqrtTable[] = {"]
    lines.extend(f"{_fmt(value)}," for value in table)
    lines.append("0};")
    return "\n".join(lines) + "\n"


def write_table(path):
    """Write the square root table declaration to ``path``."""
    with open(path, "w", encoding="ascii") as out:
        out.write(format_table(sqrt_table()))


def mysqrt(x, table=None):
    """Estimate the square root of ``x`` with ten Newton steps.

    When ``table`` is given and ``1 <= x < 10`` the starting value is taken
    from it.  Progress is reported on standard output.
    """
    if x <= 0:
        return 0.0

    result = float(x)
    if table is not None and 1 <= x < 10:
        print("Use the table to help find an initial value ")
        result = table[int(x)]

    for _ in range(10):
        if result <= 0:
            result = 0.1
        delta = x - result * result
        result = result + 0.5 * delta / result
        print(f"Computing sqrt of {_fmt(x)} to be {_fmt(result)}")
    return result


def log_exp_sqrt(x):
    """Compute the square root of ``x`` through the logarithm and exponential."""
    if x <= 0:
        return 0.0
    result = math.exp(math.log(x) * 0.5)
    print(f"Computing sqrt of {_fmt(x)} to be {_fmt(result)} using log and exp")
    return result


def sqrt(x, use_mymath=True):
    """Square root of ``x``, by the table-seeded estimate or the library function."""
    if use_mymath:
        return mysqrt(x, sqrt_table())
    if x < 0:
        return math.nan
    return math.sqrt(x)


def make_table_main(argv=None):
    """Write the table to the file named by the first argument; return an exit code."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 1
    try:
        write_table(argv[0])
    except OSError:
        return 1
    return 0