"""Small teaching programs: square roots, map routing, turtle graphics, drawings and a tiny HTTP pair."""

__version__ = "0.1.0"