"""rkv — structured professional development journaling."""

__version__ = "0.1.0"
