"""Command-line interface package for humanorder.

``from humanorder.cli import main`` returns the entry point function; the
``humanorder`` console script points here.
"""

from .main import main

__all__ = ["main"]
