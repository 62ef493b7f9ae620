"""
translate-extract - Extract translation keys from templates and program source.
"""

import sys

from .main import run


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


__all__ = ["main", "run"]
