"""
OnlyCare: normalization of calling/chat platform API records.

This package turns loosely-typed transfer objects received from the
OnlyCare HTTP API into strict, default-complete domain entities.
"""

from importlib.metadata import version

__version__ = version("onlycare")

__all__ = ["__version__"]
