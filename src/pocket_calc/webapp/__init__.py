"""
HTTP front-end for pocket-calc.

Exposes calculator sessions and one-shot evaluation as a JSON API.
"""

from .server import app

__all__ = ["app"]
