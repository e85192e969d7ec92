"""
HTTP front-end for keycalc.

Exposes calculator sessions over a small JSON API.
"""

from .server import create_app, run_server

__all__ = ["create_app", "run_server"]
