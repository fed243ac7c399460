"""Public package surface for datara.

Exports ``main`` for programmatic CLI invocation.
The browser engine lives in ``datara.navigation``, ``datara.listing``,
``datara.marquee``, ``datara.formatting`` and ``datara.config``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
