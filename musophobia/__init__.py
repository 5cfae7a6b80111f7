"""Public package surface for musophobia.

Exports ``Navigator`` for host integrations and ``main`` for programmatic CLI
invocation. Most implementation lives in submodules under ``musophobia``.
"""

from __future__ import annotations

from .runtime.app import Navigator


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["Navigator", "main"]
