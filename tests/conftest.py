"""Pytest bootstrap for local source imports.

Lets ``import musophobia`` resolve to this checkout even when the package is
not installed into the active environment.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
