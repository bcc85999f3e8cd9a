"""Test configuration.

Lets the tests run from a plain source checkout as well as after
`pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def _ensure_root_on_path() -> None:
    root = Path(__file__).resolve().parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        # Prepend so local sources win over any globally installed version.
        sys.path.insert(0, root_str)


_ensure_root_on_path()
