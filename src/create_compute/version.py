"""Package version, kept in one place for ``--version`` and packaging."""

from __future__ import annotations

__version__: str = "0.1.0"
