"""Allow ``python -m create_compute`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m create_compute`` behaves identically to the
``create-compute`` console script.
"""

from __future__ import annotations

from create_compute.cli.app import cli

if __name__ == "__main__":
    cli()
