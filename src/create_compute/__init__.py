"""create-compute — interactive scaffolding for Fastly Compute applications.

Collects the target directory, starter kit and authors, then delegates
project creation to the Fastly CLI.
"""

from create_compute.version import __version__

__all__: list[str] = ["__version__"]
