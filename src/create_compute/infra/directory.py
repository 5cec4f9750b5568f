"""Infrastructure: classify a target directory path.

Rules
-----
* Read-only — never creates or modifies anything.
* Never raises — every failure maps to a :class:`DirectoryStatus`.
"""

from __future__ import annotations

import os

from create_compute.core.models import DirectoryStatus


def get_directory_status(path: str) -> DirectoryStatus:
    """Try to list *path* and classify the outcome."""
    try:
        entries = os.listdir(path)
    except FileNotFoundError:
        return DirectoryStatus.AVAILABLE
    except NotADirectoryError:
        return DirectoryStatus.NOT_DIRECTORY
    except OSError:
        return DirectoryStatus.OTHER_ERROR

    if entries:
        return DirectoryStatus.NOT_EMPTY
    return DirectoryStatus.EMPTY
