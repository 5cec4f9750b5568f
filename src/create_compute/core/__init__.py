"""Core layer — pure decision logic, models, and the starter kit catalog.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from create_compute.core.exec_params import ExecParamsResolver, build_exec_params, select_mode
from create_compute.core.models import (
    CommandOptions,
    CreateParams,
    DirectoryStatus,
    ExecParams,
    Language,
    ListStarterKitsParams,
    Repository,
    RepoShort,
)
from create_compute.core.protocols import Prompter, RepositorySource

__all__: list[str] = [
    "CommandOptions",
    "CreateParams",
    "DirectoryStatus",
    "ExecParams",
    "ExecParamsResolver",
    "Language",
    "ListStarterKitsParams",
    "Prompter",
    "RepoShort",
    "Repository",
    "RepositorySource",
    "build_exec_params",
    "select_mode",
]
