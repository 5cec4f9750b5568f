"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem, the GitHub API and
the Fastly CLI.  Every raw third-party exception must be caught here and
re-raised as a :class:`~create_compute.exceptions.CreateComputeError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from create_compute.infra.directory import get_directory_status
from create_compute.infra.fastly_cli import FastlyCli
from create_compute.infra.github import GitHubRepositorySource, github_token_from_env

__all__: list[str] = [
    "FastlyCli",
    "GitHubRepositorySource",
    "get_directory_status",
    "github_token_from_env",
]
