"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — so the resolution flow can be driven by a scripted
prompter and a fake repository source in tests.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from create_compute.core.models import Repository
from create_compute.core.prompts import PromptRequest


class Prompter(Protocol):
    """Contract for the interactive front end.

    Any object implementing these methods satisfies the protocol
    structurally (no explicit inheritance required).
    """

    def ask(self, request: PromptRequest) -> str | None:
        """Present *request* and return the answer.

        Returns ``None`` when the user cancels the prompt.
        """
        ...  # pragma: no cover

    def note(self, message: str) -> None:
        """Display an informational message."""
        ...  # pragma: no cover

    def status(self, message: str) -> AbstractContextManager[object]:
        """Return a context manager that shows *message* while active."""
        ...  # pragma: no cover


class RepositorySource(Protocol):
    """Contract for listing repositories by name prefix."""

    def find_repos_start_with(self, org: str, starts_with: str) -> list[Repository]:
        """Return every repository in *org* named ``starts_with*``.

        Raises
        ------
        RepositoryLookupError
            When the listing cannot be fetched.
        """
        ...  # pragma: no cover
