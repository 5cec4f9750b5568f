"""Shared pytest fixtures and configuration for the create-compute test suite.

Guidelines
----------
* No internet access in any test.
* ``requests`` and ``subprocess`` must be mocked at the infra boundary.
* Core tests drive the resolution flow with a scripted prompter.
* Filesystem access only under ``tmp_path``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

import pytest

from create_compute.core.models import Repository
from create_compute.core.prompts import PromptRequest, TextRequest


class ScriptedPrompter:
    """Answers prompt requests from a fixed script.

    Text answers rejected by the request's validator are recorded and the
    next scripted answer is tried, mirroring a re-asking terminal prompt.
    """

    def __init__(self, answers: Iterable[str | None] = ()) -> None:
        self.answers: list[str | None] = list(answers)
        self.requests: list[PromptRequest] = []
        self.rejections: list[str] = []
        self.notes: list[str] = []
        self.statuses: list[str] = []

    def ask(self, request: PromptRequest) -> str | None:
        self.requests.append(request)
        while True:
            if not self.answers:
                raise AssertionError(f"Unexpected prompt: {request.message}")
            answer = self.answers.pop(0)
            if answer is None or not isinstance(request, TextRequest) or request.validate is None:
                return answer
            problem = request.validate(answer)
            if problem is None:
                return answer
            self.rejections.append(problem)

    def note(self, message: str) -> None:
        self.notes.append(message)

    @contextmanager
    def status(self, message: str) -> Iterator[None]:
        self.statuses.append(message)
        yield


class FakeRepositorySource:
    """In-memory :class:`RepositorySource` that filters like GitHub would."""

    def __init__(self, repositories: Iterable[Repository] = ()) -> None:
        self.repositories = list(repositories)
        self.calls: list[tuple[str, str]] = []

    def find_repos_start_with(self, org: str, starts_with: str) -> list[Repository]:
        self.calls.append((org, starts_with))
        prefix = f"{org}/{starts_with}"
        return [repo for repo in self.repositories if repo.full_name.startswith(prefix)]


@pytest.fixture
def make_prompter() -> Callable[..., ScriptedPrompter]:
    return ScriptedPrompter


@pytest.fixture
def make_repositories() -> Callable[..., FakeRepositorySource]:
    return FakeRepositorySource
