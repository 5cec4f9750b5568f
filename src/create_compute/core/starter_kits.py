"""Static catalog of known Fastly Compute starter kits.

The first entry of each language is that language's default kit.  The
catalog is an immutable lookup table; live listings come from GitHub via
:class:`~create_compute.core.protocols.RepositorySource`.

Short names
-----------
A short name is a kit's full name with ``fastly/compute-starter-kit-<lang>``
and the following ``-`` removed.  The default kit uses the sentinel
``"default"``; any other repository named exactly after the prefix keeps
its bare repository name so the conversion stays reversible.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from create_compute.core.models import Language, Repository, RepoShort

GITHUB_ORG: str = "fastly"
DEFAULT_SHORT_NAME: str = "default"

KNOWN_STARTER_KITS: Mapping[Language, tuple[Repository, ...]] = MappingProxyType({
    Language.JAVASCRIPT: (
        Repository(
            full_name="fastly/compute-starter-kit-javascript-default",
            description="Default package template for JavaScript based Fastly Compute projects",
        ),
        Repository(
            full_name="fastly/compute-starter-kit-javascript-empty",
            description="Empty package template for JavaScript based Fastly Compute projects",
        ),
    ),
    Language.TYPESCRIPT: (
        Repository(
            full_name="fastly/compute-starter-kit-typescript",
            description="A simple Fastly starter kit for Typescript",
        ),
    ),
})


def repo_name_prefix(language: Language) -> str:
    """Repository name prefix (without org) shared by *language*'s kits."""
    return f"compute-starter-kit-{language.value}"


def _full_name_prefix(language: Language) -> str:
    return f"{GITHUB_ORG}/{repo_name_prefix(language)}"


def default_starter_kit(language: Language) -> Repository:
    """Return the default starter kit for *language*."""
    return KNOWN_STARTER_KITS[language][0]


def short_name(language: Language, full_name: str) -> str:
    """Convert a starter kit full name to its short name.

    Raises
    ------
    ValueError
        If *full_name* is not a starter kit of *language*.
    """
    prefix = _full_name_prefix(language)
    if not full_name.startswith(prefix):
        raise ValueError(
            f"{full_name} not the name of a starter kit of language {language.value}",
        )
    if full_name == default_starter_kit(language).full_name:
        return DEFAULT_SHORT_NAME
    if full_name == prefix:
        return repo_name_prefix(language)
    return full_name[len(prefix) + 1:]


def full_name(language: Language, name: str) -> str:
    """Inverse of :func:`short_name`."""
    if name == DEFAULT_SHORT_NAME:
        return default_starter_kit(language).full_name
    if name == repo_name_prefix(language):
        return _full_name_prefix(language)
    return f"{_full_name_prefix(language)}-{name}"


def to_repo_short(language: Language, repository: Repository) -> RepoShort:
    """Project *repository* for display."""
    return RepoShort(
        short_name=short_name(language, repository.full_name),
        description=repository.description,
    )


def default_first(language: Language, repositories: list[Repository]) -> list[Repository]:
    """Move *language*'s default kit to the front, keeping the rest in order."""
    default_name = default_starter_kit(language).full_name
    defaults = [repo for repo in repositories if repo.full_name == default_name]
    others = [repo for repo in repositories if repo.full_name != default_name]
    return defaults + others


def starter_kit_source(repository_full_name: str) -> str:
    """Return the URL the Fastly CLI accepts as ``--from`` for a GitHub repo."""
    return f"https://github.com/{repository_full_name}"
