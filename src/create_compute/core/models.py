"""Domain models for create-compute.

All records are **frozen** dataclasses — immutable value objects built
once and consumed once.  They carry zero I/O and no dependencies on
external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Language(str, Enum):
    """Languages a starter kit can be written in."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"


class DirectoryStatus(str, Enum):
    """Classification of a target directory path."""

    AVAILABLE = "available"
    EMPTY = "empty"
    NOT_DIRECTORY = "not-directory"
    NOT_EMPTY = "not-empty"
    OTHER_ERROR = "other-error"


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Repository:
    """A repository as listed by the hosting API."""

    full_name: str
    """``owner/name``, e.g. ``fastly/compute-starter-kit-typescript``."""

    description: str


@dataclass(frozen=True, slots=True)
class RepoShort:
    """A :class:`Repository` projected for display by short name."""

    short_name: str
    description: str


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Flag values relevant to parameter resolution.

    ``None`` means the flag was not supplied.
    """

    directory: str | None = None
    authors: tuple[str | None, ...] = ()
    language: str | None = None
    starter_kit: str | None = None
    default_starter_kit: bool = False
    list_starter_kits: bool = False
    source: str | None = None


# ---------------------------------------------------------------------------
# Execution parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ListStarterKitsParams:
    """Resolved parameters for ``--list-starter-kits``."""

    language: Language | None = None


@dataclass(frozen=True, slots=True)
class CreateParams:
    """Resolved parameters for creating an application.

    ``source`` is always a concrete path or URL, never a short name.
    """

    directory: str
    source: str
    authors: tuple[str, ...] = field(default_factory=tuple)


ExecParams = ListStarterKitsParams | CreateParams
