"""Custom exception hierarchy for create-compute.

All exceptions that cross layer boundaries must inherit from
:class:`CreateComputeError`.  Raw third-party exceptions (``requests``,
``subprocess``/``OSError``) must NEVER propagate beyond the
infrastructure layer — they must be caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
CreateComputeError
├── UsageError
├── ExecParamsCancelledError
├── RepositoryLookupError
├── FastlyCliNotFoundError
├── FastlyCliFailedError
├── DirectoryCreationError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Iterable


class CreateComputeError(Exception):
    """Base exception for all create-compute errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(CreateComputeError):
    """Raised when the command line cannot be parsed."""


# --- Parameter resolution --------------------------------------------------

class ExecParamsCancelledError(CreateComputeError):
    """Raised when parameter resolution is abandoned.

    Covers both a user cancelling an interactive prompt (no messages) and
    a validation failure on flag-supplied values (one or more messages).
    """

    def __init__(self, messages: Iterable[str] = ()) -> None:
        super().__init__("Cancelled.")
        self.messages: list[str] = list(messages)


# --- Repository hosting ----------------------------------------------------

class RepositoryLookupError(CreateComputeError):
    """Raised when listing repositories from GitHub fails."""


# --- Delegate tool ---------------------------------------------------------

class FastlyCliNotFoundError(CreateComputeError):
    """Raised when the Fastly CLI cannot be run or reports no version."""


class FastlyCliFailedError(CreateComputeError):
    """Raised when ``fastly compute init`` exits with a non-zero status."""


# --- Filesystem ------------------------------------------------------------

class DirectoryCreationError(CreateComputeError):
    """Raised when the application directory cannot be created."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CreateComputeError):
    """Raised when a required runtime dependency is not available."""
