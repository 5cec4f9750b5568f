"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from create_compute import __version__
from create_compute.cli import exit_codes
from create_compute.cli.app import main
from create_compute.exceptions import (
    CreateComputeError,
    DirectoryCreationError,
    EnvironmentError,
    ExecParamsCancelledError,
    FastlyCliFailedError,
    FastlyCliNotFoundError,
    RepositoryLookupError,
    UsageError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            ExecParamsCancelledError,
            RepositoryLookupError,
            FastlyCliNotFoundError,
            FastlyCliFailedError,
            DirectoryCreationError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CreateComputeError]
    ) -> None:
        assert issubclass(exc_class, CreateComputeError)

    def test_hint_is_stored(self) -> None:
        err = CreateComputeError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = CreateComputeError("boom")
        assert err.hint is None

    def test_cancelled_carries_messages(self) -> None:
        err = ExecParamsCancelledError(["first", "second"])
        assert str(err) == "Cancelled."
        assert err.messages == ["first", "second"]

    def test_cancelled_defaults_to_no_messages(self) -> None:
        assert ExecParamsCancelledError().messages == []


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI bootstrap
# ---------------------------------------------------------------------------

class TestCLIBootstrap:
    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_unknown_flag_is_usage_error(self) -> None:
        with pytest.raises(UsageError, match="--bogus"):
            main(["--bogus"])

    def test_missing_flag_value_is_usage_error(self) -> None:
        with pytest.raises(UsageError):
            main(["--language"])
