"""CLI application entry point and command routing for create-compute.

This module is the **sole error boundary** for the entire application.
It catches :class:`~create_compute.exceptions.CreateComputeError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* Flag validation and the prompt decision tree live in
  :mod:`create_compute.core.exec_params`; this module only wires
  adapters together and performs the confirmed side effects.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import NoReturn

from create_compute.cli import exit_codes
from create_compute.cli.console import console
from create_compute.core.exec_params import (
    ExecParamsResolver,
    FromMode,
    LanguageMode,
    ListStarterKitsMode,
    select_mode,
)
from create_compute.core.models import CommandOptions
from create_compute.exceptions import (
    CreateComputeError,
    DirectoryCreationError,
    ExecParamsCancelledError,
    FastlyCliNotFoundError,
    UsageError,
)
from create_compute.version import __version__

_EPILOG = """\
notes:
  If --author is not provided, then fastly.toml will be initialized with an
  empty value.
  If --fastly-cli-path is not provided, then the 'fastly' command in the
  system path will be used.
  If --directory, --language, or --starter-kit are not provided, then you
  will be prompted for them.
  Set GH_TOKEN or GITHUB_TOKEN to authenticate GitHub starter kit queries.
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports errors as :class:`UsageError` (exit 1)."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(
            message,
            hint=f"Run '{self.prog} --help' to see the available flags.",
        )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = _ArgumentParser(
        prog="create-compute",
        description=(
            "Initializes a Fastly Compute JavaScript (TypeScript) application."
        ),
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--directory",
        metavar="PATHSPEC",
        help="Directory to create the new application in. Must be empty or not exist.",
    )
    parser.add_argument(
        "--author",
        action="append",
        default=[],
        metavar="AUTHOR",
        help="Author to set in fastly.toml. May be repeated.",
    )
    parser.add_argument(
        "--language",
        metavar="LANG",
        help="javascript (js) or typescript (ts). Cannot be used with --from.",
    )
    parser.add_argument(
        "--starter-kit",
        metavar="ID",
        help="Short name of a starter kit. Cannot be used with --from.",
    )
    parser.add_argument(
        "--default-starter-kit",
        action="store_true",
        help="Use the language's default starter kit. Cannot be used with --starter-kit.",
    )
    parser.add_argument(
        "--list-starter-kits",
        action="store_true",
        help="List the starter kits available on GitHub and exit.",
    )
    parser.add_argument(
        "--from",
        dest="source",
        metavar="PATHSPEC_OR_URL",
        help=(
            "Directory with a fastly.toml, GitHub URL of a repository with a "
            "fastly.toml, or Fastly Fiddle URL. Cannot be used with --language "
            "or --starter-kit."
        ),
    )
    parser.add_argument(
        "--fastly-cli-path",
        metavar="PATHSPEC",
        help="Path to the fastly CLI command. Defaults to 'fastly' on PATH.",
    )
    parser.add_argument(
        "--no-confirm",
        action="store_true",
        help="Do not ask for confirmation before creating the application.",
    )
    return parser


def _options_from_args(args: argparse.Namespace) -> CommandOptions:
    return CommandOptions(
        directory=args.directory,
        authors=tuple(args.author),
        language=args.language,
        starter_kit=args.starter_kit,
        default_starter_kit=args.default_starter_kit,
        list_starter_kits=args.list_starter_kits,
        source=args.source,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list(mode: ListStarterKitsMode) -> int:
    """Dispatch ``--list-starter-kits``."""
    from create_compute.cli.starter_kit_list import run_list_starter_kits
    from create_compute.infra.github import GitHubRepositorySource, github_token_from_env

    repositories = GitHubRepositorySource(token=github_token_from_env())
    return run_list_starter_kits(repositories, mode.language)


def _handle_create(
    options: CommandOptions,
    mode: FromMode | LanguageMode,
    fastly_cli_path: str | None,
    no_confirm: bool,
) -> int:
    """Dispatch application creation.

    Flow:
    1. Check the Fastly CLI responds with a version.
    2. Resolve parameters from flags and prompts.
    3. Confirm (unless ``--no-confirm``).
    4. Create the directory and run ``fastly compute init``.
    """
    from create_compute.cli.prompter import QuestionaryPrompter
    from create_compute.infra.directory import get_directory_status
    from create_compute.infra.fastly_cli import FastlyCli
    from create_compute.infra.github import GitHubRepositorySource, github_token_from_env

    prompter = QuestionaryPrompter()

    if fastly_cli_path:
        prompter.note(f"Using specified fastly-cli-path: {fastly_cli_path}.")
    fastly_cli = FastlyCli(fastly_cli_path)
    version = fastly_cli.get_version()
    if version is None:
        if fastly_cli_path:
            hint = (
                f"Check to make sure that the specified Fastly CLI path "
                f"'{fastly_cli_path}' is correct."
            )
        else:
            hint = (
                "Check to make sure that Fastly CLI is in the system path. "
                "Alternatively specify the path using --fastly-cli-path."
            )
        raise FastlyCliNotFoundError("Unable to obtain Fastly CLI version.", hint=hint)
    console.print(f"Found Fastly CLI {version}")

    resolver = ExecParamsResolver(
        prompter,
        GitHubRepositorySource(token=github_token_from_env()),
        get_directory_status,
    )
    params = resolver.resolve_create(options, mode)

    if no_confirm:
        prompter.note("Using specified no-confirm value: True")
    else:
        confirmed = prompter.confirm(
            "Confirm creation of Compute application with above options.",
        )
        if not confirmed:
            raise ExecParamsCancelledError(["Canceled."])

    app_directory = os.path.abspath(params.directory)

    with console.status(f"Creating application directory {app_directory}..."):
        try:
            os.makedirs(params.directory, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationError(
                f"Unable to create directory {app_directory}: {exc}",
            ) from exc
    console.print("Directory created.")

    # The child inherits stderr, so no spinner may be live while it runs.
    console.print("Creating and initializing application, this can take a few minutes...")
    fastly_cli.execute(params)

    console.print(f"[bold green]Application created at {app_directory}.[/bold green]")
    console.print("Process completed!")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the create-compute CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    options = _options_from_args(args)

    console.print("[bold]create-compute[/bold]")

    mode = select_mode(options)
    if isinstance(mode, ListStarterKitsMode):
        return _handle_list(mode)

    return _handle_create(options, mode, args.fastly_cli_path, args.no_confirm)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ExecParamsCancelledError as exc:
        for message in exc.messages or [str(exc)]:
            console.print(f"[bold red]{message}[/bold red]")
        sys.exit(exit_codes.GENERAL_ERROR)
    except CreateComputeError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
