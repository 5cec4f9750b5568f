"""Fastly CLI wrapper — the delegate that actually creates applications.

This module is the **only** place that spawns the ``fastly`` command.
Spawn failures and non-zero exits are re-raised as typed
:class:`~create_compute.exceptions.CreateComputeError` subclasses.
"""

from __future__ import annotations

import re
import subprocess

from create_compute.core.models import CreateParams
from create_compute.exceptions import FastlyCliFailedError

DEFAULT_FASTLY_CLI: str = "fastly"
VERSION_PATTERN: re.Pattern[str] = re.compile(r"^Fastly CLI version (v\d+\.\d+\.\d)")

# compute init only needs a language marker; starter kits carry their own.
_INIT_LANGUAGE: str = "javascript"


class FastlyCli:
    """Runs ``fastly`` from *cli_path*, or from ``PATH`` when not given."""

    def __init__(self, cli_path: str | None = None) -> None:
        self.cli_path: str = cli_path or DEFAULT_FASTLY_CLI

    @staticmethod
    def build_init_args(params: CreateParams) -> list[str]:
        """Return the arguments following ``fastly`` for *params*."""
        args = [
            "compute",
            "init",
            "--non-interactive",
            "--quiet",
            f"--directory={params.directory}",
            f"--language={_INIT_LANGUAGE}",
            f"--from={params.source}",
        ]
        if params.authors:
            args.extend(f"--author={author}" for author in params.authors)
        else:
            args.append("--author=")
        return args

    def get_version(self) -> str | None:
        """Return the CLI version (e.g. ``"v10.4.0"``), or ``None``.

        ``None`` covers a missing binary, a non-zero exit, and output
        that does not look like a Fastly CLI version banner.
        """
        try:
            result = subprocess.run(
                [self.cli_path, "version"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError:
            return None

        if result.returncode != 0:
            return None

        match = VERSION_PATTERN.match(result.stdout)
        if match is None:
            return None
        return match.group(1)

    def execute(self, params: CreateParams) -> None:
        """Run ``fastly compute init`` and wait for it to finish.

        Standard output is discarded; standard error is inherited so the
        CLI's diagnostics reach the user.

        Raises
        ------
        FastlyCliFailedError
            If the process cannot be started or exits non-zero.
        """
        args = [self.cli_path, *self.build_init_args(params)]
        try:
            result = subprocess.run(args, stdout=subprocess.DEVNULL, check=False)
        except OSError as exc:
            raise FastlyCliFailedError(
                f"Unable to run {self.cli_path}: {exc}",
            ) from exc

        if result.returncode != 0:
            raise FastlyCliFailedError(
                "Failed initializing Compute application",
                hint=f"fastly compute init exited with status {result.returncode}.",
            )
