"""``--list-starter-kits`` — live starter kit listing.

Fetches each language's kits from GitHub and renders one Rich table per
language.  Display only — no business logic beyond ordering.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from create_compute.cli import exit_codes
from create_compute.cli.console import console
from create_compute.core.models import Language, RepoShort
from create_compute.core.protocols import RepositorySource
from create_compute.core.starter_kits import (
    GITHUB_ORG,
    default_first,
    repo_name_prefix,
    to_repo_short,
)
from create_compute.exceptions import EnvironmentError


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for listing output."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def fetch_starter_kits(
    repositories: RepositorySource,
    language: Language,
) -> list[RepoShort]:
    """Return *language*'s live starter kits, default kit first."""
    found = repositories.find_repos_start_with(GITHUB_ORG, repo_name_prefix(language))
    return [to_repo_short(language, repo) for repo in default_first(language, found)]


def _display_starter_kits(language: Language, kits: Sequence[RepoShort]) -> None:
    table_class = _import_rich_table()
    table = table_class(
        title=f"Starter kits for {language.value}",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Description")
    for kit in kits:
        table.add_row(kit.short_name, kit.description)

    console.print(table)
    console.print()


def run_list_starter_kits(
    repositories: RepositorySource,
    language: Language | None = None,
) -> int:
    """List starter kits for *language*, or for every language."""
    languages = [language] if language is not None else list(Language)
    for lang in languages:
        with console.status(f"Querying GitHub for {lang.value} starter kits..."):
            kits = fetch_starter_kits(repositories, lang)
        if kits:
            _display_starter_kits(lang, kits)
        else:
            console.print(f"[yellow]No starter kits found for {lang.value}.[/yellow]")
    return exit_codes.SUCCESS
