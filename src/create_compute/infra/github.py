"""GitHub REST API client for listing an organization's repositories.

This module is the only place that constructs GitHub endpoints, sends
HTTP requests to api.github.com, and interprets its responses.  Every
``requests`` exception is re-raised as
:class:`~create_compute.exceptions.RepositoryLookupError`.
"""

from __future__ import annotations

import os
from typing import Any

import requests

from create_compute.core.models import Repository
from create_compute.exceptions import RepositoryLookupError

GITHUB_API_BASE: str = "https://api.github.com"
GITHUB_API_VERSION: str = "2022-11-28"
REQUEST_TIMEOUT: float = 30.0

_TOKEN_HINT = (
    "Unauthenticated requests are rate limited. "
    "Set GH_TOKEN or GITHUB_TOKEN to use a GitHub token."
)


def github_token_from_env() -> str | None:
    """Return the GitHub token from ``GH_TOKEN``/``GITHUB_TOKEN``, if any."""
    token = (os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or "").strip()
    return token or None


class GitHubRepositorySource:
    """Paginated repository listing.

    Satisfies :class:`~create_compute.core.protocols.RepositorySource`
    structurally.  The bearer token is optional.
    """

    def __init__(self, token: str | None = None, api_base: str = GITHUB_API_BASE) -> None:
        self._token = token
        self._api_base = api_base.rstrip("/")

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _get_page(self, org: str, page: int) -> list[dict[str, Any]]:
        url = f"{self._api_base}/orgs/{org}/repos"
        try:
            r = requests.get(
                url,
                params={"page": page},
                headers=self._headers(),
                timeout=REQUEST_TIMEOUT,
            )
        except requests.RequestException as exc:
            raise RepositoryLookupError(
                f"Failed to query GitHub: {exc}",
                hint="Check your network connection.",
            ) from exc

        if r.status_code >= 400:
            raise RepositoryLookupError(
                f"GitHub API error {r.status_code} GET {url}?page={page}",
                hint=None if self._token else _TOKEN_HINT,
            )

        try:
            payload = r.json()
        except ValueError as exc:
            raise RepositoryLookupError("GitHub returned a response that is not JSON.") from exc
        if not isinstance(payload, list):
            raise RepositoryLookupError("GitHub returned an unexpected data structure.")
        return payload

    def find_repos_start_with(self, org: str, starts_with: str) -> list[Repository]:
        """Return *org*'s repositories whose full name starts with ``org/starts_with``.

        Pages are fetched one at a time until an empty page comes back;
        API order is preserved.
        """
        prefix = f"{org}/{starts_with}"
        results: list[Repository] = []

        page = 1
        while True:
            entries = self._get_page(org, page)
            if not entries:
                break
            for entry in entries:
                name = str(entry.get("full_name") or "")
                if name.startswith(prefix):
                    results.append(Repository(
                        full_name=name,
                        description=str(entry.get("description") or ""),
                    ))
            page += 1

        return results
