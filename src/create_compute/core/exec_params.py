"""Resolution of command-line flags and prompts into execution parameters.

The flow has two stages:

1. **Mode selection** — :func:`select_mode` checks every cross-flag rule
   once, before any prompt is shown, and returns one of
   :class:`ListStarterKitsMode`, :class:`FromMode` or :class:`LanguageMode`.
2. **Slot resolution** — :class:`ExecParamsResolver` resolves the
   directory, authors and source slots in order.  Steps that may need
   input are generators: they ``yield`` a prompt request, receive the
   answer, and ``return`` the slot value.  The resolver hands each
   request to the injected :class:`~create_compute.core.protocols.Prompter`.

Guarantees
----------
* No rendering and no filesystem access — the directory probe, the
  repository source and the prompter are all injected.
* Every abort is an :class:`~create_compute.exceptions.ExecParamsCancelledError`.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Generator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from create_compute.core.models import (
    CommandOptions,
    CreateParams,
    DirectoryStatus,
    ExecParams,
    Language,
    ListStarterKitsParams,
    Repository,
)
from create_compute.core.prompts import Choice, PromptRequest, SelectRequest, TextRequest
from create_compute.core.protocols import Prompter, RepositorySource
from create_compute.core.source_validation import validate_source
from create_compute.core.starter_kits import (
    DEFAULT_SHORT_NAME,
    GITHUB_ORG,
    KNOWN_STARTER_KITS,
    default_first,
    default_starter_kit,
    full_name,
    repo_name_prefix,
    short_name,
    starter_kit_source,
)
from create_compute.exceptions import ExecParamsCancelledError

T = TypeVar("T")

Step = Generator[PromptRequest, str, T]
DirectoryProbe = Callable[[str], DirectoryStatus]

LANGUAGE_ALIASES: Mapping[str, Language] = MappingProxyType({
    "js": Language.JAVASCRIPT,
    "javascript": Language.JAVASCRIPT,
    "ts": Language.TYPESCRIPT,
    "typescript": Language.TYPESCRIPT,
})

OTHER_CHOICE: str = "__other"
DEFAULT_DIRECTORY: str = "./"


# ---------------------------------------------------------------------------
# Mode selection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ListStarterKitsMode:
    language: Language | None


@dataclass(frozen=True, slots=True)
class FromMode:
    source: str


@dataclass(frozen=True, slots=True)
class LanguageMode:
    """Source comes from a starter kit of a (possibly prompted) language."""

    language: Language | None
    use_default_starter_kit: bool
    starter_kit: str | None
    """Short name from ``--starter-kit``; never ``"default"``."""


Mode = ListStarterKitsMode | FromMode | LanguageMode


def parse_language(value: str) -> Language:
    """Map a ``--language`` alias to a :class:`Language`.

    Raises
    ------
    ExecParamsCancelledError
        If *value* is not a known alias.
    """
    language = LANGUAGE_ALIASES.get(value)
    if language is None:
        raise ExecParamsCancelledError([
            f"Invalid language value '{value}'; "
            f"must be one of: {', '.join(LANGUAGE_ALIASES)}",
        ])
    return language


def _conflicts(flag: str, others: Mapping[str, bool]) -> list[str]:
    return [
        f"'{flag}' cannot be used with '{name}'."
        for name, present in others.items()
        if present
    ]


def select_mode(options: CommandOptions) -> Mode:
    """Validate flag combinations and pick the resolution mode.

    Raises
    ------
    ExecParamsCancelledError
        On any conflicting or invalid flag value.
    """
    starter_kit = options.starter_kit or None
    source = options.source or None

    if options.default_starter_kit and starter_kit is not None:
        raise ExecParamsCancelledError(
            ["'starter-kit' cannot be used with 'default-starter-kit'."],
        )

    language = parse_language(options.language) if options.language else None

    if options.list_starter_kits:
        messages = _conflicts("list-starter-kits", {
            "from": source is not None,
            "starter-kit": starter_kit is not None,
            "default-starter-kit": options.default_starter_kit,
        })
        if messages:
            raise ExecParamsCancelledError(messages)
        return ListStarterKitsMode(language=language)

    if source is not None:
        messages = _conflicts("from", {
            "language": language is not None,
            "starter-kit": starter_kit is not None,
            "default-starter-kit": options.default_starter_kit,
        })
        problem = validate_source(source)
        if problem is not None:
            messages.append(f"Invalid 'from' value '{source}': {problem}")
        if messages:
            raise ExecParamsCancelledError(messages)
        return FromMode(source=source)

    use_default = options.default_starter_kit or starter_kit == DEFAULT_SHORT_NAME
    return LanguageMode(
        language=language,
        use_default_starter_kit=use_default,
        starter_kit=None if use_default else starter_kit,
    )


# ---------------------------------------------------------------------------
# Slot resolution
# ---------------------------------------------------------------------------

def directory_problem(path: str, status: DirectoryStatus) -> str | None:
    """Return why *path* cannot host a new application, or ``None``."""
    if status is DirectoryStatus.NOT_DIRECTORY:
        return f"'{path}' exists and is not a directory."
    if status is DirectoryStatus.NOT_EMPTY:
        return f"Directory '{path}' is not empty."
    if status is DirectoryStatus.OTHER_ERROR:
        return f"Unable to access '{path}'."
    return None


def _starter_kit_choices(
    language: Language,
    repositories: Sequence[Repository],
) -> list[Choice]:
    return [
        Choice(
            value=repo.full_name,
            label=f"[{short_name(language, repo.full_name)}] {repo.description}",
        )
        for repo in repositories
    ]


class ExecParamsResolver:
    """Turns :class:`CommandOptions` into :data:`ExecParams`.

    Parameters
    ----------
    prompter:
        Front end that answers prompt requests and displays notes.
    repositories:
        Live starter kit listing, used only when the user asks for it.
    directory_probe:
        Classifies a candidate application directory.
    """

    def __init__(
        self,
        prompter: Prompter,
        repositories: RepositorySource,
        directory_probe: DirectoryProbe,
    ) -> None:
        self._prompter = prompter
        self._repositories = repositories
        self._directory_probe = directory_probe

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, options: CommandOptions) -> ExecParams:
        """Run mode selection, then each slot step in order."""
        mode = select_mode(options)
        if isinstance(mode, ListStarterKitsMode):
            return ListStarterKitsParams(language=mode.language)
        return self.resolve_create(options, mode)

    def resolve_create(self, options: CommandOptions, mode: FromMode | LanguageMode) -> CreateParams:
        """Resolve the create-mode slots for an already selected *mode*."""
        directory = self._run(self._directory_step(options.directory))
        authors = self._resolve_authors(options.authors)
        source = self._run(self._source_step(mode))
        return CreateParams(directory=directory, source=source, authors=authors)

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def _ask(self, request: PromptRequest) -> str:
        """Ask until the answer satisfies *request*; ``None`` cancels.

        Answers are checked here as well as in the prompter, so a front
        end that skips validation cannot smuggle in an invalid value.
        """
        while True:
            answer = self._prompter.ask(request)
            if answer is None:
                raise ExecParamsCancelledError()
            if isinstance(request, SelectRequest):
                if answer not in {choice.value for choice in request.choices}:
                    raise ExecParamsCancelledError([f"Invalid selection '{answer}'."])
                return answer
            problem = request.validate(answer) if request.validate is not None else None
            if problem is None:
                return answer
            self._prompter.note(problem)

    def _run(self, step: Step[T]) -> T:
        """Feed prompt answers into *step* until it returns a value."""
        try:
            request = next(step)
            while True:
                try:
                    answer = self._ask(request)
                except ExecParamsCancelledError:
                    step.close()
                    raise
                request = step.send(answer)
        except StopIteration as stop:
            return stop.value

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _check_directory(self, path: str) -> str | None:
        if path == "":
            return "Cannot be empty!"
        return directory_problem(path, self._directory_probe(path))

    def _directory_step(self, value: str | None) -> Step[str]:
        if value:
            problem = self._check_directory(value)
            if problem is not None:
                raise ExecParamsCancelledError([problem])
            directory = value
        else:
            directory = yield TextRequest(
                message="Where should the application be created?",
                default=DEFAULT_DIRECTORY,
                validate=self._check_directory,
            )
        self._prompter.note(f"Using directory: {os.path.abspath(directory)}")
        return directory

    def _resolve_authors(self, values: Sequence[str | None]) -> tuple[str, ...]:
        authors = tuple(author for author in values if author)
        if authors:
            self._prompter.note(f"Using specified authors: {', '.join(authors)}")
        else:
            self._prompter.note("Using empty authors list.")
        return authors

    def _source_step(self, mode: FromMode | LanguageMode) -> Step[str]:
        if isinstance(mode, FromMode):
            self._prompter.note(f"Using specified source path or URL: {mode.source}")
            return mode.source

        language = mode.language
        if language is not None:
            self._prompter.note(f"Using specified language: {language.value}")
        else:
            language = yield from self._language_step(mode)

        if language is None:
            source = yield TextRequest(
                message=(
                    "Specify the path to an existing Compute app, GitHub URL "
                    "of a starter kit, or Fastly Fiddle URL."
                ),
                validate=validate_source,
            )
            return source

        return (yield from self._starter_kit_step(language, mode))

    def _language_step(self, mode: LanguageMode) -> Step[Language | None]:
        """Prompt for a language; ``None`` means "specify source directly"."""
        use_starter_kit = mode.use_default_starter_kit or mode.starter_kit is not None
        choices = [
            Choice(value=Language.JAVASCRIPT.value, label="JavaScript"),
            Choice(value=Language.TYPESCRIPT.value, label="TypeScript"),
        ]
        if use_starter_kit:
            message = "Select a language for your Compute application."
        else:
            message = "Select a language for your Compute application, or specify a starter kit."
            choices.append(Choice(
                value=OTHER_CHOICE,
                label="Specify starter kit or directory",
                hint="Path to existing Compute app, GitHub URL of a starter kit, or Fastly Fiddle URL.",
            ))

        answer = yield SelectRequest(message=message, choices=tuple(choices))
        if answer == OTHER_CHOICE:
            return None
        return Language(answer)

    def _starter_kit_step(self, language: Language, mode: LanguageMode) -> Step[str]:
        if mode.use_default_starter_kit:
            self._prompter.note(f"Using default starter kit for '{language.value}'.")
            return starter_kit_source(default_starter_kit(language).full_name)

        if mode.starter_kit is not None:
            # Not checked against the catalog; the kit may exist only on GitHub.
            self._prompter.note(f"Using specified starter kit: {mode.starter_kit}")
            return starter_kit_source(full_name(language, mode.starter_kit))

        choices = _starter_kit_choices(language, KNOWN_STARTER_KITS[language])
        choices.append(Choice(value=OTHER_CHOICE, label="Choose a starter kit from GitHub."))
        answer = yield SelectRequest(message="Select a starter kit", choices=tuple(choices))

        if answer == OTHER_CHOICE:
            with self._prompter.status("Querying GitHub for starter kits..."):
                found = self._repositories.find_repos_start_with(
                    GITHUB_ORG,
                    repo_name_prefix(language),
                )
            found = default_first(language, found)
            if not found:
                raise ExecParamsCancelledError(["No starter kits found on GitHub."])
            answer = yield SelectRequest(
                message="Select a starter kit",
                choices=tuple(_starter_kit_choices(language, found)),
            )

        return starter_kit_source(answer)


def build_exec_params(
    options: CommandOptions,
    *,
    prompter: Prompter,
    repositories: RepositorySource,
    directory_probe: DirectoryProbe,
) -> ExecParams:
    """Convenience wrapper around :meth:`ExecParamsResolver.resolve`."""
    resolver = ExecParamsResolver(prompter, repositories, directory_probe)
    return resolver.resolve(options)
