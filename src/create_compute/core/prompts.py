"""Prompt requests yielded by the resolution flow.

A request describes *what* to ask; the :class:`~create_compute.core.protocols.Prompter`
decides *how* to render it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Choice:
    """One option of a :class:`SelectRequest`."""

    value: str
    label: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class SelectRequest:
    """Ask the user to pick one of *choices*; the answer is a ``value``."""

    message: str
    choices: tuple[Choice, ...]


@dataclass(frozen=True, slots=True)
class TextRequest:
    """Ask for free text.

    ``validate`` returns an error message to re-ask, or ``None`` to accept.
    """

    message: str
    default: str = ""
    validate: Callable[[str], str | None] | None = None


PromptRequest = SelectRequest | TextRequest
