"""
Collect prompt answers from an injected answer source.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, Iterable, Mapping, Optional, Protocol, Sequence, Union

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .prompts import PromptField

logger = logging.getLogger(__name__)

AnswerMap = Dict[str, str]


class CollectionError(RuntimeError):
    """Raised when answers cannot be collected at all (not for rejected answers)."""


class AnswerSource(Protocol):
    """Supplies raw answers to the collector, one field at a time."""

    def ask(self, field: PromptField, error: Optional[str] = None) -> Optional[str]:
        """
        Return the raw answer for field, or None for "no answer".

        ``error`` carries the rejection message when the previous answer to the
        same field was refused.
        """
        ...


class InteractiveAnswerSource:
    """Ask each question on the console."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def ask(self, field: PromptField, error: Optional[str] = None) -> Optional[str]:
        if error:
            self.console.print(f"[red]{escape(error)}[/]")
        prompt = f"[question]Question:[/] [orange]{escape(field.description)}[/]"
        if field.default is not None:
            return Prompt.ask(prompt, console=self.console, default=field.default)
        return Prompt.ask(prompt, console=self.console)


class MappingAnswerSource:
    """
    Answer questions from a pre-supplied mapping, without prompting.

    A value may be a single answer or a sequence of successive answers; the
    next one is offered each time the previous answer is rejected. Fields
    missing from the mapping get no answer, so their default applies.
    """

    def __init__(self, answers: Mapping[str, Union[str, Sequence[str]]]) -> None:
        self._pending: Dict[str, Deque[str]] = {
            token: deque([value] if isinstance(value, str) else list(value))
            for token, value in answers.items()
        }
        self._asked: set[str] = set()

    def ask(self, field: PromptField, error: Optional[str] = None) -> Optional[str]:
        first_attempt = field.name not in self._asked
        self._asked.add(field.name)
        pending = self._pending.get(field.name)
        if pending:
            return pending.popleft()
        if first_attempt:
            return None
        raise CollectionError(f"No acceptable answer supplied for {field.name}: {error or 'no value'}")


def collect_answers(
    fields: Iterable[PromptField],
    source: AnswerSource,
    *,
    console: Console,
    verbose: bool = False,
) -> AnswerMap:
    """
    Ask every field in order until each one has an accepted answer.

    Rejected answers are asked again with the field's message. Input that
    cannot be obtained at all (end of input, interrupt, an exhausted answer
    source) raises CollectionError.

    Args:
        fields: Questions to ask, in display order.
        source: Where raw answers come from.
        console: Console used for verbose output.
        verbose: Print the received answers once collection is complete.

    Returns:
        Ordered mapping of token -> accepted answer.
    """
    received: AnswerMap = {}
    for field in fields:
        error: Optional[str] = None
        while True:
            try:
                raw = source.ask(field, error)
            except (EOFError, KeyboardInterrupt) as exc:
                raise CollectionError(f"Input aborted while asking for {field.name}") from exc
            value = field.resolve(raw)
            error = field.validate(value)
            if error is None:
                break
            logger.debug("Rejected answer for %s: %s", field.name, error)
        received[field.name] = value

    if verbose:
        console.print()
        console.print("Informations received:")
        for token, value in received.items():
            console.print(f"\t{escape(token)}: {escape(value)}")
    return received
