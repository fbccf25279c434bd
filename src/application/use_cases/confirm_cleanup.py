"""Operator confirmation gate guarding the destructive cleanup phase."""

import sys
from typing import Protocol

from src.domain.constants import AFFIRMATIVE_ANSWER


class LineSource(Protocol):
    """Anything that can hand over one line of text, like ``sys.stdin``."""

    def readline(self) -> str:
        """Return the next line, or an empty string at end of input."""


def is_affirmative(answer: str) -> bool:
    """Return True when the answer normalizes to the affirmative token."""
    return answer.strip().casefold() == AFFIRMATIVE_ANSWER


class ConfirmationGate:
    """Map one line of operator input to a proceed/abort decision.

    Anything other than an explicit ``y`` aborts, including empty input and
    end of stream. A preset answer skips reading entirely for
    non-interactive runs.
    """

    def __init__(
        self,
        line_source: LineSource | None = None,
        preset_answer: bool | None = None,
    ) -> None:
        self._line_source = line_source
        self._preset_answer = preset_answer

    def confirm(self) -> bool:
        """Return True only on explicit consent."""
        if self._preset_answer is not None:
            return self._preset_answer
        source = self._line_source or sys.stdin
        try:
            line = source.readline()
        except EOFError:
            return False
        if not line:
            return False
        return is_affirmative(line)


__all__ = ["ConfirmationGate", "LineSource", "is_affirmative"]
