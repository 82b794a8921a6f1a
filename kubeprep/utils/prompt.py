"""Interactive questions asked during a provisioning run.

Answers starting with y, Y, o or O (oui) mean yes; n or N mean no.
Anything else repeats the question, up to a fixed number of attempts.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from kubeprep.errors import PromptError
from kubeprep.models.constants import DEFAULT_PROMPT_ATTEMPTS
from kubeprep.utils.logger import Logger

YES_PREFIXES = ("y", "Y", "o", "O")
NO_PREFIXES = ("n", "N")


def parse_yes_no(answer: str) -> bool | None:
    """Interpret an answer; None when it is neither yes nor no."""
    answer = answer.strip()
    if answer.startswith(YES_PREFIXES):
        return True
    if answer.startswith(NO_PREFIXES):
        return False
    return None


def ask_yes_no(
    question: str,
    default: bool,
    max_attempts: int = DEFAULT_PROMPT_ATTEMPTS,
) -> bool:
    """Ask a yes/no question, defaulting to ``default`` on an empty answer.

    Raises:
        PromptError: If no valid answer is given within max_attempts.
    """
    suffix = "(Yn)" if default else "(yN)"
    for _ in range(max_attempts):
        answer = click.prompt(
            f"{question} {suffix}",
            default="y" if default else "n",
            show_default=False,
        )
        decision = parse_yes_no(answer)
        if decision is not None:
            return decision
        Logger.get("prompt").warning("Please answer y or n for yes or no")

    raise PromptError(question, max_attempts)


def ask_text(
    question: str,
    validate: Callable[[str], bool] | None = None,
    error_message: str = "Invalid answer. Please retry",
    max_attempts: int = DEFAULT_PROMPT_ATTEMPTS,
) -> str:
    """Ask for a free-form answer, re-asking while ``validate`` rejects it.

    Raises:
        PromptError: If no valid answer is given within max_attempts.
    """
    for _ in range(max_attempts):
        answer = click.prompt(question).strip()
        if validate is None or validate(answer):
            return answer
        Logger.get("prompt").warning(error_message)

    raise PromptError(question, max_attempts)
