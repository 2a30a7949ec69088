"""Interactive prompt collection.

Questions are described as small Pydantic models and answered through
``rich.prompt``. :func:`ask` returns whatever answers it gathered; a missing
answer means the operator aborted, which :func:`collect_run_request` turns
into :class:`~create_react_daisy.errors.ScaffoldCancelled`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Literal, Union

from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from create_react_daisy.errors import ScaffoldCancelled
from create_react_daisy.models import (
    PROJECT_NAME_REQUIRED,
    Language,
    RunRequest,
    TemplateKey,
)
from create_react_daisy.utils import console as default_console

Validator = Callable[[str], Union[str, bool]]


# ---------------------------------------------------------------------------
# Prompt definitions
# ---------------------------------------------------------------------------


class Choice(BaseModel):
    """One entry of a select prompt."""

    title: str
    value: Any


class TextPrompt(BaseModel):
    """Free-text question, re-asked until *validate_fn* returns ``True``."""

    type: Literal["text"] = "text"
    name: str
    message: str
    validate_fn: Validator | None = Field(default=None, exclude=True)


class SelectPrompt(BaseModel):
    """Single-select question answered by choice number."""

    type: Literal["select"] = "select"
    name: str
    message: str
    choices: list[Choice] = Field(..., min_length=1)
    initial: int = Field(default=0, ge=0)


Question = Union[TextPrompt, SelectPrompt]
AskFn = Callable[[Sequence[Question]], dict[str, Any]]


def validate_project_name(value: str) -> str | bool:
    """Return ``True`` for a usable project name, otherwise the error message."""
    if not value:
        return PROJECT_NAME_REQUIRED
    return True


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _ask_text(question: TextPrompt, console: Console) -> str:
    while True:
        answer = Prompt.ask(question.message, console=console, default="", show_default=False)
        if question.validate_fn is None:
            return answer
        verdict = question.validate_fn(answer)
        if verdict is True:
            return answer
        console.print(f"[red]{escape(str(verdict))}[/red]")


def _ask_select(question: SelectPrompt, console: Console) -> Any:
    console.print(f"[bold]{escape(question.message)}[/bold]")
    for index, choice in enumerate(question.choices, start=1):
        console.print(f"  [cyan]{index}[/cyan]) {escape(choice.title)}")
    numbers = [str(i) for i in range(1, len(question.choices) + 1)]
    default = str(min(question.initial, len(question.choices) - 1) + 1)
    picked = Prompt.ask(
        "Enter a number",
        console=console,
        choices=numbers,
        default=default,
        show_choices=False,
    )
    return question.choices[int(picked) - 1].value


def ask(questions: Sequence[Question], console: Console | None = None) -> dict[str, Any]:
    """Ask *questions* in order and return a ``{name: answer}`` mapping.

    Ctrl+C or end-of-input stops the sequence; the answers gathered so far
    are returned, so callers detect cancellation by a missing key.
    """
    console = console or default_console
    answers: dict[str, Any] = {}
    for question in questions:
        try:
            if isinstance(question, TextPrompt):
                answers[question.name] = _ask_text(question, console)
            else:
                answers[question.name] = _ask_select(question, console)
        except (KeyboardInterrupt, EOFError):
            console.print()
            break
    return answers


# ---------------------------------------------------------------------------
# Run request collection
# ---------------------------------------------------------------------------


def build_questions() -> list[Question]:
    """Project name, language, then UI template."""
    return [
        TextPrompt(
            name="project_name",
            message="What is your project name?",
            validate_fn=validate_project_name,
        ),
        SelectPrompt(
            name="language",
            message="Select a language:",
            choices=[Choice(title=lang.label, value=lang) for lang in Language],
            initial=0,
        ),
        SelectPrompt(
            name="template",
            message="Select a template:",
            choices=[Choice(title=key.label, value=key) for key in TemplateKey],
            initial=0,
        ),
    ]


def collect_run_request(ask_fn: AskFn = ask) -> RunRequest:
    """Prompt the operator and return a validated :class:`RunRequest`.

    Raises:
        ScaffoldCancelled: If any answer is missing or the name is empty.
    """
    questions = build_questions()
    answers = ask_fn(questions)

    for question in questions:
        if answers.get(question.name) in (None, ""):
            raise ScaffoldCancelled()

    if validate_project_name(answers["project_name"]) is not True:
        raise ScaffoldCancelled()

    return RunRequest(
        project_name=answers["project_name"],
        language=answers["language"],
        template=answers["template"],
    )
