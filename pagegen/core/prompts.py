"""Ordered questions resolved from CLI values or an interactive reader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

Reader = Callable[[str], str]

TEXT = "text"
FLAG = "flag"


@dataclass(frozen=True)
class Question:
    """A single value needed to generate a page.

    ``prompt`` may reference earlier answers with ``str.format`` fields, e.g.
    ``{page_path}``.
    """

    key: str
    prompt: str
    kind: str = TEXT

    def render(self, answers: Mapping[str, Any]) -> str:
        return self.prompt.format(**answers)

    def parse(self, raw: str) -> Any:
        if self.kind == FLAG:
            return parse_flag(raw)
        return raw.strip()


QUESTIONS: tuple[Question, ...] = (
    Question("page_path", "Page path (e.g. test/path): "),
    Question("page_name", "Page name (e.g. TestPage): "),
    Question("search_condition", "Does the page need a search condition? (y/N): ", FLAG),
    Question(
        "interfaces",
        "Create a model interface directory? (models/interfaces/{page_path}) (y/N): ",
        FLAG,
    ),
    Question(
        "types",
        "Create a model type directory? (models/types/{page_path}) (y/N): ",
        FLAG,
    ),
    Question(
        "hooks",
        "Create a hooks directory? (hooks/client/{page_path}) (y/N): ",
        FLAG,
    ),
)


def parse_flag(raw: str) -> bool:
    """Only an explicit ``y`` counts as yes; blank input takes the default ``N``."""
    return raw.strip().lower() == "y"


def collect_answers(
    provided: Mapping[str, Any],
    reader: Reader = input,
    questions: tuple[Question, ...] = QUESTIONS,
) -> dict[str, Any]:
    """Resolve every question in order, asking ``reader`` only for missing ones.

    A value counts as missing when it is ``None`` or, for text questions, an
    empty string.
    """
    answers: dict[str, Any] = {}
    for question in questions:
        value = provided.get(question.key)
        if value is None or (question.kind == TEXT and value == ""):
            value = question.parse(reader(question.render(answers)))
        answers[question.key] = value
    return answers
