"""Final results table built from the survey state."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from lifesurvey.state import SurveyState

COLUMNS = ("Вопросы", "Ответы")
COLUMN_WIDTH = 260
TITLE = "Результаты"
_DISALLOWED = "&"


def clean_text(text: str) -> str:
    """Remove mnemonic markers from a label."""
    return "".join(c for c in text if c not in _DISALLOWED)


def build_rows(questions: Sequence[str], answers: Sequence[str]) -> list[tuple[str, str]]:
    """Pair questions with answers, cleaned, skipping pairs with an empty side."""
    rows = []
    for raw_question, raw_answer in zip(questions, answers):
        question, answer = clean_text(raw_question), clean_text(raw_answer)
        if question and answer:
            rows.append((question, answer))
    return rows


@dataclass
class ResultsTable:
    """A two-column table of questions and their answers.

    ``columns`` is empty when there was nothing to show.
    """

    columns: tuple[str, ...] = ()
    rows: list[tuple[str, str]] = field(default_factory=list)
    column_width: int = COLUMN_WIDTH

    @classmethod
    def from_state(cls, state: SurveyState) -> "ResultsTable":
        """Build the table from the questions and answers in ``state``."""
        questions = state.question_list()
        answers = state.answer_list()
        if not questions or not answers:
            return cls()
        return cls(columns=COLUMNS, rows=build_rows(questions, answers))