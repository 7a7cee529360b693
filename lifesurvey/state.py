"""Shared survey state: the questions and answers collected so far."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_DELIMITER = ","


@dataclass
class SurveyState:
    """Questions and answers stored as delimiter-joined strings.

    Each page of the survey owns a fixed slot, given by its index.
    """

    questions: str = ""
    answers: str = ""
    delimiter: str = DEFAULT_DELIMITER
    childhood_index: int = 0
    school_index: int = 1
    youth_index: int = 2

    def _effective(self, delim: str) -> str:
        return delim if delim else self.delimiter

    def append_with_delimiter(self, base: str, addition: str = "", delim: str = "") -> str:
        """Return ``base`` followed by the delimiter and ``addition``.

        An empty ``base`` gives an empty result. The delimiter is not doubled
        when ``base`` already ends with it.
        """
        if not base:
            return ""
        separator = self._effective(delim)
        if base[-1] == separator:
            separator = ""
        return base + separator + addition

    def split(self, text: str, delim: str = "") -> list[str]:
        """Split ``text`` on the delimiter, dropping empty pieces."""
        if not text:
            return []
        return [token for token in text.split(self._effective(delim)) if token]

    def join(self, strings: Iterable[str], delim: str = "") -> str:
        """Join strings, each followed by the delimiter; empty strings vanish."""
        separator = self._effective(delim)
        return "".join(self.append_with_delimiter(s, delim=separator) for s in strings)

    def question_list(self) -> list[str]:
        """The stored questions as a list."""
        return self.split(self.questions)

    def answer_list(self) -> list[str]:
        """The stored answers as a list."""
        return self.split(self.answers)

    def record(self, question: str, answer: str, index: int) -> None:
        """Store ``answer`` to ``question`` in slot ``index``.

        A question already present only has its answer replaced, and only
        where the slot exists. An answer already present anywhere leaves the
        state untouched. Otherwise the slot is replaced, or appended when it
        is the next free one; slots further out are ignored.
        """
        questions = self.question_list()
        answers = self.answer_list()

        question_repeat = question in questions
        answer_repeat = answer in answers

        if question_repeat and not answer_repeat:
            if index < len(answers):
                answers[index] = answer
        elif not question_repeat and not answer_repeat:
            _put(answers, index, answer)
            _put(questions, index, question)

        self.questions = self.join(questions)
        self.answers = self.join(answers)


def _put(items: list[str], index: int, value: str) -> None:
    if index < len(items):
        items[index] = value
    elif index == len(items):
        items.append(value)