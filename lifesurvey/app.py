"""Survey navigation and a console front end for running it."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO, Union

from lifesurvey.childhood import ChildhoodPage
from lifesurvey.results import TITLE as RESULTS_TITLE
from lifesurvey.results import ResultsTable, clean_text
from lifesurvey.school import SchoolPage
from lifesurvey.state import SurveyState
from lifesurvey.youth import YouthPage

GREETING_TITLE = "Приветствие"
GREETING_TEXT = "Вас приветствует система\n быстрого анкетирования!"
GREETING_TOPIC = "Тема - периоды жизни"
THANKS_TEXT = "Спасибо что воспользовались \n      нашей системой!"

QuestionPage = Union[ChildhoodPage, SchoolPage, YouthPage]
Page = Union[QuestionPage, ResultsTable, None]


class Step(Enum):
    """The screens of the survey, in the order they are shown."""

    GREETING = "greeting"
    CHILDHOOD = "childhood"
    SCHOOL = "school"
    YOUTH = "youth"
    RESULTS = "results"


_FOLLOWING = {
    Step.CHILDHOOD: Step.SCHOOL,
    Step.SCHOOL: Step.YOUTH,
    Step.YOUTH: Step.RESULTS,
}


@dataclass
class Wizard:
    """Moves between survey screens and keeps the pages that are open.

    Going forward stores the current answer and opens a fresh page; going
    back discards the current page and returns to the one before, as it was
    left. Closing ends the whole survey.
    """

    state: SurveyState = field(default_factory=SurveyState)
    _stack: list[tuple[Step, Page]] = field(
        init=False, default_factory=lambda: [(Step.GREETING, None)]
    )
    closed: bool = field(init=False, default=False)

    @property
    def step(self) -> Step:
        """The screen currently shown."""
        return self._stack[-1][0]

    @property
    def page(self) -> Page:
        """The page object of the current screen; ``None`` on the greeting."""
        return self._stack[-1][1]

    @property
    def history(self) -> list[Step]:
        """The open screens, oldest first."""
        return [step for step, _ in self._stack]

    def _ensure_open(self) -> None:
        if self.closed:
            raise RuntimeError("the survey is closed")

    def _open(self, step: Step) -> Page:
        page: Page
        if step is Step.CHILDHOOD:
            page = ChildhoodPage()
        elif step is Step.SCHOOL:
            page = SchoolPage()
        elif step is Step.YOUTH:
            page = YouthPage()
        else:
            page = ResultsTable.from_state(self.state)
        self._stack.append((step, page))
        return page

    def start(self) -> Page:
        """Leave the greeting and open the first question."""
        self._ensure_open()
        if self.step is not Step.GREETING:
            raise RuntimeError("the survey can only be started from the greeting")
        return self._open(Step.CHILDHOOD)

    def next(self) -> Page:
        """Store the current answer and open the following screen."""
        self._ensure_open()
        if self.step is Step.GREETING:
            return self.start()
        if self.step not in _FOLLOWING:
            raise RuntimeError(f"there is no screen after {self.step.value}")
        page = self.page
        assert isinstance(page, (ChildhoodPage, SchoolPage, YouthPage))
        page.commit(self.state)
        return self._open(_FOLLOWING[self.step])

    def back(self) -> Page:
        """Discard the current screen and show the previous one again."""
        self._ensure_open()
        if self.step is Step.GREETING:
            raise RuntimeError("the greeting has no previous screen")
        self._stack.pop()
        return self.page

    def close(self) -> None:
        """End the survey."""
        self.closed = True


class SurveyWindow:
    """Text front end that drives a :class:`Wizard` from typed commands.

    Commands: a number chooses an option, ``n`` goes forward, ``s`` starts
    from the greeting, ``b`` goes back and ``q`` quits.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        wizard: Wizard | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.wizard = wizard if wizard is not None else Wizard()

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _render(self) -> None:
        wizard = self.wizard
        page = wizard.page
        if wizard.step is Step.GREETING:
            self._print(f"== {GREETING_TITLE} ==")
            self._print(GREETING_TEXT)
            self._print(GREETING_TOPIC)
            self._print("[s] Начать  [q] Выход")
        elif isinstance(page, ResultsTable):
            self._print(f"== {RESULTS_TITLE} ==")
            self._print(THANKS_TEXT)
            if page.columns:
                self._print(" | ".join(page.columns))
            for question, answer in page.rows:
                self._print(f"{question} | {answer}")
            self._print("[b] Назад  [q] Выход")
        else:
            assert isinstance(page, (ChildhoodPage, SchoolPage, YouthPage))
            self._print(f"== {page.title} ==")
            self._print(page.question)
            for number, option in enumerate(page.options, start=1):
                mark = "*" if number - 1 == page.selected_index else " "
                self._print(f" {mark} {number}. {clean_text(option)}")
            self._print(clean_text(page.message))
            self._print("[1-9] Выбор  [b] Назад  [n] Вперед  [q] Выход")

    def _choose(self, number: int) -> None:
        page = self.wizard.page
        if isinstance(page, SchoolPage):
            page.toggle(number - 1)
        elif isinstance(page, (ChildhoodPage, YouthPage)):
            if not 1 <= number <= len(page.options):
                raise IndexError(f"option {number} out of range")
            page.select(number - 1)
        else:
            raise RuntimeError("nothing to choose on this screen")

    def _handle(self, command: str) -> None:
        if command == "q":
            self.wizard.close()
        elif command == "s":
            self.wizard.start()
        elif command == "n":
            self.wizard.next()
        elif command == "b":
            self.wizard.back()
        elif command.isdigit():
            self._choose(int(command))
        else:
            raise ValueError(f"unknown command: {command!r}")

    def run(self) -> int:
        """Run until the survey is closed or input ends; return the exit status."""
        while not self.wizard.closed:
            self._render()
            line = self.stdin.readline()
            if not line:
                self.wizard.close()
                break
            command = line.strip().lower()
            if not command:
                continue
            try:
                self._handle(command)
            except (ValueError, IndexError, RuntimeError) as error:
                self._print(f"! {error}")
        return 0


def main(argv: list[str] | None = None) -> int:
    """Run the survey on the terminal."""
    parser = argparse.ArgumentParser(
        prog="lifesurvey", description="A short survey about the periods of life."
    )
    parser.parse_args(argv)
    return SurveyWindow().run()


if __name__ == "__main__":
    sys.exit(main())