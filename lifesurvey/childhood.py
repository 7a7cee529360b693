"""The childhood page: a single-choice question about a favourite porridge."""

from __future__ import annotations

from dataclasses import dataclass, field

from lifesurvey.state import SurveyState

TITLE = "Детство"
QUESTION = "Выберите любимую кашу"
OPTIONS = ("&Манная", "&Рисовая", "&Гороховая", "&Гречневая")
SELECTED_PREFIX = "Выбрано:"


@dataclass
class ChildhoodPage:
    """Radio-style choice among fixed options; the first is chosen at start."""

    question: str = QUESTION
    options: tuple[str, ...] = field(default=OPTIONS)
    prefix: str = SELECTED_PREFIX
    title: str = TITLE
    selected_index: int = 0

    def __post_init__(self) -> None:
        self.options = tuple(self.options)
        if not self.options:
            raise ValueError("a choice page needs at least one option")
        self.select(self.selected_index)

    @property
    def selected_item(self) -> str:
        """The label of the chosen option."""
        return self.options[self.selected_index]

    @property
    def message(self) -> str:
        """The line telling the user what is chosen."""
        return f"{self.prefix} {self.selected_item}"

    def select(self, index: int) -> str:
        """Choose the option at ``index`` and return its label."""
        if not 0 <= index < len(self.options):
            raise IndexError(f"option index {index} out of range")
        self.selected_index = index
        return self.selected_item

    def commit(self, state: SurveyState) -> None:
        """Store this page's question and chosen answer in ``state``."""
        state.record(self.question, self.selected_item, state.childhood_index)