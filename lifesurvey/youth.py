"""The youth page: a list box question about education."""

from __future__ import annotations

from dataclasses import dataclass, field

from lifesurvey.state import SurveyState

TITLE = "Юность"
QUESTION = "Какое у вас образование"
OPTIONS = ("Неполное среднее", "Среднее", "Среднее-специальное", "Высшее")
SELECTED_PREFIX = "Выбрано:"
ROW_HEIGHT = 30


@dataclass
class YouthPage:
    """Single-selection list; the first entry is chosen at start.

    A selection outside the list is pulled back to its nearest end, so a
    missing selection (a negative index) falls back to the first entry.
    """

    question: str = QUESTION
    options: tuple[str, ...] = field(default=OPTIONS)
    prefix: str = SELECTED_PREFIX
    title: str = TITLE
    selected_index: int = 0
    row_height: int = ROW_HEIGHT

    def __post_init__(self) -> None:
        self.options = tuple(self.options)
        if not self.options:
            raise ValueError("a choice page needs at least one option")
        self.select(self.selected_index)

    @property
    def selected_item(self) -> str:
        """The label of the chosen entry."""
        return self.options[self.selected_index]

    @property
    def message(self) -> str:
        """The line telling the user what is chosen."""
        return f"{self.prefix} {self.selected_item}"

    @property
    def list_height(self) -> int:
        """Minimum height of the list, tall enough to show every entry."""
        return len(self.options) * self.row_height

    def select(self, index: int) -> str:
        """Choose the entry at ``index``, clamped to the list, and return its label."""
        self.selected_index = min(max(index, 0), len(self.options) - 1)
        return self.selected_item

    def commit(self, state: SurveyState) -> None:
        """Store this page's question and chosen answer in ``state``."""
        state.record(self.question, self.selected_item, state.youth_index)