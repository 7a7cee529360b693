"""The school page: a check list that behaves as a single choice."""

from __future__ import annotations

from dataclasses import dataclass, field

from lifesurvey.state import SurveyState

TITLE = "Школа"
QUESTION = "Как вы учились в 5 классе"
OPTIONS = ("Отлично", "Хорошо", "Удовлетворительно", "Неудовлетворительно")
SELECTED_PREFIX = "Выбрано:"


@dataclass
class SchoolPage:
    """Check boxes of which exactly one stays checked.

    The first option is checked at start. Clicking a box checks it and clears
    the others; clicking the checked box leaves it checked.
    """

    question: str = QUESTION
    options: tuple[str, ...] = field(default=OPTIONS)
    prefix: str = SELECTED_PREFIX
    title: str = TITLE
    selected_index: int = 0
    checked: list[bool] = field(init=False, default_factory=list)
    selected_item: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self.options = tuple(self.options)
        self.checked = [False] * len(self.options)
        self.selected_item = ""
        if self.options:
            self._check_range(self.selected_index)
            self.checked[self.selected_index] = True
            self._on_toggled(self.selected_index)

    @property
    def message(self) -> str:
        """The line telling the user what is chosen."""
        return f"{self.prefix} {self.selected_item}"

    @property
    def checked_indices(self) -> list[int]:
        """Indices of the boxes currently checked."""
        return [i for i, state in enumerate(self.checked) if state]

    def _check_range(self, index: int) -> None:
        if not 0 <= index < len(self.options):
            raise IndexError(f"option index {index} out of range")

    def toggle(self, index: int) -> str:
        """Click the box at ``index`` and return the chosen label."""
        self._check_range(index)
        self.checked[index] = not self.checked[index]
        self._on_toggled(index)
        return self.selected_item

    def _on_toggled(self, index: int) -> None:
        self.checked = [i == index and state for i, state in enumerate(self.checked)]
        if self.checked[index]:
            self.selected_index = index
            self.selected_item = self.options[index]
        else:
            self.checked[index] = True

    def commit(self, state: SurveyState) -> None:
        """Store this page's question and chosen answer in ``state``."""
        state.record(self.question, self.selected_item, state.school_index)