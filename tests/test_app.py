import io

import pytest

from lifesurvey.app import Step, SurveyWindow, Wizard, main
from lifesurvey.childhood import ChildhoodPage
from lifesurvey.results import ResultsTable
from lifesurvey.school import SchoolPage
from lifesurvey.youth import YouthPage


def run_window(script: str) -> tuple[SurveyWindow, str, int]:
    out = io.StringIO()
    window = SurveyWindow(stdin=io.StringIO(script), stdout=out)
    status = window.run()
    return window, out.getvalue(), status


def test_wizard_begins_on_greeting():
    wizard = Wizard()
    assert wizard.step is Step.GREETING
    assert wizard.page is None
    assert wizard.closed is False


def test_start_opens_childhood():
    wizard = Wizard()
    page = wizard.start()
    assert isinstance(page, ChildhoodPage)
    assert wizard.step is Step.CHILDHOOD
    assert wizard.history == [Step.GREETING, Step.CHILDHOOD]


def test_start_twice_raises():
    wizard = Wizard()
    wizard.start()
    with pytest.raises(RuntimeError):
        wizard.start()


def test_next_from_greeting_starts():
    wizard = Wizard()
    wizard.next()
    assert wizard.step is Step.CHILDHOOD


def test_forward_through_all_pages():
    wizard = Wizard()
    wizard.start()
    assert isinstance(wizard.next(), SchoolPage)
    assert isinstance(wizard.next(), YouthPage)
    table = wizard.next()
    assert isinstance(table, ResultsTable)
    assert wizard.step is Step.RESULTS


def test_next_commits_answer():
    wizard = Wizard()
    page = wizard.start()
    page.select(1)
    wizard.next()
    assert wizard.state.question_list() == [page.question]
    assert wizard.state.answer_list() == [page.selected_item]


def test_results_rows_from_default_answers():
    wizard = Wizard()
    wizard.start()
    wizard.next()
    wizard.next()
    table = wizard.next()
    assert table.rows == [
        ("Выберите любимую кашу", "Манная"),
        ("Как вы учились в 5 классе", "Отлично"),
        ("Какое у вас образование", "Неполное среднее"),
    ]


def test_next_on_results_raises():
    wizard = Wizard()
    wizard.start()
    wizard.next()
    wizard.next()
    wizard.next()
    with pytest.raises(RuntimeError):
        wizard.next()


def test_back_from_greeting_raises():
    with pytest.raises(RuntimeError):
        Wizard().back()


def test_back_returns_same_page_instance():
    wizard = Wizard()
    childhood = wizard.start()
    childhood.select(2)
    wizard.next()
    returned = wizard.back()
    assert returned is childhood
    assert returned.selected_index == 2
    assert wizard.step is Step.CHILDHOOD


def test_back_then_next_gives_fresh_page():
    wizard = Wizard()
    wizard.start()
    school = wizard.next()
    school.toggle(3)
    wizard.back()
    again = wizard.next()
    assert again is not school
    assert again.selected_index == 0


def test_back_from_childhood_returns_to_greeting():
    wizard = Wizard()
    wizard.start()
    assert wizard.back() is None
    assert wizard.step is Step.GREETING


def test_close_stops_navigation():
    wizard = Wizard()
    wizard.close()
    assert wizard.closed is True
    with pytest.raises(RuntimeError):
        wizard.start()
    with pytest.raises(RuntimeError):
        wizard.next()
    with pytest.raises(RuntimeError):
        wizard.back()


def test_results_rebuilt_after_going_back():
    wizard = Wizard()
    wizard.start()
    wizard.next()
    wizard.next()
    wizard.next()
    youth = wizard.back()
    youth.select(3)
    table = wizard.next()
    assert table.rows[2] == ("Какое у вас образование", "Высшее")


def test_window_quit_on_greeting():
    window, output, status = run_window("q\n")
    assert status == 0
    assert window.wizard.closed is True
    assert "Приветствие" in output


def test_window_eof_closes():
    window, _, status = run_window("")
    assert status == 0
    assert window.wizard.closed is True


def test_window_full_run_shows_results():
    window, output, status = run_window("s\n2\nn\n2\nn\n4\nn\nq\n")
    assert status == 0
    assert window.wizard.step is Step.RESULTS
    assert "Выберите любимую кашу | Рисовая" in output
    assert "Как вы учились в 5 классе | Хорошо" in output
    assert "Какое у вас образование | Высшее" in output


def test_window_reports_bad_command_and_continues():
    window, output, _ = run_window("x\ns\nq\n")
    assert "unknown command" in output
    assert window.wizard.step is Step.CHILDHOOD


def test_window_reports_out_of_range_choice():
    window, output, _ = run_window("s\n9\nq\n")
    assert "out of range" in output
    assert window.wizard.page.selected_index == 0


def test_window_choice_on_greeting_is_rejected():
    window, output, _ = run_window("1\nq\n")
    assert "nothing to choose" in output
    assert window.wizard.step is Step.GREETING


def test_window_back_on_greeting_reported():
    _, output, _ = run_window("b\nq\n")
    assert "no previous screen" in output


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])