# lifesurvey

A small quick-questionnaire about the periods of life. A greeting screen
leads through three questions, one for each period:

1. **Childhood**: the favourite porridge, a single choice among four options.
2. **School**: how you did in fifth grade, a check list in which exactly one
   box stays ticked.
3. **Youth**: your level of education, a single choice from a list.

The last screen shows a table of each question with its answer. Every
question screen can go back to the one before, as it was left.

## Installation

```
pip install .
```

There are no dependencies beyond the standard library.

## Running

```
lifesurvey
```

The survey runs in the terminal. Each screen is printed with its options;
the chosen one is marked with `*`. Type a command and press Enter:

| Command | Effect                                          |
|---------|-------------------------------------------------|
| `s`     | start the survey from the greeting              |
| `1`–`9` | choose the option with that number              |
| `n`     | store the current answer and go to the next screen |
| `b`     | go back to the previous screen                  |
| `q`     | quit                                            |

End of input also quits. An unknown command or an option out of range prints
a line starting with `!` and the screen is shown again.

## Using it as a library

The survey logic works on its own. `SurveyState` (in `lifesurvey.state`)
keeps the questions and answers as delimiter-joined strings (the delimiter is
`,` by default), and gives each page a fixed slot: `childhood_index`,
`school_index` and `youth_index`. `SurveyState.record(question, answer, index)`
stores an answer in a slot:

- if the question is already stored, only the answer in that slot is replaced;
- if the same answer text is already stored anywhere, nothing changes;
- otherwise the slot is replaced, or appended if it is the next free one.

The page classes `ChildhoodPage`, `SchoolPage` and `YouthPage` hold the
current choice on each screen (`select`, or `toggle` for the school page)
and write it into the state with `commit`. `ResultsTable.from_state` builds
the final table; `clean_text` removes `&` mnemonic markers from labels.

```python
from lifesurvey.state import SurveyState
from lifesurvey.childhood import ChildhoodPage
from lifesurvey.results import ResultsTable

state = SurveyState()
page = ChildhoodPage()
page.select(1)
page.commit(state)

table = ResultsTable.from_state(state)
print(table.rows)  # [('Выберите любимую кашу', 'Рисовая')]
```

`Wizard` in `lifesurvey.app` moves between the screens (`Step`) with
`start`, `next`, `back` and `close`. `SurveyWindow(stdin, stdout).run()`
drives a `Wizard` from text commands; `main()` runs it on the terminal.

## What it does not do

- There is no graphical window; the survey is text only.
- Answers are kept in memory for the session and are not saved anywhere.

## Tests

```
pip install .[test]
python -m pytest
```