# studentlab

A collection of small interactive console programs for everyday record
keeping: sorting and searching a name list, summarising a survey, counting
words, describing a sentence, managing a speakers' bureau, keeping an
employee list, running a vocabulary test and tracking sports teams.

Every program runs from the command line, and the functions and classes
behind it can be imported and used on their own.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `studentlab-names [PATH]` | Reads ten names from `PATH` (default `StudentNames.txt`), sorts them up and down with bubble and selection sort, and finds a name by linear and binary search. |
| `studentlab-survey` | Asks how many students were surveyed (1-5000), collects each name and number of matches played, then shows the list, the student with the most matches, the average and the list sorted by name. |
| `studentlab-wordcount` | Reads three lines that must end with a period and prints how many words each holds. |
| `studentlab-textstats [SENTENCE]` | Reports length, letter, digit and case counts, some characters and the positions of the first two `s` characters of a sentence. |
| `studentlab-speakers` | Enters up to ten speakers, updates one, shows one by name, lists the speakers on a topic and then all speakers. |
| `studentlab-employees [PATH]` | Shows the employee table from `PATH` (default `Employees.txt`); on request, adds new employees and writes the whole list back to the file. |
| `studentlab-translate` | Runs an American-to-English vocabulary test (five questions each) for three randomly chosen testers and saves their scores and dates to the tester text file. Options: `--translations` (default `Translation.txt`), `--testers` (default `Testers.txt`), `--seed`. |
| `studentlab-convert-testers [TEXT] [BINARY]` | Copies the testers from a text file (default `Testers.txt`) into a fixed-record binary file (default `Testers.dat`). |
| `studentlab-translate-binary` | Runs the test (ten questions each) against the binary tester file, updating each chosen record in place. Options: `--translations` (default `Translation.txt`), `--testers` (default `Testers.dat`), `--seed`. |
| `studentlab-sports` | Asks for a number of sports, each with an optional next game date and its teams, then offers a menu to list all sports, add a team, show one sport and show the sports with the most teams. |

Default file names are relative, so they are looked up in the current
working directory.

### File formats

- Names file: one name per line.
- Employee file: a count line, then `name,age,month/day/year` per employee.
- Translation file: a count line, then `american,english` per word.
- Tester text file: a count line, then two lines per tester: the name, and
  `score,month/day/year`.
- Tester binary file: a 4-byte little-endian count followed by fixed-size
  records (`studentlab.testerbinary.RECORD_SIZE` bytes each) holding a name of
  up to 19 bytes, the score and the test date.

## Using the library

```python
from studentlab.wordcount import count_words
from studentlab.date import days_in_month
from studentlab.namesearch import binary_search, selection_sort

count_words("This contains a name,address, and phone number.")  # 8
days_in_month(2, 2024)                                           # 29

names = selection_sort(["Song, Mona", "Li, Na", "Evans, Olivia"])
binary_search(names, "Li, Na")                                   # 1
```

Some of the other entry points:

- `studentlab.namesearch`: `read_names`, `linear_search`, `binary_search`,
  `bubble_sort`, `selection_sort` (both take `reverse=True` for descending order).
- `studentlab.survey`: `StudentRecord`, `most_matches`, `mean_matches`, `sort_by_name`.
- `studentlab.textstats`: `analyze`, `format_stats`.
- `studentlab.speakers`: `Speaker`, `SpeakerBureau` with `add`, `find`,
  `with_topic` and `replace`.
- `studentlab.employees`: `read_employees`, `write_employees`, `format_employees`.
- `studentlab.translation`: `read_translations`, `read_testers`,
  `write_testers`, `score_answers`, `take_test`.
- `studentlab.testerbinary`: `write_binary`, `read_binary`, `update_record`, `convert`.
- `studentlab.date`: `Date`, `input_date`.
- `studentlab.sport` and `studentlab.sports_app`: `Sport`, `find_sport`,
  `sports_with_most_teams`, `run_menu`.

Interactive helpers such as `input_date`, `populate_sport`, `take_test` and
`run_menu` take a `reader` (a callable returning one line of input) and an
output stream, so they can be driven from code as well as from a terminal.

## What it does not do

- The survey, speakers' bureau and sports programs keep everything in memory;
  nothing they collect is saved when they exit.
- The speakers' command holds at most ten speakers; a larger bureau is only
  available by building a `SpeakerBureau` with another capacity in code.
- Leap years are taken as every fourth year, and game dates are accepted only
  for the years 2022 to 2100.