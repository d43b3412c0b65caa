import io

import pytest

from studentlab.date import Date
from studentlab.sport import Sport
from studentlab.sports_app import (
    find_sport,
    format_sport_listing,
    run_menu,
    sports_with_most_teams,
)


def make_reader(lines):
    iterator = iter(lines)

    def read():
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture
def sports():
    return [
        Sport("Baseball", Date(day=8, month=7, year=2022), ["Cardinals", "Cubs"]),
        Sport("Hockey", Date(day=29, month=2, year=2024), ["Blues", "Penguins", "Red Wings"]),
        Sport("Football", Date(), ["Rams", "Patriots"]),
    ]


def test_find_sport_returns_matching_sport(sports):
    assert find_sport(sports, "Hockey") is sports[1]


def test_find_sport_returns_none_when_missing(sports):
    assert find_sport(sports, "Soccer") is None


def test_find_sport_returns_first_of_duplicates():
    first = Sport("test", teams=["a"])
    second = Sport("test", teams=["b"])
    assert find_sport([first, second], "test") is first


def test_most_teams_single_winner(sports):
    result = sports_with_most_teams(sports)
    assert [number for number, _ in result] == [2]
    assert result[0][1] is sports[1]


def test_most_teams_ties_listed_in_order(sports):
    sports[0].add_team("Yankees")
    result = sports_with_most_teams(sports)
    assert [number for number, _ in result] == [1, 2]


def test_most_teams_empty():
    assert sports_with_most_teams([]) == []


def test_format_sport_listing(sports):
    text = format_sport_listing(3, sports[2])
    assert text == "\n\tSport 3\n" + sports[2].format()


def test_menu_exit_immediately(sports):
    out = io.StringIO()
    run_menu(sports, make_reader(["e"]), out)
    assert out.getvalue().count("Enter Your Choice: ") == 1


def test_menu_display_all(sports):
    out = io.StringIO()
    run_menu(sports, make_reader(["a", "e"]), out)
    text = out.getvalue()
    for number, sport in enumerate(sports, start=1):
        assert format_sport_listing(number, sport) in text


def test_menu_add_team(sports):
    out = io.StringIO()
    run_menu(sports, make_reader(["b", "Baseball", "Yankees", "e"]), out)
    assert sports[0].teams == ["Cardinals", "Cubs", "Yankees"]
    assert sports[1].teams == ["Blues", "Penguins", "Red Wings"]


def test_menu_add_team_invalid_then_back(sports):
    out = io.StringIO()
    run_menu(sports, make_reader(["b", "Soccer", "Y", "e"]), out)
    assert "\n\tInvalid Name\n" in out.getvalue()
    assert [len(sport.teams) for sport in sports] == [2, 3, 2]


def test_menu_add_team_invalid_then_retry(sports):
    out = io.StringIO()
    run_menu(sports, make_reader(["b", "Soccer", "N", "Football", "Chiefs", "e"]), out)
    assert sports[2].teams[-1] == "Chiefs"


def test_menu_display_particular(sports):
    out = io.StringIO()
    run_menu(sports, make_reader(["c", "Football", "e"]), out)
    text = out.getvalue()
    assert format_sport_listing(3, sports[2]) in text
    assert format_sport_listing(1, sports[0]) not in text


def test_menu_display_highest(sports):
    out = io.StringIO()
    run_menu(sports, make_reader(["d", "e"]), out)
    text = out.getvalue()
    assert format_sport_listing(2, sports[1]) in text
    assert format_sport_listing(1, sports[0]) not in text


def test_menu_invalid_choice_reports_error(sports):
    out = io.StringIO()
    run_menu(sports, make_reader(["w", "e"]), out)
    assert "\n\tError: Invalid Entry\n" in out.getvalue()


def test_menu_choice_is_case_insensitive(sports):
    out = io.StringIO()
    run_menu(sports, make_reader(["B", "Hockey", "Stars", "E"]), out)
    assert sports[1].teams[-1] == "Stars"


def test_menu_stops_at_end_of_input(sports):
    out = io.StringIO()
    run_menu(sports, make_reader(["a"]), out)
    assert out.getvalue().count("Enter Your Choice: ") == 2