import io

import pytest

from studentlab.date import Date, days_in_month, input_date


def make_reader(lines):
    items = iter(lines)

    def read():
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    return read


def test_default_date_is_first_of_january_2000():
    date = Date()
    assert (date.day, date.month, date.year) == (1, 1, 2000)
    assert str(date) == "1/1/2000"


def test_str_is_month_day_year():
    assert str(Date(day=8, month=7, year=2022)) == "7/8/2022"


@pytest.mark.parametrize(
    "month, year, expected",
    [
        (1, 2022, 31),
        (12, 2022, 31),
        (4, 2022, 30),
        (11, 2022, 30),
        (2, 2024, 29),
        (2, 2023, 28),
    ],
)
def test_days_in_month(month, year, expected):
    assert days_in_month(month, year) == expected


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        days_in_month(month, 2022)


def test_input_date_accepts_valid_entries():
    out = io.StringIO()
    date = input_date(make_reader(["2022", "7", "8"]), out)
    assert date == Date(day=8, month=7, year=2022)
    assert "Invalid" not in out.getvalue()


def test_input_date_reprompts_until_valid():
    out = io.StringIO()
    reader = make_reader(["1901", "2024", "15", "2", "-13", "29"])
    date = input_date(reader, out)
    assert date == Date(day=29, month=2, year=2024)
    text = out.getvalue()
    assert "Enter Year(2022- ): " in text
    assert "Enter Month(1-12): " in text
    assert "Enter Day(1-29): " in text
    assert text.count("Invalid") == 3


def test_input_date_rejects_leap_day_in_common_year():
    out = io.StringIO()
    date = input_date(make_reader(["2023", "2", "29", "28"]), out)
    assert date.day == 28
    assert "Enter Day(1-28): " in out.getvalue()


def test_input_date_reprompts_on_non_numeric_entry():
    out = io.StringIO()
    date = input_date(make_reader(["soon", "2030", "4", "thirty", "30"]), out)
    assert date == Date(day=30, month=4, year=2030)
    assert out.getvalue().count("Invalid") == 2


def test_input_date_propagates_end_of_input():
    with pytest.raises(EOFError):
        input_date(make_reader(["2022"]), io.StringIO())