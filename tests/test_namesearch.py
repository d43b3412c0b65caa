import io

import pytest

from studentlab.namesearch import (
    binary_search,
    bubble_sort,
    format_names,
    format_search_result,
    linear_search,
    main,
    read_names,
    selection_sort,
)

NAMES = [
    "Smith, John",
    "Song, Mona",
    "Jones, Trevor",
    "Li, Na",
    "Zhang, Xiu Ying",
    "Saleem, Mohammad",
    "Lloyd, Arthur",
    "Jones, Rhys",
    "Evans, Olivia",
    "Davies, Emily",
]

ASCENDING = [
    "Davies, Emily",
    "Evans, Olivia",
    "Jones, Rhys",
    "Jones, Trevor",
    "Li, Na",
    "Lloyd, Arthur",
    "Saleem, Mohammad",
    "Smith, John",
    "Song, Mona",
    "Zhang, Xiu Ying",
]


@pytest.fixture
def names_file(tmp_path):
    path = tmp_path / "StudentNames.txt"
    path.write_text("\n".join(NAMES) + "\n", encoding="utf-8")
    return path


def test_read_names(names_file):
    assert read_names(names_file) == NAMES


def test_read_names_pads_short_file(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("Li, Na\n", encoding="utf-8")
    assert read_names(path, 3) == ["Li, Na", "", ""]


def test_read_names_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_names(tmp_path / "absent.txt")


def test_format_names():
    assert format_names(NAMES[:2]) == "\t1  Smith, John\n\t2  Song, Mona\n"


def test_linear_search():
    assert linear_search(NAMES, "Smith, John") == 0
    assert linear_search(ASCENDING, "Smith, John") == 7
    assert linear_search(NAMES, "Ragland, Nicholas") is None


def test_bubble_sort_both_orders():
    assert bubble_sort(NAMES) == ASCENDING
    assert bubble_sort(NAMES, reverse=True) == ASCENDING[::-1]


def test_selection_sort_both_orders():
    assert selection_sort(NAMES) == ASCENDING
    assert selection_sort(NAMES, reverse=True) == ASCENDING[::-1]


def test_sorts_do_not_mutate_input():
    original = list(NAMES)
    bubble_sort(NAMES)
    selection_sort(NAMES, reverse=True)
    assert NAMES == original


@pytest.mark.parametrize("sort", [bubble_sort, selection_sort])
def test_sorts_match_sorted_with_duplicates(sort):
    data = ["b", "a", "c", "a", "b", "", "z"]
    assert sort(data) == sorted(data)
    assert sort(data, reverse=True) == sorted(data, reverse=True)


def test_binary_search_finds_every_name():
    for index, name in enumerate(ASCENDING):
        assert binary_search(ASCENDING, name) == index


def test_binary_search_missing():
    assert binary_search(ASCENDING, "Ragland, Nicholas") is None
    assert binary_search([], "Li, Na") is None


def test_format_search_result():
    assert format_search_result(0) == "\nName Found: 1\n"
    assert format_search_result(None) == "-1\nName Not Found\n"


def test_main_reports_positions(names_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Smith, John\nSong, Mona\n"))
    assert main([str(names_file)]) == 0
    output = capsys.readouterr().out
    assert "Name Found: 1\n" in output
    assert "Name Found: 8\n" in output
    assert "Name Found: 3\n" in output
    assert "Name Found: 9\n" in output
    assert "Name Found: 2\n" in output


def test_main_reports_missing_name(names_file, monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.stdin", io.StringIO("Ragland, Nicholas\nRagland, Nicholas\n")
    )
    main([str(names_file)])
    captured = capsys.readouterr()
    assert captured.err.count("Name Not Found") == 5
    assert "Name Found" not in captured.out