import io
import random

import pytest

from studentlab.translation import (
    TestDate,
    Tester,
    Translation,
    format_score,
    format_testers,
    format_translations,
    main,
    read_testers,
    read_translations,
    score_answers,
    take_test,
    write_testers,
)


def _testers():
    return [
        Tester("Steve Smith", 56.6, TestDate(11, 11, 2019)),
        Tester("Kun Joom", 100.0, TestDate(4, 14, 2022)),
        Tester("Sue Jones", 10.0, TestDate(11, 11, 2011)),
    ]


def test_format_score_one_decimal():
    assert format_score(10) == "10.0"
    assert format_score(56.6) == "56.6"


def test_format_testers_row_matches_layout():
    text = format_testers(_testers())
    lines = text.splitlines()
    assert "1  Steve Smith         56.6           11/11/2019" in lines
    assert lines[2] == "#  NAME                SCORE %        TEST TAKEN"


def test_format_translations_row():
    text = format_translations([Translation("chips", "crisps")])
    assert "1  chips.............crisps" in text.splitlines()


def test_write_testers_format(tmp_path):
    path = tmp_path / "Testers.txt"
    write_testers(path, _testers())
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "3"
    assert lines[1:3] == ["Steve Smith", "56.6,11/11/2019"]
    assert lines[4] == "100,4/14/2022"


def test_testers_round_trip(tmp_path):
    path = tmp_path / "Testers.txt"
    write_testers(path, _testers())
    assert read_testers(path) == _testers()


def test_read_testers_truncates_long_names(tmp_path):
    path = tmp_path / "Testers.txt"
    path.write_text("1\n" + "x" * 30 + "\n5,1/2/2020\n", encoding="utf-8")
    (tester,) = read_testers(path)
    assert len(tester.name) == 19
    assert tester.test_taken == TestDate(1, 2, 2020)


def test_read_testers_too_few_records(tmp_path):
    path = tmp_path / "Testers.txt"
    path.write_text("2\nSue Jones\n10,11/11/2011\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_testers(path)


def test_read_translations_keeps_rest_of_line(tmp_path):
    path = tmp_path / "Translation.txt"
    path.write_text("2\nlast name,surname\nfrench fries,chips\n", encoding="utf-8")
    assert read_translations(path) == [
        Translation("last name", "surname"),
        Translation("french fries", "chips"),
    ]


def test_read_translations_missing_comma(tmp_path):
    path = tmp_path / "Translation.txt"
    path.write_text("1\nnocomma\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_translations(path)


def test_score_answers():
    assert score_answers(5, 5) == 100.0
    assert score_answers(0, 5) == 0.0
    with pytest.raises(ValueError):
        score_answers(1, 0)
    with pytest.raises(ValueError):
        score_answers(6, 5)


def test_take_test_all_correct():
    out = io.StringIO()
    score = take_test([Translation("elevator", "lift")], 5, lambda: "lift", out, random.Random(0))
    assert score == 100.0
    assert out.getvalue().count("Correct!") == 5


def test_take_test_mixed_answers():
    answers = iter(["lift", "x", "lift", "x", "lift"])
    out = io.StringIO()
    score = take_test([Translation("elevator", "lift")], 5, lambda: next(answers), out, random.Random(0))
    assert score == 60.0
    assert "Answer: lift" in out.getvalue()


def test_take_test_needs_translations():
    with pytest.raises(ValueError):
        take_test([], 5, lambda: "", io.StringIO(), random.Random(0))


def test_main_updates_testers(tmp_path, monkeypatch):
    translations = tmp_path / "Translation.txt"
    translations.write_text("2\ncandy,same\ngas,same\n", encoding="utf-8")
    testers = tmp_path / "Testers.txt"
    original = _testers()
    write_testers(testers, original)
    answers = "\n".join(["N", "4", "14", "2022"] + ["same"] * 15) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(answers))
    result = main(["--translations", str(translations), "--testers", str(testers), "--seed", "3"])
    assert result == 0
    updated = read_testers(testers)
    assert len(updated) == len(original)
    taken = [t for t in updated if t.test_taken == TestDate(4, 14, 2022)]
    assert taken
    assert all(t.score == 100.0 for t in taken)


def test_main_missing_file(tmp_path, capsys):
    result = main(["--translations", str(tmp_path / "none.txt"), "--testers", str(tmp_path / "x.txt")])
    assert result == 1
    assert "Unable to open file" in capsys.readouterr().err