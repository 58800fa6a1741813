"""Tests for the showdown script.

Tests cover:
- Result lines for sample input
- Per-line errors with line numbers, processing continues
- Bad count line, short input and undecodable input
- Random dealing mode is reproducible with a seed
- Seeding utilities
"""

import io
import random

import numpy as np
import pytest

from poker_showdown import set_seed
from poker_showdown.rules import Outcome
from poker_showdown.scripts.showdown import (
    LineError,
    Matchup,
    InputFormatError,
    main,
    parse_line,
    read_matchups,
    run,
    run_random,
)
from poker_showdown.utils.seeding import make_rng


SAMPLE_INPUT = """6
AAKKK 23456
KA225 33A47
AA225 44465
TT8A9 TTA89
A2345 23456
QQ2AT QQT2J
"""

SAMPLE_OUTPUT = """FULLHOUSE STRAIGHT a
PAIR PAIR b
TWOPAIR THREEOFAKIND b
PAIR PAIR ab
STRAIGHT STRAIGHT b
PAIR PAIR a
"""


def _run(text):
    out, err = io.StringIO(), io.StringIO()
    stats = run(io.StringIO(text), out=out, err=err)
    return stats, out.getvalue(), err.getvalue()


class TestParseLine:
    def test_valid_line(self):
        item = parse_line("23456 34567\n", 1)
        assert isinstance(item, Matchup)
        assert str(item.left) == "23456"
        assert str(item.right) == "34567"
        assert item.line_number == 1

    def test_missing_left(self):
        item = parse_line("   \n", 4)
        assert isinstance(item, LineError)
        assert item.line_number == 4
        assert "Left hand missing" in item.message

    def test_missing_right(self):
        item = parse_line("23456\n", 2)
        assert isinstance(item, LineError)
        assert "Right hand missing" in item.message

    def test_invalid_left(self):
        item = parse_line("TTTTTT 23456", 3)
        assert isinstance(item, LineError)
        assert item.message == (
            "The left hand of line 3 is invalid: Required 5 characters but found 6."
        )

    def test_invalid_right(self):
        item = parse_line("23456 TTTTX", 1)
        assert isinstance(item, LineError)
        assert item.message == "The right hand of line 1 is invalid: Character 'X' is not valid."


class TestReadMatchups:
    def test_reads_count_lines(self):
        items = list(read_matchups(io.StringIO("1\n23456 34567\n")))
        assert len(items) == 1
        assert isinstance(items[0], Matchup)

    def test_ignores_lines_after_count(self):
        items = list(read_matchups(io.StringIO("1\n23456 34567\n22222 33333\n")))
        assert len(items) == 1

    def test_bad_count(self):
        with pytest.raises(InputFormatError, match="should be a number"):
            list(read_matchups(io.StringIO("two\n23456 34567\n")))

    def test_empty_input(self):
        with pytest.raises(InputFormatError):
            list(read_matchups(io.StringIO("")))

    def test_missing_lines(self):
        reader = read_matchups(io.StringIO("3\n23456 34567\n"))
        assert isinstance(next(reader), Matchup)
        with pytest.raises(InputFormatError, match="Missing lines"):
            next(reader)


class TestRun:
    def test_sample(self):
        stats, out, err = _run(SAMPLE_INPUT)
        assert out == SAMPLE_OUTPUT
        assert err == ""
        assert stats.ok
        assert stats.processed == 6
        assert stats.outcomes[Outcome.LEFT] == 2
        assert stats.outcomes[Outcome.TIE] == 1
        assert stats.outcomes[Outcome.RIGHT] == 3

    def test_bad_line_skipped(self):
        stats, out, err = _run("3\nAAKKK 23456\nTTTTX 23456\nA2345 23456\n")
        assert out == "FULLHOUSE STRAIGHT a\nSTRAIGHT STRAIGHT b\n"
        assert "line 2" in err
        assert "Character 'X' is not valid." in err
        assert not stats.ok
        assert [e.line_number for e in stats.errors] == [2]

    def test_short_input_keeps_earlier_results(self):
        stats, out, err = _run("2\nAAKKK 23456\n")
        assert out == "FULLHOUSE STRAIGHT a\n"
        assert "Missing lines" in err
        assert not stats.ok

    def test_undecodable_input_stops_run(self):
        stream = io.TextIOWrapper(io.BytesIO(b"2\nAAKKK 23456\n\xff\xfe 23456\n"), encoding="utf-8")
        err = io.StringIO()
        stats = run(stream, out=io.StringIO(), err=err)
        assert not stats.ok
        assert stats.errors[-1].line_number == 0
        assert err.getvalue().startswith("io error: ")


class TestRandomMode:
    def test_reproducible(self):
        first, second = io.StringIO(), io.StringIO()
        run_random(5, seed=7, out=first)
        run_random(5, seed=7, out=second)
        assert first.getvalue() == second.getvalue()

    def test_line_format(self):
        out = io.StringIO()
        stats = run_random(3, seed=1, out=out)
        lines = out.getvalue().splitlines()
        assert stats.processed == 3
        assert len(lines) == 3
        for line in lines:
            left, right, left_label, right_label, winner = line.split()
            assert len(left) == 5 and len(right) == 5
            assert winner in {"a", "ab", "b"}


class TestMain:
    def test_file_input(self, tmp_path, capsys):
        path = tmp_path / "hands.txt"
        path.write_text(SAMPLE_INPUT)
        assert main([str(path)]) == 0
        assert capsys.readouterr().out == SAMPLE_OUTPUT

    def test_stdin_input(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("1\nTT8A9 TTA89\n"))
        assert main([]) == 0
        assert capsys.readouterr().out == "PAIR PAIR ab\n"

    def test_errors_exit_nonzero(self, tmp_path, capsys):
        path = tmp_path / "hands.txt"
        path.write_text("1\nTTTTTT 23456\n")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "The left hand of line 1 is invalid" in captured.err

    def test_undecodable_file_reported(self, tmp_path, capsys):
        path = tmp_path / "hands.txt"
        path.write_bytes(b"2\nAAKKK 23456\n\xff\xfe 23456\n")
        assert main([str(path)]) == 1
        assert capsys.readouterr().err != ""

    def test_random(self, capsys):
        assert main(["--random", "4", "--seed", "3"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 4

    def test_random_with_file_rejected(self, tmp_path):
        path = tmp_path / "hands.txt"
        path.write_text(SAMPLE_INPUT)
        with pytest.raises(SystemExit):
            main([str(path), "--random", "2"])


class TestSeeding:
    def test_set_seed_returns_seed(self):
        assert set_seed(42) == 42

    def test_set_seed_generates_seed(self):
        seed = set_seed()
        assert 0 <= seed < 2**32

    def test_set_seed_is_deterministic(self):
        set_seed(123)
        a = (random.random(), np.random.rand())
        set_seed(123)
        b = (random.random(), np.random.rand())
        assert a == b

    def test_make_rng(self):
        assert make_rng(5).integers(0, 1000) == make_rng(5).integers(0, 1000)
