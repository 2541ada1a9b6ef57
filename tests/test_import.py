"""Tests für den Import der Show-Datei und den Testdaten-Generator."""

import pytest
from pathlib import Path

from data.show_import import (
    ShowImportError, parse_show_line, parse_shows, read_shows, write_shows,
)
from data.fake_data import FakeFestivalGenerator
from models.show import Show


class TestParse:

    def test_parse_line(self):
        assert parse_show_line("show_1 29 33") == Show(title="show_1", start_time=29, end_time=33)

    def test_parse_line_extra_whitespace(self):
        show = parse_show_line("  show_2\t2    9  ")
        assert show.key == ("show_2", 2, 9)

    def test_negative_times(self):
        assert parse_show_line("x -3 -1").key == ("x", -3, -1)

    def test_wrong_token_count(self):
        with pytest.raises(ShowImportError, match="3"):
            parse_show_line("nur_titel 5", line_no=3)

    def test_non_integer_time(self):
        with pytest.raises(ShowImportError):
            parse_show_line("show 1.5 3")

    def test_skips_blank_and_comment_lines(self):
        shows = parse_shows(["# Programm", "", "a 1 2", "   ", "b 3 4"])
        assert [s.title for s in shows] == ["a", "b"]

    def test_error_names_line_number(self):
        with pytest.raises(ShowImportError, match=r"prog\.txt:2"):
            parse_shows(["a 1 2", "b x 4"], source="prog.txt")


class TestReadWrite:

    def test_read_file_keeps_order(self, tmp_path: Path):
        p = tmp_path / "input.txt"
        p.write_text("show_1 29 33\nshow_2 2 9\nshow_3 44 47\n", encoding="utf-8")
        shows = read_shows(p)
        assert [s.title for s in shows] == ["show_1", "show_2", "show_3"]

    def test_read_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_shows(tmp_path / "fehlt.txt")

    def test_read_empty_file(self, tmp_path: Path):
        p = tmp_path / "leer.txt"
        p.write_text("", encoding="utf-8")
        assert read_shows(p) == []

    def test_write_then_read(self, tmp_path: Path):
        shows = [Show(title="a", start_time=1, end_time=4),
                 Show(title="b", start_time=0, end_time=0)]
        p = tmp_path / "out" / "input.txt"
        write_shows(shows, p)
        assert p.read_text(encoding="utf-8") == "a 1 4\nb 0 0\n"
        assert read_shows(p) == shows


class TestFakeData:

    def test_reproducible(self):
        a = FakeFestivalGenerator(seed=1).generate()
        b = FakeFestivalGenerator(seed=1).generate()
        assert a == b

    def test_count_and_bounds(self):
        shows = FakeFestivalGenerator(seed=3, num_shows=30, horizon=20, max_duration=4).generate()
        assert len(shows) == 30
        for s in shows:
            assert 0 <= s.start_time <= 19
            assert 0 <= s.end_time - s.start_time <= 4

    def test_opening_block_overlaps(self):
        shows = FakeFestivalGenerator(seed=5, num_shows=10, opening_shows=3).generate()
        assert [s.start_time for s in shows[:3]] == [0, 0, 0]

    def test_titles_without_whitespace(self):
        for s in FakeFestivalGenerator(seed=9, num_shows=15).generate():
            assert len(s.title.split()) == 1

    def test_titles_unique(self):
        shows = FakeFestivalGenerator(seed=2, num_shows=25).generate()
        assert len({s.title for s in shows}) == 25
