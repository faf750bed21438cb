"""Tests for the movie-file tokenizer."""

from __future__ import annotations

from baconctl.domain.records import (
    ActorRecord,
    MovieRecord,
    iter_records,
    parse_line,
    strip_newline,
)


class TestStripNewline:
    def test_lf(self) -> None:
        assert strip_newline("Tom Hanks\n") == "Tom Hanks"

    def test_crlf(self) -> None:
        assert strip_newline("Tom Hanks\r\n") == "Tom Hanks"

    def test_no_terminator(self) -> None:
        assert strip_newline("Tom Hanks") == "Tom Hanks"

    def test_only_one_terminator_removed(self) -> None:
        assert strip_newline("a\n\n") == "a\n"

    def test_inner_whitespace_kept(self) -> None:
        assert strip_newline("  Tom  Hanks \n") == "  Tom  Hanks "


class TestParseLine:
    def test_movie_line(self) -> None:
        assert parse_line("Movie: Apollo 13\n") == MovieRecord(title="Apollo 13")

    def test_actor_line(self) -> None:
        assert parse_line("Kevin Bacon\n", 3) == ActorRecord(name="Kevin Bacon", line_no=3)

    def test_blank_line(self) -> None:
        assert parse_line("\n") is None
        assert parse_line("") is None

    def test_prefix_requires_space(self) -> None:
        assert parse_line("Movie:Apollo 13") == ActorRecord(name="Movie:Apollo 13")

    def test_prefix_is_case_sensitive(self) -> None:
        assert parse_line("movie: Apollo 13") == ActorRecord(name="movie: Apollo 13")

    def test_empty_title(self) -> None:
        assert parse_line("Movie: ") == MovieRecord(title="")

    def test_title_keeps_later_prefix(self) -> None:
        assert parse_line("Movie: Movie: The Movie") == MovieRecord(title="Movie: The Movie")


class TestIterRecords:
    def test_file_order_and_line_numbers(self) -> None:
        lines = ["Movie: Apollo 13\n", "\n", "Kevin Bacon\n", "Tom Hanks\n"]
        assert list(iter_records(lines)) == [
            MovieRecord(title="Apollo 13", line_no=1),
            ActorRecord(name="Kevin Bacon", line_no=3),
            ActorRecord(name="Tom Hanks", line_no=4),
        ]

    def test_empty_input(self) -> None:
        assert list(iter_records([])) == []
