"""Tests for movie-file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from baconctl.domain.records import ActorRecord, MovieRecord
from baconctl.infrastructure.movie_file import build_graph, load_movie_file


class TestBuildGraph:
    def test_actors_attach_to_latest_movie(self) -> None:
        store = build_graph(
            [
                MovieRecord("Apollo 13"),
                ActorRecord("Kevin Bacon"),
                MovieRecord("Big"),
                ActorRecord("Tom Hanks"),
            ]
        )
        kevin = store.find_actor("Kevin Bacon")
        tom = store.find_actor("Tom Hanks")
        assert kevin is not None and tom is not None
        assert [m.title for m in store.movies_of(kevin)] == ["Apollo 13"]
        assert [m.title for m in store.movies_of(tom)] == ["Big"]

    def test_actor_before_any_movie_is_orphaned(self) -> None:
        store = build_graph([ActorRecord("Lonely"), MovieRecord("Big"), ActorRecord("Tom Hanks")])
        lonely = store.find_actor("Lonely")
        assert lonely is not None
        assert store.movies_of(lonely) == []

    def test_duplicate_titles_not_merged(self) -> None:
        store = build_graph(
            [MovieRecord("Apollo 13"), ActorRecord("A"), MovieRecord("Apollo 13"), ActorRecord("B")]
        )
        assert store.movie_count == 2
        a = store.find_actor("A")
        b = store.find_actor("B")
        assert a is not None and b is not None
        assert store.movies_of(a)[0] != store.movies_of(b)[0]

    def test_movie_without_cast(self) -> None:
        store = build_graph([MovieRecord("Empty")])
        assert store.movie_count == 1
        assert store.actor_count == 0


class TestLoadMovieFile:
    def test_loads_file(self, movie_file: Path) -> None:
        store = load_movie_file(movie_file)
        assert store.actor_count == 3
        assert store.movie_count == 2

    def test_crlf_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"Movie: Big\r\nTom Hanks\r\n\r\n")
        store = load_movie_file(path)
        assert store.find_actor("Tom Hanks") is not None
        assert [m.title for m in store.movies()] == ["Big"]

    def test_undecodable_bytes_kept(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"Movie: Am\xe9lie\nAudrey Tautou\n")
        store = load_movie_file(path)
        assert [m.title for m in store.movies()] == ["Am\udce9lie"]
        assert "Am\udce9lie".encode("utf-8", "surrogateescape") == b"Am\xe9lie"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_movie_file(tmp_path / "nope.txt")
