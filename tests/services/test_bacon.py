"""Tests for BaconService.score()."""

from __future__ import annotations

from baconctl.infrastructure.graph.store import GraphStore
from baconctl.services.bacon import DEFAULT_REFERENCE, BaconService
from baconctl.services.telemetry import enable_telemetry
from tests.conftest import build_store


class TestScore:
    def test_found_with_path(self, apollo_store: GraphStore) -> None:
        result = BaconService(apollo_store).score("Sally Field")
        assert result.ok
        assert result.op == "score"
        assert result.data == {
            "query": "Sally Field",
            "reference": "Kevin Bacon",
            "score": 2,
            "path": [
                {"actor": "Sally Field", "movie": "Forrest Gump"},
                {"actor": "Tom Hanks", "movie": "Apollo 13"},
            ],
        }

    def test_reference_scores_zero(self, apollo_store: GraphStore) -> None:
        result = BaconService(apollo_store).score(DEFAULT_REFERENCE)
        assert result.ok
        assert result.data["score"] == 0
        assert result.data["path"] == []

    def test_unknown_actor_is_error(self, apollo_store: GraphStore) -> None:
        result = BaconService(apollo_store).score("Unknown Person")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_SUCH_ACTOR"
        assert result.error.message == "No actor named Unknown Person entered"

    def test_unreachable_is_ok_without_score(self) -> None:
        store = build_store([("Apollo 13", ["Kevin Bacon"]), ("Big", ["Tom Hanks"])])
        result = BaconService(store).score("Tom Hanks")
        assert result.ok
        assert result.data["score"] is None
        assert result.data["path"] == []

    def test_missing_reference_is_unreachable(self) -> None:
        store = build_store([("Big", ["Tom Hanks"])])
        result = BaconService(store).score("Tom Hanks")
        assert result.ok
        assert result.data["score"] is None

    def test_custom_reference(self, apollo_store: GraphStore) -> None:
        result = BaconService(apollo_store, reference="Tom Hanks").score("Sally Field")
        assert result.data["score"] == 1
        assert result.data["reference"] == "Tom Hanks"

    def test_idempotent(self, apollo_store: GraphStore) -> None:
        svc = BaconService(apollo_store)
        assert svc.score("Sally Field") == svc.score("Sally Field")

    def test_no_meta_when_telemetry_disabled(self, apollo_store: GraphStore) -> None:
        assert BaconService(apollo_store).score("Tom Hanks").meta is None

    def test_telemetry_meta_when_enabled(self, apollo_store: GraphStore) -> None:
        enable_telemetry()
        result = BaconService(apollo_store).score("Sally Field")
        assert result.meta is not None
        span = result.meta["telemetry"]
        assert span["name"] == "BaconService.score"
        child_names = [c["name"] for c in span["children"]]
        assert child_names == ["bfs", "reconstruct_path"]
        assert span["children"][0]["annotations"]["explored"] == 3
