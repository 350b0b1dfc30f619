"""
Tests for the run_sync_six_engine() facade: date resolution, end-to-end
ranking, determinism and the output contract.
"""

import copy
from datetime import datetime, timezone

from core.invariants import validate_scored_player, validate_sync_six
from syncsix.engine import resolve_event_date, run_sync_six_engine
from syncsix.scoring import ScoringConfig


class TestResolveEventDate:

    def test_top_level_start(self, game_data):
        assert resolve_event_date(game_data) == "2025-10-26T17:00:00Z"

    def test_nested_game_start(self):
        data = {"game": {"date": {"start": "2025-10-26T10:00:00Z"}}}
        assert resolve_event_date(data) == "2025-10-26T10:00:00Z"

    def test_top_level_wins_over_nested(self):
        data = {
            "date": {"start": "2025-10-26T10:00:00Z"},
            "game": {"date": {"start": "2025-11-02T10:00:00Z"}},
        }
        assert resolve_event_date(data) == "2025-10-26T10:00:00Z"

    def test_clock_fallback(self, fixed_clock):
        assert resolve_event_date(None, fixed_clock) == "2025-10-26T12:00:00+00:00"
        assert resolve_event_date({}, fixed_clock) == "2025-10-26T12:00:00+00:00"
        assert resolve_event_date({"date": "2025-11-02"}, fixed_clock) == "2025-10-26T12:00:00+00:00"

    def test_unparseable_start_uses_clock(self, fixed_clock):
        data = {"date": {"start": "kickoff soon"}}
        assert resolve_event_date(data, fixed_clock) == "2025-10-26T12:00:00+00:00"


class TestRunEngine:

    def test_reference_roster(self, roster, game_data):
        ranked = run_sync_six_engine(roster, game_data)

        assert [p["name"] for p in ranked] == ["Cooper", "Al Stone", "Mike Evans"]
        assert [p["score"] for p in ranked] == [35.0, 25.0, 23.0]
        for player in ranked:
            assert player["sync_six"] == [2061, 61, 36, 2035, 2051, 26]

    def test_tom_brady_is_filtered(self, game_data):
        player = {"name": "Tom Brady", "jersey": 12, "dob": "1977-08-03"}
        assert run_sync_six_engine([player], game_data) == []

    def test_jersey_matches_raw_day(self, game_data):
        ranked = run_sync_six_engine([{"name": "Al Stone", "jersey": 26}], game_data)
        assert len(ranked) == 1
        assert ranked[0]["hits"] == ["JERSEY_DATE_MATCH"]
        assert ranked[0]["score"] == 25.0
        assert ranked[0]["category_hit"] == "Jersey-Date"

    def test_two_hits_survive_below_threshold(self, game_data):
        # 17 prime + Cardinals (36) -> 5 + 8 = 13 with 2 hits
        player = {"name": "Joe Burrow", "jersey": 17, "team": "Cardinals"}
        ranked = run_sync_six_engine([player], game_data)
        assert len(ranked) == 1
        assert ranked[0]["score"] == 13.0
        assert ranked[0]["hits"] == ["PRIME_RELATION", "TEAM_GEMATRIA_SYNC"]

    def test_empty_roster(self, game_data, fixed_clock):
        assert run_sync_six_engine([], game_data) == []
        assert run_sync_six_engine([], None, clock=fixed_clock) == []

    def test_no_game_data_uses_clock(self, fixed_clock):
        ranked = run_sync_six_engine([{"name": "Al Stone", "jersey": 26}], None, clock=fixed_clock)
        assert ranked[0]["sync_six"] == [2061, 61, 36, 2035, 2051, 26]

    def test_clock_changes_fingerprint(self):
        clock = lambda: datetime(2025, 11, 2, 12, 0, tzinfo=timezone.utc)
        ranked = run_sync_six_engine([{"name": "Al Stone", "jersey": 2}], None, clock=clock)
        assert ranked[0]["sync_six"][5] == 2
        assert ranked[0]["hits"][0] == "JERSEY_DATE_MATCH"

    def test_custom_config(self, game_data):
        config = ScoringConfig(min_score=40)
        ranked = run_sync_six_engine([{"name": "Al Stone", "jersey": 26}], game_data, config)
        assert ranked == []

    def test_idempotent(self, roster, game_data):
        assert run_sync_six_engine(roster, game_data) == run_sync_six_engine(roster, game_data)

    def test_does_not_mutate_inputs(self, roster, game_data):
        roster_before = copy.deepcopy(roster)
        game_before = copy.deepcopy(game_data)
        run_sync_six_engine(roster, game_data)
        assert roster == roster_before
        assert game_data == game_before

    def test_output_contract(self, roster, game_data):
        ranked = run_sync_six_engine(roster, game_data)
        for player in ranked:
            ok, errors = validate_scored_player(player)
            assert ok, errors
            ok, message = validate_sync_six(player["sync_six"])
            assert ok, message

    def test_display_fields(self, roster, game_data):
        ranked = run_sync_six_engine(roster, game_data)
        cooper = ranked[0]
        assert cooper["position"] == "WR"
        assert cooper["team_name"] == "—"
        assert cooper["date"] == "TBD"
