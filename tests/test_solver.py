"""Tests für die greedy Track-Zuweisung."""

import random
from collections import Counter

import pytest

from models.show import Show, ScheduledShow
from solver.scheduler import TrackScheduler, TrackSchedule, schedule
from export.helpers import max_concurrent


# ─── Hilfsfunktionen ──────────────────────────────────────────────────────────

def make_shows(*rows: tuple[str, int, int]) -> list[Show]:
    return [Show(title=t, start_time=s, end_time=e) for t, s, e in rows]


def random_shows(seed: int, n: int = 40, horizon: int = 30, max_len: int = 6) -> list[Show]:
    rng = random.Random(seed)
    shows = []
    for i in range(n):
        start = rng.randint(0, horizon)
        shows.append(Show(title=f"s{i}", start_time=start,
                          end_time=start + rng.randint(0, max_len)))
    return shows


def track_of(scheduled: list[ScheduledShow], title: str) -> int:
    return next(s.track for s in scheduled if s.title == title)


SCENARIO_A = make_shows(
    ("s1", 29, 33),
    ("s2", 2, 9),
    ("s3", 44, 47),
    ("s4", 26, 30),
    ("s5", 15, 20),
)


# ─── Szenarien ────────────────────────────────────────────────────────────────

class TestScenarios:

    def test_scenario_a_order_and_tracks(self):
        """Sortierung nach Start, zwei Tracks, s1 überschneidet s4."""
        scheduled, track_count = schedule(SCENARIO_A)
        assert [s.title for s in scheduled] == ["s2", "s5", "s4", "s1", "s3"]
        assert track_count == 2
        assert track_of(scheduled, "s2") == 1
        assert track_of(scheduled, "s5") == 1
        assert track_of(scheduled, "s4") == 1
        assert track_of(scheduled, "s1") == 2

    def test_scenario_a_latest_ending_track_wins(self):
        """s3 (44) passt auf beide Tracks; Track 2 endet später (33 > 30)."""
        scheduled, _ = schedule(SCENARIO_A)
        assert track_of(scheduled, "s3") == 2

    def test_empty_input(self):
        assert schedule([]) == ([], 0)

    def test_all_overlapping(self):
        """Drei Shows [0,10] → drei Tracks."""
        scheduled, track_count = schedule(make_shows(("a", 0, 10), ("b", 0, 10), ("c", 0, 10)))
        assert track_count == 3
        assert [s.track for s in scheduled] == [1, 2, 3]

    def test_tie_on_start_keeps_input_order(self):
        """Gleiche Startzeit: erste Show der Eingabe bekommt Track 1."""
        scheduled, track_count = schedule(make_shows(("late", 5, 9), ("early", 5, 6)))
        assert track_count == 2
        assert [s.title for s in scheduled] == ["late", "early"]
        assert track_of(scheduled, "late") == 1
        assert track_of(scheduled, "early") == 2

    def test_single_show(self):
        scheduled, track_count = schedule(make_shows(("solo", 3, 3)))
        assert track_count == 1
        assert scheduled[0].track == 1


# ─── Belegungsmodell ──────────────────────────────────────────────────────────

class TestOccupancy:

    def test_start_equal_to_end_needs_new_track(self):
        """Show bis Tick 9 belegt Tick 9: Start bei 9 braucht einen neuen Track."""
        _, track_count = schedule(make_shows(("a", 2, 9), ("b", 9, 12)))
        assert track_count == 2

    def test_start_after_end_reuses_track(self):
        scheduled, track_count = schedule(make_shows(("a", 2, 9), ("b", 10, 12)))
        assert track_count == 1
        assert track_of(scheduled, "b") == 1

    def test_zero_length_shows_same_tick(self):
        _, track_count = schedule(make_shows(("a", 4, 4), ("b", 4, 4)))
        assert track_count == 2

    def test_equal_end_times_lowest_index(self):
        """Zwei freie Tracks mit gleicher end_time → kleinerer Index."""
        shows = make_shows(("a", 0, 5), ("b", 0, 5), ("c", 10, 12))
        scheduled, track_count = schedule(shows)
        assert track_count == 2
        assert track_of(scheduled, "c") == 1

    def test_prefers_latest_available_end(self):
        """Von mehreren freien Tracks wird der zuletzt frei gewordene gewählt."""
        shows = make_shows(("a", 0, 2), ("b", 0, 6), ("c", 0, 4), ("d", 10, 11))
        scheduled, _ = schedule(shows)
        assert track_of(scheduled, "d") == 2

    def test_busy_tracks_are_skipped(self):
        """Nur Tracks mit end_time < start_time kommen in Frage."""
        shows = make_shows(("a", 0, 20), ("b", 0, 3), ("c", 5, 8))
        scheduled, track_count = schedule(shows)
        assert track_count == 2
        assert track_of(scheduled, "c") == 2


# ─── Eigenschaften ────────────────────────────────────────────────────────────

class TestProperties:

    @pytest.mark.parametrize("seed", range(10))
    def test_completeness(self, seed: int):
        shows = random_shows(seed)
        scheduled, _ = schedule(shows)
        assert len(scheduled) == len(shows)
        assert Counter(s.key for s in scheduled) == Counter(s.key for s in shows)

    @pytest.mark.parametrize("seed", range(10))
    def test_no_overlap_on_track(self, seed: int):
        scheduled, track_count = schedule(random_shows(seed))
        for track in range(1, track_count + 1):
            on_track = [s for s in scheduled if s.track == track]
            for i, a in enumerate(on_track):
                for b in on_track[i + 1:]:
                    assert a.end_time < b.start_time or b.end_time < a.start_time

    @pytest.mark.parametrize("seed", range(10))
    def test_minimal_track_count(self, seed: int):
        shows = random_shows(seed)
        scheduled, track_count = schedule(shows)
        assert track_count == max_concurrent(shows)
        assert max(s.track for s in scheduled) == track_count

    def test_deterministic(self):
        shows = random_shows(7)
        assert schedule(shows) == schedule(list(shows))

    def test_output_sorted_by_start(self):
        scheduled, _ = schedule(random_shows(3))
        starts = [s.start_time for s in scheduled]
        assert starts == sorted(starts)

    def test_input_not_modified(self):
        shows = list(SCENARIO_A)
        schedule(shows)
        assert shows == SCENARIO_A

    def test_accepts_generator(self):
        scheduled, track_count = schedule(s for s in SCENARIO_A)
        assert len(scheduled) == 5
        assert track_count == 2


# ─── TrackSchedule / TrackScheduler ───────────────────────────────────────────

class TestTrackSchedule:

    def test_solver_wraps_schedule(self):
        result = TrackScheduler().solve(SCENARIO_A)
        scheduled, track_count = schedule(SCENARIO_A)
        assert result.shows == scheduled
        assert result.track_count == track_count

    def test_get_track_shows_keeps_order(self):
        result = TrackScheduler().solve(SCENARIO_A)
        assert [s.title for s in result.get_track_shows(1)] == ["s2", "s5", "s4"]
        assert [s.title for s in result.get_track_shows(2)] == ["s1", "s3"]

    def test_time_range(self):
        result = TrackScheduler().solve(SCENARIO_A)
        assert result.time_range() == (2, 47)
        assert TrackScheduler().solve([]).time_range() is None

    def test_tracks(self):
        assert list(TrackScheduler().solve(SCENARIO_A).tracks()) == [1, 2]
        assert list(TrackScheduler().solve([]).tracks()) == []

    def test_save_load_json(self, tmp_path):
        result = TrackScheduler().solve(SCENARIO_A)
        p = tmp_path / "result.json"
        result.save_json(p)

        loaded = TrackSchedule.load_json(p)
        assert loaded.track_count == result.track_count
        assert loaded.shows == result.shows

    def test_load_json_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TrackSchedule.load_json(tmp_path / "fehlt.json")

    def test_scheduled_show_is_frozen(self):
        scheduled, _ = schedule(SCENARIO_A)
        with pytest.raises(Exception):
            scheduled[0].track = 5

    def test_track_must_be_positive(self):
        with pytest.raises(ValueError):
            ScheduledShow(title="x", start_time=0, end_time=1, track=0)
