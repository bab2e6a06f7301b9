"""Tests for the in-memory route history adapter."""

from datetime import datetime, timedelta, timezone

import pytest

from smart_route.adapters.history import InMemoryRouteHistory
from smart_route.domain.models import RouteTrend


class TestInMemoryRouteHistory:
    """Test suite for InMemoryRouteHistory."""

    @pytest.fixture
    def history(self):
        return InMemoryRouteHistory(recent_limit=3)

    def test_record_returns_stored_entry(self, history):
        when = datetime(2024, 1, 1, tzinfo=timezone.utc)
        entry = history.record("A", "D", 3.0, time=when)

        assert entry.start == "A"
        assert entry.end == "D"
        assert entry.total == 3.0
        assert entry.time == when
        assert len(history) == 1

    def test_record_defaults_to_utc_now(self, history):
        entry = history.record("A", "D", 3.0)
        assert entry.time.tzinfo is timezone.utc
        assert datetime.now(timezone.utc) - entry.time < timedelta(minutes=1)

    def test_recent_is_newest_first_and_limited(self, history):
        for i, end in enumerate("BCDE"):
            history.record("A", end, float(i))

        assert [r.end for r in history.recent()] == ["E", "D", "C"]
        assert [r.end for r in history.recent(limit=10)] == ["E", "D", "C", "B"]
        assert history.recent(limit=0) == []

    def test_trends_group_by_route(self, history):
        history.record("A", "D", 3.0)
        history.record("A", "E", 4.0)
        history.record("A", "D", 4.0)
        history.record("A", "D", 4.0)

        assert history.trends() == [
            RouteTrend(start="A", end="D", average=3.67, samples=3),
            RouteTrend(start="A", end="E", average=4.0, samples=1),
        ]

    def test_trends_are_direction_sensitive(self, history):
        history.record("A", "D", 3.0)
        history.record("D", "A", 5.0)

        labels = [t.label for t in history.trends()]
        assert labels == ["A→D", "D→A"]

    def test_max_entries_evicts_oldest(self):
        history = InMemoryRouteHistory(max_entries=2)
        history.record("A", "B", 1.0)
        history.record("A", "C", 2.0)
        history.record("A", "D", 3.0)

        assert len(history) == 2
        assert [r.end for r in history.recent()] == ["D", "C"]

    def test_clear(self, history):
        history.record("A", "D", 3.0)
        history.record("A", "E", 4.0)

        assert history.clear() == 2
        assert len(history) == 0
        assert history.trends() == []
        assert history.clear() == 0
