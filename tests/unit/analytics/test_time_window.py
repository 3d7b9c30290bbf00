"""Tests for the time window builder."""

import datetime

from lifetrack.analytics.time_window import bucket_by_day, build_window

D = datetime.date


class TestBuildWindow:
    def test_seven_days_ending_at_reference(self):
        window = build_window(D(2026, 3, 15), 7)
        assert window[0] == D(2026, 3, 9)
        assert window[-1] == D(2026, 3, 15)
        assert len(window) == 7

    def test_ascending_consecutive_days(self):
        window = build_window(D(2026, 3, 15), 7)
        gaps = {(b - a).days for a, b in zip(window, window[1:])}
        assert gaps == {1}

    def test_crosses_month_boundary(self):
        window = build_window(D(2026, 3, 2), 3)
        assert window == [D(2026, 2, 28), D(2026, 3, 1), D(2026, 3, 2)]

    def test_single_day(self):
        assert build_window(D(2026, 3, 15), 1) == [D(2026, 3, 15)]

    def test_non_positive_days_is_empty(self):
        assert build_window(D(2026, 3, 15), 0) == []
        assert build_window(D(2026, 3, 15), -3) == []


class TestBucketByDay:
    def test_one_bucket_per_window_day_including_empty(self):
        window = build_window(D(2026, 3, 15), 7)
        buckets = bucket_by_day([("a", D(2026, 3, 15))], window, key=lambda e: e[1])
        assert list(buckets.keys()) == window
        assert buckets[D(2026, 3, 15)] == [("a", D(2026, 3, 15))]
        assert all(buckets[d] == [] for d in window[:-1])

    def test_entries_outside_window_dropped(self):
        window = build_window(D(2026, 3, 15), 2)
        entries = [D(2026, 3, 10), D(2026, 3, 14), D(2026, 3, 16)]
        buckets = bucket_by_day(entries, window, key=lambda d: d)
        assert sum(len(v) for v in buckets.values()) == 1

    def test_multiple_entries_same_day_preserve_order(self):
        window = build_window(D(2026, 3, 15), 1)
        entries = [(1, D(2026, 3, 15)), (2, D(2026, 3, 15))]
        buckets = bucket_by_day(entries, window, key=lambda e: e[1])
        assert [e[0] for e in buckets[D(2026, 3, 15)]] == [1, 2]
