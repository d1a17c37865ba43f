"""Tests for the bounded, persisted command history."""

import json

import pytest

from termcore.db import MemoryStore
from termcore.interface.history import HistoryDirection, HistoryStore

KEY = "termcore.history"


class _BrokenStore:
    def get(self, key):
        raise OSError("disk unavailable")

    def set(self, key, value):
        raise OSError("disk unavailable")


class TestRecord:
    def test_record_appends(self):
        history = HistoryStore()
        assert history.record("help")
        assert history.entries == ("help",)

    def test_empty_lines_skipped(self):
        history = HistoryStore()
        assert not history.record("")
        assert not history.record("   ")
        assert len(history) == 0

    def test_consecutive_duplicate_suppressed(self):
        history = HistoryStore()
        history.record("about")
        assert not history.record("about")
        assert history.entries == ("about",)

    def test_non_adjacent_repeat_allowed(self):
        history = HistoryStore()
        for line in ("about", "help", "about"):
            history.record(line)
        assert history.entries == ("about", "help", "about")

    def test_capacity_evicts_oldest(self):
        history = HistoryStore(capacity=3)
        for line in ("a", "b", "c", "d", "e"):
            history.record(line)
        assert history.entries == ("c", "d", "e")

    def test_invariants_hold_for_long_sequences(self):
        history = HistoryStore(capacity=4)
        for line in "a a b b a c c d e e e f a a".split():
            history.record(line)
            entries = history.entries
            assert len(entries) <= 4
            assert all(x != y for x, y in zip(entries, entries[1:]))

    def test_record_resets_navigation(self):
        history = HistoryStore()
        history.record("a")
        history.record("b")
        history.navigate("older", "")
        history.record("c")
        assert history.cursor == -1
        assert history.pending_input == ""

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            HistoryStore(capacity=0)


class TestNavigate:
    @pytest.fixture
    def history(self):
        store = HistoryStore()
        for line in ("first", "second", "third"):
            store.record(line)
        return store

    def test_older_walks_back_from_newest(self, history):
        assert history.navigate(HistoryDirection.OLDER, "draft") == "third"
        assert history.navigate(HistoryDirection.OLDER, "third") == "second"
        assert history.navigate(HistoryDirection.OLDER, "second") == "first"
        assert history.cursor == 2

    def test_older_clamps_at_oldest(self, history):
        current = "draft"
        for _ in range(3):
            current = history.navigate("older", current)
        assert history.navigate("older", current) == "first"
        assert history.cursor == 2

    def test_newer_restores_pending_input(self, history):
        history.navigate("older", "half typed")
        history.navigate("older", "third")
        assert history.navigate("newer", "second") == "third"
        assert history.navigate("newer", "third") == "half typed"
        assert history.cursor == -1
        assert not history.navigating

    def test_newer_on_live_input_is_noop(self, history):
        assert history.navigate("newer", "live") == "live"
        assert history.cursor == -1

    def test_round_trip_returns_original_input(self, history):
        current = "my draft"
        for _ in range(len(history)):
            current = history.navigate("older", current)
        for _ in range(len(history)):
            current = history.navigate("newer", current)
        assert current == "my draft"

    def test_arrow_key_aliases(self, history):
        assert history.navigate("up", "") == "third"
        assert history.navigate("down", "third") == ""

    def test_unknown_direction(self, history):
        with pytest.raises(ValueError):
            history.navigate("sideways", "")

    def test_empty_history_is_noop(self):
        history = HistoryStore()
        assert history.navigate("older", "typed") == "typed"
        assert history.cursor == -1


class TestClear:
    def test_clear_empties_and_resets(self):
        store = MemoryStore()
        history = HistoryStore(store)
        history.record("a")
        history.navigate("older", "x")
        history.clear()
        assert history.entries == ()
        assert history.cursor == -1
        assert history.pending_input == ""
        assert json.loads(store.get(KEY)) == []

    def test_navigate_after_clear_is_noop(self):
        history = HistoryStore()
        history.record("a")
        history.clear()
        assert history.navigate("older", "now") == "now"


class TestPersistence:
    def test_record_persists_json_array(self):
        store = MemoryStore()
        history = HistoryStore(store)
        history.record("help")
        history.record("about")
        assert json.loads(store.get(KEY)) == ["help", "about"]

    def test_restore_on_construction(self):
        store = MemoryStore({KEY: json.dumps(["one", "two"])})
        assert HistoryStore(store).entries == ("one", "two")

    def test_custom_key(self):
        store = MemoryStore()
        HistoryStore(store, key="other").record("x")
        assert store.get("other") == '["x"]'
        assert store.get(KEY) is None

    def test_restore_truncates_to_capacity(self):
        store = MemoryStore({KEY: json.dumps(["a", "b", "c", "d", "e"])})
        assert HistoryStore(store, capacity=2).entries == ("d", "e")

    def test_restore_collapses_adjacent_duplicates(self):
        store = MemoryStore({KEY: json.dumps(["a", "a", "b", "", "b", "a"])})
        assert HistoryStore(store).entries == ("a", "b", "a")

    @pytest.mark.parametrize("raw", ["not json", "{\"a\": 1}", "[1, 2]", "null", "\"text\""])
    def test_malformed_data_is_empty_history(self, raw):
        store = MemoryStore({KEY: raw})
        assert HistoryStore(store).entries == ()

    def test_unreadable_storage_is_empty_history(self):
        history = HistoryStore(_BrokenStore())
        assert history.entries == ()

    def test_write_failures_do_not_raise(self):
        history = HistoryStore(_BrokenStore())
        assert history.record("still works")
        history.clear()
        assert history.entries == ()
