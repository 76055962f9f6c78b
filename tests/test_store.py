# =============================================================================
# tests/test_store.py - TodoStore Tests
# =============================================================================
# Tests for the in-memory store: id issuing, lookups, removal, clearing.
# =============================================================================

import pytest

from core.models.todo import Todo
from core.store import TodoStore


def _add(store: TodoStore, text: str) -> Todo:
    todo = Todo(id=store.issue_id(), text=text)
    store.append(todo)
    return todo


class TestIssueId:
    """Tests for the id counter."""

    @pytest.mark.parametrize("first_id", [0, -5])
    def test_rejects_first_id_below_one(self, first_id):
        with pytest.raises(ValueError):
            TodoStore(first_id=first_id)

    def test_starts_at_one(self):
        store = TodoStore()

        assert store.next_id == 1
        assert store.issue_id() == 1
        assert store.issue_id() == 2
        assert store.next_id == 3

    def test_custom_first_id(self):
        assert TodoStore(first_id=10).issue_id() == 10


class TestLookups:
    """Tests for find_by_id and find_index_by_id."""

    def test_find_by_id(self, store):
        _add(store, "Buy milk")
        walk = _add(store, "Walk dog")

        assert store.find_by_id(walk.id) is walk
        assert store.find_by_id(99) is None

    def test_find_index_by_id(self, store):
        _add(store, "Buy milk")
        _add(store, "Walk dog")

        assert store.find_index_by_id(1) == 0
        assert store.find_index_by_id(2) == 1
        assert store.find_index_by_id(3) is None

    def test_empty_store(self, store):
        assert len(store) == 0
        assert store.all() == []
        assert store.find_by_id(1) is None


class TestMutations:
    """Tests for append, remove_at and clear_all."""

    def test_append_keeps_insertion_order(self, store, sample_texts):
        for text in sample_texts:
            _add(store, text)

        assert [todo.text for todo in store.all()] == sample_texts

    def test_all_returns_snapshot(self, store):
        _add(store, "Buy milk")

        snapshot = store.all()
        snapshot.clear()

        assert len(store) == 1

    def test_remove_at_shifts_following(self, store, sample_texts):
        for text in sample_texts:
            _add(store, text)

        removed = store.remove_at(0)

        assert removed.text == "Buy milk"
        assert [todo.id for todo in store.all()] == [2, 3]
        assert store.find_index_by_id(3) == 1

    def test_clear_all_keeps_counter(self, store, sample_texts):
        for text in sample_texts:
            _add(store, text)

        removed = store.clear_all()

        assert removed == 3
        assert len(store) == 0
        assert store.issue_id() == 4
