# tests/test_task_store.py
from __future__ import annotations

import random

import pytest

from boardz.models.entities import STATUSES, Task
from boardz.models.errors import NotFoundError
from boardz.repositories.task_store import TaskStore

# seed order: 1(in-progress) 2(todo) 3(done) 4(todo) 5(todo) 6(in-progress)


def _order(store: TaskStore) -> list[str]:
    return [t.id for t in store.snapshot()]


def _lane_ids(store: TaskStore, status: str) -> list[str]:
    return [t.id for t in store.lane(status)]


# --- initialize / queries ---------------------------------------------------

def test_initialize_keeps_seed_order(store: TaskStore):
    assert _order(store) == ["1", "2", "3", "4", "5", "6"]
    assert len(store) == 6
    assert "4" in store and "99" not in store


def test_initialize_rejects_duplicate_ids():
    with pytest.raises(ValueError, match="duplicate"):
        TaskStore([Task("1", "a"), Task("1", "b")])


def test_reinitialize_replaces_sequence(store: TaskStore):
    store.initialize([Task("x", "Only")])
    assert _order(store) == ["x"]


def test_snapshot_is_read_only(store: TaskStore):
    snap = store.snapshot()
    assert isinstance(snap, tuple)
    with pytest.raises(AttributeError):
        snap[0].title = "changed"  # frozen record
    assert store.get("1").title == "Design System Implementation"


def test_counts(store: TaskStore):
    assert store.counts() == {"todo": 3, "in-progress": 2, "done": 1}


# --- move_task --------------------------------------------------------------

def test_move_to_other_lane_front(store: TaskStore):
    store.move_task("2", "done", 0)
    assert store.get("2").status == "done"
    assert _lane_ids(store, "done") == ["2", "3"]
    assert _lane_ids(store, "todo") == ["4", "5"]


def test_move_within_lane_to_front(store: TaskStore):
    store.move_task("5", "todo", 0)
    assert _lane_ids(store, "todo") == ["5", "2", "4"]
    assert _order(store) == ["1", "5", "2", "3", "4", "6"]


def test_move_past_lane_end_goes_after_last_lane_member(store: TaskStore):
    store.move_task("2", "todo", 10)
    assert _lane_ids(store, "todo") == ["4", "5", "2"]
    # lands right after task 5, still ahead of task 6
    assert _order(store) == ["1", "3", "4", "5", "2", "6"]


def test_move_into_empty_lane_appends():
    s = TaskStore([Task("a", "A"), Task("b", "B")])
    s.move_task("a", "done", 3)
    assert _order(s) == ["b", "a"]
    assert s.get("a").status == "done"


@pytest.mark.parametrize("task_id,lane_index", [("2", 0), ("4", 1), ("5", 2), ("1", 0), ("6", 1), ("3", 0)])
def test_move_to_same_slot_is_noop(store: TaskStore, task_id, lane_index):
    before = store.snapshot()
    status = store.get(task_id).status
    store.move_task(task_id, status, lane_index)
    assert store.snapshot() == before


def test_move_is_idempotent(store: TaskStore):
    once = TaskStore(store.snapshot())
    once.move_task("4", "in-progress", 1)
    store.move_task("4", "in-progress", 1)
    store.move_task("4", "in-progress", 1)
    assert store.snapshot() == once.snapshot()


def test_move_unknown_id_raises_and_leaves_state(store: TaskStore):
    before = store.snapshot()
    with pytest.raises(NotFoundError) as ei:
        store.move_task("99", "done", 0)
    assert ei.value.task_id == "99"
    assert store.snapshot() == before


def test_move_rejects_bad_status_and_index(store: TaskStore):
    with pytest.raises(ValueError):
        store.move_task("1", "blocked", 0)
    with pytest.raises(ValueError):
        store.move_task("1", "done", -1)


def test_move_keeps_other_fields(store: TaskStore):
    store.move_task("1", "done", 0)
    t = store.get("1")
    assert (t.title, t.assignee, t.due_date) == ("Design System Implementation", "Alice Cooper", "2024-02-28")


# --- update_task ------------------------------------------------------------

def test_update_replaces_in_place(store: TaskStore):
    store.update_task(Task("4", "API v2", "done", "Eve", "2024-04-01"))
    assert _order(store) == ["1", "2", "3", "4", "5", "6"]
    assert store.get("4") == Task("4", "API v2", "done", "Eve", "2024-04-01")


def test_update_unknown_id_raises(store: TaskStore):
    before = store.snapshot()
    with pytest.raises(NotFoundError):
        store.update_task(Task("99", "ghost"))
    assert store.snapshot() == before


# --- id conservation --------------------------------------------------------

def test_ids_conserved_over_random_mutations(store: TaskStore):
    rng = random.Random(1234)
    original = sorted(store.ids())
    for _ in range(300):
        tid = rng.choice(original)
        if rng.random() < 0.7:
            store.move_task(tid, rng.choice(STATUSES), rng.randint(0, 7))
        else:
            cur = store.get(tid)
            store.update_task(cur.with_changes(title=cur.title + "!", status=rng.choice(STATUSES)))
        assert sorted(store.ids()) == original
    assert len(set(store.ids())) == len(original)
