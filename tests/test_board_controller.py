# tests/test_board_controller.py
from __future__ import annotations

import pytest

from boardz.models.entities import Task
from boardz.models.errors import NotFoundError
from boardz.models.events import DragResult
from boardz.repositories.task_store import TaskStore
from boardz.services.board_controller import BoardController


def _ids(tasks) -> list[str]:
    return [t.id for t in tasks]


@pytest.fixture()
def controller(store: TaskStore) -> BoardController:
    return BoardController(store)


# --- grouping ---------------------------------------------------------------

def test_lanes_group_by_status_in_canonical_order(controller: BoardController):
    lanes = controller.lanes()
    assert list(lanes) == ["todo", "in-progress", "done"]
    assert _ids(lanes["todo"]) == ["2", "4", "5"]
    assert _ids(lanes["in-progress"]) == ["1", "6"]
    assert _ids(lanes["done"]) == ["3"]


def test_lanes_follow_header_query(controller: BoardController):
    controller.set_query("alice")
    lanes = controller.lanes()
    assert _ids(lanes["todo"]) == ["4"]
    assert _ids(lanes["in-progress"]) == ["1"]
    assert lanes["done"] == []


# --- drag results -----------------------------------------------------------

def test_single_task_dragged_to_done():
    store = TaskStore([Task("1", "Design", "todo", "Alice", "2024-02-28")])
    ctl = BoardController(store)
    assert ctl.apply_drag(DragResult("todo", 0, "done", 0)) is True
    assert store.get("1").status == "done"


def test_drag_without_destination_changes_nothing(controller: BoardController, store: TaskStore):
    before = store.snapshot()
    result = DragResult("todo", 0)
    assert result.cancelled
    assert controller.apply_drag(result) is False
    assert store.snapshot() == before


def test_drag_to_same_slot_is_noop(controller: BoardController, store: TaskStore):
    before = store.snapshot()
    assert controller.apply_drag(DragResult("todo", 1, "todo", 1)) is False
    assert store.snapshot() == before


def test_drag_from_empty_slot_raises_not_found(controller: BoardController, store: TaskStore):
    before = store.snapshot()
    with pytest.raises(NotFoundError):
        controller.apply_drag(DragResult("done", 3, "todo", 0))
    assert store.snapshot() == before


def test_drag_between_lanes(controller: BoardController, store: TaskStore):
    controller.apply_drag(DragResult("todo", 0, "in-progress", 1))
    lanes = controller.lanes()
    assert _ids(lanes["todo"]) == ["4", "5"]
    assert _ids(lanes["in-progress"]) == ["1", "2", "6"]


def test_drag_down_within_lane(controller: BoardController):
    # indices are counted without the dragged card: [2,4,5] -> drop 2 at the end
    controller.apply_drag(DragResult("todo", 0, "todo", 2))
    assert _ids(controller.lanes()["todo"]) == ["4", "5", "2"]


# --- filtered lanes ---------------------------------------------------------

def test_filtered_source_index_resolves_visible_task(controller: BoardController, store: TaskStore):
    controller.set_query("bob")      # todo shows [2], in-progress shows [6]
    controller.apply_drag(DragResult("in-progress", 0, "todo", 0))
    assert store.get("6").status == "todo"
    assert _ids(store.lane("todo")) == ["6", "2", "4", "5"]


def test_filtered_drop_into_lane_with_nothing_visible(controller: BoardController, store: TaskStore):
    controller.set_query("alice")    # done shows nothing, holds [3]
    controller.apply_drag(DragResult("todo", 0, "done", 0))
    assert _ids(store.lane("done")) == ["3", "4"]


@pytest.fixture()
def x_store() -> TaskStore:
    return TaskStore([
        Task("a", "Alpha x"), Task("b", "Beta"), Task("c", "Gamma x"), Task("d", "Delta x"),
    ])


def test_filtered_drop_between_visible_cards(x_store: TaskStore):
    ctl = BoardController(x_store, query="x")      # visible todo: a c d
    ctl.apply_drag(DragResult("todo", 2, "todo", 1))
    assert _ids(ctl.lanes()["todo"]) == ["a", "d", "c"]
    assert _ids(x_store.snapshot()) == ["a", "b", "d", "c"]


def test_filtered_drop_past_visible_end(x_store: TaskStore):
    ctl = BoardController(x_store, query="x")
    ctl.apply_drag(DragResult("todo", 0, "todo", 2))
    assert _ids(ctl.lanes()["todo"]) == ["c", "d", "a"]
    assert _ids(x_store.snapshot()) == ["b", "c", "d", "a"]


# --- event validation -------------------------------------------------------

@pytest.mark.parametrize("kwargs", [
    dict(source_status="blocked", source_index=0),
    dict(source_status="todo", source_index=-1),
    dict(source_status="todo", source_index=0, destination_status="done"),
    dict(source_status="todo", source_index=0, destination_status="done", destination_index=-2),
])
def test_malformed_drag_results_rejected(kwargs):
    with pytest.raises(ValueError):
        DragResult(**kwargs)
