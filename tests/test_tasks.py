"""Tests for the task model and task list."""

import pytest

from ticklist.core.errors import BoundsError
from ticklist.core.tasks import Deadline, Event, TaskList, Todo, task_from_dict


@pytest.fixture
def sample_tasks():
    return TaskList(
        [
            Todo("read book"),
            Deadline("return book", "Sunday"),
            Event("project meeting", "Mon 2pm", "4pm"),
        ]
    )


class TestTaskStringForm:
    def test_todo(self):
        assert str(Todo("read book")) == "[T][ ] read book"

    def test_done_todo(self):
        assert str(Todo("read book", is_done=True)) == "[T][X] read book"

    def test_deadline(self):
        assert str(Deadline("return book", "Sunday")) == "[D][ ] return book (by: Sunday)"

    def test_event(self):
        event = Event("project meeting", "Mon 2pm", "4pm")
        assert str(event) == "[E][ ] project meeting (from: Mon 2pm to: 4pm)"


class TestTask:
    def test_defaults_to_not_done(self):
        assert Todo("x").is_done is False

    def test_empty_description_rejected(self):
        with pytest.raises(ValueError):
            Todo("")

    def test_mark_then_unmark_restores_state(self):
        task = Deadline("return book", "Sunday")
        task.mark()
        assert task.is_done is True
        task.unmark()
        assert task.is_done is False
        assert task == Deadline("return book", "Sunday")

    def test_mark_is_idempotent(self):
        task = Todo("x")
        task.mark()
        task.mark()
        assert task.is_done is True


class TestSerialization:
    def test_event_to_dict(self):
        event = Event("meet", "Mon", "Tue", is_done=True)
        assert event.to_dict() == {
            "type": "E",
            "description": "meet",
            "done": True,
            "from": "Mon",
            "to": "Tue",
        }

    def test_from_dict_restores_each_variant(self, sample_tasks):
        for task in sample_tasks:
            assert task_from_dict(task.to_dict()) == task

    def test_from_dict_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown task type"):
            task_from_dict({"type": "Z", "description": "x"})

    def test_from_dict_missing_description(self):
        with pytest.raises(KeyError):
            task_from_dict({"type": "T"})


class TestTaskList:
    def test_preserves_insertion_order(self, sample_tasks):
        assert [t.description for t in sample_tasks] == [
            "read book",
            "return book",
            "project meeting",
        ]

    def test_add_appends(self, sample_tasks):
        sample_tasks.add(Todo("new"))
        assert len(sample_tasks) == 4
        assert sample_tasks.get(3).description == "new"

    def test_delete_compacts(self, sample_tasks):
        removed = sample_tasks.delete(0)
        assert removed.description == "read book"
        assert len(sample_tasks) == 2
        assert sample_tasks.get(0).description == "return book"

    def test_mark_and_unmark(self, sample_tasks):
        assert sample_tasks.mark(1).is_done is True
        assert sample_tasks.unmark(1).is_done is False

    @pytest.mark.parametrize("index", [-1, 3, 99])
    def test_out_of_range_raises_bounds_error(self, sample_tasks, index):
        with pytest.raises(BoundsError):
            sample_tasks.get(index)
        with pytest.raises(BoundsError):
            sample_tasks.mark(index)
        with pytest.raises(BoundsError):
            sample_tasks.delete(index)
        assert len(sample_tasks) == 3
        assert not any(t.is_done for t in sample_tasks)

    def test_bounds_error_is_index_error(self):
        with pytest.raises(IndexError):
            TaskList().get(0)


class TestFind:
    def test_substring_match(self):
        tasks = TaskList([Todo("read book"), Todo("return laptop")])
        assert [t.description for t in tasks.find("book")] == ["read book"]

    def test_case_sensitive(self):
        tasks = TaskList([Todo("Read Book")])
        assert tasks.find("book") == []

    def test_preserves_order(self, sample_tasks):
        assert [t.description for t in sample_tasks.find("book")] == [
            "read book",
            "return book",
        ]

    def test_no_matches_is_empty(self, sample_tasks):
        assert sample_tasks.find("xyz") == []
