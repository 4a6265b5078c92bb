"""Tests for picker/selection.py - cyclic cursor over task entries."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from picker.providers import (
    DESCRIPTION_EMPTY,
    ITEM_NOT_FOUND,
    NOT_A_STRING,
    SUMMARY_EMPTY,
    Entry,
)
from picker.selection import SelectionModel


def make_model(count: int) -> SelectionModel:
    return SelectionModel([Entry(f"task-{i}") for i in range(count)])


class TestSelectFirst:
    """Tests for select_first."""

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_from_unset(self, count: int) -> None:
        model = make_model(count)
        assert model.selected is None

        model.select_first()
        assert model.selected == 0

    def test_from_middle(self) -> None:
        model = make_model(5)
        model.select_first()
        model.select_next()
        model.select_next()

        model.select_first()
        assert model.selected == 0

    def test_empty_collection_raises(self) -> None:
        with pytest.raises(ValueError):
            SelectionModel([]).select_first()


class TestCyclicMovement:
    """Tests for select_next and select_prev."""

    def test_next_wraps_at_last(self) -> None:
        model = make_model(3)
        model.select_prev()  # unset -> 0
        model.select_prev()  # 0 -> 2
        assert model.selected == 2

        model.select_next()
        assert model.selected == 0

    def test_prev_wraps_at_first(self) -> None:
        model = make_model(4)
        model.select_first()

        model.select_prev()
        assert model.selected == 3

    def test_unset_cursor_next_selects_first(self) -> None:
        model = make_model(3)
        model.select_next()
        assert model.selected == 0

    def test_unset_cursor_prev_selects_first(self) -> None:
        model = make_model(3)
        model.select_prev()
        assert model.selected == 0

    @pytest.mark.parametrize("count", [1, 2, 3, 7])
    def test_next_then_prev_restores(self, count: int) -> None:
        model = make_model(count)
        model.select_first()
        for start in range(count):
            while model.selected != start:
                model.select_next()
            model.select_next()
            model.select_prev()
            assert model.selected == start

            model.select_prev()
            model.select_next()
            assert model.selected == start

    @pytest.mark.parametrize("count", [1, 2, 3, 7])
    def test_full_cycle_returns_to_start(self, count: int) -> None:
        model = make_model(count)
        model.select_first()
        for start in range(count):
            while model.selected != start:
                model.select_next()
            for _ in range(count):
                model.select_next()
                assert 0 <= model.selected < count
            assert model.selected == start

    def test_single_entry_stays_put(self) -> None:
        model = make_model(1)
        model.select_first()
        model.select_next()
        assert model.selected == 0
        model.select_prev()
        assert model.selected == 0


class TestTextAccessors:
    """Tests for description/summary fallbacks."""

    def test_nothing_selected(self) -> None:
        model = SelectionModel([Entry.from_props("build", {"desc": "Builds it"})])

        assert model.current() is None
        assert model.current_name() is None
        assert model.description() == ITEM_NOT_FOUND
        assert model.summary() == ITEM_NOT_FOUND

    def test_plain_text(self) -> None:
        model = SelectionModel(
            [Entry.from_props("build", {"desc": "Builds it", "summary": "Runs the compiler"})]
        )
        model.select_first()

        assert model.description() == "Builds it"
        assert model.summary() == "Runs the compiler"

    def test_missing_fields(self) -> None:
        model = SelectionModel([Entry.from_props("test", {})])
        model.select_first()

        assert model.description() == DESCRIPTION_EMPTY
        assert model.summary() == SUMMARY_EMPTY

    @pytest.mark.parametrize("value", [42, ["a", "b"], {"k": "v"}, None, True])
    def test_non_text_fields(self, value: object) -> None:
        model = SelectionModel([Entry.from_props("lint", {"desc": value, "summary": value})])
        model.select_first()

        assert model.description() == NOT_A_STRING
        assert model.summary() == NOT_A_STRING


class TestView:
    """Tests for the render projection."""

    def test_view_reflects_cursor(self) -> None:
        model = SelectionModel(
            [Entry.from_props("build", {"desc": "Builds it"}), Entry.from_props("test", {})]
        )
        model.select_first()
        model.select_next()

        view = model.view()
        assert view.names == ("build", "test")
        assert view.selected == 1
        assert view.description == DESCRIPTION_EMPTY
        assert view.summary == SUMMARY_EMPTY

    def test_view_does_not_move_cursor(self) -> None:
        model = make_model(3)
        model.select_first()
        model.select_next()

        model.view()
        model.view()
        assert model.selected == 1

    def test_unset_view(self) -> None:
        view = make_model(2).view()
        assert view.selected is None
        assert view.description == ITEM_NOT_FOUND
