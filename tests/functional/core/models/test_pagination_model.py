"""Unit tests for pagination models."""

from pydantic import ValidationError
import pytest

from catalog.models.pagination import PaginationInfo, PaginationState, build_page_controls


class TestPaginationState:
    def test_empty_state(self) -> None:
        state = PaginationState(page_size=36)

        assert state.is_empty is True
        assert state.pages == []
        assert state.start_index == 0
        assert state.end_index == 0

    def test_slice_bounds(self) -> None:
        state = PaginationState(page_size=36, total_count=40, page_count=2, current_page=2)

        assert state.start_index == 36
        assert state.end_index == 40
        assert state.has_next is False
        assert state.pages == [1, 2]

    def test_state_is_frozen(self) -> None:
        state = PaginationState(page_size=36, total_count=40, page_count=2, current_page=1)

        with pytest.raises(ValidationError):
            state.current_page = 2

    def test_current_page_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PaginationState(page_size=36, total_count=1, page_count=1, current_page=0)


class TestBuildPageControls:
    def test_one_control_per_page_then_next_and_last(self) -> None:
        state = PaginationState(page_size=10, total_count=25, page_count=3, current_page=2)

        controls = build_page_controls(state)

        assert [control.label for control in controls] == ["1", "2", "3", "››", "Último »"]
        assert [control.page for control in controls] == [1, 2, 3, 3, 3]
        assert [control.kind for control in controls[-2:]] == ["next", "last"]

    def test_exactly_one_active_control(self) -> None:
        state = PaginationState(page_size=10, total_count=25, page_count=3, current_page=3)

        controls = build_page_controls(state)

        active = [control.page for control in controls if control.active]
        assert active == [3]

    def test_next_on_last_page_points_to_itself(self) -> None:
        state = PaginationState(page_size=10, total_count=5, page_count=1, current_page=1)

        controls = build_page_controls(state)

        assert controls[-2].page == 1

    def test_no_controls_without_results(self) -> None:
        assert build_page_controls(PaginationState(page_size=10)) == []


class TestPaginationInfo:
    def test_invalid_has_next_type_raises(self) -> None:
        with pytest.raises(ValidationError):
            PaginationInfo(
                page_size=36,
                total_count=0,
                page_count=0,
                has_next="false",
            )
