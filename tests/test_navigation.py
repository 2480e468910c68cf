from __future__ import annotations

import pytest

from artspace.state.navigation import NavigationState, advance_index, retreat_index


@pytest.mark.parametrize("count", [1, 2, 3, 7])
def test_advance_from_zero_i_times_yields_i_mod_n(count: int) -> None:
    nav = NavigationState(count=count)
    for i in range(1, 3 * count + 1):
        nav.advance()
        assert nav.current_index == i % count


@pytest.mark.parametrize("count", [1, 2, 3, 5])
def test_advance_n_times_returns_to_start(count: int) -> None:
    for start in range(count):
        nav = NavigationState(count=count, current_index=start)
        for _ in range(count):
            nav.advance()
        assert nav.current_index == start


@pytest.mark.parametrize("count", [1, 2, 3, 10])
def test_retreat_is_inverse_of_advance(count: int) -> None:
    for i in range(count):
        assert retreat_index(advance_index(i, count), count) == i
        assert advance_index(retreat_index(i, count), count) == i


def test_next_wraps_from_last_to_first() -> None:
    nav = NavigationState(count=4, current_index=3)
    assert nav.advance() == 0
    assert nav.current_index == 0


def test_previous_wraps_from_first_to_last() -> None:
    nav = NavigationState(count=4)
    assert nav.retreat() == 3
    assert nav.current_index == 3


def test_single_entry_stays_at_zero() -> None:
    nav = NavigationState(count=1)
    for _ in range(5):
        assert nav.advance() == 0
        assert nav.retreat() == 0


def test_peek_does_not_move_cursor() -> None:
    nav = NavigationState(count=3, current_index=1)
    assert nav.peek_next() == 2
    assert nav.peek_previous() == 0
    assert nav.current_index == 1


@pytest.mark.parametrize("bad_index", [-1, 3, 100])
def test_select_rejects_out_of_range(bad_index: int) -> None:
    nav = NavigationState(count=3)
    with pytest.raises(IndexError):
        nav.select(bad_index)
    assert nav.current_index == 0


def test_zero_count_is_rejected() -> None:
    with pytest.raises(ValueError):
        NavigationState(count=0)


def test_initial_index_out_of_range_is_rejected() -> None:
    with pytest.raises(IndexError):
        NavigationState(count=2, current_index=2)
