from math import inf

from grid_pathfinder.core.search_state import SearchState


def test_get_or_init_creates_default_record():
    state = SearchState()
    record = state.get_or_init((1, 2))
    assert record.g == inf
    assert record.predecessor is None
    assert (1, 2) in state
    assert len(state) == 1


def test_get_or_init_returns_existing_record():
    state = SearchState()
    first = state.get_or_init((0, 0), default_g=0.0)
    second = state.get_or_init((0, 0), default_g=5.0)
    assert first is second
    assert second.g == 0.0


def test_update_sets_scores_and_predecessor():
    state = SearchState()
    record = state.update((2, 2), 3.0, 1.0, (2, 1))
    assert record.g == 3.0
    assert record.h == 1.0
    assert record.f == 4.0
    assert state.predecessor_of((2, 2)) == (2, 1)


def test_predecessor_of_unknown_coord():
    state = SearchState()
    assert state.predecessor_of((5, 5)) is None
    assert state.get((5, 5)) is None
    assert (5, 5) not in state


def test_states_are_independent():
    a = SearchState()
    b = SearchState()
    a.update((0, 0), 1.0, 1.0, None)
    assert len(b) == 0
