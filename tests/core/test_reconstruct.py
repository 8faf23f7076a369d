import pytest

from grid_pathfinder.core.errors import InvalidPredecessorChain
from grid_pathfinder.core.reconstruct import reconstruct
from grid_pathfinder.core.search_state import SearchState


def _chain(*coords):
    state = SearchState()
    prev = None
    for g, c in enumerate(coords):
        state.update(c, float(g), 0.0, prev)
        prev = c
    return state


def test_reconstruct_orders_start_to_goal():
    state = _chain((0, 0), (1, 0), (1, 1))
    assert reconstruct(state, (1, 1), (0, 0)) == ((0, 0), (1, 0), (1, 1))


def test_reconstruct_start_equals_goal():
    state = _chain((0, 0))
    assert reconstruct(state, (0, 0), (0, 0)) == ((0, 0),)


def test_reconstruct_detects_cycle():
    state = SearchState()
    state.update((0, 0), 0.0, 0.0, None)
    state.update((1, 1), 1.0, 0.0, (1, 2))
    state.update((1, 2), 1.0, 0.0, (1, 1))
    with pytest.raises(InvalidPredecessorChain):
        reconstruct(state, (1, 1), (0, 0), max_steps=9)


def test_reconstruct_detects_cycle_with_default_bound():
    state = SearchState()
    state.update((0, 0), 0.0, 0.0, None)
    state.update((1, 1), 1.0, 0.0, (1, 2))
    state.update((1, 2), 1.0, 0.0, (1, 1))
    with pytest.raises(InvalidPredecessorChain):
        reconstruct(state, (1, 1), (0, 0))


def test_reconstruct_detects_broken_chain():
    state = SearchState()
    state.update((0, 0), 0.0, 0.0, None)
    state.update((2, 2), 4.0, 0.0, None)
    with pytest.raises(InvalidPredecessorChain):
        reconstruct(state, (2, 2), (0, 0))
