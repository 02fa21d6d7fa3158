"""
Tests for integer ordering: append, drop-between, renumber when full, rebalance.
"""
import pytest

from swimlanes.core.positioning import (
    MAX_POSITION,
    MIN_GAP,
    POSITION_GAP,
    PositionedItem,
    initial_position,
    needs_rebalance,
    plan_move,
    plan_rebalance,
    reorder_position,
    spaced_positions,
)


def items(*pairs):
    return [PositionedItem(i, p) for i, p in pairs]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# initial_position
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_initial_position_empty_scope():
    assert initial_position([]) == POSITION_GAP


def test_initial_position_appends_after_max():
    assert initial_position([3000, 1000, 2000]) == 4000


def test_initial_position_accepts_generator():
    assert initial_position(p for p in (5,)) == 5 + POSITION_GAP


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# reorder_position
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_reorder_no_siblings():
    assert reorder_position([], 0) == POSITION_GAP
    assert reorder_position([], 5) == POSITION_GAP


def test_reorder_to_top():
    assert reorder_position([2000, 3000], 0) == 1000


def test_reorder_to_top_clamps_at_zero():
    assert reorder_position([500, 3000], 0) == 0


def test_reorder_to_top_when_first_is_zero_has_no_room():
    assert reorder_position([0, 1000], 0) is None


def test_reorder_to_bottom():
    assert reorder_position([1000, 2000], 2) == 3000
    assert reorder_position([1000, 2000], 10) == 3000


def test_reorder_between_neighbours():
    assert reorder_position([1000, 2000, 3000], 1) == 1500
    assert reorder_position([1000, 2000, 3000], 2) == 2500


def test_reorder_between_adjacent_integers_has_no_room():
    assert reorder_position([1000, 1001], 1) is None


def test_reorder_between_two_apart():
    assert reorder_position([1000, 1002], 1) == 1001


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# plan_move
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_plan_move_only_touches_moved_item_when_room():
    scope = items((1, 1000), (2, 2000), (3, 3000))
    # move item 3 between 1 and 2
    assert plan_move(scope, 3, 1) == {3: 1500}


def test_plan_move_excludes_moved_item_from_neighbours():
    scope = items((1, 1000), (2, 2000), (3, 3000))
    # item 1 to the end: others are [2000, 3000]
    assert plan_move(scope, 1, 2) == {1: 4000}


def test_plan_move_item_from_another_scope():
    scope = items((1, 1000), (2, 2000))
    assert plan_move(scope, 99, 0) == {99: 0}
    assert plan_move(scope, 99, 1) == {99: 1500}


def test_plan_move_clamps_index():
    scope = items((1, 1000))
    assert plan_move(scope, 2, 50) == {2: 2000}


def test_plan_move_rejects_negative_index():
    with pytest.raises(ValueError):
        plan_move(items((1, 1000)), 2, -1)


def test_plan_move_renumbers_when_no_integer_fits():
    scope = items((1, 1000), (2, 1001), (3, 5000))
    plan = plan_move(scope, 3, 1)
    assert plan == {1: 1000, 3: 2000, 2: 3000}


def test_plan_move_renumbered_positions_are_unique_and_ordered():
    scope = items((1, 0), (2, 1), (3, 2), (4, 3))
    plan = plan_move(scope, 4, 0)
    ordered_ids = sorted(plan, key=plan.get)
    assert ordered_ids == [4, 1, 2, 3]
    assert sorted(plan.values()) == spaced_positions(4)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# rebalance
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_needs_rebalance_threshold():
    assert not needs_rebalance([1000, 1000 + MIN_GAP])
    assert needs_rebalance([1000, 1000 + MIN_GAP - 1])
    assert needs_rebalance([1000, 1000])
    assert not needs_rebalance([])
    assert not needs_rebalance([7])


def test_plan_rebalance_noop_when_spaced():
    assert plan_rebalance(items((1, 1000), (2, 2000))) == {}
    assert plan_rebalance(items((1, 5))) == {}


def test_plan_rebalance_keeps_order_and_breaks_ties_by_id():
    scope = items((3, 1500), (1, 1500), (2, 1000))
    assert plan_rebalance(scope) == {2: 1000, 1: 2000, 3: 3000}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# upper bound
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_initial_position_capped_at_max():
    assert initial_position([MAX_POSITION - 1]) == MAX_POSITION
    assert initial_position([MAX_POSITION]) == MAX_POSITION


def test_reorder_past_max_needs_renumber():
    assert reorder_position([MAX_POSITION - POSITION_GAP], 1) == MAX_POSITION
    assert reorder_position([MAX_POSITION], 1) is None


def test_plan_move_after_max_renumbers():
    scope = items((1, 1000), (2, MAX_POSITION))
    assert plan_move(scope, 3, 2) == {1: 1000, 2: 2000, 3: 3000}
