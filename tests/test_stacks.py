from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Operation, Stacks


def test_operation_names_round_trip():
    for op in Operation:
        assert Operation(str(op)) is op


def test_operation_from_instruction_text():
    assert Operation("rrr") is Operation.RRR
    assert str(Operation.PB) == "pb"


def test_unknown_operation_rejected():
    stacks = Stacks([1, 2])
    with pytest.raises(ValueError):
        stacks.apply("xx")
    assert stacks.history == []


def test_sa_exchanges_top_two():
    values = [5, 7, 9, 11]
    stacks = Stacks(values)
    stacks.sa()
    assert list(stacks.a) == [values[1], values[0]] + values[2:]


def test_swap_twice_is_identity():
    values = [4, 8, 15, 16]
    stacks = Stacks(values, values)
    stacks.ss()
    stacks.ss()
    assert list(stacks.a) == values
    assert list(stacks.b) == values


def test_swap_single_item_does_nothing_but_is_recorded():
    stacks = Stacks([42])
    stacks.sa()
    stacks.sb()
    assert list(stacks.a) == [42]
    assert list(stacks.b) == []
    assert stacks.history == [Operation.SA, Operation.SB]


def test_pb_moves_top_of_a_to_top_of_b():
    values = [3, 1, 2]
    stacks = Stacks(values, [9])
    stacks.pb()
    assert list(stacks.a) == values[1:]
    assert list(stacks.b) == [values[0], 9]


def test_push_then_pull_back_is_identity():
    values = [10, 20, 30]
    stacks = Stacks(values)
    stacks.pb()
    stacks.pb()
    stacks.pa()
    stacks.pa()
    assert list(stacks.a) == values
    assert not stacks.b


def test_push_from_empty_is_recorded_noop():
    stacks = Stacks([1, 2])
    stacks.pa()
    assert list(stacks.a) == [1, 2]
    assert stacks.history == [Operation.PA]


def test_ra_moves_top_to_bottom():
    values = [6, 2, 8, 4]
    stacks = Stacks(values)
    stacks.ra()
    assert list(stacks.a) == values[1:] + values[:1]


def test_rra_moves_bottom_to_top():
    values = [6, 2, 8, 4]
    stacks = Stacks(values)
    stacks.rra()
    assert list(stacks.a) == values[-1:] + values[:-1]


def test_rotate_then_reverse_is_identity_on_both():
    a = [1, 2, 3]
    b = [7, 8]
    stacks = Stacks(a, b)
    stacks.rr()
    stacks.rrr()
    assert list(stacks.a) == a
    assert list(stacks.b) == b


def test_full_rotation_is_identity():
    values = [9, 3, 5, 1, 7]
    stacks = Stacks(values)
    for _ in values:
        stacks.rb()
        stacks.ra()
    assert list(stacks.a) == values
    assert len(stacks.history) == 2 * len(values)


def test_history_follows_calls_in_order():
    stacks = Stacks([1, 2, 3])
    stacks.sa()
    stacks.pb()
    stacks.apply("rrb")
    assert stacks.history == [Operation.SA, Operation.PB, Operation.RRB]


@given(
    st.lists(st.integers(), max_size=8),
    st.lists(st.integers(), max_size=8),
    st.lists(st.sampled_from(list(Operation)), max_size=30),
)
def test_moves_preserve_items(a, b, ops):
    stacks = Stacks(a, b)
    for op in ops:
        stacks.apply(op)
    assert Counter(stacks.a) + Counter(stacks.b) == Counter(a) + Counter(b)
    assert stacks.history == ops


@given(st.lists(st.integers(), min_size=1, max_size=10))
def test_rotate_inverse_property(values):
    stacks = Stacks(values)
    stacks.ra()
    stacks.rra()
    assert list(stacks.a) == values