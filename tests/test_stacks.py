import io

import pytest

from pushswap.stacks import Stacks


def make(values):
    out = io.StringIO()
    return Stacks(values, out), out


def test_sa_swaps_top_two_and_prints():
    s, out = make([1, 2, 3])
    s.sa()
    assert list(s.a) == [2, 1, 3]
    assert out.getvalue() == "sa\n"
    assert s.moves == ["sa"]


def test_sa_twice_is_identity():
    s, _ = make([5, 4, 3, 2])
    s.sa()
    s.sa()
    assert list(s.a) == [5, 4, 3, 2]


def test_sa_on_empty_prints_nothing():
    s, out = make([])
    s.sa()
    assert out.getvalue() == ""
    assert s.moves == []


def test_sa_single_element_still_prints():
    s, out = make([7])
    s.sa()
    assert list(s.a) == [7]
    assert out.getvalue() == "sa\n"


def test_sb_on_empty_prints_nothing():
    s, out = make([1, 2])
    s.sb()
    assert out.getvalue() == ""


def test_ss_prints_even_when_empty():
    s, out = make([])
    s.ss()
    assert out.getvalue() == "ss\n"


def test_pb_then_pa_restores():
    s, out = make([3, 1, 2])
    s.pb()
    assert list(s.b) == [3]
    assert list(s.a) == [1, 2]
    s.pa()
    assert list(s.a) == [3, 1, 2]
    assert not s.b
    assert out.getvalue() == "pb\npa\n"


def test_pa_with_empty_b_does_nothing():
    s, out = make([1, 2])
    s.pa()
    assert list(s.a) == [1, 2]
    assert out.getvalue() == ""


def test_pb_with_empty_a_does_nothing():
    s, out = make([])
    s.pb()
    assert not s.b
    assert out.getvalue() == ""


def test_ra_moves_top_to_bottom():
    s, out = make([1, 2, 3])
    s.ra()
    assert list(s.a) == [2, 3, 1]
    assert out.getvalue() == "ra\n"


def test_rra_moves_bottom_to_top():
    s, out = make([1, 2, 3])
    s.rra()
    assert list(s.a) == [3, 1, 2]
    assert out.getvalue() == "rra\n"


@pytest.mark.parametrize("values", [[], [4], [1, 2], [9, 8, 7, 6, 5]])
def test_ra_then_rra_is_identity(values):
    s, out = make(values)
    s.ra()
    s.rra()
    assert list(s.a) == values
    assert out.getvalue() == "ra\nrra\n"


def test_full_rotation_cycle():
    values = [4, 1, 3, 2]
    s, _ = make(values)
    for _ in values:
        s.ra()
    assert list(s.a) == values


def test_rr_and_rrr_act_on_both():
    s, out = make([1, 2, 3, 4])
    s.pb()
    s.pb()
    b_before = list(s.b)
    a_before = list(s.a)
    s.rr()
    s.rrr()
    assert list(s.a) == a_before
    assert list(s.b) == b_before
    assert out.getvalue().splitlines()[-2:] == ["rr", "rrr"]


def test_rb_rrb_print_even_when_empty():
    s, out = make([1])
    s.rb()
    s.rrb()
    assert out.getvalue() == "rb\nrrb\n"


def test_moves_keep_multiset():
    values = [5, 3, 8, 1]
    s, _ = make(values)
    s.pb()
    s.ra()
    s.ss()
    s.rrr()
    s.pb()
    assert sorted(list(s.a) + list(s.b)) == sorted(values)