from collections import Counter

import numpy as np

import suite
from dgen import from_pool
from arraytoolbox import (
    intersection, modal_values, InvalidArgumentError, CallbackContractError
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


def case_insensitive(left, right):
    a, b = left.lower(), right.lower()
    return (a > b) - (a < b)


# --- intersection ---

@test("intersection keeps multiplicity of the shorter side")
def test_intersection_basic():
    result = intersection([1, 2, 1, 3], [1, 1, 1])
    assert_that(result == [1, 1], f"expected [1, 1], got {result}")


@test("intersection with no common elements is empty")
def test_intersection_disjoint():
    assert_that(intersection([1, 2], [3, 4]) == [], "disjoint sequences should not intersect")
    assert_that(intersection([], [1, 2]) == [], "empty left should give empty result")
    assert_that(intersection([1, 2], []) == [], "empty right should give empty result")


@test("intersection uses each counterpart once")
def test_intersection_counterparts():
    assert_that(intersection([1, 1, 2], [1, 2, 2]) == [1, 2], "tied candidates should keep min counts")
    assert_that(intersection([1, 2, 2], [1, 1, 2]) == [1, 2], "swapped sides should agree")


@test("intersection is commutative up to multiset equality")
def test_intersection_commutative():
    for seed in range(5):
        left = from_pool([0, 1, 2, 3, 4], 25, seed=seed).to.list()
        right = from_pool([2, 3, 4, 5, 6], 15, seed=seed + 100).to.list()
        forward = intersection(left, right)
        backward = intersection(right, left)
        assert_that(Counter(forward) == Counter(backward), f"seed {seed}: {forward} vs {backward}")
        assert_that(Counter(forward) == Counter(left) & Counter(right), f"seed {seed}: not a multiset intersection")


@test("intersection with a custom comparator returns the scanned side's elements")
def test_intersection_comparator():
    result = intersection(['a', 'B'], ['b', 'c'], case_insensitive)
    # equal-length candidate lists scan the right side
    assert_that(result == ['b'], f"expected ['b'], got {result}")

    result = intersection(['A', 'a', 'x'], ['a'], case_insensitive)
    assert_that(result == ['a'], f"expected one match from the shorter side, got {result}")


@test("intersection accepts tuples and numpy arrays")
def test_intersection_inputs():
    result = intersection((1, 2, 3), np.array([3, 2]))
    assert_that(sorted(result) == [2, 3], f"got {result}")


@test("intersection does not mutate its inputs")
def test_intersection_pure():
    left, right = [3, 1, 3], [3, 3, 2]
    intersection(left, right)
    assert_that(left == [3, 1, 3] and right == [3, 3, 2], "inputs should be untouched")


@test("intersection rejects non-sequences and bad comparators")
def test_intersection_errors():
    assert_raises(InvalidArgumentError, intersection, "abc", [1])
    assert_raises(InvalidArgumentError, intersection, [1], 5)
    assert_raises(InvalidArgumentError, intersection, [1], [1], 'not a function')

    error = assert_raises(CallbackContractError, intersection, [1], [1], lambda a, b: 'x')
    assert_that("did not return a number" in str(error), f"unexpected error: {error}")
    assert_raises(CallbackContractError, intersection, [1], [1], lambda a, b: a == b)
    assert_that(issubclass(InvalidArgumentError, TypeError), "invalid arguments are type errors")


# --- modal_values ---

@test("modal_values returns ties in order of first occurrence")
def test_modal_ties():
    result = modal_values([2, 1, 1, 3, 2])
    assert_that(result == [2, 1], f"expected [2, 1], got {result}")


@test("modal_values of an empty sequence is empty")
def test_modal_empty():
    assert_that(modal_values([]) == [], "empty input should give empty result")


@test("modal_values short-circuits on a strict majority")
def test_modal_short_circuit():
    seen = []

    def tracking(value):
        seen.append(value)
        return str(value)

    result = modal_values([1, 1, 1, 2, 3], tracking)
    assert_that(result == [1], f"expected [1], got {result}")
    assert_that(len(seen) == 3, f"should stop once 1 reaches 3 of 5, serialized {len(seen)}")

    seen.clear()
    assert_that(modal_values([1, 1, 1], tracking) == [1], "all-equal input has one mode")
    assert_that(len(seen) == 2, "majority of 3 is 2")


@test("modal_values does not stop early on an even split")
def test_modal_even_split():
    assert_that(modal_values([1, 1, 2, 2]) == [1, 2], "two values at half each are both modal")
    assert_that(modal_values(['b', 'a', 'a', 'b']) == ['b', 'a'], "order follows first occurrence")


@test("modal_values returns the original representative value")
def test_modal_representative():
    result = modal_values(['a', 'A', 'b'], str.lower)
    assert_that(result == ['a'], f"expected the first spelling, got {result}")

    records = [{'k': 1}, {'k': 2}, {'k': 1}]
    result = modal_values(records)
    assert_that(result == [{'k': 1}] and result[0] is records[0], "should return the first-seen object")


@test("modal_values distinguishes values the default serializer encodes differently")
def test_modal_structural_keys():
    assert_that(modal_values([1, '1', 1, '1', True]) == [1, '1'], "1, '1' and True are distinct keys")
    assert_that(modal_values(np.array([3, 3, 1])) == [3], "numpy input should be accepted")


@test("modal_values on generated data matches a counter")
def test_modal_generated():
    for seed in range(5):
        data = from_pool(['x', 'y', 'z', 'w'], 40, seed=seed).to.list()
        counts = Counter(data)
        top = max(counts.values())
        result = modal_values(data)
        assert_that(set(result) == {v for v, c in counts.items() if c == top}, f"seed {seed}: got {result}")
        assert_that(result == sorted(result, key=data.index), f"seed {seed}: not in first-occurrence order")
        assert_that(modal_values(data) == result, "repeated calls should agree")


@test("modal_values rejects bad arguments and serializers")
def test_modal_errors():
    assert_raises(InvalidArgumentError, modal_values, 42)
    assert_raises(InvalidArgumentError, modal_values, {'a': 1})
    assert_raises(InvalidArgumentError, modal_values, [1], 5)
    error = assert_raises(CallbackContractError, modal_values, [1], lambda v: v)
    assert_that("did not return a string" in str(error), f"unexpected error: {error}")


if __name__ == "__main__":
    suite.main(title="arraytoolbox core algorithms test suite")
