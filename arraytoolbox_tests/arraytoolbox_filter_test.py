import suite
from dgen import from_pool
from arraytoolbox import (
    keep, unique, InvalidArgumentError, CallbackContractError, FactoryMisuseError, FilterPredicate
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- unique ---

@test("unique keeps the last occurrence of each value")
def test_unique_basic():
    result = keep([2, 1, 1, 3, 2], unique())
    assert_that(result == [1, 3, 2], f"expected [1, 3, 2], got {result}")


@test("unique handles empty and single-element sequences")
def test_unique_small():
    assert_that(keep([], unique()) == [], "empty stays empty")
    assert_that(keep(['only'], unique()) == ['only'], "single element is kept")
    assert_that(keep([5, 5, 5, 5], unique()) == [5], "all-equal collapses to one")


@test("unique uses the supplied comparator")
def test_unique_comparator():
    def case_insensitive(left, right):
        a, b = left.lower(), right.lower()
        return (a > b) - (a < b)

    result = keep(['a', 'B', 'A', 'b'], unique(case_insensitive))
    assert_that(result == ['A', 'b'], f"expected ['A', 'b'], got {result}")


@test("unique returns a configured filter predicate")
def test_unique_type():
    predicate = unique()
    assert_that(isinstance(predicate, FilterPredicate), "factory should return a FilterPredicate")
    assert_that(predicate(1, 0, [1, 1]) is False, "an element with a later duplicate is dropped")
    assert_that(predicate(1, 1, [1, 1]) is True, "the last duplicate is kept")


@test("filter predicates must implement __call__")
def test_filter_predicate_abstract():
    assert_raises(TypeError, FilterPredicate)

    class NoCall(FilterPredicate):
        pass

    assert_raises(TypeError, NoCall)

    class Even(FilterPredicate):
        def __call__(self, element, index, sequence):
            return element % 2 == 0

    assert_that(keep([1, 2, 3, 4], Even()) == [2, 4], "a subclass with __call__ filters")


@test("unique works with the builtin filter over an indexed sequence")
def test_unique_builtin():
    data = ['x', 'y', 'x']
    predicate = unique()
    result = [item for index, item in enumerate(data) if predicate(item, index, data)]
    assert_that(result == ['y', 'x'], f"got {result}")


@test("unique on generated data leaves no duplicates")
def test_unique_generated():
    for seed in range(5):
        data = from_pool(list(range(8)), 30, seed=seed).to.list()
        result = keep(data, unique())
        expected = [v for i, v in enumerate(data) if v not in data[i + 1:]]
        assert_that(result == expected, f"seed {seed}: got {result}")
        assert_that(len(set(result)) == len(result), f"seed {seed}: duplicates left in {result}")


@test("unique reports factory misuse")
def test_unique_misuse():
    error = assert_raises(FactoryMisuseError, unique, 2, 0, [2])
    assert_that("must be called" in str(error), f"unexpected error: {error}")
    assert_raises(FactoryMisuseError, keep, [1, 2], unique)
    assert_that(not issubclass(FactoryMisuseError, InvalidArgumentError), "misuse is reported separately")


@test("unique rejects bad comparators")
def test_unique_errors():
    assert_raises(InvalidArgumentError, unique, 5)
    assert_raises(CallbackContractError, keep, [1, 2], unique(lambda a, b: None))


# --- keep ---

@test("keep passes element, index and the full sequence")
def test_keep_arguments():
    calls = []

    def record(element, index, sequence):
        calls.append((element, index, len(sequence)))
        return index != len(sequence) - 1

    assert_that(keep([5, 6, 7], record) == [5, 6], "last element should be dropped")
    assert_that(calls == [(5, 0, 3), (6, 1, 3), (7, 2, 3)], f"got {calls}")


@test("keep rejects non-sequences and non-callables")
def test_keep_errors():
    assert_raises(InvalidArgumentError, keep, "abc", unique())
    assert_raises(InvalidArgumentError, keep, [1], 'not a function')


if __name__ == "__main__":
    suite.main(title="arraytoolbox filter test suite")
