import numpy as np
import pytest
from seqsplice.functional.transform import flat, flat_map, for_each, map_, reduce


@pytest.fixture
def numbers():
    return [1, 2, 3, 4, 5]


def test_map_doubles(numbers):
    assert map_([1, 2, 3], lambda x: x * 2) == [2, 4, 6]
    assert map_(numbers, str) == ["1", "2", "3", "4", "5"]


def test_map_empty():
    assert map_([], lambda x: x * 2) == []


def test_map_returns_new_list(numbers):
    result = map_(numbers, lambda x: x)
    assert result == numbers
    assert result is not numbers


def test_map_accepts_other_sequences():
    assert map_((1, 2), lambda x: x + 1) == [2, 3]
    assert map_("ab", str.upper) == ["A", "B"]
    assert map_(np.arange(3), lambda x: int(x) * 10) == [0, 10, 20]


def test_map_propagates_transform_errors():
    def boom(x):
        if x == 2:
            raise ZeroDivisionError("bad element")
        return x

    with pytest.raises(ZeroDivisionError):
        map_([1, 2, 3], boom)


def test_reduce_sum(numbers):
    assert reduce(numbers, lambda acc, x: acc + x, 0) == 15


def test_reduce_empty_returns_initial():
    sentinel = object()
    assert reduce([], lambda acc, x: acc, sentinel) is sentinel


def test_reduce_is_left_fold():
    # Subtraction is not commutative: ((10 - 1) - 2) - 3
    assert reduce([1, 2, 3], lambda acc, x: acc - x, 10) == 4
    assert reduce(["a", "b", "c"], lambda acc, x: acc + x, "") == "abc"


def test_reduce_accumulator_type_may_differ():
    counts = reduce(
        ["a", "b", "a"], lambda acc, x: {**acc, x: acc.get(x, 0) + 1}, {}
    )
    assert counts == {"a": 2, "b": 1}


def test_for_each_runs_in_order(numbers):
    seen = []
    assert for_each(numbers, seen.append) is None
    assert seen == numbers


def test_for_each_empty():
    calls = []
    for_each([], calls.append)
    assert calls == []


def test_for_each_stops_on_error():
    seen = []

    def effect(x):
        if x == 3:
            raise RuntimeError("stop")
        seen.append(x)

    with pytest.raises(RuntimeError):
        for_each([1, 2, 3, 4], effect)
    assert seen == [1, 2]


def test_flat():
    assert flat([[1, 2], [3], [], [4, 5]]) == [1, 2, 3, 4, 5]


def test_flat_is_one_level():
    assert flat([[1, [2, 3]], [[4]]]) == [1, [2, 3], [4]]


def test_flat_empty():
    assert flat([]) == []
    assert flat([[], []]) == []


def test_flat_mixed_containers():
    assert flat([(1, 2), range(3, 5), np.array([5])]) == [1, 2, 3, 4, 5]


def test_flat_rejects_non_iterable_items():
    with pytest.raises(TypeError):
        flat([[1], 2])


def test_flat_map():
    assert flat_map([1, 2], lambda n: [n, n]) == [1, 1, 2, 2]


def test_flat_map_matches_map_then_flat(numbers):
    def fn(n):
        return range(n)

    assert flat_map(numbers, fn) == flat(map_(numbers, fn))


def test_flat_map_accepts_generators():
    assert flat_map([1, 2, 3], lambda n: (n * 10 for _ in range(n % 2))) == [10, 30]


def test_flat_map_empty():
    assert flat_map([], lambda n: [n]) == []
    assert flat_map([1, 2], lambda n: []) == []
