import json

import pytest

from greedypath.path import PathResult


def test_path_result_basics():
    result = PathResult(path=[2, 0, 1], cost=3.5)
    assert result.path == (2, 0, 1)
    assert len(result) == 3
    assert list(result) == [2, 0, 1]
    assert result[1] == 0
    assert result.start_node == 2
    assert result.end_node == 1


def test_single_node_path():
    result = PathResult(path=(4,), cost=0)
    assert result.start_node == result.end_node == 4
    assert len(result) == 1


def test_path_result_is_frozen():
    result = PathResult(path=(0, 1), cost=1.0)
    with pytest.raises(AttributeError):
        result.cost = 2.0  # type: ignore[misc]


def test_path_result_equality_and_hash():
    a = PathResult(path=(0, 1), cost=1.0)
    b = PathResult(path=[0, 1], cost=1)
    assert a == b
    assert hash(a) == hash(b)
    assert a != PathResult(path=(1, 0), cost=1.0)


def test_ordering_by_cost_then_start():
    cheap = PathResult(path=(3, 2), cost=1.0)
    tie_low = PathResult(path=(0, 1), cost=2.0)
    tie_high = PathResult(path=(2, 1), cost=2.0)
    assert cheap < tie_low < tie_high
    assert sorted([tie_high, cheap, tie_low]) == [cheap, tie_low, tie_high]
    assert min([tie_high, tie_low]) is tie_low


def test_ordering_with_other_types():
    with pytest.raises(TypeError):
        PathResult(path=(0,), cost=0) < 1  # noqa: B015


def test_to_dict_is_json_serializable():
    result = PathResult(path=(0, 2, 1), cost=2.0)
    assert result.to_dict() == {"path": [0, 2, 1], "cost": 2.0, "length": 3}
    assert json.loads(json.dumps(result.to_dict()))["path"] == [0, 2, 1]


def test_nan_cost_orders_after_real_costs():
    nan_low = PathResult(path=(0, 1), cost=float("nan"))
    nan_high = PathResult(path=(2, 1), cost=float("nan"))
    worst_real = PathResult(path=(3, 2), cost=float("inf"))
    assert worst_real < nan_low
    assert not nan_low < worst_real
    assert not nan_high < nan_low
