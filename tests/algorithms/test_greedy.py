import itertools
import random

import pytest

from greedypath.algorithms.greedy import (
    find_path,
    nearest_unvisited,
    validate_target_length,
)
from greedypath.errors import InvalidArgumentError, InvalidNodeError
from greedypath.graph import WeightedGraph
from greedypath.path import PathResult


def _random_graph(seed: int, n: int = 12, p: float = 0.4) -> WeightedGraph:
    rng = random.Random(seed)
    g = WeightedGraph(n)
    for a, b in itertools.combinations(range(n), 2):
        if rng.random() < p:
            # Small integer costs make ties common
            g.add_edge(a, b, rng.randint(-3, 5))
    return g


class TestFindPath:
    def test_triangle_takes_cheap_sides(self, triangle1):
        result = find_path(triangle1, 0, 3)
        assert result == PathResult(path=(0, 1, 2), cost=2)

    def test_isolated_start_has_no_path(self, isolated1):
        assert find_path(isolated1, 3, 2) is None

    def test_length_one_is_start_only(self, isolated1):
        for start in range(isolated1.node_count):
            result = find_path(isolated1, start, 1)
            assert result.path == (start,)
            assert result.cost == 0

    def test_dead_end_has_no_path(self, star1):
        # 1 -> 0 -> 2 (lowest id among cost-1 ties) -> nothing left
        assert find_path(star1, 1, 3) == PathResult(path=(1, 0, 2), cost=2)
        assert find_path(star1, 1, 4) is None

    def test_tie_breaks_on_lowest_node_id(self, star1):
        # From 0 the neighbours 1, 2 and 4 all cost 1
        assert find_path(star1, 0, 2) == PathResult(path=(0, 1), cost=1)

    def test_tie_break_ignores_insertion_order(self):
        g = WeightedGraph(4)
        g.add_edge(0, 3, 1.0)
        g.add_edge(0, 2, 1.0)
        g.add_edge(0, 1, 1.0)
        assert find_path(g, 0, 2).path == (0, 1)

    def test_skips_visited_neighbours(self, square1):
        # 0 -> 1 [1] -> 3 [0.5] -> 2 [3]; 0 is cheaper from 3 but already visited
        assert find_path(square1, 0, 4) == PathResult(path=(0, 1, 3, 2), cost=4.5)

    def test_never_backtracks(self):
        # Greedy picks 0 -> 1 and gets stuck; 0 -> 2 -> 3 would have worked
        #
        #   1 ─[1]─ 0 ─[5]─ 2 ─[1]─ 3
        g = WeightedGraph(4)
        g.add_edge(0, 1, 1)
        g.add_edge(0, 2, 5)
        g.add_edge(2, 3, 1)
        assert find_path(g, 0, 3) is None

    def test_negative_costs(self, negative1):
        assert find_path(negative1, 0, 4) == PathResult(path=(0, 1, 2, 3), cost=0)
        assert find_path(negative1, 2, 2) == PathResult(path=(2, 3), cost=-1)

    def test_infinite_cost_edges_are_usable(self):
        g = WeightedGraph(2)
        g.add_edge(0, 1, float("inf"))
        result = find_path(g, 0, 2)
        assert result.path == (0, 1)
        assert result.cost == float("inf")

    def test_target_longer_than_graph(self, triangle1):
        assert find_path(triangle1, 0, 4) is None

    def test_graph_not_modified(self, square1):
        before = square1.to_dict()
        find_path(square1, 2, 4)
        assert square1.to_dict() == before

    @pytest.mark.parametrize("target_length", [0, -1, 1.5, "2", None, True])
    def test_invalid_target_length(self, triangle1, target_length):
        with pytest.raises(InvalidArgumentError, match="target_length"):
            find_path(triangle1, 0, target_length)

    @pytest.mark.parametrize("start", [3, -1, "0", None])
    def test_invalid_start(self, triangle1, start):
        with pytest.raises(InvalidNodeError):
            find_path(triangle1, start, 2)

    def test_empty_graph_has_no_valid_start(self, empty_graph):
        with pytest.raises(InvalidNodeError):
            find_path(empty_graph, 0, 1)

    @pytest.mark.parametrize("seed", range(5))
    def test_paths_are_distinct_and_correctly_costed(self, seed):
        g = _random_graph(seed)
        for start in range(g.node_count):
            for target_length in range(1, g.node_count + 1):
                result = find_path(g, start, target_length)
                if result is None:
                    continue
                assert len(result) == target_length
                assert len(set(result.path)) == target_length
                assert result.start_node == start
                expected = 0.0
                for a, b in zip(result.path, result.path[1:]):
                    expected += g.edge_cost(a, b)
                assert result.cost == expected

    @pytest.mark.parametrize("seed", range(5))
    def test_each_step_is_cheapest_unvisited(self, seed):
        g = _random_graph(seed)
        for start in range(g.node_count):
            result = find_path(g, start, g.node_count)
            path = result.path if result is not None else ()
            for i in range(1, len(path)):
                seen = set(path[:i])
                options = [
                    (cost, node)
                    for node, cost in g.neighbors(path[i - 1]).items()
                    if node not in seen
                ]
                assert min(options) == (g.edge_cost(path[i - 1], path[i]), path[i])


class TestNearestUnvisited:
    def test_picks_cheapest(self, square1):
        assert nearest_unvisited(square1.neighbors(1), set()) == (3, 0.5)

    def test_excludes_visited(self, square1):
        assert nearest_unvisited(square1.neighbors(1), {3}) == (0, 1.0)

    def test_none_when_exhausted(self, square1):
        assert nearest_unvisited(square1.neighbors(1), {0, 2, 3}) is None

    def test_none_without_neighbours(self, isolated1):
        assert nearest_unvisited(isolated1.neighbors(3), set()) is None


@pytest.mark.parametrize("value", [1, 2, 100])
def test_validate_target_length_accepts(value):
    validate_target_length(value)
