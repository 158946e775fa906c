# pylint: disable=protected-access,invalid-name
import math
import random

import networkx as nx
import pytest

from flexalgo.algorithms.dijkstra import ShortestPathSolver, dijkstra
from flexalgo.algorithms.heap import IndexedPriorityHeap
from flexalgo.algorithms.paths import path_cost
from flexalgo.config import SolverConfig
from flexalgo.exceptions import InvalidNodeError, NegativeWeightError
from flexalgo.types.base import NodeState


class TestShortestPath:
    def test_delay_graph_path_and_cost(self, delay_graph):
        solver = ShortestPathSolver(*delay_graph)
        cost, path = solver.shortest_path(0, 2)
        assert cost == 14
        assert path == [0, 3, 1, 4, 2]
        assert path_cost(solver.adjacency, path) == cost

    def test_delay_graph_distances(self, delay_graph):
        solver = ShortestPathSolver(*delay_graph)
        assert solver.distances(0) == {0: 0, 3: 2, 1: 6, 4: 7, 2: 14}

    def test_network_delay_reports_max_cost_and_order(self, delay_graph):
        solver = ShortestPathSolver(*delay_graph)
        assert solver.network_delay(0) == (14, [0, 3, 1, 4, 2])

    def test_network_delay_none_when_some_node_unreachable(self, split_graph):
        solver = ShortestPathSolver(*split_graph)
        assert solver.network_delay(0) is None
        # From 3 everything is reachable through 3 -> 4 -> 0
        assert solver.network_delay(3) == (6.0, [3, 4, 0, 1, 2])

    def test_unreachable_target_returns_none(self, split_graph):
        solver = ShortestPathSolver(*split_graph)
        assert solver.shortest_path(0, 3) is None
        assert solver.shortest_path(0, 4) is None
        distances = solver.distances(0)
        assert set(distances) == {0, 1, 2}
        assert all(not math.isinf(d) for d in distances.values())

    def test_source_equals_target(self, delay_graph):
        solver = ShortestPathSolver(*delay_graph)
        assert solver.shortest_path(4, 4) == (0, [4])

    def test_equal_cost_routes(self, diamond_graph):
        solver = ShortestPathSolver(*diamond_graph)
        cost, path = solver.shortest_path(0, 3)
        assert cost == 2
        assert path in ([0, 1, 3], [0, 2, 3])
        assert path_cost(solver.adjacency, path) == cost

    def test_zero_weights_and_self_loops(self):
        solver = ShortestPathSolver(3, [(0, 0, 0), (0, 1, 0), (1, 2, 3), (2, 2, 1)])
        assert solver.distances(0) == {0: 0, 1: 0, 2: 3}
        assert solver.shortest_path(0, 2) == (3, [0, 1, 2])

    def test_parallel_edges_use_cheapest(self):
        solver = ShortestPathSolver(2, [(0, 1, 5), (0, 1, 2), (0, 1, 7)])
        assert solver.shortest_path(0, 1) == (2, [0, 1])

    def test_float_weights(self, split_graph):
        solver = ShortestPathSolver(*split_graph)
        assert solver.shortest_path(0, 2) == (4.0, [0, 1, 2])

    def test_paths_to_every_reachable_node(self, delay_graph):
        solver = ShortestPathSolver(*delay_graph)
        assert solver.paths(0) == {
            0: [0],
            3: [0, 3],
            1: [0, 3, 1],
            4: [0, 3, 1, 4],
            2: [0, 3, 1, 4, 2],
        }

    def test_one_shot_helper(self, delay_graph):
        tree = dijkstra(*delay_graph, source=0)
        assert tree.path_to(2) == (14, [0, 3, 1, 4, 2])


class TestRunState:
    def test_full_run_finalizes_reachable_nodes(self, split_graph):
        tree = ShortestPathSolver(*split_graph).solve(0)
        assert tree.source == 0
        assert tree.order == [0, 1, 2]
        assert tree.states == (
            NodeState.FINALIZED,
            NodeState.FINALIZED,
            NodeState.FINALIZED,
            NodeState.UNVISITED,
            NodeState.UNVISITED,
        )
        assert tree.predecessors == {1: 0, 2: 1}
        assert tree.is_reachable(2)
        assert not tree.is_reachable(3)
        assert tree.path_to(4) is None

    def test_early_exit_stops_at_target(self, delay_graph):
        tree = ShortestPathSolver(*delay_graph).solve(0, target=3)
        assert tree.order == [0, 3]
        assert tree.distances == {0: 0, 3: 2}
        assert tree.states[1] is NodeState.TENTATIVE
        assert tree.states[4] is NodeState.UNVISITED
        assert tree.states[2] is NodeState.UNVISITED
        # Tentative nodes are not reported as reachable
        assert tree.path_to(1) is None

    def test_early_exit_can_be_disabled(self, delay_graph):
        solver = ShortestPathSolver(*delay_graph, config=SolverConfig(early_exit=False))
        tree = solver.solve(0, target=3)
        assert tree.order == [0, 3, 1, 4, 2]
        assert all(state is NodeState.FINALIZED for state in tree.states)

    def test_each_node_pushed_once(self, delay_graph, monkeypatch):
        pushed = []
        original_push = IndexedPriorityHeap.push

        def counting_push(self, value):
            pushed.append(value)
            return original_push(self, value)

        monkeypatch.setattr(IndexedPriorityHeap, "push", counting_push)
        ShortestPathSolver(*delay_graph).solve(0)
        assert pushed == [0, 1, 2, 3, 4]

    def test_solver_is_reusable(self, delay_graph):
        solver = ShortestPathSolver(*delay_graph)
        adjacency = solver.adjacency
        first = solver.distances(2)
        assert solver.distances(0) == {0: 0, 3: 2, 1: 6, 4: 7, 2: 14}
        assert solver.distances(2) == first
        assert solver.adjacency is adjacency

    def test_neighbors(self, delay_graph):
        solver = ShortestPathSolver(*delay_graph)
        assert solver.neighbors(0) == ((1, 9), (3, 2))
        assert solver.neighbors(2) == ((1, 3), (0, 5))
        with pytest.raises(InvalidNodeError):
            solver.neighbors(5)


class TestInvalidInput:
    @pytest.mark.parametrize("edge", [(0, 5, 1), (5, 0, 1), (-1, 0, 1), (0, 1.0, 1)])
    def test_edge_with_invalid_node_rejected(self, edge):
        with pytest.raises(InvalidNodeError):
            ShortestPathSolver(5, [(0, 1, 1), edge])

    @pytest.mark.parametrize("source", [-1, 5, 1.0, True, "0"])
    def test_invalid_source_rejected(self, delay_graph, source):
        solver = ShortestPathSolver(*delay_graph)
        with pytest.raises(InvalidNodeError):
            solver.shortest_path(source, 0)

    def test_invalid_target_rejected(self, delay_graph):
        solver = ShortestPathSolver(*delay_graph)
        with pytest.raises(InvalidNodeError):
            solver.shortest_path(0, 5)
        with pytest.raises(InvalidNodeError):
            solver.solve(0).path_to(5)

    def test_invalid_node_error_is_value_error(self, delay_graph):
        solver = ShortestPathSolver(*delay_graph)
        with pytest.raises(ValueError, match=r"\[0, 5\)"):
            solver.distances(7)

    def test_negative_weight_rejected(self):
        with pytest.raises(NegativeWeightError) as exc_info:
            ShortestPathSolver(3, [(0, 1, 2), (1, 2, -1)])
        err = exc_info.value
        assert (err.source, err.target, err.weight) == (1, 2, -1)
        assert isinstance(err, ValueError)

    def test_negative_weight_allowed_when_check_disabled(self):
        # Results are undefined for such graphs; only construction is promised.
        solver = ShortestPathSolver(
            2, [(0, 1, -1)], config=SolverConfig(reject_negative_weights=False)
        )
        assert solver.neighbors(0) == ((1, -1),)

    def test_empty_graph_has_no_valid_source(self):
        solver = ShortestPathSolver(0, [])
        with pytest.raises(InvalidNodeError):
            solver.solve(0)


class TestAgainstNetworkX:
    @pytest.mark.parametrize("seed", range(6))
    def test_random_graphs_match_networkx(self, seed):
        rng = random.Random(seed)
        n = rng.randint(1, 30)
        edges = [
            (rng.randrange(n), rng.randrange(n), rng.randint(0, 20))
            for _ in range(rng.randint(0, n * 4))
        ]
        G = nx.MultiDiGraph()
        G.add_nodes_from(range(n))
        for u, v, w in edges:
            G.add_edge(u, v, weight=w)

        solver = ShortestPathSolver(n, edges)
        source = rng.randrange(n)
        expected = nx.single_source_dijkstra_path_length(G, source, weight="weight")
        assert solver.distances(source) == dict(expected)

        for target in range(n):
            result = solver.shortest_path(source, target)
            if target not in expected:
                assert result is None
                continue
            cost, path = result
            assert cost == expected[target]
            assert path[0] == source and path[-1] == target
            assert path_cost(solver.adjacency, path) == cost

    def test_from_networkx_named_nodes(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=1)
        G.add_edge("B", "C", weight=2)
        G.add_edge("A", "C", weight=5)
        solver, node_map = ShortestPathSolver.from_networkx(G)
        cost, path = solver.shortest_path(node_map.index_of("A"), node_map.index_of("C"))
        assert cost == 3
        assert node_map.names(path) == ["A", "B", "C"]
