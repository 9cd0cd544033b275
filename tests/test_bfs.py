import os

import pytest

from conftest import CONFIG_DIR, DIAMOND_EDGES, DIAMOND_NODES, build_path_config
from algorithms import ShortestPathAlgorithm
from graph import PathEdgeState, PathGraph, PathNodeState, load_config_file


def run(algo, limit=1000):
    """Step until False; returns the number of True steps."""
    steps = 0
    while algo.step():
        steps += 1
        assert steps < limit, "algorithm did not terminate"
    return steps


def path_nodes(algo):
    return [i for i in range(algo.graph.node_count)
            if algo.graph.nodes[i].state is PathNodeState.ON_SHORTEST_PATH]


def path_edges(algo):
    return [e.index for e in algo.graph.edges if e.state is PathEdgeState.ON_SHORTEST_PATH]


class TestShortestPath:

    def test_diamond_shortest_path_has_two_edges(self, diamond_path_config):
        algo = ShortestPathAlgorithm(PathGraph(diamond_path_config))
        run(algo)
        assert algo.path_found
        assert algo.path_edges() == [0, 2]          # start → A → end, first in adjacency order
        assert path_edges(algo) == [0, 2]
        assert path_nodes(algo) == [0, 1, 3]

    def test_first_step_only_seeds_the_start(self, diamond_path_config):
        algo = ShortestPathAlgorithm(PathGraph(diamond_path_config))
        assert algo.step() is True
        states = [n.state for n in algo.graph.nodes]
        assert states == [PathNodeState.DISCOVERED] + [PathNodeState.UNVISITED] * 3
        assert all(e.state is PathEdgeState.UNUSED for e in algo.graph.edges)

    def test_second_step_expands_start(self, diamond_path_config):
        algo = ShortestPathAlgorithm(PathGraph(diamond_path_config))
        algo.step()
        algo.step()
        nodes, edges = algo.graph.nodes, algo.graph.edges
        assert nodes[0].state is PathNodeState.VISITED
        assert nodes[1].state is PathNodeState.DISCOVERED
        assert nodes[2].state is PathNodeState.DISCOVERED
        assert nodes[1].entered_by == 0 and nodes[2].entered_by == 1
        assert edges[0].state is PathEdgeState.PROBED
        assert edges[1].state is PathEdgeState.PROBED

    def test_dequeued_node_marks_its_entry_edge_used(self, diamond_path_config):
        algo = ShortestPathAlgorithm(PathGraph(diamond_path_config))
        for _ in range(3):
            algo.step()
        assert algo.graph.nodes[1].state is PathNodeState.VISITED
        assert algo.graph.edges[0].state is PathEdgeState.USED
        # end node was discovered through A, never re-discovered through B
        assert algo.graph.nodes[3].entered_by == 2

    def test_step_count(self, diamond_path_config):
        # seed, expand start, expand A, expand B, dequeue end
        algo = ShortestPathAlgorithm(PathGraph(diamond_path_config))
        assert run(algo) == 5

    def test_sample_maze_path(self):
        config = load_config_file(os.path.join(CONFIG_DIR, "bfs_maze.txt"), "path")
        algo = ShortestPathAlgorithm(PathGraph(config))
        run(algo)
        ends = [algo.graph.edges[i] for i in algo.path_edges()]
        assert [(e.from_node, e.to_node) for e in ends] == [
            (0, 1), (1, 2), (2, 3), (3, 7), (7, 11),
        ]

    def test_start_equals_end(self):
        config = build_path_config(DIAMOND_NODES, DIAMOND_EDGES, start=2, end=2)
        algo = ShortestPathAlgorithm(PathGraph(config))
        assert algo.step() is True
        assert algo.step() is False
        assert path_nodes(algo) == [2]
        assert all(e.state is PathEdgeState.UNUSED for e in algo.graph.edges)
        assert algo.path_edges() == []

    def test_disconnected_end(self):
        nodes = [(0, 0), (1, 0), (2, 0)]
        algo = ShortestPathAlgorithm(PathGraph(build_path_config(nodes, [(0, 1)])))
        run(algo)
        assert not algo.path_found
        assert path_nodes(algo) == []
        assert path_edges(algo) == []
        assert algo.graph.nodes[2].state is PathNodeState.UNVISITED

    def test_edges_are_directed(self):
        nodes = [(0, 0), (1, 0)]
        algo = ShortestPathAlgorithm(PathGraph(build_path_config(nodes, [(1, 0)])))
        run(algo)
        assert not algo.path_found


class TestTermination:

    def test_false_is_sticky(self, diamond_path_config):
        algo = ShortestPathAlgorithm(PathGraph(diamond_path_config))
        run(algo)
        before = algo.current_state().snapshot()
        for _ in range(3):
            assert algo.step() is False
        assert algo.finished
        assert algo.current_state().snapshot() == before

    def test_runs_are_deterministic(self, diamond_path_config):
        def history():
            algo = ShortestPathAlgorithm(PathGraph(diamond_path_config))
            snaps = []
            while algo.step():
                snaps.append(algo.current_state().snapshot())
            return snaps

        assert history() == history()

    @pytest.mark.parametrize("size", [3, 6])
    def test_path_length_on_open_grid(self, size):
        nodes = [(x, y) for y in range(size) for x in range(size)]
        edges = []
        for i, (x, y) in enumerate(nodes):
            if x + 1 < size:
                edges += [(i, i + 1), (i + 1, i)]
            if y + 1 < size:
                edges += [(i, i + size), (i + size, i)]
        algo = ShortestPathAlgorithm(PathGraph(build_path_config(nodes, edges)))
        run(algo)
        assert len(algo.path_edges()) == 2 * (size - 1)
