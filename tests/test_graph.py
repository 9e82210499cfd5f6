import random

import pytest

from algokit.graph import Graph, vertex_name

SAMPLE_EDGES = [
    (0, 1), (0, 2), (0, 6), (0, 3), (1, 0), (1, 4), (1, 2), (2, 0),
    (2, 1), (2, 5), (3, 0), (4, 1), (5, 2), (5, 6), (6, 0), (6, 5),
]


def sample_graph():
    graph = Graph(7)
    for a, b in SAMPLE_EDGES:
        graph.add_edge(a, b)
    return graph


def random_graph(seed, n=12, m=25):
    rng = random.Random(seed)
    graph = Graph(n)
    for _ in range(m):
        graph.add_edge(rng.randrange(n), rng.randrange(n))
    return graph


def test_vertex_name_letters():
    assert vertex_name(0) == "A"
    assert [vertex_name(i) for i in range(3)] == ["A", "B", "C"]


def test_bfs_sample_order():
    order = sample_graph().bfs(0)
    assert "".join(vertex_name(v) for v in order) == "ABCGDEF"


def test_dfs_sample_order():
    assert sample_graph().dfs() == [0, 1, 4, 2, 5, 6, 3]


def test_shortest_path_sample():
    graph = sample_graph()
    dist, _ = graph.bfs_tree(0)
    path = graph.shortest_path(0, 4)
    assert path == [0, 1, 4]
    assert len(path) - 1 == dist[4]


@pytest.mark.parametrize("seed", range(5))
def test_dfs_visits_every_vertex_once(seed):
    graph = random_graph(seed)
    order = graph.dfs()
    assert sorted(order) == list(range(graph.vertex_count))


@pytest.mark.parametrize("seed", range(5))
def test_bfs_order_matches_distances(seed):
    graph = random_graph(seed)
    order = graph.bfs(0)
    dist, _ = graph.bfs_tree(0)
    assert order[0] == 0
    assert len(order) == len(set(order))
    assert set(order) == {v for v, d in enumerate(dist) if d >= 0}
    assert [dist[v] for v in order] == sorted(dist[v] for v in order)


@pytest.mark.parametrize("seed", range(5))
def test_paths_are_valid_and_shortest(seed):
    graph = random_graph(seed)
    dist, _ = graph.bfs_tree(0)
    for target, d in enumerate(dist):
        if d < 0:
            with pytest.raises(ValueError):
                graph.shortest_path(0, target)
            continue
        path = graph.shortest_path(0, target)
        assert path[0] == 0 and path[-1] == target
        assert len(path) - 1 == d
        for a, b in zip(path, path[1:]):
            assert b in graph.neighbours(a)


def test_unreachable_vertex_has_minus_one():
    graph = Graph(3)
    graph.add_edge(0, 1)
    dist, parent = graph.bfs_tree(0)
    assert dist[2] == -1
    assert parent[2] == -1
    assert parent[0] == 0


def test_edges_are_directed():
    graph = Graph(2)
    graph.add_edge(0, 1)
    assert graph.bfs(1) == [1]
    assert graph.bfs(0) == [0, 1]


def test_out_of_range_vertex_rejected():
    graph = Graph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2)
    with pytest.raises(ValueError):
        graph.bfs(-1)


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(-1)