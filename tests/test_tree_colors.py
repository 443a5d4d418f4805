import random

import pytest

from roundsolve.tree_colors import ColoredTree, main


def _direct_cost(colors, edges):
    return sum(w for u, v, w in edges if colors[u] != colors[v])


def test_uniform_colors_cost_nothing():
    tree = ColoredTree([1, 1, 1], [(0, 1, 5), (1, 2, 7)])
    assert tree.cost == 0


def test_initial_cost_counts_differing_edges():
    tree = ColoredTree([1, 2, 1], [(0, 1, 5), (1, 2, 7)])
    assert tree.cost == _direct_cost([1, 2, 1], [(0, 1, 5), (1, 2, 7)])


def test_recolor_same_color_unchanged():
    tree = ColoredTree([1, 2], [(0, 1, 4)])
    assert tree.recolor(0, 1) == 4
    assert tree.colors == (1, 2)


def test_recolor_and_back_restores_cost():
    edges = [(0, 1, 3), (0, 2, 4), (2, 3, 6)]
    tree = ColoredTree([1, 2, 1, 3], edges)
    before = tree.cost
    tree.recolor(2, 9)
    assert tree.recolor(2, 1) == before


def test_heavy_star_recolor_center():
    leaves = 40
    edges = [(0, i, 1) for i in range(1, leaves + 1)]
    tree = ColoredTree([0] * (leaves + 1), edges)
    assert tree.recolor(0, 1) == leaves
    assert tree.recolor(5, 1) == leaves - 1
    assert tree.recolor(0, 0) == 1


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_queries_match_definition(seed):
    rng = random.Random(seed)
    n = 60
    edges = [(0 if i < 30 else rng.randrange(i), i, rng.randint(1, 9)) for i in range(1, n)]
    colors = [rng.randint(1, 3) for _ in range(n)]
    tree = ColoredTree(colors, edges)
    assert tree.cost == _direct_cost(colors, edges)
    for _ in range(200):
        vertex, color = rng.randrange(n), rng.randint(1, 3)
        colors[vertex] = color
        assert tree.recolor(vertex, color) == _direct_cost(colors, edges)


def test_bad_vertex_raises():
    tree = ColoredTree([1, 2], [(0, 1, 1)])
    with pytest.raises(IndexError):
        tree.recolor(2, 1)


def test_bad_edge_raises():
    with pytest.raises(IndexError):
        ColoredTree([1, 2], [(0, 5, 1)])


def test_main_prints_cost_per_query(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("1\n2 2\n1 1\n1 2 5\n1 2\n1 2\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["5", "5"]