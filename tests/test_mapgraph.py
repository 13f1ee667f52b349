import random

import pytest

from sketchbook.mapgraph import INFINITY, IndexMinPQ, MapGraph, Point, line_plot

GRAPH_TEXT = """
4 2
0 0 0
1 3 4
2 6 8
3 100 100
0 1
1 2
"""


def make_graph():
    return MapGraph.scan(GRAPH_TEXT.split())


def test_point_show_format():
    assert Point(3, 4).show() == "(    3,     4) "


def test_point_distance_symmetric_and_zero():
    p, q = Point(1, 7), Point(-5, 2)
    assert p.distance(q) == q.distance(p)
    assert p.distance(p) == 0.0


def test_line_plot_format():
    origin = Point(0, 0)
    assert line_plot(origin, origin) == "F 0.000000 0.000000  G 0.000000 0.000000"


def test_pq_yields_in_priority_order():
    rng = random.Random(7)
    priorities = [rng.random() for _ in range(20)]
    pq = IndexMinPQ(priorities)
    for k in range(len(priorities)):
        pq.insert(k)
    order = [pq.del_min() for _ in range(len(priorities))]
    assert order == sorted(range(len(priorities)), key=priorities.__getitem__)
    assert pq.is_empty()


def test_pq_change_moves_item_to_front():
    priorities = [5.0, 1.0, 3.0, 4.0]
    pq = IndexMinPQ(priorities)
    for k in range(4):
        pq.insert(k)
    priorities[3] = -1.0
    pq.change(3)
    assert pq.del_min() == 3
    assert pq.del_min() == 1


def test_pq_empty_del_min_raises():
    with pytest.raises(IndexError):
        IndexMinPQ([]).del_min()


def test_scan_and_show():
    graph = make_graph()
    lines = graph.show().splitlines()
    assert lines[0] == "4 vertices, 2 edges"
    assert len(lines) == 5


def test_scan_rejects_bad_vertex_id():
    with pytest.raises(ValueError):
        MapGraph.scan("2 0 0 0 0 5 1 1".split())


def test_scan_rejects_bad_edge():
    with pytest.raises(ValueError):
        MapGraph.scan("2 1 0 0 0 1 1 1 0 9".split())


def test_scan_rejects_truncated_input():
    with pytest.raises(ValueError):
        MapGraph.scan("3 0 0 0 0".split())


def test_shortest_path_sums_edges():
    graph = make_graph()
    pts = graph.points
    expected = pts[0].distance(pts[1]) + pts[1].distance(pts[2])
    assert graph.shortest_path(0, 2) == pytest.approx(expected)
    assert graph.path_report() == "2-1-0\n\n"
    assert graph.shortest_path(0, 2) == pytest.approx(expected)


def test_unreachable_vertex():
    graph = make_graph()
    assert graph.shortest_path(0, 3) == INFINITY
    assert graph.path_report() == "0 and 3 not connected.\n\n"


def test_shortest_path_rejects_out_of_range():
    with pytest.raises(ValueError):
        make_graph().shortest_path(0, 4)


def test_report_and_plot_need_a_path():
    graph = make_graph()
    with pytest.raises(RuntimeError):
        graph.path_report()
    with pytest.raises(RuntimeError):
        graph.plot()


def test_plot_sections():
    graph = make_graph()
    graph.shortest_path(0, 2)
    lines = graph.plot().splitlines()
    assert "C 1 0 0" in lines
    assert "C 0 0 1" in lines
    assert lines[-3] == "C 0 1 0"
    assert lines[-2:] == [graph.points[0].plot(), graph.points[2].plot()]