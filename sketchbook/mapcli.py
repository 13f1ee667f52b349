"""Commands answering shortest-path queries on a map read from stdin."""

import argparse
import itertools
import sys

from sketchbook.mapgraph import MapGraph


def _parse_int(token):
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _load():
    tokens = iter(sys.stdin.read().split())
    graph = MapGraph.scan(tokens)
    return graph, tokens


def _queries(tokens):
    while True:
        pair = list(itertools.islice(tokens, 2))
        if len(pair) < 2:
            return
        yield _parse_int(pair[0]), _parse_int(pair[1])


def _parse_args(argv, prog, description):
    argparse.ArgumentParser(prog=prog, description=description).parse_args(argv)


def distances_main(argv=None):
    """Print the shortest distance for each ``s d`` query after the map."""
    _parse_args(argv, "distances", "Shortest distances for queries on stdin.")
    try:
        graph, tokens = _load()
        for s, d in _queries(tokens):
            print(f"{graph.shortest_path(s, d):.6f}")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def paths_main(argv=None):
    """Print the shortest path for each ``s d`` query after the map."""
    _parse_args(argv, "paths", "Shortest paths for queries on stdin.")
    try:
        graph, tokens = _load()
        for s, d in _queries(tokens):
            graph.shortest_path(s, d)
            sys.stdout.write(graph.path_report())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def plotit_main(argv=None):
    """Print turtle commands for the map and the path between one ``s d`` pair."""
    _parse_args(argv, "plotit", "Turtle plot of a shortest path.")
    try:
        graph, tokens = _load()
        ends = [_parse_int(token) for token in itertools.islice(tokens, 2)]
        ends += [0] * (2 - len(ends))
        graph.shortest_path(ends[0], ends[1])
        sys.stdout.write(graph.plot())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0