"""Undirected Euclidean map graph with Dijkstra shortest paths and turtle plots."""

import math
from collections import deque
from dataclasses import dataclass

INFINITY = 9999999.0
EPSILON = 0.000001

SIZE = 0.30
SCALEX = 0.0001 * 512.0 * 1.38
SCALEY = 0.0001 * 512.0 * 2.1


@dataclass(frozen=True)
class Point:
    """An integer point on the map."""

    x: int
    y: int

    def distance(self, other):
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def show(self):
        """Fixed-width text form of the point."""
        return f"({self.x:5d}, {self.y:5d}) "

    def plot(self):
        """Turtle command drawing a spot at the point."""
        return f"F {self.x * SCALEX:f} {self.y * SCALEY:f} S {SIZE:f}"


def line_plot(p, q):
    """Turtle command drawing a line from ``p`` to ``q``."""
    return (
        f"F {p.x * SCALEX:f} {p.y * SCALEY:f}  "
        f"G {q.x * SCALEX:f} {q.y * SCALEY:f}"
    )


class IndexMinPQ:
    """Indirect binary heap over items whose priorities live in a shared list.

    After changing ``priority[k]`` for a queued item, call ``change(k)``.
    """

    def __init__(self, priority):
        self._priority = priority
        self._pq = [None]
        self._qp = {}

    def __len__(self):
        return len(self._pq) - 1

    def is_empty(self):
        return len(self) == 0

    def _greater(self, i, j):
        return self._priority[i] > self._priority[j]

    def _exch(self, i, j):
        qi, qj = self._qp[i], self._qp[j]
        self._qp[i], self._qp[j] = qj, qi
        self._pq[qj] = i
        self._pq[qi] = j

    def _fix_up(self, k):
        pq = self._pq
        while k > 1 and self._greater(pq[k // 2], pq[k]):
            self._exch(pq[k], pq[k // 2])
            k //= 2

    def _fix_down(self, k, n):
        pq = self._pq
        while 2 * k <= n:
            j = 2 * k
            if j < n and self._greater(pq[j], pq[j + 1]):
                j += 1
            if not self._greater(pq[k], pq[j]):
                break
            self._exch(pq[k], pq[j])
            k = j

    def insert(self, k):
        """Add item ``k`` with priority ``priority[k]``."""
        self._pq.append(k)
        self._qp[k] = len(self)
        self._fix_up(len(self))

    def del_min(self):
        """Remove and return the item with the smallest priority."""
        n = len(self)
        if n == 0:
            raise IndexError("priority queue is empty")
        self._exch(self._pq[1], self._pq[n])
        self._fix_down(1, n - 1)
        item = self._pq.pop()
        del self._qp[item]
        return item

    def change(self, k):
        """Restore heap order after the priority of ``k`` changed."""
        self._fix_up(self._qp[k])
        self._fix_down(self._qp[k], len(self))


def _next_int(tokens):
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


class MapGraph:
    """Undirected graph whose vertices are points and edge weights distances."""

    def __init__(self, points):
        self.points = list(points)
        self.edge_count = 0
        self.adj = [deque() for _ in self.points]
        self.dist = [INFINITY] * len(self.points)
        self.pred = [-1] * len(self.points)
        self.source = None
        self.destination = None

    @property
    def vertex_count(self):
        return len(self.points)

    @classmethod
    def scan(cls, tokens):
        """Build a graph from tokens ``V E``, ``V`` lines ``id x y``, ``E`` lines ``v w``.

        Tokens after the graph are left unread in ``tokens`` when it is an iterator.
        """
        it = iter(tokens)
        n_vertices = _next_int(it)
        n_edges = _next_int(it)
        if n_vertices < 0 or n_edges < 0:
            raise ValueError("vertex and edge counts must not be negative")

        points = []
        for _ in range(n_vertices):
            v = _next_int(it)
            x = _next_int(it)
            y = _next_int(it)
            if not 0 <= v < n_vertices:
                raise ValueError(f"vertex id {v} out of range")
            points.append(Point(x, y))

        graph = cls(points)
        for _ in range(n_edges):
            v = _next_int(it)
            w = _next_int(it)
            if not (0 <= v < n_vertices and 0 <= w < n_vertices):
                raise ValueError(f"edge {v}-{w} out of range")
            graph.insert_edge(v, w)
        return graph

    def insert_edge(self, v, w):
        """Connect ``v`` and ``w`` with an edge weighted by their distance."""
        d = self.points[v].distance(self.points[w])
        self.adj[v].appendleft((w, d))
        self.adj[w].appendleft((v, d))
        self.edge_count += 1

    def show(self):
        """Text listing of the vertices and their neighbours."""
        lines = [f"{self.vertex_count} vertices, {self.edge_count} edges"]
        for v, point in enumerate(self.points):
            neighbours = "".join(f"{w} " for w, _ in self.adj[v])
            lines.append(f"{v:6d} {point.show()} :  {neighbours}")
        return "\n".join(lines) + "\n"

    def shortest_path(self, s, d):
        """Run Dijkstra from ``s`` and return the distance to ``d``."""
        n = self.vertex_count
        if not (0 <= s < n and 0 <= d < n):
            raise ValueError(f"vertices {s} and {d} must lie in 0..{n - 1}")
        self.source = s
        self.destination = d

        dist, pred = self.dist, self.pred
        dist[:] = [INFINITY] * n
        pred[:] = [-1] * n
        pq = IndexMinPQ(dist)
        for v in range(n):
            pq.insert(v)

        dist[s] = 0.0
        pred[s] = s
        pq.change(s)

        while not pq.is_empty():
            v = pq.del_min()
            if pred[v] == -1:
                break
            for w, weight in self.adj[v]:
                if dist[v] + weight < dist[w] - EPSILON:
                    dist[w] = dist[v] + weight
                    pq.change(w)
                    pred[w] = v
        return dist[d]

    def _require_path(self):
        if self.source is None:
            raise RuntimeError("no shortest path has been computed")
        return self.source, self.destination

    def _path_vertices(self):
        """Vertices from the destination back to the source, source excluded."""
        s, d = self._require_path()
        v = d
        while v != s:
            yield v
            v = self.pred[v]

    def path_report(self):
        """The last path as ``d-...-s`` followed by a blank line."""
        s, d = self._require_path()
        if self.pred[d] == -1:
            return f"{s} and {d} not connected.\n\n"
        return "".join(f"{v}-" for v in self._path_vertices()) + f"{s}\n\n"

    def plot(self):
        """Turtle commands drawing the map, the last path, visited and end vertices."""
        s, d = self._require_path()
        lines = []
        for v, point in enumerate(self.points):
            lines.append(point.plot())
            lines.extend(line_plot(point, self.points[w]) for w, _ in self.adj[v])

        if self.pred[d] != -1:
            lines.append("C 1 0 0")
            lines.extend(
                line_plot(self.points[self.pred[v]], self.points[v])
                for v in self._path_vertices()
            )

        lines.append("C 0 0 1")
        lines.extend(
            point.plot()
            for point, distance in zip(self.points, self.dist)
            if distance < INFINITY
        )

        lines.append("C 0 1 0")
        lines.append(self.points[s].plot())
        lines.append(self.points[d].plot())
        return "\n".join(lines) + "\n"