"""Road map graph read from text, with Dijkstra shortest paths between vertices."""

import heapq
import math
from collections import deque
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Node:
    """A map vertex with integer coordinates."""

    id: int
    x: int
    y: int

    def __str__(self):
        return f"{self.id} <{self.x:4d},{self.y}>"


@dataclass(frozen=True)
class Edge:
    """A straight road from ``src`` to ``dest``; its length is the Euclidean distance."""

    src: Node
    dest: Node
    distance: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self,
            "distance",
            math.hypot(self.src.x - self.dest.x, self.src.y - self.dest.y),
        )

    def __str__(self):
        return f"{self.src} -> {self.dest} [{self.distance:g}]"


def _ints(line, count, what):
    tokens = line.split()
    if len(tokens) < count:
        raise ValueError(f"expected {count} integers for {what}, got {line!r}")
    try:
        return [int(token) for token in tokens[:count]]
    except ValueError:
        raise ValueError(f"expected integers for {what}, got {line!r}") from None


def _next_nonblank(lines):
    """Next line holding text, or None at the end of input."""
    for line in lines:
        if line.strip():
            return line
    return None


class Graph:
    """Vertices with coordinates and an adjacency list of shared edges."""

    OFFSET = 50

    def __init__(self, vertices, source=0, destination=0):
        self.vertices = list(vertices)
        self.edge_count = 0
        self.adj = [deque() for _ in self.vertices]
        self.source = source
        self.destination = destination
        self.max_x = max((node.x for node in self.vertices), default=0)
        self.max_y = max((node.y for node in self.vertices), default=0)
        self.max_x = max(self.max_x, 0)
        self.max_y = max(self.max_y, 0)
        self.x_scale = None
        self.y_scale = None

    @classmethod
    def from_lines(cls, lines, prompt=None):
        """Read ``V E``, ``V`` lines ``id x y``, ``E`` lines ``v w`` and ``src dest``.

        Blank lines between entries are skipped.  When the source and
        destination are missing, ``prompt()`` is called for a line holding them;
        without a prompt a ValueError is raised.
        """
        it = iter(lines)
        header = next(it, None)
        if header is None:
            raise ValueError("empty map")
        n_vertices, n_edges = _ints(header, 2, "the vertex and edge counts")
        if n_vertices < 0 or n_edges < 0:
            raise ValueError("vertex and edge counts must not be negative")

        vertices = []
        for _ in range(n_vertices):
            line = _next_nonblank(it)
            if line is None:
                raise ValueError("unexpected end of map while reading vertices")
            vertex_id, x, y = _ints(line, 3, "a vertex")
            vertices.append(Node(vertex_id, x, y))

        graph = cls(vertices)
        for _ in range(n_edges):
            line = _next_nonblank(it)
            if line is None:
                raise ValueError("unexpected end of map while reading edges")
            v1, v2 = _ints(line, 2, "an edge")
            graph.add_edge(v1, v2)

        line = _next_nonblank(it)
        if line is None:
            if prompt is None:
                raise ValueError("map has no source and destination")
            line = prompt()
        graph.source, graph.destination = _ints(line, 2, "the source and destination")
        return graph

    def add_edge(self, v1, v2):
        """Add one edge from ``v1`` to ``v2`` to the front of both adjacency lists."""
        n = len(self.vertices)
        if not (0 <= v1 < n and 0 <= v2 < n):
            raise ValueError(f"edge {v1}-{v2} out of range")
        edge = Edge(self.vertices[v1], self.vertices[v2])
        self.adj[v1].appendleft(edge)
        self.adj[v2].appendleft(edge)
        self.edge_count += 1

    def adjacents(self, v):
        """Edges touching vertex ``v``, newest first."""
        return list(self.adj[v])

    def num_vertices(self):
        return len(self.vertices)

    def set_scale(self, window_size):
        """Fit the map's coordinates into a square window of ``window_size`` pixels."""
        if self.max_x == 0 or self.max_y == 0:
            raise ValueError("map coordinates must span a positive range to scale")
        usable = window_size - 2 * self.OFFSET
        self.x_scale = usable / self.max_x
        self.y_scale = usable / self.max_y

    def _require_scale(self):
        if self.x_scale is None:
            raise RuntimeError("set_scale must be called before scaling coordinates")

    def x_scaled(self, n):
        """Window column for map x coordinate ``n``."""
        self._require_scale()
        return int(n * self.x_scale) + self.OFFSET

    def y_scaled(self, n):
        """Window row for map y coordinate ``n``; y grows upwards on the map."""
        self._require_scale()
        return int((self.max_y - n) * self.y_scale) + self.OFFSET

    def __str__(self):
        lines = [f"Vertices: {len(self.vertices)}; Edges: {self.edge_count}"]
        lines.extend(str(node) for node in self.vertices)
        for i, edges in enumerate(self.adj):
            lines.append(f"{i} [ " + "".join(f"{edge}, " for edge in edges) + "]")
        return "\n".join(lines) + "\n"


class DijkstraSP:
    """Shortest paths from a graph's source, relaxing each edge from src to dest."""

    def __init__(self, graph):
        n = graph.num_vertices()
        self.source = graph.source
        if not 0 <= self.source < n:
            raise ValueError(f"source {self.source} out of range")
        self.edge_to = [None] * n
        self.dist_to = [math.inf] * n
        self.dist_to[self.source] = 0.0

        heap = [(0.0, self.source)]
        while heap:
            _, closest = heapq.heappop(heap)
            for edge in graph.adjacents(closest):
                self._relax(edge, heap)

    def _relax(self, edge, heap):
        s, d = edge.src.id, edge.dest.id
        candidate = self.dist_to[s] + edge.distance
        if self.dist_to[d] > candidate:
            self.dist_to[d] = candidate
            self.edge_to[d] = edge
            heapq.heappush(heap, (candidate, d))

    def shortest_path(self, d):
        """Edges from the source to ``d`` in travel order."""
        path = []
        v = d
        while v != self.source:
            edge = self.edge_to[v]
            if edge is None:
                raise ValueError(f"vertex {d} is not reachable from {self.source}")
            path.append(edge)
            v = edge.src.id
        path.reverse()
        return path