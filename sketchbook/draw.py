"""Draw a map and its shortest path in a window."""

import math
import sys

from sketchbook.routing import DijkstraSP, Graph

WINDOW_SIZE = 1050
VERTEX_RADIUS = 14
EDGE_INSET = 7
FONT_PATH = "fonts/Roboto-Regular.ttf"

_WHITE = (255, 255, 255)
_RED = (255, 0, 0)
_BLACK = (0, 0, 0)
_GREEN = (0, 255, 0)
_BLUE = (0, 0, 255)


def _angles():
    """Degrees from 0 below 360 in steps of 0.1, accumulated as floats."""
    i = 0.0
    while i < 360:
        yield i * math.pi / 180
        i += 0.1


def circle_points(x, y, r):
    """Pixels on the outline of a circle of radius ``r`` around ``(x, y)``."""
    return [
        (int(x + r * math.cos(angle)), int(y + r * math.sin(angle)))
        for angle in _angles()
    ]


def filled_circle_points(x, y, r):
    """Pixels on the rings of radius 1 to ``r - 1`` around ``(x, y)``."""
    return [
        (int(x + j * math.cos(angle)), int(y + j * math.sin(angle)))
        for angle in _angles()
        for j in range(1, r)
    ]


def midpoint_circle_points(cx, cy, diameter):
    """Pixels of a circle by the midpoint algorithm, eight octants at a time."""
    radius = diameter // 2
    x, y = radius - 1, 0
    tx = ty = 1
    error = tx - diameter
    points = []
    while x >= y:
        points.extend(
            [
                (cx + x, cy - y), (cx + x, cy + y),
                (cx - x, cy - y), (cx - x, cy + y),
                (cx + y, cy - x), (cx + y, cy + x),
                (cx - y, cy - x), (cx - y, cy + x),
            ]
        )
        if error <= 0:
            y += 1
            error += ty
            ty += 2
        if error > 0:
            x -= 1
            tx += 2
            error += tx - diameter
    return points


def edge_segment(graph, edge):
    """Window line ``(x1, y1, x2, y2)`` for ``edge``, pulled in from the vertex circles."""
    src_x, src_y = graph.x_scaled(edge.src.x), graph.y_scaled(edge.src.y)
    dest_x, dest_y = graph.x_scaled(edge.dest.x), graph.y_scaled(edge.dest.y)
    if src_x < dest_x:
        src_x, dest_x = src_x + EDGE_INSET, dest_x - EDGE_INSET
    else:
        src_x, dest_x = src_x - EDGE_INSET, dest_x + EDGE_INSET
    if src_y < dest_y:
        src_y, dest_y = src_y + EDGE_INSET, dest_y - EDGE_INSET
    else:
        src_y, dest_y = src_y - EDGE_INSET, dest_y + EDGE_INSET
    return src_x, src_y, dest_x, dest_y


def path_summary(graph, path):
    """Two report lines: the vertices along ``path`` and its total length."""
    hops = "".join(f"{edge.dest.id} -> " for edge in path)
    total = sum(edge.distance for edge in path)
    return f"Shortest path: {graph.source} -> {hops}\nShortest distance: {total:.4f}\n"


def _draw_scene(pygame, screen, font, graph, path):
    screen.fill(_WHITE)

    for node in graph.vertices:
        x, y = graph.x_scaled(node.x), graph.y_scaled(node.y)
        if node.id in (graph.source, graph.destination):
            points = filled_circle_points(x, y, VERTEX_RADIUS)
        else:
            points = circle_points(x, y, VERTEX_RADIUS)
        for point in points:
            screen.set_at(point, _RED)
        label = font.render(str(node.id), False, _BLUE)
        label = pygame.transform.scale(label, (VERTEX_RADIUS, VERTEX_RADIUS))
        screen.blit(label, (x - EDGE_INSET, y - EDGE_INSET))

    for v in range(graph.num_vertices()):
        for edge in graph.adjacents(v):
            x1, y1, x2, y2 = edge_segment(graph, edge)
            pygame.draw.line(screen, _BLACK, (x1, y1), (x2, y2))

    for edge in path:
        x1, y1, x2, y2 = edge_segment(graph, edge)
        pygame.draw.line(screen, _GREEN, (x1, y1), (x2, y2))

    pygame.display.flip()


def _show(graph, path, title):
    import pygame

    pygame.init()
    try:
        try:
            font = pygame.font.Font(FONT_PATH, VERTEX_RADIUS)
        except OSError:
            print("Couldn't find/init open ttf font.")
            return 1
        screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        pygame.display.set_caption(title)
        graph.set_scale(WINDOW_SIZE)

        _draw_scene(pygame, screen, font, graph, path)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                _draw_scene(pygame, screen, font, graph, path)
    finally:
        pygame.quit()


def _ask_for_ends():
    print("No graph src/dest ... ", end="", flush=True)
    return input()


def main(argv=None):
    """Read a map file, print its shortest path and draw it; return an exit code."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print("Usage: draw <map.txt>")
        return 1
    map_path = argv[0]

    print(f"Reading map: {map_path}")
    try:
        with open(map_path, encoding="utf-8") as handle:
            graph = Graph.from_lines(handle.read().splitlines(), prompt=_ask_for_ends)
    except OSError:
        print(f"Error opening map file: {map_path}")
        return 1
    except (ValueError, EOFError) as exc:
        print(f"Error reading map file: {exc}")
        return 1

    print(f"Graph src/dest : {graph.source}, {graph.destination}")
    print("Graph:\n" + str(graph), end="")

    try:
        path = DijkstraSP(graph).shortest_path(graph.destination)
    except (ValueError, IndexError) as exc:
        print(f"No shortest path: {exc}")
        return 1
    print(path_summary(graph, path), end="")

    try:
        return _show(graph, path, f"Map Routing: {map_path}")
    except ValueError as exc:
        print(f"Cannot draw map: {exc}")
        return 1