# sketchbook

A collection of small, self-contained programs for learning and tinkering:
square-root approximations, shortest paths on road maps, a turtle-graphics
to PostScript converter, recursive drawings, animated Julia sets, a movable
owl sprite, and a minimal HTTP server and client pair.

The graphical programs open a window with pygame; everything else runs in a
terminal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Square roots

`sketchbook-tutorial NUMBER` prints the square root of a number, computed by
a ten-step Newton iteration seeded from a lookup table; each step is printed
as it is computed. Without an argument it prints its version and a usage line
and exits with status 1.

`sketchbook-make-table PATH` writes a C array declaration holding the square
roots of 0 to 9, closed by a zero, to `PATH`.

From Python, `sketchbook.mathfunctions` offers:

- `sqrt(x, use_mymath=True)`: the table-seeded iteration, or `math.sqrt`
  when `use_mymath` is false (NaN for negative input);
- `mysqrt(x, table=None)`: the Newton iteration, starting from `table[int(x)]`
  when a table is given and `1 <= x < 10`; zero for `x <= 0`;
- `log_exp_sqrt(x)`: the root through logarithm and exponential;
- `sqrt_table()`, `format_table(table)` and `write_table(path)`.

## Map routing

Maps are plain text: a line `V E`, then `V` lines `id x y`, then `E` lines
`from to` naming undirected edges whose weights are the Euclidean distances
between the endpoints.

- `sketchbook-distances < map.txt` reads the map, then pairs `s d` from the
  rest of the input, and prints each shortest distance to six decimals.
- `sketchbook-paths < map.txt` prints each shortest path instead, from the
  destination back to the source, or says that the two are not connected.
- `sketchbook-plotit < map.txt` reads one `s d` pair (missing numbers count
  as 0) and prints the map, the path, the visited vertices and the two end
  vertices as turtle-graphics commands.
- `sketchbook-turtle < input.tur > output.eps` converts turtle-graphics
  commands (`C`, `F`, `S`, `R`, `G`, `D`) into an EPS drawing in landscape.
  An unknown command letter ends it with `Illegal input format.` and status 1.

So a picture of a route is:

```
sketchbook-plotit < map.txt > route.tur
sketchbook-turtle < route.tur > route.eps
```

`sketchbook-map map.txt` reads a map whose last line may name the source and
destination (it asks for them on standard input otherwise), prints the graph,
the shortest path and its length, and draws the map in a window with the path
highlighted in green. Vertex labels use the font `fonts/Roboto-Regular.ttf`,
looked up from the current directory. Press space to redraw; close the window
to quit.

The building blocks live in `sketchbook.mapgraph` (`Point`, `line_plot`,
`IndexMinPQ`, `MapGraph`) and `sketchbook.routing` (`Node`, `Edge`, `Graph`,
`DijkstraSP`); circle rasterising and path reporting helpers are in
`sketchbook.draw`.

## Drawings

- `sketchbook-htree DEPTH` draws an H-tree of the given depth in random
  colours. Press space for a new set of colours.
- `sketchbook-fractal-circle DEPTH` draws a circle filled with seven smaller
  circles, recursively. After the first window event it adds one circle per
  frame until the figure is complete.
- `sketchbook-julia` animates a Julia set whose constant moves around the
  unit circle, with slowly drifting colour shades. `--palette` colours it by
  a fixed 256-colour palette instead. Press space to pause and resume.

## Sprites and windows

- `sketchbook-hello-owl` shows `assets/owl.png`, scaled to 200×200, on a
  white background until the window is closed.
- `sketchbook-owl` lets you move the owl with the arrow keys; diagonal moves
  are slowed so the owl keeps about the same speed in every direction.
  `--text` also writes `Hello owl!` using `assets/FreeSans.ttf`.
- `sketchbook-hello-sdl` opens a window that turns yellow on a key press and
  magenta on a mouse click; on closing it turns white for two seconds.
- `sketchbook-square ARG...` draws a smoothly coloured gradient square whose
  side is the number of arguments plus one, but only when that number is
  above ten; otherwise it reports that it skipped the square.

## HTTP server and client

`sketchbook-server [PORT]` listens on port 8080 by default and answers every
request with status 200: `/country/asia` with `India`, `/country/america`
with `United States`, and any other path with an empty body. It logs each
request with its `User-Agent`.

`sketchbook-client [START[:END]]` asks the server on `127.0.0.1` for both
paths forever, two seconds apart, choosing a random port in the range for
each request, and prints the status, the `Server` header and the body.

`sketchbook-curl-client` does the same against `localhost:8080`, printing the
status and the first 99 bytes of each reply's body; a failed connection is
shown as status 0.

## What is not included

No sample maps, images or fonts are shipped. The owl programs need
`assets/owl.png` (and `assets/FreeSans.ttf` for `--text`), and
`sketchbook-map` needs `fonts/Roboto-Regular.ttf`, all in the current
directory. The graphical commands need a display; none of them runs in a
web browser.