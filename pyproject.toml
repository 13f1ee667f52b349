[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchbook"
version = "0.1.0"
description = "Small teaching programs: square roots, map routing, turtle graphics, fractals, Julia sets, an owl sprite and a tiny HTTP client/server"
requires-python = ">=3.10"
keywords = [
    "education",
    "dijkstra",
    "shortest-path",
    "fractal",
    "julia-set",
    "h-tree",
    "postscript",
    "turtle-graphics",
    "pygame",
    "http",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sketchbook-tutorial = "sketchbook.tutorial:main"
sketchbook-make-table = "sketchbook.mathfunctions:make_table_main"
sketchbook-turtle = "sketchbook.turtle:main"
sketchbook-distances = "sketchbook.mapcli:distances_main"
sketchbook-paths = "sketchbook.mapcli:paths_main"
sketchbook-plotit = "sketchbook.mapcli:plotit_main"
sketchbook-map = "sketchbook.draw:main"
sketchbook-htree = "sketchbook.htree:main"
sketchbook-fractal-circle = "sketchbook.fractal_circle:main"
sketchbook-julia = "sketchbook.julia:main"
sketchbook-owl = "sketchbook.owl:main"
sketchbook-hello-owl = "sketchbook.owl:hello_owl_main"
sketchbook-hello-sdl = "sketchbook.sdl_demos:hello_main"
sketchbook-square = "sketchbook.sdl_demos:square_main"
sketchbook-server = "sketchbook.server:main"
sketchbook-client = "sketchbook.client:main"
sketchbook-curl-client = "sketchbook.curl_client:main"

[tool.hatch.build.targets.wheel]
packages = ["sketchbook"]

[tool.hatch.build.targets.sdist]
include = ["sketchbook", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
