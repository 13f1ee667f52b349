import io

import pytest

from sketchbook.turtle import TurtleError, main, turtle_to_postscript

HEADER = [
    "%!PS-Adobe-3.0 EPSF-3.0",
    "%%BoundingBox: 0 0 572 772",
    "50 50 translate",
    "512 0 translate",
    "90 rotate",
    "0.05 setlinewidth",
]


def test_empty_program_is_header_and_footer():
    assert turtle_to_postscript("") == "\n".join(HEADER + ["showpage"]) + "\n"


def test_colour_command():
    lines = turtle_to_postscript("C 1 0 0").splitlines()
    assert "1.000000 0.000000 0.000000 setrgbcolor" in lines


def test_fly_then_go_draws_line():
    lines = turtle_to_postscript("F 1 2\nG 3 4\n").splitlines()
    body = lines[len(HEADER):-1]
    assert body == ["1.000000 2.000000 moveto", "3.000000 4.000000 lineto", "stroke"]


def test_spot_is_centred():
    lines = turtle_to_postscript("F 2 2 S 1").splitlines()
    assert "1.500000 1.500000 1.000000 1.000000 rectfill" in lines


def test_rotate_then_draw():
    lines = turtle_to_postscript("R 90 D 1").splitlines()
    assert "0.000000 1.000000 lineto" in lines


def test_unknown_command_raises():
    with pytest.raises(TurtleError):
        turtle_to_postscript("F 0 0 X")


def test_main_reports_illegal_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Q"))
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "Illegal input format." in captured.err
    assert captured.out.startswith(HEADER[0])


def test_main_writes_program(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("C 0 1 0"))
    assert main([]) == 0
    assert capsys.readouterr().out == turtle_to_postscript("C 0 1 0")