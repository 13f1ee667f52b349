import pytest

from sketchbook import tutorial


def test_usage_without_arguments(capsys):
    assert tutorial.main([]) == 1
    out = capsys.readouterr().out
    assert "Version" in out
    assert "Usage: tutorial number" in out


def test_square_root_of_four(capsys):
    assert tutorial.main(["4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "The square root of 4 is 2"


def test_leading_number_with_trailing_text(capsys):
    assert tutorial.main(["  9xyz"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "The square root of 9 is 3"


def test_not_a_number():
    with pytest.raises(ValueError):
        tutorial.main(["abc"])