import math

import pytest

from sketchbook import mathfunctions as mf


def test_sqrt_table_squares_back_to_index():
    table = mf.sqrt_table()
    assert len(table) == mf.TABLE_SIZE
    for i, value in enumerate(table):
        assert value * value == pytest.approx(i)


def test_format_table_layout():
    text = mf.format_table(mf.sqrt_table())
    lines = text.splitlines()
    assert lines[0] == "double sqrtTable[] = {"
    assert lines[-1] == "0};"
    assert len(lines) == mf.TABLE_SIZE + 2
    assert all(line.endswith(",") for line in lines[1:-1])
    assert text.endswith("\n")


def test_write_table_matches_format(tmp_path):
    target = tmp_path / "Table.h"
    mf.write_table(target)
    assert target.read_text() == mf.format_table(mf.sqrt_table())


def test_make_table_main_without_arguments():
    assert mf.make_table_main([]) == 1


def test_make_table_main_unwritable(tmp_path):
    assert mf.make_table_main([str(tmp_path / "missing" / "Table.h")]) == 1


def test_make_table_main_writes(tmp_path):
    target = tmp_path / "Table.h"
    assert mf.make_table_main([str(target)]) == 0
    assert target.read_text().startswith("double sqrtTable[] = {")


@pytest.mark.parametrize("x", [-1.0, 0.0])
def test_mysqrt_non_positive(x):
    assert mf.mysqrt(x) == 0.0


@pytest.mark.parametrize("x", [2.0, 16.0, 100.0])
def test_mysqrt_converges(x, capsys):
    assert mf.mysqrt(x) == pytest.approx(math.sqrt(x), rel=1e-9)
    out = capsys.readouterr().out
    assert out.count("Computing sqrt of") == 10
    assert "Use the table" not in out


def test_mysqrt_uses_table(capsys):
    result = mf.mysqrt(5.0, mf.sqrt_table())
    assert result == pytest.approx(math.sqrt(5.0), rel=1e-12)
    assert "Use the table to help find an initial value" in capsys.readouterr().out


def test_log_exp_sqrt(capsys):
    assert mf.log_exp_sqrt(9.0) == pytest.approx(math.sqrt(9.0))
    assert "using log and exp" in capsys.readouterr().out
    assert mf.log_exp_sqrt(-2.0) == 0.0


def test_sqrt_library_path():
    assert mf.sqrt(25.0, use_mymath=False) == math.sqrt(25.0)
    assert math.isnan(mf.sqrt(-1.0, use_mymath=False))


@pytest.mark.parametrize("x", [0.5, 3.0, 7.5, 42.0])
def test_sqrt_mymath_path(x):
    assert mf.sqrt(x, use_mymath=True) == pytest.approx(math.sqrt(x), rel=1e-9)