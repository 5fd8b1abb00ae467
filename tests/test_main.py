import pytest

from sudokulib.__main__ import main


def test_solvable(capsys, solvable_rows):
    puzzle = "".join(row.ljust(9) for row in solvable_rows)
    assert main([puzzle]) == 0

    out = capsys.readouterr().out
    initial, solved = out.split("\n\n")
    assert initial.startswith("Initial puzzle:\n0 0 0 | 0 0 4 | 0 0 3 \n")
    assert solved.startswith("Solved puzzle:\n9 6 2 | 8 1 4 | 5 7 3 \n")
    assert "No solution found" not in out


def test_unsolvable(capsys, unsolvable_rows):
    puzzle = "".join(row.ljust(9) for row in unsolvable_rows)
    assert main([puzzle]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Initial puzzle:\n")
    assert out.endswith("\nNo solution found\n")
    assert "Solved puzzle:" not in out


def test_show_blanks_and_verbose(capsys, classic):
    assert main(["--show-blanks", "--verbose", classic]) == 0

    out = capsys.readouterr().out
    assert "BlankCell[0]: (0,2),1,1,0,1,0,0,0,0,0\n" in out
    assert "BlankCell[50]: (8,6)," in out
    assert "Solved puzzle:" in out
    assert out.rstrip().endswith("backtracks")


def test_missing_puzzle(capsys):
    with pytest.raises(SystemExit) as ctx:
        main([])
    assert ctx.value.code == 2
    assert "PUZZLE" in capsys.readouterr().err
