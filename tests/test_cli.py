"""Tests for the click command line."""

from click.testing import CliRunner

from pocket_calc.cli import line_to_symbols, main


CLEAN_ENV = {
    "POCKET_CALC_PRECISION": None,
    "POCKET_CALC_REJECT_REPEATED_POINT": None,
    "POCKET_CALC_LOG_LEVEL": None,
}


def run(args, **kwargs):
    return CliRunner().invoke(main, args, env=CLEAN_ENV, **kwargs)


def test_eval_prints_result():
    result = run(["eval", "2+3×4"])
    assert result.exit_code == 0
    assert result.output.strip() == "14"


def test_eval_failure_exits_nonzero():
    result = run(["eval", "6÷0"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_eval_verbose_shows_kind():
    result = run(["eval", "--verbose", "6÷0"])
    assert result.exit_code == 1
    assert "division_by_zero" in result.output


def test_precision_option():
    result = run(["--precision", "4", "eval", "2÷3"])
    assert result.output.strip() == "0.6667"


def test_press_feeds_symbols():
    result = run(["press", "1", "*", "2", "+", "0", ".", "5", "="])
    assert result.exit_code == 0
    assert result.output.strip() == "2.5"


def test_press_trace():
    result = run(["press", "--trace", "3", "+", "-"])
    lines = result.output.strip().splitlines()
    assert lines == ["3\t3", "+\t3+", "-\t3-"]


def test_strict_point_option():
    result = run(["--strict-point", "press", "1", ".", ".", "2"])
    assert result.output.strip() == "1.2"


def test_repl_session():
    result = run(["repl"], input="12\n+ 3\nenter\nback\nclear\nq\n9\n")
    assert result.exit_code == 0
    assert result.output.splitlines() == ["0", "12", "12+3", "15", "1", "0"]


def test_line_to_symbols():
    assert line_to_symbols("1 + 2\n") == ("1", "+", "2")
    assert line_to_symbols("Back") == ("Backspace",)
    assert line_to_symbols("") == ()
