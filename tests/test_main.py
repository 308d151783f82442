"""
Tests for the command line read loop.
"""

import io

import pytest

from config.config import EVALUATOR_CONFIG, validate_config
from core import DivisionByZero, InfixEvaluator
import main


def test_run_writes_one_result_per_line():
    lines = io.StringIO("2+3*4\n(1+2)\n2#3\n5/0\n10-3-2\n")
    out = io.StringIO()
    succeeded, failed = main.run(InfixEvaluator(), lines, out)
    assert out.getvalue().splitlines() == [
        "14",
        "'(' is an open parenthesis",
        "')' is a close parenthesis",
        "3",
        "illegal expression: '#' is an illegal character",
        "arithmetic error: integer divide by zero",
        "5",
    ]
    assert (succeeded, failed) == (3, 2)


def test_run_quiet_parentheses():
    out = io.StringIO()
    main.run(InfixEvaluator(), ["(1+2)\n"], out, echo_parentheses=False)
    assert out.getvalue() == "3\n"


def test_run_strict_arithmetic_stops():
    out = io.StringIO()
    with pytest.raises(DivisionByZero):
        main.run(InfixEvaluator(), ["1+1\n", "5/0\n", "2+2\n"], out, strict_arithmetic=True)
    assert out.getvalue().splitlines() == ["2", "arithmetic error: integer divide by zero"]


def test_run_strict_arithmetic_ignores_illegal_expressions():
    out = io.StringIO()
    main.run(InfixEvaluator(), ["+1\n", "2+2\n"], out, strict_arithmetic=True)
    assert out.getvalue().splitlines() == ["illegal expression: operand expected but operator found", "4"]


def test_cli_reads_input_file(tmp_path, capsys):
    path = tmp_path / "exprs.txt"
    path.write_text("(1+2)*3\n2^3^2\n", encoding="utf-8")
    assert main.cli(["--input_path", str(path), "--enforce_grouping", "--quiet_parentheses"]) == 0
    assert capsys.readouterr().out.splitlines() == ["9", "512"]


def test_cli_overflow_and_dtype_flags(tmp_path, capsys):
    path = tmp_path / "exprs.txt"
    path.write_text("2147483647+1\n", encoding="utf-8")
    main.cli(["--input_path", str(path), "--int_dtype", "int32", "--overflow", "error"])
    out = capsys.readouterr().out
    assert out.startswith("arithmetic error: ")


def test_cli_rejects_unknown_overflow_mode():
    with pytest.raises(SystemExit):
        main.parse_args(["--overflow", "saturate"])


def test_build_evaluator_config_does_not_mutate_defaults():
    args = main.parse_args(["--enforce_grouping", "--overflow", "error"])
    cfg = main.build_evaluator_config(args)
    assert cfg["enforce_grouping"] is True
    assert cfg["overflow"] == "error"
    assert EVALUATOR_CONFIG["enforce_grouping"] is False
    assert EVALUATOR_CONFIG["overflow"] == "wrap"


def test_validate_config():
    assert validate_config()
    with pytest.raises(AssertionError):
        validate_config(dict(EVALUATOR_CONFIG, int_dtype="float64"))
