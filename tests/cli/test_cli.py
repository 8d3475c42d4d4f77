"""
Console front end tests.

Drives main() with scripted stdin and checks the printed solution lines
and exit codes.
"""

import io

import pytest

from pylinsolve import __version__
from pylinsolve.cli import (
    Console,
    InputError,
    build_parser,
    main,
    parse_count,
    parse_float,
    parse_row,
    parse_size,
)


def _run(lines, argv=()):
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    code = main(list(argv), stdin=stdin, stdout=stdout)
    return code, stdout.getvalue()


# =====================================================================
# Parsing helpers
# =====================================================================

class TestParsing:

    def test_parse_float_invariant_format(self):
        assert parse_float("2.5") == 2.5
        assert parse_float("-1e-3") == -0.001

    def test_parse_float_rejects_comma_decimal(self):
        with pytest.raises(InputError, match="not a number"):
            parse_float("2,5")

    def test_parse_row_spaces_and_tabs(self):
        assert parse_row("1  2\t3", 3) == [1.0, 2.0, 3.0]

    def test_parse_row_wrong_count(self):
        with pytest.raises(InputError, match="expected 3 numbers, got 2"):
            parse_row("1 2", 3)

    def test_parse_size(self):
        assert parse_size("4") == 4
        with pytest.raises(InputError):
            parse_size("0")
        with pytest.raises(InputError, match="not an integer"):
            parse_size("three")

    def test_parse_count_allows_zero(self):
        assert parse_count("0") == 0
        with pytest.raises(InputError, match="non-negative"):
            parse_count("-5")

    def test_console_eof(self):
        console = Console(io.StringIO(""), io.StringIO())
        with pytest.raises(EOFError):
            console.ask("n: ")


# =====================================================================
# Gaussian elimination flow
# =====================================================================

class TestGaussFlow:

    def test_menu_no_pivot(self):
        code, out = _run([
            "1",
            "3",
            "2 1 -1 8",
            "-3 -1 2 -11",
            "-2 1 2 -3",
            "1",
        ])
        assert code == 0
        assert "Solution by Gaussian elimination:" in out
        assert "x[1] = 2" in out
        assert "x[2] = 3" in out
        assert "x[3] = -1" in out

    def test_complete_pivot_choice(self):
        code, out = _run([
            "1",
            "2",
            "0 1 1",
            "1 1 2",
            "2",
        ])
        assert code == 0
        assert "x[1] = 1" in out
        assert "x[2] = 1" in out

    def test_bad_row_is_reprompted(self):
        code, out = _run([
            "1",
            "2",
            "2 0",
            "2 0 4",
            "0 1 3",
            "1",
        ])
        assert code == 0
        assert "Invalid row (expected 3 numbers, got 2). Try again." in out
        assert out.count("Row 1: ") == 2
        assert "x[1] = 2" in out
        assert "x[2] = 3" in out

    @pytest.mark.parametrize("answer, reason", [
        ("yes", "not an integer: 'yes'"),
        ("3", "pivoting choice must be 1 or 2, got 3"),
        ("0", "pivoting choice must be 1 or 2, got 0"),
    ])
    def test_invalid_pivot_choice_rejected(self, answer, reason):
        code, out = _run(["1", "2 4", answer], argv=["--method", "gauss"])
        assert code == 1
        assert f"Error: {reason}" in out
        assert "Solution by Gaussian elimination:" not in out

    def test_zero_pivot_reports_error(self):
        code, out = _run(["2", "0 1 1", "1 1 2", "1"], argv=["--method", "gauss"])
        assert code == 1
        assert "Error: Zero or too small pivot in row 1" in out


# =====================================================================
# Jacobi flow
# =====================================================================

class TestJacobiFlow:

    def test_converges_and_reports(self):
        code, out = _run([
            "2",
            "3",
            "4 1 0",
            "1 4 1",
            "0 1 4",
            "5 6 5",
            "1e-13",
            "100",
            "1",
        ])
        assert code == 0
        assert "Convergence condition satisfied" in out
        assert "Iteration finished after" in out
        assert "x[1] = 1" in out
        assert "x[3] = 1" in out

    def test_iteration_cap_is_not_an_error(self):
        code, out = _run([
            "2",
            "2",
            "4 1",
            "2 5",
            "8 10",
            "0.001",
            "0",
            "0",
        ])
        assert code == 0
        assert "Maximum number of iterations reached (0)" in out
        assert "x[1] = 2" in out
        assert "x[2] = 2" in out

    def test_zero_diagonal_reports_error(self):
        code, out = _run(
            ["2", "0 1", "1 1", "1 1", "0.001", "10", "0"],
            argv=["--method", "jacobi"],
        )
        assert code == 1
        assert "Error: Diagonal element A[1,1]" in out


# =====================================================================
# Thomas flow
# =====================================================================

class TestThomasFlow:

    def test_zero_based_output(self):
        code, out = _run([
            "3",
            "3",
            "4", "4", "4",   # d
            "1", "1",        # c[1], c[2]
            "1", "1",        # e[0], e[1]
            "5", "6", "5",   # b
        ])
        assert code == 0
        assert "c[1] = " in out
        assert "c[0] = " not in out
        assert "e[2] = " not in out
        assert "x[0] = 1" in out
        assert "x[2] = 1" in out
        assert "x[3]" not in out

    def test_single_equation(self):
        code, out = _run(["1", "4", "2"], argv=["--method", "thomas"])
        assert code == 0
        assert "x[0] = 0.5" in out

    def test_bad_number_reports_error(self):
        code, out = _run(["1", "abc"], argv=["--method", "thomas"])
        assert code == 1
        assert "Error: not a number: 'abc'" in out


# =====================================================================
# Menu and arguments
# =====================================================================

class TestMenu:

    def test_invalid_choice(self):
        code, out = _run(["7"])
        assert code == 1
        assert "Invalid choice." in out

    def test_menu_lists_methods(self):
        _, out = _run(["9"])
        assert "1 - Gaussian elimination" in out
        assert "2 - Jacobi iteration" in out
        assert "3 - Thomas algorithm" in out

    def test_method_option_skips_menu(self):
        code, out = _run(["1", "2 4"], argv=["--method", "gauss"])
        # Input ends before the pivoting prompt is answered
        assert code == 1
        assert "Choose a method" not in out
        assert "Error: unexpected end of input" in out

    def test_invalid_size(self):
        code, out = _run(["1", "0"])
        assert code == 1
        assert "Error: system size must be at least 1" in out

    def test_parser_choices(self):
        args = build_parser().parse_args(["--method", "thomas"])
        assert args.method == "thomas"
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--method", "cholesky"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
