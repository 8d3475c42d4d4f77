"""
Interactive console front end.

Prompts for a method, the system size and the coefficients, runs one of
the solvers and prints the solution. This layer only reads and writes
text; all numerics live in the solver packages.

Usage:
    python -m pylinsolve [--method {gauss,jacobi,thomas}]

Numbers are parsed locale-independently: a decimal point, optional
exponent, tokens separated by spaces or tabs.
"""

from __future__ import annotations

import argparse
import sys
import warnings
from typing import TextIO, Sequence

from pylinsolve import __version__
from pylinsolve.core.exceptions import PyLinSolveError
from pylinsolve.gauss import gauss_solve
from pylinsolve.jacobi import jacobi_solve
from pylinsolve.tridiagonal import thomas_solve


METHODS = {'1': 'gauss', '2': 'jacobi', '3': 'thomas'}


class InputError(ValueError):
    """A line of user input could not be interpreted."""


class Console:
    """Line-oriented prompt/response over injectable text streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO):
        self._in = stdin
        self._out = stdout

    def write(self, text: str = "") -> None:
        print(text, file=self._out)

    def ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("unexpected end of input")
        return line.strip()


def parse_float(token: str) -> float:
    """Parse one number using the invariant format ('.' as decimal point)."""
    try:
        return float(token)
    except ValueError:
        raise InputError(f"not a number: {token!r}") from None


def parse_row(line: str, expected: int) -> list[float]:
    """
    Split a line on spaces/tabs and parse exactly `expected` numbers.

    Raises:
        InputError: On a wrong token count or an unparseable token
    """
    tokens = line.split()
    if len(tokens) != expected:
        raise InputError(f"expected {expected} numbers, got {len(tokens)}")
    return [parse_float(t) for t in tokens]


def parse_size(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise InputError(f"not an integer: {text!r}") from None
    if n < 1:
        raise InputError(f"system size must be at least 1, got {n}")
    return n


def parse_count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise InputError(f"not an integer: {text!r}") from None
    if value < 0:
        raise InputError(f"must be non-negative, got {value}")
    return value


def read_rows(console: Console, n_rows: int, width: int) -> list[list[float]]:
    """Read n_rows rows of `width` numbers, re-prompting a row on bad input."""
    rows = []
    while len(rows) < n_rows:
        line = console.ask(f"Row {len(rows) + 1}: ")
        try:
            rows.append(parse_row(line, width))
        except InputError as e:
            console.write(f"Invalid row ({e}). Try again.")
    return rows


def read_value(console: Console, prompt: str) -> float:
    return parse_float(console.ask(prompt))


def print_solution(console: Console, x: Sequence[float], start: int) -> None:
    for i, value in enumerate(x):
        console.write(f"x[{i + start}] = {value:.10g}")


def run_gauss(console: Console) -> None:
    console.write("\nGaussian elimination")
    n = parse_size(console.ask("Number of equations (n): "))
    console.write(f"Enter the augmented matrix [A|b] ({n + 1} numbers per row):")
    rows = read_rows(console, n, n + 1)

    console.write("\nPivoting strategy:")
    console.write("1 - No pivoting")
    console.write("2 - Complete pivoting (whole submatrix)")
    strategy = parse_count(console.ask("Your choice (1/2): "))
    if strategy not in (1, 2):
        raise InputError(f"pivoting choice must be 1 or 2, got {strategy}")
    use_pivot = strategy == 2

    solution = gauss_solve(rows, use_pivot)
    console.write("\nSolution by Gaussian elimination:")
    print_solution(console, solution.x, start=1)


def run_jacobi(console: Console) -> None:
    console.write("\nJacobi (simple) iteration")
    n = parse_size(console.ask("Number of equations (n): "))
    console.write(f"\nEnter the matrix A ({n} rows of {n} numbers):")
    A = read_rows(console, n, n)

    console.write(f"\nEnter the right-hand side b ({n} numbers):")
    b = parse_row(console.ask(""), n)

    epsilon = read_value(console, "\nTolerance epsilon (e.g. 0.001): ")
    max_iterations = parse_count(console.ask("Maximum number of iterations: "))
    check = console.ask("Check convergence condition ||alpha|| < 1? (1 - yes, 0 - no): ") == '1'

    with warnings.catch_warnings():
        # The cap is reported through the solution messages below
        warnings.simplefilter('ignore', RuntimeWarning)
        solution = jacobi_solve(A, b, epsilon, max_iterations, check)

    for message in solution.messages:
        console.write(message)
    console.write("\nSolution by Jacobi iteration:")
    print_solution(console, solution.x, start=1)


def run_thomas(console: Console) -> None:
    console.write("\nThomas algorithm for tridiagonal systems")
    n = parse_size(console.ask("System size (n): "))
    c = [0.0] * n
    d = [0.0] * n
    e = [0.0] * n
    b = [0.0] * n

    console.write("\nMain diagonal d[i] (i=0..n-1):")
    for i in range(n):
        d[i] = read_value(console, f"d[{i}] = ")

    console.write("\nSub-diagonal c[i] (i=1..n-1):")
    for i in range(1, n):
        c[i] = read_value(console, f"c[{i}] = ")

    console.write("\nSuper-diagonal e[i] (i=0..n-2):")
    for i in range(n - 1):
        e[i] = read_value(console, f"e[{i}] = ")

    console.write("\nRight-hand side b[i] (i=0..n-1):")
    for i in range(n):
        b[i] = read_value(console, f"b[{i}] = ")

    solution = thomas_solve(c, d, e, b)
    console.write("\nSolution of the tridiagonal system:")
    print_solution(console, solution.x, start=0)


RUNNERS = {
    'gauss': run_gauss,
    'jacobi': run_jacobi,
    'thomas': run_thomas,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pylinsolve',
        description="Solve systems of linear equations interactively.",
    )
    parser.add_argument(
        '--method',
        choices=sorted(RUNNERS),
        help="Solver to run; prompts with a menu when omitted",
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """
    Run one interactive solve.

    Returns:
        0 on success, 1 if the input was invalid or the solver failed
    """
    args = build_parser().parse_args(argv)
    console = Console(stdin or sys.stdin, stdout or sys.stdout)

    try:
        method = args.method
        if method is None:
            console.write("Solving systems of linear equations")
            console.write("-" * 36)
            console.write("Choose a method:")
            console.write("1 - Gaussian elimination (no pivoting / complete pivoting)")
            console.write("2 - Jacobi iteration")
            console.write("3 - Thomas algorithm for tridiagonal systems")
            choice = console.ask("Your choice (1/2/3): ")
            method = METHODS.get(choice)
            if method is None:
                console.write("Invalid choice.")
                return 1

        RUNNERS[method](console)
    except (PyLinSolveError, InputError, EOFError) as e:
        console.write(f"Error: {e}")
        return 1

    return 0
