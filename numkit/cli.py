"""Command line interface for numkit."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Any, Callable

from .core.config import settings
from .core.errors import NumericError
from .core.logging import get_logger, setup_logging
from .math import (
    BigUnsignedInt,
    Polynomial,
    Rational,
    UnsignedInt,
    solve_linear,
    solve_quadratic,
)
from .storage import VALUE_TYPES, read_from_file, save_to_file

logger = get_logger(__name__)

# "-3", "-2.5" and "-1/2" are operands, not options.
_NEGATIVE_OPERAND_RE = re.compile(r"^-\d+(/\d+)?$|^-\d*\.\d+$")

_BINARY_OPS = {
    "add": "add",
    "sub": "subtract",
    "mul": "multiply",
    "div": "divide",
}

# poly operation -> number of extra arguments
_POLY_ARITY = {
    "show": 0,
    "eval": 1,
    "derivative": 0,
    "integral": 0,
    "definite": 2,
    "add": 1,
    "sub": 1,
    "mul": 1,
    "degree": 0,
    "tex": 0,
}


class _OperandParser(argparse.ArgumentParser):
    """ArgumentParser that reads negative fractions as positional values."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._negative_number_matcher = _NEGATIVE_OPERAND_RE


def _build_parser() -> argparse.ArgumentParser:
    common = _OperandParser(add_help=False)
    common.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Also write the resulting value to this file.",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )

    parser = _OperandParser(
        prog="numkit",
        description="Exact arithmetic on rationals, unsigned integers and polynomials.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{settings.APP_NAME} {settings.APP_VERSION}",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    rational = commands.add_parser(
        "rational", parents=[common], help="Rational arithmetic (n or n/d)."
    )
    rational.add_argument("op", choices=sorted(_BINARY_OPS))
    rational.add_argument("a")
    rational.add_argument("b")
    rational.set_defaults(handler=_run_rational)

    unsigned = commands.add_parser(
        "unsigned", parents=[common], help="Unsigned integer arithmetic."
    )
    unsigned.add_argument("op", choices=sorted(_BINARY_OPS))
    unsigned.add_argument("a")
    unsigned.add_argument("b")
    unsigned.add_argument(
        "--big",
        action="store_true",
        help="Use arbitrary-precision integers instead of the 64-bit register.",
    )
    unsigned.set_defaults(handler=_run_unsigned)

    poly = commands.add_parser(
        "poly",
        parents=[common],
        help="Polynomial operations on a coefficient line (x^0 first).",
    )
    poly.add_argument("op", choices=sorted(_POLY_ARITY))
    poly.add_argument("coefficients", help='Coefficient line, e.g. "1 -3 2".')
    poly.add_argument("args", nargs="*", help="Operation arguments.")
    poly.set_defaults(handler=_run_poly)

    solve = commands.add_parser("solve", help="Solve an equation.")
    kinds = solve.add_subparsers(dest="kind", required=True)

    linear = kinds.add_parser("linear", parents=[common], help="a*x + b = 0 over rationals.")
    linear.add_argument("a")
    linear.add_argument("b")
    linear.set_defaults(handler=_run_solve_linear)

    quadratic = kinds.add_parser(
        "quadratic", parents=[common], help="a*x^2 + b*x + c = 0 over reals."
    )
    quadratic.add_argument("a", type=float)
    quadratic.add_argument("b", type=float)
    quadratic.add_argument("c", type=float)
    quadratic.set_defaults(handler=_run_solve_quadratic)

    load = commands.add_parser("load", parents=[common], help="Print a stored value.")
    load.add_argument("type", choices=sorted(VALUE_TYPES))
    load.add_argument("path", type=Path)
    load.set_defaults(handler=_run_load)

    return parser


def _run_rational(args: argparse.Namespace) -> Rational:
    a, b = Rational.parse(args.a), Rational.parse(args.b)
    return getattr(a, _BINARY_OPS[args.op])(b)


def _run_unsigned(args: argparse.Namespace) -> UnsignedInt | BigUnsignedInt:
    cls = BigUnsignedInt if args.big else UnsignedInt
    a, b = cls.parse(args.a), cls.parse(args.b)
    return getattr(a, _BINARY_OPS[args.op])(b)


def _run_poly(args: argparse.Namespace) -> Any:
    p = Polynomial.parse(args.coefficients)
    extra = args.args

    if args.op == "show":
        return p
    if args.op == "eval":
        return p.value_at(float(extra[0]))
    if args.op == "derivative":
        return p.derivative()
    if args.op == "integral":
        return p.integral()
    if args.op == "definite":
        return p.definite_integral(float(extra[0]), float(extra[1]))
    if args.op == "degree":
        return p.degree()
    if args.op == "tex":
        return p.to_tex()
    q = Polynomial.parse(extra[0])
    return getattr(p, _BINARY_OPS[args.op])(q)


def _run_solve_linear(args: argparse.Namespace) -> Rational:
    return solve_linear(Rational.parse(args.a), Rational.parse(args.b))


def _run_solve_quadratic(args: argparse.Namespace) -> list[float]:
    return solve_quadratic(args.a, args.b, args.c)


def _run_load(args: argparse.Namespace) -> Any:
    return read_from_file(VALUE_TYPES[args.type], args.path)


def _render(result: Any) -> str:
    if isinstance(result, list):
        if not result:
            return "no real roots"
        return " ".join(repr(root) for root in result)
    return str(result)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "poly" and len(args.args) != _POLY_ARITY[args.op]:
        parser.error(
            f"poly {args.op} takes {_POLY_ARITY[args.op]} argument(s), got {len(args.args)}"
        )

    setup_logging("DEBUG" if args.verbose else None)
    handler: Callable[[argparse.Namespace], Any] = args.handler
    logger.debug("Running %s", args.command)

    try:
        result = handler(args)
        if args.output is not None:
            if not isinstance(result, (Rational, UnsignedInt, BigUnsignedInt, Polynomial)):
                raise TypeError(f"Cannot write a {type(result).__name__} result to a file")
            save_to_file(result, args.output)
    except (NumericError, ValueError, TypeError, OSError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(_render(result))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
