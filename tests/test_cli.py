"""Tests for the numkit command line."""

import pytest

from numkit.cli import main
from numkit.math import Polynomial, Rational


def run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out.strip(), captured.err.strip()


class TestRationalCommand:

    def test_add(self, capsys):
        assert run(capsys, "rational", "add", "1/2", "3/4") == (0, "5/4", "")

    def test_div(self, capsys):
        code, out, _ = run(capsys, "rational", "div", "1/2", "3/4")
        assert (code, out) == (0, "2/3")

    def test_negative_whole_operand(self, capsys):
        code, out, _ = run(capsys, "rational", "sub", "1/2", "-1")
        assert (code, out) == (0, "3/2")

    def test_negative_fraction_operand(self, capsys):
        code, out, _ = run(capsys, "rational", "add", "-1/2", "3/4")
        assert (code, out) == (0, "1/4")

    def test_both_operands_negative_fractions(self, capsys):
        code, out, _ = run(capsys, "rational", "mul", "-1/2", "-2/3")
        assert (code, out) == (0, "1/3")

    def test_division_by_zero(self, capsys):
        code, out, err = run(capsys, "rational", "div", "1/2", "0")
        assert code == 1
        assert out == ""
        assert err.startswith("Error:")

    def test_invalid_text(self, capsys):
        code, _, err = run(capsys, "rational", "add", "a/b", "1")
        assert code == 1
        assert "Invalid rational format" in err

    def test_unknown_op(self, capsys):
        with pytest.raises(SystemExit):
            main(["rational", "pow", "1", "2"])


class TestUnsignedCommand:

    def test_sub(self, capsys):
        assert run(capsys, "unsigned", "sub", "10", "3")[:2] == (0, "7")

    def test_underflow(self, capsys):
        code, _, err = run(capsys, "unsigned", "sub", "3", "10")
        assert code == 1
        assert "Underflow" in err

    def test_overflow(self, capsys):
        code, _, err = run(capsys, "unsigned", "mul", "9223372036854775807", "2")
        assert code == 1
        assert "Overflow" in err

    def test_big(self, capsys):
        code, out, _ = run(capsys, "unsigned", "add", "--big", "10000000000000000000", "2")
        assert (code, out) == (0, "10000000000000000002")


class TestPolyCommand:

    def test_show(self, capsys):
        assert run(capsys, "poly", "show", "1 -3 2")[:2] == (0, "2x^2 - 3x + 1")

    def test_derivative(self, capsys):
        assert run(capsys, "poly", "derivative", "1 -3 2")[1] == "4x - 3"

    def test_eval(self, capsys):
        assert run(capsys, "poly", "eval", "1 -3 2", "2")[1] == "3.0"

    def test_definite(self, capsys):
        code, out, _ = run(capsys, "poly", "definite", "1 -3 2", "1", "1")
        assert (code, out) == (0, "0.0")

    def test_mul(self, capsys):
        assert run(capsys, "poly", "mul", "1 1", "1 -1")[1] == "-x^2 + 1"

    def test_degree(self, capsys):
        assert run(capsys, "poly", "degree", "1 -3 2 0")[1] == "2"

    def test_wrong_arity(self):
        with pytest.raises(SystemExit):
            main(["poly", "eval", "1 -3 2"])

    def test_invalid_coefficients(self, capsys):
        code, _, err = run(capsys, "poly", "show", "1 x")
        assert code == 1
        assert "Invalid polynomial format" in err


class TestSolveCommand:

    def test_linear(self, capsys):
        assert run(capsys, "solve", "linear", "2", "3")[1] == "-3/2"

    def test_linear_negative_fraction(self, capsys):
        # -3/4 x + 1/2 = 0  ->  x = 2/3
        assert run(capsys, "solve", "linear", "-3/4", "1/2")[1] == "2/3"

    def test_quadratic_negative_decimal(self, capsys):
        assert run(capsys, "solve", "quadratic", "-.5", "0", "2")[1] == "-2.0 2.0"

    def test_linear_zero_coefficient(self, capsys):
        code, _, err = run(capsys, "solve", "linear", "0", "3")
        assert code == 1
        assert "must not be zero" in err

    def test_quadratic(self, capsys):
        assert run(capsys, "solve", "quadratic", "1", "-3", "2")[1] == "2.0 1.0"

    def test_quadratic_no_roots(self, capsys):
        assert run(capsys, "solve", "quadratic", "1", "0", "1")[1] == "no real roots"


class TestOutputAndLoad:

    def test_output_then_load(self, tmp_path, capsys):
        path = tmp_path / "p.txt"
        code, _, _ = run(capsys, "poly", "integral", "1 -3 2", "--output", str(path))
        assert code == 0
        assert Polynomial.parse(path.read_text(encoding="utf-8")) == Polynomial([1, -3, 2]).integral()

        code, out, _ = run(capsys, "load", "poly", str(path))
        assert code == 0
        assert out == str(Polynomial([1, -3, 2]).integral())

    def test_rational_output(self, tmp_path, capsys):
        path = tmp_path / "r.txt"
        run(capsys, "rational", "mul", "2/3", "3/4", "-o", str(path))
        assert path.read_text(encoding="utf-8") == "1/2\n"

    def test_non_value_output_rejected(self, tmp_path, capsys):
        code, _, err = run(capsys, "poly", "degree", "1 2", "-o", str(tmp_path / "d.txt"))
        assert code == 1
        assert "Cannot write" in err

    def test_load_missing_file(self, tmp_path, capsys):
        code, _, err = run(capsys, "load", "rational", str(tmp_path / "none.txt"))
        assert code == 1
        assert err.startswith("Error:")

    def test_load_rational(self, tmp_path, capsys):
        path = tmp_path / "r.txt"
        path.write_text("6/8\n", encoding="utf-8")
        assert run(capsys, "load", "rational", str(path))[1] == str(Rational(3, 4))


class TestVersion:

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert capsys.readouterr().out.strip() == "numkit 1.0.0"
