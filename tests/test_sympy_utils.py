import math

import pytest
import sympy as sp

from symbolic_algebra import (
    Constant, Variable, Add, Subtract, Multiply, Divide, Power, Sine, Cosine,
    evaluate, to_sympy, from_sympy, is_equivalent, latex_representation,
    UnsupportedExpressionError
)

x = Variable("x")
y = Variable("y")
sx, sy = sp.symbols("x y")


def test_to_sympy():
    assert to_sympy(x) == sx
    assert to_sympy(Multiply(x, y)) == sx * sy
    assert to_sympy(Power(x, Constant(2))) == sx ** sp.Float(2.0)
    assert to_sympy(Cosine(Subtract(x, y))) == sp.cos(sx - sy)


def test_from_sympy_leaves():
    assert from_sympy(sx) == x
    assert from_sympy(sp.Integer(3)) == Constant(3)
    assert from_sympy(sp.Rational(1, 4)) == Constant(0.25)
    assert from_sympy(sp.pi) == Constant(math.pi)


def test_from_sympy_operators():
    assert from_sympy(sp.sin(sx)) == Sine(x)
    assert from_sympy(sp.cos(sx)) == Cosine(x)
    assert from_sympy(sx ** 2) == Power(x, Constant(2))
    assert from_sympy(1 / sx) == Divide(Constant(1), x)
    assert from_sympy(sp.sin(sx) / sx ** 2) == Divide(Sine(x), Power(x, Constant(2)))


def test_from_sympy_accepts_plain_strings_via_sympify():
    assert from_sympy("x") == x


def test_from_sympy_preserves_value():
    reference = sx ** 3 - 2 * sx * sy + sp.sin(sy) / (sx + 1)
    tree = from_sympy(reference)
    env = {"x": Constant(1.3), "y": Constant(-0.6)}
    expected = float(reference.subs({sx: 1.3, sy: -0.6}))
    assert evaluate(tree, env).value == pytest.approx(expected)


def test_from_sympy_rejects_unknown_functions():
    with pytest.raises(UnsupportedExpressionError):
        from_sympy(sp.exp(sx))
    with pytest.raises(ValueError):
        from_sympy(sp.log(sx))


def test_is_equivalent():
    assert is_equivalent(Add(x, x), Multiply(Constant(2), x))
    assert is_equivalent(Subtract(Constant(0), Sine(x)), Multiply(Constant(-1), Sine(x)))
    assert not is_equivalent(x, Sine(x))


def test_latex_representation():
    assert latex_representation(Sine(x)) == sp.latex(sp.sin(sx))
    assert "x" in latex_representation(Divide(x, y))
