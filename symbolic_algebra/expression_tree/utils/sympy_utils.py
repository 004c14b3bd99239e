import sympy as sp
from functools import reduce

from ..core.node import (
  Node, ConstantNode, VariableNode,
  Add, Subtract, Multiply, Divide, Power, Sine, Cosine
)
from ...errors import UnsupportedExpressionError


def to_sympy(node: Node) -> sp.Expr:
  """Convert an expression tree to the equivalent SymPy expression"""
  return node.to_sympy()


def from_sympy(expr) -> Node:
  """
  Convert a SymPy expression into an expression tree.

  n-ary sums and products are folded left. Negated terms of a sum become
  subtractions and negative integer powers inside a product become divisions,
  so trees produced by to_sympy come back in a comparable shape.
  """
  expr = sp.sympify(expr)

  if isinstance(expr, sp.Symbol):
    return VariableNode(expr.name)

  if expr.is_Number or isinstance(expr, sp.NumberSymbol):
    try:
      return ConstantNode(float(expr))
    except TypeError as e:
      raise UnsupportedExpressionError(f"Cannot convert number {expr} to a float constant") from e

  if isinstance(expr, sp.Add):
    terms = list(expr.args)
    result = from_sympy(terms[0])
    for term in terms[1:]:
      if _is_negated(term):
        result = Subtract(result, from_sympy(-term))
      else:
        result = Add(result, from_sympy(term))
    return result

  if isinstance(expr, sp.Mul):
    numerator = []
    denominator = []
    for factor in expr.args:
      if _is_reciprocal(factor):
        denominator.append(from_sympy(sp.Pow(factor.base, -factor.exp)))
      else:
        numerator.append(from_sympy(factor))
    result = reduce(Multiply, numerator) if numerator else ConstantNode(1.0)
    for factor in denominator:
      result = Divide(result, factor)
    return result

  if isinstance(expr, sp.Pow):
    if _is_reciprocal(expr):
      return Divide(ConstantNode(1.0), from_sympy(sp.Pow(expr.base, -expr.exp)))
    return Power(from_sympy(expr.base), from_sympy(expr.exp))

  if isinstance(expr, sp.sin):
    return Sine(from_sympy(expr.args[0]))

  if isinstance(expr, sp.cos):
    return Cosine(from_sympy(expr.args[0]))

  raise UnsupportedExpressionError(f"No expression tree counterpart for {type(expr).__name__}: {expr}")


def _is_negated(term) -> bool:
  return isinstance(term, sp.Mul) and term.args[0] == -1


def _is_reciprocal(factor) -> bool:
  return (isinstance(factor, sp.Pow) and factor.exp.is_Integer
          and factor.exp.is_negative)


def is_equivalent(left: Node, right: Node) -> bool:
  """True if SymPy can show both trees are the same function"""
  difference = sp.simplify(to_sympy(left) - to_sympy(right))
  return difference.is_zero is True


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(to_sympy(node))
