"""Symbolic differentiation of expression trees.

The tree is walked children first. Each rule builds the raw derivative from
the original operands and the (already simplified) derivatives of those
operands; the raw tree is then reduced with an empty environment before it
becomes the parent's input, so every level is simplified.
"""

from typing import Callable, Dict, Iterable, Union

from .errors import DivisionByZero
from .evaluator import EvaluationResult, simplify
from .expression_tree.core.node import (
  Node, ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode,
  Add, Subtract, Multiply, Divide, Power, Sine, Cosine, walk_bottom_up
)
from .expression_tree.core.operators import OpType, BINARY_OPS, UNARY_OPS
from .logging_system import log_debug, log_detail

VariableLike = Union[VariableNode, str]


def _as_variable(variable: VariableLike) -> VariableNode:
  if isinstance(variable, VariableNode):
    return variable
  if isinstance(variable, str):
    return VariableNode(variable)
  raise TypeError(f"Expected a VariableNode or name, got {type(variable).__name__}")


def diff_add(node: BinaryOpNode, dx: Node, dy: Node) -> Node:
  return Add(dx, dy)


def diff_subtract(node: BinaryOpNode, dx: Node, dy: Node) -> Node:
  return Subtract(dx, dy)


def diff_multiply(node: BinaryOpNode, dx: Node, dy: Node) -> Node:
  x, y = node.left, node.right
  return Add(Multiply(x, dy), Multiply(y, dx))


def diff_divide(node: BinaryOpNode, dx: Node, dy: Node) -> Node:
  x, y = node.left, node.right
  return Divide(
    Subtract(Multiply(dx, y), Multiply(dy, x)),
    Power(y, ConstantNode(2.0))
  )


def diff_power(node: BinaryOpNode, dx: Node, dy: Node) -> Node:
  # Power rule for an exponent that does not depend on variable; dy is
  # unused and there is no ln(x) * dy term.
  x, y = node.left, node.right
  return Multiply(
    Multiply(y, Power(x, Subtract(y, ConstantNode(1.0)))),
    dx
  )


def diff_sine(node: UnaryOpNode, du: Node) -> Node:
  return Multiply(Cosine(node.operand), du)


def diff_cosine(node: UnaryOpNode, du: Node) -> Node:
  return Subtract(ConstantNode(0.0), Multiply(Sine(node.operand), du))


BINARY_DIFF_RULES: Dict[OpType, Callable[[BinaryOpNode, Node, Node], Node]] = {
  OpType.ADD: diff_add,
  OpType.SUB: diff_subtract,
  OpType.MUL: diff_multiply,
  OpType.DIV: diff_divide,
  OpType.POW: diff_power,
}

UNARY_DIFF_RULES: Dict[OpType, Callable[[UnaryOpNode, Node], Node]] = {
  OpType.SIN: diff_sine,
  OpType.COS: diff_cosine,
}


def _check_rule_tables():
  missing = [op.name for op in BINARY_OPS if op not in BINARY_DIFF_RULES]
  missing += [op.name for op in UNARY_OPS if op not in UNARY_DIFF_RULES]
  if missing:
    raise RuntimeError(f"No differentiation rule for operator(s): {', '.join(missing)}")

_check_rule_tables()


def _diff(node: Node, variable: VariableNode) -> Node:
  def derive(current: Node, child_derivatives) -> Node:
    if isinstance(current, ConstantNode):
      raw = ConstantNode(0.0)
    elif isinstance(current, VariableNode):
      raw = ConstantNode(1.0 if current.name == variable.name else 0.0)
    elif isinstance(current, BinaryOpNode):
      raw = BINARY_DIFF_RULES[current.operator](current, *child_derivatives)
    elif isinstance(current, UnaryOpNode):
      raw = UNARY_DIFF_RULES[current.operator](current, *child_derivatives)
    else:
      raise TypeError(f"Cannot differentiate node of type {type(current).__name__}")
    return simplify(raw)

  return walk_bottom_up(node, derive)


def differentiate(expr: Node, variable: VariableLike) -> Node:
  """Return d(expr)/d(variable), simplified.

  Propagates DivisionByZero when simplifying the derivative meets a literal
  division by zero.
  """
  if not isinstance(expr, Node):
    raise TypeError(f"Expected a Node, got {type(expr).__name__}")
  var = _as_variable(variable)
  try:
    result = _diff(expr, var)
  except DivisionByZero:
    log_debug("differentiate %s w.r.t. %s hit a division by zero", expr, var.name)
    raise
  log_detail("d/d%s %s -> %s", var.name, expr, result)
  return result


def try_differentiate(expr: Node, variable: VariableLike) -> EvaluationResult:
  try:
    return EvaluationResult(value=differentiate(expr, variable))
  except DivisionByZero as e:
    return EvaluationResult(error=e)


def nth_derivative(expr: Node, variable: VariableLike, order: int) -> Node:
  """Differentiate expr repeatedly; order 0 returns the simplified expression"""
  if isinstance(order, bool) or not isinstance(order, int) or order < 0:
    raise ValueError(f"order must be a non-negative integer, got {order!r}")
  if not isinstance(expr, Node):
    raise TypeError(f"Expected a Node, got {type(expr).__name__}")
  var = _as_variable(variable)
  result = simplify(expr)
  for _ in range(order):
    result = _diff(result, var)
  return result


def gradient(expr: Node, variables: Iterable[VariableLike]) -> Dict[str, Node]:
  """Partial derivatives of expr keyed by variable name, in the given order"""
  grads: Dict[str, Node] = {}
  for variable in variables:
    var = _as_variable(variable)
    grads[var.name] = differentiate(expr, var)
  return grads
