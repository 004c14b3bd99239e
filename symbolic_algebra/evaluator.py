"""Evaluation and algebraic simplification of expression trees.

``evaluate`` reduces a tree bottom-up under an environment of variable
bindings. Each operator has its own reduction rule; the checks inside a rule
run in a fixed order and the first match wins. Unbound variables are left
symbolic, so a partially bound tree reduces as far as it can.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Union

from .errors import DivisionByZero
from .expression_tree.core.node import (
  Node, ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode, is_constant,
  walk_bottom_up
)
from .expression_tree.core.operators import (
  OpType, BINARY_OPS, UNARY_OPS, evaluate_binary_op, evaluate_unary_op
)
from .logging_system import log_debug, log_detail

Environment = Mapping[str, ConstantNode]
EnvironmentLike = Optional[Mapping[Union[str, VariableNode], ConstantNode]]

_EMPTY_ENVIRONMENT: Environment = MappingProxyType({})


def make_environment(bindings: EnvironmentLike = None) -> Environment:
  """Build a read-only name -> ConstantNode mapping.

  Keys may be variable names or VariableNode instances (looked up by name).
  """
  if not bindings:
    return _EMPTY_ENVIRONMENT
  env: Dict[str, ConstantNode] = {}
  for key, value in bindings.items():
    if isinstance(key, VariableNode):
      name = key.name
    elif isinstance(key, str):
      name = key
    else:
      raise TypeError(f"Environment keys must be str or VariableNode, got {type(key).__name__}")
    if not isinstance(value, ConstantNode):
      raise TypeError(f"Binding for {name!r} must be a ConstantNode, got {type(value).__name__}")
    env[name] = value
  return MappingProxyType(env)


def _fold(op: OpType, x: ConstantNode, y: ConstantNode) -> ConstantNode:
  return ConstantNode(evaluate_binary_op(x.value, y.value, op))


def evaluate_add(x: Node, y: Node) -> Node:
  if is_constant(x, 0.0):
    return y
  if is_constant(y, 0.0):
    return x
  if is_constant(x) and is_constant(y):
    return _fold(OpType.ADD, x, y)
  return BinaryOpNode(OpType.ADD, x, y)


def evaluate_subtract(x: Node, y: Node) -> Node:
  if is_constant(x) and is_constant(y):
    return _fold(OpType.SUB, x, y)
  if is_constant(y, 0.0):
    return x
  return BinaryOpNode(OpType.SUB, x, y)


def evaluate_multiply(x: Node, y: Node) -> Node:
  # zero checks come before the constant fold: 0 * nan is still exactly 0
  if is_constant(x, 0.0):
    return ConstantNode(0.0)
  if is_constant(y, 0.0):
    return ConstantNode(0.0)
  if is_constant(x, 1.0):
    return y
  if is_constant(y, 1.0):
    return x
  if is_constant(x) and is_constant(y):
    return _fold(OpType.MUL, x, y)
  return BinaryOpNode(OpType.MUL, x, y)


def evaluate_divide(x: Node, y: Node) -> Node:
  if is_constant(x) and is_constant(y):
    # 0/0 folds to nan; any other dividend over an exact zero is an error
    if y.value == 0.0 and x.value != 0.0:
      _raise_division_by_zero(x)
    return _fold(OpType.DIV, x, y)
  if is_constant(x, 0.0):
    return ConstantNode(0.0)
  if is_constant(y, 0.0):
    _raise_division_by_zero(x)
  if is_constant(y, 1.0):
    return x
  return BinaryOpNode(OpType.DIV, x, y)


def evaluate_power(x: Node, y: Node) -> Node:
  if is_constant(x, 0.0):
    return ConstantNode(x.value)
  if is_constant(x, 1.0):
    return ConstantNode(x.value)
  if is_constant(y, 0.0):
    return ConstantNode(1.0)
  if is_constant(y, 1.0):
    return x
  if is_constant(x) and is_constant(y):
    return _fold(OpType.POW, x, y)
  return BinaryOpNode(OpType.POW, x, y)


def evaluate_sine(x: Node) -> Node:
  if is_constant(x):
    return ConstantNode(evaluate_unary_op(x.value, OpType.SIN))
  return UnaryOpNode(OpType.SIN, x)


def evaluate_cosine(x: Node) -> Node:
  if is_constant(x):
    return ConstantNode(evaluate_unary_op(x.value, OpType.COS))
  return UnaryOpNode(OpType.COS, x)


def _raise_division_by_zero(dividend: Node):
  log_debug("division by zero: dividend %s", dividend)
  raise DivisionByZero(dividend)


BINARY_RULES: Dict[OpType, Callable[[Node, Node], Node]] = {
  OpType.ADD: evaluate_add,
  OpType.SUB: evaluate_subtract,
  OpType.MUL: evaluate_multiply,
  OpType.DIV: evaluate_divide,
  OpType.POW: evaluate_power,
}

UNARY_RULES: Dict[OpType, Callable[[Node], Node]] = {
  OpType.SIN: evaluate_sine,
  OpType.COS: evaluate_cosine,
}


def _check_rule_tables():
  missing = [op.name for op in BINARY_OPS if op not in BINARY_RULES]
  missing += [op.name for op in UNARY_OPS if op not in UNARY_RULES]
  if missing:
    raise RuntimeError(f"No reduction rule for operator(s): {', '.join(missing)}")

_check_rule_tables()


def _evaluate(node: Node, env: Environment) -> Node:
  def reduce(current: Node, args) -> Node:
    if isinstance(current, ConstantNode):
      return current
    elif isinstance(current, VariableNode):
      return env.get(current.name, current)
    elif isinstance(current, BinaryOpNode):
      return BINARY_RULES[current.operator](*args)
    elif isinstance(current, UnaryOpNode):
      return UNARY_RULES[current.operator](*args)
    raise TypeError(f"Cannot evaluate node of type {type(current).__name__}")

  return walk_bottom_up(node, reduce)


def simplify(expr: Node) -> Node:
  """Reduce expr with no bindings"""
  return _evaluate(expr, _EMPTY_ENVIRONMENT)


def evaluate(expr: Node, env: EnvironmentLike = None) -> Node:
  """Reduce expr under env, folding constants and removing identities.

  Raises DivisionByZero when a divisor reduces to exactly Constant(0.0).
  """
  if not isinstance(expr, Node):
    raise TypeError(f"Expected a Node, got {type(expr).__name__}")
  environment = make_environment(env)
  result = _evaluate(expr, environment)
  log_detail("evaluate %s -> %s", expr, result)
  return result


@dataclass(frozen=True)
class EvaluationResult:
  """Outcome of an evaluation that either produced a value or failed"""
  value: Optional[Node] = None
  error: Optional[DivisionByZero] = None

  def __post_init__(self):
    if (self.value is None) == (self.error is None):
      raise ValueError("EvaluationResult needs exactly one of value or error")

  @property
  def ok(self) -> bool:
    return self.error is None

  def unwrap(self) -> Node:
    if self.error is not None:
      raise self.error
    return self.value


def try_evaluate(expr: Node, env: EnvironmentLike = None) -> EvaluationResult:
  try:
    return EvaluationResult(value=evaluate(expr, env))
  except DivisionByZero as e:
    return EvaluationResult(error=e)
