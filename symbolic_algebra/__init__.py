# Python

"""Symbolic Algebra Package

Expression trees with evaluation, algebraic simplification and symbolic
differentiation.
"""

from .expression_tree import (
  Node, Expression, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
  Constant, Variable, Add, Subtract, Multiply, Divide, Power, Sine, Cosine,
  OpType, to_sympy, from_sympy, is_equivalent, latex_representation
)
from .errors import SymbolicAlgebraError, DivisionByZero, UnsupportedExpressionError
from .evaluator import (
  evaluate, try_evaluate, simplify, make_environment, EvaluationResult
)
from .differentiator import differentiate, try_differentiate, nth_derivative, gradient
from .logging_system import LogLevel, get_logger, configure_logging, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Node", "Expression", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
  "Constant", "Variable", "Add", "Subtract", "Multiply", "Divide", "Power", "Sine", "Cosine",
  "OpType", "to_sympy", "from_sympy", "is_equivalent", "latex_representation",
  "SymbolicAlgebraError", "DivisionByZero", "UnsupportedExpressionError",
  "evaluate", "try_evaluate", "simplify", "make_environment", "EvaluationResult",
  "differentiate", "try_differentiate", "nth_derivative", "gradient",
  "LogLevel", "get_logger", "configure_logging", "set_log_level"
]
