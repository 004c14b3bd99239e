"""Exception types raised by the symbolic algebra engine."""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
  from .expression_tree.core.node import Node


class SymbolicAlgebraError(Exception):
  """Base class for errors raised by this package"""


class DivisionByZero(SymbolicAlgebraError, ZeroDivisionError):
  """Raised when a division reduces to an exact Constant(0.0) divisor"""

  def __init__(self, dividend: Optional['Node'] = None, message: str = "Division by zero"):
    super().__init__(message)
    self.dividend = dividend


class UnsupportedExpressionError(SymbolicAlgebraError, ValueError):
  """Raised when a foreign expression has no counterpart in the node set"""
