import numbers
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence, Tuple
from .operators import (
  NodeType, OpType, OP_SYMBOLS,
  resolve_binary_op, resolve_unary_op
)


class Node(ABC):
  """Immutable expression tree node with structural equality.

  Hash and size are computed once in the constructor from the children's
  stored values, so neither walks the tree.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def _seal(self):
    object.__setattr__(self, '_hash_cache', self._compute_hash())
    object.__setattr__(self, '_size_cache', 1 + sum(child._size_cache for child in self.children()))

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def _format(self, parts: Sequence[str]) -> str:
    """Infix text for this node given the text of its children"""
    pass

  @abstractmethod
  def _format_repr(self, parts: Sequence[str]) -> str:
    pass

  @abstractmethod
  def _to_sympy(self, args: Sequence[sp.Expr]) -> sp.Expr:
    pass

  def to_string(self) -> str:
    return walk_bottom_up(self, lambda node, parts: node._format(parts))

  def to_sympy(self) -> sp.Expr:
    return walk_bottom_up(self, lambda node, args: node._to_sympy(args))

  def size(self) -> int:
    """Node count"""
    return self._size_cache

  def __hash__(self) -> int:
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    pending = [(self, other)]
    while pending:
      a, b = pending.pop()
      if type(a) is not type(b) or a._hash_cache != b._hash_cache:
        return False
      if not a._same_label(b):
        return False
      pending.extend(zip(a.children(), b.children()))
    return True

  @abstractmethod
  def _same_label(self, other) -> bool:
    """Compare this node's own data (not its children) with a node of the same class"""
    pass

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return walk_bottom_up(self, lambda node, parts: node._format_repr(parts))


# Type used throughout the package for "any expression"
Expression = Node


def walk_bottom_up(root: Node, combine: Callable[[Node, List[Any]], Any]) -> Any:
  """Post-order fold over the tree with an explicit stack.

  combine(node, child_results) is called once per node, children before
  parents, and its return value becomes the node's result.
  """
  results: List[Any] = []
  stack = [(root, False)]
  while stack:
    node, expanded = stack.pop()
    children = node.children()
    if expanded:
      count = len(children)
      args = results[len(results) - count:]
      del results[len(results) - count:]
      results.append(combine(node, args))
    elif not children:
      results.append(combine(node, []))
    else:
      stack.append((node, True))
      stack.extend((child, False) for child in reversed(children))
  return results[0]


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a str, got {type(name).__name__}")
    object.__setattr__(self, 'name', name)
    self._seal()

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def _same_label(self, other) -> bool:
    return self.name == other.name

  def _format(self, parts) -> str:
    return self.name

  def _format_repr(self, parts) -> str:
    return f"Variable({self.name!r})"

  def _to_sympy(self, args):
    return sp.Symbol(self.name)


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
      raise TypeError(f"Constant value must be a real number, got {type(value).__name__}")
    object.__setattr__(self, 'value', float(value))
    self._seal()

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))

  def _same_label(self, other) -> bool:
    return self.value == other.value

  def _format(self, parts) -> str:
    return repr(self.value)

  def _format_repr(self, parts) -> str:
    return f"Constant({self.value!r})"

  def _to_sympy(self, args):
    return sp.Float(self.value)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator, left: Node, right: Node):
    op = resolve_binary_op(operator)
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError("BinaryOpNode operands must be Node instances")
    object.__setattr__(self, 'operator', op)
    object.__setattr__(self, 'left', left)
    object.__setattr__(self, 'right', right)
    self._seal()

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, self.left._hash_cache, self.right._hash_cache))

  def _same_label(self, other) -> bool:
    return self.operator == other.operator

  def _format(self, parts) -> str:
    left, right = parts
    return f"({left} {OP_SYMBOLS[self.operator]} {right})"

  def _format_repr(self, parts) -> str:
    left, right = parts
    return f"{_BUILDER_NAMES[self.operator]}({left}, {right})"

  def _to_sympy(self, args):
    left, right = args
    if self.operator == OpType.ADD:
      return sp.Add(left, right)
    elif self.operator == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == OpType.MUL:
      return sp.Mul(left, right)
    elif self.operator == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1))
    elif self.operator == OpType.POW:
      return sp.Pow(left, right)
    raise TypeError(f"to_sympy reached unexpected binary operation: {self.operator!r}")


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')

  def __init__(self, operator, operand: Node):
    op = resolve_unary_op(operator)
    if not isinstance(operand, Node):
      raise TypeError("UnaryOpNode operand must be a Node instance")
    object.__setattr__(self, 'operator', op)
    object.__setattr__(self, 'operand', operand)
    self._seal()

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self.operator, self.operand._hash_cache))

  def _same_label(self, other) -> bool:
    return self.operator == other.operator

  def _format(self, parts) -> str:
    return f"{OP_SYMBOLS[self.operator]}({parts[0]})"

  def _format_repr(self, parts) -> str:
    return f"{_BUILDER_NAMES[self.operator]}({parts[0]})"

  def _to_sympy(self, args):
    operand = args[0]
    if self.operator == OpType.SIN:
      return sp.sin(operand)
    elif self.operator == OpType.COS:
      return sp.cos(operand)
    raise TypeError(f"to_sympy reached unexpected unary operation: {self.operator!r}")


_BUILDER_NAMES = {
  OpType.ADD: 'Add', OpType.SUB: 'Subtract', OpType.MUL: 'Multiply',
  OpType.DIV: 'Divide', OpType.POW: 'Power',
  OpType.SIN: 'Sine', OpType.COS: 'Cosine',
}


def Constant(value: float) -> ConstantNode:
  return ConstantNode(value)

def Variable(name: str) -> VariableNode:
  return VariableNode(name)

def Add(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.ADD, left, right)

def Subtract(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.SUB, left, right)

def Multiply(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.MUL, left, right)

def Divide(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.DIV, left, right)

def Power(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.POW, left, right)

def Sine(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.SIN, operand)

def Cosine(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.COS, operand)


def is_constant(node: Node, value: Optional[float] = None) -> bool:
  """True if node is a ConstantNode (equal to value, when given)"""
  if not isinstance(node, ConstantNode):
    return False
  return value is None or node.value == value
