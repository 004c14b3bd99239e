import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  SIN = 5
  COS = 6

BINARY_OPS = (OpType.ADD, OpType.SUB, OpType.MUL, OpType.DIV, OpType.POW)
UNARY_OPS = (OpType.SIN, OpType.COS)

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP = {'sin': OpType.SIN, 'cos': OpType.COS}

OP_SYMBOLS = {op: symbol for symbol, op in BINARY_OP_MAP.items()}
OP_SYMBOLS.update({op: name for name, op in UNARY_OP_MAP.items()})


def resolve_binary_op(operator) -> OpType:
  """Accept an OpType member or its symbol and return the binary OpType"""
  if isinstance(operator, str):
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operator: {operator!r}")
    return BINARY_OP_MAP[operator]
  if isinstance(operator, OpType) and operator in BINARY_OPS:
    return operator
  raise ValueError(f"Unknown binary operator: {operator!r}")


def resolve_unary_op(operator) -> OpType:
  """Accept an OpType member or its name and return the unary OpType"""
  if isinstance(operator, str):
    if operator not in UNARY_OP_MAP:
      raise ValueError(f"Unknown unary operator: {operator!r}")
    return UNARY_OP_MAP[operator]
  if isinstance(operator, OpType) and operator in UNARY_OPS:
    return operator
  raise ValueError(f"Unknown unary operator: {operator!r}")


# Scalar float64 kernels. error_model='numpy' keeps IEEE semantics
# (x/0.0 -> inf or nan) instead of raising ZeroDivisionError.
@numba.njit(cache=True, error_model='numpy')
def fold_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  elif op_type == OpType.POW:
    return np.power(left_val, right_val)
  return np.nan

@numba.njit(cache=True, error_model='numpy')
def fold_unary_op(operand_val, op_type):
  if op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  return np.nan


def evaluate_binary_op(left_val: float, right_val: float, op_type: OpType) -> float:
  return float(fold_binary_op(np.float64(left_val), np.float64(right_val), op_type))


def evaluate_unary_op(operand_val: float, op_type: OpType) -> float:
  return float(fold_unary_op(np.float64(operand_val), op_type))
