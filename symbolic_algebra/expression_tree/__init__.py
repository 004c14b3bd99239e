"""Expression Tree Module

Immutable expression tree nodes and helpers for inspecting and converting them.
"""

from .core.node import (
    Node,
    Expression,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode,
    Constant,
    Variable,
    Add,
    Subtract,
    Multiply,
    Divide,
    Power,
    Sine,
    Cosine,
    is_constant
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    evaluate_binary_op,
    evaluate_unary_op
)
from .utils import to_sympy, from_sympy, is_equivalent, latex_representation

__all__ = [
    "Node", "Expression", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "Constant", "Variable", "Add", "Subtract", "Multiply", "Divide", "Power", "Sine", "Cosine",
    "is_constant",
    "NodeType", "OpType", "BINARY_OP_MAP", "UNARY_OP_MAP",
    "evaluate_binary_op", "evaluate_unary_op",
    "to_sympy", "from_sympy", "is_equivalent", "latex_representation"
]
