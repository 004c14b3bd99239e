"""Core expression tree components."""

from .node import (
    Node, Expression, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
    Constant, Variable, Add, Subtract, Multiply, Divide, Power, Sine, Cosine,
    is_constant, walk_bottom_up
)
from .operators import (
    NodeType, OpType, BINARY_OPS, UNARY_OPS, BINARY_OP_MAP, UNARY_OP_MAP,
    evaluate_binary_op, evaluate_unary_op
)

__all__ = [
    'Node', 'Expression', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'Constant', 'Variable', 'Add', 'Subtract', 'Multiply', 'Divide', 'Power', 'Sine', 'Cosine',
    'is_constant', 'walk_bottom_up',
    'NodeType', 'OpType', 'BINARY_OPS', 'UNARY_OPS', 'BINARY_OP_MAP', 'UNARY_OP_MAP',
    'evaluate_binary_op', 'evaluate_unary_op'
]
