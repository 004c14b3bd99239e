"""Utilities for expression trees."""

from .sympy_utils import to_sympy, from_sympy, is_equivalent, latex_representation
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type, find_nodes_by_operator,
    get_constants, get_variables, get_variable_names, get_variable_usage_counts,
    get_binary_ops, get_unary_ops, is_fully_numeric
)

__all__ = [
    'to_sympy', 'from_sympy', 'is_equivalent', 'latex_representation',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type', 'find_nodes_by_operator',
    'get_constants', 'get_variables', 'get_variable_names', 'get_variable_usage_counts',
    'get_binary_ops', 'get_unary_ops', 'is_fully_numeric'
]
