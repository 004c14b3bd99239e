"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. Nodes are immutable,
so none of these functions modify the tree they are given.
"""

from typing import List, Dict, Set, Union
from collections import Counter

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode, walk_bottom_up
from ..core.operators import OpType, resolve_binary_op, resolve_unary_op, UNARY_OP_MAP, UNARY_OPS


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []
    index = 0

    while index < len(nodes_to_visit):
        current_node = nodes_to_visit[index]
        index += 1
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative, non-recursive)"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    return walk_bottom_up(node, lambda current, depths: 1 + max(depths, default=0))


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """
    Find all nodes of a specific type in the tree.

    Args:
        node: Root node of the tree
        node_type: Type of nodes to find (e.g., ConstantNode, VariableNode)

    Returns:
        List of nodes matching the specified type, in depth-first order
    """
    return [n for n in _depth_first_traversal(node) if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: Union[str, OpType]) -> List[Node]:
    """
    Find all operator nodes with a specific operator.

    Args:
        node: Root node of the tree
        operator: OpType member or its symbol ('+', '-', '*', '/', '^', 'sin', 'cos')

    Returns:
        List of operator nodes using that operator
    """
    if operator in UNARY_OP_MAP or operator in UNARY_OPS:
        op = resolve_unary_op(operator)
    else:
        op = resolve_binary_op(operator)
    return [n for n in _depth_first_traversal(node)
            if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == op]


def get_constants(node: Node) -> List[ConstantNode]:
    """Get all constant nodes in the tree."""
    return find_nodes_by_type(node, ConstantNode)


def get_variables(node: Node) -> List[VariableNode]:
    """Get all variable nodes in the tree."""
    return find_nodes_by_type(node, VariableNode)


def get_variable_names(node: Node) -> Set[str]:
    """Names of the free variables in the tree."""
    return {var.name for var in get_variables(node)}


def get_variable_usage_counts(node: Node) -> Dict[str, int]:
    """
    Count how many times each variable appears in the tree.

    Returns:
        Dictionary mapping variable name to occurrence count
    """
    return dict(Counter(var.name for var in get_variables(node)))


def get_binary_ops(node: Node) -> List[BinaryOpNode]:
    """Get all binary operation nodes in the tree."""
    return find_nodes_by_type(node, BinaryOpNode)


def get_unary_ops(node: Node) -> List[UnaryOpNode]:
    """Get all unary operation nodes in the tree."""
    return find_nodes_by_type(node, UnaryOpNode)


def is_fully_numeric(node: Node) -> bool:
    """True if the tree contains no variables."""
    return not get_variables(node)
