import pytest

from symbolic_algebra import Constant, Variable, Add, Multiply, Power, Sine, Cosine, OpType
from symbolic_algebra.expression_tree.utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type, find_nodes_by_operator,
    get_constants, get_variables, get_variable_names, get_variable_usage_counts,
    get_binary_ops, get_unary_ops, is_fully_numeric
)
from symbolic_algebra.expression_tree import ConstantNode

x = Variable("x")
y = Variable("y")
EXPR = Add(Multiply(Constant(2), x), Sine(Power(y, Constant(3))))


def test_breadth_first_order():
    nodes = get_all_nodes(EXPR)
    assert nodes[0] == EXPR
    assert nodes[1] == Multiply(Constant(2), x)
    assert nodes[2] == Sine(Power(y, Constant(3)))
    assert len(nodes) == EXPR.size() == 8


def test_depth_first_order():
    nodes = get_all_nodes(EXPR, traversal_order='depth_first')
    assert nodes[:4] == [EXPR, Multiply(Constant(2), x), Constant(2), x]


def test_invalid_traversal_order():
    with pytest.raises(ValueError):
        get_all_nodes(EXPR, traversal_order='sideways')


def test_tree_depth():
    assert calculate_tree_depth(x) == 1
    assert calculate_tree_depth(EXPR) == 4


def test_find_by_type_and_operator():
    assert find_nodes_by_type(EXPR, ConstantNode) == [Constant(2), Constant(3)]
    assert find_nodes_by_operator(EXPR, '*') == [Multiply(Constant(2), x)]
    assert find_nodes_by_operator(EXPR, 'sin') == [Sine(Power(y, Constant(3)))]
    assert find_nodes_by_operator(EXPR, OpType.POW) == [Power(y, Constant(3))]
    assert find_nodes_by_operator(EXPR, OpType.COS) == []


def test_collectors():
    assert get_constants(EXPR) == [Constant(2), Constant(3)]
    assert get_variables(EXPR) == [x, y]
    assert get_variable_names(EXPR) == {"x", "y"}
    assert len(get_binary_ops(EXPR)) == 3
    assert get_unary_ops(EXPR) == [Sine(Power(y, Constant(3)))]


def test_variable_usage_counts():
    expr = Multiply(Add(x, x), Cosine(y))
    assert get_variable_usage_counts(expr) == {"x": 2, "y": 1}


def test_is_fully_numeric():
    assert is_fully_numeric(Add(Constant(1), Sine(Constant(2))))
    assert not is_fully_numeric(EXPR)


def test_deep_tree_traversals():
    depth = 3000
    chain = x
    for _ in range(depth):
        chain = Sine(chain)
    assert calculate_tree_depth(chain) == depth + 1
    assert get_all_nodes(chain, 'depth_first')[-1] == x
