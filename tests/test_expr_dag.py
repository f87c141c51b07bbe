import pytest

from compilekit.expr_dag import Node, build_dag, infix_to_postfix, main, render_dag


def test_postfix_respects_precedence():
    assert infix_to_postfix("a+b*c") == ["a", "b", "c", "*", "+"]


def test_postfix_respects_parentheses():
    assert infix_to_postfix("(a+b)*c") == ["a", "b", "+", "c", "*"]


def test_postfix_multi_character_operands_and_spaces():
    assert infix_to_postfix(" x1 +  22 ") == ["x1", "22", "+"]


def test_postfix_is_left_associative():
    tokens = infix_to_postfix("a-b-c")
    assert tokens.index("-") < tokens.index("c")
    assert tokens[-1] == "-"


def test_postfix_operand_order_is_preserved():
    tokens = infix_to_postfix("p*(q+r)/s")
    operands = [t for t in tokens if t not in "+-*/"]
    assert operands == ["p", "q", "r", "s"]


@pytest.mark.parametrize("expr", ["a+b)", "(a+b", "((a)"])
def test_postfix_unbalanced_parentheses(expr):
    with pytest.raises(ValueError):
        infix_to_postfix(expr)


def test_build_dag_structure():
    root = build_dag(infix_to_postfix("a+b*c"))
    assert root.val == "+"
    assert root.left.val == "a"
    assert root.right.val == "*"
    assert (root.right.left.val, root.right.right.val) == ("b", "c")


def test_build_dag_leaves_have_no_children():
    root = build_dag(["x"])
    assert root.val == "x"
    assert root.left is None and root.right is None


def test_build_dag_operands_are_fresh_nodes():
    root = build_dag(infix_to_postfix("a*b+a*b"))
    assert root.left.val == root.right.val == "*"
    assert root.left.left is not root.right.left
    assert root.left.left.val == root.right.left.val == "a"


@pytest.mark.parametrize("postfix", [[], ["+"], ["a", "*"]])
def test_build_dag_errors(postfix):
    with pytest.raises(ValueError):
        build_dag(postfix)


def test_render_dag_draws_right_above_left():
    tree = Node("+", Node("a"), Node("b"))
    assert render_dag(tree).splitlines() == ["    b", "+", "    a"]


def test_main_prints_postfix_and_graph(capsys):
    assert main(["a+b"]) == 0
    out = capsys.readouterr().out
    assert "Postfix: a b + " in out
    assert out.endswith("    b\n+\n    a\n")


def test_main_rejects_bad_expression(capsys):
    assert main(["(a+b"]) == 1
    assert "error" in capsys.readouterr().err