import pytest

from compilekit.dag_cse import Dag, OpNode, OpType, VarNode, main


def test_variable_nodes_are_shared():
    dag = Dag()
    a1 = dag.var("a")
    a2 = dag.var("a")
    b = dag.var("b")
    assert a1 is a2
    assert a1.id != b.id
    assert len(dag.nodes) == 2


def test_equal_operations_are_shared():
    dag = Dag()
    a, b = dag.var("a"), dag.var("b")
    first = dag.op(OpType.MUL, a, b)
    second = dag.op(OpType.MUL, a, b)
    assert first is second
    assert len(dag.nodes) == 3


def test_different_operation_or_order_creates_new_node():
    dag = Dag()
    a, b = dag.var("a"), dag.var("b")
    mul = dag.op(OpType.MUL, a, b)
    add = dag.op(OpType.ADD, a, b)
    swapped = dag.op(OpType.MUL, b, a)
    assert len({mul.id, add.id, swapped.id}) == 3
    assert len(dag.nodes) == 5


def test_ids_follow_creation_order():
    dag = Dag()
    a, b = dag.var("a"), dag.var("b")
    mul = dag.op(OpType.MUL, a, b)
    add = dag.op(OpType.ADD, mul, mul)
    assert [node.id for node in dag.nodes] == list(range(len(dag.nodes)))
    assert add.left is add.right is mul


def test_describe_formats():
    dag = Dag()
    a, b = dag.var("a"), dag.var("b")
    mul = dag.op(OpType.MUL, a, b)
    assert dag.describe(a) == "Node 0: VAR('a')"
    assert dag.describe(mul) == "Node 2: OP('*', Left: Node 0, Right: Node 1)"


def test_summary_lists_every_node():
    dag = Dag()
    a, b = dag.var("a"), dag.var("b")
    dag.op(OpType.ADD, a, b)
    lines = dag.summary().splitlines()
    assert lines[1] == "--- DAG Nodes Created ---"
    assert lines[-1] == "-------------------------"
    assert lines[2:-1] == [dag.describe(node) for node in dag.nodes]


def test_capacity_limit():
    dag = Dag(max_nodes=2)
    dag.var("a")
    dag.var("b")
    assert dag.var("a").name == "a"
    with pytest.raises(OverflowError):
        dag.var("c")


def test_variable_name_must_be_single_character():
    with pytest.raises(ValueError):
        Dag().var("ab")


def test_node_kinds():
    dag = Dag()
    a = dag.var("x")
    node = dag.op(OpType.ADD, a, a)
    assert isinstance(a, VarNode) and a.name == "x"
    assert isinstance(node, OpNode) and node.op_type is OpType.ADD


def test_main_reports_reuse(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Successfully reused the common subexpression 'a*b'!" in out
    assert "Node 3: OP('+', Left: Node 2, Right: Node 2)" in out