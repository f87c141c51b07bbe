"""Common-subexpression elimination with a directed acyclic graph of nodes."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Union

MAX_NODES = 100


class OpType(Enum):
    """Binary operations a DAG node can hold, valued by their symbol."""

    MUL = "*"
    ADD = "+"


@dataclass(eq=False)
class VarNode:
    """A leaf naming a single-character variable."""

    id: int
    name: str


@dataclass(eq=False)
class OpNode:
    """An interior node applying an operation to two child nodes."""

    id: int
    op_type: OpType
    left: DagNode
    right: DagNode


DagNode = Union[VarNode, OpNode]


class Dag:
    """A pool of nodes where equal variables and equal operations are shared."""

    def __init__(self, max_nodes: int = MAX_NODES) -> None:
        if max_nodes < 0:
            raise ValueError("max_nodes must not be negative")
        self.max_nodes = max_nodes
        self.nodes: list[DagNode] = []

    def _check_capacity(self) -> int:
        if len(self.nodes) >= self.max_nodes:
            raise OverflowError("Error: Max DAG nodes reached.")
        return len(self.nodes)

    def var(self, name: str) -> VarNode:
        """The node for variable ``name``, created on first use."""
        if len(name) != 1:
            raise ValueError(f"variable names are single characters, got {name!r}")
        for node in self.nodes:
            if isinstance(node, VarNode) and node.name == name:
                return node
        node = VarNode(self._check_capacity(), name)
        self.nodes.append(node)
        return node

    def op(self, op_type: OpType, left: DagNode, right: DagNode) -> OpNode:
        """The node for ``left op right``, reusing one with the very same children."""
        for node in self.nodes:
            if (
                isinstance(node, OpNode)
                and node.op_type is op_type
                and node.left is left
                and node.right is right
            ):
                return node
        node = OpNode(self._check_capacity(), op_type, left, right)
        self.nodes.append(node)
        return node

    def describe(self, node: DagNode) -> str:
        """A one-line description of ``node``."""
        if isinstance(node, VarNode):
            return f"Node {node.id}: VAR('{node.name}')"
        return (
            f"Node {node.id}: OP('{node.op_type.value}', "
            f"Left: Node {node.left.id}, Right: Node {node.right.id})"
        )

    def summary(self) -> str:
        """Every node created so far, in creation order."""
        lines = ["", "--- DAG Nodes Created ---"]
        lines += [self.describe(node) for node in self.nodes]
        lines.append("-------------------------")
        return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Build the DAG for ``a*b + (a*b)`` and show that ``a*b`` is shared."""
    parser = argparse.ArgumentParser(
        prog="dag-cse", description="Demonstrate common-subexpression sharing in a DAG."
    )
    parser.parse_args(argv)

    print("Building DAG for: a*b + (a*b)")
    dag = Dag()
    node_a = dag.var("a")
    node_b = dag.var("b")

    first = dag.op(OpType.MUL, node_a, node_b)
    print(f"Created/Reused node for 'a*b' (1st instance). Node ID: {first.id}")
    second = dag.op(OpType.MUL, node_a, node_b)
    print(f"Created/Reused node for 'a*b' (2nd instance). Node ID: {second.id}")

    if first is second:
        print("Successfully reused the common subexpression 'a*b'!")
    else:
        print("Error: Common subexpression 'a*b' was not reused.")

    total = dag.op(OpType.ADD, first, second)
    print(f"Created node for final addition '(a*b)+(a*b)'. Node ID: {total.id}")

    print(dag.summary(), end="")

    print(
        "\nOptimization insight: The multiplication 'a*b' is represented by a "
        f"single node (Node {first.id})."
    )
    print(
        f"The final addition (Node {total.id}) has both its left and right operands "
        "pointing to this single 'a*b' node."
    )
    print("This means 'a*b' will only be computed once in the optimized code.")
    return 0


if __name__ == "__main__":
    sys.exit(main())