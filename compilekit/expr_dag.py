"""Infix expressions turned into postfix and then into a shared-node expression graph."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable

OPERATORS = "+-*/"


@dataclass(eq=False)
class Node:
    """An operand or operator with optional children."""

    val: str
    left: Node | None = None
    right: Node | None = None


def _precedence(op: str) -> int:
    if op in "+-":
        return 1
    if op in "*/":
        return 2
    return 0


def _is_operator_token(token: str) -> bool:
    return len(token) == 1 and token in OPERATORS


def infix_to_postfix(expr: str) -> list[str]:
    """Tokens of ``expr`` in postfix order; operands are runs of letters and digits."""
    output: list[str] = []
    stack: list[str] = []
    i = 0
    while i < len(expr):
        ch = expr[i]
        if ch.isascii() and ch.isalnum():
            start = i
            while i < len(expr) and expr[i].isascii() and expr[i].isalnum():
                i += 1
            output.append(expr[start:i])
            continue
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        elif ch in OPERATORS:
            while stack and _precedence(stack[-1]) >= _precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
        i += 1
    while stack:
        op = stack.pop()
        if op == "(":
            raise ValueError("unbalanced '(' in expression")
        output.append(op)
    return output


def build_dag(postfix: Iterable[str]) -> Node:
    """Build the graph for a postfix token list, sharing identical operator nodes."""
    stack: list[Node] = []
    created: list[Node] = []
    for token in postfix:
        if _is_operator_token(token):
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} is missing an operand")
            right = stack.pop()
            left = stack.pop()
            existing = next(
                (
                    node
                    for node in created
                    if node.val == token and node.left is left and node.right is right
                ),
                None,
            )
            if existing is None:
                existing = Node(token, left, right)
                created.append(existing)
            stack.append(existing)
        else:
            stack.append(Node(token))
    if not stack:
        raise ValueError("empty expression")
    return stack.pop()


def render_dag(root: Node | None) -> str:
    """The graph drawn sideways: right subtree above, left below, four spaces per level."""
    lines: list[str] = []

    def walk(node: Node | None, level: int) -> None:
        if node is None:
            return
        walk(node.right, level + 1)
        lines.append("    " * level + node.val)
        walk(node.left, level + 1)

    walk(root, 0)
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Read an infix expression and print its postfix form and graph."""
    parser = argparse.ArgumentParser(prog="expr-dag", description="Draw the DAG of an expression.")
    parser.add_argument("expression", nargs="?", help="infix expression (default: read from stdin)")
    args = parser.parse_args(argv)
    expr = args.expression
    if expr is None:
        print("Enter infix expression: ", end="")
        expr = sys.stdin.readline().rstrip("\n")
    try:
        postfix = infix_to_postfix(expr)
        print("\nPostfix: " + "".join(f"{token} " for token in postfix), end="")
        root = build_dag(postfix)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print("\n\nDAG (in visual form):")
    print(render_dag(root), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())