"""Peephole optimisation of quadruples: constant folding and algebraic identities."""

from __future__ import annotations

import argparse
import re
import string
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

_QUAD = re.compile(r"\s*(\S+)\s+=\s*(\S+)\s+(\S+)\s+(\S+)")


class OpType(Enum):
    """Arithmetic operators, valued by their symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    NONE = ""

    @classmethod
    def from_symbol(cls, symbol: str) -> OpType:
        try:
            return cls(symbol)
        except ValueError:
            return cls.NONE


@dataclass(frozen=True)
class Quad:
    """The statement ``result = arg1 op arg2``."""

    result: str
    arg1: str
    op: str
    arg2: str

    @property
    def op_type(self) -> OpType:
        return OpType.from_symbol(self.op)

    def __str__(self) -> str:
        return f"{self.result} = {self.arg1} {self.op} {self.arg2}"


def parse_quad(text: str) -> Quad:
    """Parse ``result = arg1 op arg2``."""
    match = _QUAD.match(text)
    if not match or text[match.end():].strip():
        raise ValueError(f"expected 'result = arg1 op arg2', got {text!r}")
    return Quad(*match.groups())


def _is_number(text: str) -> bool:
    return all(ch in string.digits for ch in text)


def _evaluate(a: int, b: int, op: OpType) -> int:
    if op is OpType.ADD:
        return a + b
    if op is OpType.SUB:
        return a - b
    if op is OpType.MUL:
        return a * b
    if op is OpType.DIV:
        return a // b if b != 0 else 0
    return 0


def _other(quad: Quad, constant: str) -> str:
    return quad.arg2 if quad.arg1 == constant else quad.arg1


def optimize_quad(quad: Quad) -> str:
    """The optimised form of one quadruple."""
    op = quad.op_type
    if _is_number(quad.arg1) and _is_number(quad.arg2):
        return f"{quad.result} = {_evaluate(int(quad.arg1), int(quad.arg2), op)}"
    operands = (quad.arg1, quad.arg2)
    if op is OpType.ADD and "0" in operands:
        return f"{quad.result} = {_other(quad, '0')}"
    if op is OpType.MUL and "1" in operands:
        return f"{quad.result} = {_other(quad, '1')}"
    if op is OpType.MUL and "2" in operands:
        operand = _other(quad, "2")
        return f"{quad.result} = {operand} + {operand}"
    return str(quad)


def optimize(quads: Iterable[Quad]) -> list[str]:
    """The optimised form of every quadruple, in order."""
    return [optimize_quad(quad) for quad in quads]


def _read_program(text: str) -> list[Quad]:
    header = re.match(r"\s*([+-]?\d+)", text)
    if not header:
        raise ValueError("expected the number of expressions")
    count = int(header.group(1))
    if count < 0:
        raise ValueError("the number of expressions must not be negative")
    pos = header.end()
    quads: list[Quad] = []
    for _ in range(count):
        match = _QUAD.match(text, pos)
        if not match:
            raise ValueError("expected an expression 'result = arg1 op arg2'")
        quads.append(Quad(*match.groups()))
        pos = match.end()
    return quads


def main(argv: list[str] | None = None) -> int:
    """Read quadruples and print them before and after optimisation."""
    parser = argparse.ArgumentParser(prog="optimizer", description="Optimise quadruples.")
    parser.add_argument("file", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    print("Enter number of expressions: ", end="")
    print("Enter expressions in format: result = arg1 op arg2 (e.g., t1 = 4 + 5)")
    try:
        if args.file:
            with open(args.file, encoding="utf-8") as stream:
                text = stream.read()
        else:
            text = sys.stdin.read()
        quads = _read_program(text)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("\nOriginal Code:")
    for quad in quads:
        print(quad)
    print("\nOptimized Code:")
    for line in optimize(quads):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())