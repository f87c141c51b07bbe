"""Basic blocks and control-flow edges of three-address code."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from typing import Sequence

_GOTO = re.compile(r"goto\s*(\S+)")


@dataclass(frozen=True)
class Edge:
    """A control-flow edge to the block numbered ``target``."""

    target: int
    kind: str
    label: str | None = None

    def describe(self) -> str:
        if self.kind == "jump":
            return f"=> Block {self.target} (jump to {self.label})"
        return f"=> Block {self.target} ({self.kind})"


@dataclass
class BasicBlock:
    """Lines ``start`` (inclusive) to ``end`` (exclusive), numbered from 1."""

    number: int
    start: int
    end: int
    lines: list[str]
    edges: list[Edge] = field(default_factory=list)


def _goto_label(line: str) -> str | None:
    pos = line.find("goto")
    if pos < 0:
        return None
    match = _GOTO.match(line, pos)
    return match.group(1) if match else None


def _label_index(lines: Sequence[str], label: str | None) -> int | None:
    if label is None:
        return None
    for index, line in enumerate(lines):
        if line.startswith(label) and line[len(label):len(label) + 1] == ":":
            return index
    return None


def find_leaders(lines: Sequence[str]) -> list[int]:
    """Indices of the lines that start a basic block."""
    if not lines:
        return []
    leaders = {0}
    for index, line in enumerate(lines):
        if "goto" not in line:
            continue
        target = _label_index(lines, _goto_label(line))
        if target is not None:
            leaders.add(target)
        if index + 1 < len(lines):
            leaders.add(index + 1)
    return sorted(leaders)


def build_blocks(lines: Sequence[str]) -> list[BasicBlock]:
    """Split the code into basic blocks and connect them."""
    leaders = find_leaders(lines)
    bounds = list(zip(leaders, leaders[1:] + [len(lines)]))
    number_of = {start: number for number, (start, _) in enumerate(bounds, 1)}
    blocks: list[BasicBlock] = []
    for number, (start, end) in enumerate(bounds, 1):
        block = BasicBlock(number, start, end, list(lines[start:end]))
        last = lines[end - 1]
        if "goto" in last:
            label = _goto_label(last)
            target = _label_index(lines, label)
            if target in number_of:
                block.edges.append(Edge(number_of[target], "jump", label))
        elif number < len(bounds):
            block.edges.append(Edge(number + 1, "fallthrough"))
        blocks.append(block)
    return blocks


def render_flow_graph(lines: Sequence[str]) -> str:
    """The blocks with their lines and outgoing edges as text."""
    out = ["", "Control Flow Graph:"]
    for block in build_blocks(lines):
        out.append(f"Block {block.number} (Lines {block.start + 1} to {block.end}):")
        out.extend(f"  {line}" for line in block.lines)
        out.extend(f"  {edge.describe()}" for edge in block.edges)
    return "\n".join(out) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read TAC from a file and print its control-flow graph."""
    parser = argparse.ArgumentParser(prog="flow-graph", description="Build a control-flow graph.")
    parser.add_argument("file", nargs="?", default="input.txt", help="TAC file (default: input.txt)")
    args = parser.parse_args(argv)
    try:
        with open(args.file, encoding="utf-8") as stream:
            lines = [line.split("\n", 1)[0] for line in stream]
    except OSError as exc:
        print(f"File open error: {exc}", file=sys.stderr)
        return 1
    print(render_flow_graph(lines), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())