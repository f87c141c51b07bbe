"""Translation of three-address code into simple 8086-style assembly."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Iterator, TextIO

_ASSIGN = re.compile(r"\s*(\S+)\s+=\s*(\S+)\s+(\S+)\s+(\S+)")
_CONDITIONAL = re.compile(r"if\s*(\S+)\s+(\S+)\s+(\S+)\s+goto\s*(\S+)")
_GOTO = re.compile(r"goto\s*(\S+)")

_ARITHMETIC = {
    "+": (
        "MOV AX, {src}        ; Load {src} into AX",
        "ADD AX, {operand}        ; Add {operand} to AX",
        "MOV {dest}, AX        ; Move result into {dest}",
    ),
    "*": (
        "MOV AX, {src}        ; Load {src} into AX",
        "MOV BX, {operand}        ; Load {operand} into BX",
        "MUL BX            ; Multiply AX by BX",
        "MOV {dest}, AX        ; Store result in {dest}",
    ),
    "-": (
        "MOV AX, {src}        ; Load {src} into AX",
        "SUB AX, {operand}        ; Subtract {operand} from AX",
        "MOV {dest}, AX        ; Store result in {dest}",
    ),
}

_JUMPS = {
    "==": ("JE", "Jump if Equal to"),
    ">": ("JG", "Jump if Greater to"),
    "<": ("JL", "Jump if Less to"),
}


def _block(lines: Iterable[str]) -> str:
    return "\n".join(lines) + "\n\n"


def translate_line(line: str) -> str:
    """Assembly for one TAC statement, or an empty string if it is not understood."""
    match = _ASSIGN.match(line)
    if match:
        dest, src, op, operand = match.groups()
        template = _ARITHMETIC.get(op)
        if template is None:
            return ""
        return _block(t.format(dest=dest, src=src, operand=operand) for t in template)

    match = _CONDITIONAL.match(line)
    if match:
        left, op, right, label = match.groups()
        if op not in _JUMPS:
            return ""
        mnemonic, description = _JUMPS[op]
        return _block(
            (
                f"MOV AX, {left}        ; Load {left} into AX",
                f"CMP AX, {right}        ; Compare AX with {right}",
                f"{mnemonic} L{label}            ; {description} label L{label}",
            )
        )

    match = _GOTO.match(line)
    if match:
        label = match.group(1)
        return _block((f"JMP L{label}            ; Jump to label L{label}",))
    return ""


def translate(lines: Iterable[str]) -> str:
    """Assembly for a sequence of TAC statements."""
    return "".join(translate_line(line) for line in lines)


def _read_statements(stream: TextIO) -> Iterator[str]:
    for line in stream:
        if line.startswith("\n"):
            break
        yield line.split("\n", 1)[0]


def main(argv: list[str] | None = None) -> int:
    """Read TAC lines up to a blank line and print the generated assembly."""
    parser = argparse.ArgumentParser(prog="tac-assembly", description="Generate assembly from TAC.")
    parser.add_argument("file", nargs="?", help="TAC file (default: standard input)")
    args = parser.parse_args(argv)
    print("Enter Three-Address Code (TAC) with jumps:")
    try:
        if args.file:
            with open(args.file, encoding="utf-8") as stream:
                code = translate(_read_statements(stream))
        else:
            code = translate(_read_statements(sys.stdin))
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"\nGenerated Assembly Code:\n{code}", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())