"""Recursive FIRST and FOLLOW computation for grammars written as ``A=alpha``."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

EPSILON = "#"
END_MARKER = "$"


def _is_nonterminal(symbol: str) -> bool:
    return "A" <= symbol <= "Z"


def _add(target: list[str], symbol: str) -> None:
    if symbol not in target:
        target.append(symbol)


def _validate(productions: Iterable[str]) -> list[str]:
    rules = list(productions)
    if not rules:
        raise ValueError("grammar has no productions")
    for rule in rules:
        if len(rule) < 2 or rule[1] != "=":
            raise ValueError(f"invalid production: {rule!r}")
    return rules


def first_sets(productions: Iterable[str]) -> dict[str, list[str]]:
    """FIRST set of every nonterminal reached from the left-hand sides."""
    rules = _validate(productions)
    first: dict[str, list[str]] = {}
    in_progress: set[str] = set()

    def compute(symbol: str) -> list[str]:
        if not _is_nonterminal(symbol):
            return [symbol]
        if symbol in first:
            return first[symbol]
        if symbol in in_progress:
            raise ValueError(f"left recursion through {symbol!r}")
        in_progress.add(symbol)
        result: list[str] = []
        for rule in rules:
            if rule[0] != symbol:
                continue
            rhs = rule[2:]
            if rhs.startswith(EPSILON):
                _add(result, EPSILON)
                continue
            for j, sym in enumerate(rhs):
                sub = compute(sym)
                for item in sub:
                    if item != EPSILON:
                        _add(result, item)
                if EPSILON not in sub:
                    break
                if j == len(rhs) - 1:
                    _add(result, EPSILON)
        in_progress.discard(symbol)
        first[symbol] = result
        return result

    for rule in rules:
        if _is_nonterminal(rule[0]):
            compute(rule[0])
    return first


def follow_sets(
    productions: Iterable[str], first: dict[str, list[str]]
) -> dict[str, list[str]]:
    """FOLLOW set of every left-hand-side nonterminal."""
    rules = _validate(productions)
    start = rules[0][0]
    follow: dict[str, list[str]] = {}
    in_progress: set[str] = set()

    def compute(symbol: str) -> list[str]:
        if symbol in follow:
            return follow[symbol]
        if symbol in in_progress:
            raise ValueError(f"cyclic FOLLOW dependency through {symbol!r}")
        in_progress.add(symbol)
        result: list[str] = []
        if symbol == start:
            _add(result, END_MARKER)
        for rule in rules:
            lhs, rhs = rule[0], rule[2:]
            for j, ch in enumerate(rhs):
                if ch != symbol:
                    continue
                if j + 1 < len(rhs):
                    following = rhs[j + 1]
                    if not _is_nonterminal(following):
                        _add(result, following)
                        continue
                    following_first = first.get(following, [])
                    for item in following_first:
                        if item != EPSILON:
                            _add(result, item)
                    if EPSILON in following_first:
                        for item in compute(lhs):
                            _add(result, item)
                elif symbol != lhs:
                    for item in compute(lhs):
                        _add(result, item)
        in_progress.discard(symbol)
        follow[symbol] = result
        return result

    for rule in rules:
        if _is_nonterminal(rule[0]):
            compute(rule[0])
    return follow


def format_sets(first: dict[str, list[str]], follow: dict[str, list[str]]) -> str:
    """Both tables, nonterminals in alphabetical order, empty sets left out."""
    lines = ["", "First sets:"]
    for nt in sorted(first):
        if first[nt]:
            lines.append(f"FIRST({nt}) = {{ {''.join(first[nt])} }}")
    lines += ["", "Follow sets:"]
    for nt in sorted(follow):
        if follow[nt]:
            lines.append(f"FOLLOW({nt}) = {{ {''.join(follow[nt])} }}")
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read productions and print their FIRST and FOLLOW sets."""
    parser = argparse.ArgumentParser(prog="first-follow", description="Compute FIRST/FOLLOW sets.")
    parser.add_argument("file", nargs="?", help="grammar file (default: standard input)")
    args = parser.parse_args(argv)
    print("Enter number of productions: ", end="")
    print("Enter productions (E=TR) and use # for epsilon:")
    try:
        if args.file:
            with open(args.file, encoding="utf-8") as stream:
                words = stream.read().split()
        else:
            words = sys.stdin.read().split()
        if not words:
            raise ValueError("expected the number of productions")
        count = int(words[0])
        rules = words[1:1 + count]
        if len(rules) < count:
            raise ValueError("unexpected end of input")
        first = first_sets(rules)
        follow = follow_sets(rules, first)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(format_sets(first, follow), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())