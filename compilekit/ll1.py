"""LL(1) analysis: FIRST and FOLLOW sets and the predictive parse table."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

EPSILON = "#"
END_MARKER = "$"
MAX_PRODUCTIONS = 20
MAX_NONTERMINALS = 10
MAX_TERMINALS = 20


@dataclass(frozen=True)
class Production:
    """A grammar rule ``lhs -> rhs`` with single-character symbols."""

    lhs: str
    rhs: str

    def __str__(self) -> str:
        return f"{self.lhs}->{self.rhs}"


def parse_production(line: str) -> Production:
    """Parse a rule written as ``A=alpha``."""
    line = line.rstrip("\n")
    if len(line) < 3 or line[1] != "=":
        raise ValueError("Invalid production format.")
    return Production(line[0], line[2:])


def _is_nonterminal(symbol: str) -> bool:
    return "A" <= symbol <= "Z"


def _add(target: list[str], symbol: str) -> bool:
    if symbol in target:
        return False
    target.append(symbol)
    return True


class LL1Grammar:
    """A grammar together with its FIRST/FOLLOW sets and LL(1) parse table."""

    def __init__(self, productions: Iterable[Production]) -> None:
        self.productions = list(productions)
        if not self.productions:
            raise ValueError("grammar has no productions")
        if len(self.productions) > MAX_PRODUCTIONS:
            raise ValueError(f"at most {MAX_PRODUCTIONS} productions are supported")

        self.nonterminals: list[str] = []
        for production in self.productions:
            _add(self.nonterminals, production.lhs)

        self.terminals: list[str] = []
        for production in self.productions:
            for symbol in production.rhs:
                if symbol in " \n" or _is_nonterminal(symbol) or symbol == EPSILON:
                    continue
                _add(self.terminals, symbol)

        if len(self.nonterminals) > MAX_NONTERMINALS:
            raise ValueError(f"at most {MAX_NONTERMINALS} nonterminals are supported")
        if len(self.terminals) > MAX_TERMINALS:
            raise ValueError(f"at most {MAX_TERMINALS} terminals are supported")
        for production in self.productions:
            for symbol in production.rhs:
                if _is_nonterminal(symbol) and symbol not in self.nonterminals:
                    raise ValueError(f"nonterminal {symbol!r} has no production")

        self.first: dict[str, list[str]] = {nt: [] for nt in self.nonterminals}
        self.follow: dict[str, list[str]] = {nt: [] for nt in self.nonterminals}
        self._compute_first()
        self._compute_follow()
        self.table = self._build_table()

    @property
    def columns(self) -> list[str]:
        """Parse table columns: the terminals followed by the end marker."""
        return self.terminals + [END_MARKER]

    def _compute_first(self) -> None:
        changed = True
        while changed:
            changed = False
            for production in self.productions:
                target = self.first[production.lhs]
                nullable = True
                for symbol in production.rhs:
                    if symbol == " ":
                        continue
                    if not _is_nonterminal(symbol):
                        changed |= _add(target, symbol)
                        nullable = False
                    else:
                        for item in self.first[symbol]:
                            if item != EPSILON:
                                changed |= _add(target, item)
                        nullable = EPSILON in self.first[symbol]
                    if not nullable:
                        break
                if nullable:
                    changed |= _add(target, EPSILON)

    def _compute_follow(self) -> None:
        _add(self.follow[self.productions[0].lhs], END_MARKER)
        changed = True
        while changed:
            changed = False
            for production in self.productions:
                rhs = production.rhs
                for pos, symbol in enumerate(rhs):
                    if not _is_nonterminal(symbol):
                        continue
                    target = self.follow[symbol]
                    before = len(target)
                    nullable = True
                    for beta in rhs[pos + 1:]:
                        if beta == " ":
                            continue
                        if not _is_nonterminal(beta):
                            _add(target, beta)
                            nullable = False
                        else:
                            for item in self.first[beta]:
                                if item != EPSILON:
                                    _add(target, item)
                            nullable = EPSILON in self.first[beta]
                        if not nullable:
                            break
                    if nullable:
                        for item in list(self.follow[production.lhs]):
                            _add(target, item)
                    if len(target) != before:
                        changed = True

    def first_of(self, symbols: str) -> list[str]:
        """FIRST set of a string of grammar symbols."""
        result: list[str] = []
        nullable = True
        for symbol in symbols:
            if symbol == " ":
                continue
            if not _is_nonterminal(symbol):
                _add(result, symbol)
                nullable = False
            else:
                if symbol not in self.first:
                    raise ValueError(f"unknown nonterminal {symbol!r}")
                for item in self.first[symbol]:
                    if item != EPSILON:
                        _add(result, item)
                nullable = EPSILON in self.first[symbol]
            if not nullable:
                break
        if nullable:
            _add(result, EPSILON)
        return result

    def _build_table(self) -> dict[str, dict[str, list[str]]]:
        table = {nt: {col: [] for col in self.columns} for nt in self.nonterminals}
        for production in self.productions:
            row = table[production.lhs]
            entry = str(production)
            first = self.first_of(production.rhs)
            for item in first:
                if item != EPSILON and item in self.terminals:
                    row[item].append(entry)
            if EPSILON in first:
                for item in self.follow[production.lhs]:
                    if item == END_MARKER or item in self.terminals:
                        row[item].append(entry)
        return table

    @staticmethod
    def _render_sets(title: str, label: str, sets: dict[str, list[str]]) -> str:
        lines = ["", f"{title} sets:"]
        for nt, members in sets.items():
            lines.append(f"{label}({nt}) = {{ " + "".join(f"{m} " for m in members) + "}")
        return "\n".join(lines) + "\n"

    def render_first_sets(self) -> str:
        """The FIRST sets as a printable listing."""
        return self._render_sets("FIRST", "FIRST", self.first)

    def render_follow_sets(self) -> str:
        """The FOLLOW sets as a printable listing."""
        return self._render_sets("FOLLOW", "FOLLOW", self.follow)

    def render_parse_table(self) -> str:
        """The parse table as tab-separated text; conflicts are joined by ``|``."""
        lines = ["", "LL(1) Parse Table:"]
        lines.append("\t" + "".join(f"{t}\t" for t in self.terminals) + f"{END_MARKER}\t")
        for nt in self.nonterminals:
            cells = (
                (" | ".join(cell) if cell else "-") + "\t"
                for cell in self.table[nt].values()
            )
            lines.append(f"{nt}\t" + "".join(cells))
        return "\n".join(lines) + "\n"


def _read_grammar(stream: TextIO) -> list[Production]:
    print("Enter the number of productions: ", end="")
    header = stream.readline().split()
    try:
        count = int(header[0])
    except (IndexError, ValueError):
        raise ValueError("expected the number of productions") from None
    print("Enter each production in the form A=alpha (use '#' for epsilon):")
    productions: list[Production] = []
    while len(productions) < count:
        line = stream.readline()
        if not line:
            raise ValueError("unexpected end of input")
        try:
            productions.append(parse_production(line))
        except ValueError as exc:
            print(exc)
    return productions


def main(argv: list[str] | None = None) -> int:
    """Read a grammar and print its FIRST/FOLLOW sets and LL(1) table."""
    parser = argparse.ArgumentParser(prog="ll1", description="Build an LL(1) parse table.")
    parser.add_argument("file", nargs="?", help="grammar file (default: standard input)")
    args = parser.parse_args(argv)
    try:
        if args.file:
            with open(args.file, encoding="utf-8") as stream:
                productions = _read_grammar(stream)
        else:
            productions = _read_grammar(sys.stdin)
        grammar = LL1Grammar(productions)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(
        grammar.render_first_sets()
        + grammar.render_follow_sets()
        + grammar.render_parse_table(),
        end="",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())