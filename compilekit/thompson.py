"""Thompson construction of an epsilon-NFA from a postfix regular expression over {a, b}."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

EPSILON = "e"
MAX_STATES = 100
_COLUMNS = ("a", "b", EPSILON)


@dataclass(frozen=True)
class Fragment:
    """A partial automaton with one entry and one exit state."""

    start: int
    end: int


class EpsilonNFA:
    """States and transitions on ``a``, ``b`` and epsilon."""

    def __init__(self) -> None:
        self.state_count = 0
        self.transitions: dict[int, dict[str, list[int]]] = {}

    def _new_state(self) -> int:
        if self.state_count >= MAX_STATES:
            raise OverflowError(f"at most {MAX_STATES} states are supported")
        state = self.state_count
        self.state_count += 1
        return state

    def _add(self, source: int, target: int, symbol: str) -> None:
        column = symbol if symbol in ("a", "b") else EPSILON
        row = self.transitions.setdefault(source, {c: [] for c in _COLUMNS})
        row[column].append(target)
        self.state_count = max(self.state_count, source + 1, target + 1)

    def symbol(self, ch: str) -> Fragment:
        """A fragment accepting the single symbol ``ch``."""
        if ch not in ("a", "b"):
            raise ValueError(f"Invalid character: {ch}")
        start = self._new_state()
        end = self._new_state()
        self._add(start, end, ch)
        return Fragment(start, end)

    def alternate(self, first: Fragment, second: Fragment) -> Fragment:
        """A fragment accepting what ``first`` or ``second`` accepts."""
        start = self._new_state()
        end = self._new_state()
        self._add(start, first.start, EPSILON)
        self._add(start, second.start, EPSILON)
        self._add(first.end, end, EPSILON)
        self._add(second.end, end, EPSILON)
        return Fragment(start, end)

    def concat(self, first: Fragment, second: Fragment) -> Fragment:
        """A fragment accepting ``first`` followed by ``second``."""
        self._add(first.end, second.start, EPSILON)
        return Fragment(first.start, second.end)

    def star(self, fragment: Fragment) -> Fragment:
        """A fragment accepting zero or more repetitions of ``fragment``."""
        start = self._new_state()
        end = self._new_state()
        self._add(start, fragment.start, EPSILON)
        self._add(fragment.end, fragment.start, EPSILON)
        self._add(fragment.end, end, EPSILON)
        self._add(start, end, EPSILON)
        return Fragment(start, end)

    def render_table(self, fragment: Fragment) -> str:
        """The transition table with the start and final state of ``fragment``."""
        lines = ["", "ε-NFA Transition Table:"]
        lines.append(f"{'State':<5} {'a':<10} {'b':<10} {'ε':<10}")
        for state in range(self.state_count):
            row = self.transitions.get(state, {})
            cells = [f"s{state:<4d} "]
            for column in _COLUMNS:
                targets = row.get(column, [])
                if not targets:
                    cells.append(f"{'-':<10}")
                else:
                    cells.append(",".join(f"s{t}" for t in targets))
                    cells.append(" " * abs(10 - 2 * len(targets)))
            lines.append("".join(cells))
        lines.append("")
        lines.append(f"Start State: s{fragment.start}")
        lines.append(f"Final State: s{fragment.end}")
        return "\n".join(lines) + "\n"


def build_from_postfix(regex: str) -> tuple[EpsilonNFA, Fragment]:
    """Build the automaton for a postfix expression using ``a``, ``b``, ``|``, ``.`` and ``*``."""
    nfa = EpsilonNFA()
    stack: list[Fragment] = []

    def pop() -> Fragment:
        if not stack:
            raise ValueError(f"missing operand in {regex!r}")
        return stack.pop()

    for ch in regex:
        if ch in ("a", "b"):
            stack.append(nfa.symbol(ch))
        elif ch == "*":
            stack.append(nfa.star(pop()))
        elif ch == ".":
            second = pop()
            first = pop()
            stack.append(nfa.concat(first, second))
        elif ch == "|":
            second = pop()
            first = pop()
            stack.append(nfa.alternate(first, second))
        else:
            raise ValueError(f"Invalid character: {ch}")
    return nfa, pop()


def main(argv: list[str] | None = None) -> int:
    """Read a postfix regular expression and print its epsilon-NFA."""
    parser = argparse.ArgumentParser(prog="thompson", description="Build an epsilon-NFA.")
    parser.add_argument("regex", nargs="?", help="postfix regular expression (default: stdin)")
    args = parser.parse_args(argv)
    regex = args.regex
    if regex is None:
        print(
            "Enter postfix regular expression (a,b,|,.,* only) eg: ((a|b)*).a.b.b "
            "can be represented as ab|*abb  ",
            end="",
        )
        words = sys.stdin.read().split()
        regex = words[0] if words else ""
    try:
        nfa, fragment = build_from_postfix(regex)
    except (ValueError, OverflowError) as exc:
        print(exc)
        return 1
    print(nfa.render_table(fragment), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())