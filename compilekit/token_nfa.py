"""A small automaton that classifies a word as identifier, constant or operator."""

from __future__ import annotations

import argparse
import string
import sys
from dataclasses import dataclass, field
from enum import Enum

OPERATORS = ("+", "-", "*", "/", "%", "=", "==", "!=", "<", "<=", ">", ">=", "&&", "||", "!")
REJECT = "REJECT (Invalid Token)"


class TokenKind(Enum):
    IDENTIFIER = "Identifier"
    CONSTANT = "Constant"
    OPERATOR = "Operator"
    INVALID = "Invalid"


@dataclass
class TokenTrace:
    """The states the automaton passed through while reading a word."""

    kind: TokenKind
    final_state: str
    transitions: list[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.kind is not TokenKind.INVALID

    def render(self) -> str:
        lines = ["Initial State: q0"]
        lines += [f"Transition: {t}" for t in self.transitions]
        lines.append(f"Final State: {self.final_state}")
        return "\n".join(lines) + "\n"


def _is_letter(ch: str) -> bool:
    return ch in string.ascii_letters


def _is_digit(ch: str) -> bool:
    return ch in string.digits


def _classify_identifier(text: str) -> TokenTrace:
    steps = [f"q0 -> q1 (Letter/_ found: {text[0]})"]
    rest = text[1:]
    consumed = 0
    for ch in rest:
        if not (_is_letter(ch) or _is_digit(ch) or ch == "_"):
            break
        steps.append(f"q1 -> q2 (Letter/Digit/_ found: {ch})")
        consumed += 1
    if consumed == len(rest):
        return TokenTrace(TokenKind.IDENTIFIER, "q2 (ACCEPT - Identifier)", steps)
    return TokenTrace(TokenKind.INVALID, REJECT, steps)


def _classify_constant(text: str) -> TokenTrace:
    steps = [f"q0 -> q3 (Digit found: {text[0]})"]
    has_decimal = False
    consumed = 1
    for ch in text[1:]:
        if _is_digit(ch):
            steps.append(f"q3 -> q4 (Digit found: {ch})")
        elif ch == "." and not has_decimal:
            has_decimal = True
            steps.append("q3 -> q5 (Decimal point found)")
        else:
            break
        consumed += 1
    if consumed == len(text) and not (has_decimal and text.endswith(".")):
        return TokenTrace(TokenKind.CONSTANT, "q4 (ACCEPT - Constant)", steps)
    return TokenTrace(TokenKind.INVALID, REJECT, steps)


def classify(text: str) -> TokenTrace:
    """Run the automaton over ``text`` and report what it recognised."""
    if text and (_is_letter(text[0]) or text[0] == "_"):
        return _classify_identifier(text)
    if text and _is_digit(text[0]):
        return _classify_constant(text)
    if text in OPERATORS:
        return TokenTrace(
            TokenKind.OPERATOR,
            "q6 (ACCEPT - Operator)",
            [f"q0 -> q5 (Operator found: {text})"],
        )
    return TokenTrace(TokenKind.INVALID, REJECT)


def main(argv: list[str] | None = None) -> int:
    """Classify one word, given as an argument or read from standard input."""
    parser = argparse.ArgumentParser(prog="token-nfa", description="Classify a token.")
    parser.add_argument("token", nargs="?", help="word to classify (default: read from stdin)")
    args = parser.parse_args(argv)
    token = args.token
    if token is None:
        print("Enter a string: ", end="")
        words = sys.stdin.read().split()
        token = words[0] if words else ""
    print(classify(token).render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())