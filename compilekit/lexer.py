"""A character-level lexer for C-like source text."""

from __future__ import annotations

import argparse
import string
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

KEYWORDS = frozenset(
    {
        "int", "return", "if", "else", "while", "for", "do", "break", "continue",
        "char", "float", "double", "void",
    }
)
_SPACE = " \t\n\v\f\r"


def _is_alpha(ch: str) -> bool:
    return ch != "" and ch in string.ascii_letters


def _is_digit(ch: str) -> bool:
    return ch != "" and ch in string.digits


def _is_word_char(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch) or ch == "_"


class _SourceReader:
    """Reads a string one character at a time with push-back of what was read."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def getc(self) -> str:
        if self.pos >= len(self.text):
            return ""
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def ungetc(self, ch: str) -> None:
        if ch:
            self.pos -= 1

    def skip_until(self, stop: str) -> None:
        while (ch := self.getc()) and ch != stop:
            pass

    def skip_blank_and_comments(self) -> None:
        while ch := self.getc():
            if ch in _SPACE:
                continue
            if ch != "/":
                self.ungetc(ch)
                return
            nxt = self.getc()
            if nxt == "/":
                self.skip_until("\n")
            elif nxt == "*":
                while inner := self.getc():
                    if inner == "*" and self.getc() == "/":
                        break
            else:
                self.ungetc(nxt)
                self.ungetc(ch)
                return

    def read_run(self, first: str, accept: Callable[[str], bool]) -> str:
        chars = []
        ch = first
        while accept(ch):
            chars.append(ch)
            ch = self.getc()
        self.ungetc(ch)
        return "".join(chars)


class TokenKind(Enum):
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    SYMBOL = "Operator/Symbol"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.text}"


def tokenize(text: str) -> list[Token]:
    """Split source text into keywords, identifiers, numbers and symbols."""
    reader = _SourceReader(text)
    tokens: list[Token] = []
    while ch := reader.getc():
        reader.skip_blank_and_comments()
        if _is_alpha(ch) or ch == "_":
            word = reader.read_run(ch, _is_word_char)
            kind = TokenKind.KEYWORD if word in KEYWORDS else TokenKind.IDENTIFIER
            tokens.append(Token(kind, word))
        elif _is_digit(ch):
            number = reader.read_run(ch, lambda c: _is_digit(c) or c == ".")
            tokens.append(Token(TokenKind.NUMBER, number))
        elif ch in string.punctuation:
            tokens.append(Token(TokenKind.SYMBOL, ch))
    return tokens


def render_tokens(tokens: Iterable[Token]) -> str:
    """One line per token followed by the token count."""
    items = list(tokens)
    body = "".join(f"{token}\n" for token in items)
    return f"{body}\nTotal number of tokens: {len(items)}\n"


def main(argv: list[str] | None = None) -> int:
    """Tokenise a source file and print the tokens."""
    parser = argparse.ArgumentParser(prog="lexer", description="List the tokens of a source file.")
    parser.add_argument(
        "file", nargs="?", default="source_code.c", help="source file (default: source_code.c)"
    )
    args = parser.parse_args(argv)
    try:
        with open(args.file, encoding="utf-8") as stream:
            text = stream.read()
    except OSError:
        print("Error: Could not open file.")
        return 1
    print("Lexical Analysis Output:")
    print(render_tokens(tokenize(text)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())