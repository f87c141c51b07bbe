"""A symbol table built by scanning C-like source text."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator

from compilekit.lexer import KEYWORDS, _is_alpha, _is_word_char, _SourceReader

LIBRARY_FUNCTIONS = frozenset({"printf", "scanf", "main"})
MAX_SYMBOLS = 100
BASE_ADDRESS = 1000
WORD_SIZE = 4
_RULE = "-" * 77


@dataclass(frozen=True)
class SymbolEntry:
    name: str
    type: str
    kind: str
    scope: str
    address: int


class SymbolTable:
    """Symbols in insertion order, each given a simulated address."""

    def __init__(self, capacity: int = MAX_SYMBOLS, base_address: int = BASE_ADDRESS) -> None:
        self.capacity = capacity
        self.next_address = base_address
        self.entries: list[SymbolEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self.entries)

    def insert(self, name: str, type_: str, kind: str, scope: str) -> SymbolEntry | None:
        """Add a symbol unless it is already present; ``None`` once the table is full."""
        for entry in self.entries:
            if entry.name == name and entry.scope == scope and entry.kind == kind:
                return entry
        if len(self.entries) >= self.capacity:
            return None
        entry = SymbolEntry(name, type_, kind, scope, self.next_address)
        self.next_address += WORD_SIZE
        self.entries.append(entry)
        return entry

    def render(self) -> str:
        """The table as tab-separated text."""
        lines = ["", "Symbol Table:", _RULE, "Name\t\tType\t\tKind\t\tScope\t\tAddress", _RULE]
        lines += [
            f"{e.name}\t\t{e.type}\t\t{e.kind}\t\t{e.scope}\t\t{e.address}" for e in self.entries
        ]
        lines.append(_RULE)
        return "\n".join(lines) + "\n"


def _skip_string_literal(reader: _SourceReader) -> None:
    while ch := reader.getc():
        if ch == "\\":
            reader.getc()
        elif ch == '"':
            break


def build_symbol_table(text: str) -> SymbolTable:
    """Collect the variables and functions declared in ``text``."""
    table = SymbolTable()
    reader = _SourceReader(text)
    last_type = ""
    scope = "global"
    while ch := reader.getc():
        if ch == "#":
            reader.skip_until("\n")
            continue
        if ch == '"':
            _skip_string_literal(reader)
            continue
        reader.skip_blank_and_comments()
        if _is_alpha(ch) or ch == "_":
            word = reader.read_run(ch, _is_word_char)
            if word in KEYWORDS:
                last_type = word
            elif word not in LIBRARY_FUNCTIONS:
                reader.skip_blank_and_comments()
                nxt = reader.getc()
                if nxt == "(":
                    table.insert(word, last_type, "func", "global")
                    scope = "local"
                    reader.skip_until(")")
                else:
                    table.insert(word, last_type, "var", scope)
                    reader.ungetc(nxt)
        elif ch == "{":
            scope = "local"
        elif ch == "}":
            scope = "global"
    return table


def main(argv: list[str] | None = None) -> int:
    """Build and print the symbol table of a source file."""
    parser = argparse.ArgumentParser(prog="symbols", description="Build a symbol table.")
    parser.add_argument(
        "file", nargs="?", default="source_code.c", help="source file (default: source_code.c)"
    )
    args = parser.parse_args(argv)
    try:
        with open(args.file, encoding="utf-8") as stream:
            text = stream.read()
    except OSError:
        print("Error: Cannot open source file.")
        return 1
    print(build_symbol_table(text).render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())