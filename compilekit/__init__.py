"""Small compiler-construction tools: lexing, symbol tables, grammar analysis, automata, DAGs and code generation."""

__version__ = "0.1.0"