# compilekit

A set of small, self-contained tools covering the classic phases of a
compiler. Each one is a plain Python module that can be used as a library
and also started from the command line. There are no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does | Command |
| --- | --- | --- |
| `compilekit.lexer` | Splits C-like source into keywords, identifiers, numbers and symbols, skipping whitespace and comments | `compilekit-lex` |
| `compilekit.symbols` | Builds a symbol table (name, type, kind, scope, simulated address) from C-like source | `compilekit-symbols` |
| `compilekit.token_nfa` | Classifies a single word as identifier, constant or operator, with the state transitions taken | `compilekit-token-nfa` |
| `compilekit.first_follow` | Computes FIRST and FOLLOW sets of a grammar given as `A=alpha` rules, recursively | `compilekit-first-follow` |
| `compilekit.ll1` | Computes FIRST/FOLLOW sets and the LL(1) parse table of a grammar | `compilekit-ll1` |
| `compilekit.thompson` | Builds an epsilon-NFA from a postfix regular expression over `a`, `b` with `\|`, `.` and `*` | `compilekit-thompson` |
| `compilekit.dag_cse` | A node pool that shares equal variables and operations, demonstrated on `a*b + (a*b)` | `compilekit-dag-cse` |
| `compilekit.expr_dag` | Converts an infix expression to postfix and builds a graph that shares identical operator nodes | `compilekit-expr-dag` |
| `compilekit.optimizer` | Constant folding and algebraic simplification of quadruples `result = arg1 op arg2` | `compilekit-optimize` |
| `compilekit.flow_graph` | Finds leaders, basic blocks and edges of a three-address program | `compilekit-flow-graph` |
| `compilekit.tac_assembly` | Translates three-address code with jumps into simple 8086-style assembly | `compilekit-tac-asm` |

In grammars, upper-case letters are nonterminals, every other character is
a terminal, and `#` stands for the empty string. `$` is the end marker in
FOLLOW sets and in the parse table.

## Library use

Classifying a token:

```python
from compilekit.token_nfa import TokenKind, classify

trace = classify("count_1")
assert trace.kind is TokenKind.IDENTIFIER
print(trace.render())
```

Building an LL(1) table (conflicting entries in a cell are joined by ` | `):

```python
from compilekit.ll1 import LL1Grammar, parse_production

lines = ["E=TR", "R=+TR", "R=#", "T=i"]
grammar = LL1Grammar([parse_production(line) for line in lines])
print(grammar.first_of("TR"))
print(grammar.render_first_sets())
print(grammar.render_follow_sets())
print(grammar.render_parse_table())
```

`LL1Grammar` accepts at most 20 productions, 10 nonterminals and 20
terminals, and raises `ValueError` for a nonterminal without a production.

FIRST and FOLLOW sets on their own:

```python
from compilekit.first_follow import first_sets, follow_sets, format_sets

productions = ["S=AbCd", "A=a", "A=Cf", "C=Ee", "E=h"]
first = first_sets(productions)
follow = follow_sets(productions, first)
print(format_sets(first, follow))
```

These functions raise `ValueError` on left recursion or a cyclic FOLLOW
dependency.

Thompson construction:

```python
from compilekit.thompson import build_from_postfix

nfa, fragment = build_from_postfix("ab|*a.b.b.")
print(nfa.render_table(fragment))
```

The automaton holds at most 100 states.

Sharing common subexpressions:

```python
from compilekit.dag_cse import Dag, OpType

dag = Dag()
a, b = dag.var("a"), dag.var("b")
product = dag.op(OpType.MUL, a, b)
assert dag.op(OpType.MUL, a, b) is product
dag.op(OpType.ADD, product, product)
print(dag.summary())
```

Expression DAG:

```python
from compilekit.expr_dag import infix_to_postfix, build_dag, render_dag

postfix = infix_to_postfix("a*b + a*b")
print(render_dag(build_dag(postfix)))
```

Three-address code:

```python
from compilekit.optimizer import parse_quad, optimize
from compilekit.tac_assembly import translate
from compilekit.flow_graph import build_blocks, render_flow_graph

quads = [parse_quad("t1 = 4 + 5"), parse_quad("t2 = x * 2")]
print(optimize(quads))  # ['t1 = 9', 't2 = x + x']

print(translate(["t1 = a + b", "if t1 > 5 goto 20", "goto 10"]))

program = ["i = 0", "L1: if i > 10 goto L2", "i = i + 1", "goto L1", "L2: x = i"]
blocks = build_blocks(program)
print(render_flow_graph(program))
```

Lexing and symbol tables:

```python
from compilekit.lexer import tokenize, render_tokens
from compilekit.symbols import build_symbol_table

source = "int main() { int a = 10; return a; }"
print(render_tokens(tokenize(source)))
print(build_symbol_table(source).render())
```

Symbol addresses start at 1000 and advance by 4; a table holds at most 100
entries.

## Command line

Every module has a command, listed in the table above.

- `compilekit-lex [FILE]` and `compilekit-symbols [FILE]` read `FILE`,
  `source_code.c` by default.
- `compilekit-flow-graph [FILE]` reads three-address code from `FILE`,
  `input.txt` by default.
- `compilekit-ll1 [FILE]` reads the number of productions on the first line,
  then one `A=alpha` rule per line, from `FILE` or standard input.
- `compilekit-first-follow [FILE]` and `compilekit-optimize [FILE]` read a
  count followed by that many rules or quadruples, from `FILE` or standard
  input.
- `compilekit-tac-asm [FILE]` reads statements up to the first blank line,
  from `FILE` or standard input.
- `compilekit-token-nfa [TOKEN]`, `compilekit-thompson [REGEX]` and
  `compilekit-expr-dag [EXPRESSION]` take their input as an argument, or read
  it from standard input.
- `compilekit-dag-cse` takes no input and runs the `a*b + (a*b)` demonstration.

For example:

```
compilekit-token-nfa 3.14
compilekit-thompson "ab|*a.b.b."
compilekit-expr-dag "a*b + a*b"
```

## Limits

- `compilekit.ll1` builds the parse table but does not parse input strings
  with it.
- `compilekit.tac_assembly` handles only `+`, `-` and `*` in assignments and
  `==`, `>` and `<` in conditional jumps; other statements produce no output.
- `compilekit.thompson` only knows the symbols `a` and `b`.
- `compilekit.dag_cse` only has multiplication and addition nodes.