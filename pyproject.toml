[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compilekit"
version = "0.1.0"
description = "Small compiler-construction tools: lexing, symbol tables, FIRST/FOLLOW and LL(1) tables, NFAs, DAGs, flow graphs, optimisation and code generation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "lexer",
    "ll1",
    "first-follow",
    "nfa",
    "thompson",
    "dag",
    "three-address-code",
    "control-flow-graph",
    "symbol-table",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compilekit-ll1 = "compilekit.ll1:main"
compilekit-first-follow = "compilekit.first_follow:main"
compilekit-token-nfa = "compilekit.token_nfa:main"
compilekit-dag-cse = "compilekit.dag_cse:main"
compilekit-expr-dag = "compilekit.expr_dag:main"
compilekit-thompson = "compilekit.thompson:main"
compilekit-tac-asm = "compilekit.tac_assembly:main"
compilekit-optimize = "compilekit.optimizer:main"
compilekit-flow-graph = "compilekit.flow_graph:main"
compilekit-lex = "compilekit.lexer:main"
compilekit-symbols = "compilekit.symbols:main"

[tool.hatch.build.targets.wheel]
packages = ["compilekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
