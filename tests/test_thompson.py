import pytest

from compilekit.thompson import EPSILON, EpsilonNFA, Fragment, build_from_postfix, main


def test_symbol_fragment():
    nfa = EpsilonNFA()
    frag = nfa.symbol("a")
    assert nfa.transitions[frag.start]["a"] == [frag.end]
    assert nfa.transitions[frag.start]["b"] == []
    assert nfa.state_count == 2


def test_symbol_rejects_other_characters():
    with pytest.raises(ValueError):
        EpsilonNFA().symbol("c")


def test_concat_links_fragments_with_epsilon():
    nfa = EpsilonNFA()
    a = nfa.symbol("a")
    b = nfa.symbol("b")
    joined = nfa.concat(a, b)
    assert joined == Fragment(a.start, b.end)
    assert nfa.transitions[a.end][EPSILON] == [b.start]


def test_alternate_wires_both_branches():
    nfa = EpsilonNFA()
    a = nfa.symbol("a")
    b = nfa.symbol("b")
    alt = nfa.alternate(a, b)
    assert nfa.transitions[alt.start][EPSILON] == [a.start, b.start]
    assert nfa.transitions[a.end][EPSILON] == [alt.end]
    assert nfa.transitions[b.end][EPSILON] == [alt.end]
    assert nfa.state_count == 6


def test_star_loops_and_skips():
    nfa = EpsilonNFA()
    a = nfa.symbol("a")
    loop = nfa.star(a)
    assert nfa.transitions[loop.start][EPSILON] == [a.start, loop.end]
    assert nfa.transitions[a.end][EPSILON] == [a.start, loop.end]


def test_build_from_postfix_matches_manual_construction():
    nfa, frag = build_from_postfix("ab|*a.")
    manual = EpsilonNFA()
    inner = manual.alternate(manual.symbol("a"), manual.symbol("b"))
    expected = manual.concat(manual.star(inner), manual.symbol("a"))
    assert frag == expected
    assert nfa.transitions == manual.transitions
    assert nfa.state_count == manual.state_count


@pytest.mark.parametrize("regex", ["", "a.", "|", "*", "ac"])
def test_build_from_postfix_errors(regex):
    with pytest.raises(ValueError):
        build_from_postfix(regex)


def test_state_limit():
    with pytest.raises(OverflowError):
        build_from_postfix("a" * 51)


def test_render_table_has_row_per_state():
    nfa, frag = build_from_postfix("ab.")
    lines = nfa.render_table(frag).splitlines()
    rows = [line for line in lines if line.startswith("s")]
    assert len(rows) == nfa.state_count
    assert lines[-2] == f"Start State: s{frag.start}"
    assert lines[-1] == f"Final State: s{frag.end}"


def test_render_table_row_contents():
    nfa, frag = build_from_postfix("a")
    lines = nfa.render_table(frag).splitlines()
    assert lines[1] == "ε-NFA Transition Table:"
    row0 = next(line for line in lines if line.startswith("s0"))
    assert row0.startswith("s0    s1")
    assert row0.count("-") == 2


def test_main_prints_table(capsys):
    assert main(["a"]) == 0
    out = capsys.readouterr().out
    assert "Start State: s0" in out
    assert "Final State: s1" in out


def test_main_reports_invalid_character(capsys):
    assert main(["x"]) == 1
    assert "Invalid character: x" in capsys.readouterr().out