import io

import pytest

from compilekit.first_follow import first_sets, follow_sets, format_sets, main

WORKED = ["S=AbCd", "A=a", "A=Cf", "C=Ee", "E=h"]


def test_single_terminal():
    assert first_sets(["S=a"]) == {"S": ["a"]}


def test_epsilon_rule():
    assert first_sets(["S=#"]) == {"S": ["#"]}


def test_nullable_prefix_skipped():
    first = first_sets(["S=AB", "A=#", "B=b"])
    assert first["S"] == ["b"]
    assert first["A"] == ["#"]


def test_all_nullable_gives_epsilon():
    first = first_sets(["S=AB", "A=#", "B=#"])
    assert "#" in first["S"]


def test_worked_example():
    first = first_sets(WORKED)
    follow = follow_sets(WORKED, first)
    assert first["S"] == ["a", "h"]
    assert follow["C"] == ["d", "f"]
    assert follow["S"] == ["$"]
    assert first["E"] == ["h"]


def test_first_of_lhs_matches_first_symbol():
    first = first_sets(WORKED)
    assert first["C"] == first["E"]
    assert set(first["A"]) >= set(first["C"])


def test_follow_inherits_from_lhs_at_end():
    rules = ["S=aA", "A=b"]
    follow = follow_sets(rules, first_sets(rules))
    assert follow["A"] == follow["S"]
    assert follow["S"][0] == "$"


def test_follow_cycle_rejected():
    rules = ["A=xB", "B=yA"]
    with pytest.raises(ValueError):
        follow_sets(rules, first_sets(rules))


def test_left_recursion_rejected():
    with pytest.raises(ValueError):
        first_sets(["E=E+T", "E=T", "T=i"])


@pytest.mark.parametrize("rules", [[], ["AB"], ["S"]])
def test_invalid_productions(rules):
    with pytest.raises(ValueError):
        first_sets(rules)


def test_format_sets_exact():
    text = format_sets({"A": ["a"]}, {"A": ["$"]})
    assert text == "\nFirst sets:\nFIRST(A) = { a }\n\nFollow sets:\nFOLLOW(A) = { $ }\n"


def test_format_sets_sorted_and_skips_empty():
    text = format_sets({"B": ["b"], "A": ["a"], "C": []}, {"B": ["$"]})
    assert text.index("FIRST(A)") < text.index("FIRST(B)")
    assert "FIRST(C)" not in text
    assert "FOLLOW(A)" not in text


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nS=aA\nA=b\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "FIRST(S) = { a }" in out
    assert "FOLLOW(A) = { $ }" in out


def test_main_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\nS=a\n"))
    assert main([]) == 1