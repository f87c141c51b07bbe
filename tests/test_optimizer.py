import io

import pytest

from compilekit.optimizer import OpType, Quad, main, optimize, optimize_quad, parse_quad


def test_parse_quad_fields():
    assert parse_quad("t1 = 4 + 5") == Quad("t1", "4", "+", "5")


@pytest.mark.parametrize("text", ["t1 = a * b", "x = 0 - y", "r = p / q"])
def test_quad_round_trip(text):
    assert str(parse_quad(text)) == text


@pytest.mark.parametrize("text", ["bad", "t1 = a +", "t1=a+b", "t1 = a + b extra"])
def test_parse_quad_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_quad(text)


def test_op_type_from_symbol():
    assert OpType.from_symbol("*") is OpType.MUL
    assert OpType.from_symbol("%") is OpType.NONE
    assert parse_quad("a = b / c").op_type is OpType.DIV


def test_constant_folding():
    assert optimize_quad(Quad("t1", "4", "+", "5")) == "t1 = 9"


def test_division_by_zero_folds_to_zero():
    assert optimize_quad(Quad("t", "7", "/", "0")) == "t = 0"


def test_unknown_operator_on_constants_folds_to_zero():
    assert optimize_quad(Quad("t", "4", "%", "5")) == "t = 0"


@pytest.mark.parametrize("quad", [Quad("t", "x", "+", "0"), Quad("t", "0", "+", "x")])
def test_adding_zero(quad):
    assert optimize_quad(quad) == f"{quad.result} = x"


@pytest.mark.parametrize("quad", [Quad("t", "y", "*", "1"), Quad("t", "1", "*", "y")])
def test_multiplying_by_one(quad):
    assert optimize_quad(quad) == f"{quad.result} = y"


@pytest.mark.parametrize("quad", [Quad("t", "z", "*", "2"), Quad("t", "2", "*", "z")])
def test_multiplying_by_two_becomes_addition(quad):
    assert optimize_quad(quad) == f"{quad.result} = z + z"


@pytest.mark.parametrize(
    "quad", [Quad("t", "a", "-", "b"), Quad("t", "a", "*", "3"), Quad("t", "0", "-", "x")]
)
def test_unoptimisable_quad_is_unchanged(quad):
    assert optimize_quad(quad) == str(quad)


def test_optimize_keeps_order():
    quads = [Quad("a", "1", "+", "1"), Quad("b", "c", "-", "d"), Quad("e", "f", "*", "1")]
    assert optimize(quads) == [optimize_quad(q) for q in quads]


def test_main_prints_both_listings(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nt1 = 4 + 5\nt2 = x * 1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    original, optimised = out.split("Optimized Code:")
    assert "t2 = x * 1\n" in original
    assert "t2 = x\n" in optimised


def test_main_rejects_missing_count(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("t1 = 4 + 5\n"))
    assert main([]) == 1