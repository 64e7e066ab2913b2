import pytest

from pyunify import Variable, Constant, Compound, ContractViolation, Position, var, const, compound


def test_classification_predicates_are_exclusive():
    terms = [var("X"), const("a"), compound("f", var("X"), const("a")), compound("nil")]
    for t in terms:
        flags = [t.is_variable(), t.is_constant(), t.is_compound()]
        assert flags.count(True) == 1
    assert var("X").is_variable()
    assert const("a").is_constant()
    assert compound("f").is_compound()


def test_compound_functor_arity_and_indexed_access():
    t = compound("f", var("X"), const("b"))
    assert t.functor == "f"
    assert t.arity == 2
    assert t.arg(0) == Variable("X")
    assert t.arg(1) == Constant("b")


def test_compound_out_of_range_index_is_contract_violation():
    t = compound("f", var("X"))
    with pytest.raises(ContractViolation):
        t.arg(1)
    with pytest.raises(ContractViolation):
        t.arg(-1)
    with pytest.raises(ContractViolation):
        compound("nil").arg(0)
    # still an IndexError for callers catching the builtin
    with pytest.raises(IndexError):
        t.arg(5)


def test_compound_accepts_list_and_freezes_it():
    args = [var("X"), const("b")]
    t = Compound("f", args)
    args.append(const("c"))
    assert t.args == (Variable("X"), Constant("b"))
    assert t == compound("f", var("X"), const("b"))


def test_clone_is_equal_but_independent():
    inner = compound("g", const("a"), var("Y"))
    t = compound("f", var("X"), inner)
    c = t.clone()
    assert c == t
    assert c is not t
    assert c.arg(1) is not inner
    assert c.arg(1).arg(0) is not inner.arg(0)


def test_terms_are_immutable():
    t = compound("f", var("X"))
    with pytest.raises(AttributeError):
        t.functor = "g"
    with pytest.raises(AttributeError):
        var("X").name = "Y"


def test_variable_and_constant_with_same_text_differ():
    assert Variable("a") != Constant("a")
    assert compound("f", var("a")) != compound("f", const("a"))


def test_position_path_and_rendering():
    root = Position()
    assert str(root) == "<root>"
    assert root.depth == 0
    p = root.child(1).child(0)
    assert p.path == (1, 0)
    assert p.depth == 2
    assert str(p) == "1.0"
    with pytest.raises(ValueError):
        Position((0, -1))
