from pyunify import Diagnostic, Position, Related, Severity, var, const, compound, validate, format_diagnostic


def codes(diags):
    return {d.code for d in diags}


def test_validate_clean_term_has_no_diagnostics():
    assert validate(compound("f", var("X"), var("_Tail"), const("a"))) == []


def test_validate_variable_names():
    diags = validate(compound("p", var("x"), var("")))
    assert codes(diags) == {"W101", "E100"}
    w101 = next(d for d in diags if d.code == "W101")
    assert w101.severity is Severity.WARNING
    assert w101.position == Position((0,))


def test_validate_empty_constant_warning():
    diags = validate(compound("p", const("")))
    assert "W110" in codes(diags)


def test_validate_empty_functor():
    diags = validate(compound("", const("a")))
    assert "E120" in codes(diags)


def test_validate_functor_arity_consistency():
    term = compound("f", const("a"), compound("f", const("b")))
    diags = validate(term)
    assert codes(diags) == {"W121"}
    d = diags[0]
    assert d.position == Position((1,))
    assert d.subterm == compound("f", const("b"))
    assert d.related[0].position == Position()
    assert d.related[0].subterm == term
    assert not d.is_error
    assert format_diagnostic(d) == "\n".join([
        "WARNING: W121 at 1 [f(b)]: functor 'f' used with arity 1, previously 2",
        "  note at <root> [f(a, f(b))]: 'f/2' first used here",
    ])


def test_diagnostic_reports_offending_subterm():
    diags = validate(compound("p", const("a"), var("")))
    assert len(diags) == 1
    d = diags[0]
    assert d.is_error
    assert d.subterm == var("")
    assert format_diagnostic(d) == "ERROR: E100 at 1 []: variable name must be non-empty"


def test_format_diagnostic_without_location():
    d = Diagnostic(code="E900", message="detached").with_related(Related("see root", Position()))
    assert d.related == (Related("see root", Position()),)
    assert format_diagnostic(d) == "ERROR: E900: detached\n  note at <root>: see root"
