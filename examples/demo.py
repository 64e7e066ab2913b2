import sys, os
import argparse
import logging

# Adjust python path to include src
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from pyunify import Unifier, var, const, compound, print_term, print_outcome, validate, format_diagnostic


def build_cases():
    # (name, t1, t2, expect_success)
    return [
        ("var-const", var("X"), const("a"), True),
        ("const-var", const("b"), var("X"), True),
        ("const mismatch", const("a"), const("b"), False),
        ("compound match",
         compound("f", var("X"), const("b")),
         compound("f", const("a"), const("b")),
         True),
        ("functor mismatch", compound("f", var("X")), compound("g", var("X")), False),
        ("arity mismatch", compound("f", var("X")), compound("f", var("X"), var("Y")), False),
        ("occurs check", var("X"), compound("f", var("X")), False),
        ("deep cons",
         compound("cons", var("H"), var("T")),
         compound("cons", const("1"), compound("cons", const("2"), const("nil"))),
         True),
        ("var-compound", var("X"), compound("g", const("a"), var("Y")), True),
        ("two vars", var("X"), var("Y"), True),
        ("pair mismatch",
         compound("pair", const("a"), const("b")),
         compound("pair", const("a"), const("c")),
         False),
    ]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the unification demo cases.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every binding")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    unifier = Unifier()
    cases = build_cases()

    passed = 0
    for i, (name, t1, t2, expect_success) in enumerate(cases, start=1):
        diags = validate(t1) + validate(t2)
        for d in diags:
            print(format_diagnostic(d))
        if any(d.is_error for d in diags):
            print(f"Test {i} ({name}): skipped, malformed terms")
            continue
        result = unifier.unify(t1, t2)
        print(f"Test {i} ({name}): {print_term(t1)}  ~  {print_term(t2)} => {print_outcome(result)}")
        if (result is not None) == expect_success:
            passed += 1

    print(f"Summary: {passed}/{len(cases)} outcomes matched expectations.")
    return passed


if __name__ == "__main__":
    main()
