from sympy import Rational

from seed_alias.verification import digits_in_order, evaluate_alias, verify_aliases


def test_evaluate_alias_exact_integer() -> None:
    assert evaluate_alias("3/(5-2)") == (True, 1)
    assert evaluate_alias("((-3)+5)/2") == (True, 1)
    assert evaluate_alias("(-3)*(-2)") == (True, 6)
    assert evaluate_alias("352") == (True, 352)


def test_evaluate_alias_leading_zeros() -> None:
    assert evaluate_alias("05+1") == (True, 6)
    assert evaluate_alias("-05") == (True, -5)
    assert evaluate_alias("10/05") == (True, 2)
    assert evaluate_alias("0") == (True, 0)


def test_evaluate_alias_non_integer() -> None:
    assert evaluate_alias("7/2") == (False, Rational(7, 2))


def test_evaluate_alias_rejects_bad_input() -> None:
    assert evaluate_alias("5/0") == (False, None)
    assert evaluate_alias("3+") == (False, None)
    assert evaluate_alias("__import__('os')") == (False, None)
    assert evaluate_alias("x+1") == (False, None)


def test_digits_in_order() -> None:
    assert digits_in_order("((-3)+5)/2") == "352"


def test_verify_aliases_reports_mismatches() -> None:
    bad = verify_aliases({5: ["3+5"], 2: ["7/2"]})
    assert [(m.value, m.alias, m.reason) for m in bad] == [
        (5, "3+5", "wrong-value"),
        (2, "7/2", "not-an-integer"),
    ]


def test_verify_aliases_checks_seed_digits() -> None:
    bad = verify_aliases({8: ["3+5"], 1: ["352/352"], 10: ["3+5+2"]}, seed="352")
    assert [(m.value, m.reason) for m in bad] == [(8, "digits-mismatch")]


def test_all_zero_seed_fallback_is_exempt() -> None:
    from seed_alias import generate_aliases

    aliases = generate_aliases("00")
    assert aliases == {0: ["00", "0+0", "0-0"], 1: ["00/00"]}
    assert verify_aliases(aliases, "00") == []
    bad = verify_aliases(aliases)
    assert [(m.value, m.alias, m.reason) for m in bad] == [(1, "00/00", "not-an-integer")]
