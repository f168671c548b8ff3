"""
Tests for answer normalization
"""
from hunt.core.normalizer import is_blank, matches_any, normalize_answer


def test_normalize_trims_and_lowercases():
    assert normalize_answer("  PaRiS \n") == "paris"


def test_normalize_keeps_inner_whitespace():
    """Only surrounding whitespace is removed"""
    assert normalize_answer(" No  Entry ") == "no  entry"


def test_blank_inputs():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(" \t ")
    assert not is_blank(" 0 ")


def test_matches_any_normalizes_both_sides():
    assert matches_any("keyboard", ["  KEYBOARD "])
    assert matches_any("TEN", ["10", "ten"])
    assert not matches_any("tenn", ["10", "ten"])
