import math

import utils


def test_value_of_missing_is_zero():
    p = {"a": 3, "b": None, "c": math.nan, "d": "oops", "e": "4.5"}
    assert utils.value_of(p, "a") == 3
    assert utils.value_of(p, "b") == 0
    assert utils.value_of(p, "c") == 0
    assert utils.value_of(p, "d") == 0
    assert utils.value_of(p, "e") == 4.5
    assert utils.value_of(p, "zzz") == 0


def test_pct_str():
    assert utils.pct_str(28) == "28%"
    assert utils.pct_str(12.5) == "12.5%"
    assert utils.pct_str(3, signed=True) == "+3%"
    assert utils.pct_str(-4.2, signed=True) == "-4.2%"
    assert utils.pct_str(0, signed=True) == "0%"
    assert utils.pct_str(None) == "?"
    assert utils.pct_str(math.nan) == "?"


def test_display_name_falls_back_to_key():
    assert utils.display_name("age65") == "Ages 65+"
    assert utils.display_name("overall", "difference") == "All Adults"
    assert utils.display_name("income") == "income"


def test_sign_fill():
    assert utils.sign_fill(2.0) == "#4CAF50"
    assert utils.sign_fill(0.0) == "#4CAF50"
    assert utils.sign_fill(-0.1) == "#F44336"
    assert utils.sign_fill(-5, "share") == "#69b3a2"
