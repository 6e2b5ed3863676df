import pytest

from drillings.lessons.errors import (
    CreationError,
    NegativeError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    ZeroError,
    generate_nametag_text,
    parse_pos_nonzero,
    spend_tokens,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_total_cost_empty_quantity():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_spend_tokens_leaves_remainder():
    assert spend_tokens(100, "8") == 59


def test_spend_tokens_refuses_too_many():
    with pytest.raises(ValueError) as info:
        spend_tokens(100, "20")
    assert str(info.value) == "You can't afford that many!"


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(NegativeError):
        PositiveNonzeroInteger(-10)
    with pytest.raises(ZeroError):
        PositiveNonzeroInteger(0)


def test_creation_error_messages():
    assert str(NegativeError()) == "number is negative"
    assert str(ZeroError()) == "number is zero"
    assert issubclass(NegativeError, CreationError)


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not isinstance(info.value.error, CreationError)
    assert str(info.value.error) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.error, NegativeError)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert isinstance(info.value.error, ZeroError)


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)


def test_parse_too_large():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("99999999999999999999")
    assert str(info.value.error) == "number too large to fit in target type"