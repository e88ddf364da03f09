# tests/core/test_coercion.py
"""
Testes das funções puras de coerção (texto ↔ tipos).

Política validada:
    - boolean: true/false, yes/no, on/off, y/n, t/f
    - inteiros: decimal, `0x`, `0b`, com verificação de faixa
    - float: precisão simples; double: float nativo
    - to_text: representação textual usada por `ConfigStore.set`
"""

import pytest

from simple_ini.core import coercion


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+7", 7),
        ("0x1F", 31),
        ("-0x10", -16),
        ("0b101", 5),
        (" 12 ", 12),
    ],
)
def test_to_int_accepts_supported_notations(text, expected):
    assert coercion.to_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1.0", "1_000", "0x", "--1", "- 1", "0xZZ"])
def test_to_int_rejects_invalid_text(text):
    with pytest.raises(ValueError):
        coercion.to_int(text)


def test_integer_ranges_follow_fixed_width_families():
    assert coercion.INTEGER_RANGES["byte"] == (-128, 127)
    assert coercion.INTEGER_RANGES["short"] == (-32768, 32767)
    assert coercion.INTEGER_RANGES["int"] == (-2147483648, 2147483647)
    assert coercion.INTEGER_RANGES["long"] == (-9223372036854775808, 9223372036854775807)

    assert coercion.to_byte("0x7F") == 127
    with pytest.raises(ValueError):
        coercion.to_byte("0x80")


def test_to_boolean_rejects_numbers_and_free_text():
    for text in ["1", "0", "maybe", ""]:
        with pytest.raises(ValueError):
            coercion.to_boolean(text)


def test_to_double_and_to_float():
    assert coercion.to_double("1e40") == 1e40
    assert coercion.to_double("-2.5") == -2.5
    assert coercion.to_float("-2.5") == -2.5
    with pytest.raises(ValueError):
        coercion.to_float("1e40")
    with pytest.raises(ValueError):
        coercion.to_double("x")


def test_to_text():
    assert coercion.to_text(True) == "true"
    assert coercion.to_text(False) == "false"
    assert coercion.to_text(10) == "10"
    assert coercion.to_text(1.0) == "1.0"
    assert coercion.to_text("as is") == "as is"
    with pytest.raises(TypeError):
        coercion.to_text(b"bytes")


def test_text_round_trips_through_converters():
    assert coercion.to_boolean(coercion.to_text(True)) is True
    assert coercion.to_long(coercion.to_text(2 ** 62)) == 2 ** 62
    assert coercion.to_double(coercion.to_text(0.1)) == 0.1
