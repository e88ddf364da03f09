# src/simple_ini/core/coercion.py
"""
Coerção canônica de valores INI.

Valores INI são sempre armazenados como texto. Este módulo implementa a
conversão sob demanda desse texto para os tipos expostos pelos acessores
tipados da ConfigStore, e a conversão inversa (valor → texto) usada em
`ConfigStore.set`.

Política de coerção (v1):
    - boolean → true/false, yes/no, on/off, y/n, t/f (case-insensitive)
    - inteiros → decimal com sinal, hexadecimal (`0x`) ou binário (`0b`),
      com verificação de faixa por família (byte, short, int, long)
    - float → precisão simples (32 bits), estouro de faixa é erro
    - double → `float` nativo do Python
    - string → texto armazenado, sem alteração

Princípios fundamentais:
    - Conversões são funções puras, sem estado
    - Falhas de conversão levantam `ValueError` com mensagem objetiva
    - Nenhuma heurística além da política declarada

Limites explícitos:
    - Não conhece seções, chaves ou endereçamento
    - Não trata valores ausentes (responsabilidade da ConfigStore)
"""

from __future__ import annotations

import struct
from typing import Callable, Dict, Tuple, Union


ValueLike = Union[str, int, float, bool]

_TRUE_STRINGS = frozenset({"true", "yes", "on", "y", "t"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "n", "f"})

# faixas inclusivas (mínimo, máximo) por família inteira
INTEGER_RANGES: Dict[str, Tuple[int, int]] = {
    "byte": (-(2 ** 7), 2 ** 7 - 1),
    "short": (-(2 ** 15), 2 ** 15 - 1),
    "int": (-(2 ** 31), 2 ** 31 - 1),
    "long": (-(2 ** 63), 2 ** 63 - 1),
}


def to_boolean(text: str) -> bool:
    normalized = text.strip().lower()
    if normalized in _TRUE_STRINGS:
        return True
    if normalized in _FALSE_STRINGS:
        return False
    raise ValueError(f"Cannot convert {text!r} to boolean")


def _parse_integer(text: str) -> int:
    """
    Converte texto em inteiro aceitando prefixos `0x` e `0b`.

    O sinal, quando presente, precede o prefixo (ex.: `-0x1F`).
    Separadores `_` não são aceitos, ao contrário de `int()`.
    """
    raw = text.strip()
    if not raw or "_" in raw:
        raise ValueError(f"Cannot convert {text!r} to integer")

    sign = 1
    body = raw
    if body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]

    lowered = body.lower()
    if lowered.startswith("0x"):
        base, digits = 16, body[2:]
    elif lowered.startswith("0b"):
        base, digits = 2, body[2:]
    else:
        base, digits = 10, body

    if not digits or digits[0] in "+-" or digits[0].isspace():
        raise ValueError(f"Cannot convert {text!r} to integer")

    try:
        return sign * int(digits, base)
    except ValueError:
        raise ValueError(f"Cannot convert {text!r} to integer") from None


def _integer_family(name: str) -> Callable[[str], int]:
    low, high = INTEGER_RANGES[name]

    def convert(text: str) -> int:
        value = _parse_integer(text)
        if not low <= value <= high:
            raise ValueError(f"Value {text!r} is out of range for {name} [{low}, {high}]")
        return value

    convert.__name__ = f"to_{name}"
    return convert


to_byte = _integer_family("byte")
to_short = _integer_family("short")
to_int = _integer_family("int")
to_long = _integer_family("long")


def to_double(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise ValueError(f"Cannot convert {text!r} to double") from None


def to_float(text: str) -> float:
    """Converte para precisão simples; valores fora da faixa de 32 bits falham."""
    value = to_double(text)
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        raise ValueError(f"Value {text!r} is out of range for float") from None


def to_string(text: str) -> str:
    return text


def to_text(value: ValueLike) -> str:
    """
    Converte um valor aceito por `ConfigStore.set` em sua representação textual.

    Booleanos são verificados antes de inteiros (`bool` é subclasse de `int`)
    e gravados em minúsculas, para que `to_boolean` os leia de volta.

    Raises:
        TypeError: Se o valor não for str, int, float ou bool.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    raise TypeError(
        f"Unsupported value type for INI storage: {type(value).__name__} "
        "(expected str, int, float or bool)"
    )


CONVERTERS: Dict[str, Callable[[str], object]] = {
    "boolean": to_boolean,
    "string": to_string,
    "byte": to_byte,
    "short": to_short,
    "int": to_int,
    "long": to_long,
    "float": to_float,
    "double": to_double,
}


__all__ = [
    "INTEGER_RANGES",
    "CONVERTERS",
    "to_boolean",
    "to_string",
    "to_byte",
    "to_short",
    "to_int",
    "to_long",
    "to_float",
    "to_double",
    "to_text",
]
