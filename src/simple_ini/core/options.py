# src/simple_ini/core/options.py
"""
Opções de leitura e escrita de uma ConfigStore.

`IniOptions` concentra os parâmetros repassados ao `configparser` na
criação do parser subjacente e na serialização do documento.

Opções disponíveis (v1):
    - encoding: codificação de arquivo usada em load e write
    - comment_prefixes: prefixos de linhas inteiras de comentário
    - inline_comment_prefixes: prefixos de comentário no fim de uma linha
      (`porta = 5 ; nota`); vazio por padrão, ou seja, o trecho faz parte
      do valor
    - space_around_delimiters: grava `chave = valor` (True) ou `chave=valor`
    - strict: rejeita seções/chaves duplicadas na leitura (parse failure)

Invariantes:
    - Opções são imutáveis (frozen)
    - Valores inválidos são rejeitados na construção
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidOptionError


def _check_prefixes(name: str, prefixes: Tuple[str, ...]) -> None:
    if isinstance(prefixes, str) or not all(isinstance(p, str) and p for p in prefixes):
        raise InvalidOptionError(f"{name} deve conter apenas strings não vazias: {prefixes!r}")


@dataclass(frozen=True)
class IniOptions:
    encoding: str = "utf-8"
    comment_prefixes: Tuple[str, ...] = ("#", ";")
    inline_comment_prefixes: Tuple[str, ...] = ()
    space_around_delimiters: bool = True
    strict: bool = False

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError):
            raise InvalidOptionError(f"Encoding desconhecido: {self.encoding!r}") from None
        _check_prefixes("comment_prefixes", self.comment_prefixes)
        _check_prefixes("inline_comment_prefixes", self.inline_comment_prefixes)
        for name in ("space_around_delimiters", "strict"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidOptionError(f"{name} deve ser booleano")


DEFAULT_OPTIONS = IniOptions()


__all__ = ["IniOptions", "DEFAULT_OPTIONS"]
