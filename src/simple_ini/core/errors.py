# src/simple_ini/core/errors.py
"""
Exceções canônicas do simple-ini.

Este módulo define a hierarquia oficial de exceções levantadas pela
ConfigStore durante endereçamento, coerção de valores e construção
estrita a partir de arquivos.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de endereçamento falham antes de qualquer efeito colateral
    - Falhas de I/O em load/write NÃO são exceções (ver `core.types`)

Invariantes:
    - Todas as exceções do pacote herdam de `IniError`
    - Cada exceção também herda da exceção builtin mais próxima
      (ValueError, KeyError, FileNotFoundError), para captura idiomática

Limites explícitos:
    - Não realiza fallback ou recovery
"""

from __future__ import annotations

from typing import Optional


class IniError(Exception):
    """Exceção base para todos os erros do simple-ini."""


class InvalidAddressError(IniError, ValueError):
    """
    Exceção levantada quando uma seção ou chave não pode ser endereçada.

    Internamente cada valor é endereçado pelo caminho `secao.chave`; por
    isso o delimitador `.` é proibido em ambos os componentes. Nomes de
    seção vazios também são rejeitados, pois não possuem representação
    textual (`[]` não é um cabeçalho válido).

    Em `set` (e `add_section`) também são rejeitados nomes que não
    sobreviveriam à escrita: chaves vazias, com `=` ou `:`, iniciadas por
    `[` ou por um prefixo de comentário, com espaços nas bordas, e
    quebras de linha em seções ou chaves.

    Decisões arquiteturais:
        - A validação ocorre na fronteira de cada acessor
        - Nenhum estado é alterado quando esta exceção é levantada

    Limites explícitos:
        - Não tenta escapar ou normalizar nomes inválidos
    """


class CoercionError(IniError, ValueError):
    """
    Exceção levantada quando o texto armazenado não pode ser convertido
    para o tipo solicitado por um acessor tipado.

    Atributos:
        - section: seção consultada
        - key: chave consultada
        - value: texto armazenado (None quando ausente)
        - target: nome do tipo solicitado (ex.: "int", "float")
    """

    def __init__(
        self,
        message: str,
        *,
        section: Optional[str] = None,
        key: Optional[str] = None,
        value: Optional[str] = None,
        target: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.section = section
        self.key = key
        self.value = value
        self.target = target


class MissingKeyError(CoercionError, KeyError):
    """
    Exceção levantada por acessores numéricos quando não há valor para
    o par (seção, chave).

    Decisões arquiteturais:
        - Acessores de string e booleano retornam None para chaves ausentes
        - Acessores numéricos falham, pois texto ausente não é um número
        - Por isso esta exceção é uma especialização de `CoercionError`
    """

    def __str__(self) -> str:
        # KeyError.__str__ aplica repr() à mensagem
        return str(self.args[0]) if self.args else ""


class InvalidValueError(IniError, ValueError):
    """
    Levantada por `set` quando o texto do valor não sobreviveria à escrita
    com as opções atuais (ex.: trecho que seria lido como comentário inline).
    """


class InvalidOptionError(IniError, ValueError):
    """Levantada quando `IniOptions` recebe um valor inválido."""


class IniFileNotFoundError(IniError, FileNotFoundError):
    """Levantada por `ConfigStore.from_file` quando o arquivo não existe."""


class IniParseError(IniError):
    """
    Levantada por `ConfigStore.from_file` quando o arquivo existe, mas
    seu conteúdo não é INI válido.

    A mensagem inclui o caminho e a descrição da causa original.
    """

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "IniError",
    "InvalidAddressError",
    "CoercionError",
    "MissingKeyError",
    "InvalidValueError",
    "InvalidOptionError",
    "IniFileNotFoundError",
    "IniParseError",
]
