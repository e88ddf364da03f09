# src/simple_ini/core/io.py
"""
Leitura e escrita do documento INI subjacente.

Funções de baixo nível usadas pela ConfigStore. Criam o `ConfigParser`
com a configuração canônica do simple-ini e movem o documento entre
disco e memória. Arquivos são sempre abertos via context manager, de modo
que o handle é fechado (e descarregado) em qualquer caminho de saída.

Configuração canônica do parser:
    - sem interpolação (`%` e `$` são texto literal)
    - nomes de chave preservam a caixa original (`optionxform = str`)
    - sem seção DEFAULT implícita: `[DEFAULT]` é uma seção comum
    - linhas `chave` sem delimitador são erro de sintaxe
    - linhas em branco dentro de um valor multilinha fazem parte do valor
    - comentários inline só são reconhecidos com
      `IniOptions.inline_comment_prefixes`; por padrão `porta = 5 ; nota`
      tem o valor `5 ; nota`

Estas funções propagam exceções; a conversão em LoadResult/WriteResult
é responsabilidade da ConfigStore.
"""

from __future__ import annotations

import configparser
from pathlib import Path
from typing import Optional, TextIO

from .options import DEFAULT_OPTIONS, IniOptions

# O cabeçalho de seção exige ao menos um caractere, então nenhuma seção
# lida de arquivo pode colidir com este nome.
NO_DEFAULT_SECTION = ""

PARSE_ERRORS = (configparser.Error, UnicodeDecodeError, OSError)
WRITE_ERRORS = (OSError, UnicodeEncodeError)


def new_parser(options: Optional[IniOptions] = None) -> configparser.ConfigParser:
    options = options or DEFAULT_OPTIONS
    parser = configparser.ConfigParser(
        interpolation=None,
        comment_prefixes=options.comment_prefixes,
        inline_comment_prefixes=options.inline_comment_prefixes or None,
        strict=options.strict,
        empty_lines_in_values=True,
        default_section=NO_DEFAULT_SECTION,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def parse_file(path: Path, options: Optional[IniOptions] = None) -> configparser.ConfigParser:
    """
    Interpreta o arquivo em `path` como INI.

    Raises:
        configparser.Error: Sintaxe inválida (ou duplicatas, com `strict`).
        UnicodeDecodeError: Conteúdo incompatível com `options.encoding`.
        OSError: Falha de leitura (ex.: o caminho é um diretório).
    """
    options = options or DEFAULT_OPTIONS
    parser = new_parser(options)
    with path.open("r", encoding=options.encoding) as fh:
        parser.read_file(fh, source=str(path))
    return parser


def dump(parser: configparser.ConfigParser, fh: TextIO, options: Optional[IniOptions] = None) -> None:
    options = options or DEFAULT_OPTIONS
    parser.write(fh, space_around_delimiters=options.space_around_delimiters)


def write_file(
    parser: configparser.ConfigParser,
    path: Path,
    options: Optional[IniOptions] = None,
) -> None:
    """Grava o documento completo em `path` (diretórios pais devem existir)."""
    options = options or DEFAULT_OPTIONS
    with path.open("w", encoding=options.encoding) as fh:
        dump(parser, fh, options)
