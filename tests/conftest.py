# tests/conftest.py
"""
Fixtures compartilhados para testes do simple-ini.

Este módulo define fixtures reutilizáveis que fornecem:
- o arquivo INI de referência (`tests/fixtures/simple.ini`)
- conteúdos INI válidos e inválidos como string
- um INI com comentários inline (ver `IniOptions.inline_comment_prefixes`)
- uma ConfigStore vazia

Decisões arquiteturais:
    - Conteúdos são fornecidos como string; os testes decidem quando
      gravá-los em `tmp_path`
    - Imports do pacote são feitos de forma lazy dentro das fixtures

Invariantes:
    - Nenhuma fixture escreve fora de `tmp_path`
    - Dados retornados são determinísticos
"""

from pathlib import Path

import pytest


FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


# =====================================================
# Arquivos INI
# =====================================================

@pytest.fixture
def simple_ini_path() -> Path:
    """
    Caminho do arquivo INI de referência.

    Conteúdo (resumo):
        - [General]: Name, Enabled, Retries, Ratio
        - [paths]: Output, Cache (vazio), com uma linha de comentário `;`
        - [Limits]: valores nos limites de byte, short e long

    Returns:
        Path: Caminho absoluto de `tests/fixtures/simple.ini`.
    """
    return FIXTURES_DIR / "simple.ini"


@pytest.fixture
def basic_ini_text() -> str:
    return """\
[database]
Host = localhost
Port = 5432
Debug = off

[Cache]
ttl = 1.5
"""


@pytest.fixture
def malformed_ini_text() -> str:
    """Par chave/valor antes de qualquer cabeçalho de seção (sintaxe inválida)."""
    return "orphan = value\n[section]\nkey = value\n"


@pytest.fixture
def duplicate_section_ini_text() -> str:
    return "[a]\nk = 1\n\n[a]\nk = 2\n"


# =====================================================
# Opções (IniOptions)
# =====================================================

@pytest.fixture
def inline_comment_ini_text() -> str:
    """Valor seguido de um trecho que só é comentário com `inline_comment_prefixes`."""
    return "[server]\nport = 5 ; porta de teste\nname = web # principal\n"


# =====================================================
# ConfigStore
# =====================================================

@pytest.fixture
def empty_store():
    from simple_ini import ConfigStore

    return ConfigStore()
