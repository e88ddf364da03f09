# src/simple_ini/core/types.py
"""
Tipos canônicos de resultado do simple-ini.

Este módulo define os resultados explícitos das operações de I/O da
ConfigStore. Falhas de leitura e escrita são **valores**, não exceções:
o chamador deve inspecionar o status retornado.

Componentes principais:
    - LoadStatus  → enum de desfechos do load (LOADED, ABSENT, PARSE_FAILURE)
    - LoadResult  → resultado imutável do load
    - WriteStatus → enum de desfechos do write (WRITTEN, DIRECTORY_FAILURE, WRITE_FAILURE)
    - WriteResult → resultado imutável do write

Decisões arquiteturais:
    - "Arquivo ainda não existe" e "arquivo inválido" são desfechos distintos
    - Toda falha carrega uma mensagem de diagnóstico incluindo o caminho
    - Sucesso nunca carrega mensagem

Invariantes:
    - Enums possuem valores textuais canônicos
    - Resultados são imutáveis (frozen)
    - `LoadResult.store` está presente se e somente se status == LOADED

Limites explícitos:
    - Não executa I/O
    - Não registra logs
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .store import ConfigStore


class LoadStatus(str, Enum):
    """
    Desfechos possíveis de `load(path)`.

    Estados definidos:
        - LOADED: arquivo lido e interpretado com sucesso
        - ABSENT: o caminho não aponta para um arquivo existente (não é erro)
        - PARSE_FAILURE: o arquivo existe, mas não é INI válido
    """
    LOADED = "loaded"
    ABSENT = "absent"
    PARSE_FAILURE = "parse_failure"


class WriteStatus(str, Enum):
    """
    Desfechos possíveis de `write(path)`.

    Estados definidos:
        - WRITTEN: documento serializado integralmente no destino
        - DIRECTORY_FAILURE: falha ao criar diretórios pais
        - WRITE_FAILURE: falha ao abrir ou escrever o arquivo
    """
    WRITTEN = "written"
    DIRECTORY_FAILURE = "directory_failure"
    WRITE_FAILURE = "write_failure"


@dataclass(frozen=True)
class LoadResult:
    """
    Resultado imutável de uma leitura de arquivo INI.

    Campos:
        - status: desfecho da leitura
        - path: caminho solicitado (como string)
        - store: ConfigStore carregada (somente quando LOADED)
        - message: diagnóstico (somente em PARSE_FAILURE)
    """
    status: LoadStatus
    path: str
    store: Optional["ConfigStore"] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.LOADED

    @property
    def absent(self) -> bool:
        return self.status is LoadStatus.ABSENT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "path": self.path,
            "message": self.message,
        }


@dataclass(frozen=True)
class WriteResult:
    """
    Resultado imutável de uma escrita de arquivo INI.

    Substitui a convenção de canal duplo (None = sucesso, string = erro):
    `message` continua sendo None no sucesso e o diagnóstico na falha,
    mas o desfecho é sempre explícito em `status`.
    """
    status: WriteStatus
    path: str
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is WriteStatus.WRITTEN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "path": self.path,
            "message": self.message,
        }


__all__ = ["LoadStatus", "LoadResult", "WriteStatus", "WriteResult"]
