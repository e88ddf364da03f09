# src/simple_ini/__init__.py
"""
simple-ini — wrapper mínimo para arquivos INI.

Carrega um documento INI do disco, expõe acessores tipados por
(seção, chave), permite mutação e serializa as alterações de volta.

Uso típico:

    from simple_ini import ConfigStore, LoadStatus

    result = ConfigStore.load("app.ini")
    store = result.store if result.ok else ConfigStore()
    store.set("server", "port", 8080)
    outcome = store.write("app.ini")
    if not outcome.ok:
        print(outcome.message)

Limites explícitos:
    - Não suporta seções aninhadas
    - Nomes de seção e chave não podem conter `.`
    - Chaves gravadas não podem conter `=` ou `:` nem quebras de linha
    - Comentários não são preservados na reescrita
"""

import logging

from .core.errors import (
    CoercionError,
    IniError,
    IniFileNotFoundError,
    IniParseError,
    InvalidAddressError,
    InvalidOptionError,
    InvalidValueError,
    MissingKeyError,
)
from .core.options import IniOptions
from .core.store import ADDRESS_DELIMITER, ConfigStore, load, write
from .core.types import LoadResult, LoadStatus, WriteResult, WriteStatus

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ADDRESS_DELIMITER",
    "ConfigStore",
    "load",
    "write",
    "IniOptions",
    "LoadResult",
    "LoadStatus",
    "WriteResult",
    "WriteStatus",
    "IniError",
    "InvalidAddressError",
    "CoercionError",
    "MissingKeyError",
    "InvalidValueError",
    "InvalidOptionError",
    "IniFileNotFoundError",
    "IniParseError",
]
