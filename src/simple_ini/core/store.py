# src/simple_ini/core/store.py
"""
ConfigStore — representação canônica em memória de um documento INI.

Este módulo define a **ConfigStore**, fachada mínima sobre um
`configparser.ConfigParser` que expõe um único esquema de endereçamento
por par (seção, chave), acessores tipados, mutação e persistência.

Modelo de dados:
    - seção → (chave → valor textual)
    - valores são texto livre; acessores tipados fazem coerção sob demanda
    - `sections()` é sempre retornado em ordem lexicográfica

Endereçamento:
    - cada valor é endereçado por (seção, chave), equivalente ao caminho
      `secao.chave`; por isso `.` é proibido em ambos os componentes
    - a busca de nomes é case-insensitive; a caixa original é preservada
      no armazenamento e na serialização
    - `set` só aceita nomes e valores que a releitura reproduz exatamente

Ausência de valor, por família de acessor:
    - `get_string`, `get_boolean` e `get` retornam None
    - acessores numéricos levantam `MissingKeyError`

Falhas de I/O:
    - `load` retorna `LoadResult` (LOADED, ABSENT ou PARSE_FAILURE)
    - `write` retorna `WriteResult` (WRITTEN, DIRECTORY_FAILURE ou WRITE_FAILURE)
    - nenhuma das duas levanta exceção por falha de I/O

Limites explícitos:
    - Não suporta seções aninhadas
    - Não preserva comentários na reescrita
    - Não é thread-safe: cada instância deve ser acessada por um único
      fluxo de execução (ou protegida externamente)
"""

from __future__ import annotations

import configparser
import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .coercion import CONVERTERS, ValueLike, to_text
from .options import DEFAULT_OPTIONS, IniOptions
from .errors import (
    CoercionError,
    IniFileNotFoundError,
    IniParseError,
    InvalidAddressError,
    InvalidValueError,
    MissingKeyError,
)
from .io import PARSE_ERRORS, WRITE_ERRORS, new_parser, parse_file, write_file
from .types import LoadResult, LoadStatus, WriteResult, WriteStatus

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Delimitador do caminho `secao.chave`.
ADDRESS_DELIMITER = "."

# Delimitadores chave/valor reconhecidos pelo parser.
KEY_DELIMITERS = ("=", ":")


class ConfigStore:
    """
    Documento INI em memória com acessores tipados.

    Formas de criação:
        - `ConfigStore()` → documento vazio
        - `ConfigStore.load(path)` → LoadResult com a store, se houver
        - `ConfigStore.from_file(path)` → store ou exceção
        - `ConfigStore.from_parser(parser)` → encapsula um parser existente
        - `ConfigStore.from_dict(data)` → a partir de {seção: {chave: valor}}

    Invariantes:
        - Cada instância possui exclusivamente o seu parser
        - Validação de endereço ocorre antes de qualquer acesso ao parser
    """

    def __init__(
        self,
        parser: Optional[configparser.ConfigParser] = None,
        *,
        options: Optional[IniOptions] = None,
    ) -> None:
        self.options = options or DEFAULT_OPTIONS
        self._parser = parser if parser is not None else new_parser(self.options)

    # ------------------------------------------------------------------
    # Construção
    # ------------------------------------------------------------------
    @classmethod
    def from_parser(
        cls,
        parser: configparser.ConfigParser,
        *,
        options: Optional[IniOptions] = None,
    ) -> "ConfigStore":
        """
        Encapsula um documento já interpretado.

        O parser é usado como está (não é copiado); suas próprias regras de
        normalização de chaves continuam valendo.

        Raises:
            ValueError: Se `parser` for None.
        """
        if parser is None:
            raise ValueError("Configuration cannot be None!")
        return cls(parser, options=options)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Mapping[str, ValueLike]],
        *,
        options: Optional[IniOptions] = None,
    ) -> "ConfigStore":
        store = cls(options=options)
        for section, values in data.items():
            store.add_section(section)
            for key, value in values.items():
                store.set(section, key, value)
        return store

    @classmethod
    def load(cls, path: PathLike, options: Optional[IniOptions] = None) -> LoadResult:
        """
        Lê e interpreta o arquivo INI em `path`.

        Desfechos:
            - ABSENT: nada existe em `path` (arquivo ainda não criado)
            - PARSE_FAILURE: o caminho existe, mas não pôde ser lido como
              INI; a causa é registrada em log e incluída em `message`
            - LOADED: `store` contém exatamente as seções do arquivo

        Esta função nunca levanta exceção por falha de leitura.
        """
        options = options or DEFAULT_OPTIONS
        file = Path(path)

        if not file.exists():
            logger.debug("INI file not present (yet): %s", file)
            return LoadResult(status=LoadStatus.ABSENT, path=str(file))

        try:
            parser = parse_file(file, options)
        except PARSE_ERRORS as exc:
            logger.error("Failed to parse: %s", file, exc_info=True)
            return LoadResult(
                status=LoadStatus.PARSE_FAILURE,
                path=str(file),
                message=f"Failed to parse: {file}\n{exc}",
            )

        logger.debug("Loaded INI file: %s", file)
        return LoadResult(
            status=LoadStatus.LOADED,
            path=str(file),
            store=cls(parser, options=options),
        )

    @classmethod
    def from_file(cls, path: PathLike, options: Optional[IniOptions] = None) -> "ConfigStore":
        """
        Variante estrita de `load`: retorna a store ou levanta exceção.

        Raises:
            IniFileNotFoundError: Se o arquivo não existir.
            IniParseError: Se o arquivo não puder ser interpretado.
        """
        result = cls.load(path, options)
        if result.status is LoadStatus.ABSENT:
            raise IniFileNotFoundError(f"INI file not found: {result.path}")
        if result.status is LoadStatus.PARSE_FAILURE:
            raise IniParseError(result.message or f"Failed to parse: {result.path}", path=result.path)
        store = result.store
        if store is None:
            raise IniParseError(f"Failed to parse: {result.path}", path=result.path)
        return store

    # ------------------------------------------------------------------
    # Endereçamento
    # ------------------------------------------------------------------
    @staticmethod
    def _validate(section: str, key: str) -> None:
        if not section:
            raise InvalidAddressError("Section name cannot be empty!")
        if ADDRESS_DELIMITER in section:
            raise InvalidAddressError("Section name cannot contain dots!")
        if ADDRESS_DELIMITER in key:
            raise InvalidAddressError("Key cannot contain dots!")

    @staticmethod
    def _check_section_name(section: str) -> None:
        # `[a\nb]` não é um cabeçalho que o parser consiga ler de volta
        if "\n" in section or "\r" in section:
            raise InvalidAddressError(f"Section name cannot contain line breaks: {section!r}")

    def _check_key_name(self, key: str) -> None:
        """Rejeita chaves que a escrita produziria mas a leitura não reconheceria."""
        if not key:
            raise InvalidAddressError("Key cannot be empty!")
        if "\n" in key or "\r" in key:
            raise InvalidAddressError(f"Key cannot contain line breaks: {key!r}")
        if key != key.strip():
            raise InvalidAddressError(f"Key cannot start or end with whitespace: {key!r}")
        for delimiter in KEY_DELIMITERS:
            if delimiter in key:
                raise InvalidAddressError(f"Key cannot contain {delimiter!r}: {key!r}")
        for prefix in ("[",) + tuple(self.options.comment_prefixes):
            if key.startswith(prefix):
                raise InvalidAddressError(f"Key cannot start with {prefix!r}: {key!r}")

    def _check_value_text(self, section: str, key: str, text: str) -> None:
        """Rejeita valores cujo texto seria alterado na releitura."""
        lines = text.split("\n")
        for line in lines[1:]:
            stripped = line.strip()
            if any(stripped.startswith(p) for p in self.options.comment_prefixes):
                raise InvalidValueError(
                    f"Value of '{section}{ADDRESS_DELIMITER}{key}' has a line that would be read as a comment"
                )
        for prefix in self.options.inline_comment_prefixes:
            for line in lines:
                index = line.find(prefix)
                while index != -1:
                    if index == 0 or line[index - 1].isspace():
                        raise InvalidValueError(
                            f"Value of '{section}{ADDRESS_DELIMITER}{key}' would be cut at inline comment {prefix!r}"
                        )
                    index = line.find(prefix, index + 1)

    def _find_section(self, section: str) -> Optional[str]:
        if self._parser.has_section(section):
            return section
        folded = section.casefold()
        for name in self._parser.sections():
            if name.casefold() == folded:
                return name
        return None

    def _find_key(self, section_name: str, key: str) -> Optional[str]:
        options = self._parser.options(section_name)
        if key in options:
            return key
        folded = key.casefold()
        for option in options:
            if option.casefold() == folded:
                return option
        return None

    def _lookup(self, section: str, key: str) -> Optional[str]:
        name = self._find_section(section)
        if name is None:
            return None
        option = self._find_key(name, key)
        if option is None:
            return None
        return self._parser.get(name, option, raw=True)

    # ------------------------------------------------------------------
    # Leitura
    # ------------------------------------------------------------------
    def sections(self) -> List[str]:
        """Nomes das seções presentes, em ordem lexicográfica."""
        return sorted(self._parser.sections())

    def keys(self, section: str) -> List[str]:
        """Chaves da seção na ordem do documento ([] se a seção não existir)."""
        self._validate(section, "")
        name = self._find_section(section)
        if name is None:
            return []
        return list(self._parser.options(name))

    def has(self, section: str, key: str) -> bool:
        self._validate(section, key)
        return self._lookup(section, key) is not None

    def _coerce(self, section: str, key: str, target: str, *, required: bool) -> Any:
        self._validate(section, key)
        text = self._lookup(section, key)
        if text is None:
            if required:
                raise MissingKeyError(
                    f"No value for '{section}{ADDRESS_DELIMITER}{key}', cannot convert to {target}",
                    section=section,
                    key=key,
                    value=None,
                    target=target,
                )
            return None
        try:
            return CONVERTERS[target](text)
        except ValueError as exc:
            raise CoercionError(
                f"Value of '{section}{ADDRESS_DELIMITER}{key}' cannot be converted to {target}: {exc}",
                section=section,
                key=key,
                value=text,
                target=target,
            ) from exc

    def get(self, section: str, key: str) -> Optional[bool]:
        """
        Acessor genérico: equivalente a `get_boolean`.

        Mantém o comportamento herdado do acessor genérico, que sempre
        converte para booleano independentemente do tipo real do valor.
        Para o texto original use `get_string`.
        """
        return self.get_boolean(section, key)

    def get_string(self, section: str, key: str) -> Optional[str]:
        return self._coerce(section, key, "string", required=False)

    def get_boolean(self, section: str, key: str) -> Optional[bool]:
        return self._coerce(section, key, "boolean", required=False)

    def get_byte(self, section: str, key: str) -> int:
        return self._coerce(section, key, "byte", required=True)

    def get_short(self, section: str, key: str) -> int:
        return self._coerce(section, key, "short", required=True)

    def get_int(self, section: str, key: str) -> int:
        return self._coerce(section, key, "int", required=True)

    def get_long(self, section: str, key: str) -> int:
        return self._coerce(section, key, "long", required=True)

    def get_float(self, section: str, key: str) -> float:
        return self._coerce(section, key, "float", required=True)

    def get_double(self, section: str, key: str) -> float:
        return self._coerce(section, key, "double", required=True)

    # ------------------------------------------------------------------
    # Mutação
    # ------------------------------------------------------------------
    def add_section(self, section: str) -> str:
        """Garante a existência da seção; retorna o nome efetivamente armazenado."""
        self._validate(section, "")
        name = self._find_section(section)
        if name is None:
            self._check_section_name(section)
            self._parser.add_section(section)
            name = section
        return name

    def set(self, section: str, key: str, value: ValueLike) -> None:
        """
        Armazena `value` como texto em (seção, chave), criando a seção se preciso.

        Uma chave já existente com outra caixa é sobrescrita mantendo a
        grafia original.

        Raises:
            InvalidAddressError: Se seção ou chave forem inválidas ou não
                puderem ser gravadas como INI (ex.: `=` ou `:` na chave).
            InvalidValueError: Se o texto do valor não sobreviver à releitura.
            TypeError: Se `value` não for str, int, float ou bool.
        """
        self._validate(section, key)
        self._check_section_name(section)
        self._check_key_name(key)
        text = to_text(value)
        self._check_value_text(section, key, text)
        name = self.add_section(section)
        option = self._find_key(name, key) or key
        self._parser.set(name, option, text)

    def remove(self, section: str, key: Optional[str] = None) -> bool:
        """
        Remove uma chave (a seção permanece) ou, sem `key`, a seção inteira.

        Returns:
            bool: True se algo foi removido.
        """
        self._validate(section, "" if key is None else key)
        name = self._find_section(section)
        if name is None:
            return False
        if key is None:
            return self._parser.remove_section(name)
        option = self._find_key(name, key)
        if option is None:
            return False
        return self._parser.remove_option(name, option)

    # ------------------------------------------------------------------
    # Persistência
    # ------------------------------------------------------------------
    def write(self, path: PathLike) -> WriteResult:
        """
        Serializa o documento em `path`, criando diretórios pais ausentes.

        O arquivo é aberto via context manager: é descarregado e fechado em
        qualquer caminho de saída, inclusive falha de escrita.

        Returns:
            WriteResult: WRITTEN (message None) ou uma falha com diagnóstico.
        """
        file = Path(path)
        directory = file.parent

        if not directory.exists():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                message = f"Failed to create directory for configuration file: {directory}"
                logger.error("%s (%s)", message, exc)
                return WriteResult(
                    status=WriteStatus.DIRECTORY_FAILURE,
                    path=str(file),
                    message=f"{message}\n{exc}",
                )

        try:
            write_file(self._parser, file, self.options)
        except WRITE_ERRORS as exc:
            logger.error("Failed to write configuration to: %s", file, exc_info=True)
            return WriteResult(
                status=WriteStatus.WRITE_FAILURE,
                path=str(file),
                message=f"Failed to write configuration to: {file}\n{exc}",
            )

        logger.debug("Wrote INI file: %s", file)
        return WriteResult(status=WriteStatus.WRITTEN, path=str(file))

    # ------------------------------------------------------------------
    # Visões
    # ------------------------------------------------------------------
    @property
    def parser(self) -> configparser.ConfigParser:
        """Parser subjacente (mesma instância, não uma cópia)."""
        return self._parser

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            name: {option: self._parser.get(name, option, raw=True) for option in self._parser.options(name)}
            for name in self._parser.sections()
        }

    def fingerprint(self) -> str:
        """Hash SHA-256 do conteúdo, independente da ordem de seções e chaves."""
        canonical = json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigStore):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigStore(sections={self.sections()!r})"


def load(path: PathLike, options: Optional[IniOptions] = None) -> LoadResult:
    """Atalho para `ConfigStore.load`."""
    return ConfigStore.load(path, options)


def write(store: ConfigStore, path: PathLike) -> WriteResult:
    """Atalho para `ConfigStore.write`."""
    return store.write(path)


__all__ = ["ADDRESS_DELIMITER", "ConfigStore", "load", "write"]
