# tests/core/io/test_load.py
"""
Testes da leitura de arquivos INI (ConfigStore.load / load).

Este módulo valida os três desfechos explícitos do load:
- LOADED: arquivo válido, seções e valores exatamente como no arquivo
- ABSENT: caminho inexistente (não é erro)
- PARSE_FAILURE: arquivo existente com conteúdo inválido

Invariantes:
    - ABSENT e PARSE_FAILURE nunca são confundidos
    - Falhas de leitura nunca levantam exceção em `load`
    - PARSE_FAILURE registra log com o caminho do arquivo
    - comentários inline só são removidos quando configurados em IniOptions
"""

import logging
from pathlib import Path

import pytest

from simple_ini import (
    CoercionError,
    ConfigStore,
    IniFileNotFoundError,
    IniOptions,
    IniParseError,
    InvalidValueError,
    LoadStatus,
    load,
)


def test_read_reference_file(simple_ini_path: Path):
    """
    Verifica a leitura do arquivo INI de referência.

    Invariantes:
        - As seções são exatamente as do arquivo (ordenadas)
        - Comentários e linhas em branco são ignorados
        - Valores são mantidos como texto
    """
    result = load(simple_ini_path)

    assert result.status is LoadStatus.LOADED
    assert result.ok
    assert result.message is None
    assert result.path == str(simple_ini_path)

    ini = result.store
    assert ini is not None
    assert ini.sections() == ["General", "Limits", "paths"]
    assert ini.keys("General") == ["Name", "Enabled", "Retries", "Ratio"]
    assert ini.get_string("General", "Name") == "simple-ini"
    assert ini.get_boolean("General", "Enabled") is True
    assert ini.get_int("General", "Retries") == 3
    assert ini.get_float("General", "Ratio") == 0.75
    assert ini.get_string("paths", "Output") == "build/out"
    assert ini.get_string("paths", "Cache") == ""
    assert ini.get_byte("Limits", "small") == 127
    assert ini.get_short("Limits", "medium") == 32767
    assert ini.get_long("Limits", "large") == 9223372036854775807


def test_reference_file_lookup_is_case_insensitive(simple_ini_path: Path):
    ini = ConfigStore.from_file(simple_ini_path)

    assert ini.get_string("general", "NAME") == "simple-ini"
    assert ini.has("PATHS", "output")


def test_missing_file_is_absent_not_failure(tmp_path: Path):
    result = ConfigStore.load(tmp_path / "not-yet.ini")

    assert result.status is LoadStatus.ABSENT
    assert result.absent
    assert not result.ok
    assert result.store is None
    assert result.message is None


def test_malformed_file_is_parse_failure(tmp_path: Path, malformed_ini_text, caplog):
    path = tmp_path / "broken.ini"
    path.write_text(malformed_ini_text, encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="simple_ini"):
        result = ConfigStore.load(path)

    assert result.status is LoadStatus.PARSE_FAILURE
    assert result.store is None
    assert str(path) in result.message
    assert str(path) in caplog.text


def test_key_without_delimiter_is_parse_failure(tmp_path: Path):
    path = tmp_path / "novalue.ini"
    path.write_text("[s]\njust_a_key\n", encoding="utf-8")

    assert ConfigStore.load(path).status is LoadStatus.PARSE_FAILURE


def test_directory_path_is_parse_failure(tmp_path: Path):
    result = ConfigStore.load(tmp_path)

    assert result.status is LoadStatus.PARSE_FAILURE


def test_duplicates_merge_unless_strict(tmp_path: Path, duplicate_section_ini_text):
    path = tmp_path / "dup.ini"
    path.write_text(duplicate_section_ini_text, encoding="utf-8")

    lenient = ConfigStore.load(path)
    assert lenient.ok
    assert lenient.store.get_int("a", "k") == 2

    strict = ConfigStore.load(path, IniOptions(strict=True))
    assert strict.status is LoadStatus.PARSE_FAILURE


def test_interpolation_markers_are_literal(tmp_path: Path):
    path = tmp_path / "pct.ini"
    path.write_text("[s]\nfmt = %(name)s at 100%\n", encoding="utf-8")

    ini = ConfigStore.from_file(path)
    assert ini.get_string("s", "fmt") == "%(name)s at 100%"


def test_default_section_is_an_ordinary_section(tmp_path: Path):
    path = tmp_path / "default.ini"
    path.write_text("[DEFAULT]\na = 1\n\n[other]\nb = 2\n", encoding="utf-8")

    ini = ConfigStore.from_file(path)
    assert ini.sections() == ["DEFAULT", "other"]
    assert not ini.has("other", "a")


def test_encoding_mismatch_is_parse_failure(tmp_path: Path):
    path = tmp_path / "latin.ini"
    path.write_bytes("[s]\nk = ação\n".encode("latin-1"))

    assert ConfigStore.load(path).status is LoadStatus.PARSE_FAILURE

    result = ConfigStore.load(path, IniOptions(encoding="latin-1"))
    assert result.ok
    assert result.store.get_string("s", "k") == "ação"


def test_from_file_raises_for_missing_and_malformed(tmp_path: Path, malformed_ini_text):
    with pytest.raises(IniFileNotFoundError):
        ConfigStore.from_file(tmp_path / "missing.ini")

    path = tmp_path / "broken.ini"
    path.write_text(malformed_ini_text, encoding="utf-8")
    with pytest.raises(IniParseError) as exc_info:
        ConfigStore.from_file(path)
    assert exc_info.value.path == str(path)


def test_loaded_store_keeps_options(tmp_path: Path):
    path = tmp_path / "opts.ini"
    path.write_text("[s]\nk = v\n", encoding="utf-8")
    options = IniOptions(space_around_delimiters=False)

    ini = ConfigStore.from_file(path, options)
    assert ini.options is options


def test_inline_comment_is_value_text_by_default(tmp_path: Path, inline_comment_ini_text):
    path = tmp_path / "inline.ini"
    path.write_text(inline_comment_ini_text, encoding="utf-8")

    ini = ConfigStore.from_file(path)

    assert ini.get_string("server", "port") == "5 ; porta de teste"
    assert ini.get_string("server", "name") == "web # principal"
    with pytest.raises(CoercionError):
        ini.get_int("server", "port")


def test_inline_comment_prefixes_strip_trailing_comments(tmp_path: Path, inline_comment_ini_text):
    path = tmp_path / "inline.ini"
    path.write_text(inline_comment_ini_text, encoding="utf-8")
    options = IniOptions(inline_comment_prefixes=(";", "#"))

    ini = ConfigStore.from_file(path, options)

    assert ini.get_int("server", "port") == 5
    assert ini.get_string("server", "name") == "web"


def test_set_rejects_value_that_inline_comments_would_cut():
    ini = ConfigStore(options=IniOptions(inline_comment_prefixes=(";",)))

    with pytest.raises(InvalidValueError):
        ini.set("s", "k", "a ; b")
    with pytest.raises(InvalidValueError):
        ini.set("s", "k", ";a")

    ini.set("s", "k", "a;b")
    assert ini.get_string("s", "k") == "a;b"
