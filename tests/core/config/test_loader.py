# tests/core/config/test_loader.py
"""
Testes do carregador de configuração (load_config / load_structured_file).

Este módulo valida o comportamento do loader responsável por:
- carregar o arquivo de configuração padrão (defaults)
- aplicar o arquivo local de overrides, quando existir
- rejeitar formatos e estruturas inválidas

Os testes asseguram que:
- o arquivo defaults é obrigatório
- o arquivo local é opcional
- listas do arquivo local substituem as do defaults
- arquivos vazios equivalem a dicionários vazios

Decisões arquiteturais:
    - A configuração é declarativa e baseada em arquivos
    - Erros estruturais são tratados como falhas fatais

Limites explícitos:
    - Não valida a interpretação da seção `sorter` (ver test_settings.py)
    - Não valida hashing de configuração
"""

import json
from pathlib import Path

import pytest

try:
    from autoconfig_sorter.core.config.loader import load_config, load_structured_file
    from autoconfig_sorter.core.config.errors import (
        ConfigFileNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    load_structured_file = None
    ConfigFileNotFoundError = None
    InvalidConfigRootTypeError = None
    UnsupportedConfigFormatError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader e suas exceções tipadas estejam disponíveis.

    Falha imediatamente, com mensagem descritiva, quando `loader` ou
    `errors` não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/autoconfig_sorter/core/config/loader.py (load_config)\n"
            "- src/autoconfig_sorter/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    """
    Verifica que a ausência do arquivo defaults é erro fatal.

    Invariantes:
        - A exceção utilizada é específica (`ConfigFileNotFoundError`)
        - Nenhuma configuração parcial é retornada
    """
    _require_imports()
    with pytest.raises(ConfigFileNotFoundError):
        load_config(defaults_path=str(tmp_path / "defaults.yaml"), local_path=None)


def test_missing_local_is_ok(tmp_path: Path, sorter_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(sorter_config_defaults_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))

    assert out["sorter"]["source_roots"] == ["src"]
    assert out["sorter"]["index_paths"] == ["meta/index.yaml"]


def test_load_defaults_and_local(tmp_path: Path, sorter_config_defaults_yaml, sorter_config_local_yaml):
    """
    Verifica o merge defaults + local.

    - `source_roots` (lista) é substituída integralmente pelo local
    - `index_paths` ausente no local é preservada do defaults
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(sorter_config_defaults_yaml, encoding="utf-8")
    local.write_text(sorter_config_local_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))

    assert out["sorter"]["source_roots"] == ["lib"]
    assert out["sorter"]["index_paths"] == ["meta/index.yaml"]


def test_json_and_empty_files(tmp_path: Path):
    _require_imports()
    as_json = tmp_path / "config.json"
    as_json.write_text(json.dumps({"sorter": {"source_roots": ["src"]}}), encoding="utf-8")
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")

    assert load_structured_file(as_json) == {"sorter": {"source_roots": ["src"]}}
    assert load_structured_file(empty) == {}


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")

    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("sorter = { source_roots = ['src'] }\n", encoding="utf-8")

    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults), local_path=None)
