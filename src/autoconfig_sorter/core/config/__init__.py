# src/autoconfig_sorter/core/config/__init__.py
"""
Camada de configuração do autoconfig-sorter.

Este pacote carrega, mescla e identifica (hash) a configuração que diz
ao sorter onde estão suas fontes de metadados: índices pré-computados
e raízes de código-fonte com declarações.

Responsabilidades do pacote:
    - Carregamento de arquivos YAML/JSON (defaults + overrides locais)
    - Resolução via deep-merge determinístico
    - Interpretação tipada da seção `sorter` (`SorterSettings`)
    - Hash canônico para rastreabilidade

Limites explícitos:
    - Não ordena unidades
    - Não lê metadados de unidades
"""

from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigTypeConflictError,
    IndexFormatError,
    InvalidConfigRootTypeError,
    InvalidSorterSettingsError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_batch_hash, compute_config_hash
from .loader import load_config, load_structured_file
from .merge import deep_merge
from .settings import SorterSettings

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigTypeConflictError",
    "IndexFormatError",
    "InvalidConfigRootTypeError",
    "InvalidSorterSettingsError",
    "UnsupportedConfigFormatError",
    "SorterSettings",
    "compute_batch_hash",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "load_structured_file",
]
