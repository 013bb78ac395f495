# src/autoconfig_sorter/core/metadata/__init__.py
"""
# Metadados de ordenação

Este pacote define como o sorter obtém, para cada unidade, sua
prioridade numérica e suas relações before/after **sem carregar a
unidade**.

## Componentes

- **types**: `UnitMetadata`, `HIGHEST_PRECEDENCE`, `LOWEST_PRECEDENCE`
- **markers**: decorators `auto_configure_order/before/after`
- **source**: protocolo `MetadataSource`, `StaticMetadataSource`, `FallbackMetadataSource`
- **index**: `IndexedMetadataSource` (índice pré-computado, caminho rápido)
- **declarations**: `DeclarationMetadataSource` (leitura AST, caminho lento)
- **view**: `MetadataView` (cache por chamada + predecessores efetivos)
- **factory**: `build_metadata_source` a partir de `SorterSettings`

## Limites Explícitos

- Não ordena unidades
- Não importa nem instancia unidades
"""

from .declarations import DeclarationMetadataSource, DeclarationReadError
from .factory import build_metadata_source
from .index import IndexedMetadataSource
from .markers import auto_configure_after, auto_configure_before, auto_configure_order
from .source import FallbackMetadataSource, MetadataSource, StaticMetadataSource
from .types import HIGHEST_PRECEDENCE, LOWEST_PRECEDENCE, UnitMetadata
from .view import MetadataView

__all__ = [
    "DeclarationMetadataSource",
    "DeclarationReadError",
    "FallbackMetadataSource",
    "HIGHEST_PRECEDENCE",
    "IndexedMetadataSource",
    "LOWEST_PRECEDENCE",
    "MetadataSource",
    "MetadataView",
    "StaticMetadataSource",
    "UnitMetadata",
    "auto_configure_after",
    "auto_configure_before",
    "auto_configure_order",
    "build_metadata_source",
]
