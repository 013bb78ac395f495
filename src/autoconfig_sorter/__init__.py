# src/autoconfig_sorter/__init__.py
"""
autoconfig-sorter — ordenação determinística de unidades de configuração.

Dado um lote de identificadores de unidades e uma fonte de metadados que
informa, para cada unidade, sua prioridade numérica e suas relações
"rodar antes de" / "rodar depois de", o pacote produz uma única ordem de
ativação que:

    - é estável lexicograficamente como caso base
    - respeita a prioridade numérica como sinal secundário
    - satisfaz todas as restrições before/after, rejeitando ciclos

Arquitetura em alto nível:
    - core.metadata      → fontes (índice pré-computado, declarações) e MetadataView
    - core.sorting       → PrioritySorter
    - core.config        → arquivos de configuração e de índice
    - core.traceability  → SortTrace

Limites explícitos:
    - Não carrega, importa ou executa as unidades
    - Não resolve dependências de valor entre unidades
    - Não repara ciclos
"""

from .core.exceptions import CycleDetectedError, MetadataUnreadableError, SorterException
from .core.metadata import (
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
    DeclarationMetadataSource,
    FallbackMetadataSource,
    IndexedMetadataSource,
    MetadataSource,
    MetadataView,
    StaticMetadataSource,
    UnitMetadata,
    auto_configure_after,
    auto_configure_before,
    auto_configure_order,
)
from .core.sorting import PrioritySorter, sort_in_priority_order
from .core.traceability import SortTrace

__all__ = [
    "CycleDetectedError",
    "DeclarationMetadataSource",
    "FallbackMetadataSource",
    "HIGHEST_PRECEDENCE",
    "IndexedMetadataSource",
    "LOWEST_PRECEDENCE",
    "MetadataSource",
    "MetadataUnreadableError",
    "MetadataView",
    "PrioritySorter",
    "SortTrace",
    "SorterException",
    "StaticMetadataSource",
    "UnitMetadata",
    "auto_configure_after",
    "auto_configure_before",
    "auto_configure_order",
    "sort_in_priority_order",
]
