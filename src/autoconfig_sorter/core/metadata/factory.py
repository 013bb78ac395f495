# src/autoconfig_sorter/core/metadata/factory.py
"""Seleção da estratégia de metadados a partir de `SorterSettings`."""

from __future__ import annotations

from autoconfig_sorter.core.config.errors import InvalidSorterSettingsError
from autoconfig_sorter.core.config.settings import SorterSettings

from .declarations import DeclarationMetadataSource
from .index import IndexedMetadataSource
from .source import FallbackMetadataSource, MetadataSource


def build_metadata_source(settings: SorterSettings) -> MetadataSource:
    """
    Monta a fonte de metadados configurada.

    - apenas índices        → IndexedMetadataSource
    - apenas raízes de código → DeclarationMetadataSource
    - ambos                 → FallbackMetadataSource (índice primeiro)

    Raises:
        InvalidSorterSettingsError: Se nenhuma fonte estiver configurada.
    """
    has_index = bool(settings.index_paths)
    has_sources = bool(settings.source_roots)

    if not has_index and not has_sources:
        raise InvalidSorterSettingsError(
            "Configure ao menos um de sorter.index_paths ou sorter.source_roots"
        )

    if not has_sources:
        return IndexedMetadataSource.from_files(settings.index_paths)

    declarations = DeclarationMetadataSource(settings.source_roots)
    if not has_index:
        return declarations

    return FallbackMetadataSource(
        IndexedMetadataSource.from_files(settings.index_paths),
        declarations,
    )
