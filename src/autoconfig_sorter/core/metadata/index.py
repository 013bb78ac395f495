# src/autoconfig_sorter/core/metadata/index.py
"""
Índice pré-computado de metadados (caminho rápido).

O índice é gerado fora do processo de ordenação (por exemplo, no build)
e evita a leitura de declarações unidade a unidade. Formato (YAML ou
JSON, mesmas regras do loader de configuração):

    units:
      com.example.WebConfig:
        order: 10
        after:
          - com.example.CoreConfig
      com.example.CoreConfig: {}

Uma unidade presente em `units` é considerada *processada*, mesmo sem
declarar nada; unidades ausentes devem ser lidas por outra estratégia.

Decisões arquiteturais:
    - Entradas são validadas integralmente na construção
    - Entradas malformadas são erro estrutural (IndexFormatError)
    - Uma unidade não pode aparecer em mais de um arquivo de índice
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from autoconfig_sorter.core.config.errors import IndexFormatError
from autoconfig_sorter.core.config.loader import load_structured_file

from .types import UnitMetadata


def _relation_list(unit_id: str, key: str, value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) and v.strip() for v in value):
        raise IndexFormatError(
            f"Entrada '{unit_id}': '{key}' deve ser lista de identificadores"
        )
    return tuple(value)


def _parse_entry(unit_id: Any, raw: Any) -> UnitMetadata:
    if not isinstance(unit_id, str) or not unit_id.strip():
        raise IndexFormatError(f"Identificador de unidade inválido no índice: {unit_id!r}")

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise IndexFormatError(
            f"Entrada '{unit_id}' deve ser dict, recebido: {type(raw).__name__}"
        )

    unknown = set(raw) - {"order", "before", "after"}
    if unknown:
        raise IndexFormatError(
            f"Entrada '{unit_id}' possui chaves desconhecidas: {sorted(unknown)}"
        )

    order = raw.get("order")
    # bool é subclasse de int; "order: true" é erro de digitação, não prioridade
    if order is not None and (not isinstance(order, int) or isinstance(order, bool)):
        raise IndexFormatError(f"Entrada '{unit_id}': 'order' deve ser inteiro")

    return UnitMetadata.build(
        unit_id,
        order=order,
        before=_relation_list(unit_id, "before", raw.get("before")),
        after=_relation_list(unit_id, "after", raw.get("after")),
    )


class IndexedMetadataSource:
    """Fonte de metadados apoiada em um índice pré-computado."""

    def __init__(self, entries: Optional[Mapping[str, Any]] = None):
        self._units: Dict[str, UnitMetadata] = {
            unit_id: _parse_entry(unit_id, raw) for unit_id, raw in (entries or {}).items()
        }

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "IndexedMetadataSource":
        units = document.get("units")
        if units is None:
            raise IndexFormatError("Índice sem chave raiz 'units'")
        if not isinstance(units, dict):
            raise IndexFormatError(
                f"'units' deve ser dict, recebido: {type(units).__name__}"
            )
        return cls(units)

    @classmethod
    def from_files(cls, paths: Iterable[Union[str, Path]]) -> "IndexedMetadataSource":
        combined: Dict[str, Any] = {}
        for path in paths:
            document = load_structured_file(path)
            units = cls.from_document(document)._units
            clash = sorted(set(units) & set(combined))
            if clash:
                raise IndexFormatError(
                    f"Unidades declaradas em mais de um índice ({path}): {clash}"
                )
            combined.update(units)

        index = cls()
        index._units = combined
        return index

    def was_processed(self, unit_id: str) -> bool:
        return unit_id in self._units

    def order(self, unit_id: str) -> Optional[int]:
        meta = self._units.get(unit_id)
        return meta.order if meta is not None else None

    def before(self, unit_id: str) -> Tuple[str, ...]:
        meta = self._units.get(unit_id)
        return meta.before if meta is not None else ()

    def after(self, unit_id: str) -> Tuple[str, ...]:
        meta = self._units.get(unit_id)
        return meta.after if meta is not None else ()
