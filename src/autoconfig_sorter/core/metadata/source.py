# src/autoconfig_sorter/core/metadata/source.py
"""
Contrato canônico de fonte de metadados de ordenação.

Uma fonte responde, para um identificador de unidade, sua prioridade
numérica e seus conjuntos before/after, sem carregar ou executar a
unidade. Duas estratégias intercambiáveis implementam o contrato:

    - IndexedMetadataSource     → índice pré-computado (caminho rápido)
    - DeclarationMetadataSource → leitura sob demanda das declarações (caminho lento)

`FallbackMetadataSource` combina ambas por unidade: usa o índice quando a
unidade foi processada nele e, caso contrário, lê a declaração.

Princípios fundamentais:
    - Fontes são somente leitura
    - Leituras repetidas da mesma unidade produzem o mesmo resultado
    - Falhas de leitura são propagadas (o MetadataView as tipa)

Limites explícitos:
    - Não ordena unidades
    - Não memoiza por chamada de sort (responsabilidade do MetadataView)
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, runtime_checkable

from .index import IndexedMetadataSource


@runtime_checkable
class MetadataSource(Protocol):
    """
    Contrato mínimo de uma fonte de metadados.

    Métodos obrigatórios:
        - order(unit_id): prioridade declarada ou None quando ausente
        - before(unit_id): unidades que devem vir depois
        - after(unit_id): unidades que devem vir antes

    A verificação é estrutural (`@runtime_checkable`), sem herança.
    """

    def order(self, unit_id: str) -> Optional[int]:
        ...

    def before(self, unit_id: str) -> Iterable[str]:
        ...

    def after(self, unit_id: str) -> Iterable[str]:
        ...


class StaticMetadataSource:
    """
    Fonte em memória a partir de um mapeamento já materializado.

    Formato:
        {"com.example.WebConfig": {"order": 10, "before": [...], "after": [...]}}

    Unidades ausentes do mapeamento não declaram nada.
    """

    def __init__(self, entries: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self._entries: Dict[str, Mapping[str, Any]] = dict(entries or {})

    def _entry(self, unit_id: str) -> Mapping[str, Any]:
        return self._entries.get(unit_id, {}) or {}

    def order(self, unit_id: str) -> Optional[int]:
        return self._entry(unit_id).get("order")

    # valores repassados sem conversão; o MetadataView valida os tipos
    def before(self, unit_id: str) -> Iterable[str]:
        return self._entry(unit_id).get("before", ()) or ()

    def after(self, unit_id: str) -> Iterable[str]:
        return self._entry(unit_id).get("after", ()) or ()


class FallbackMetadataSource:
    """Índice quando a unidade foi processada nele; declarações caso contrário."""

    def __init__(self, index: IndexedMetadataSource, declarations: MetadataSource):
        self.index = index
        self.declarations = declarations

    def _pick(self, unit_id: str) -> MetadataSource:
        return self.index if self.index.was_processed(unit_id) else self.declarations

    def order(self, unit_id: str) -> Optional[int]:
        return self._pick(unit_id).order(unit_id)

    def before(self, unit_id: str) -> Iterable[str]:
        return self._pick(unit_id).before(unit_id)

    def after(self, unit_id: str) -> Iterable[str]:
        return self._pick(unit_id).after(unit_id)
