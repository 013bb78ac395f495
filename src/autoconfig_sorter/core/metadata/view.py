# src/autoconfig_sorter/core/metadata/view.py
"""
MetadataView — visão somente leitura, memoizada por unidade, sobre uma
fonte externa de metadados.

Cada chamada de `PrioritySorter.sort` constrói sua própria view para o
lote recebido. A extração de metadados pode ser custosa (parsing de
declarações), por isso é feita sob demanda no primeiro acesso de cada
unidade e reaproveitada até o fim da chamada.

Decisões arquiteturais:
    - O lote é fixado na construção; consultas fora dele são erro de programação
    - Qualquer falha da fonte vira MetadataUnreadableError com o identificador
    - `order` ausente equivale a LOWEST_PRECEDENCE
    - A view nunca chama o sorter (fluxo de dados unidirecional)

Invariantes:
    - Cada unidade é extraída no máximo uma vez por view
    - O conjunto de predecessores efetivos de X é X.after unido às unidades
      Y do lote cujo Y.before contém X

Limites explícitos:
    - Não ordena unidades
    - Não persiste cache entre chamadas de sort
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from autoconfig_sorter.core.exceptions import MetadataUnreadableError
from autoconfig_sorter.core.traceability.trace import SortTrace

from .source import MetadataSource
from .types import UnitMetadata


def _identifiers(unit_id: str, kind: str, values: Iterable[str]) -> List[str]:
    if isinstance(values, str):
        raise TypeError(f"'{kind}' de {unit_id} deve ser coleção de identificadores, não string")
    out = list(values)
    if not all(isinstance(v, str) for v in out):
        raise TypeError(f"'{kind}' de {unit_id} contém identificadores não textuais")
    # iteração de set depende do hash de str (PYTHONHASHSEED)
    if isinstance(values, (set, frozenset)):
        out.sort()
    return out


class MetadataView:
    """Cache por unidade de order/before/after para um lote fixo."""

    def __init__(
        self,
        unit_ids: Iterable[str],
        source: MetadataSource,
        *,
        trace: Optional[SortTrace] = None,
    ):
        self._batch = frozenset(unit_ids)
        self._source = source
        self._trace = trace
        self._cache: Dict[str, UnitMetadata] = {}
        self._declared_before: Optional[Dict[str, List[str]]] = None

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._batch

    def _extract(self, unit_id: str) -> UnitMetadata:
        try:
            order = self._source.order(unit_id)
            if order is not None and (not isinstance(order, int) or isinstance(order, bool)):
                raise TypeError(f"order de {unit_id} deve ser inteiro, recebido: {type(order).__name__}")
            before = _identifiers(unit_id, "before", self._source.before(unit_id))
            after = _identifiers(unit_id, "after", self._source.after(unit_id))
        except MetadataUnreadableError:
            raise
        except Exception as exc:
            raise MetadataUnreadableError(unit_id, reason=str(exc) or exc.__class__.__name__) from exc

        return UnitMetadata.build(unit_id, order=order, before=before, after=after)

    def get(self, unit_id: str) -> UnitMetadata:
        if unit_id not in self._batch:
            raise KeyError(unit_id)

        meta = self._cache.get(unit_id)
        if meta is None:
            meta = self._extract(unit_id)
            self._cache[unit_id] = meta
            if self._trace is not None:
                self._trace.log(
                    event="metadata.loaded",
                    level="DEBUG",
                    message=f"metadata loaded for {unit_id}",
                    unit_id=unit_id,
                    order=meta.order,
                    before=list(meta.before),
                    after=list(meta.after),
                )
        return meta

    def _before_declarations(self) -> Dict[str, List[str]]:
        # alvo -> unidades do lote que declaram `before` apontando para ele
        if self._declared_before is None:
            index: Dict[str, List[str]] = {}
            for declarer in sorted(self._batch):
                for target in self.get(declarer).before:
                    index.setdefault(target, []).append(declarer)
            self._declared_before = index
        return self._declared_before

    def predecessors_of(self, unit_id: str) -> List[str]:
        """
        Predecessores efetivos da unidade, em ordem de inserção sem duplicatas:
        primeiro o `after` próprio (ordem de declaração), depois as unidades
        do lote cujo `before` a cita (ordem lexicográfica).

        Referências a unidades fora do lote são mantidas aqui; o sorter as
        ignora.
        """
        own = self.get(unit_id).after
        declared = self._before_declarations().get(unit_id, [])
        return list(dict.fromkeys([*own, *declared]))
