# src/autoconfig_sorter/core/sorting/sorter.py
"""
Ordenador de prioridade + ordem parcial das unidades de configuração.

Este módulo produz, para um lote de identificadores, uma ordem total de
ativação determinística que respeita a prioridade numérica e todas as
restrições before/after declaradas, sem carregar as unidades.

Algoritmo, em três fases estritamente ordenadas:
    1. Semente lexicográfica: ordenação ascendente por codepoint.
    2. Passe de prioridade: ordenação *estável* por `order` ascendente;
       empates mantêm a ordem lexicográfica.
    3. Passe de restrições: visita em profundidade (DFS) sobre a ordem
       priorizada, com três conjuntos de trabalho:
           - to_visit  → unidades pendentes, na ordem priorizada
           - resolved  → resultado, em ordem de inserção
           - visiting  → pilha atual da DFS (detecção de ciclo)
       Antes de resolver uma unidade, todos os seus predecessores efetivos
       do lote são resolvidos. Um predecessor que já está em `visiting`
       fecha um ciclo.

Decisões arquiteturais:
    - A DFS usa pilha explícita de (unidade, iterador de predecessores),
      com a mesma ordem de visita da versão recursiva
    - Referências a unidades fora do lote são inertes
    - Ciclos são erro fatal: a chamada inteira é abortada
    - Cada chamada constrói sua própria MetadataView (sem estado global)

Invariantes:
    - Todo predecessor efetivo presente no lote aparece antes da unidade
    - Cada unidade do lote aparece exatamente uma vez na saída
    - O mesmo lote e os mesmos metadados produzem sempre a mesma ordem

Limites explícitos:
    - Não resolve dependências de valor entre unidades
    - Não avalia condições de ativação
    - Não instancia nem ativa unidades
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple, Union
from pathlib import Path

from autoconfig_sorter.core.config.hashing import compute_batch_hash, compute_config_hash
from autoconfig_sorter.core.config.settings import SorterSettings
from autoconfig_sorter.core.errors import exception_to_error
from autoconfig_sorter.core.exceptions import CycleDetectedError, SorterException
from autoconfig_sorter.core.metadata.factory import build_metadata_source
from autoconfig_sorter.core.metadata.source import MetadataSource
from autoconfig_sorter.core.metadata.view import MetadataView
from autoconfig_sorter.core.traceability.trace import SortTrace


def _validated(unit_ids: Iterable[str]) -> List[str]:
    out = list(unit_ids)
    for uid in out:
        if not isinstance(uid, str):
            raise ValueError(f"unit id must be a string, got {uid!r}")
    return out


class PrioritySorter:
    """
    Ordenador canônico de unidades de configuração.

    Args:
        source (MetadataSource): Fonte externa de order/before/after.
        config_hash (Optional[str]): Hash da configuração efetiva que
            originou o sorter; registrado em `sort.started`.
    """

    def __init__(self, source: MetadataSource, *, config_hash: Optional[str] = None):
        if source is None:
            raise ValueError("metadata source must not be None")
        self.source = source
        self.config_hash = config_hash

    @classmethod
    def from_config(
        cls,
        config: Dict[str, Any],
        *,
        base_dir: Optional[Union[str, Path]] = None,
    ) -> "PrioritySorter":
        """Constrói o sorter a partir da seção `sorter` da configuração efetiva."""
        settings = SorterSettings.from_config(config, base_dir=base_dir)
        return cls(build_metadata_source(settings), config_hash=compute_config_hash(config))

    def sort(self, unit_ids: Iterable[str], *, trace: Optional[SortTrace] = None) -> List[str]:
        """
        Retorna as unidades em ordem de ativação.

        Duplicatas na entrada colapsam silenciosamente.

        Args:
            unit_ids (Iterable[str]): Identificadores candidatos.
            trace (Optional[SortTrace]): Event Log opcional da chamada.

        Returns:
            List[str]: Identificadores em ordem total e determinística.

        Raises:
            ValueError: Se algum identificador não for string.
            MetadataUnreadableError: Se a fonte falhar para alguma unidade.
            CycleDetectedError: Se before/after formarem ciclo dentro do lote.
        """
        seeded = sorted(set(_validated(unit_ids)))

        if trace is not None:
            trace.batch_hash = compute_batch_hash(seeded)
            trace.log(
                event="sort.started",
                message=f"sorting {len(seeded)} units",
                size=len(seeded),
                batch_hash=trace.batch_hash,
                config_hash=self.config_hash,
            )
            trace.log(event="sort.seeded", level="DEBUG", order=list(seeded))

        view = MetadataView(seeded, self.source, trace=trace)
        try:
            prioritized = sorted(seeded, key=lambda uid: view.get(uid).order)
            if trace is not None:
                trace.log(event="sort.prioritized", level="DEBUG", order=list(prioritized))

            resolved = self._resolve(prioritized, view)
        except SorterException as exc:
            if trace is not None:
                trace.log(
                    event="sort.failed",
                    level="ERROR",
                    message=exc.message,
                    error=exception_to_error(exc).to_dict(),
                )
            raise

        if trace is not None:
            trace.log(event="sort.resolved", message="sort completed", order=list(resolved))
        return resolved

    def _resolve(self, prioritized: List[str], view: MetadataView) -> List[str]:
        to_visit: Dict[str, None] = dict.fromkeys(prioritized)
        resolved: Dict[str, None] = {}
        visiting: Set[str] = set()

        while to_visit:
            root = next(iter(to_visit))
            self._visit(root, view, to_visit, resolved, visiting)

        return list(resolved)

    def _visit(
        self,
        root: str,
        view: MetadataView,
        to_visit: Dict[str, None],
        resolved: Dict[str, None],
        visiting: Set[str],
    ) -> None:
        visiting.add(root)
        stack: List[Tuple[str, Iterator[str]]] = [(root, iter(view.predecessors_of(root)))]

        while stack:
            current, pending = stack[-1]
            for predecessor in pending:
                if predecessor not in view or predecessor in resolved:
                    continue
                if predecessor in visiting:
                    raise CycleDetectedError(current, predecessor)
                if predecessor in to_visit:
                    visiting.add(predecessor)
                    stack.append((predecessor, iter(view.predecessors_of(predecessor))))
                    break
            else:
                stack.pop()
                visiting.discard(current)
                resolved[current] = None
                to_visit.pop(current, None)


def sort_in_priority_order(
    unit_ids: Iterable[str],
    source: MetadataSource,
    *,
    trace: Optional[SortTrace] = None,
) -> List[str]:
    """Atalho funcional para `PrioritySorter(source).sort(unit_ids)`."""
    return PrioritySorter(source).sort(unit_ids, trace=trace)
