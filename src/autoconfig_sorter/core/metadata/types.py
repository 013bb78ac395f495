# src/autoconfig_sorter/core/metadata/types.py
"""
Tipos canônicos de metadados de ordenação.

`UnitMetadata` é o formato único em que qualquer fonte (índice
pré-computado ou leitura de declarações) entrega order/before/after de
uma unidade ao sorter.

Invariantes:
    - UnitMetadata é imutável após criada
    - `order` ausente equivale a LOWEST_PRECEDENCE
    - `before`/`after` podem citar unidades fora do lote (referências inertes)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


# Valores de borda de um inteiro de 32 bits com sinal; menor valor roda antes.
HIGHEST_PRECEDENCE: int = -(2**31)
LOWEST_PRECEDENCE: int = 2**31 - 1


@dataclass(frozen=True)
class UnitMetadata:
    """
    Metadados de ordenação de uma unidade de configuração.

    Campos:
        - unit_id: identificador da unidade
        - order: prioridade numérica explícita (menor = mais cedo)
        - before: unidades que devem vir estritamente depois desta
        - after: unidades que devem vir estritamente antes desta

    `before` e `after` são tuplas para preservar a ordem de declaração
    (relevante para a ordem de visita na resolução topológica); a
    duplicidade é removida na construção.
    """

    unit_id: str
    order: int = LOWEST_PRECEDENCE
    before: tuple = field(default_factory=tuple)
    after: tuple = field(default_factory=tuple)

    @classmethod
    def build(
        cls,
        unit_id: str,
        *,
        order: Optional[int] = None,
        before: Iterable[str] = (),
        after: Iterable[str] = (),
    ) -> "UnitMetadata":
        return cls(
            unit_id=unit_id,
            order=LOWEST_PRECEDENCE if order is None else int(order),
            before=tuple(dict.fromkeys(before)),
            after=tuple(dict.fromkeys(after)),
        )

