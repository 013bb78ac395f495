# src/autoconfig_sorter/core/exceptions.py
"""
autoconfig-sorter — Canonical Exceptions (v1)

Este módulo define as exceções tipadas levantadas durante a ordenação de
unidades de configuração.

Objetivo:
- Permitir que MetadataView e PrioritySorter levantem falhas semânticas tipadas
- Facilitar o mapeamento determinístico para SorterErrorPayload
- Evitar ValueError/RuntimeError genéricos nas falhas fatais de ordenação

Regras:
- Ambas as falhas abortam a chamada inteira de `sort` (sem resultado parcial).
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SorterException(Exception):
    """Base class para exceções fatais do sorter.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, init=False)
class MetadataUnreadableError(SorterException):
    """A fonte externa não conseguiu produzir order/before/after de uma unidade."""

    unit_id: str = ""

    def __init__(self, unit_id: str, *, reason: Optional[str] = None) -> None:
        details: Dict[str, Any] = {"unit_id": unit_id}
        if reason:
            details["reason"] = reason
        object.__setattr__(self, "unit_id", unit_id)
        object.__setattr__(self, "message", f"Unable to read metadata for unit {unit_id}")
        object.__setattr__(self, "details", details)
        object.__setattr__(
            self,
            "hint",
            "Verifique a declaração da unidade ou o índice pré-computado que a descreve.",
        )


@dataclass(frozen=True, init=False)
class CycleDetectedError(SorterException):
    """
    Ciclo entre declarações before/after dentro do lote.

    Apenas as duas extremidades da aresta que fechou o ciclo são
    reportadas: `current` é a unidade em visita e `other` o predecessor
    que já estava na pilha de visita.
    """

    current: str = ""
    other: str = ""

    def __init__(self, current: str, other: str) -> None:
        object.__setattr__(self, "current", current)
        object.__setattr__(self, "other", other)
        object.__setattr__(
            self, "message", f"AutoConfigure cycle detected between {current} and {other}"
        )
        object.__setattr__(self, "details", {"current": current, "other": other})
        object.__setattr__(
            self,
            "hint",
            "Remova uma das declarações before/after que formam o ciclo. Nenhuma quebra automática é aplicada.",
        )
