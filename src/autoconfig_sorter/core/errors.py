# src/autoconfig_sorter/core/errors.py
"""
autoconfig-sorter — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros reportados pelo sorter ao
processo de ativação que o consome.

Falhas de ordenação sinalizam uma contradição real de configuração: o
chamador deve tratá-las como falha de inicialização, nunca como algo a
ser repetido automaticamente. Por isso o payload é:

- explícito
- serializável
- acionável (sempre com `hint`)
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from autoconfig_sorter.core.exceptions import (
    CycleDetectedError,
    MetadataUnreadableError,
)
from autoconfig_sorter.core.config.errors import ConfigError


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SorterErrorPayload:
    """
    Payload canônico de erro do sorter.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - retryable: sempre False para falhas de ordenação
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    retryable: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

METADATA_UNREADABLE = "METADATA_UNREADABLE"
CYCLE_DETECTED = "CYCLE_DETECTED"
SORTER_CONFIGURATION_ERROR = "SORTER_CONFIGURATION_ERROR"
SORTER_UNEXPECTED_ERROR = "SORTER_UNEXPECTED_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def metadata_unreadable(
    *,
    unit_id: str,
    reason: Optional[str] = None,
    hint: str = "Verifique a declaração da unidade ou o índice pré-computado que a descreve.",
) -> SorterErrorPayload:
    return SorterErrorPayload(
        type=METADATA_UNREADABLE,
        message=f"Unable to read metadata for unit {unit_id}",
        details={
            "unit_id": unit_id,
            "reason": reason,
        },
        hint=hint,
    )


def cycle_detected(
    *,
    current: str,
    other: str,
    hint: str = "Remova uma das declarações before/after que formam o ciclo. Nenhuma quebra automática é aplicada.",
) -> SorterErrorPayload:
    return SorterErrorPayload(
        type=CYCLE_DETECTED,
        message=f"AutoConfigure cycle detected between {current} and {other}",
        details={
            "current": current,
            "other": other,
        },
        hint=hint,
    )


def sorter_configuration_error(
    *,
    message: str = "Configuração inválida para o sorter",
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Revise os arquivos de configuração e de índice antes de reiniciar.",
) -> SorterErrorPayload:
    return SorterErrorPayload(
        type=SORTER_CONFIGURATION_ERROR,
        message=message,
        details=details or {},
        hint=hint,
    )


def exception_to_error(exc: Exception) -> SorterErrorPayload:
    """Converte exceções do sorter em SorterErrorPayload (serializável, acionável).

    Regras:
    - MetadataUnreadableError e CycleDetectedError mantêm seus detalhes estruturados.
    - ConfigError vira SORTER_CONFIGURATION_ERROR.
    - Outras exceções são encapsuladas sem expor stack trace.
    """
    if isinstance(exc, MetadataUnreadableError):
        cause = exc.__cause__
        return metadata_unreadable(
            unit_id=exc.unit_id,
            reason=exc.details.get("reason") or (str(cause) if cause else None),
        )

    if isinstance(exc, CycleDetectedError):
        return cycle_detected(current=exc.current, other=exc.other)

    if isinstance(exc, ConfigError):
        return sorter_configuration_error(
            message=str(exc) or "Configuração inválida para o sorter",
            details={"exception_class": exc.__class__.__name__},
        )

    return SorterErrorPayload(
        type=SORTER_UNEXPECTED_ERROR,
        message=str(exc) or "Erro inesperado durante a ordenação",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o log técnico e a configuração do sorter",
    )
