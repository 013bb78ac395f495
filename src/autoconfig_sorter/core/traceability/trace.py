# src/autoconfig_sorter/core/traceability/trace.py
"""
SortTrace — Event Log estruturado de uma chamada de ordenação.

O sorter não depende de framework de logging: cada chamada de `sort`
pode receber um `SortTrace`, e cada fase registra nele um evento
explícito. O chamador decide o que fazer com os eventos (persistir,
imprimir, anexar a um relatório de inicialização).

Eventos emitidos:
    - sort.started      → tamanho e hash do lote
    - metadata.loaded   → order/before/after de cada unidade (DEBUG)
    - sort.seeded       → ordem lexicográfica
    - sort.prioritized  → ordem após o passe de prioridade
    - sort.resolved     → ordem final
    - sort.failed       → payload de erro canônico

Invariantes:
    - `events` é sempre uma lista na ordem real de emissão
    - Todo evento carrega `trace_id`, `event`, `level` e `timestamp` (UTC ISO 8601)
    - O trace pertence a uma única chamada; não é compartilhado entre threads

Limites explícitos:
    - Não ordena unidades
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class SortTrace:
    """
    Registro ordenado dos eventos de uma chamada de `sort`.

    Campos:
        - trace_id: identificador da chamada (uuid4 quando omitido)
        - batch_hash: hash do lote, preenchido no evento `sort.started`
        - events: Event Log ordenado
    """

    trace_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    batch_hash: Optional[str] = None
    events: List[Dict[str, Any]] = field(default_factory=list)

    def log(self, *, event: str, level: str = "INFO", message: str = "", **extra: Any) -> None:
        record = {
            "trace_id": self.trace_id,
            "event": event,
            "level": level,
            "message": message,
            "timestamp": _utc_now_iso(),
        }
        record.update(extra)
        self.events.append(record)

    def of(self, event: str) -> List[Dict[str, Any]]:
        """Eventos de um tipo, na ordem de emissão."""
        return [e for e in self.events if e["event"] == event]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trace_id": self.trace_id,
            "batch_hash": self.batch_hash,
            "events": [dict(e) for e in self.events],
        }

    def save(self, path: Union[str, Path]) -> Path:
        """Persiste o trace em JSON determinístico (chaves ordenadas)."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(
            json.dumps(self.to_dict(), ensure_ascii=False, indent=2, sort_keys=True),
            encoding="utf-8",
        )
        return p

    @classmethod
    def load(cls, path: Union[str, Path]) -> "SortTrace":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(
            trace_id=data["trace_id"],
            batch_hash=data.get("batch_hash"),
            events=list(data.get("events", [])),
        )
