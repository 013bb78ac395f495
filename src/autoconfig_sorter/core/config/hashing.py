# src/autoconfig_sorter/core/config/hashing.py
"""
Hashing canônico para rastreabilidade de configurações e lotes.

O hash representa a identidade estrutural de um valor JSON-serializável
(configuração efetiva ou lote de unidades ordenado) e é usado no
SortTrace para correlacionar chamadas de `sort` com a mesma entrada.

Política (v1): JSON canônico (chaves ordenadas, separadores compactos,
UTF-8) + SHA-256.
"""

import hashlib
import json
from typing import Any, Dict, Iterable


def _digest(value: Any) -> str:
    canonical_json = json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera o hash SHA-256 (64 caracteres hex) da configuração efetiva.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )
    return _digest(config)


def compute_batch_hash(unit_ids: Iterable[str]) -> str:
    """Hash de um lote de unidades, independente da ordem de iteração."""
    return _digest(sorted(set(unit_ids)))
