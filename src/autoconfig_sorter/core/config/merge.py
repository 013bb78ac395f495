# src/autoconfig_sorter/core/config/merge.py
"""
Deep-merge determinístico entre configuração base e overrides locais.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (ex.: `sorter.source_roots` local substitui o default)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

O merge é puramente funcional: nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina `base` com `override` produzindo um novo dicionário.

    Args:
        base (Dict[str, Any]): Configuração base (defaults).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: Se a mesma chave tiver tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)

    for key, new_value in override.items():
        if key not in merged:
            merged[key] = deepcopy(new_value)
            continue

        current = merged[key]

        if isinstance(current, dict) and isinstance(new_value, dict):
            merged[key] = deep_merge(current, new_value)
        elif isinstance(new_value, list) and isinstance(current, list):
            merged[key] = deepcopy(new_value)
        elif type(current) is not type(new_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(current).__name__} vs {type(new_value).__name__}"
            )
        else:
            merged[key] = deepcopy(new_value)

    return merged
