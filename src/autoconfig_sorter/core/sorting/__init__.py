# src/autoconfig_sorter/core/sorting/__init__.py
"""
Ordenação de unidades de configuração (prioridade + ordem parcial).

Componentes:
    - sorter → `PrioritySorter`: semente lexicográfica, passe de prioridade
      estável e resolução topológica com detecção de ciclo

Este pacote consome `core.metadata` e nunca é chamado de volta por ele.
"""

from .sorter import PrioritySorter, sort_in_priority_order

__all__ = ["PrioritySorter", "sort_in_priority_order"]
