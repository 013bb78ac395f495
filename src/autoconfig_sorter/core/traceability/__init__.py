# src/autoconfig_sorter/core/traceability/__init__.py
"""Event Log estruturado das chamadas de ordenação (ver `trace.SortTrace`)."""

from .trace import SortTrace

__all__ = ["SortTrace"]
