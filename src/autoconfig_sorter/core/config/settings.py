# src/autoconfig_sorter/core/config/settings.py
"""
Seção `sorter` da configuração efetiva.

Exemplo:

    sorter:
      index_paths:
        - meta/autoconfigure-index.yaml
      source_roots:
        - src

Caminhos relativos são resolvidos a partir de `base_dir` (normalmente o
diretório do arquivo de defaults).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import InvalidSorterSettingsError


def _path_list(section: Dict[str, Any], key: str, base_dir: Optional[Path]) -> Tuple[Path, ...]:
    raw = section.get(key, []) or []
    if not isinstance(raw, list) or not all(isinstance(p, str) and p.strip() for p in raw):
        raise InvalidSorterSettingsError(
            f"sorter.{key} deve ser uma lista de caminhos (strings não vazias)"
        )

    paths: List[Path] = []
    for p in raw:
        path = Path(p)
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        paths.append(path)
    return tuple(paths)


@dataclass(frozen=True)
class SorterSettings:
    """Parâmetros que definem quais fontes de metadados o sorter consulta."""

    index_paths: Tuple[Path, ...] = field(default_factory=tuple)
    source_roots: Tuple[Path, ...] = field(default_factory=tuple)

    @classmethod
    def from_config(
        cls,
        config: Dict[str, Any],
        *,
        base_dir: Optional[Union[str, Path]] = None,
    ) -> "SorterSettings":
        section = config.get("sorter", {}) or {}
        if not isinstance(section, dict):
            raise InvalidSorterSettingsError(
                f"Seção 'sorter' deve ser dict, recebido: {type(section).__name__}"
            )

        base = Path(base_dir) if base_dir is not None else None
        return cls(
            index_paths=_path_list(section, "index_paths", base),
            source_roots=_path_list(section, "source_roots", base),
        )
