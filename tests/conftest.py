# tests/conftest.py
"""
Fixtures compartilhados para testes do autoconfig-sorter.

Este módulo define fixtures reutilizáveis que fornecem:
- fontes de metadados em memória, determinísticas
- conteúdos YAML de configuração e de índice
- uma árvore de código-fonte mínima com unidades decoradas

Decisões arquiteturais:
    - Fontes em memória evitam filesystem nos testes do sorter
    - A árvore de código é escrita em `tmp_path` e nunca importada
    - Imports do pacote são lazy para que falhas de import fiquem
      localizadas nos testes que dependem deles

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

from pathlib import Path
from textwrap import dedent

import pytest


# =====================================================
# Fontes de metadados em memória
# =====================================================

@pytest.fixture
def static_source():
    """
    Factory de `StaticMetadataSource` a partir de um dicionário.

    Uso:
        source = static_source({"A": {"order": 0, "after": ["B"]}})

    Returns:
        Callable: função que recebe o mapeamento e devolve a fonte.
    """
    from autoconfig_sorter.core.metadata.source import StaticMetadataSource

    def _make(entries=None):
        return StaticMetadataSource(entries or {})

    return _make


@pytest.fixture
def CountingSource():
    """
    Classe de fonte duck-typed que conta leituras por unidade.

    Usada para verificar a memoização do MetadataView: cada unidade deve
    ser extraída no máximo uma vez por chamada.
    """

    class _CountingSource:
        def __init__(self, entries=None, broken=()):
            self.entries = dict(entries or {})
            self.broken = set(broken)
            self.calls = {}

        def _hit(self, unit_id):
            self.calls[unit_id] = self.calls.get(unit_id, 0) + 1
            if unit_id in self.broken:
                raise OSError(f"cannot read {unit_id}")
            return self.entries.get(unit_id, {})

        def order(self, unit_id):
            return self._hit(unit_id).get("order")

        def before(self, unit_id):
            return self.entries.get(unit_id, {}).get("before", [])

        def after(self, unit_id):
            return self.entries.get(unit_id, {}).get("after", [])

    return _CountingSource


# =====================================================
# Configuração e índice
# =====================================================

@pytest.fixture
def sorter_config_defaults_yaml() -> str:
    """YAML de defaults com as duas fontes de metadados configuradas."""
    return """\
sorter:
  index_paths:
    - meta/index.yaml
  source_roots:
    - src
"""


@pytest.fixture
def sorter_config_local_yaml() -> str:
    """YAML local que substitui apenas as raízes de código (lista → sobrescrita)."""
    return """\
sorter:
  source_roots:
    - lib
"""


@pytest.fixture
def index_yaml() -> str:
    """Índice pré-computado com três unidades, uma delas sem declarações."""
    return """\
units:
  app.web.WebConfig:
    order: 1
    after:
      - app.data.DataConfig
  app.data.DataConfig:
    before:
      - app.web.WebConfig
  app.core.CoreConfig: {}
"""


# =====================================================
# Árvore de código-fonte com declarações
# =====================================================

@pytest.fixture
def unit_sources(tmp_path: Path) -> Path:
    """
    Escreve uma árvore `src/app` com unidades decoradas e retorna a raiz `src`.

    Unidades:
        - app.core.CoreConfig  → order HIGHEST_PRECEDENCE
        - app.data.DataConfig  → after por nome (import de módulo com alias)
        - app.data.Plain       → sem declarações
        - app.web.WebConfig    → order -10, after por referência e por nome,
                                  before por string; possui classe aninhada
        - app.side_effect.Guarded → módulo que falharia se importado
    """
    root = tmp_path / "src"
    pkg = root / "app"
    pkg.mkdir(parents=True)
    (pkg / "__init__.py").write_text("", encoding="utf-8")

    (pkg / "core.py").write_text(dedent("""\
        from autoconfig_sorter import auto_configure_order, HIGHEST_PRECEDENCE


        @auto_configure_order(HIGHEST_PRECEDENCE)
        class CoreConfig:
            pass
        """), encoding="utf-8")

    (pkg / "data.py").write_text(dedent("""\
        import autoconfig_sorter as acs


        @acs.auto_configure_after(name="app.core.CoreConfig")
        class DataConfig:
            pass


        class Plain:
            pass
        """), encoding="utf-8")

    (pkg / "web.py").write_text(dedent("""\
        from autoconfig_sorter import (
            auto_configure_after,
            auto_configure_before,
            auto_configure_order,
        )
        from app.core import CoreConfig
        from . import data


        @auto_configure_order(-10)
        @auto_configure_after(CoreConfig, data.DataConfig, name=["legacy.Missing"])
        @auto_configure_before("app.metrics.MetricsConfig")
        class WebConfig:
            class Nested:
                pass
        """), encoding="utf-8")

    (pkg / "side_effect.py").write_text(dedent("""\
        from autoconfig_sorter import auto_configure_order

        raise RuntimeError("module must not be imported")


        @auto_configure_order(5)
        class Guarded:
            pass
        """), encoding="utf-8")

    return root
