# tests/core/sorting/test_sorter_cycles.py
"""
Testes de rejeição de ciclos e de falhas fatais do PrioritySorter.

Os testes asseguram que:
- qualquer ciclo before/after dentro do lote aborta a chamada inteira
- o erro nomeia as duas extremidades da aresta que fechou o ciclo
- falhas da fonte de metadados viram MetadataUnreadableError

Decisões arquiteturais:
    - Ciclos não são quebrados nem resolvidos automaticamente
    - Nenhuma ordenação parcial é retornada
"""

import pytest

try:
    from autoconfig_sorter.core.sorting.sorter import PrioritySorter
    from autoconfig_sorter.core.exceptions import CycleDetectedError, MetadataUnreadableError
except Exception as e:  # noqa: BLE001
    PrioritySorter = None
    CycleDetectedError = None
    MetadataUnreadableError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha antecipada quando o sorter ou suas exceções não existem."""
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing sorter errors. Implement:
- CycleDetectedError
- MetadataUnreadableError
Import error: {_IMPORT_ERR}
""")


def test_two_unit_cycle(static_source):
    """
    X.after={Y} e Y.after={X} formam ciclo.

    A DFS parte de X, visita Y e encontra X ainda na pilha: o erro
    reporta primeiro a unidade em visita (Y) e depois o predecessor (X).
    """
    _require_imports()
    source = static_source({"X": {"after": ["Y"]}, "Y": {"after": ["X"]}})

    with pytest.raises(CycleDetectedError) as info:
        PrioritySorter(source).sort(["X", "Y"])

    assert info.value.current == "Y"
    assert info.value.other == "X"
    assert str(info.value) == "AutoConfigure cycle detected between Y and X"


def test_three_unit_cycle_reports_closing_edge(static_source):
    """
    Em ciclos maiores apenas a aresta que fechou o ciclo é reportada,
    não o caminho completo.
    """
    _require_imports()
    source = static_source({
        "A": {"after": ["C"]},
        "B": {"after": ["A"]},
        "C": {"after": ["B"]},
    })

    with pytest.raises(CycleDetectedError) as info:
        PrioritySorter(source).sort(["A", "B", "C"])

    assert (info.value.current, info.value.other) == ("B", "A")


def test_cycle_through_before_declarations(static_source):
    _require_imports()
    source = static_source({"A": {"before": ["B"]}, "B": {"before": ["A"]}})

    with pytest.raises(CycleDetectedError):
        PrioritySorter(source).sort(["A", "B"])


def test_self_reference_is_a_cycle(static_source):
    _require_imports()
    source = static_source({"A": {"after": ["A"]}})

    with pytest.raises(CycleDetectedError) as info:
        PrioritySorter(source).sort(["A"])

    assert (info.value.current, info.value.other) == ("A", "A")


def test_cycle_outside_batch_is_ignored(static_source):
    """Um ciclo que só se fecha por unidades fora do lote não é erro."""
    _require_imports()
    source = static_source({"A": {"after": ["Z"]}, "Z": {"after": ["A"]}})

    assert PrioritySorter(source).sort(["A"]) == ["A"]


def test_unreadable_metadata_aborts(CountingSource):
    """
    Verifica que a falha da fonte para uma unidade aborta o sort com
    MetadataUnreadableError, nomeando a unidade e preservando a causa.
    """
    _require_imports()
    source = CountingSource(broken={"broken.Config"})

    with pytest.raises(MetadataUnreadableError) as info:
        PrioritySorter(source).sort(["ok.Config", "broken.Config"])

    assert info.value.unit_id == "broken.Config"
    assert isinstance(info.value.__cause__, OSError)
    assert "broken.Config" in str(info.value)
