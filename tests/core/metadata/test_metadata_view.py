# tests/core/metadata/test_metadata_view.py
"""
Testes do MetadataView (cache por chamada + predecessores efetivos).

Os testes asseguram que:
- cada unidade é extraída da fonte no máximo uma vez
- `order` ausente vira LOWEST_PRECEDENCE
- predecessores efetivos unem `after` próprio e `before` de terceiros
- falhas e valores inválidos da fonte viram MetadataUnreadableError
"""

import pytest

try:
    from autoconfig_sorter.core.metadata.view import MetadataView
    from autoconfig_sorter.core.metadata.types import LOWEST_PRECEDENCE
    from autoconfig_sorter.core.exceptions import MetadataUnreadableError
except Exception as e:  # noqa: BLE001
    MetadataView = None
    LOWEST_PRECEDENCE = None
    MetadataUnreadableError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing metadata view. Implement:
- src/autoconfig_sorter/core/metadata/view.py (MetadataView)
Import error: {_IMPORT_ERR}
""")


def test_extraction_is_memoized(CountingSource):
    """
    Verifica que a fonte é consultada uma única vez por unidade, mesmo
    com acessos repetidos via `get` e `predecessors_of`.
    """
    _require_imports()
    source = CountingSource({"A": {"order": 3}, "B": {"before": ["A"]}})
    view = MetadataView(["A", "B"], source)

    view.get("A")
    view.get("A")
    view.predecessors_of("A")
    view.predecessors_of("B")

    assert source.calls == {"A": 1, "B": 1}


def test_missing_order_defaults_to_lowest(static_source):
    _require_imports()
    view = MetadataView(["A"], static_source())

    meta = view.get("A")

    assert meta.order == LOWEST_PRECEDENCE
    assert meta.before == ()
    assert meta.after == ()


def test_predecessors_union_in_stable_order(static_source):
    """
    Predecessores de X: primeiro o `after` de X (ordem de declaração),
    depois as unidades cujo `before` cita X (ordem lexicográfica), sem
    duplicatas. Referências externas permanecem; o sorter as ignora.
    """
    _require_imports()
    source = static_source({
        "X": {"after": ["M", "external.Z", "C"]},
        "D": {"before": ["X"]},
        "C": {"before": ["X"]},
        "M": {},
    })
    view = MetadataView(["X", "D", "C", "M"], source)

    assert view.predecessors_of("X") == ["M", "external.Z", "C", "D"]
    assert view.predecessors_of("D") == []


def test_lookup_outside_batch_is_key_error(static_source):
    _require_imports()
    view = MetadataView(["A"], static_source({"B": {"order": 1}}))

    assert "B" not in view
    with pytest.raises(KeyError):
        view.get("B")


def test_source_failure_is_wrapped(CountingSource):
    _require_imports()
    view = MetadataView(["bad"], CountingSource(broken={"bad"}))

    with pytest.raises(MetadataUnreadableError) as info:
        view.get("bad")

    assert info.value.unit_id == "bad"
    assert info.value.details["reason"] == "cannot read bad"


@pytest.mark.parametrize(
    "entry",
    [
        {"order": "10"},
        {"order": True},
        {"after": "B"},
        {"before": ["B", 3]},
    ],
)
def test_invalid_values_are_unreadable(static_source, entry):
    """Valores de tipo inválido vindos da fonte não são aceitos silenciosamente."""
    _require_imports()
    view = MetadataView(["A"], static_source({"A": entry}))

    with pytest.raises(MetadataUnreadableError):
        view.get("A")


def test_unordered_relations_are_sorted(static_source):
    """
    `set`/`frozenset` não têm ordem de declaração: a view os materializa
    em ordem lexicográfica. Sequências mantêm a ordem declarada.
    """
    _require_imports()
    source = static_source({
        "X": {"after": {"q", "b", "m"}},
        "Y": {"after": ["q", "b", "m"], "before": frozenset({"X", "Z"})},
    })
    view = MetadataView(["X", "Y"], source)

    assert view.get("X").after == ("b", "m", "q")
    assert view.get("Y").after == ("q", "b", "m")
    assert view.get("Y").before == ("X", "Z")
