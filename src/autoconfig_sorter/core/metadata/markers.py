# src/autoconfig_sorter/core/metadata/markers.py
"""Decorators declarativos de ordenação aplicados às classes de unidade.

Em runtime os decorators apenas registram atributos na classe. O sorter
nunca importa as unidades: `DeclarationMetadataSource` reconhece estes
mesmos decorators lendo o código-fonte (AST).
"""

from __future__ import annotations

from typing import Callable, Iterable, Tuple, TypeVar, Union

from .types import HIGHEST_PRECEDENCE, LOWEST_PRECEDENCE

T = TypeVar("T", bound=type)

ORDER_ATTR = "__autoconfigure_order__"
BEFORE_ATTR = "__autoconfigure_before__"
AFTER_ATTR = "__autoconfigure_after__"

# Nomes reconhecidos pelo leitor de declarações.
ORDER_DECORATOR = "auto_configure_order"
BEFORE_DECORATOR = "auto_configure_before"
AFTER_DECORATOR = "auto_configure_after"

__all__ = [
    "HIGHEST_PRECEDENCE",
    "LOWEST_PRECEDENCE",
    "auto_configure_order",
    "auto_configure_before",
    "auto_configure_after",
    "qualified_name",
]


def qualified_name(unit: Union[type, str]) -> str:
    """Identificador pontuado (`modulo.Classe`) de uma classe ou string."""
    if isinstance(unit, str):
        return unit
    return f"{unit.__module__}.{unit.__qualname__}"


def _relations(units: Iterable[Union[type, str]], name: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    values = [qualified_name(u) for u in units]
    if isinstance(name, str):
        values.append(name)
    else:
        values.extend(name)
    return tuple(dict.fromkeys(values))


def auto_configure_order(value: int = LOWEST_PRECEDENCE) -> Callable[[T], T]:
    """Define a prioridade numérica da unidade (menor valor roda antes)."""

    def decorator(cls: T) -> T:
        setattr(cls, ORDER_ATTR, int(value))
        return cls

    return decorator


def auto_configure_before(
    *units: Union[type, str],
    name: Union[str, Iterable[str]] = (),
) -> Callable[[T], T]:
    """Declara unidades que devem ser ativadas depois desta."""

    def decorator(cls: T) -> T:
        setattr(cls, BEFORE_ATTR, _relations(units, name))
        return cls

    return decorator


def auto_configure_after(
    *units: Union[type, str],
    name: Union[str, Iterable[str]] = (),
) -> Callable[[T], T]:
    """Declara unidades que devem ser ativadas antes desta."""

    def decorator(cls: T) -> T:
        setattr(cls, AFTER_ATTR, _relations(units, name))
        return cls

    return decorator
