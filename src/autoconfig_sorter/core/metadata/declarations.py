# src/autoconfig_sorter/core/metadata/declarations.py
"""
Leitura sob demanda das declarações de ordenação (caminho lento).

Este módulo deriva order/before/after de uma unidade lendo o código-fonte
que a declara, via AST, **sem importar o módulo**. Importar uma unidade
poderia disparar efeitos colaterais de ativação, justamente o que a
ordenação deve preceder.

Identificador esperado: `pacote.modulo.Classe` (classes aninhadas são
aceitas: `pacote.modulo.Externa.Interna`). O módulo é localizado nas
raízes de código configuradas como `pacote/modulo.py` ou
`pacote/modulo/__init__.py`; o prefixo de módulo mais longo vence.

Declarações reconhecidas (ver `markers`):

    @auto_configure_order(10)
    @auto_configure_after(CoreConfig, name="other.pkg.Legacy")
    @auto_configure_before("com.example.WebConfig")
    class DataConfig: ...

Regras de leitura:
    - argumentos posicionais: literais string ou referências a classes
      (`Name`/`Attribute`) resolvidas pelos imports do módulo ou pelas
      classes locais
    - `name=`: string ou lista/tupla de strings
    - valores posicionais vêm antes dos nomes; duplicatas são removidas
    - `order` aceita literal inteiro (inclusive negativo) ou as constantes
      HIGHEST_PRECEDENCE / LOWEST_PRECEDENCE
    - quando o mesmo decorator aparece mais de uma vez, o mais externo vence
      (mesma semântica da aplicação em runtime)

Qualquer falha (arquivo ausente, sintaxe inválida, classe inexistente,
argumento não literal) levanta `DeclarationReadError`.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .markers import AFTER_DECORATOR, BEFORE_DECORATOR, ORDER_DECORATOR
from .types import HIGHEST_PRECEDENCE, LOWEST_PRECEDENCE, UnitMetadata


_PRECEDENCE_CONSTANTS = {
    "HIGHEST_PRECEDENCE": HIGHEST_PRECEDENCE,
    "LOWEST_PRECEDENCE": LOWEST_PRECEDENCE,
}


class DeclarationReadError(Exception):
    """Falha ao localizar ou interpretar a declaração de uma unidade."""


@dataclass
class _ParsedModule:
    name: str
    path: Path
    aliases: Dict[str, str] = field(default_factory=dict)
    classes: Dict[str, ast.ClassDef] = field(default_factory=dict)


def _dotted(node: ast.AST) -> Optional[List[str]]:
    parts: List[str] = []
    while isinstance(node, ast.Attribute):
        parts.append(node.attr)
        node = node.value
    if not isinstance(node, ast.Name):
        return None
    parts.append(node.id)
    return list(reversed(parts))


def _collect_classes(body: Sequence[ast.stmt], prefix: str, out: Dict[str, ast.ClassDef]) -> None:
    for stmt in body:
        if isinstance(stmt, ast.ClassDef):
            qualname = f"{prefix}{stmt.name}"
            out[qualname] = stmt
            _collect_classes(stmt.body, f"{qualname}.", out)


class DeclarationMetadataSource:
    """Fonte de metadados que lê decorators de ordenação direto do código-fonte."""

    def __init__(self, source_roots: Sequence[Union[str, Path]]):
        self.source_roots: Tuple[Path, ...] = tuple(Path(r) for r in source_roots)
        self._modules: Dict[str, _ParsedModule] = {}
        self._units: Dict[str, UnitMetadata] = {}

    # -----------------------------
    # Localização e parsing
    # -----------------------------
    def _module_file(self, module_parts: List[str]) -> Optional[Path]:
        for root in self.source_roots:
            as_module = root.joinpath(*module_parts).with_suffix(".py")
            if as_module.is_file():
                return as_module
            as_package = root.joinpath(*module_parts, "__init__.py")
            if as_package.is_file():
                return as_package
        return None

    def _locate(self, unit_id: str) -> Tuple[_ParsedModule, str]:
        parts = unit_id.split(".")
        if len(parts) < 2 or not all(parts):
            raise DeclarationReadError(f"Identificador não qualificado: {unit_id}")

        for cut in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:cut])
            if module_name in self._modules:
                return self._modules[module_name], ".".join(parts[cut:])
            path = self._module_file(parts[:cut])
            if path is not None:
                return self._parse(module_name, path), ".".join(parts[cut:])

        roots = ", ".join(str(r) for r in self.source_roots) or "<nenhuma>"
        raise DeclarationReadError(
            f"Módulo de {unit_id} não encontrado nas raízes: {roots}"
        )

    def _parse(self, module_name: str, path: Path) -> _ParsedModule:
        try:
            tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        except (OSError, SyntaxError, ValueError) as exc:
            raise DeclarationReadError(f"Falha ao ler {path}: {exc}") from exc

        parsed = _ParsedModule(name=module_name, path=path)
        package = module_name if path.name == "__init__.py" else module_name.rpartition(".")[0]

        for stmt in tree.body:
            if isinstance(stmt, ast.Import):
                for alias in stmt.names:
                    if alias.asname:
                        parsed.aliases[alias.asname] = alias.name
                    else:
                        head = alias.name.split(".")[0]
                        parsed.aliases[head] = head
            elif isinstance(stmt, ast.ImportFrom):
                origin = self._import_origin(package, stmt)
                for alias in stmt.names:
                    if alias.name == "*":
                        continue
                    target = f"{origin}.{alias.name}" if origin else alias.name
                    parsed.aliases[alias.asname or alias.name] = target

        _collect_classes(tree.body, "", parsed.classes)
        # setdefault nunca sobrescreve uma entrada já publicada
        return self._modules.setdefault(module_name, parsed)

    @staticmethod
    def _import_origin(package: str, stmt: ast.ImportFrom) -> str:
        if not stmt.level:
            return stmt.module or ""
        base = package.split(".") if package else []
        drop = stmt.level - 1
        if drop > len(base):
            raise DeclarationReadError(
                f"Import relativo além do pacote raiz em {package or '<raiz>'}"
            )
        base = base[: len(base) - drop] if drop else base
        if stmt.module:
            base = base + stmt.module.split(".")
        return ".".join(base)

    # -----------------------------
    # Interpretação dos decorators
    # -----------------------------
    def _resolve_reference(self, node: ast.AST, module: _ParsedModule) -> str:
        if isinstance(node, ast.Constant) and isinstance(node.value, str):
            return node.value

        parts = _dotted(node)
        if parts is None:
            raise DeclarationReadError(
                f"Referência não literal em {module.path}:{getattr(node, 'lineno', '?')}"
            )

        head, rest = parts[0], parts[1:]
        if head in module.aliases:
            return ".".join([module.aliases[head], *rest])
        local = ".".join(parts)
        if local in module.classes:
            return f"{module.name}.{local}"
        raise DeclarationReadError(
            f"Referência '{local}' não resolvida em {module.path}:{node.lineno}"
        )

    def _names(self, node: ast.AST, module: _ParsedModule) -> List[str]:
        if isinstance(node, ast.Constant) and isinstance(node.value, str):
            return [node.value]
        if isinstance(node, (ast.List, ast.Tuple)) and all(
            isinstance(e, ast.Constant) and isinstance(e.value, str) for e in node.elts
        ):
            return [e.value for e in node.elts]
        raise DeclarationReadError(
            f"'name' deve ser string ou lista de strings em {module.path}:{node.lineno}"
        )

    def _order_value(self, call: ast.Call, module: _ParsedModule) -> int:
        values = list(call.args) + [kw.value for kw in call.keywords if kw.arg == "value"]
        if not values:
            return LOWEST_PRECEDENCE
        node = values[0]

        parts = _dotted(node)
        if parts is not None and parts[-1] in _PRECEDENCE_CONSTANTS:
            return _PRECEDENCE_CONSTANTS[parts[-1]]

        try:
            value = ast.literal_eval(node)
        except ValueError as exc:
            raise DeclarationReadError(
                f"order não literal em {module.path}:{node.lineno}"
            ) from exc
        if not isinstance(value, int) or isinstance(value, bool):
            raise DeclarationReadError(f"order deve ser inteiro em {module.path}:{node.lineno}")
        return value

    def _relations(self, call: ast.Call, module: _ParsedModule) -> Tuple[str, ...]:
        values = [self._resolve_reference(arg, module) for arg in call.args]
        for kw in call.keywords:
            if kw.arg == "name":
                values.extend(self._names(kw.value, module))
            else:
                raise DeclarationReadError(
                    f"Argumento desconhecido '{kw.arg}' em {module.path}:{kw.value.lineno}"
                )
        return tuple(dict.fromkeys(values))

    def _read(self, unit_id: str) -> UnitMetadata:
        module, qualname = self._locate(unit_id)
        cls = module.classes.get(qualname)
        if cls is None:
            raise DeclarationReadError(f"Classe '{qualname}' não encontrada em {module.path}")

        order: Optional[int] = None
        before: Tuple[str, ...] = ()
        after: Tuple[str, ...] = ()

        # decorators aplicam de baixo para cima; o mais externo sobrescreve
        for decorator in reversed(cls.decorator_list):
            target = decorator.func if isinstance(decorator, ast.Call) else decorator
            parts = _dotted(target)
            name = parts[-1] if parts else None
            if name not in (ORDER_DECORATOR, BEFORE_DECORATOR, AFTER_DECORATOR):
                continue
            if not isinstance(decorator, ast.Call):
                raise DeclarationReadError(
                    f"@{name} deve ser chamado com argumentos em {module.path}:{decorator.lineno}"
                )
            if name == ORDER_DECORATOR:
                order = self._order_value(decorator, module)
            elif name == BEFORE_DECORATOR:
                before = self._relations(decorator, module)
            else:
                after = self._relations(decorator, module)

        return UnitMetadata.build(unit_id, order=order, before=before, after=after)

    def metadata(self, unit_id: str) -> UnitMetadata:
        cached = self._units.get(unit_id)
        if cached is None:
            cached = self._units.setdefault(unit_id, self._read(unit_id))
        return cached

    # -----------------------------
    # MetadataSource
    # -----------------------------
    def order(self, unit_id: str) -> Optional[int]:
        return self.metadata(unit_id).order

    def before(self, unit_id: str) -> Tuple[str, ...]:
        return self.metadata(unit_id).before

    def after(self, unit_id: str) -> Tuple[str, ...]:
        return self.metadata(unit_id).after
