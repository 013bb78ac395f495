# src/autoconfig_sorter/core/__init__.py
"""
Core do autoconfig-sorter.

Este pacote reúne a implementação canônica da ordenação de unidades de
configuração.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de efeitos colaterais sobre as unidades (nunca as importa)

Componentes principais:
    - config         → carregamento, merge, hashing e seção `sorter`
    - metadata       → fontes de metadados e MetadataView
    - sorting        → PrioritySorter
    - traceability   → SortTrace (Event Log por chamada)
    - exceptions     → falhas fatais tipadas
    - errors         → payload canônico de erro para o processo de ativação

Limites explícitos:
    - Não instancia nem ativa unidades
    - Não avalia condições de ativação
    - Não depende de CLI ou serviços externos
"""
