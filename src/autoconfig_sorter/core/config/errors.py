# src/autoconfig_sorter/core/config/errors.py
"""
Exceções canônicas da camada de configuração e de índice.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de arquivos de configuração do sorter e de índices
pré-computados de metadados.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro apontam o arquivo ou a chave problemática

Invariantes:
    - Todas as exceções deste módulo herdam de `ConfigError`
    - Nenhuma exceção representa falha de ordenação (ver core.exceptions)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do sorter nem das fontes de metadados
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração do sorter.

    Permite captura genérica de falhas estruturais de arquivos
    (configuração ou índice), distinguindo-as das falhas de ordenação.
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo obrigatório (defaults de
    configuração ou índice declarado) não existe no caminho informado.

    Limites explícitos:
        - Não tenta inferir ou criar o arquivo automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Extensões desconhecidas são rejeitadas imediatamente; o formato
    nunca é inferido pelo conteúdo.
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um `dict`.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"sorter": {"source_roots": ["src"]}}
        - override: {"sorter": "src"}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidSorterSettingsError(ConfigError):
    """
    Exceção levantada quando a seção `sorter` possui chaves com tipo
    inválido (ex.: `source_roots` que não é lista de strings).
    """


class IndexFormatError(ConfigError):
    """
    Exceção levantada quando um índice pré-computado de metadados possui
    entradas malformadas.

    Exemplos:
        - `order` que não é inteiro
        - `before`/`after` que não são listas de strings
        - ausência da chave raiz `units`
    """
