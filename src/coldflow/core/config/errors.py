# src/coldflow/core/config/errors.py
"""
Exceções canônicas da camada de configuração do coldflow.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, o merge e a validação das configurações que descrevem
um pipeline (fator, entradas e cadência).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao operador

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa falha de ativação de pipeline

Limites explícitos:
    - Não ativa pipelines
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do coldflow.

    Permite captura genérica de falhas de configuração e distinção
    clara entre erros de configuração e erros de ativação.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de defaults não é encontrado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Sem defaults não existe configuração efetiva válida
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"pacing": {"period": 1.0}}
        - override: {"pacing": {"period": "fast"}}

    Inteiros e floats são tratados como o mesmo tipo numérico, de modo que
    `factor: 2` pode ser sobrescrito por `factor: 2.5`.
    """


class InvalidSettingsError(ConfigError):
    """
    Exceção levantada quando a configuração efetiva não descreve um
    pipeline válido (ex.: fator não numérico, modo de cadência desconhecido).

    Limites explícitos:
        - Não tenta coerção de valores
        - Não aplica defaults implícitos além dos documentados
    """
