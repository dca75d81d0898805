# src/coldflow/__init__.py
"""
coldflow — pipelines frios e determinísticos de transformação numérica.

Este pacote demonstra o padrão "main puro / observable frio": uma função
constrói, sem nenhum efeito, a descrição de um cálculo (valores × fator,
liberados por uma cadência), e toda execução é adiada até uma chamada
explícita de ativação que recebe o sink com efeito colateral.

Princípios centrais:
    - Construção nunca produz efeitos observáveis
    - Efeitos vivem apenas na fronteira de ativação
    - Sinks são sempre injetados, nunca fixos no código
    - Reexecutar é construir (ou obter) uma nova instância do pipeline

Uso mínimo:

    >>> from coldflow import activate, build_pipeline
    >>> out = []
    >>> activate(build_pipeline(2, [3, 1, 7]), out.append).state.value
    'completed'
    >>> out
    [6, 2, 14]

Importar este pacote não executa nada.
"""

from .core.engine import Activation, activate
from .core.pacing import ExternalPacing, ImmediatePacing, IntervalPacing, Tick
from .core.pipeline import ActivationContext, ActivationState, Pipeline, build_pipeline
from .core.transform import multiply_by, multiply_each

__all__ = [
    "Activation",
    "ActivationContext",
    "ActivationState",
    "ExternalPacing",
    "ImmediatePacing",
    "IntervalPacing",
    "Pipeline",
    "Tick",
    "activate",
    "build_pipeline",
    "multiply_by",
    "multiply_each",
]
