# src/coldflow/core/pipeline/builder.py
"""
Builder de pipelines frios.

Um `Pipeline` é uma descrição inerte de trabalho:

    entradas → junção posicional com ticks → multiplicação → (sink na ativação)

Construir um pipeline não itera as entradas, não assina a cadência e não
invoca nenhum sink. Todo efeito acontece somente quando a fronteira de
ativação (`coldflow.core.engine`) assina o observable.

Decisões arquiteturais:
    - A descrição (`PipelineDescription`) é imutável e pode gerar quantas
      instâncias forem necessárias
    - Cada instância de `Pipeline` é de uso único: ativar duas vezes a mesma
      instância é rejeitado; `fresh()` produz uma nova instância
    - Validações do builder são puras e síncronas

Invariantes:
    - O pipeline completa quando as entradas se esgotam
    - Ticks excedentes não são drenados
    - Entradas são lidas uma a uma, no ritmo da cadência; entradas
      infinitas são aceitas
    - Instâncias da mesma descrição produzem a mesma sequência de valores
      (para cadência determinística)

Limites explícitos:
    - Não assina o observable
    - Não define política de cancelamento (responsabilidade da ativação)
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from reactivex import Observable

from coldflow.core.exceptions import PipelineAlreadyActivated, PipelineConfigurationError
from coldflow.core.pacing import ImmediatePacing, Pacing, pacing_from_settings
from coldflow.core.transform import ensure_factor, multiply_each


@dataclass(frozen=True)
class PipelineDescription:
    """Descrição inerte de um pipeline: fator, entradas e cadência."""

    factor: Any
    inputs: Iterable
    pacing: Pacing

    def to_observable(self) -> Observable:
        return self.pacing.gate(self.inputs).pipe(multiply_each(self.factor))


class Pipeline:
    """Instância ativável (uma única vez) de uma `PipelineDescription`."""

    def __init__(self, description: PipelineDescription):
        self.description = description
        self._observable = description.to_observable()
        self._claimed = False
        self._lock = threading.Lock()

    @property
    def observable(self) -> Observable:
        return self._observable

    @property
    def activated(self) -> bool:
        return self._claimed

    def claim(self) -> Observable:
        """Marca a instância como ativada e devolve o observable a assinar."""
        with self._lock:
            if self._claimed:
                raise PipelineAlreadyActivated(
                    message="Esta instância de Pipeline já foi ativada",
                    details={"pacing": self.description.pacing.name},
                    hint="Use pipeline.fresh() para obter uma nova instância da mesma descrição.",
                )
            self._claimed = True
        return self._observable

    def fresh(self) -> "Pipeline":
        return Pipeline(self.description)

    def __repr__(self) -> str:
        return (
            f"Pipeline(factor={self.description.factor!r}, "
            f"pacing={self.description.pacing!r}, activated={self._claimed})"
        )


def build_pipeline(
    factor: Any,
    inputs: Iterable,
    pacing: Optional[Pacing] = None,
) -> Pipeline:
    """
    Constrói um pipeline frio sem produzir nenhum efeito observável.

    Args:
        factor: fator de escala numérico.
        inputs: iterável de números. Para reexecuções determinísticas use uma
            coleção reiterável (lista, tupla, range), não um iterador de uso único.
        pacing: fonte de cadência; `ImmediatePacing` quando omitida.

    Raises:
        InvalidInput: se o fator não for numérico.
        PipelineConfigurationError: se `inputs` não for iterável ou `pacing`
            não satisfizer o protocolo `Pacing`.
    """
    ensure_factor(factor)

    if not isinstance(inputs, Iterable) or isinstance(inputs, (str, bytes)):
        raise PipelineConfigurationError(
            message="inputs deve ser um iterável de números",
            details={"inputs_type": type(inputs).__name__},
        )

    if pacing is None:
        pacing = ImmediatePacing()
    elif not isinstance(pacing, Pacing):
        raise PipelineConfigurationError(
            message="pacing não satisfaz o protocolo Pacing",
            details={"pacing_type": type(pacing).__name__},
            hint="Implemente `name`, `ticks()` e `gate(inputs)`.",
        )

    return Pipeline(PipelineDescription(factor=factor, inputs=inputs, pacing=pacing))


def build_from_settings(settings: Any) -> Pipeline:
    """Constrói o pipeline descrito por `PipelineSettings`."""
    return build_pipeline(
        settings.factor,
        settings.inputs,
        pacing_from_settings(settings.pacing),
    )
