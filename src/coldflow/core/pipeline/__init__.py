# src/coldflow/core/pipeline/__init__.py
"""
# Pipeline Core — coldflow

Este pacote define as estruturas que descrevem um pipeline frio.

## Componentes

- **types**
  - `ActivationState`: estados da máquina de ativação
- **context**
  - `ActivationContext`: identidade e log estruturado de uma ativação
- **builder**
  - `PipelineDescription`, `Pipeline`, `build_pipeline`, `build_from_settings`

## Invariantes

- Construir um pipeline não produz efeito observável
- Cada instância de `Pipeline` é ativada no máximo uma vez

## Limites Explícitos

- Não assina observables (ver `coldflow.core.engine`)
"""

from .builder import Pipeline, PipelineDescription, build_from_settings, build_pipeline
from .context import ActivationContext
from .types import TERMINAL_STATES, ActivationState

__all__ = [
    "ActivationContext",
    "ActivationState",
    "Pipeline",
    "PipelineDescription",
    "TERMINAL_STATES",
    "build_from_settings",
    "build_pipeline",
]
