# src/coldflow/core/pacing/__init__.py
"""
Cadência do coldflow.

Uma fonte de cadência decide *quando* cada valor pode ser observado,
sem interferir em *qual* valor é produzido.

Componentes:
    - types   → `Tick`, protocolo `Pacing`
    - sources → `ImmediatePacing`, `IntervalPacing`, `ExternalPacing`,
                `pacing_from_settings`

Invariantes:
    - Sequências de ticks são reiniciáveis (índice volta a 0 por assinatura)
    - A espera por ticks é o único ponto de suspensão do pipeline
"""

from .sources import ExternalPacing, ImmediatePacing, IntervalPacing, pacing_from_settings
from .types import Pacing, Tick

__all__ = [
    "ExternalPacing",
    "ImmediatePacing",
    "IntervalPacing",
    "Pacing",
    "Tick",
    "pacing_from_settings",
]
