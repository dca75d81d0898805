# src/coldflow/core/config/settings.py
"""
Settings tipados do pipeline resolvidos a partir da configuração efetiva.

Este módulo traduz o dicionário produzido por `load_config` em uma
estrutura imutável e validada, pronta para ser usada pelos builders.

Schema (v1):

    pipeline:
      factor: <número>
      inputs: [<número>, ...]
    pacing:
      mode: immediate | interval
      period: <segundos, > 0>      # apenas interval
      delay: <segundos, >= 0>      # apenas interval

Invariantes:
    - `factor` e cada item de `inputs` são numéricos (bool é rejeitado)
    - `inputs` é materializado como tupla imutável
    - Valores ausentes em `pacing` recebem os defaults documentados

Limites explícitos:
    - Não carrega arquivos
    - Não constrói pipelines
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .errors import InvalidSettingsError

PACING_MODES = ("immediate", "interval")

DEFAULT_PERIOD = 1.0
DEFAULT_DELAY = 0.0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class PacingSettings:
    """Cadência declarada em configuração."""

    mode: str = "immediate"
    period: float = DEFAULT_PERIOD
    delay: float = DEFAULT_DELAY


@dataclass(frozen=True)
class PipelineSettings:
    """Descrição validada de um pipeline: fator, entradas e cadência."""

    factor: float
    inputs: Tuple[float, ...]
    pacing: PacingSettings


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidSettingsError(
            f"Seção '{name}' deve ser dict, recebido: {type(section).__name__}"
        )
    return section


def resolve_settings(config: Dict[str, Any]) -> PipelineSettings:
    """
    Valida a configuração efetiva e produz `PipelineSettings`.

    Raises:
        InvalidSettingsError: se qualquer campo obrigatório estiver ausente
            ou possuir tipo/valor inválido.
    """
    if not isinstance(config, dict):
        raise InvalidSettingsError(
            f"Config deve ser dict, recebido: {type(config).__name__}"
        )

    pipeline = _section(config, "pipeline")
    pacing = _section(config, "pacing")

    if "factor" not in pipeline:
        raise InvalidSettingsError("Campo obrigatório ausente: pipeline.factor")
    factor = pipeline["factor"]
    if not _is_number(factor):
        raise InvalidSettingsError(
            f"pipeline.factor deve ser numérico, recebido: {type(factor).__name__}"
        )

    inputs = pipeline.get("inputs", [])
    if not isinstance(inputs, list):
        raise InvalidSettingsError(
            f"pipeline.inputs deve ser lista, recebido: {type(inputs).__name__}"
        )
    for i, value in enumerate(inputs):
        if not _is_number(value):
            raise InvalidSettingsError(
                f"pipeline.inputs[{i}] deve ser numérico, recebido: {type(value).__name__}"
            )

    mode = pacing.get("mode", "immediate")
    if mode not in PACING_MODES:
        raise InvalidSettingsError(
            f"pacing.mode inválido: {mode!r} (esperado um de {', '.join(PACING_MODES)})"
        )

    period = pacing.get("period", DEFAULT_PERIOD)
    delay = pacing.get("delay", DEFAULT_DELAY)
    if not _is_number(period) or period <= 0:
        raise InvalidSettingsError(f"pacing.period deve ser número > 0, recebido: {period!r}")
    if not _is_number(delay) or delay < 0:
        raise InvalidSettingsError(f"pacing.delay deve ser número >= 0, recebido: {delay!r}")

    return PipelineSettings(
        factor=factor,
        inputs=tuple(inputs),
        pacing=PacingSettings(mode=mode, period=float(period), delay=float(delay)),
    )
