# tests/conftest.py
"""
Fixtures compartilhados para testes do coldflow.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas (YAML como string)
- contexto de ativação controlado (ActivationContext)
- sinks injetáveis que apenas registram o que receberam

Decisões arquiteturais:
    - Nenhum sink global ou spy de console compartilhado: cada teste
      recebe sua própria instância, o que torna os testes independentes
      de ordem por construção
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture ativa pipelines
    - Nenhuma fixture realiza I/O
"""

import threading
from datetime import datetime, timezone

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão semelhante a `coldflow/defaults/config.defaults.yaml`.

    Usado por:
        - Testes do loader de config
        - Testes de deep-merge (defaults + local)
        - Testes da CLI
    """
    return """
pipeline:
  factor: 2
  inputs: [3, 1, 7]
pacing:
  mode: immediate
  period: 1.0
  delay: 0.0
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML de overrides locais: troca o fator e as entradas, mantendo a cadência.
    """
    return """
pipeline:
  factor: -1
  inputs: [0, 1, 2, 3]
"""


@pytest.fixture
def dummy_config() -> dict:
    """Configuração já resolvida e válida para testes de settings e contexto."""
    return {
        "pipeline": {"factor": 2, "inputs": [3, 1, 7]},
        "pacing": {"mode": "immediate", "period": 1.0, "delay": 0.0},
    }


# =====================================================
# Activation fixtures
# =====================================================

@pytest.fixture
def dummy_ctx(dummy_config):
    """
    ActivationContext determinístico para testes.

    Decisões arquiteturais:
        - `activation_id` e `created_at` são fixos para garantir determinismo
        - Config é injetada explicitamente via fixture

    Returns:
        ActivationContext: contexto isolado e previsível.
    """
    from coldflow.core.pipeline.context import ActivationContext

    return ActivationContext(
        activation_id="activation-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


class RecordingSink:
    """Sink injetável que registra valores e sinaliza quando atinge `expected`."""

    def __init__(self, expected=None):
        self.values = []
        self.expected = expected
        self.reached = threading.Event()

    def __call__(self, value):
        self.values.append(value)
        if self.expected is not None and len(self.values) >= self.expected:
            self.reached.set()


@pytest.fixture
def recording_sink():
    """Fornece um sink novo por teste."""
    return RecordingSink()


@pytest.fixture
def make_sink():
    """Factory de sinks, para testes que precisam de mais de um."""
    return RecordingSink
