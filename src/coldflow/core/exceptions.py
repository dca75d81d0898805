"""
coldflow — Canonical Exceptions (v1)

Este módulo define as exceções tipadas do coldflow.

Objetivo:
- Permitir que transform, pacing, builder e ativação levantem exceções semânticas
- Facilitar o mapeamento determinístico para ColdflowErrorPayload
- Evitar ValueError/RuntimeError genéricos nas fronteiras do pipeline

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`
- Nenhuma exceção dispara retry: toda falha é terminal para a ativação corrente
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ColdflowException(Exception):
    """Base class para exceções internas do coldflow.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Transform
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InvalidInput(ColdflowException):
    """Elemento ou fator não numérico encontrado pela transformação."""


# ---------------------------------------------------------------------------
# Fontes (entradas e cadência)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PacingFailure(ColdflowException):
    """A fonte de cadência deixou de produzir ticks."""


@dataclass(frozen=True)
class InputSourceFailure(ColdflowException):
    """O iterável de entradas falhou ao produzir o próximo valor."""


# ---------------------------------------------------------------------------
# Sink
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SinkFailure(ColdflowException):
    """O sink fornecido pelo chamador levantou exceção (fail-fast)."""


# ---------------------------------------------------------------------------
# Builder / Ativação
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineConfigurationError(ColdflowException):
    """Argumentos inválidos para construção de pipeline ou cadência."""


@dataclass(frozen=True)
class PipelineAlreadyActivated(ColdflowException):
    """A mesma instância de Pipeline foi ativada mais de uma vez."""


@dataclass(frozen=True)
class ActivationStateError(ColdflowException):
    """Operação inválida para o estado corrente de uma ativação."""
