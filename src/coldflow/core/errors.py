"""
coldflow — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do coldflow.
Erros de ativação são registrados no log estruturado do contexto e devem ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhum fallback silencioso é permitido.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import (
    ActivationStateError,
    ColdflowException,
    InputSourceFailure,
    InvalidInput,
    PacingFailure,
    PipelineAlreadyActivated,
    PipelineConfigurationError,
    SinkFailure,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ColdflowErrorPayload:
    """
    Payload canônico de erro do coldflow.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

TRANSFORM_INVALID_INPUT = "TRANSFORM_INVALID_INPUT"
PACING_FAILURE = "PACING_FAILURE"
INPUT_SOURCE_FAILURE = "INPUT_SOURCE_FAILURE"
SINK_FAILURE = "SINK_FAILURE"
PIPELINE_CONFIGURATION_ERROR = "PIPELINE_CONFIGURATION_ERROR"
PIPELINE_ALREADY_ACTIVATED = "PIPELINE_ALREADY_ACTIVATED"
ACTIVATION_STATE_ERROR = "ACTIVATION_STATE_ERROR"
ACTIVATION_UNEXPECTED_ERROR = "ACTIVATION_UNEXPECTED_ERROR"

_TYPE_BY_EXCEPTION = {
    InvalidInput: TRANSFORM_INVALID_INPUT,
    PacingFailure: PACING_FAILURE,
    InputSourceFailure: INPUT_SOURCE_FAILURE,
    SinkFailure: SINK_FAILURE,
    PipelineConfigurationError: PIPELINE_CONFIGURATION_ERROR,
    PipelineAlreadyActivated: PIPELINE_ALREADY_ACTIVATED,
    ActivationStateError: ACTIVATION_STATE_ERROR,
}


def to_error_payload(exc: BaseException) -> ColdflowErrorPayload:
    """Converte exceções em ColdflowErrorPayload (serializável, acionável).

    Regras:
    - ColdflowException: já vem com message/details/hint; o código vem do catálogo.
    - Outras exceções: encapsular como ACTIVATION_UNEXPECTED_ERROR sem stack trace.
    """
    if isinstance(exc, ColdflowException):
        code = next(
            (c for cls, c in _TYPE_BY_EXCEPTION.items() if isinstance(exc, cls)),
            exc.__class__.__name__,
        )
        return ColdflowErrorPayload(
            type=code,
            message=exc.message or "Erro de ativação",
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    return ColdflowErrorPayload(
        type=ACTIVATION_UNEXPECTED_ERROR,
        message=str(exc) or "Erro inesperado durante a ativação",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o log de eventos da ativação",
    )


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def invalid_input(
    *,
    value: Any,
    role: str = "element",
    index: Optional[int] = None,
    hint: str = "Forneça apenas valores numéricos; nenhuma coerção é aplicada.",
) -> InvalidInput:
    return InvalidInput(
        message=f"Valor não numérico recebido como {role}",
        details={
            "role": role,
            "index": index,
            "value_type": type(value).__name__,
            "value_repr": repr(value),
        },
        hint=hint,
    )


def pacing_failure(
    *,
    reason: str,
    source: Optional[str] = None,
    hint: str = "Construa um novo pipeline para reexecutar; não há retry automático.",
) -> PacingFailure:
    return PacingFailure(
        message="A fonte de cadência falhou",
        details={"reason": reason, "source": source},
        hint=hint,
    )


def input_source_failure(*, exc: BaseException) -> InputSourceFailure:
    return InputSourceFailure(
        message="Falha ao iterar as entradas do pipeline",
        details={
            "exc_type": exc.__class__.__name__,
            "exc_message": str(exc),
        },
        hint="Verifique o iterável de entradas fornecido ao builder.",
    )


def sink_failure(*, exc: BaseException, value: Any, position: int) -> SinkFailure:
    return SinkFailure(
        message="O sink levantou exceção ao receber um valor",
        details={
            "exc_type": exc.__class__.__name__,
            "exc_message": str(exc),
            "value_repr": repr(value),
            "position": position,
        },
        hint="Corrija o sink; a ativação não continua após falha do sink.",
    )
