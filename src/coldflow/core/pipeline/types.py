# src/coldflow/core/pipeline/types.py
"""
Tipos canônicos de ativação do coldflow.

Componentes principais:
    - ActivationState → enum de estados da máquina de ativação
    - TERMINAL_STATES → estados absorventes

Máquina de estados de uma ativação:

    idle → running → {completed | errored | cancelled}

    (idle → cancelled também é permitido: cancelar antes de iniciar)

Invariantes:
    - Enums possuem valores textuais canônicos
    - Estados terminais são absorventes
"""

from __future__ import annotations

from enum import Enum


class ActivationState(str, Enum):
    """
    Estados possíveis de uma ativação.

    Os valores são strings para facilitar serialização no log de eventos.

    Estados definidos:
        - IDLE: handle criado, nenhuma assinatura feita
        - RUNNING: assinatura ativa, valores podem chegar ao sink
        - COMPLETED: entradas esgotadas, `on_complete` chamado
        - ERRORED: falha de entrada, cadência ou sink
        - CANCELLED: cancelada pelo chamador
    """
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    ERRORED = "errored"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES = frozenset(
    {ActivationState.COMPLETED, ActivationState.ERRORED, ActivationState.CANCELLED}
)
