# src/coldflow/core/pipeline/context.py
"""
Contexto de execução de uma ativação.

Este módulo define o `ActivationContext`, a estrutura que identifica uma
ativação e acumula seu log estruturado de eventos.

Princípios fundamentais:
    - Isolamento por ativação (cada ativação possui seu próprio contexto)
    - Ausência de estado global compartilhado
    - Estrutura simples e testável

Invariantes:
    - Eventos sempre incluem `activation_id`, `stage`, `level`, `message`
      e `timestamp` (UTC, ISO-8601)
    - A ordem dos eventos é a ordem de registro

Limites explícitos:
    - Não assina pipelines
    - Não invoca sinks
    - Não persiste eventos
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class ActivationContext:
    """
    Contexto canônico de uma ativação.

    Campos:
        - activation_id: identificador único da ativação
        - created_at: timestamp UTC de criação do contexto
        - config: configuração efetiva (quando construída a partir de config)
        - meta: metadados livres (ex.: config_hash, origem da ativação)
        - events: log estruturado de eventos
    """
    activation_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    @classmethod
    def new(
        cls,
        *,
        config: Optional[Dict[str, Any]] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> "ActivationContext":
        return cls(
            activation_id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc),
            config=dict(config or {}),
            meta=dict(meta or {}),
        )

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "activation_id": self.activation_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def events_for(self, stage: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["stage"] == stage]
