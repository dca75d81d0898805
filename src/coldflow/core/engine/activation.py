# src/coldflow/core/engine/activation.py
"""
Fronteira de ativação do coldflow.

Este é o único ponto do sistema onde efeitos acontecem: a ativação assina o
observable de um `Pipeline`, entrega cada valor ao sink fornecido pelo
chamador e mantém a máquina de estados da execução.

Máquina de estados:

    idle → running → {completed | errored | cancelled}

Políticas:
    - Cada valor chega ao sink exatamente uma vez, na ordem de emissão
    - `on_complete` é chamado no máximo uma vez, ao esgotar as entradas
    - Falhas ao puxar entradas/cadência chamam `on_error` uma única vez
    - Falha do sink é fail-fast: a ativação termina em `errored`, o upstream
      é descartado, `on_error` não é chamado e a exceção (`SinkFailure`) é
      propagada ao chamador (`start()`/`activate()` quando síncrona, `wait()`
      sempre)
    - Cancelamento é cooperativo, idempotente e seguro dentro do próprio sink
    - Nenhum retry: toda falha é terminal para a ativação corrente

Rastreabilidade:
    - Toda transição é registrada no `ActivationContext` (`stage="activation"`)
    - Cada valor entregue é registrado com `stage="sink"`
    - Erros carregam o `ColdflowErrorPayload` serializado
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from reactivex import operators as ops
from reactivex.abc import DisposableBase, SchedulerBase
from reactivex.subject import Subject

from coldflow.core.errors import input_source_failure, sink_failure, to_error_payload
from coldflow.core.exceptions import (
    ActivationStateError,
    ColdflowException,
    PipelineConfigurationError,
    SinkFailure,
)
from coldflow.core.pipeline.builder import Pipeline
from coldflow.core.pipeline.context import ActivationContext
from coldflow.core.pipeline.types import ActivationState

Sink = Callable[[Any], None]
ErrorCallback = Callable[[BaseException], None]
CompleteCallback = Callable[[], None]


class Activation:
    """Handle de uma execução de pipeline (uma única vez)."""

    def __init__(
        self,
        *,
        pipeline: Pipeline,
        sink: Sink,
        on_error: Optional[ErrorCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        scheduler: Optional[SchedulerBase] = None,
        ctx: Optional[ActivationContext] = None,
    ):
        if not callable(sink):
            raise PipelineConfigurationError(
                message="sink deve ser chamável",
                details={"sink_type": type(sink).__name__},
                hint="Passe uma função que receba um valor por chamada.",
            )
        self.pipeline = pipeline
        self.ctx: ActivationContext = ctx if ctx is not None else ActivationContext.new()
        self._sink = sink
        self._on_error = on_error
        self._on_complete = on_complete
        self._scheduler = scheduler

        self._lock = threading.RLock()
        self._done = threading.Event()
        self._stop_signal: Subject = Subject()
        self._subscription: Optional[DisposableBase] = None

        self._state = ActivationState.IDLE
        self._error: Optional[BaseException] = None
        self._sink_cause: Optional[BaseException] = None
        self._emitted = 0

    # ------------------------------------------------------------------
    # Estado (somente leitura)
    # ------------------------------------------------------------------
    @property
    def state(self) -> ActivationState:
        return self._state

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    @property
    def emitted(self) -> int:
        return self._emitted

    @property
    def done(self) -> bool:
        return self._done.is_set()

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------
    def start(self) -> "Activation":
        with self._lock:
            if self._state is not ActivationState.IDLE:
                raise ActivationStateError(
                    message="Ativação já iniciada ou encerrada",
                    details={"state": self._state.value},
                    hint="Construa um novo pipeline (ou use pipeline.fresh()) para reexecutar.",
                )
            observable = self.pipeline.claim()
            self._state = ActivationState.RUNNING

        self.ctx.log(
            stage="activation",
            level="INFO",
            message="activation started",
            state=ActivationState.RUNNING.value,
            pacing=self.pipeline.description.pacing.name,
        )

        subscription = observable.pipe(ops.take_until(self._stop_signal)).subscribe(
            on_next=self._handle_next,
            on_error=self._handle_error,
            on_completed=self._handle_completed,
            scheduler=self._scheduler,
        )

        with self._lock:
            self._subscription = subscription
            finished = self._state.is_terminal
        if finished:
            subscription.dispose()

        self._raise_sink_failure()
        return self

    def cancel(self) -> bool:
        """Cancela a ativação; retorna True somente se houve transição."""
        with self._lock:
            if self._state.is_terminal:
                return False
            previous = self._state
            self._state = ActivationState.CANCELLED
            subscription = self._subscription

        self.ctx.log(
            stage="activation",
            level="INFO",
            message="activation cancelled",
            state=ActivationState.CANCELLED.value,
            previous_state=previous.value,
            emitted=self._emitted,
        )
        if previous is ActivationState.RUNNING:
            self._stop_signal.on_next(None)
            if subscription is not None:
                subscription.dispose()
        self._done.set()
        return True

    def wait(self, timeout: Optional[float] = None) -> ActivationState:
        """Bloqueia até um estado terminal (ou timeout) e devolve o estado."""
        self._done.wait(timeout)
        self._raise_sink_failure()
        return self._state

    # ------------------------------------------------------------------
    # Observer
    # ------------------------------------------------------------------
    def _handle_next(self, value: Any) -> None:
        if self._state is not ActivationState.RUNNING:
            return

        try:
            self._sink(value)
        except Exception as exc:
            failure = sink_failure(exc=exc, value=value, position=self._emitted)
            with self._lock:
                self._sink_cause = exc
            if self._terminate(ActivationState.ERRORED, error=failure):
                self._stop_signal.on_next(None)
                self._done.set()
            return

        self._emitted += 1
        self.ctx.log(
            stage="sink",
            level="DEBUG",
            message="value delivered",
            value=value,
            position=self._emitted - 1,
        )

    def _handle_error(self, exc: Exception) -> None:
        error = exc if isinstance(exc, ColdflowException) else input_source_failure(exc=exc)
        if not self._terminate(ActivationState.ERRORED, error=error):
            return
        try:
            if self._on_error is not None:
                self._on_error(error)
        finally:
            self._done.set()

    def _handle_completed(self) -> None:
        if not self._terminate(ActivationState.COMPLETED):
            return
        try:
            if self._on_complete is not None:
                self._on_complete()
        finally:
            self._done.set()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _terminate(self, state: ActivationState, error: Optional[BaseException] = None) -> bool:
        with self._lock:
            if self._state is not ActivationState.RUNNING:
                return False
            self._state = state
            self._error = error

        extra = {"state": state.value, "emitted": self._emitted}
        if error is not None:
            extra["error"] = to_error_payload(error).to_dict()
        self.ctx.log(
            stage="activation",
            level="ERROR" if error is not None else "INFO",
            message=f"activation {state.value}",
            **extra,
        )
        return True

    def _raise_sink_failure(self) -> None:
        if isinstance(self._error, SinkFailure):
            raise self._error from self._sink_cause

    def __repr__(self) -> str:
        return (
            f"Activation(id={self.ctx.activation_id!r}, state={self._state.value!r}, "
            f"emitted={self._emitted})"
        )


def activate(
    pipeline: Pipeline,
    sink: Sink,
    on_error: Optional[ErrorCallback] = None,
    on_complete: Optional[CompleteCallback] = None,
    *,
    scheduler: Optional[SchedulerBase] = None,
    ctx: Optional[ActivationContext] = None,
) -> Activation:
    """
    Ativa `pipeline`, entregando cada valor a `sink`.

    Com `ImmediatePacing` e o scheduler padrão, a execução é síncrona: ao
    retornar, a ativação já está em estado terminal. Com cadência temporal,
    o retorno é imediato e `Activation.wait()` aguarda o término.

    Returns:
        Activation: handle com estado, erro, contagem e cancelamento.

    Raises:
        PipelineAlreadyActivated: se a instância já foi ativada.
        SinkFailure: se o sink falhar durante a parte síncrona da execução.
    """
    return Activation(
        pipeline=pipeline,
        sink=sink,
        on_error=on_error,
        on_complete=on_complete,
        scheduler=scheduler,
        ctx=ctx,
    ).start()
