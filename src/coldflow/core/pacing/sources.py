# src/coldflow/core/pacing/sources.py
"""
Fontes de cadência concretas.

    - ImmediatePacing → ticks sempre disponíveis (sem espera)
    - IntervalPacing  → um tick por período fixo, via `reactivex.timer`
    - ExternalPacing  → ticks empurrados pelo chamador (ex.: teclado)

Todas as fontes são frias do ponto de vista da ativação: cada assinatura
recebe uma sequência nova cujo índice começa em 0. O scheduler usado pelo
timer é o informado na ativação (tempo real por padrão, tempo virtual em
testes).

Junção puxada por tick:
    As entradas nunca são bufferizadas. A cada tick o próximo valor é lido
    do iterador e o seguinte é antecipado, apenas para que o stream complete
    junto com o último valor. Entradas infinitas são, portanto, seguras com
    qualquer cadência temporal ou externa.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable, Iterable, Optional, Tuple

import reactivex
from reactivex import Observable
from reactivex import operators as ops
from reactivex.subject import Subject

from coldflow.core.errors import pacing_failure
from coldflow.core.exceptions import PipelineConfigurationError
from coldflow.core.transform import is_numeric

from .types import Pacing, Tick

_END = object()


def _counted_ticks(source: Observable) -> Observable:
    """Numera os eventos de `source` a partir de 0, por assinatura."""

    def _factory(_scheduler: Any = None) -> Observable:
        counter = itertools.count()
        return source.pipe(ops.map(lambda _: Tick(next(counter))))

    return reactivex.defer(_factory)


class _TickPuller:
    """
    Lê um valor de `inputs` por tick, mantendo um único valor antecipado.

    Uma falha ao antecipar é adiada para o tick seguinte, de modo que o
    valor já lido ainda é entregue.
    """

    def __init__(self, inputs: Iterable[Any]):
        self._iterator = iter(inputs)
        self._ahead: Any = _END
        self._primed = False
        self._failure: Optional[Exception] = None

    def pull(self, _tick: Tick) -> Tuple[Any, bool]:
        if self._failure is not None:
            raise self._failure

        value = self._ahead if self._primed else next(self._iterator, _END)
        self._primed = True
        if value is _END:
            return value, True

        try:
            self._ahead = next(self._iterator, _END)
        except Exception as exc:
            self._failure = exc
            return value, False
        return value, self._ahead is _END


def _released_per_tick(inputs: Iterable[Any], ticks: Callable[[], Observable]) -> Observable:
    """Junção posicional: o i-ésimo valor é lido quando o i-ésimo tick chega."""

    def _factory(_scheduler: Any = None) -> Observable:
        puller = _TickPuller(inputs)
        return ticks().pipe(
            ops.map(puller.pull),
            ops.take_while(lambda pulled: not pulled[1], inclusive=True),
            ops.filter(lambda pulled: pulled[0] is not _END),
            ops.map(lambda pulled: pulled[0]),
        )

    return reactivex.defer(_factory)


class ImmediatePacing:
    """
    Cadência sem espera: todo tick já ocorreu quando o valor é pedido.

    Como a junção posicional com uma fonte sempre pronta equivale a iterar
    as entradas, `gate` não assina a sequência infinita de ticks.
    """

    name = "immediate"

    def ticks(self) -> Observable:
        return reactivex.defer(
            lambda _: reactivex.from_iterable(itertools.count()).pipe(ops.map(Tick))
        )

    def gate(self, inputs: Iterable[Any]) -> Observable:
        return reactivex.from_iterable(inputs)

    def __repr__(self) -> str:
        return "ImmediatePacing()"


class IntervalPacing:
    """
    Cadência temporal: primeiro tick após `delay` segundos e os seguintes
    a cada `period` segundos.
    """

    name = "interval"

    def __init__(self, period: float, delay: float = 0.0):
        if not is_numeric(period) or period <= 0:
            raise PipelineConfigurationError(
                message="period deve ser um número > 0",
                details={"period": repr(period)},
            )
        if not is_numeric(delay) or delay < 0:
            raise PipelineConfigurationError(
                message="delay deve ser um número >= 0",
                details={"delay": repr(delay)},
            )
        self.period = float(period)
        self.delay = float(delay)

    def ticks(self) -> Observable:
        return reactivex.defer(
            lambda _: reactivex.timer(self.delay, self.period).pipe(ops.map(Tick))
        )

    def gate(self, inputs: Iterable[Any]) -> Observable:
        return _released_per_tick(inputs, self.ticks)

    def __repr__(self) -> str:
        return f"IntervalPacing(period={self.period!r}, delay={self.delay!r})"


class ExternalPacing:
    """
    Cadência dirigida de fora: cada chamada a `tick()` libera um valor.

    Ticks empurrados sem nenhuma ativação assinada são descartados.
    `fail()` encerra as ativações correntes com `PacingFailure`; ativações
    posteriores recebem uma sequência nova.
    """

    name = "external"

    def __init__(self) -> None:
        self._subject: Subject = Subject()

    def ticks(self) -> Observable:
        return reactivex.defer(lambda _: _counted_ticks(self._subject))

    def gate(self, inputs: Iterable[Any]) -> Observable:
        return _released_per_tick(inputs, self.ticks)

    def tick(self) -> None:
        self._subject.on_next(None)

    def fail(self, reason: str = "external pacing failed") -> None:
        failed, self._subject = self._subject, Subject()
        failed.on_error(pacing_failure(reason=reason, source=self.name))

    def __repr__(self) -> str:
        return "ExternalPacing()"


def pacing_from_settings(settings: Any) -> Pacing:
    """Constrói a cadência declarada em `PacingSettings`."""
    if settings.mode == "immediate":
        return ImmediatePacing()
    if settings.mode == "interval":
        return IntervalPacing(period=settings.period, delay=settings.delay)
    raise PipelineConfigurationError(
        message="Modo de cadência desconhecido",
        details={"mode": settings.mode},
    )
