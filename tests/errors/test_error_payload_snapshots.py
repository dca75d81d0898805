"""
Test — Canonical error payloads (snapshots)

Cenário: cada família de falha da ativação é provocada de ponta a ponta.
Esperado: o evento terminal registrado no ActivationContext carrega um
payload canônico (`type`, `message`, `details`, `hint`) compatível com o
snapshot armazenado.
"""

import pytest

from coldflow.core.engine import Activation, activate
from coldflow.core.errors import to_error_payload
from coldflow.core.exceptions import SinkFailure
from coldflow.core.pacing import ExternalPacing
from coldflow.core.pipeline import ActivationState, build_pipeline

from tests.errors._snapshot_helpers import assert_error_snapshot


def _terminal_error(ctx) -> dict:
    events = [e for e in ctx.events_for("activation") if "error" in e]
    assert len(events) == 1
    assert events[0]["level"] == "ERROR"
    return events[0]["error"]


def test_invalid_element_payload(dummy_ctx, recording_sink) -> None:
    activation = activate(build_pipeline(2, [3, "x", 7]), recording_sink, ctx=dummy_ctx)

    assert activation.state is ActivationState.ERRORED
    assert recording_sink.values == [6]
    assert_error_snapshot("transform_invalid_input.json", _terminal_error(dummy_ctx))


def test_sink_failure_payload(dummy_ctx) -> None:
    def sink(value):
        if value == 2:
            raise ValueError("boom")

    activation = Activation(pipeline=build_pipeline(2, [3, 1, 7]), sink=sink, ctx=dummy_ctx)
    with pytest.raises(SinkFailure):
        activation.start()

    assert_error_snapshot("sink_failure.json", _terminal_error(dummy_ctx))


def test_pacing_failure_payload(dummy_ctx, recording_sink) -> None:
    pacing = ExternalPacing()
    activation = activate(build_pipeline(2, [3, 1, 7], pacing), recording_sink, ctx=dummy_ctx)

    pacing.tick()
    pacing.fail("keyboard closed")

    assert activation.state is ActivationState.ERRORED
    assert recording_sink.values == [6]
    assert_error_snapshot("pacing_failure.json", _terminal_error(dummy_ctx))


def test_input_source_failure_payload(dummy_ctx, recording_sink) -> None:
    def inputs():
        yield 3
        raise RuntimeError("disk gone")

    activation = activate(build_pipeline(2, inputs()), recording_sink, ctx=dummy_ctx)

    assert activation.state is ActivationState.ERRORED
    assert recording_sink.values == [6]
    assert_error_snapshot("input_source_failure.json", _terminal_error(dummy_ctx))


def test_unexpected_error_payload() -> None:
    payload = to_error_payload(RuntimeError("oops")).to_dict()

    assert_error_snapshot("unexpected_error.json", payload)
    assert payload["hint"]
