# tests/core/engine/test_activation_happy_path.py
"""
Testes do fluxo de ativação bem-sucedido (happy path).

Os testes asseguram que:
- cada valor transformado chega ao sink exatamente uma vez, em ordem
- `on_complete` é chamado uma única vez ao esgotar as entradas
- entradas vazias completam sem tocar no sink
- instâncias novas da mesma descrição reproduzem a mesma saída

Decisões arquiteturais:
    - Com `ImmediatePacing` a ativação é síncrona: ao retornar de
      `activate`, o estado já é terminal

Limites explícitos:
    - Não valida cancelamento
    - Não valida falhas
"""

import pytest

try:
    from coldflow.core.engine import Activation, activate
    from coldflow.core.pipeline import ActivationState, build_pipeline
    from coldflow.core.exceptions import PipelineConfigurationError
except Exception as e:  # noqa: BLE001
    activate = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que a fronteira de ativação esteja disponível para os testes.

    Decisões arquiteturais:
        - Falha antecipada e explícita quando o contrato de ativação está ausente
        - Mensagem de erro aponta diretamente para o módulo esperado
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing activation boundary. Implement:\n"
            "- src/coldflow/core/engine/activation.py (Activation, activate)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "factor, inputs, expected",
    [
        (2, [3, 1, 7], [6, 2, 14]),
        (10, [1], [10]),
        (-1, [0, 1, 2, 3], [0, -1, -2, -3]),
    ],
)
def test_values_reach_sink_in_order(factor, inputs, expected, recording_sink):
    _require_imports()
    completions = []

    activation = activate(
        build_pipeline(factor, inputs),
        recording_sink,
        on_complete=lambda: completions.append(True),
    )

    assert isinstance(activation, Activation)
    assert activation.state is ActivationState.COMPLETED
    assert activation.done is True
    assert activation.error is None
    assert activation.emitted == len(expected)
    assert recording_sink.values == expected
    assert completions == [True]


def test_empty_inputs_complete_without_sink_calls(recording_sink):
    """
    Entradas vazias completam imediatamente.

    Invariantes:
        - O sink nunca é chamado
        - `on_complete` é chamado exatamente uma vez
    """
    _require_imports()
    completions = []

    activation = activate(build_pipeline(2, []), recording_sink, on_complete=lambda: completions.append(True))

    assert activation.state is ActivationState.COMPLETED
    assert recording_sink.values == []
    assert completions == [True]


def test_on_error_not_called_on_success(recording_sink):
    _require_imports()
    errors = []

    activate(build_pipeline(2, [3, 1, 7]), recording_sink, on_error=errors.append)

    assert errors == []


def test_fresh_instances_are_deterministic(make_sink):
    """Reexecutar é construir uma instância nova: a saída é idêntica."""
    _require_imports()
    first_sink, second_sink = make_sink(), make_sink()
    pipeline = build_pipeline(2, [3, 1, 7])

    activate(pipeline, first_sink)
    activate(pipeline.fresh(), second_sink)

    assert first_sink.values == second_sink.values == [6, 2, 14]


def test_wait_returns_terminal_state(recording_sink):
    _require_imports()
    activation = activate(build_pipeline(2, [1]), recording_sink)

    assert activation.wait(timeout=1) is ActivationState.COMPLETED


def test_sink_may_be_any_callable():
    _require_imports()
    collected = {}

    def sink(value):
        collected[len(collected)] = value

    activate(build_pipeline(0.5, [4, 3]), sink)

    assert collected == {0: 2.0, 1: 1.5}


def test_non_callable_sink_rejected():
    """
    Um sink não chamável é erro de configuração, antes de qualquer efeito.

    Invariantes:
        - A instância de Pipeline permanece não ativada
    """
    _require_imports()
    pipeline = build_pipeline(2, [1])

    with pytest.raises(PipelineConfigurationError) as ei:
        activate(pipeline, sink=[])

    assert ei.value.details == {"sink_type": "list"}
    assert pipeline.activated is False
