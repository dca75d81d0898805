# tests/core/transform/test_multiply_by.py
"""
Testes da transformação pura `multiply_by` e de seu operador `multiply_each`.

Os testes asseguram que:
- cada elemento é multiplicado pelo fator, preservando ordem e tamanho
- a entrada nunca é mutada
- valores não numéricos (incluindo `bool`) são rejeitados com `InvalidInput`
- a versão em stream produz os mesmos valores da versão materializada

Limites explícitos:
    - Não testa cadência
    - Não testa ativação
"""

from decimal import Decimal
from fractions import Fraction

import pytest
import reactivex

try:
    from coldflow.core.transform import is_numeric, multiply_by, multiply_each
    from coldflow.core.exceptions import InvalidInput
except Exception as e:  # noqa: BLE001
    multiply_by = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing transform module. Implement:\n"
            "- src/coldflow/core/transform/multiply.py (multiply_by, multiply_each)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "factor, numbers, expected",
    [
        (2, [], []),
        (10, [1], [10]),
        (2, [3, 1, 7], [6, 2, 14]),
        (-1, [0, 1, 2, 3], [0, -1, -2, -3]),
        (0, [5, -5], [0, 0]),
        (0.5, [4, 3], [2.0, 1.5]),
    ],
)
def test_multiply_by_cases(factor, numbers, expected):
    _require_imports()
    assert multiply_by(factor, numbers) == expected


def test_multiply_by_does_not_mutate_input():
    _require_imports()
    numbers = [3, 1, 7]

    out = multiply_by(2, numbers)

    assert numbers == [3, 1, 7]
    assert out is not numbers


def test_multiply_by_accepts_any_number_type():
    """`numbers.Number` é aceito sem coerção: Decimal e Fraction mantêm o tipo."""
    _require_imports()
    out = multiply_by(3, [Decimal("0.1"), Fraction(1, 3)])

    assert out == [Decimal("0.3"), Fraction(1, 1)]
    assert isinstance(out[0], Decimal)


def test_multiply_by_rejects_non_numeric_element():
    """
    Um elemento não numérico levanta `InvalidInput` com a posição ofensora.

    Invariantes:
        - Nenhuma coerção de string é tentada
        - `details` identifica papel, índice e tipo do valor
    """
    _require_imports()
    with pytest.raises(InvalidInput) as ei:
        multiply_by(2, [3, "1", 7])

    details = ei.value.details
    assert details["role"] == "element"
    assert details["index"] == 1
    assert details["value_type"] == "str"
    assert details["value_repr"] == "'1'"


def test_multiply_by_rejects_bool():
    _require_imports()
    with pytest.raises(InvalidInput):
        multiply_by(2, [True])
    with pytest.raises(InvalidInput):
        multiply_by(False, [1])


def test_multiply_by_rejects_non_numeric_factor():
    _require_imports()
    with pytest.raises(InvalidInput) as ei:
        multiply_by("2", [1])

    assert ei.value.details["role"] == "factor"
    assert ei.value.details["index"] is None


def test_is_numeric():
    _require_imports()
    assert is_numeric(1)
    assert is_numeric(1.5)
    assert is_numeric(Decimal("2"))
    assert not is_numeric(True)
    assert not is_numeric("1")
    assert not is_numeric(None)


def test_multiply_each_matches_multiply_by():
    _require_imports()
    received = []
    completed = []

    reactivex.from_iterable([3, 1, 7]).pipe(multiply_each(2)).subscribe(
        on_next=received.append,
        on_completed=lambda: completed.append(True),
    )

    assert received == multiply_by(2, [3, 1, 7])
    assert completed == [True]


def test_multiply_each_reports_invalid_element_via_on_error():
    _require_imports()
    received = []
    errors = []

    reactivex.from_iterable([3, "x", 7]).pipe(multiply_each(2)).subscribe(
        on_next=received.append,
        on_error=errors.append,
    )

    assert received == [6]
    assert len(errors) == 1
    assert isinstance(errors[0], InvalidInput)
    assert errors[0].details["index"] == 1


def test_multiply_each_validates_factor_eagerly():
    _require_imports()
    with pytest.raises(InvalidInput):
        multiply_each(None)


def test_multiply_each_index_restarts_per_subscription():
    """
    A posição reportada é relativa a cada assinatura do stream.

    Invariantes:
        - Duas assinaturas do mesmo observable reportam o mesmo índice
    """
    _require_imports()
    stream = reactivex.from_iterable([1, 2, "x"]).pipe(multiply_each(2))
    errors = []

    stream.subscribe(on_error=errors.append)
    stream.subscribe(on_error=errors.append)

    assert [e.details["index"] for e in errors] == [2, 2]
