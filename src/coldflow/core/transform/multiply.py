# src/coldflow/core/transform/multiply.py
"""
Transformação pura: multiplicação elemento a elemento por um fator.

Este módulo contém a única lógica de domínio do coldflow. Ela existe em
duas formas equivalentes:

    - `multiply_by(factor, numbers)` → lista materializada
    - `multiply_each(factor)`        → operador reactivex para streams

Princípios fundamentais:
    - Função pura: nenhuma leitura ou escrita de estado global
    - Mesmas entradas sempre produzem as mesmas saídas
    - Ordem e tamanho da entrada são preservados

Invariantes:
    - `multiply_by(f, xs)[i] == xs[i] * f` para todo índice `i`
    - `multiply_by(f, []) == []`
    - A entrada nunca é mutada

Limites explícitos:
    - Não coage valores: elementos não numéricos (incluindo `bool`) são
      rejeitados com `InvalidInput`
    - Não controla cadência nem ativação
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Callable, Iterable, List

from reactivex import Observable
from reactivex import operators as ops

from coldflow.core.errors import invalid_input


def is_numeric(value: Any) -> bool:
    """Verdadeiro para instâncias de `numbers.Number`, exceto `bool`."""
    return isinstance(value, Number) and not isinstance(value, bool)


def ensure_factor(factor: Any) -> Any:
    if not is_numeric(factor):
        raise invalid_input(value=factor, role="factor")
    return factor


def multiply_by(factor: Any, numbers: Iterable[Any]) -> List[Any]:
    """
    Multiplica cada elemento de `numbers` por `factor`.

    Args:
        factor: fator de escala numérico.
        numbers: sequência finita de números.

    Returns:
        List: nova lista com `numbers[i] * factor`, na mesma ordem.

    Raises:
        InvalidInput: se o fator ou algum elemento não for numérico.
    """
    ensure_factor(factor)

    result: List[Any] = []
    for index, value in enumerate(numbers):
        if not is_numeric(value):
            raise invalid_input(value=value, role="element", index=index)
        result.append(value * factor)
    return result


def multiply_each(factor: Any) -> Callable[[Observable], Observable]:
    """
    Versão em stream de `multiply_by`, como operador reactivex.

    Um elemento não numérico levanta `InvalidInput` (com a posição do
    elemento no stream) dentro do `map_indexed`, que o reactivex entrega ao
    observer via `on_error`, encerrando o stream.
    """
    ensure_factor(factor)

    def _scale(value: Any, index: int) -> Any:
        if not is_numeric(value):
            raise invalid_input(value=value, role="element", index=index)
        return value * factor

    return ops.map_indexed(_scale)
