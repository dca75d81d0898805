# src/coldflow/core/pacing/types.py
"""
Tipos canônicos de cadência do coldflow.

Componentes principais:
    - Tick   → evento opaco de "permissão para emitir o próximo valor"
    - Pacing → protocolo mínimo de uma fonte de cadência

Decisões arquiteturais:
    - O Tick carrega apenas sua posição na sequência; nenhum payload é
      usado pela transformação
    - A junção entre entradas e ticks é posicional e puxada: o i-ésimo
      valor só é lido do iterável quando o i-ésimo tick chega
    - Conformidade é verificada por duck typing (`@runtime_checkable`)

Invariantes:
    - Toda chamada a `ticks()` produz uma sequência nova, iniciando em 0
    - `gate(inputs)` não assina nada nem itera as entradas; apenas descreve a junção
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Protocol, runtime_checkable

from reactivex import Observable


@dataclass(frozen=True)
class Tick:
    """Evento de cadência; `index` é a posição na sequência corrente."""

    index: int


@runtime_checkable
class Pacing(Protocol):
    """
    Contrato canônico de uma fonte de cadência.

    Atributos obrigatórios:
        - name: identificador textual estável (usado em logs e erros)

    Limites explícitos:
        - Não aplica a transformação
        - Não decide quando a ativação termina: a ativação termina quando
          as entradas se esgotam, e ticks excedentes não são drenados
    """

    name: str

    def ticks(self) -> Observable:
        """Retorna uma sequência fria e reiniciável de `Tick`."""
        ...

    def gate(self, inputs: Iterable[Any]) -> Observable:
        """Libera os valores de `inputs` um a um, na cadência dos ticks."""
        ...
