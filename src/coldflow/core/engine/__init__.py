# src/coldflow/core/engine/__init__.py
"""
Fronteira de ativação do coldflow.

Este pacote contém o único ponto onde pipelines frios passam a produzir
efeitos: a assinatura do observable com um sink fornecido pelo chamador.

Componentes principais:
    - activation → `Activation` (handle + máquina de estados) e `activate`

Invariantes:
    - Uma ativação por instância de Pipeline
    - Estados terminais são absorventes
    - Nenhum retry automático

Limites explícitos:
    - Não constrói pipelines
    - Não carrega configuração
"""

from .activation import Activation, activate

__all__ = ["Activation", "activate"]
