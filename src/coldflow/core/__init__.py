# src/coldflow/core/__init__.py
"""
Core do coldflow.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de efeitos fora da fronteira de ativação

Subpacotes:
    - core.config    → carregamento, merge, hashing e settings de configuração
    - core.transform → transformação pura (multiplicação por fator)
    - core.pacing    → fontes de cadência (ticks)
    - core.pipeline  → descrição fria do pipeline e contexto de ativação
    - core.engine    → fronteira de ativação (sink, estados, cancelamento)
"""
