# src/coldflow/core/config/hashing.py
"""
Hashing canônico de configuração do coldflow.

O hash representa a identidade estrutural da configuração efetiva e é
registrado nos metadados do contexto de ativação, permitindo afirmar que
duas execuções partiram exatamente da mesma descrição de pipeline.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - Algoritmo SHA-256
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva.

    Invariantes:
        - Configurações estruturalmente equivalentes produzem o mesmo hash
        - O valor retornado é uma string hexadecimal de 64 caracteres

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
