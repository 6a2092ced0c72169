# financas/entrada.py
from __future__ import annotations
import math
import re
from typing import Any

_LIXO = re.compile(r"[^\d,.\-]")


def nao_negativo(valor: Any) -> float:
    """
    Converte para float finito >= 0. Qualquer coisa inválida (None, texto,
    NaN, infinito, negativo) vira 0.0.
    """
    if isinstance(valor, bool):
        return 0.0
    try:
        x = float(valor)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(x) or x < 0:
        return 0.0
    return x


def parse_numero(raw: Any) -> float:
    """
    Lê número digitado pelo usuário:
    - "1.234,56" / "R$ 1.234,56" -> 1234.56 (ponto = milhar quando há vírgula)
    - "12,5" -> 12.5
    - "12.5" -> 12.5
    Texto inválido ou negativo -> 0.0
    """
    if raw is None:
        return 0.0
    if not isinstance(raw, str):
        return nao_negativo(raw)
    s = _LIXO.sub("", raw.strip())
    if "," in s:
        s = s.replace(".", "").replace(",", ".")
    return nao_negativo(s) if s else 0.0


def parse_inteiro(raw: Any, minimo: int = 0) -> int:
    """Parte inteira do número lido, nunca abaixo de `minimo`."""
    return max(minimo, int(parse_numero(raw)))
