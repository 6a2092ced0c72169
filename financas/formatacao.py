# financas/formatacao.py
from __future__ import annotations


def formatar_brl(valor: float) -> str:
    """1234.5 -> 'R$ 1.234,50' (agrupamento pt-BR)."""
    txt = f"{abs(valor):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sinal = "-" if valor < 0 and round(abs(valor), 2) > 0 else ""
    return f"{sinal}R$ {txt}"


def formatar_pct(valor_pct: float, casas: int = 2) -> str:
    """Recebe percentual (ex.: 16.75) e devolve '16,75%'."""
    return f"{valor_pct:.{casas}f}%".replace(".", ",")
