# financas/tvm.py
from __future__ import annotations
import math

def taxa_mensal_nominal(taxa_aa_pct: float) -> float:
    """Taxa nominal anual em % -> taxa mensal proporcional: (i/12)/100"""
    return taxa_aa_pct / 12.0 / 100.0

def aa_to_am(i_aa: float) -> float:
    """Converte taxa efetiva ao ano para efetiva ao mês: (1+i)^1/12 - 1"""
    return (1.0 + i_aa) ** (1.0 / 12.0) - 1.0

def pmt_price(vp: float, i: float, n: int) -> float:
    """
    Parcela constante (Tabela Price): VP * i / (1 - (1+i)^-n)
    O denominador sai de expm1/log1p para não zerar com taxas minúsculas;
    se ainda assim zerar, vira divisão simples.
    """
    if i <= 0:
        return vp / n
    den = -math.expm1(-n * math.log1p(i))
    if den == 0 or not math.isfinite(den):
        return vp / n
    return vp * (i / den)
