# financas/planejamento.py
from __future__ import annotations
from dataclasses import dataclass

from .entrada import nao_negativo


@dataclass(frozen=True)
class ThirteenthSplit:
    total: float
    first_installment: float   # até 30/nov
    second_installment: float  # até 20/dez


def emergency_reserve(monthly_cost: float, months: float) -> float:
    """Reserva de emergência = custo mensal x meses de cobertura."""
    return nao_negativo(nao_negativo(monthly_cost) * nao_negativo(months))


def thirteenth_salary(gross_monthly: float) -> ThirteenthSplit:
    total = nao_negativo(gross_monthly)
    return ThirteenthSplit(total, total / 2, total / 2)


def vacation_reserve(gross_monthly: float, pct: float) -> float:
    """Provisão de férias: salário x pct/100 (ex.: 35 ~ 1/3 constitucional + folga)."""
    return nao_negativo(nao_negativo(gross_monthly) * (nao_negativo(pct) / 100.0))
