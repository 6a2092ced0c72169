# financas/amortizacao.py
from __future__ import annotations
import math
from dataclasses import astuple, dataclass
from enum import Enum

import numpy as np
import pandas as pd

from .entrada import nao_negativo
from .tvm import taxa_mensal_nominal, pmt_price


class AmortizationSystem(Enum):
    PRICE = "price"  # parcela constante (francês)
    SAC = "sac"      # amortização constante


@dataclass(frozen=True)
class LoanInput:
    principal: float
    months: int
    annual_rate_pct: float      # taxa nominal anual em % (ex.: 11.5)
    system: AmortizationSystem = AmortizationSystem.PRICE


@dataclass(frozen=True)
class LoanResult:
    first_installment: float
    last_installment: float
    total_paid: float
    total_interest: float


_ZERO = LoanResult(0.0, 0.0, 0.0, 0.0)
_COLUNAS = ["mes", "parcela", "juros", "amortizacao", "saldo"]


def _normalizar(inp: LoanInput):
    principal = nao_negativo(inp.principal)
    # piso defensivo: prazo <= 0 vira 1 mês
    meses = max(1, int(nao_negativo(inp.months)))
    try:
        r = taxa_mensal_nominal(float(inp.annual_rate_pct))
    except (TypeError, ValueError):
        r = 0.0
    if not np.isfinite(r):
        r = 0.0
    return principal, meses, r


def _finito(res: LoanResult) -> LoanResult:
    # estouro de float (valores/taxas absurdos) cai na regra "lixo entra, zero sai"
    if all(math.isfinite(v) for v in astuple(res)):
        return res
    return _ZERO


def amortize(inp: LoanInput) -> LoanResult:
    """
    Resumo do financiamento.
    - PRICE: A = P*r/(1-(1+r)^-n), primeira = última = A
    - SAC: Am = P/n; primeira = Am + P*r; última = Am + Am*r;
      total = n*Am + r*P*(n+1)/2 (soma da PA dos juros decrescentes)
    Taxa <= 0 vira divisão linear, sem juros. Resultado não finito vira zero.
    """
    principal, n, r = _normalizar(inp)
    if principal <= 0:
        return _ZERO

    if r <= 0:
        parcela = principal / n
        return _finito(LoanResult(parcela, parcela, principal, 0.0))

    if inp.system is AmortizationSystem.PRICE:
        parcela = pmt_price(principal, r, n)
        total = parcela * n
        return _finito(LoanResult(parcela, parcela, total, total - principal))

    amort = principal / n
    primeira = amort + principal * r
    # juros da última parcela incidem sobre o saldo final = uma fatia de amortização
    ultima = amort + amort * r
    total = n * amort + r * principal * ((n + 1) / 2)
    return _finito(LoanResult(primeira, ultima, total, total - principal))


def amortization_schedule(inp: LoanInput) -> pd.DataFrame:
    """
    Tabela mês a mês: mes, parcela, juros, amortizacao, saldo (saldo após o pagamento).
    Principal zerado (ou valores que estouram o float) devolve tabela vazia.
    """
    principal, n, r = _normalizar(inp)
    if principal <= 0:
        return pd.DataFrame(columns=_COLUNAS)

    meses = np.arange(1, n + 1)
    with np.errstate(over="ignore", invalid="ignore"):
        if r <= 0:
            amortizacao = np.full(n, principal / n)
            juros = np.zeros(n)
        elif inp.system is AmortizationSystem.PRICE:
            parcela = pmt_price(principal, r, n)
            # saldo antes do pagamento k: P*(1+r)^(k-1) - A*((1+r)^(k-1) - 1)/r
            crescimento = np.expm1((meses - 1) * np.log1p(r))
            saldo_antes = principal * (1.0 + crescimento) - parcela * crescimento / r
            juros = saldo_antes * r
            amortizacao = parcela - juros
        else:
            amortizacao = np.full(n, principal / n)
            saldo_antes = principal - amortizacao[0] * (meses - 1)
            juros = saldo_antes * r

        parcelas = amortizacao + juros
        saldo = np.clip(principal - np.cumsum(amortizacao), 0.0, None)
    if not all(np.isfinite(col).all() for col in (parcelas, juros, amortizacao, saldo)):
        return pd.DataFrame(columns=_COLUNAS)
    return pd.DataFrame({
        "mes": meses,
        "parcela": parcelas,
        "juros": juros,
        "amortizacao": amortizacao,
        "saldo": saldo,
    })
