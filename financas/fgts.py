# financas/fgts.py
from __future__ import annotations
from typing import Optional

from .faixas import BracketMode, apply_brackets
from .tabelas import TaxYearConfig, config_padrao


def estimate_fgts_withdrawal(balance: float, config: Optional[TaxYearConfig] = None) -> float:
    """
    Saque-aniversário: faixa pelo saldo (saldo <= teto), valor = saldo*alíquota + parcela adicional.
    Ex.: saldo 500 -> 50% = 250; saldo 12.000 -> 15% + 1.150 = 2.950.
    """
    config = config or config_padrao()
    return apply_brackets(balance, config.fgts_withdrawal, BracketMode.SINGLE_LOOKUP)
