# financas/folha.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from config.logging_config import log
from .entrada import nao_negativo
from .faixas import BracketMode, apply_brackets, marginal_slices
from .tabelas import TaxYearConfig, config_padrao


@dataclass(frozen=True)
class PayrollInput:
    gross_monthly: float
    dependents: int = 0


@dataclass(frozen=True)
class PayrollResult:
    inss: float
    irrf: float
    fgts_deposit: float
    net: float
    taxable_income_after_inss: float


def calc_inss(salario_bruto: float, config: Optional[TaxYearConfig] = None) -> float:
    """INSS progressivo: soma da alíquota de cada faixa sobre a fatia do salário nela."""
    config = config or config_padrao()
    return apply_brackets(salario_bruto, config.inss, BracketMode.MARGINAL)


def inss_por_faixa(salario_bruto: float, config: Optional[TaxYearConfig] = None) -> List[float]:
    config = config or config_padrao()
    return marginal_slices(salario_bruto, config.inss)


def calc_irrf(base_bruta: float, inss_descontado: float, dependentes: int,
              config: Optional[TaxYearConfig] = None) -> float:
    """
    IRRF mensal: base = bruto - INSS - dependentes * dedução; imposto = base*alíquota - parcela a deduzir.
    """
    config = config or config_padrao()
    return apply_brackets(_base_irrf(base_bruta, inss_descontado, dependentes, config),
                          config.irrf, BracketMode.SINGLE_LOOKUP)


def _base_irrf(base_bruta: float, inss: float, dependentes: int, config: TaxYearConfig) -> float:
    deducao = int(nao_negativo(dependentes)) * config.dependent_deduction
    return max(0.0, nao_negativo(base_bruta) - inss - deducao)


def calculate_payroll(inp: PayrollInput, config: Optional[TaxYearConfig] = None) -> PayrollResult:
    config = config or config_padrao()
    bruto = nao_negativo(inp.gross_monthly)
    inss = calc_inss(bruto, config)
    base_ir = _base_irrf(bruto, inss, inp.dependents, config)
    irrf = apply_brackets(base_ir, config.irrf, BracketMode.SINGLE_LOOKUP)
    fgts = bruto * config.fgts_deposit_rate
    log.debug(f"Folha {config.year}: bruto={bruto:.2f} inss={inss:.2f} base_ir={base_ir:.2f} irrf={irrf:.2f}")
    return PayrollResult(
        inss=inss,
        irrf=irrf,
        fgts_deposit=fgts,
        net=bruto - inss - irrf,
        taxable_income_after_inss=base_ir,
    )
