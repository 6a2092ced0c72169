# financas/regimes.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

from config.logging_config import log
from .entrada import nao_negativo
from .faixas import find_bracket
from .tabelas import Activity, TaxYearConfig, config_padrao


class Regime(Enum):
    MEI = "mei"
    SIMPLES_COMERCIO = "simples-comercio"
    SIMPLES_SERVICOS = "simples-servicos"
    LUCRO_PRESUMIDO = "lucro-presumido"


@dataclass(frozen=True)
class RegimeInput:
    regime: Regime
    monthly_revenue: float
    activity: Activity = Activity.SERVICO
    payroll: float = 0.0        # só Lucro Presumido (encargos sobre folha)


@dataclass(frozen=True)
class RegimeResult:
    regime: Regime
    effective_rate_pct: float
    monthly_tax_estimate: float
    annual_revenue_projection: float
    annual_limit: Optional[float]
    limit_exceeded: bool
    components: Dict[str, float] = field(default_factory=dict)


def _razao(parte: float, todo: float) -> float:
    return parte / todo if todo > 0 else 0.0


def _mei(inp: RegimeInput, receita: float, cfg: TaxYearConfig) -> RegimeResult:
    anual = receita * 12
    aliquota = cfg.mei_aliquots[inp.activity]
    imposto = receita * aliquota
    return RegimeResult(
        regime=inp.regime,
        effective_rate_pct=_razao(imposto, receita) * 100,
        monthly_tax_estimate=imposto,
        annual_revenue_projection=anual,
        annual_limit=cfg.mei_annual_limit,
        limit_exceeded=anual > cfg.mei_annual_limit,
        components={"aliquota_base": aliquota},
    )


def _simples(inp: RegimeInput, receita: float, cfg: TaxYearConfig) -> RegimeResult:
    rbt12 = receita * 12
    tabela = cfg.simples_comercio if inp.regime is Regime.SIMPLES_COMERCIO else cfg.simples_servicos
    faixa = find_bracket(rbt12, tabela)
    # alíquota efetiva = (RBT12 x nominal - parcela a deduzir) / RBT12
    efetiva = max(0.0, _razao(rbt12 * faixa.rate - faixa.deduction, rbt12))
    return RegimeResult(
        regime=inp.regime,
        effective_rate_pct=efetiva * 100,
        monthly_tax_estimate=receita * efetiva,
        annual_revenue_projection=rbt12,
        annual_limit=cfg.simples_annual_limit,
        limit_exceeded=rbt12 > cfg.simples_annual_limit,
        components={"aliquota_nominal": faixa.rate, "parcela_deduzir": faixa.deduction},
    )


def _lucro_presumido(inp: RegimeInput, receita: float, cfg: TaxYearConfig) -> RegimeResult:
    base = receita * cfg.presumption_factors[inp.activity]
    partes = {
        "irpj": base * cfg.irpj_rate,
        "csll": base * cfg.csll_rate,
        "pis_cofins": receita * cfg.pis_cofins_rate,
        "encargos_folha": nao_negativo(inp.payroll) * cfg.payroll_charges_rate,
    }
    imposto = sum(partes.values())
    partes["base_presumida"] = base
    return RegimeResult(
        regime=inp.regime,
        effective_rate_pct=_razao(imposto, receita) * 100,
        monthly_tax_estimate=imposto,
        annual_revenue_projection=receita * 12,
        annual_limit=None,
        limit_exceeded=False,
        components=partes,
    )


_ESTIMADORES: Dict[Regime, Callable[[RegimeInput, float, TaxYearConfig], RegimeResult]] = {
    Regime.MEI: _mei,
    Regime.SIMPLES_COMERCIO: _simples,
    Regime.SIMPLES_SERVICOS: _simples,
    Regime.LUCRO_PRESUMIDO: _lucro_presumido,
}

_sem_estimador = set(Regime) - set(_ESTIMADORES)
if _sem_estimador:
    raise RuntimeError(f"Regimes sem estimador: {sorted(r.value for r in _sem_estimador)}")


def _finito(out: RegimeResult) -> bool:
    valores = [out.effective_rate_pct, out.monthly_tax_estimate, out.annual_revenue_projection,
               *out.components.values()]
    return all(math.isfinite(v) for v in valores)


def estimate_regime_tax(inp: RegimeInput, config: Optional[TaxYearConfig] = None) -> RegimeResult:
    config = config or config_padrao()
    receita = nao_negativo(inp.monthly_revenue)
    out = _ESTIMADORES[inp.regime](inp, receita, config)
    if not _finito(out):
        # receita que estoura o float (x12) segue a regra "lixo entra, zero sai"
        receita = 0.0
        out = _ESTIMADORES[inp.regime](inp, receita, config)
    log.debug(f"{inp.regime.value} {config.year}: receita={receita:.2f} imposto={out.monthly_tax_estimate:.2f} "
              f"efetiva={out.effective_rate_pct:.4f}%")
    return out


def das_mei_fixo(activity: Activity, config: Optional[TaxYearConfig] = None) -> float:
    """DAS-MEI mensal legal: 5% do salário mínimo (INSS) + ICMS/ISS fixo da atividade."""
    config = config or config_padrao()
    return config.minimum_wage * config.mei_inss_rate + config.mei_fixed_additional[activity]
