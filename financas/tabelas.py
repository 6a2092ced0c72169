# financas/tabelas.py
"""
Tabelas legais por ano-calendário.

Faixas de INSS/IRRF/Simples mudam todo ano. Ficam aqui como dados
(`TaxYearConfig`) passados às calculadoras e podem ser sobrescritas por um JSON
(CALC_TABELAS_PATH).
"""
from __future__ import annotations
import json
import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from config.logging_config import log
from config.settings import TABELAS_PATH
from .erros import ValidationError
from .faixas import BracketRow, validate_brackets

INF = math.inf


class Activity(Enum):
    COMERCIO = "comercio"
    SERVICO = "servico"
    MISTO = "misto"


@dataclass(frozen=True)
class TaxYearConfig:
    year: int
    inss: Tuple[BracketRow, ...]
    irrf: Tuple[BracketRow, ...]
    dependent_deduction: float
    fgts_withdrawal: Tuple[BracketRow, ...]
    simples_comercio: Tuple[BracketRow, ...]
    simples_servicos: Tuple[BracketRow, ...]
    fgts_deposit_rate: float = 0.08
    simples_annual_limit: float = 4_800_000.0
    mei_annual_limit: float = 81_000.0
    mei_aliquots: Mapping[Activity, float] = field(default_factory=lambda: {
        Activity.COMERCIO: 0.04, Activity.SERVICO: 0.06, Activity.MISTO: 0.055,
    })
    minimum_wage: float = 1412.0
    mei_inss_rate: float = 0.05
    # adicional fixo do DAS-MEI: ICMS R$1 (comércio), ISS R$5 (serviço), ambos R$6
    mei_fixed_additional: Mapping[Activity, float] = field(default_factory=lambda: {
        Activity.COMERCIO: 1.0, Activity.SERVICO: 5.0, Activity.MISTO: 6.0,
    })
    presumption_factors: Mapping[Activity, float] = field(default_factory=lambda: {
        Activity.COMERCIO: 0.08, Activity.SERVICO: 0.32, Activity.MISTO: 0.08,
    })
    irpj_rate: float = 0.15
    csll_rate: float = 0.09
    pis_cofins_rate: float = 0.0365
    payroll_charges_rate: float = 0.28

    def __post_init__(self):
        for nome in ("inss", "irrf", "fgts_withdrawal", "simples_comercio", "simples_servicos"):
            tabela = getattr(self, nome)
            try:
                validate_brackets(tabela)
            except ValidationError as e:
                raise ValidationError(f"{self.year}/{nome}: {e}") from e
        for nome in ("mei_aliquots", "mei_fixed_additional", "presumption_factors"):
            faltando = set(Activity) - set(getattr(self, nome))
            if faltando:
                raise ValidationError(f"{self.year}/{nome}: atividades sem valor {sorted(a.value for a in faltando)}")


CONFIG_2024 = TaxYearConfig(
    year=2024,
    # Portaria Interministerial MPS/MF 2/2024; teto R$ 7.786,02 -> acima dele nada incide
    inss=(
        BracketRow(1412.00, 0.075),
        BracketRow(2666.68, 0.09),
        BracketRow(4000.03, 0.12),
        BracketRow(7786.02, 0.14),
        BracketRow(INF, 0.0),
    ),
    irrf=(
        BracketRow(2259.20, 0.0, 0.0, min=0.0),
        BracketRow(2826.65, 0.075, 169.44, min=2259.21),
        BracketRow(3751.05, 0.15, 381.44, min=2826.66),
        BracketRow(4664.68, 0.225, 662.77, min=3751.06),
        BracketRow(INF, 0.275, 896.00, min=4664.69),
    ),
    dependent_deduction=189.59,
    # saque-aniversário (Lei 13.932/2019): alíquota sobre o saldo + parcela adicional
    fgts_withdrawal=(
        BracketRow(500.0, 0.50, extra=0.0),
        BracketRow(1000.0, 0.40, extra=50.0),
        BracketRow(5000.0, 0.30, extra=150.0),
        BracketRow(10000.0, 0.20, extra=650.0),
        BracketRow(15000.0, 0.15, extra=1150.0),
        BracketRow(20000.0, 0.10, extra=1900.0),
        BracketRow(INF, 0.05, extra=2900.0),
    ),
    # LC 123/2006, Anexo I; última faixa vale também acima de 4,8 mi (catch-all)
    simples_comercio=(
        BracketRow(180_000.0, 0.04, 0.0),
        BracketRow(360_000.0, 0.073, 5_940.0),
        BracketRow(720_000.0, 0.095, 13_860.0),
        BracketRow(1_800_000.0, 0.107, 22_500.0),
        BracketRow(3_600_000.0, 0.143, 87_300.0),
        BracketRow(INF, 0.19, 378_000.0),
    ),
    # LC 123/2006, Anexo V (estimativa para serviços)
    simples_servicos=(
        BracketRow(180_000.0, 0.155, 0.0),
        BracketRow(360_000.0, 0.18, 4_500.0),
        BracketRow(720_000.0, 0.195, 9_900.0),
        BracketRow(1_800_000.0, 0.205, 17_100.0),
        BracketRow(3_600_000.0, 0.23, 62_100.0),
        BracketRow(INF, 0.305, 540_000.0),
    ),
)

TABELAS: Dict[int, TaxYearConfig] = {CONFIG_2024.year: CONFIG_2024}

_CAMPOS_TABELA = ("inss", "irrf", "fgts_withdrawal", "simples_comercio", "simples_servicos")
_CAMPOS_ATIVIDADE = ("mei_aliquots", "mei_fixed_additional", "presumption_factors")
_CAMPOS_NUMERICOS = frozenset(f.name for f in fields(TaxYearConfig)) - {"year", *_CAMPOS_TABELA, *_CAMPOS_ATIVIDADE}


def _linhas(raw: Any, nome: str) -> Tuple[BracketRow, ...]:
    if not isinstance(raw, list):
        raise ValidationError(f"'{nome}' deve ser uma lista de faixas.")
    out = []
    for item in raw:
        try:
            teto = item.get("max")
            out.append(BracketRow(
                max=INF if teto is None or teto == "inf" else float(teto),
                rate=float(item["rate"]),
                deduction=float(item.get("deduction", 0.0)),
                extra=float(item.get("extra", 0.0)),
                min=None if item.get("min") is None else float(item["min"]),
            ))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Faixa inválida em '{nome}': {item!r}") from e
    return tuple(out)


def _por_atividade(raw: Any, base: Mapping[Activity, float], nome: str) -> Dict[Activity, float]:
    if not isinstance(raw, dict):
        raise ValidationError(f"'{nome}' deve mapear atividade -> valor.")
    merged = dict(base)
    for chave, valor in raw.items():
        try:
            merged[Activity(chave)] = float(valor)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"'{nome}': entrada inválida {chave!r}={valor!r}") from e
    return merged


def config_from_dict(data: Dict[str, Any], base: TaxYearConfig = CONFIG_2024) -> TaxYearConfig:
    """
    Sobrepõe `data` sobre `base`. Tabelas são substituídas por inteiro (não há
    merge faixa a faixa); mapas por atividade são mesclados chave a chave.
    Em `max`, null ou "inf" significa teto infinito.
    """
    if not isinstance(data, dict):
        raise ValidationError("Configuração de tabelas deve ser um objeto JSON.")
    campos: Dict[str, Any] = {}
    for chave, valor in data.items():
        if chave in _CAMPOS_TABELA:
            campos[chave] = _linhas(valor, chave)
        elif chave in _CAMPOS_ATIVIDADE:
            campos[chave] = _por_atividade(valor, getattr(base, chave), chave)
        elif chave == "year":
            if not isinstance(valor, int) or isinstance(valor, bool):
                raise ValidationError(f"'year' deve ser inteiro: {valor!r}")
            campos[chave] = valor
        elif chave in _CAMPOS_NUMERICOS:
            try:
                campos[chave] = float(valor)
            except (TypeError, ValueError) as e:
                raise ValidationError(f"'{chave}' deve ser numérico: {valor!r}") from e
        else:
            raise ValidationError(f"Campo desconhecido na configuração: '{chave}'")
    return replace(base, **campos)


def carregar_config(path: str | Path, base: Optional[TaxYearConfig] = None) -> TaxYearConfig:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"JSON inválido em {path}: {e}") from e
    if base is None:
        ano = data.get("year") if isinstance(data, dict) else None
        base = TABELAS.get(ano, CONFIG_2024) if isinstance(ano, int) else CONFIG_2024
    cfg = config_from_dict(data, base)
    log.info(f"Tabelas {cfg.year} carregadas de {path}")
    return cfg


@lru_cache(maxsize=1)
def config_padrao() -> TaxYearConfig:
    """Tabelas do JSON em CALC_TABELAS_PATH, se definido; senão as de 2024 embutidas."""
    if TABELAS_PATH:
        return carregar_config(TABELAS_PATH)
    return CONFIG_2024
