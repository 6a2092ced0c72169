# services/bcb_api.py
from __future__ import annotations
import requests
from typing import Tuple, List, Dict, Optional
from datetime import date, datetime

from config.logging_config import log
from config.settings import HTTP_TIMEOUT

SGS_BASE = "https://api.bcb.gov.br/dados/serie/bcdata.sgs.{code}/dados"
FERIADOS_URL = "https://brasilapi.com.br/api/feriados/v1/{ano}"

# Códigos SGS
SGS_SELIC_META = 432         # Meta Selic (% a.a.)
SGS_IPCA_MENSAL = 433        # IPCA var. mensal (% ao mês)
SGS_CDI_DIARIO = 12          # CDI (% a.d.)

def _get_json(url: str):
    r = requests.get(url, timeout=HTTP_TIMEOUT)
    r.raise_for_status()
    return r.json()

def _valor(item: dict) -> float:
    return float(str(item["valor"]).replace(",", "."))

def _get_sgs_last_value(code: int) -> Tuple[float, str]:
    data = _get_json(f"{SGS_BASE.format(code=code)}/ultimos/1?formato=json")
    if not data:
        raise RuntimeError(f"Série {code} sem dados.")
    ultimo = data[-1]
    return _valor(ultimo), ultimo["data"]  # dd/mm/aaaa

def _get_sgs_last_n_values(code: int, n: int) -> List[Tuple[str, float]]:
    data = _get_json(f"{SGS_BASE.format(code=code)}/ultimos/{n}?formato=json")
    return [(item["data"], _valor(item)) for item in data]

def get_selic_meta_aa() -> Tuple[float, str]:
    return _get_sgs_last_value(SGS_SELIC_META)  # % a.a.

def get_ipca_mensal() -> Tuple[float, str]:
    return _get_sgs_last_value(SGS_IPCA_MENSAL)  # % a.m.

def get_cdi_diario() -> Tuple[float, str]:
    return _get_sgs_last_value(SGS_CDI_DIARIO)  # % a.d.

def get_ipca_12m() -> Tuple[float, str]:
    """
    IPCA acumulado 12 meses (aprox.): produto dos últimos 12 meses (1+ipca_m/100)-1
    Retorna (ipca_aa_decimal, 'dd/mm/aaaa do último ponto')
    """
    ult_12 = _get_sgs_last_n_values(SGS_IPCA_MENSAL, 12)
    fator = 1.0
    for _, v_m in ult_12:
        fator *= (1.0 + v_m / 100.0)
    data_ultimo = ult_12[-1][0] if ult_12 else ""
    return fator - 1.0, data_ultimo

def get_feriados(ano: Optional[int] = None) -> List[Dict[str, str]]:
    """Feriados nacionais do ano (BrasilAPI): [{'date': 'aaaa-mm-dd', 'name': ..., 'type': ...}]"""
    ano = ano or date.today().year
    return _get_json(FERIADOS_URL.format(ano=ano)) or []

def fetch_indicadores(include_feriados: bool = True) -> dict:
    """
    Indicadores exibidos ao lado das calculadoras. Valores como publicados
    (percentuais), sem interpretação: as calculadoras não dependem deles.
    """
    selic, selic_data = get_selic_meta_aa()
    ipca, ipca_data = get_ipca_mensal()
    cdi, cdi_data = get_cdi_diario()
    out = {
        "selic_meta_aa_pct": selic,
        "selic_data": selic_data,
        "ipca_mensal_pct": ipca,
        "ipca_data": ipca_data,
        "cdi_diario_pct": cdi,
        "cdi_data": cdi_data,
        "fetch_time": datetime.now().isoformat(timespec="seconds"),
    }
    if include_feriados:
        out["feriados"] = get_feriados()
    log.info(f"Indicadores SGS: Selic {selic}% a.a. ({selic_data}), IPCA {ipca}% ({ipca_data}), CDI {cdi}% a.d.")
    return out
