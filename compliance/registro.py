# compliance/registro.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ComplianceEntry:
    id: str
    scope: str               # "PF" | "PJ" | "PF/PJ"
    topic: str
    formula_description: str
    legal_reference: str
    periodicity: str
    last_reviewed: date
    notes: str = ""


_REVISAO = date(2026, 2, 16)

ENTRIES: Tuple[ComplianceEntry, ...] = (
    ComplianceEntry(
        "pf-inss", "PF", "INSS progressivo (segurado empregado)",
        "Aplicação por faixas salariais progressivas, somando parcela de cada faixa até o teto.",
        "Previdência Social (regras federais vigentes para contribuição por faixa).",
        "Mensal", _REVISAO,
        "Utilizado para perfis PF (CLT/servidor) como estimativa educacional.",
    ),
    ComplianceEntry(
        "pf-irrf", "PF", "IRRF mensal sobre renda do trabalho",
        "Base = bruto - INSS - dedução por dependentes; imposto = (base × alíquota) - parcela a deduzir.",
        "Tabela mensal de IRRF da Receita Federal (faixas e parcela a deduzir vigentes).",
        "Mensal", _REVISAO,
        "As faixas podem mudar por lei/decreto; validar na tabela oficial antes de decisão final.",
    ),
    ComplianceEntry(
        "pf-fgts", "PF", "FGTS sobre salário CLT",
        "Depósito padrão estimado de 8% sobre remuneração base.",
        "Regras federais do FGTS para contrato CLT.",
        "Mensal", _REVISAO,
        "Há também simulação de saque-aniversário por faixas.",
    ),
    ComplianceEntry(
        "pj-mei", "PJ", "MEI (DAS e limite anual)",
        "Estimativa simplificada com componente previdenciário + adicional por atividade e checagem de limite anual.",
        "LC 123/2006 e normativos do Simples/MEI vigentes.",
        "Mensal/Anual", _REVISAO,
        "Aplicável a perfis PJ-MEI; limite anual deve ser monitorado continuamente.",
    ),
    ComplianceEntry(
        "pj-simples", "PJ", "Simples Nacional (comércio/serviços)",
        "Alíquota efetiva = ((RBT12 × alíquota nominal) - parcela dedutível) / RBT12.",
        "LC 123/2006 (anexos e fórmula de alíquota efetiva) e atualizações oficiais.",
        "Mensal", _REVISAO,
        "Comércio usa estrutura tipo Anexo I e serviços estimativa tipo Anexo V.",
    ),
    ComplianceEntry(
        "pj-lp", "PJ", "Lucro Presumido (estimativa consolidada)",
        "Base presumida por atividade + componentes IRPJ/CSLL e tributos sobre receita (modelo simplificado educacional).",
        "Normas federais de IRPJ/CSLL/PIS/COFINS para lucro presumido.",
        "Mensal/Trimestral", _REVISAO,
        "Estimativa para planejamento; apuração oficial exige enquadramento fiscal detalhado.",
    ),
    ComplianceEntry(
        "open-data", "PF/PJ", "Indicadores macroeconômicos e feriados",
        "Consulta direta de séries públicas (SELIC/IPCA/CDI) e calendário nacional.",
        "Banco Central do Brasil (API SGS) e BrasilAPI (dados públicos).",
        "Atualização online", _REVISAO,
        "Sem API key; sujeito à disponibilidade dos serviços públicos.",
    ),
)

_POR_ID: Dict[str, ComplianceEntry] = {e.id: e for e in ENTRIES}


def list_entries() -> Tuple[ComplianceEntry, ...]:
    return ENTRIES


def get_entry(entry_id: str) -> Optional[ComplianceEntry]:
    return _POR_ID.get(entry_id)
