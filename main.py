# main.py
from __future__ import annotations

import requests

from config.logging_config import log
from financas.entrada import parse_numero, parse_inteiro
from financas.formatacao import formatar_brl, formatar_pct
from financas.tvm import aa_to_am
from financas.tabelas import Activity, config_padrao
from financas.amortizacao import AmortizationSystem, LoanInput, amortize
from financas.folha import PayrollInput, calculate_payroll
from financas.regimes import Regime, RegimeInput, estimate_regime_tax, das_mei_fixo
from financas.fgts import estimate_fgts_withdrawal
from financas.planejamento import emergency_reserve, thirteenth_salary, vacation_reserve
from financas.erros import ValidationError
from compliance.registro import list_entries
from compliance.auditoria import ComplianceAuditLog, HistoryRange
from services.bcb_api import fetch_indicadores, get_ipca_12m


# =========================
# Helpers de entrada
# =========================
def _input_float(msg: str, default: float) -> float:
    raw = input(f"{msg} [{default}]: ").strip()
    return parse_numero(raw) if raw else default

def _input_int(msg: str, default: int) -> int:
    raw = input(f"{msg} [{default}]: ").strip()
    return parse_inteiro(raw) if raw else default

def _input_opcao(msg: str, opcoes: dict, default: str):
    raw = input(f"{msg} ({'/'.join(opcoes)}) [{default}]: ").strip().lower()
    return opcoes.get(raw or default, opcoes[default])


ATIVIDADES = {"comercio": Activity.COMERCIO, "servico": Activity.SERVICO, "misto": Activity.MISTO}
REGIMES = {r.value: r for r in Regime}
SISTEMAS = {"price": AmortizationSystem.PRICE, "sac": AmortizationSystem.SAC}


# =========================
# Menu
# =========================
def menu():
    print(f"\n=== Calculadora Tributária Brasil (tabelas {config_padrao().year}) ===")
    print("1) Financiamento (PRICE/SAC)")
    print("2) Folha CLT: INSS, IRRF e FGTS")
    print("3) PJ: MEI / Simples / Lucro Presumido")
    print("4) FGTS saque-aniversário")
    print("5) Planejamento: reserva de emergência, 13º e férias")
    print("6) Matriz de conformidade")
    print("7) Indicadores (SGS/BCB + feriados)")
    print("0) Sair")


# =========================
# Ações do menu
# =========================
def acao_financiamento():
    inp = LoanInput(
        principal=_input_float("Valor financiado", 350000.0),
        months=_input_int("Prazo (meses)", 360),
        annual_rate_pct=_input_float("Taxa nominal anual (%)", 11.5),
        system=_input_opcao("Sistema", SISTEMAS, "price"),
    )
    res = amortize(inp)
    print(f"\n{inp.system.name}: 1ª parcela {formatar_brl(res.first_installment)} | "
          f"última {formatar_brl(res.last_installment)}")
    print(f"Total pago {formatar_brl(res.total_paid)} | juros {formatar_brl(res.total_interest)}")


def acao_folha():
    cfg = config_padrao()
    inp = PayrollInput(_input_float("Salário bruto", 6500.0), _input_int("Dependentes", 0))
    res = calculate_payroll(inp, cfg)
    print(f"\nINSS: {formatar_brl(res.inss)} | Base IR: {formatar_brl(res.taxable_income_after_inss)} | "
          f"IRRF: {formatar_brl(res.irrf)}")
    print(f"FGTS (depósito): {formatar_brl(res.fgts_deposit)} | Líquido: {formatar_brl(res.net)}")


def acao_pj():
    cfg = config_padrao()
    inp = RegimeInput(
        regime=_input_opcao("Regime", REGIMES, "mei"),
        monthly_revenue=_input_float("Faturamento mensal", 12000.0),
        activity=_input_opcao("Atividade", ATIVIDADES, "servico"),
        payroll=_input_float("Folha mensal (Lucro Presumido)", 4500.0),
    )
    res = estimate_regime_tax(inp, cfg)
    print(f"\n{res.regime.value}: imposto mensal {formatar_brl(res.monthly_tax_estimate)} "
          f"({formatar_pct(res.effective_rate_pct)} efetivo)")
    print(f"Projeção anual: {formatar_brl(res.annual_revenue_projection)}")
    if res.annual_limit is not None:
        print(f"Limite anual: {formatar_brl(res.annual_limit)}" + (" -> ACIMA DO LIMITE" if res.limit_exceeded else ""))
    if inp.regime is Regime.MEI:
        print(f"DAS-MEI fixo legal: {formatar_brl(das_mei_fixo(inp.activity, cfg))}")
    for nome, valor in res.components.items():
        print(f"  - {nome}: {valor:,.4f}")


def acao_fgts():
    saldo = _input_float("Saldo FGTS", 12000.0)
    print(f"\nSaque-aniversário estimado: {formatar_brl(estimate_fgts_withdrawal(saldo))}")


def acao_planejamento():
    custo = _input_float("Custo mensal", 5000.0)
    meses = _input_int("Meses de reserva", 6)
    salario = _input_float("Salário bruto", 6500.0)
    pct_ferias = _input_float("Provisão de férias (% do salário)", 35.0)
    decimo = thirteenth_salary(salario)
    print(f"\nReserva de emergência: {formatar_brl(emergency_reserve(custo, meses))}")
    print(f"13º: {formatar_brl(decimo.total)} (2 x {formatar_brl(decimo.first_installment)})")
    print(f"Reserva de férias: {formatar_brl(vacation_reserve(salario, pct_ferias))}")


def acao_conformidade(audit: ComplianceAuditLog):
    for e in list_entries():
        atual = audit.current_review(e.id)
        revisado = f"{atual.reviewer_name} em {atual.reviewed_at:%d/%m/%Y %H:%M}" if atual else f"{e.last_reviewed:%d/%m/%Y}"
        print(f"[{e.scope}] {e.id}: {e.topic} | {e.periodicity} | última revisão: {revisado}")
    entry_id = input("\nRegistrar revisão para qual id? (enter para voltar): ").strip()
    if not entry_id:
        return
    try:
        audit.record_review(entry_id, input("Seu id: ").strip(), input("Seu nome: ").strip(),
                            input("Observação: ").strip())
    except ValidationError as e:
        print(f"Não registrado: {e}")
        return
    for r in audit.history(entry_id, HistoryRange.LAST_30_DAYS):
        print(f"- {r.reviewed_at:%d/%m/%Y %H:%M} {r.reviewer_name}: {r.note or ''}")


def acao_indicadores():
    try:
        m = fetch_indicadores()
        ipca_12m, _ = get_ipca_12m()
    except (requests.RequestException, RuntimeError) as e:
        log.warning(f"Indicadores indisponíveis: {e}")
        print("Dados públicos indisponíveis no momento.")
        return
    selic_am = aa_to_am(m["selic_meta_aa_pct"] / 100.0)
    print(f"\nSelic meta: {formatar_pct(m['selic_meta_aa_pct'])} a.a. (~{formatar_pct(selic_am * 100, 4)} a.m.) em {m['selic_data']}")
    print(f"IPCA: {formatar_pct(m['ipca_mensal_pct'])} no mês ({m['ipca_data']}), {formatar_pct(ipca_12m * 100)} em 12 meses")
    print(f"CDI: {formatar_pct(m['cdi_diario_pct'], 6)} a.d. em {m['cdi_data']}")
    for f in m.get("feriados", []):
        print(f"  {f['date']} - {f['name']}")


# =========================
# Loop principal
# =========================
def main():
    audit = ComplianceAuditLog()
    acoes = {
        "1": acao_financiamento,
        "2": acao_folha,
        "3": acao_pj,
        "4": acao_fgts,
        "5": acao_planejamento,
        "6": lambda: acao_conformidade(audit),
        "7": acao_indicadores,
    }
    while True:
        menu()
        op = input("Escolha: ").strip()
        if op == "0":
            print("Até mais!")
            break
        acao = acoes.get(op)
        if acao is None:
            print("Opção inválida.")
            continue
        acao()


if __name__ == "__main__":
    main()
