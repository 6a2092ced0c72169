from financas.folha import PayrollInput, calculate_payroll, calc_inss, calc_irrf, inss_por_faixa
from financas.tabelas import CONFIG_2024


def test_folha_6500_sem_dependentes():
    res = calculate_payroll(PayrollInput(6500, 0), CONFIG_2024)
    assert abs(res.inss - 728.819) < 1e-6
    assert abs(res.taxable_income_after_inss - 5771.181) < 1e-6
    assert abs(res.irrf - (5771.181 * 0.275 - 896.0)) < 1e-6
    assert abs(res.fgts_deposit - 520.0) < 1e-9
    assert abs(res.net - (6500 - res.inss - res.irrf)) < 1e-9

def test_folha_com_dependentes():
    res = calculate_payroll(PayrollInput(3000, 2), CONFIG_2024)
    assert abs(res.inss - 258.8196) < 1e-6
    assert abs(res.taxable_income_after_inss - 2362.0004) < 1e-6
    assert abs(res.irrf - 7.71003) < 1e-6

def test_folha_isento_de_irrf():
    res = calculate_payroll(PayrollInput(2000, 0), CONFIG_2024)
    assert abs(res.inss - 158.82) < 1e-6
    assert res.irrf == 0

def test_dependentes_nao_deixam_base_negativa():
    res = calculate_payroll(PayrollInput(1500, 20), CONFIG_2024)
    assert res.taxable_income_after_inss == 0
    assert res.irrf == 0

def test_salario_invalido_zera():
    res = calculate_payroll(PayrollInput(-3000, 0), CONFIG_2024)
    assert (res.inss, res.irrf, res.fgts_deposit, res.net) == (0, 0, 0, 0)

def test_funcoes_avulsas_coerentes():
    inss = calc_inss(6500, CONFIG_2024)
    assert abs(sum(inss_por_faixa(6500, CONFIG_2024)) - inss) < 1e-12
    res = calculate_payroll(PayrollInput(6500, 1), CONFIG_2024)
    assert calc_irrf(6500, inss, 1, CONFIG_2024) == res.irrf

def test_idempotente():
    inp = PayrollInput(8123.45, 3)
    assert calculate_payroll(inp) == calculate_payroll(inp)
