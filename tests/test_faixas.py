import math
import numpy as np
import pytest
from financas.erros import ValidationError
from financas.faixas import BracketMode, BracketRow, apply_brackets, find_bracket, marginal_slices
from financas.tabelas import CONFIG_2024

INSS = CONFIG_2024.inss
IRRF = CONFIG_2024.irrf
FGTS = CONFIG_2024.fgts_withdrawal


def test_marginal_primeira_faixa():
    assert abs(apply_brackets(1000, INSS) - 75.0) < 1e-9

def test_marginal_soma_fatias():
    esperado = 1412 * 0.075 + (2666.68 - 1412) * 0.09 + (4000.03 - 2666.68) * 0.12 + (6500 - 4000.03) * 0.14
    assert abs(apply_brackets(6500, INSS, BracketMode.MARGINAL) - esperado) < 1e-9
    assert abs(sum(marginal_slices(6500, INSS)) - apply_brackets(6500, INSS)) < 1e-12

def test_marginal_para_no_teto():
    teto = apply_brackets(7786.02, INSS)
    assert abs(teto - 908.8618) < 1e-6
    assert apply_brackets(50000, INSS) == teto

def test_marginal_monotono():
    valores = np.sort(np.random.default_rng(7).uniform(0, 20000, 500))
    resultados = [apply_brackets(float(v), INSS) for v in valores]
    assert all(b >= a for a, b in zip(resultados, resultados[1:]))

def test_fatias_nao_alcancadas_zeradas():
    fatias = marginal_slices(1000, INSS)
    assert fatias[0] == 75.0
    assert fatias[1:] == [0.0, 0.0, 0.0, 0.0]

def test_valores_degenerados_zeram():
    for v in (0, -100, float("nan"), float("inf"), None, "abc"):
        assert apply_brackets(v, INSS) == 0
        assert apply_brackets(v, IRRF, BracketMode.SINGLE_LOOKUP) == 0

def test_lookup_irrf_faixa_unica():
    # 3000 na 3ª faixa: 15% - 381,44
    assert abs(apply_brackets(3000, IRRF, BracketMode.SINGLE_LOOKUP) - (3000 * 0.15 - 381.44)) < 1e-9

def test_lookup_isento():
    assert apply_brackets(2259.20, IRRF, BracketMode.SINGLE_LOOKUP) == 0

def test_lookup_vao_de_centavos_vai_para_proxima_faixa():
    assert find_bracket(2259.205, IRRF).rate == 0.075

def test_lookup_nunca_negativo():
    # logo no início da 2ª faixa a dedução supera o imposto bruto
    assert apply_brackets(2259.21, IRRF, BracketMode.SINGLE_LOOKUP) >= 0

def test_lookup_com_parcela_adicional():
    assert apply_brackets(12000, FGTS, BracketMode.SINGLE_LOOKUP) == 12000 * 0.15 + 1150

def test_tabela_vazia():
    with pytest.raises(ValidationError):
        apply_brackets(100, [])

def test_tabela_fora_de_ordem():
    tabela = [BracketRow(1000, 0.1), BracketRow(500, 0.2), BracketRow(math.inf, 0.3)]
    with pytest.raises(ValidationError):
        apply_brackets(100, tabela)

def test_tabela_sem_teto_infinito():
    with pytest.raises(ValidationError):
        apply_brackets(100, [BracketRow(1000, 0.1)], BracketMode.SINGLE_LOOKUP)
