from financas.entrada import nao_negativo, parse_numero, parse_inteiro
from financas.formatacao import formatar_brl, formatar_pct


def test_parse_formato_brasileiro():
    assert parse_numero("1.234,56") == 1234.56
    assert parse_numero("R$ 350.000,00") == 350000.0
    assert parse_numero("11,5") == 11.5

def test_parse_ponto_decimal():
    assert parse_numero("11.5") == 11.5

def test_lixo_vira_zero():
    for raw in ("", "abc", "-5", None, "nan", "1,2,3"):
        assert parse_numero(raw) == 0.0

def test_nao_negativo():
    assert nao_negativo(10) == 10.0
    assert nao_negativo(float("inf")) == 0.0
    assert nao_negativo(True) == 0.0

def test_parse_inteiro_com_piso():
    assert parse_inteiro("360") == 360
    assert parse_inteiro("0", minimo=1) == 1
    assert parse_inteiro("12,9") == 12

def test_formatar_brl():
    assert formatar_brl(1234.5) == "R$ 1.234,50"
    assert formatar_brl(0) == "R$ 0,00"
    assert formatar_brl(-10) == "-R$ 10,00"

def test_formatar_pct():
    assert formatar_pct(16.75) == "16,75%"
