# financas/faixas.py
from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .entrada import nao_negativo
from .erros import ValidationError


class BracketMode(Enum):
    MARGINAL = "marginal"            # cada faixa tributa só a fatia dentro dela (INSS)
    SINGLE_LOOKUP = "single_lookup"  # uma faixa só, fórmula sobre o valor todo (IRRF, FGTS, Simples)


@dataclass(frozen=True)
class BracketRow:
    max: float                   # teto inclusivo da faixa (inf na última)
    rate: float
    deduction: float = 0.0       # parcela a deduzir (IRRF, Simples)
    extra: float = 0.0           # parcela adicional fixa (saque-aniversário FGTS)
    min: Optional[float] = None  # piso explícito, quando a tabela oficial publica "de ... até"


def validate_brackets(brackets: Sequence[BracketRow]) -> None:
    """
    Tabela precisa cobrir [0, inf) sem buracos: não vazia, tetos estritamente
    crescentes e última linha com teto infinito.
    """
    if not brackets:
        raise ValidationError("Tabela de faixas vazia.")
    anterior = 0.0
    for idx, row in enumerate(brackets):
        if math.isnan(row.max) or row.max <= anterior:
            raise ValidationError(f"Faixa {idx} fora de ordem (teto {row.max} após {anterior}).")
        if row.min is not None and not (0.0 <= row.min <= row.max):
            raise ValidationError(f"Faixa {idx} com piso {row.min} fora do intervalo.")
        anterior = row.max
    if not math.isinf(brackets[-1].max):
        raise ValidationError("Última faixa deve ter teto infinito.")


def marginal_slices(amount: float, brackets: Sequence[BracketRow]) -> List[float]:
    """Contribuição de cada faixa no modo marginal (0.0 para faixas não alcançadas)."""
    validate_brackets(brackets)
    amount = nao_negativo(amount)
    out = [0.0] * len(brackets)
    teto_anterior = 0.0
    for idx, row in enumerate(brackets):
        if amount <= teto_anterior:
            break
        fatia = max(0.0, min(amount, row.max) - teto_anterior)
        out[idx] = fatia * row.rate
        teto_anterior = row.max
    return out


def find_bracket(amount: float, brackets: Sequence[BracketRow]) -> BracketRow:
    """
    Faixa única que contém `amount`: a primeira com amount <= teto.
    Em tabelas com piso explícito ("de 2.259,21 até 2.826,65") o valor que cai no
    vão de centavos entre duas faixas fica com a próxima, pelo teto.
    """
    validate_brackets(brackets)
    for row in brackets:
        if amount <= row.max:
            return row
    return brackets[-1]


def apply_brackets(amount: float, brackets: Sequence[BracketRow],
                   mode: BracketMode = BracketMode.MARGINAL) -> float:
    amount = nao_negativo(amount)
    if mode is BracketMode.MARGINAL:
        return sum(marginal_slices(amount, brackets))
    row = find_bracket(amount, brackets)
    return max(0.0, amount * row.rate - row.deduction + row.extra)
