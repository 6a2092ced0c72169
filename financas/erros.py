# financas/erros.py
from __future__ import annotations


class ValidationError(ValueError):
    """Entrada estrutural inválida: tabela de faixas malformada ou id de conformidade inexistente."""
