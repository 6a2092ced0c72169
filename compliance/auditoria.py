# compliance/auditoria.py
"""
Trilha de revisões da matriz de conformidade.

Log só de inserção: cada revisão vira uma linha nova e a revisão "atual" de uma
entrada é a de `reviewed_at` mais recente (não a última inserida).
"""
from __future__ import annotations
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, List, Optional

from config.logging_config import log
from financas.erros import ValidationError
from .registro import get_entry


@dataclass(frozen=True)
class ComplianceReview:
    id: str
    entry_id: str
    reviewer_id: str
    reviewer_name: str
    note: Optional[str]
    reviewed_at: datetime


class HistoryRange(Enum):
    LAST_30_DAYS = "30d"
    ALL = "all"


class InMemoryReviewStore:
    """Persistência padrão em memória; qualquer objeto com insert/select_all serve."""

    def __init__(self):
        self._rows: List[ComplianceReview] = []
        self._lock = threading.Lock()

    def insert(self, review: ComplianceReview) -> None:
        with self._lock:
            self._rows.append(review)

    def select_all(self) -> List[ComplianceReview]:
        with self._lock:
            return list(self._rows)


def _agora() -> datetime:
    return datetime.now(timezone.utc)


class ComplianceAuditLog:

    def __init__(self, store=None, clock: Callable[[], datetime] = _agora):
        self.store = store if store is not None else InMemoryReviewStore()
        self.clock = clock

    def record_review(self, entry_id: str, reviewer_id: str, reviewer_name: str,
                      note: Optional[str] = None, reviewed_at: Optional[datetime] = None) -> ComplianceReview:
        if get_entry(entry_id) is None:
            raise ValidationError(f"Entrada de conformidade desconhecida: '{entry_id}'")
        # datas sem fuso não se comparam com o relógio (UTC) no filtro de 30 dias
        if reviewed_at is not None and reviewed_at.utcoffset() is None:
            raise ValidationError(f"reviewed_at precisa de fuso horário: {reviewed_at.isoformat()}")
        note = (note or "").strip() or None
        review = ComplianceReview(
            id=str(uuid.uuid4()),
            entry_id=entry_id,
            reviewer_id=reviewer_id,
            reviewer_name=reviewer_name,
            note=note,
            reviewed_at=reviewed_at or self.clock(),
        )
        self.store.insert(review)
        log.info(f"Revisão registrada: {entry_id} por {reviewer_name} ({reviewer_id}) em {review.reviewed_at.isoformat()}")
        return review

    def history(self, entry_id: str, period: HistoryRange = HistoryRange.ALL) -> List[ComplianceReview]:
        """Revisões da entrada, da mais recente para a mais antiga (empate: a inserida por último vem antes)."""
        linhas = [(i, r) for i, r in enumerate(self.store.select_all()) if r.entry_id == entry_id]
        if period is HistoryRange.LAST_30_DAYS:
            corte = self.clock() - timedelta(days=30)
            linhas = [(i, r) for i, r in linhas if r.reviewed_at >= corte]
        linhas.sort(key=lambda par: (par[1].reviewed_at, par[0]), reverse=True)
        return [r for _, r in linhas]

    def current_review(self, entry_id: str) -> Optional[ComplianceReview]:
        revisoes = self.history(entry_id, HistoryRange.ALL)
        return revisoes[0] if revisoes else None
