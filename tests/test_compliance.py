from datetime import datetime, timedelta, timezone
import pytest
from compliance.auditoria import ComplianceAuditLog, HistoryRange, InMemoryReviewStore
from compliance.registro import get_entry, list_entries
from financas.erros import ValidationError

T0 = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _log(agora=T0 + timedelta(days=1)):
    return ComplianceAuditLog(InMemoryReviewStore(), clock=lambda: agora)


def test_registro_estatico():
    ids = [e.id for e in list_entries()]
    assert ids == ["pf-inss", "pf-irrf", "pf-fgts", "pj-mei", "pj-simples", "pj-lp", "open-data"]
    assert list_entries() is list_entries()
    assert get_entry("pj-simples").scope == "PJ"
    assert get_entry("nao-existe") is None

def test_revisao_mais_recente_e_a_atual():
    audit = _log()
    audit.record_review("pf-inss", "r1", "Alice", "ok", reviewed_at=T0)
    bob = audit.record_review("pf-inss", "r2", "Bob", "also ok", reviewed_at=T0 + timedelta(hours=1))
    assert audit.current_review("pf-inss") == bob
    assert [r.reviewer_name for r in audit.history("pf-inss", HistoryRange.ALL)] == ["Bob", "Alice"]

def test_ordem_por_horario_nao_por_insercao():
    audit = _log()
    audit.record_review("pj-mei", "r2", "Bob", None, reviewed_at=T0 + timedelta(hours=1))
    audit.record_review("pj-mei", "r1", "Alice", None, reviewed_at=T0)
    assert audit.current_review("pj-mei").reviewer_name == "Bob"

def test_empate_fica_com_a_ultima_inserida():
    audit = _log()
    audit.record_review("pj-lp", "r1", "Alice", None, reviewed_at=T0)
    audit.record_review("pj-lp", "r2", "Bob", None, reviewed_at=T0)
    assert audit.current_review("pj-lp").reviewer_name == "Bob"

def test_entrada_desconhecida():
    audit = _log()
    with pytest.raises(ValidationError):
        audit.record_review("pf-xyz", "r1", "Alice", "ok")
    assert audit.store.select_all() == []

def test_sem_revisao():
    assert _log().current_review("pf-fgts") is None
    assert _log().history("pf-fgts") == []

def test_ultimos_30_dias():
    audit = _log(agora=T0)
    audit.record_review("pf-irrf", "r1", "Alice", "antiga", reviewed_at=T0 - timedelta(days=40))
    audit.record_review("pf-irrf", "r2", "Bob", "recente", reviewed_at=T0 - timedelta(days=2))
    assert [r.note for r in audit.history("pf-irrf", HistoryRange.LAST_30_DAYS)] == ["recente"]
    assert len(audit.history("pf-irrf", HistoryRange.ALL)) == 2

def test_horario_vem_do_relogio_e_nota_vazia_vira_none():
    audit = _log(agora=T0)
    r = audit.record_review("open-data", "r1", "Alice", "   ")
    assert r.reviewed_at == T0
    assert r.note is None
    assert r.id

def test_historico_isolado_por_entrada():
    audit = _log()
    audit.record_review("pf-inss", "r1", "Alice", None, reviewed_at=T0)
    audit.record_review("pf-irrf", "r1", "Alice", None, reviewed_at=T0)
    assert len(audit.history("pf-inss")) == 1

def test_data_sem_fuso_rejeitada():
    audit = _log()
    with pytest.raises(ValidationError):
        audit.record_review("pf-inss", "r1", "Alice", "ok", reviewed_at=datetime(2026, 3, 1, 12, 0))
    assert audit.history("pf-inss") == []
    assert audit.history("pf-inss", HistoryRange.LAST_30_DAYS) == []
