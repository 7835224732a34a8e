import pytest

from errors import SessionStateError
from session_state import CompositionStatus, SessionState


def test_require_accessors_raise_when_unset():
    state = SessionState()
    with pytest.raises(SessionStateError):
        state.require_document_id()
    with pytest.raises(SessionStateError):
        state.require_client()


def test_last_write_wins():
    state = SessionState()
    state.set_document_id("a")
    state.set_document_id("b")
    assert state.require_document_id() == "b"


def test_sessions_are_isolated():
    first, second = SessionState(), SessionState()
    first.set_document_id("deck-1")
    first.set_client(object())
    assert second.document_id is None
    assert second.client is None


def test_ledger_transitions():
    state = SessionState()
    state.record_created("s1", "doc", "Intro", "Bullet")
    state.record_created("s2", "doc", "Body", "Paragraph")

    state.mark_populated("s1")
    state.mark_failed("s2", "quota exceeded")

    assert [r.slide_id for r in state.unpopulated()] == ["s2"]
    assert state.slides[0].status is CompositionStatus.POPULATED
    assert state.slides[1].status is CompositionStatus.CREATED
    assert state.slides[1].error == "quota exceeded"


def test_marking_unknown_slide_is_a_no_op():
    assert SessionState().mark_populated("missing") is None


def test_prune_populated_keeps_unpopulated_shells():
    state = SessionState()
    state.record_created("s1", "doc", "Done", "Bullet")
    state.record_created("s2", "doc", "Stuck", "Paragraph")
    state.mark_populated("s1")
    state.mark_failed("s2", "HTTP 500")

    assert state.prune_populated() == 1
    assert [r.slide_id for r in state.slides] == ["s2"]
    assert state.prune_populated() == 0
