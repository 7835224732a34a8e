"""Tests for creating a presentation and seeding its title slide."""

import re
from datetime import date

import pytest

from errors import NotFoundError, RemoteServiceError, SessionStateError, StructureError, ValidationError
from session_state import SessionState
from slides_bootstrap import create_document, created_label
from slides_stubs import FakeSlidesClient, http_error


def test_create_document_seeds_title_and_date(fake_client, session):
    document_id = create_document(session, "Acme")

    assert document_id
    assert session.document_id == document_id
    slides = fake_client.slides(document_id)
    assert len(slides) == 1
    title_text, subtitle_text = fake_client.slide_texts(document_id, 0)
    assert "Acme" in title_text
    assert re.fullmatch(r"Created: \d{4}-\d{2}-\d{2}", subtitle_text)


def test_heading_differs_from_document_title(fake_client, session):
    document_id = create_document(session, "Acme Slide Deck", heading="Acme", today=date(2024, 5, 10))
    assert fake_client.documents[document_id]["title"] == "Acme Slide Deck"
    assert fake_client.slide_texts(document_id, 0) == ["Acme", "Created: 2024-05-10"]


def test_single_insert_batch_at_index_zero(fake_client, session):
    document_id = create_document(session, "Acme")
    batches = fake_client.batches(document_id)
    assert len(batches) == 1
    assert [list(r) for r in batches[0]] == [["insertText"], ["insertText"]]
    assert all(r["insertText"]["insertionIndex"] == 0 for r in batches[0])


def test_positional_fallback_without_placeholder_metadata():
    client = FakeSlidesClient(with_placeholder_types=False)
    document_id = create_document(SessionState(client=client), "Acme", today=date(2024, 1, 2))
    assert client.slide_texts(document_id, 0) == ["Acme", "Created: 2024-01-02"]


def test_created_label_format():
    assert created_label(date(2023, 12, 1)) == "Created: 2023-12-01"


def test_empty_title_rejected_before_remote_calls(fake_client, session):
    with pytest.raises(ValidationError):
        create_document(session, "  ")
    assert fake_client.calls == []


def test_requires_client():
    with pytest.raises(SessionStateError):
        create_document(SessionState(), "Acme")


def test_create_failure_surfaces_remote_service_error():
    client = FakeSlidesClient(fail_on={"create": http_error(500)})
    session = SessionState(client=client)
    with pytest.raises(RemoteServiceError):
        create_document(session, "Acme")
    assert session.document_id is None


def test_missing_slides_wrapped_with_not_found_cause():
    class NoSlides(FakeSlidesClient):
        def _create(self, body):
            reply = super()._create(body)
            self.documents[reply["presentationId"]]["slides"] = []
            return reply

    session = SessionState(client=NoSlides())
    with pytest.raises(RemoteServiceError) as excinfo:
        create_document(session, "Acme")
    assert isinstance(excinfo.value.__cause__, NotFoundError)
    # The id was recorded before the failure
    assert session.document_id is not None


def test_title_slide_without_elements_wrapped_with_structure_cause():
    client = FakeSlidesClient(layouts={"TITLE": []})
    with pytest.raises(RemoteServiceError) as excinfo:
        create_document(SessionState(client=client), "Acme")
    assert isinstance(excinfo.value.__cause__, StructureError)


def test_title_slide_with_one_element_is_structure_error():
    client = FakeSlidesClient(layouts={"TITLE": ["CENTERED_TITLE"]})
    with pytest.raises(RemoteServiceError) as excinfo:
        create_document(SessionState(client=client), "Acme")
    assert isinstance(excinfo.value.__cause__, StructureError)
    assert client.batches() == []
