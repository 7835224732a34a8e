import pytest

from document_service import DocumentService
from errors import RemoteServiceError, ValidationError
from slides_requests import insert_text_request
from slides_stubs import FakeSlidesClient, http_error


def test_create_and_get_document(fake_client):
    service = DocumentService(fake_client)
    document_id = service.create_document("Acme Slide Deck")
    presentation = service.get_document(document_id)
    assert presentation.presentation_id == document_id
    assert presentation.title == "Acme Slide Deck"
    assert len(presentation.slides) == 1
    assert [el.placeholder_type for el in presentation.slides[0].page_elements] == [
        "CENTERED_TITLE", "SUBTITLE"
    ]


def test_http_error_becomes_remote_service_error_with_status():
    client = FakeSlidesClient(fail_on={"create": http_error(403, b"quota")})
    with pytest.raises(RemoteServiceError) as excinfo:
        DocumentService(client).create_document("Deck")
    assert excinfo.value.status == 403
    assert excinfo.value.__cause__ is not None


def test_transport_error_becomes_remote_service_error():
    client = FakeSlidesClient(fail_on={"get": ConnectionResetError("reset by peer")})
    service = DocumentService(client)
    document_id = service.create_document("Deck")
    with pytest.raises(RemoteServiceError, match="reset by peer"):
        service.get_document(document_id)


def test_missing_presentation_id_is_remote_service_error():
    class NoIdClient(FakeSlidesClient):
        def _create(self, body):
            super()._create(body)
            return {}

    with pytest.raises(RemoteServiceError, match="no presentationId"):
        DocumentService(NoIdClient()).create_document("Deck")


def test_empty_batch_is_rejected_without_remote_call(fake_client):
    with pytest.raises(ValidationError):
        DocumentService(fake_client).batch_mutate("pres1", [])
    assert fake_client.calls == []


def test_batch_is_all_or_nothing(fake_client):
    service = DocumentService(fake_client)
    document_id = service.create_document("Deck")
    title_id = fake_client.slides(document_id)[0]["pageElements"][0]["objectId"]
    with pytest.raises(RemoteServiceError):
        service.batch_mutate(document_id, [
            insert_text_request(title_id, "kept?"),
            insert_text_request("does-not-exist", "boom"),
        ])
    assert fake_client.element(document_id, title_id)["text"] == ""
