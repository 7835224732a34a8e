"""
Document Service adapter over the Google Slides API client.

Wraps presentations().create/get/batchUpdate so the rest of the engine deals in
document ids, Presentation snapshots and RemoteServiceError rather than raw
googleapiclient resources and HttpError.
"""

import logging
from typing import Any, Dict, List

from googleapiclient.errors import HttpError

from errors import RemoteServiceError, ValidationError
from models import Presentation
from slides_requests import summarize_requests

logger = logging.getLogger(__name__)


def _http_status(error: HttpError):
    status = getattr(error, 'status_code', None)
    if status is None and getattr(error, 'resp', None) is not None:
        status = getattr(error.resp, 'status', None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


class DocumentService:
    """Thin, non-retrying facade over a `build('slides', 'v1')` client."""

    def __init__(self, client: Any):
        self.client = client

    def _execute(self, description: str, call):
        try:
            return call().execute()
        except HttpError as e:
            status = _http_status(e)
            logger.error(f"❌ {description} failed (HTTP {status}): {e}")
            raise RemoteServiceError(f"{description} failed: {e}", status=status) from e
        except Exception as e:
            logger.error(f"❌ {description} failed: {e}")
            raise RemoteServiceError(f"{description} failed: {e}") from e

    def create_document(self, title: str) -> str:
        response = self._execute(
            "Create presentation",
            lambda: self.client.presentations().create(body={'title': title}),
        )
        document_id = (response or {}).get('presentationId')
        if not document_id:
            raise RemoteServiceError("Create presentation returned no presentationId")
        logger.info(f"✅ Created presentation '{title}': {document_id}")
        return document_id

    def get_document(self, document_id: str) -> Presentation:
        response = self._execute(
            f"Fetch presentation {document_id}",
            lambda: self.client.presentations().get(presentationId=document_id),
        )
        presentation = Presentation.from_api(response or {})
        if not presentation.presentation_id:
            presentation.presentation_id = document_id
        logger.debug(f"📄 Presentation {document_id}: {len(presentation.slides)} slide(s)")
        return presentation

    def batch_mutate(self, document_id: str, requests: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Submit one ordered batch. The Slides API applies it all-or-nothing."""
        if not requests:
            raise ValidationError("Refusing to submit an empty batch")
        logger.debug(f"📦 Batch for {document_id}: {summarize_requests(requests)}")
        response = self._execute(
            f"Batch update of {document_id}",
            lambda: self.client.presentations().batchUpdate(
                presentationId=document_id, body={'requests': requests}
            ),
        )
        return response or {}
