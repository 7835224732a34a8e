"""
Document bootstrapper: creates a presentation and fills its default title slide.
"""

import logging
from datetime import date, datetime, timezone
from typing import Optional

from config import SlidesConfig
from document_service import DocumentService
from errors import NotFoundError, RemoteServiceError, SlidesError, StructureError, ValidationError
from session_state import SessionState
from slides_requests import insert_text_request
from slides_template_config import SlidesTemplateConfig

logger = logging.getLogger(__name__)


def created_label(today: Optional[date] = None) -> str:
    """`Created: YYYY-MM-DD`, using the UTC date unless one is given."""
    today = today or datetime.now(timezone.utc).date()
    return f"{SlidesConfig.CREATED_LABEL}: {today.isoformat()}"


def create_document(session: SessionState, title: str, heading: Optional[str] = None,
                    today: Optional[date] = None) -> str:
    """
    Create a presentation named `title` and seed its first slide.

    The title placeholder receives `heading` (defaults to `title`) and the
    subtitle placeholder a creation-date line. The new id is recorded in
    `session` as soon as the service returns it.

    Returns:
        The new presentation id

    Raises:
        ValidationError: empty title
        SessionStateError: session has no client
        RemoteServiceError: any remote step failed; shape problems
            (NotFoundError/StructureError) are chained as the cause
    """
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Presentation title cannot be empty")
    service = DocumentService(session.require_client())

    document_id = service.create_document(title)
    session.set_document_id(document_id)

    try:
        presentation = service.get_document(document_id)
        if not presentation.slides:
            raise NotFoundError(f"No slides found in presentation {document_id}")
        first_slide = presentation.slides[0]
        if not first_slide.page_elements:
            raise StructureError("No elements found on the first slide")

        placeholders = first_slide.placeholder_map(
            SlidesTemplateConfig.TITLE_ROLES, SlidesTemplateConfig.SUBTITLE_ROLES
        )
        service.batch_mutate(document_id, [
            insert_text_request(placeholders.title_id, heading or title),
            insert_text_request(placeholders.body_id, created_label(today)),
        ])
    except RemoteServiceError:
        raise
    except SlidesError as e:
        logger.error(f"❌ Failed to seed title slide of {document_id}: {e}")
        raise RemoteServiceError(f"Failed to create presentation '{title}': {e}") from e

    logger.info(f"🎨 Title slide ready for {document_id}")
    return document_id
