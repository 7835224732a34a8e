"""
Slide Composer

Adds one content slide to an existing presentation in three strictly ordered
steps:

1. Structure: a single-request batch creates the slide shell from the
   two-placeholder content layout.
2. Discovery: the presentation is re-read and the new slide's title and body
   placeholders are resolved. Placeholder ids only exist after step 1 commits.
3. Populate: one batch inserts the title, styles it, inserts the body and, for
   Bullet slides, turns every body line into a bullet.

Nothing is rolled back. If step 2 or 3 fails, the empty shell stays in the deck
and the session ledger keeps it in the CREATED state.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from document_service import DocumentService
from errors import NotFoundError, SlidesError, ValidationError
from models import PlaceholderMap, Presentation, Slide, SlideContentRequest, SlideStyle
from session_state import SessionState, SlideRecord
from slides_requests import (
    create_paragraph_bullets_request,
    create_slide_request,
    insert_text_request,
    new_object_id,
    title_style_request,
)
from slides_template_config import SlidesTemplateConfig

logger = logging.getLogger(__name__)


def build_populate_requests(placeholders: PlaceholderMap,
                            content: SlideContentRequest) -> List[Dict[str, Any]]:
    """
    The ordered populate-and-style batch for one slide.

    An empty body gets neither the body insert nor the bullet operation, so an
    empty Bullet slide has zero bullets rather than one empty bullet. The API
    rejects insertText with empty text.
    """
    requests = [
        insert_text_request(placeholders.title_id, content.title),
        title_style_request(placeholders.title_id),
    ]
    if content.body:
        requests.append(insert_text_request(placeholders.body_id, content.body))
        if content.style is SlideStyle.BULLET:
            requests.append(create_paragraph_bullets_request(placeholders.body_id))
    return requests


class SlideComposer:

    def __init__(self, service_factory: Callable[[Any], DocumentService] = DocumentService,
                 layout: str = SlidesTemplateConfig.CONTENT_LAYOUT):
        self.service_factory = service_factory
        self.layout = layout

    def add_slide(self, session: SessionState, title: str, body: str,
                  document_id: str, style: Any) -> SlideRecord:
        """
        Append a new slide to `document_id` and fill it.

        Args:
            session: Session holding the authorized client
            title: Slide title text
            body: Body text; for Bullet slides each line is one bullet
            document_id: Target presentation id
            style: SlideStyle or the literal 'Paragraph' / 'Bullet'

        Returns:
            The ledger record of the slide, in the POPULATED state

        Raises:
            ValidationError: bad style, title, body or document id (no remote call made)
            SessionStateError: session has no client
            RemoteServiceError / NotFoundError / StructureError: remote step failed
        """
        content = SlideContentRequest.create(title, body, style)
        if not isinstance(document_id, str) or not document_id.strip():
            raise ValidationError("A presentation id is required to add a slide")
        service = self.service_factory(session.require_client())
        session.set_document_id(document_id)

        slide_id = self._create_shell(service, document_id)
        record = session.record_created(slide_id, document_id, content.title, content.style.value)

        try:
            presentation = service.get_document(document_id)
            slide = self._locate_slide(presentation, slide_id)
            placeholders = slide.placeholder_map(
                SlidesTemplateConfig.TITLE_ROLES, SlidesTemplateConfig.BODY_ROLES
            )
            logger.debug(
                f"Placeholders on {slide.object_id}: title={placeholders.title_id} "
                f"body={placeholders.body_id}"
            )
            service.batch_mutate(document_id, build_populate_requests(placeholders, content))
        except SlidesError as e:
            session.mark_failed(slide_id, str(e))
            raise

        session.mark_populated(slide_id)
        if content.style is SlideStyle.BULLET:
            logger.info(f"✅ Added Bullet slide '{content.title}' to {document_id} "
                        f"({len(content.bullet_items)} bullet(s))")
        else:
            logger.info(f"✅ Added Paragraph slide '{content.title}' to {document_id}")
        return record

    def _create_shell(self, service: DocumentService, document_id: str) -> str:
        object_id = new_object_id()
        response = service.batch_mutate(document_id, [create_slide_request(object_id, self.layout)])
        replies = response.get('replies') or []
        echoed = (replies[0].get('createSlide') or {}).get('objectId') if replies else None
        return echoed or object_id

    def _locate_slide(self, presentation: Presentation, slide_id: str) -> Slide:
        if not presentation.slides:
            raise NotFoundError(
                f"Presentation {presentation.presentation_id} has no slides after creating {slide_id}"
            )
        slide = presentation.find_slide(slide_id)
        if slide is None:
            # New slides are appended, so the last one is the best remaining guess
            slide = presentation.slides[-1]
            logger.warning(
                f"⚠️ Created slide {slide_id} not found by id; using last slide {slide.object_id}"
            )
        return slide


def add_slide(session: SessionState, title: str, body: str, document_id: str,
              style: Any, composer: Optional[SlideComposer] = None) -> SlideRecord:
    return (composer or SlideComposer()).add_slide(session, title, body, document_id, style)
