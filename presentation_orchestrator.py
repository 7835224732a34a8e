"""
Presentation Orchestrator

Builds a complete deck for one company: authorize, create the presentation with
its title slide, then compose the content slides one at a time.
"""

import logging
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from company_data import CompanyRecord, format_record
from config import SlidesConfig
from errors import PresentationBuildError, ValidationError
from google_auth import authorize
from models import SlideContentRequest, SlideStyle
from session_state import SessionState
from slide_composer import SlideComposer
from slides_bootstrap import create_document
from slides_template_config import SlidesTemplateConfig

logger = logging.getLogger(__name__)

SlideSpec = Union[SlideContentRequest, Sequence[str]]


def preset_slides() -> list:
    return [SlideContentRequest.create(*spec) for spec in SlidesTemplateConfig.PRESET_SLIDES]


def overview_slide(record: CompanyRecord, key_column: Optional[str] = None) -> Optional[SlideContentRequest]:
    lines = format_record(record, key_column)
    if not lines:
        return None
    return SlideContentRequest.create(SlidesConfig.OVERVIEW_SLIDE_TITLE, "\n".join(lines), SlideStyle.BULLET)


def _to_request(spec: SlideSpec) -> SlideContentRequest:
    if isinstance(spec, SlideContentRequest):
        return spec
    if isinstance(spec, str) or not isinstance(spec, Sequence) or len(spec) != 3:
        raise ValidationError(
            f"Slide must be a SlideContentRequest or a (title, body, style) triple; got {spec!r}"
        )
    return SlideContentRequest.create(*spec)


def build_presentation(company_name: str,
                       session: Optional[SessionState] = None,
                       authorizer: Callable[[], Any] = authorize,
                       slides: Optional[Iterable[SlideSpec]] = None,
                       record: Optional[CompanyRecord] = None,
                       composer: Optional[SlideComposer] = None,
                       key_column: Optional[str] = None) -> str:
    """
    Create a `<company> Slide Deck` presentation and fill it.

    Args:
        company_name: Company name; title slide heading
        session: Session to use; a fresh one when None
        authorizer: Returns an authorized Slides client
        slides: Content slides to add. None means the preset deck (when enabled).
        record: Company record; adds an overview bullet slide first
        composer: SlideComposer to use
        key_column: Record column holding the company name

    Returns:
        The presentation id

    Raises:
        ValidationError: empty company name or malformed slide content
        PresentationBuildError: any later failure; `document_id` is set when the
            presentation was created before the failure
    """
    if not isinstance(company_name, str) or not company_name.strip():
        raise ValidationError("Missing or invalid company name for create-presentation")

    requests = []
    if record:
        overview = overview_slide(record, key_column)
        if overview is not None:
            requests.append(overview)
    if slides is None:
        if SlidesConfig.ENABLE_PRESET_SLIDES:
            requests.extend(preset_slides())
    else:
        requests.extend(_to_request(spec) for spec in slides)

    session = session or SessionState()
    composer = composer or SlideComposer()
    document_id = None
    logger.info(f"🚀 Building deck for {company_name} ({len(requests)} content slide(s))")

    try:
        session.set_client(authorizer())
        document_id = create_document(
            session, SlidesConfig.deck_title(company_name), heading=company_name
        )
        session.set_document_id(document_id)

        for index, content in enumerate(requests, 1):
            logger.info(f"📄 Slide {index}/{len(requests)}: {content.title}")
            composer.add_slide(session, content.title, content.body, document_id, content.style)
    except Exception as e:
        logger.error(f"❌ Deck build for {company_name} failed: {e}")
        raise PresentationBuildError(
            f"There was an error building the presentation for {company_name}: {e}",
            document_id=document_id,
        ) from e

    logger.info(f"✅ Created presentation with ID: {document_id}")
    return document_id
