"""
Session state for deck building.

A SessionState holds the active document id, the authorized Slides client and
a ledger of the slides composed through it. Instances are passed explicitly
into the bootstrapper, composer and orchestrator; two instances never share
state. A single instance is not lock-protected, so callers serialize work on it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from errors import SessionStateError

logger = logging.getLogger(__name__)


class CompositionStatus(str, Enum):
    CREATED = "created"        # structural shell exists, content not applied
    POPULATED = "populated"


@dataclass
class SlideRecord:
    slide_id: str
    document_id: str
    title: str
    style: str
    status: CompositionStatus = CompositionStatus.CREATED
    error: Optional[str] = None
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())


class SessionState:

    def __init__(self, document_id: Optional[str] = None, client: Any = None):
        self._document_id = document_id
        self._client = client
        self.slides: List[SlideRecord] = []

    @property
    def document_id(self) -> Optional[str]:
        return self._document_id

    @property
    def client(self) -> Any:
        return self._client

    def set_document_id(self, document_id: str) -> None:
        if document_id != self._document_id:
            logger.debug(f"Active document: {document_id}")
        self._document_id = document_id

    def set_client(self, client: Any) -> None:
        self._client = client

    def require_document_id(self) -> str:
        if not self._document_id:
            raise SessionStateError(
                "No active presentation id. Create a presentation first."
            )
        return self._document_id

    def require_client(self) -> Any:
        if self._client is None:
            raise SessionStateError("Slides client is not set. Authorize the session first.")
        return self._client

    # Composition ledger

    def record_created(self, slide_id: str, document_id: str, title: str, style: str) -> SlideRecord:
        record = SlideRecord(slide_id=slide_id, document_id=document_id, title=title, style=style)
        self.slides.append(record)
        logger.info(f"📄 Slide {slide_id} created in {document_id}")
        return record

    def _find(self, slide_id: str) -> Optional[SlideRecord]:
        return next((r for r in reversed(self.slides) if r.slide_id == slide_id), None)

    def mark_populated(self, slide_id: str) -> Optional[SlideRecord]:
        record = self._find(slide_id)
        if record is not None:
            record.status = CompositionStatus.POPULATED
            record.error = None
            logger.info(f"✅ Slide {slide_id} populated")
        return record

    def mark_failed(self, slide_id: str, error: str) -> Optional[SlideRecord]:
        record = self._find(slide_id)
        if record is not None:
            record.error = error
            logger.warning(
                f"⚠️ Slide {slide_id} left unpopulated in {record.document_id}: {error}"
            )
        return record

    def unpopulated(self) -> List[SlideRecord]:
        return [r for r in self.slides if r.status is CompositionStatus.CREATED]

    def prune_populated(self) -> int:
        """Drop POPULATED records; unpopulated shells stay. Returns the number dropped."""
        kept = self.unpopulated()
        dropped = len(self.slides) - len(kept)
        self.slides = kept
        return dropped
