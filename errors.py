"""Error taxonomy for the slide composition engine."""

from typing import Optional


class SlidesError(Exception):
    """Base exception for all deck-building errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ValidationError(SlidesError):
    """Malformed or missing input, raised before any remote call"""
    pass


class SessionStateError(SlidesError):
    """A required session value (document id, client) is missing or unobtainable"""
    pass


class NotFoundError(SlidesError):
    """No matching record or slide"""
    pass


class StructureError(SlidesError):
    """Remote document shape violates the placeholder invariants"""
    pass


class RemoteServiceError(SlidesError):
    """The Slides API or the transport under it failed"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status

    def __str__(self):
        if self.status:
            return f"[HTTP {self.status}] {self.message}"
        return self.message


class PresentationBuildError(SlidesError):
    """Building a full deck failed; the deck may be partially built"""

    def __init__(self, message: str, document_id: Optional[str] = None):
        super().__init__(message)
        self.document_id = document_id
