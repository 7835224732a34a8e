from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from errors import StructureError, ValidationError


class SlideStyle(str, Enum):
    """How the body placeholder of a composed slide is rendered"""
    PARAGRAPH = "Paragraph"
    BULLET = "Bullet"


def parse_style(value: Any) -> SlideStyle:
    """Accept a SlideStyle or its exact literal; anything else is a ValidationError."""
    if isinstance(value, SlideStyle):
        return value
    for style in SlideStyle:
        if value == style.value:
            return style
    allowed = " or ".join(f"'{style.value}'" for style in SlideStyle)
    raise ValidationError(f"Slide style must be {allowed}; got {value!r}")


class SlideContentRequest(BaseModel):
    title: str
    body: str = ""
    style: SlideStyle = SlideStyle.PARAGRAPH

    @field_validator("title")
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Slide title cannot be empty")
        return v

    @classmethod
    def create(cls, title: Any, body: Any, style: Any) -> "SlideContentRequest":
        """Build a request, reporting bad input as the engine's ValidationError."""
        parsed_style = parse_style(style)
        try:
            return cls(title=title, body=body, style=parsed_style)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ValidationError(f"Invalid slide content: {problems}") from e

    @property
    def bullet_items(self) -> List[str]:
        """Lines of the body; each becomes one bullet for Bullet slides."""
        if not self.body:
            return []
        return self.body.split("\n")


class PlaceholderMap(BaseModel):
    """Explicit role -> object id mapping for a slide's text placeholders"""
    title_id: str
    body_id: str


class PageElement(BaseModel):
    object_id: Optional[str] = None
    placeholder_type: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "PageElement":
        placeholder = (payload.get("shape") or {}).get("placeholder") or {}
        return cls(object_id=payload.get("objectId"), placeholder_type=placeholder.get("type"))


class Slide(BaseModel):
    object_id: Optional[str] = None
    page_elements: List[PageElement] = Field(default_factory=list)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Slide":
        return cls(
            object_id=payload.get("objectId"),
            page_elements=[PageElement.from_api(el) for el in payload.get("pageElements") or []],
        )

    def _first_with_role(self, roles: Iterable[str], exclude: Optional[str] = None) -> Optional[str]:
        # Roles are tried in order, so earlier roles win over element order
        for role in roles:
            for el in self.page_elements:
                if el.object_id and el.object_id != exclude and el.placeholder_type == role:
                    return el.object_id
        return None

    def placeholder_map(self, title_roles: Iterable[str], body_roles: Iterable[str]) -> PlaceholderMap:
        """
        Resolve the title and body placeholders of this slide.

        Placeholder types are matched first. When the layout carries no usable
        placeholder metadata, element 0 is the title and element 1 the body.

        Raises:
            StructureError: fewer than two resolvable placeholder ids
        """
        if not self.page_elements:
            raise StructureError(f"Slide {self.object_id} has no page elements")

        title_id = self._first_with_role(title_roles)
        body_id = self._first_with_role(body_roles, exclude=title_id)
        if title_id and body_id:
            return PlaceholderMap(title_id=title_id, body_id=body_id)

        # Positional convention of two-placeholder layouts
        if len(self.page_elements) < 2:
            raise StructureError(
                f"Slide {self.object_id} has {len(self.page_elements)} page element(s); "
                "expected a title and a body placeholder"
            )
        title_id = self.page_elements[0].object_id
        body_id = self.page_elements[1].object_id
        if not title_id or not body_id:
            raise StructureError(f"Slide {self.object_id} placeholder ids are not set")
        return PlaceholderMap(title_id=title_id, body_id=body_id)


class Presentation(BaseModel):
    presentation_id: str
    title: Optional[str] = None
    slides: List[Slide] = Field(default_factory=list)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Presentation":
        return cls(
            presentation_id=payload.get("presentationId") or "",
            title=payload.get("title"),
            slides=[Slide.from_api(s) for s in payload.get("slides") or []],
        )

    def find_slide(self, object_id: Optional[str]) -> Optional[Slide]:
        if not object_id:
            return None
        return next((s for s in self.slides if s.object_id == object_id), None)
