"""
Builders for individual Google Slides batchUpdate requests.

Each helper returns one request dict in Slides API shape; callers assemble them
into ordered batches.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from slides_template_config import SlidesTemplateConfig


def new_object_id(prefix: str = SlidesTemplateConfig.OBJECT_ID_PREFIX) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:16]}"


def create_slide_request(object_id: str, layout: str = SlidesTemplateConfig.CONTENT_LAYOUT,
                         insertion_index: Optional[int] = None) -> Dict[str, Any]:
    """createSlide with a predefined layout. No insertion index appends to the end."""
    request: Dict[str, Any] = {
        'createSlide': {
            'objectId': object_id,
            'slideLayoutReference': {'predefinedLayout': layout},
        }
    }
    if insertion_index is not None:
        request['createSlide']['insertionIndex'] = insertion_index
    return request


def insert_text_request(object_id: str, text: str, insertion_index: int = 0) -> Dict[str, Any]:
    return {
        'insertText': {
            'objectId': object_id,
            'text': text,
            'insertionIndex': insertion_index,
        }
    }


def update_text_style_request(object_id: str, style: Dict[str, Any], fields: str) -> Dict[str, Any]:
    """updateTextStyle over the whole text range of a shape."""
    return {
        'updateTextStyle': {
            'objectId': object_id,
            'style': style,
            'textRange': {'type': 'ALL'},
            'fields': fields,
        }
    }


def create_paragraph_bullets_request(object_id: str,
                                     preset: str = SlidesTemplateConfig.BULLET_PRESET) -> Dict[str, Any]:
    """createParagraphBullets over the whole text range; one bullet per paragraph."""
    return {
        'createParagraphBullets': {
            'objectId': object_id,
            'textRange': {'type': 'ALL'},
            'bulletPreset': preset,
        }
    }


def title_style_request(object_id: str) -> Dict[str, Any]:
    style, fields = SlidesTemplateConfig.get_title_text_style()
    return update_text_style_request(object_id, style, fields)


def summarize_requests(requests: List[Dict[str, Any]]) -> Dict[str, int]:
    """Count requests by operation name, for logging."""
    counts: Dict[str, int] = {}
    for request in requests:
        for op in request:
            counts[op] = counts.get(op, 0) + 1
    return counts
