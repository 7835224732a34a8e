"""
Template Configuration for Deck Slides

Separates layout, typography, bullet presets, placeholder role tables and the
preset deck content from the composition logic.
"""

from typing import Dict, Any, List, Tuple
from dataclasses import dataclass


@dataclass
class FontConfig:
    """Font settings applied to a text range"""
    family: str
    size_pt: float
    bold: bool = False


class SlidesTemplateConfig:
    """
    Configuration class for composed slides.

    Every content slide uses a two-placeholder layout (title + body). The title
    is restyled after insertion; the body keeps the layout's style unless it is
    turned into a bullet list.
    """

    # ============================================================================
    # Layouts
    # ============================================================================

    # Google Slides built-in layouts
    PREDEFINED_LAYOUTS = {
        'TITLE': 'TITLE',
        'CONTENT': 'TITLE_AND_BODY',
        'BLANK': 'BLANK',
    }

    CONTENT_LAYOUT = PREDEFINED_LAYOUTS['CONTENT']

    # ============================================================================
    # Placeholder roles
    # ============================================================================
    # Placeholder types from shape.placeholder.type, in order of preference

    TITLE_ROLES: Tuple[str, ...] = ('TITLE', 'CENTERED_TITLE')
    BODY_ROLES: Tuple[str, ...] = ('BODY', 'SUBTITLE')
    SUBTITLE_ROLES: Tuple[str, ...] = ('SUBTITLE', 'BODY')

    # ============================================================================
    # Typography
    # ============================================================================

    TITLE_FONT = FontConfig(family='Times New Roman', size_pt=25, bold=True)

    # Bullet glyph preset for Bullet slides
    BULLET_PRESET = 'BULLET_DISC_CIRCLE_SQUARE'

    # Object ids must be 5-50 chars of [a-zA-Z0-9_-:]
    OBJECT_ID_PREFIX = 'slide'

    # ============================================================================
    # Preset deck
    # ============================================================================
    # Slides added after the title slide when a deck is built without explicit
    # slide content. Each entry: (title, body, style literal)

    PRESET_SLIDES: List[Tuple[str, str, str]] = [
        (
            "[Insert pre-set title]",
            "[Insert pre-set content]\nThis is sample bullet content",
            "Bullet",
        ),
        (
            "[Insert pre-set title]",
            "[Insert pre-set content]\nThis is sample paragraph content",
            "Paragraph",
        ),
    ]

    # ============================================================================
    # Helper Methods
    # ============================================================================

    @classmethod
    def get_title_text_style(cls) -> Tuple[Dict[str, Any], str]:
        """Return the title style dict and its field mask for updateTextStyle"""
        font = cls.TITLE_FONT
        style = {
            'bold': font.bold,
            'fontFamily': font.family,
            'fontSize': {'magnitude': font.size_pt, 'unit': 'PT'},
        }
        return style, 'bold,fontFamily,fontSize'
