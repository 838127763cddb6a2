"""HTML for the popup body."""

from html import escape
from typing import Sequence

from verse_detect.config import PopupConfig
from verse_detect.data.types import ExtractedFootnote, VerseContent
from verse_detect.share import build_share_html

LOADING_HTML = '<div class="verse-popup-loading">Loading</div>'


def build_footnotes_html(footnotes: Sequence[ExtractedFootnote]) -> str:
    """Build the footnotes section, or "" when there are none.

    Footnote text is already HTML from the chapter document and is kept
    as-is; keys are escaped.
    """
    if not footnotes:
        return ""
    items = "".join(
        f'<div class="verse-popup-footnote"><span class="fn-key">{escape(fn.key)}</span>'
        f'<span class="fn-text">{fn.text}</span></div>'
        for fn in footnotes
    )
    return f'<div class="verse-popup-footnotes">{items}</div>'


def build_error_html(message: str) -> str:
    """Build the inline error shown instead of content."""
    return f'<div class="verse-popup-error">{escape(message)}</div>'


def build_popup_html(reference: str, content: VerseContent, config: PopupConfig) -> str:
    """Assemble header, verses, footnotes, share row and attribution."""
    html = ""
    if config.show_header:
        html += f'<div class="verse-popup-header">{escape(reference)}</div>'

    html += f'<div class="verse-popup-content">{content.html}{build_footnotes_html(content.footnotes)}</div>'

    if config.show_social_share:
        html += build_share_html(config.social_share_platforms)
    if config.show_logo:
        html += (
            f'<a class="verse-popup-logo" href="{escape(config.logo_url)}" '
            'target="_blank" rel="noopener">inScript</a>'
        )
    return html
