"""Share links for previewed verses."""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Sequence
from urllib.parse import quote

from bs4 import BeautifulSoup

from verse_detect.detection.references import parse_reference

_WHITESPACE = re.compile(r"\s+")

PLATFORM_TITLES: Dict[str, str] = {
    "facebook": "Share on Facebook",
    "x": "Share on X",
    "bluesky": "Share on Bluesky",
    "copy": "Copy to clipboard",
}


@dataclass(frozen=True)
class ShareAction:
    """What to do for one share button."""

    platform: str
    text: str  # Quoted verse text with its reference
    url: str  # Page the share points at
    target: Optional[str] = None  # Intent URL to open; None for copy

    @property
    def is_copy(self) -> bool:
        """Check whether this action copies to the clipboard."""
        return self.platform == "copy"


def html_to_text(html: str) -> str:
    """Strip markup and collapse whitespace."""
    text = BeautifulSoup(html, "html.parser").get_text(" ")
    return _WHITESPACE.sub(" ", text).strip()


def share_text(reference: str, content_html: str) -> str:
    """Return ``"<plain verse text>" - <reference>``."""
    return f'"{html_to_text(content_html)}" - {reference}'


def share_url(reference: str, app_base_url: str) -> str:
    """Return the app URL pointing at the reference's chapter."""
    parsed = parse_reference(reference)
    return f"{app_base_url}#{parsed.section_id if parsed else ''}"


def build_share_action(platform: str, reference: str, content_html: str, app_base_url: str) -> ShareAction:
    """Build the share action for a platform.

    Raises:
        ValueError: For an unknown platform
    """
    text = share_text(reference, content_html)
    url = share_url(reference, app_base_url)

    if platform == "facebook":
        target = f"https://www.facebook.com/sharer/sharer.php?quote={quote(text, safe='')}&u={quote(url, safe='')}"
    elif platform == "x":
        target = f"https://twitter.com/intent/tweet?text={quote(text, safe='')}&url={quote(url, safe='')}"
    elif platform == "bluesky":
        target = f"https://bsky.app/intent/compose?text={quote(text + ' ' + url, safe='')}"
    elif platform == "copy":
        target = None
    else:
        raise ValueError(f"Unknown share platform: {platform}")

    return ShareAction(platform=platform, text=text, url=url, target=target)


def build_share_html(platforms: Sequence[str]) -> str:
    """Build the share button row, or "" when no platforms are enabled."""
    if not platforms:
        return ""
    buttons = "".join(
        f'<button class="verse-popup-social-btn {p}" data-platform="{p}" '
        f'title="{PLATFORM_TITLES.get(p, p)}">{p}</button>'
        for p in platforms
    )
    return f'<div class="verse-popup-social">{buttons}</div>'
