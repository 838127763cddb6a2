"""Textual widgets for verse-detect."""

from verse_detect.widgets.command_input import CommandInput
from verse_detect.widgets.reference_view import ReferenceView
from verse_detect.widgets.status_bar import StatusBar
from verse_detect.widgets.verse_popup import VersePopup, html_to_rich

__all__ = [
    "CommandInput",
    "ReferenceView",
    "StatusBar",
    "VersePopup",
    "html_to_rich",
]
