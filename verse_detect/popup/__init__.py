"""Preview popup: state machine, placement and markup."""

from verse_detect.popup.position import MARGIN, CHROME_HEIGHT, Placement, Rect, compute_position
from verse_detect.popup.render import (
    LOADING_HTML,
    build_error_html,
    build_footnotes_html,
    build_popup_html,
)
from verse_detect.popup.state import (
    PopupController,
    PopupPresenter,
    PopupState,
    PopupTarget,
)

__all__ = [
    "MARGIN",
    "CHROME_HEIGHT",
    "Placement",
    "Rect",
    "compute_position",
    "LOADING_HTML",
    "build_error_html",
    "build_footnotes_html",
    "build_popup_html",
    "PopupController",
    "PopupPresenter",
    "PopupState",
    "PopupTarget",
]
