"""Popup placement relative to the reference that triggered it."""

from dataclasses import dataclass

MARGIN = 10  # Distance from the viewport edges and from the target
CHROME_HEIGHT = 80  # Header and padding allowed on top of max_height


@dataclass(frozen=True)
class Rect:
    """A box in viewport coordinates."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class Placement:
    """Where to draw the popup, in document coordinates."""

    left: float
    top: float
    above: bool


def compute_position(
    target: Rect,
    popup_width: float,
    popup_height: float,
    viewport_width: float,
    viewport_height: float,
    *,
    max_width: float = 450,
    max_height: float = 400,
    position: str = "auto",
    scroll_y: float = 0,
    margin: float = MARGIN,
    chrome_height: float = CHROME_HEIGHT,
) -> Placement:
    """Place the popup centered on the target, below it unless there is no room.

    With position "auto" the popup goes above when the space below is too
    small for it and there is more space above. "above" and "below" force
    the side. The popup never leaves the viewport horizontally and never
    goes above the top edge.

    Args:
        target: Bounding box of the reference
        popup_width: Current popup width
        popup_height: Current popup height
        viewport_width: Visible width
        viewport_height: Visible height
        max_width: Configured maximum popup width
        max_height: Configured maximum content height
        position: "auto", "above" or "below"
        scroll_y: Vertical scroll offset of the document
        margin: Gap kept to the viewport edges and the target
        chrome_height: Room for header and padding beyond max_height

    Returns:
        Placement in document coordinates
    """
    height = min(popup_height, max_height + chrome_height)
    width = min(popup_width, max_width)

    left = target.left + target.width / 2 - width / 2
    left = max(margin, min(left, viewport_width - width - margin))

    space_above = target.top
    space_below = viewport_height - target.bottom
    above = position == "above" or (
        position == "auto" and space_below < height + 2 * margin and space_above > space_below
    )

    if above:
        top = target.top + scroll_y - height - margin
        top = max(top, scroll_y + margin)
    else:
        top = target.bottom + scroll_y + margin

    return Placement(left=left, top=top, above=above)
