"""Preview popup state machine.

The controller owns the popup's lifecycle for every input method: mouse
hover, touch, click and keyboard. It talks to the outside world only
through small collaborators so it can run under Textual, another UI, or a
test with a fake clock:

- ``schedule(delay_seconds, callback)`` arms a timer and returns a handle
  with ``stop()``
- ``spawn(coroutine)`` runs a fetch in the background
- a presenter draws the popup and moves ARIA-style expanded state
- ``navigate(section_id, verse_id, edition)`` follows a reference
"""

import enum
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Coroutine, Optional, Protocol, Tuple

from verse_detect.backend.fetcher import VerseFetcher
from verse_detect.config import Config
from verse_detect.data.types import ParsedVerseReference, VerseContent
from verse_detect.detection.references import parse_reference, parse_section_id, reference_from_detection
from verse_detect.errors import VerseDetectError
from verse_detect.popup.position import Placement, Rect, compute_position

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Could not load verse"


class PopupState(enum.Enum):
    """Popup lifecycle states."""

    IDLE = "idle"
    PENDING_SHOW = "pending_show"
    VISIBLE = "visible"
    PENDING_HIDE = "pending_hide"


@dataclass(frozen=True)
class PopupTarget:
    """A reference on screen that can own the popup."""

    key: Any  # Identifies the reference within its view
    reference: str  # Canonical reference, e.g. "John 3:16"
    language: Optional[str] = None
    edition: Optional[str] = None
    rect: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))

    @classmethod
    def from_detection(
        cls,
        key: Any,
        verse: ParsedVerseReference,
        rect: Optional[Rect] = None,
        edition: Optional[str] = None,
    ) -> "PopupTarget":
        """Create a target for a detected reference."""
        parsed = reference_from_detection(verse)
        return cls(
            key=key,
            reference=parsed.reference if parsed else verse.reference,
            language=verse.detected_language,
            edition=edition,
            rect=rect or Rect(0, 0, 0, 0),
        )


class TimerHandle(Protocol):
    def stop(self) -> None: ...


class PopupPresenter(Protocol):
    """Drawing side of the popup."""

    def show_loading(self, target: PopupTarget) -> None: ...

    def show_content(self, target: PopupTarget, reference: str, content: VerseContent) -> None: ...

    def show_error(self, target: PopupTarget, message: str) -> None: ...

    def hide(self) -> None: ...

    def set_expanded(self, target: PopupTarget, expanded: bool) -> None: ...

    def focus_target(self, target: PopupTarget) -> None: ...

    def popup_size(self) -> Tuple[float, float]: ...

    def viewport(self) -> Tuple[float, float, float]:
        """Return (width, height, scroll_y)."""
        ...

    def move_to(self, placement: Placement) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]
Spawner = Callable[[Coroutine[Any, Any, None]], Any]
Navigator = Callable[[str, Optional[str], Optional[str]], None]


class PopupController:
    """Coordinates timers, fetches and input events around one popup."""

    def __init__(
        self,
        config: Config,
        fetcher: VerseFetcher,
        presenter: PopupPresenter,
        *,
        schedule: Scheduler,
        spawn: Spawner,
        navigate: Optional[Navigator] = None,
        clock: Callable[[], float] = time.monotonic,
        position_margin: float = 10,
        position_chrome: float = 80,
    ):
        self.config = config
        self.fetcher = fetcher
        self.presenter = presenter
        self._schedule = schedule
        self._spawn = spawn
        self._navigate = navigate
        self._clock = clock
        self._margin = position_margin
        self._chrome = position_chrome

        self.state = PopupState.IDLE
        self.current: Optional[PopupTarget] = None
        self._show_timer: Optional[TimerHandle] = None
        self._hide_timer: Optional[TimerHandle] = None
        self._expanded: Optional[PopupTarget] = None
        self._generation = 0  # Bumped whenever the popup's owner changes
        self._touch_started = 0.0
        self._touch_target: Optional[PopupTarget] = None

    # ==================== Queries ====================

    @property
    def is_visible(self) -> bool:
        """Check whether the popup is on screen."""
        return self.state in (PopupState.VISIBLE, PopupState.PENDING_HIDE)

    def is_visible_for(self, target: PopupTarget) -> bool:
        """Check whether the popup is on screen for a target."""
        return self.is_visible and self._is_current(target)

    def _is_current(self, target: PopupTarget) -> bool:
        return self.current is not None and self.current.key == target.key

    # ==================== Timers ====================

    def _cancel_show(self) -> None:
        if self._show_timer is not None:
            self._show_timer.stop()
            self._show_timer = None

    def _cancel_hide(self) -> None:
        if self._hide_timer is not None:
            self._hide_timer.stop()
            self._hide_timer = None

    def _schedule_hide(self) -> None:
        self._cancel_hide()
        self._hide_timer = self._schedule(self.config.popup.hide_delay / 1000, self._on_hide_timer)
        self.state = PopupState.PENDING_HIDE

    def _on_hide_timer(self) -> None:
        self._hide_timer = None
        if self.state is PopupState.PENDING_HIDE:
            self.hide()

    def _on_show_timer(self, target: PopupTarget) -> None:
        self._show_timer = None
        if self.state is PopupState.PENDING_SHOW and self._is_current(target):
            self.show(target)

    def _set_expanded(self, target: Optional[PopupTarget]) -> None:
        if self._expanded is not None and (target is None or self._expanded.key != target.key):
            self.presenter.set_expanded(self._expanded, False)
        if target is not None and (self._expanded is None or self._expanded.key != target.key):
            self.presenter.set_expanded(target, True)
        self._expanded = target

    # ==================== Mouse ====================

    def mouse_enter(self, target: PopupTarget) -> None:
        """Pointer moved onto a reference."""
        if not self.config.shows_popup:
            return

        self._cancel_hide()
        if self._is_current(target):
            if self.is_visible:
                self.state = PopupState.VISIBLE
            return

        if self.current is not None:
            self._release_current()

        self.current = target
        self.state = PopupState.PENDING_SHOW
        self._show_timer = self._schedule(
            self.config.popup.show_delay / 1000, lambda: self._on_show_timer(target)
        )

    def mouse_leave(self, target: PopupTarget) -> None:
        """Pointer left a reference."""
        if not self.config.shows_popup or not self._is_current(target):
            return

        if self.state is PopupState.PENDING_SHOW:
            self._cancel_show()
            self.current = None
            self.state = PopupState.IDLE
        elif self.state is PopupState.VISIBLE:
            self._schedule_hide()

    def popup_enter(self) -> None:
        """Pointer moved onto the popup; keep it open."""
        if self.state is PopupState.PENDING_HIDE:
            self._cancel_hide()
            self.state = PopupState.VISIBLE

    def popup_leave(self) -> None:
        """Pointer left the popup."""
        if self.state is PopupState.VISIBLE:
            self._schedule_hide()

    # ==================== Touch ====================

    def touch_start(self, target: PopupTarget) -> None:
        """Finger went down on a reference."""
        self._touch_started = self._clock()
        self._touch_target = target

    def touch_end(self) -> bool:
        """Finger lifted.

        A long press shows the popup. A short tap toggles it in popup mode;
        in both mode the first tap shows it and a tap on the open popup's
        reference hides it and lets navigation go ahead.

        Returns:
            True when the tap should go on to navigate
        """
        target = self._touch_target
        self._touch_target = None
        if target is None:
            return False

        held_ms = (self._clock() - self._touch_started) * 1000
        mode = self.config.display_mode

        if held_ms > self.config.popup.long_press_threshold and mode != "link":
            self.show(target)
            return False

        if mode == "both":
            if self.is_visible_for(target):
                self.hide()
                return True
            self.show(target)
            return False

        if mode == "popup":
            self.toggle(target)
            return False

        return True

    # ==================== Click & keyboard ====================

    def click(self, target: PopupTarget, *, from_touch: bool = False) -> bool:
        """Reference was clicked or tapped.

        Args:
            target: The reference
            from_touch: Whether the click follows a touch_end() that allowed it

        Returns:
            True if the click navigated
        """
        mode = self.config.display_mode
        if mode == "popup":
            if not from_touch:
                self.toggle(target)
            return False

        if self.is_visible_for(target):
            self.hide()
        self.navigate_to(target)
        return True

    def key(self, target: Optional[PopupTarget], key: str) -> bool:
        """Keyboard input while a reference has focus.

        Escape closes the popup and returns focus to its reference.
        Enter and Space toggle the popup, or navigate in link mode.

        Returns:
            True if the key was handled
        """
        if key == "escape":
            if self.state is PopupState.IDLE:
                return False
            owner = self.current
            self.hide()
            if owner is not None:
                self.presenter.focus_target(owner)
            return True

        if key in ("enter", "space") and target is not None:
            if not self.config.shows_popup:
                if key == "enter":
                    self.navigate_to(target)
                    return True
                return False
            self.toggle(target)
            return True

        return False

    def toggle(self, target: PopupTarget) -> None:
        """Show the popup for a target, or hide it if already shown there."""
        if self.is_visible_for(target):
            self.hide()
        else:
            self.show(target)

    # ==================== Show / hide ====================

    def _release_current(self) -> None:
        self._cancel_show()
        self._cancel_hide()
        if self.is_visible:
            self.presenter.hide()
        self._set_expanded(None)
        self.current = None
        self.state = PopupState.IDLE
        self._generation += 1

    def show(self, target: PopupTarget) -> None:
        """Show the popup for a target now and start loading its verses."""
        if not self.config.shows_popup:
            return

        self._cancel_show()
        self._cancel_hide()
        if self.current is not None and not self._is_current(target):
            self._release_current()

        self.current = target
        self.state = PopupState.VISIBLE
        self._generation += 1
        generation = self._generation
        self._set_expanded(target)

        if self.config.popup.show_loading_indicator:
            self.presenter.show_loading(target)
        self.reposition()
        self._spawn(self._load(target, generation))

    def hide(self) -> None:
        """Close the popup and forget its target."""
        self._cancel_show()
        self._cancel_hide()
        was_visible = self.is_visible
        self._set_expanded(None)
        self.current = None
        self.state = PopupState.IDLE
        self._generation += 1
        if was_visible:
            self.presenter.hide()

    def reposition(self) -> None:
        """Move the popup next to its target using the current popup size."""
        if self.current is None:
            return
        width, height = self.presenter.popup_size()
        viewport_width, viewport_height, scroll_y = self.presenter.viewport()
        popup = self.config.popup
        placement = compute_position(
            self.current.rect,
            width,
            height,
            viewport_width,
            viewport_height,
            max_width=popup.max_width,
            max_height=popup.max_height,
            position=popup.position,
            scroll_y=scroll_y,
            margin=self._margin,
            chrome_height=self._chrome,
        )
        self.presenter.move_to(placement)

    async def _load(self, target: PopupTarget, generation: int) -> None:
        try:
            content = await self.fetcher.fetch_verse_content(target.reference, target.language, target.edition)
        except VerseDetectError as exc:
            logger.warning("Could not load %s: %s", target.reference, exc)
            logger.debug("Fetch failure for %s", target.reference, exc_info=True)
            self._finish(generation, lambda: self.presenter.show_error(target, str(exc)))
            return
        except Exception as exc:
            logger.warning("Unexpected error loading %s: %s", target.reference, exc)
            logger.debug("Fetch failure for %s", target.reference, exc_info=True)
            self._finish(generation, lambda: self.presenter.show_error(target, GENERIC_ERROR))
            return

        self._finish(generation, lambda: self.presenter.show_content(target, target.reference, content))

    def _finish(self, generation: int, render: Callable[[], None]) -> None:
        # A newer show() or hide() owns the popup now
        if generation != self._generation or not self.is_visible:
            return
        render()
        self.reposition()

    # ==================== Navigation ====================

    def navigate_to(self, target: PopupTarget) -> None:
        """Follow a reference through the navigation callback."""
        self.navigate_reference(target.reference, target.edition)

    def navigate_reference(self, reference: str, edition: Optional[str] = None) -> bool:
        """Follow a reference string or section id, e.g. a cross-reference in a footnote.

        Returns:
            True if the reference parsed and a navigation callback is set
        """
        if self._navigate is None:
            return False
        parsed = parse_reference(reference) or parse_section_id(reference)
        if parsed is None:
            logger.debug("Not navigating to unparseable reference %r", reference)
            return False
        self._navigate(parsed.section_id, parsed.fragment_id or None, edition)
        return True

    def destroy(self) -> None:
        """Cancel timers, close the popup and empty the cache."""
        self.hide()
        self.fetcher.clear_cache()
