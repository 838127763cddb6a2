"""Main Textual application for verse-detect."""

import logging
from pathlib import Path
from typing import Optional, Tuple

import requests
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Header

from verse_detect.backend import EditionResolver, VerseCache, VerseFetcher, make_chapter_source
from verse_detect.backend.sources import ChapterLoader
from verse_detect.commands import CommandHandler, get_command_names, parse_command
from verse_detect.config import DISPLAY_MODES, Config, get_config
from verse_detect.data.languages import SUPPORTED_LANGUAGES
from verse_detect.data.types import VerseContent
from verse_detect.detection import VerseDetector
from verse_detect.document import Document, read_document, sample_document
from verse_detect.linking import LinkAnnotator
from verse_detect.popup import Placement, PopupController, PopupTarget
from verse_detect.share import build_share_action
from verse_detect.widgets import CommandInput, ReferenceView, StatusBar, VersePopup

logger = logging.getLogger(__name__)


class ReaderPresenter:
    """Draws the popup controller's state in the reader."""

    def __init__(self, app: "VerseDetectApp") -> None:
        self.app = app

    @property
    def popup(self) -> VersePopup:
        return self.app.query_one("#verse-popup", VersePopup)

    @property
    def view(self) -> ReferenceView:
        return self.app.query_one("#reference-view", ReferenceView)

    def show_loading(self, target: PopupTarget) -> None:
        self.popup.show_loading(target.reference)

    def show_content(self, target: PopupTarget, reference: str, content: VerseContent) -> None:
        self.popup.show_content(reference, content)

    def show_error(self, target: PopupTarget, message: str) -> None:
        self.popup.show_error(target.reference, message)

    def hide(self) -> None:
        self.popup.close()

    def set_expanded(self, target: PopupTarget, expanded: bool) -> None:
        self.view.set_expanded(target.key, expanded)

    def focus_target(self, target: PopupTarget) -> None:
        self.view.focus_reference(target.key)

    def popup_size(self) -> Tuple[float, float]:
        return self.popup.estimated_size()

    def viewport(self) -> Tuple[float, float, float]:
        # Screen coordinates; the status bar takes the last row
        return (self.app.size.width, self.app.size.height - 1, 0)

    def move_to(self, placement: Placement) -> None:
        self.popup.move_to(int(placement.left), int(placement.top))


class VerseDetectApp(App):
    """Terminal reader that previews the scripture references in a document."""

    TITLE = "Verse Detect"
    CSS_PATH = Path(__file__).parent / "styles" / "app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=False),
        Binding("o", "open_reference", "Open reference", show=False),
        Binding("j", "scroll_down", "Scroll down", show=False),
        Binding("k", "scroll_up", "Scroll up", show=False),
    ]

    def __init__(
        self,
        document_path: Optional[str] = None,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
        chapter_loader: Optional[ChapterLoader] = None,
    ) -> None:
        super().__init__()

        self.config = config or get_config()
        self._session = session or requests.Session()
        self._in_command_mode = False

        self.document = self._read(document_path) if document_path else sample_document()

        # Backend
        self.resolver = EditionResolver(
            self.config.content_source,
            default_text_id=self.config.default_text_id,
            primary_language=self.config.language.primary,
            session=self._session,
        )
        integration = self.config.app_integration
        source = make_chapter_source(
            self.config.content_source,
            app_loader=chapter_loader if integration.use_app_text_loader else None,
            session=self._session,
        )
        popup_config = self.config.popup
        self.fetcher = VerseFetcher(
            self.resolver,
            source,
            cache=VerseCache(popup_config.cache_capacity, popup_config.cache_ttl),
            cache_content=popup_config.cache_content,
            show_verse_numbers=popup_config.show_verse_numbers,
        )

        self.detector = self._build_detector(self.document)
        self.annotator = LinkAnnotator(self.detector, self.resolver, self.config)

        # Initialized after mount
        self.controller: Optional[PopupController] = None
        self._command_handler: Optional[CommandHandler] = None

    def _read(self, path: str) -> Document:
        return read_document(path, self.config.detection.exclude_selectors)

    def _build_detector(self, document: Document) -> VerseDetector:
        """Create a detector for a document's languages."""
        language_config = self.config.language
        additional = language_config.additional or list(document.languages)
        html = document.html if language_config.auto_detect else None
        return VerseDetector(
            language_config.primary,
            additional,
            document_html=html,
            include_english=language_config.always_include_english,
        )

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Header()
        with VerticalScroll(id="document-scroll"):
            yield ReferenceView(id="reference-view")
        yield VersePopup(self.config.popup, id="verse-popup")
        yield CommandInput(
            commands=get_command_names(),
            arguments={
                "lang": ["all", *SUPPORTED_LANGUAGES],
                "mode": list(DISPLAY_MODES),
                "edition": list(SUPPORTED_LANGUAGES),
            },
            id="command-input",
        )
        yield StatusBar(id="status-bar")

    def on_mount(self) -> None:
        """Initialize the app after mounting."""
        self._command_handler = CommandHandler(self)
        self.controller = PopupController(
            self.config,
            self.fetcher,
            ReaderPresenter(self),
            schedule=lambda delay, callback: self.set_timer(delay, callback),
            spawn=lambda coro: self.run_worker(coro, exclusive=False),
            navigate=self._navigate if self.config.app_integration.use_app_navigation else None,
            position_margin=1,
            position_chrome=2,
        )

        self.query_one("#command-input").display = False
        self.query_one("#verse-popup").display = False

        status = self.query_one("#status-bar", StatusBar)
        status.set_display_mode(self.config.display_mode)
        view = self.query_one("#reference-view", ReferenceView)
        view.set_styling(self.config.styling.highlight_verses, self.config.styling.underline)

        self._show_document()
        view.focus()

        if self.config.content_source.dynamic_text_selection:
            self.run_worker(self._load_catalog(), exclusive=False)

    async def _load_catalog(self) -> None:
        """Load the texts catalog and mark references without text."""
        await self.resolver.load_catalog()
        self.annotator.set_available_text_languages(self.resolver.text_id_mapping().keys())
        self._show_document()

    # ==================== Document ====================

    def _show_document(self) -> None:
        """Detect references and render the current document."""
        if self.controller is not None:
            self.controller.hide()

        verses = self.detector.detect_verses(self.document.text)
        linked = {
            i for i, verse in enumerate(verses)
            if self.annotator.has_text_for_language(verse.detected_language)
        }
        self.query_one("#reference-view", ReferenceView).set_document(self.document.text, verses, linked)

        status = self.query_one("#status-bar", StatusBar)
        status.set_document(self.document.name, len(verses))
        status.set_languages(self.detector.current_languages)
        logger.info("Found %d references in %s", len(verses), self.document.name)

    def _open_document(self, path: Optional[str]) -> None:
        """Replace the document, keeping the active languages unless auto-detected."""
        try:
            document = self._read(path) if path else sample_document()
        except OSError as exc:
            logger.warning("Could not open %s: %s", path, exc)
            self.query_one("#status-bar", StatusBar).show_message(f"Could not open {path}")
            return

        self.document = document
        self.detector = self._build_detector(document)
        self.annotator.detector = self.detector
        self.sub_title = document.name
        self._show_document()

    def _target(self, index: int) -> PopupTarget:
        view = self.query_one("#reference-view", ReferenceView)
        return PopupTarget.from_detection(index, view.verses[index], view.reference_rect(index))

    def _navigate(self, section_id: str, verse_id: Optional[str], edition: Optional[str]) -> None:
        """Report where following a reference leads."""
        target = f"{section_id}#{verse_id}" if verse_id else section_id
        if edition:
            target = f"{edition}/{target}"
        logger.info("Navigate to %s", target)
        self.query_one("#status-bar", StatusBar).show_message(f"Navigate: {target}")

    # ==================== Reference events ====================

    def on_reference_view_reference_entered(self, message: ReferenceView.ReferenceEntered) -> None:
        """Pointer moved onto a reference."""
        self.controller.mouse_enter(self._target(message.index))

    def on_reference_view_reference_left(self, message: ReferenceView.ReferenceLeft) -> None:
        """Pointer left a reference."""
        self.controller.mouse_leave(self._target(message.index))

    def on_reference_view_reference_clicked(self, message: ReferenceView.ReferenceClicked) -> None:
        """Reference clicked."""
        self.controller.click(self._target(message.index))

    def on_reference_view_reference_key(self, message: ReferenceView.ReferenceKey) -> None:
        """Enter, Space or Escape on the focused reference."""
        target = self._target(message.index) if message.index is not None else None
        self.controller.key(target, message.key)

    def on_reference_view_focus_moved(self, message: ReferenceView.FocusMoved) -> None:
        """Keyboard focus moved to another reference."""
        view = self.query_one("#reference-view", ReferenceView)
        self.query_one("#status-bar", StatusBar).set_focused(view.verses[message.index].original)

    # ==================== Popup events ====================

    def on_verse_popup_popup_entered(self, message: VersePopup.PopupEntered) -> None:
        self.controller.popup_enter()

    def on_verse_popup_popup_left(self, message: VersePopup.PopupLeft) -> None:
        self.controller.popup_leave()

    def on_verse_popup_cross_reference_clicked(self, message: VersePopup.CrossReferenceClicked) -> None:
        """Follow a cross-reference from a footnote."""
        if not self.controller.navigate_reference(message.reference):
            self.query_one("#status-bar", StatusBar).show_message(f"Unknown reference: {message.reference}")

    def on_verse_popup_share_requested(self, message: VersePopup.ShareRequested) -> None:
        """Copy the verse or open a share page."""
        popup = self.query_one("#verse-popup", VersePopup)
        if popup.content is None:
            return

        action = build_share_action(message.platform, popup.reference, popup.content.html, self.config.app_base_url)
        if action.is_copy:
            self.copy_to_clipboard(action.text)
            self.notify("Copied to clipboard")
        elif action.target:
            self.open_url(action.target)

    def on_verse_popup_link_clicked(self, message: VersePopup.LinkClicked) -> None:
        self.open_url(message.url)

    # ==================== Keys & actions ====================

    def on_key(self, event) -> None:
        """Handle key events centrally."""
        if self._in_command_mode:
            return

        if event.character == ":":
            event.stop()
            self._enter_command_mode()

    def action_open_reference(self) -> None:
        """Follow the focused reference."""
        view = self.query_one("#reference-view", ReferenceView)
        if view.focused_index is None:
            return
        if not self.config.navigates:
            self.query_one("#status-bar", StatusBar).show_message("Navigation is off in popup mode")
            return
        self.controller.click(self._target(view.focused_index))

    def action_scroll_down(self) -> None:
        self.query_one("#document-scroll", VerticalScroll).scroll_down()

    def action_scroll_up(self) -> None:
        self.query_one("#document-scroll", VerticalScroll).scroll_up()

    async def action_quit(self) -> None:
        """Cancel popup timers and exit."""
        if self.controller is not None:
            self.controller.destroy()
        self.exit()

    # ==================== Command Mode ====================

    def _enter_command_mode(self) -> None:
        """Enter command mode."""
        if self._in_command_mode:
            return
        self._in_command_mode = True
        if self.controller is not None:
            self.controller.hide()
        self.query_one("#status-bar", StatusBar).display = False
        cmd_input = self.query_one("#command-input", CommandInput)
        cmd_input.display = True
        cmd_input.reset()
        cmd_input.focus()

    def _close_command_mode(self) -> None:
        """Close command mode."""
        self._in_command_mode = False
        self.query_one("#command-input", CommandInput).display = False
        self.query_one("#status-bar", StatusBar).display = True
        self.query_one("#reference-view", ReferenceView).focus()

    def on_command_input_command_submitted(self, event: CommandInput.CommandSubmitted) -> None:
        """Handle submitted command."""
        self._close_command_mode()
        if not event.command:
            return
        result = self._command_handler.execute(parse_command(event.command))
        self._handle_command_result(result)

    def on_command_input_command_cancelled(self, event: CommandInput.CommandCancelled) -> None:
        """Handle cancelled command."""
        self._close_command_mode()

    def _handle_command_result(self, result) -> None:
        """Handle command execution result."""
        status = self.query_one("#status-bar", StatusBar)
        if not result.success:
            status.show_message(result.message)
            return

        action = result.action
        data = result.data or {}

        if action == "quit":
            self.controller.destroy()
            self.exit()
        elif action == "set_languages":
            self.detector.set_languages(data["languages"])
            self._show_document()
            status.show_message(result.message or f"Languages: {', '.join(self.detector.current_languages)}")
        elif action == "set_edition":
            self.resolver.set_preferred_text(data["language"], data["text_ids"])
            self.fetcher.clear_cache()
            if self.resolver.catalog_loaded:
                self.annotator.set_available_text_languages(self.resolver.text_id_mapping().keys())
            self._show_document()
            edition = self.resolver.resolve_edition(data["language"])
            status.show_message(f"{data['language']}: {edition or 'no edition'}")
        elif action == "set_mode":
            self.controller.hide()
            self.config.display_mode = data["mode"]
            status.set_display_mode(data["mode"])
        elif action == "open":
            self._open_document(data.get("path"))
        elif result.message:
            if "\n" in result.message:
                self.notify(result.message, title="Help", timeout=30)
            else:
                status.show_message(result.message)
