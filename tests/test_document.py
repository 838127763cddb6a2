"""Tests for documents and the command line helpers."""

from verse_detect.__main__ import build_parser
from verse_detect.detection import VerseDetector
from verse_detect.document import html_to_text, read_document, sample_document
from verse_detect.widgets.command_input import CommandHistory, common_prefix, complete_line
from verse_detect.widgets.verse_popup import html_to_rich

COMMANDS = ["quit", "help", "lang", "edition", "mode", "open"]


class TestDocument:
    """Test document loading."""

    def test_sample(self):
        """Sample holds references in every hinted language."""
        doc = sample_document()
        assert not doc.is_html
        detector = VerseDetector("en", list(doc.languages))
        found = {v.detected_language for v in detector.detect_verses(doc.text)}
        assert {"en", "es", "fr", "de", "pt", "id"} <= found

    def test_html_to_text(self):
        """Markup is flattened into paragraphs."""
        html = (
            "<html><head><title>T</title></head><body>"
            "<p>See John 3:16</p><code>John 1:1</code><p>Two<br>lines</p>"
            "</body></html>"
        )
        assert html_to_text(html, "code") == "See John 3:16\n\nTwo\nlines\n"

    def test_scripts_dropped(self):
        """Scripts and styles never reach the text."""
        text = html_to_text("<script>var x = 'John 3:16';</script><p>Body</p>")
        assert text == "Body\n"

    def test_read_html(self, tmp_path):
        """HTML files use their title and keep the markup."""
        path = tmp_path / "page.html"
        path.write_text("<title>Notes</title><p>Romans 8:28</p>", encoding="utf-8")
        doc = read_document(path)
        assert doc.name == "Notes"
        assert doc.is_html
        assert doc.text == "Romans 8:28\n"

    def test_read_text(self, tmp_path):
        """Text files are read as-is."""
        path = tmp_path / "notes.txt"
        path.write_text("Psalms 23\n", encoding="utf-8")
        doc = read_document(path)
        assert doc.name == "notes.txt"
        assert doc.text == "Psalms 23\n"
        assert not doc.is_html


class TestCompletion:
    """Test command line completion."""

    def test_command(self):
        """Unique prefix completes the command."""
        assert complete_line("la", COMMANDS, {}) == "lang "

    def test_argument(self):
        """Arguments complete against the command's choices."""
        assert complete_line("lang f", COMMANDS, {"lang": ["en", "es", "fr"]}) == "lang fr "

    def test_ambiguous(self):
        """Ambiguous prefixes extend to the shared part only."""
        assert complete_line("lang e", COMMANDS, {"lang": ["en", "es"]}) == "lang e"
        assert complete_line("mode l", COMMANDS, {"mode": ["lang", "language"]}) == "mode lang"

    def test_no_match(self):
        """Unknown words are left alone."""
        assert complete_line("xyz", COMMANDS, {}) == "xyz"

    def test_common_prefix(self):
        """Shared prefix of several words."""
        assert common_prefix(["español", "espera"]) == "esp"
        assert common_prefix([]) == ""


class TestHistory:
    """Test command history browsing."""

    def test_browse(self):
        """Up walks back, down returns to the draft."""
        history = CommandHistory()
        history.add("lang es")
        history.add("mode link")
        assert history.older("ed") == "mode link"
        assert history.older("ed") == "lang es"
        assert history.older("ed") == "lang es"
        assert history.newer() == "mode link"
        assert history.newer() == "ed"
        assert history.newer() is None

    def test_repeats_and_size(self):
        """Repeats collapse and old entries drop off."""
        history = CommandHistory(size=2)
        for line in ("a", "b", "b", "c"):
            history.add(line)
        assert history.entries == ["b", "c"]

    def test_empty(self):
        """Nothing to browse without entries."""
        assert CommandHistory().older("x") is None


class TestPopupText:
    """Test popup markup rendering for the terminal."""

    def test_header_and_verse(self):
        """Header sits on its own line before numbered verses."""
        text = html_to_rich(
            '<div class="verse-popup-header">John 3:16</div>'
            '<div class="verse-popup-content"><span class="v-num">16</span><span class="v">For God</span></div>'
        )
        assert text.plain == "John 3:16\n16 For God"

    def test_cross_reference_meta(self):
        """Cross-references carry their target."""
        text = html_to_rich('<span class="xt" data-id="RM8_28">Rom 8:28</span>')
        assert any(span.style.meta.get("xref") == "RM8_28" for span in text.spans)

    def test_share_buttons(self):
        """Share buttons render as labels with their platform."""
        text = html_to_rich(
            '<div class="verse-popup-social">'
            '<button class="verse-popup-social-btn x" data-platform="x">x</button></div>'
        )
        assert text.plain == "[x]"
        assert any(span.style.meta.get("share") == "x" for span in text.spans)


class TestArguments:
    """Test command line arguments."""

    def test_defaults(self):
        """No arguments opens the sample."""
        args = build_parser().parse_args([])
        assert args.file is None

    def test_options(self):
        """Mode and languages are parsed."""
        args = build_parser().parse_args(["notes.html", "--mode", "popup", "--lang", "es"])
        assert args.file == "notes.html"
        assert args.mode == "popup"
        assert args.lang == "es"
