"""Tests for verse extraction."""

import pytest

from verse_detect.backend.extractor import extract_verses
from verse_detect.detection.references import parse_reference
from verse_detect.errors import VerseNotFoundError

CHAPTER = """<html><body>
<div class="chapter">
<div class="c">3</div>
<div class="section">
<span class="v" data-id="JN3_15"><span class="v-num">15</span>that whoever believes may have eternal life.</span>
<span class="v" data-id="JN3_16"><span class="v-num">16</span>For God so loved the world,<span class="note"><span class="key">a</span><span class="text">Or <i>only</i> Son</span></span> that he gave his one and only Son.</span>
<span class="v JN3_17"><span class="verse-num">17</span>For God did not send his Son</span>
<p><span class="v JN3_17">into the world to judge the world.</span></p>
<span class="v" data-id="JN3_18"><span class="v-num">18</span>Whoever believes is not judged.<span class="cf">See 5:24</span></span>
</div>
</div>
</body></html>"""


class TestExtractVerses:
    """Test extract_verses."""

    def test_single_verse(self):
        """Single verse is wrapped with its number."""
        content = extract_verses(CHAPTER, parse_reference("John 3:15"))
        assert content.html == (
            '<span class="v-num">15</span>'
            '<span class="v">that whoever believes may have eternal life.</span>'
        )
        assert not content.has_footnotes

    def test_range(self):
        """Every verse of a range is extracted in order."""
        content = extract_verses(CHAPTER, parse_reference("John 3:15-16"))
        assert content.html.index(">15<") < content.html.index(">16<")
        assert "For God so loved the world" in content.html

    def test_footnote(self):
        """Footnotes are collected and replaced by a marker."""
        content = extract_verses(CHAPTER, parse_reference("John 3:16"))
        assert content.has_footnotes
        assert content.footnotes[0].key == "a"
        assert content.footnotes[0].text == "Or <i>only</i> Son"
        assert '<span class="note-marker">a</span>' in content.html
        assert "Or <i>only</i> Son" not in content.html

    def test_footnote_without_key(self):
        """A note without a key is marked with an asterisk."""
        content = extract_verses(CHAPTER, parse_reference("John 3:18"))
        assert content.footnotes[0].key == "*"
        assert content.footnotes[0].text == "See 5:24"
        assert '<span class="note-marker">*</span>' in content.html

    def test_split_verse_joined(self):
        """A verse split over elements addressed by class is joined."""
        content = extract_verses(CHAPTER, parse_reference("John 3:17"))
        assert "For God did not send his Son into the world" in content.html
        assert content.html.count('class="v-num"') == 1

    def test_verse_numbers_stripped(self):
        """Source verse numbers are replaced by a single prefix."""
        content = extract_verses(CHAPTER, parse_reference("John 3:17"), show_verse_numbers=False)
        assert "17" not in content.html
        assert "verse-num" not in content.html

    def test_whole_chapter(self):
        """Chapter reference takes every verse in the section."""
        content = extract_verses(CHAPTER, parse_reference("John 3"))
        assert content.html.count('<span class="v">') == 5
        assert "eternal life" in content.html
        assert "not judged" in content.html
        assert len(content.footnotes) == 2

    def test_missing_verses_skipped(self):
        """Verses absent from the chapter are skipped in a range."""
        content = extract_verses(CHAPTER, parse_reference("John 3:18-20"))
        assert content.html.count('<span class="v">') == 1

    def test_verse_not_found(self):
        """A reference with no matching verse raises."""
        with pytest.raises(VerseNotFoundError) as exc:
            extract_verses(CHAPTER, parse_reference("John 3:40"))
        assert exc.value.fragment_id == "JN3_40"
        assert str(exc.value) == "Verse not found"

    def test_empty_chapter(self):
        """A chapter document with no verses raises."""
        with pytest.raises(VerseNotFoundError):
            extract_verses("<div class='section'></div>", parse_reference("John 3"))
